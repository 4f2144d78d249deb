"""Queries against public.rounds: round history and stored hole scores."""

import asyncpg
from typing import List, Optional
from uuid import UUID

from models import HoleRecord, RoundHistoryEntry, RoundScoreSummary
from database.converters import hole_records_from_row, round_history_from_row, round_scores_to_row
from database.exceptions import IntegrityError, NotFoundError


class RoundRepositoryDB:
    """Async access to posted rounds."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def golfer_ids_with_rounds(self) -> List[str]:
        """Ids of every golfer with at least one round."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                "SELECT DISTINCT user_id FROM public.rounds ORDER BY user_id"
            )
            return [str(r["user_id"]) for r in rows]

    async def get_round_history(
        self, golfer_id: str, *, limit: Optional[int] = None
    ) -> List[RoundHistoryEntry]:
        """A golfer's rounds ordered by date DESC. No limit means full history."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT r.*, c.name AS course_name
                   FROM public.rounds r
                   LEFT JOIN public.courses c ON c.id = r.course_id
                   WHERE r.user_id = $1
                   ORDER BY r.date DESC NULLS LAST
                   LIMIT $2""",
                UUID(golfer_id), limit,
            )
            return [round_history_from_row(r) for r in rows]

    async def get_hole_records(self, round_id: int) -> Optional[List[HoleRecord]]:
        """Decoded hole scores for a round, or None if the round does not exist.

        Raises HoleScoreParseError when the stored JSON is malformed.
        """
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT hole_scores FROM public.rounds WHERE id = $1", round_id
            )
            if not row:
                return None
            return hole_records_from_row(row)

    # ================================================================
    # Update
    # ================================================================

    async def update_round_scores(self, round_id: int, summary: RoundScoreSummary) -> None:
        """Store derived gross/net/Stableford totals on a round."""
        data = round_scores_to_row(summary)
        set_clause = ", ".join(f"{k} = ${i+2}" for i, k in enumerate(data))
        try:
            async with self._pool.acquire() as conn:
                result = await conn.execute(
                    f"UPDATE public.rounds SET {set_clause} WHERE id = $1",
                    round_id, *data.values(),
                )
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(str(e)) from e
        if result == "UPDATE 0":
            raise NotFoundError(f"Round {round_id} not found")
