"""Queries against the public.profiles table."""

import asyncpg
from typing import Optional
from uuid import UUID

from models import Golfer
from database.converters import golfer_from_row
from database.exceptions import IntegrityError, NotFoundError


class ProfileRepositoryDB:
    """Async access to golfer profiles."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_golfer(self, golfer_id: str) -> Optional[Golfer]:
        """Get a golfer profile by ID."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM public.profiles WHERE id = $1", UUID(golfer_id)
            )
            return golfer_from_row(row) if row else None

    async def update_handicap(self, golfer_id: str, handicap_index: float) -> None:
        """Store the exact (unrounded) handicap index on the profile."""
        try:
            async with self._pool.acquire() as conn:
                result = await conn.execute(
                    "UPDATE public.profiles SET handicap = $2 WHERE id = $1",
                    UUID(golfer_id), handicap_index,
                )
        except asyncpg.CheckViolationError as e:
            raise IntegrityError(f"Handicap {handicap_index} rejected: {e}") from e
        if result == "UPDATE 0":
            raise NotFoundError(f"Golfer {golfer_id} not found")
