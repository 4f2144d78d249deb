from __future__ import annotations

from typing import List

import asyncpg

from models import RoundHistoryEntry
from database.repositories import ProfileRepositoryDB, RoundRepositoryDB


class DatabaseManager:
    """
    Groups the repositories behind one object for the API layer.

    Also satisfies the scoring RoundRepository protocol, so it can be handed
    straight to the handicap recalculation driver.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self.rounds = RoundRepositoryDB(pool)
        self.profiles = ProfileRepositoryDB(pool)

    async def golfer_ids_with_rounds(self) -> List[str]:
        return await self.rounds.golfer_ids_with_rounds()

    async def get_round_history(self, golfer_id: str) -> List[RoundHistoryEntry]:
        return await self.rounds.get_round_history(golfer_id)

    async def update_handicap(self, golfer_id: str, handicap_index: float) -> None:
        await self.profiles.update_handicap(golfer_id, handicap_index)
