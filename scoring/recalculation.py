"""Bulk and single-golfer handicap recalculation.

Each golfer is processed independently: a failure to fetch, compute, or
persist one golfer's handicap is logged and recorded, and the batch moves on.
Partial completion is a normal outcome, visible through the report counts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from models.round_summary import RoundHistoryEntry

from .handicap_index import HandicapIndexCalculator

logger = logging.getLogger(__name__)


class RoundRepository(Protocol):
    """Interface for the round history and profile lookups recalculation needs.

    Any class with matching async method signatures satisfies this protocol.
    """

    async def golfer_ids_with_rounds(self) -> List[str]:
        """Ids of every golfer with at least one posted round."""
        ...

    async def get_round_history(self, golfer_id: str) -> List[RoundHistoryEntry]:
        """Every posted round for the golfer, newest first."""
        ...

    async def update_handicap(self, golfer_id: str, handicap_index: float) -> None:
        """Persist the new index. Raises NotFoundError for an unknown golfer."""
        ...


@dataclass
class GolferRecalculation:
    """Outcome of recalculating one golfer's handicap."""
    golfer_id: str
    handicap_index: Optional[float] = None
    rounds_used: int = 0
    error: Optional[str] = None
    exception: Optional[Exception] = field(default=None, repr=False, compare=False)

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class RecalculationReport:
    results: List[GolferRecalculation] = field(default_factory=list)

    @property
    def updated(self) -> List[GolferRecalculation]:
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> List[GolferRecalculation]:
        return [r for r in self.results if not r.succeeded]

    @property
    def updated_count(self) -> int:
        return len(self.updated)

    @property
    def failed_count(self) -> int:
        return len(self.failed)


async def recalculate_golfer_handicap(
    repository: RoundRepository,
    calculator: HandicapIndexCalculator,
    golfer_id: str,
) -> GolferRecalculation:
    """Fully recompute and store one golfer's handicap from their history."""
    try:
        history = await repository.get_round_history(golfer_id)
        scores = [entry.gross_score for entry in history]
        hole_counts = [entry.holes_played or 18 for entry in history]
        handicap_index = calculator.calculate(scores, hole_counts)
        await repository.update_handicap(golfer_id, handicap_index)
    except Exception as e:
        logger.exception("Error recalculating handicap for golfer %s", golfer_id)
        return GolferRecalculation(golfer_id=golfer_id, error=str(e) or type(e).__name__, exception=e)

    logger.info(
        "Updated handicap for golfer %s: %.4f from %d rounds",
        golfer_id, handicap_index, len(scores),
    )
    return GolferRecalculation(
        golfer_id=golfer_id,
        handicap_index=handicap_index,
        rounds_used=len(scores),
    )


async def recalculate_all_handicaps(
    repository: RoundRepository,
    calculator: HandicapIndexCalculator,
) -> RecalculationReport:
    """Recompute the handicap of every golfer who has posted a round.

    Errors listing golfers propagate; per-golfer errors never do.
    """
    golfer_ids = await repository.golfer_ids_with_rounds()
    logger.info("Recalculating handicaps for %d golfers", len(golfer_ids))

    report = RecalculationReport()
    for golfer_id in golfer_ids:
        result = await recalculate_golfer_handicap(repository, calculator, golfer_id)
        report.results.append(result)

    logger.info(
        "Handicap recalculation complete: %d updated, %d failed",
        report.updated_count, report.failed_count,
    )
    return report
