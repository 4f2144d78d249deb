"""Handicap recalculation endpoints (admin)."""

from fastapi import APIRouter, Depends, HTTPException
from uuid import UUID
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from api.dependencies import get_calculator, get_db
from api.schemas import GolferRecalculationResponse, RecalculationReportResponse
from scoring import (
    GolferRecalculation,
    HandicapIndexCalculator,
    recalculate_all_handicaps,
    recalculate_golfer_handicap,
)

router = APIRouter()


def _to_response(result: GolferRecalculation) -> GolferRecalculationResponse:
    return GolferRecalculationResponse(
        golfer_id=result.golfer_id,
        succeeded=result.succeeded,
        handicap_index=result.handicap_index,
        rounds_used=result.rounds_used,
        error=result.error,
    )


@router.post("/recalculate", response_model=RecalculationReportResponse)
async def recalculate_all(
    db: DatabaseManager = Depends(get_db),
    calculator: HandicapIndexCalculator = Depends(get_calculator),
):
    """Recalculate every golfer's handicap. Per-golfer failures are reported, not raised."""
    report = await recalculate_all_handicaps(db, calculator)
    return RecalculationReportResponse(
        updated_count=report.updated_count,
        failed_count=report.failed_count,
        results=[_to_response(r) for r in report.results],
    )


@router.post("/{golfer_id}/recalculate", response_model=GolferRecalculationResponse)
async def recalculate_one(
    golfer_id: UUID,
    db: DatabaseManager = Depends(get_db),
    calculator: HandicapIndexCalculator = Depends(get_calculator),
):
    """Recalculate one golfer's handicap, e.g. after a round was edited."""
    result = await recalculate_golfer_handicap(db, calculator, str(golfer_id))
    if isinstance(result.exception, NotFoundError):
        raise HTTPException(404, "Golfer not found")
    if not result.succeeded:
        raise HTTPException(500, f"Handicap update failed: {result.error}")
    return _to_response(result)
