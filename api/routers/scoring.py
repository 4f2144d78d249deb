"""Scoring API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from api.dependencies import get_db
from api.schemas import (
    HandicapIndexRequest,
    HandicapIndexResponse,
    RoundScoreResponse,
    ScoreRoundRequest,
)
from models import HoleRecord, RoundScoreSummary
from scoring import (
    HoleScoreParseError,
    calculate_handicap_index,
    format_stableford_score,
    format_to_par,
    handicap_strokes_by_hole,
    parse_hole_records,
    stableford_per_hole,
    summarize_round,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def score_round(records: List[HoleRecord], course_handicap: Optional[float]) -> RoundScoreResponse:
    """Run the scoring engine over one round's hole records."""
    summary: RoundScoreSummary = summarize_round(records, course_handicap)
    return RoundScoreResponse(
        summary=summary,
        per_hole=stableford_per_hole(records, course_handicap),
        handicap_strokes=handicap_strokes_by_hole(records, course_handicap),
        stableford_gross_display=format_stableford_score(summary.stableford_gross),
        stableford_net_display=format_stableford_score(summary.stableford_net),
        to_par_gross_display=format_to_par(summary.to_par_gross),
        to_par_net_display=format_to_par(summary.to_par_net),
    )


@router.post("/round", response_model=RoundScoreResponse)
async def score_submitted_round(req: ScoreRoundRequest):
    """Score hole data supplied by the caller. Nothing is stored."""
    try:
        records = parse_hole_records(req.hole_scores)
    except HoleScoreParseError as e:
        raise HTTPException(422, str(e))
    return score_round(records, req.course_handicap)


@router.post("/rounds/{round_id}/rescore", response_model=RoundScoreResponse)
async def rescore_stored_round(
    round_id: int,
    course_handicap: Optional[float] = Query(None),
    db: DatabaseManager = Depends(get_db),
):
    """Recompute and store the derived totals of a saved round."""
    try:
        records = await db.rounds.get_hole_records(round_id)
    except HoleScoreParseError as e:
        logger.error("Round %s has unreadable hole scores: %s", round_id, e)
        raise HTTPException(422, f"Stored hole scores are invalid: {e}")
    if records is None:
        raise HTTPException(404, "Round not found")

    response = score_round(records, course_handicap)
    if response.summary.holes_scored == 0:
        raise HTTPException(422, "Round has no scored holes")
    try:
        await db.rounds.update_round_scores(round_id, response.summary)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    return response


@router.post("/handicap-index", response_model=HandicapIndexResponse)
async def compute_handicap_index(req: HandicapIndexRequest):
    """Handicap index for an arbitrary score history, without storing it."""
    return HandicapIndexResponse(
        handicap_index=calculate_handicap_index(req.scores, req.hole_counts),
        rounds_used=len(req.scores),
    )
