"""Stats/dashboard API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Any, Dict, List
from uuid import UUID
from database.db_manager import DatabaseManager
from api.dependencies import get_db
from api.schemas import GolferStatsResponse
from analytics.stats import SCORE_MODES, SCORE_TYPES, course_stats, golfer_stats, score_progression

router = APIRouter()


@router.get("/{golfer_id}", response_model=GolferStatsResponse)
async def get_golfer_stats(golfer_id: UUID, db: DatabaseManager = Depends(get_db)):
    golfer = await db.profiles.get_golfer(str(golfer_id))
    if not golfer:
        raise HTTPException(404, "Golfer not found")

    history = await db.rounds.get_round_history(str(golfer_id))
    return GolferStatsResponse(
        golfer_id=str(golfer_id),
        handicap_index=golfer.handicap_index,
        **golfer_stats(history),
    )


@router.get("/{golfer_id}/courses")
async def get_course_stats(
    golfer_id: UUID,
    score_type: str = Query("gross", pattern="^(gross|net)$"),
    db: DatabaseManager = Depends(get_db),
) -> List[Dict[str, Any]]:
    history = await db.rounds.get_round_history(str(golfer_id))
    return course_stats(history, score_type=score_type)


@router.get("/{golfer_id}/progression")
async def get_progression(
    golfer_id: UUID,
    mode: str = Query("stroke"),
    score_type: str = Query("gross"),
    db: DatabaseManager = Depends(get_db),
) -> List[Dict[str, Any]]:
    if mode not in SCORE_MODES or score_type not in SCORE_TYPES:
        raise HTTPException(422, f"mode must be one of {SCORE_MODES}, score_type one of {SCORE_TYPES}")
    history = await db.rounds.get_round_history(str(golfer_id))
    return score_progression(history, mode=mode, score_type=score_type)
