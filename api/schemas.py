"""API-specific request and response models."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union

from models import HolePoints, RoundScoreSummary


class ScoreRoundRequest(BaseModel):
    """Hole scores as stored (JSON text or decoded array) plus the course handicap."""
    hole_scores: Union[str, List[Any]]
    course_handicap: Optional[float] = None


class RoundScoreResponse(BaseModel):
    summary: RoundScoreSummary
    per_hole: List[HolePoints]
    handicap_strokes: Dict[int, int]
    stableford_gross_display: str
    stableford_net_display: str
    to_par_gross_display: str
    to_par_net_display: str


class HandicapIndexRequest(BaseModel):
    scores: List[int] = Field(default_factory=list)
    hole_counts: List[int] = Field(default_factory=list)


class HandicapIndexResponse(BaseModel):
    handicap_index: float
    rounds_used: int


class GolferRecalculationResponse(BaseModel):
    golfer_id: str
    succeeded: bool
    handicap_index: Optional[float] = None
    rounds_used: int = 0
    error: Optional[str] = None


class RecalculationReportResponse(BaseModel):
    """Bulk recalculation outcome. Partial success is reported, not raised."""
    updated_count: int
    failed_count: int
    results: List[GolferRecalculationResponse]


class GolferStatsResponse(BaseModel):
    """Aggregated stats for the dashboard page."""
    golfer_id: str
    handicap_index: Optional[float] = None
    total_rounds: int
    best_gross_score: int
    best_net_score: Optional[int] = None
    best_to_par: int
    best_to_par_net: Optional[int] = None
    average_score: float
    best_stableford_gross: Optional[int] = None
    best_stableford_net: Optional[int] = None
    rounds_needed_for_handicap: int
