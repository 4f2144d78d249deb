from datetime import date as date_type
from pydantic import BaseModel, Field
from typing import Optional

from .base import BaseGolfModel


class HolePoints(BaseModel):
    """Gross and net Stableford points for one hole."""
    gross: int = 0
    net: int = 0


class RoundScoreSummary(BaseModel):
    """Derived totals for a round. Never persisted by the scoring engine."""
    holes_scored: int = 0
    gross_strokes: int = 0
    to_par_gross: int = 0
    net_strokes: int = 0
    to_par_net: int = 0
    stableford_gross: int = 0
    stableford_net: int = 0

    front_nine_strokes: int = 0
    front_nine_par: int = 0
    back_nine_strokes: int = 0
    back_nine_par: int = 0

    @property
    def front_nine_to_par(self) -> int:
        return self.front_nine_strokes - self.front_nine_par

    @property
    def back_nine_to_par(self) -> int:
        return self.back_nine_strokes - self.back_nine_par


class RoundHistoryEntry(BaseGolfModel):
    """One posted round as seen by handicap recalculation and analytics."""
    round_id: Optional[str] = None
    date: Optional[date_type] = None
    gross_score: int = Field(..., ge=1)
    holes_played: int = Field(18, ge=1, le=18)

    net_score: Optional[int] = None
    to_par_gross: Optional[int] = None
    to_par_net: Optional[int] = None
    stableford_gross: Optional[int] = None
    stableford_net: Optional[int] = None

    course_id: Optional[str] = None
    course_name: Optional[str] = None

    @property
    def is_nine_holes(self) -> bool:
        return self.holes_played == 9
