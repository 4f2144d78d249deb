from pydantic import Field, field_validator
from typing import Optional

from .base import BaseGolfModel


class HoleRecord(BaseGolfModel):
    """A single played hole as stored on a round.

    Stored JSON uses ``hole`` and ``handicap`` for the hole number and stroke
    index; both the stored keys and the field names are accepted.
    """

    hole_number: int = Field(..., ge=1, alias="hole")
    par: int = Field(..., ge=1)
    strokes: Optional[int] = Field(None, ge=1)
    # 0 is stored when the tee has no stroke index; such holes receive no strokes
    stroke_index: Optional[int] = Field(None, ge=0, alias="handicap")
    putts: Optional[int] = Field(None, ge=0)

    @field_validator('strokes', mode='before')
    @classmethod
    def blank_strokes_to_none(cls, v):
        # Blank holes are saved as 0 by the scorecard form
        if v == 0:
            return None
        return v

    @property
    def is_scored(self) -> bool:
        return self.strokes is not None

    def to_par(self) -> Optional[int]:
        """Calculate score relative to par (+2, -1, etc.)."""
        if self.strokes is None:
            return None
        return self.strokes - self.par

    def get_score_type(self) -> Optional[str]:
        """Get the name for this score (eagle, birdie, par, bogey, etc.)."""
        relative = self.to_par()
        if relative is None:
            return None

        score_names = {
            -2: "eagle",
            -1: "birdie",
            0: "par",
            1: "bogey",
            2: "double bogey",
            3: "triple bogey",
        }
        if relative <= -3:
            return "albatross"
        if relative >= 4:
            return "quadruple bogey+"
        return score_names[relative]
