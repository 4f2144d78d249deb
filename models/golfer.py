from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class Golfer(BaseGolfModel):
    """A golfer profile carrying the current handicap index."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    # Negative values are plus handicaps
    handicap_index: Optional[float] = Field(None, le=54)

    @property
    def display_name(self) -> Optional[str]:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else None
