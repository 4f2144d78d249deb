from .base import BaseGolfModel
from .golfer import Golfer
from .hole_record import HoleRecord
from .round_summary import HolePoints, RoundHistoryEntry, RoundScoreSummary

__all__ = [
    "BaseGolfModel",
    "Golfer",
    "HoleRecord",
    "HolePoints",
    "RoundHistoryEntry",
    "RoundScoreSummary",
]
