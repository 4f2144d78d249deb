from .exceptions import HoleScoreParseError, ScoringError
from .handicap_index import (
    HandicapIndexCalculator,
    WhsHandicapCalculator,
    calculate_handicap_index,
)
from .parsing import parse_hole_records
from .recalculation import (
    GolferRecalculation,
    RecalculationReport,
    RoundRepository,
    recalculate_all_handicaps,
    recalculate_golfer_handicap,
)
from .stableford import (
    format_stableford_score,
    gross_stableford,
    handicap_strokes_by_hole,
    handicap_strokes_for_hole,
    hole_stableford,
    net_hole_stableford,
    net_stableford,
    resolve_hole_handicap,
    stableford_per_hole,
)
from .summary import format_to_par, net_score, net_to_par, summarize_round

__all__ = [
    "ScoringError",
    "HoleScoreParseError",
    "HandicapIndexCalculator",
    "WhsHandicapCalculator",
    "calculate_handicap_index",
    "parse_hole_records",
    "GolferRecalculation",
    "RecalculationReport",
    "RoundRepository",
    "recalculate_all_handicaps",
    "recalculate_golfer_handicap",
    "hole_stableford",
    "net_hole_stableford",
    "gross_stableford",
    "net_stableford",
    "handicap_strokes_for_hole",
    "handicap_strokes_by_hole",
    "resolve_hole_handicap",
    "stableford_per_hole",
    "format_stableford_score",
    "summarize_round",
    "net_score",
    "net_to_par",
    "format_to_par",
]
