from .stats import (
    course_stats,
    golfer_stats,
    potential_best_score,
    score_progression,
)
from .visualizations import (
    plot_score_progression,
    plot_stableford_per_hole,
)

__all__ = [
    "golfer_stats",
    "course_stats",
    "potential_best_score",
    "score_progression",
    "plot_score_progression",
    "plot_stableford_per_hole",
]
