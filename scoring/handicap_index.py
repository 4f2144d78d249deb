"""Handicap index aggregation.

A simplified World Handicap System: 9-hole rounds are converted to an
18-hole equivalent, the best N scores are averaged, and the average is
compared against a par-72 course with the 0.96 bonus-for-excellence factor.
Course and slope ratings are not used.
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

logger = logging.getLogger(__name__)

MAX_HANDICAP_INDEX = 54.0
REFERENCE_PAR = 72
EXCELLENCE_FACTOR = 0.96

# (minimum rounds, scores used), checked top-down
SCORES_TO_USE = [
    (20, 8),
    (15, 6),
    (10, 4),
    (5, 3),
]


class HandicapIndexCalculator(Protocol):
    """Interface for turning a round history into a handicap index.

    Implementations must be pure: the same inputs always give the same index.
    """

    def calculate(self, scores: Sequence[int], hole_counts: Sequence[int] = ()) -> float:
        ...


def eighteen_hole_equivalent(score: int, hole_count: int) -> int:
    """Double a 9-hole score and add one stroke; other scores are unchanged."""
    if hole_count == 9:
        return score * 2 + 1
    return score


def adjusted_scores(scores: Sequence[int], hole_counts: Sequence[int] = ()) -> List[int]:
    """18-hole equivalents. A missing or zero hole count means 18 holes."""
    adjusted = []
    for index, score in enumerate(scores):
        hole_count = hole_counts[index] if index < len(hole_counts) else 0
        adjusted.append(eighteen_hole_equivalent(score, hole_count or 18))
    return adjusted


def scores_to_use(round_count: int) -> int:
    """How many of the best scores count towards the index."""
    for minimum, used in SCORES_TO_USE:
        if round_count >= minimum:
            return used
    return 1


def calculate_handicap_index(scores: Sequence[int], hole_counts: Sequence[int] = ()) -> float:
    """
    Handicap index from a golfer's full history of gross scores.

    Args:
        scores: Gross score per round, any order.
        hole_counts: Holes played per round (9 or 18), aligned with scores.

    Returns:
        The index, capped at 54 and unrounded. Negative values are plus
        handicaps. An empty history gives 0.0.
    """
    if not scores:
        return 0.0

    adjusted = adjusted_scores(scores, hole_counts)
    used = scores_to_use(len(scores))
    best = sorted(adjusted)[:used]
    average = sum(best) / len(best)
    raw = (average - REFERENCE_PAR) * EXCELLENCE_FACTOR
    index = min(MAX_HANDICAP_INDEX, raw)

    logger.debug(
        "Handicap index from %d rounds: best %d %s, average %.2f, index %.4f",
        len(scores), used, best, average, index,
    )
    return index


class WhsHandicapCalculator:
    """Default in-process calculator using :func:`calculate_handicap_index`."""

    def calculate(self, scores: Sequence[int], hole_counts: Sequence[int] = ()) -> float:
        return calculate_handicap_index(scores, hole_counts)
