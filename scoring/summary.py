from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Union

from models.hole_record import HoleRecord
from models.round_summary import RoundScoreSummary

from .stableford import (
    gross_stableford,
    handicap_strokes_for_hole,
    net_stableford,
    resolve_hole_handicap,
)

logger = logging.getLogger(__name__)

HandicapValue = Union[int, float, str, None]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _coerce_handicap(handicap: HandicapValue) -> float:
    """Numeric handicap; None or an unparseable string counts as 0."""
    if handicap is None:
        return 0.0
    if isinstance(handicap, (int, float)):
        return float(handicap)
    try:
        return float(handicap)
    except ValueError:
        logger.warning("Unparseable handicap %r, defaulting to 0", handicap)
        return 0.0


def net_score(gross_score: int, handicap: HandicapValue) -> int:
    """Gross score less the full handicap, rounded, never below zero."""
    return max(0, _round_half_up(gross_score - _coerce_handicap(handicap)))


def net_to_par(to_par: int, handicap: HandicapValue) -> int:
    """Gross score-to-par less the handicap. May be negative."""
    return _round_half_up(to_par - _coerce_handicap(handicap))


def format_to_par(to_par: int) -> str:
    if to_par == 0:
        return "E"
    return f"+{to_par}" if to_par > 0 else str(to_par)


def summarize_round(
    scores: Sequence[HoleRecord], course_handicap: Optional[float] = None
) -> RoundScoreSummary:
    """Gross, net and Stableford totals for a round.

    Par totals only include scored holes, so partial rounds compare fairly.
    """
    scored = [s for s in scores if s.strokes is not None]
    front = [s for s in scored if s.hole_number <= 9]
    back = [s for s in scored if s.hole_number > 9]

    gross = sum(s.strokes for s in scored)
    par = sum(s.par for s in scored)
    allowance = 0
    if course_handicap is not None and course_handicap > 0:
        allowance = sum(
            handicap_strokes_for_hole(resolve_hole_handicap(s), course_handicap) for s in scored
        )
    net = gross - allowance

    return RoundScoreSummary(
        holes_scored=len(scored),
        gross_strokes=gross,
        to_par_gross=gross - par,
        net_strokes=net,
        to_par_net=net - par,
        stableford_gross=gross_stableford(scored),
        stableford_net=net_stableford(scored, course_handicap),
        front_nine_strokes=sum(s.strokes for s in front),
        front_nine_par=sum(s.par for s in front),
        back_nine_strokes=sum(s.strokes for s in back),
        back_nine_par=sum(s.par for s in back),
    )
