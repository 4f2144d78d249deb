"""Stableford scoring and handicap-stroke allocation.

Standard Stableford points, keyed by strokes relative to par:

- albatross or better (3+ under): 5
- eagle (2 under): 4
- birdie (1 under): 3
- par: 2
- bogey (1 over): 1
- double bogey or worse: 0

Net points subtract the handicap strokes a hole receives before looking up
the table. Strokes are given to the hardest holes first, by stroke index.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from models.hole_record import HoleRecord
from models.round_summary import HolePoints

logger = logging.getLogger(__name__)

HOLES_PER_PASS = 18

_POINTS_BY_TO_PAR = {
    -2: 4,
    -1: 3,
    0: 2,
    1: 1,
}


def hole_stableford(strokes: int, par: int) -> int:
    """Gross Stableford points for a single hole."""
    to_par = strokes - par
    if to_par <= -3:
        return 5
    if to_par >= 2:
        return 0
    return _POINTS_BY_TO_PAR[to_par]


def net_hole_stableford(strokes: int, par: int, handicap_strokes: int) -> int:
    """Stableford points for a hole after deducting handicap strokes."""
    return hole_stableford(strokes - handicap_strokes, par)


def handicap_strokes_for_hole(hole_handicap: int, course_handicap: float) -> int:
    """
    Handicap strokes received on a hole with the given stroke index.

    Every hole with ``hole_handicap <= course_handicap`` receives one stroke.
    Above 18, the hardest ``course_handicap - 18`` holes receive a second one.
    There is no third pass, so course handicaps above 36 are under-allocated.
    """
    if course_handicap <= 0 or hole_handicap <= 0:
        return 0

    strokes = 1 if hole_handicap <= course_handicap else 0

    if course_handicap > HOLES_PER_PASS:
        extra_strokes = course_handicap - HOLES_PER_PASS
        if hole_handicap <= extra_strokes:
            strokes += 1

    return strokes


def resolve_hole_handicap(record: HoleRecord) -> int:
    """Stroke index of a hole, falling back to its hole number when missing.

    A stored index of 0 is kept as is, so the hole receives no strokes.
    """
    if record.stroke_index is None:
        logger.warning(
            "Hole %s missing stroke index, using hole number as default",
            record.hole_number,
        )
        return record.hole_number
    if record.stroke_index == 0:
        logger.warning("Hole %s has stroke index 0, no handicap strokes given", record.hole_number)
    return record.stroke_index


def _has_course_handicap(course_handicap: Optional[float]) -> bool:
    return course_handicap is not None and course_handicap > 0


def _scored(scores: Iterable[HoleRecord]) -> List[HoleRecord]:
    return [s for s in scores if s.strokes is not None]


def gross_stableford(scores: Iterable[HoleRecord]) -> int:
    """Total gross Stableford points. Unscored holes contribute nothing."""
    return sum(hole_stableford(s.strokes, s.par) for s in _scored(scores))


def net_stableford(scores: Iterable[HoleRecord], course_handicap: Optional[float]) -> int:
    """Total net Stableford points for a round.

    Without a positive course handicap the net total equals the gross total.
    """
    if not _has_course_handicap(course_handicap):
        logger.debug("No course handicap, using gross Stableford")
        return gross_stableford(scores)

    logger.debug("Calculating net Stableford with course handicap %s", course_handicap)

    total = 0
    for score in _scored(scores):
        hole_handicap = resolve_hole_handicap(score)
        handicap_strokes = handicap_strokes_for_hole(hole_handicap, course_handicap)
        points = net_hole_stableford(score.strokes, score.par, handicap_strokes)
        logger.debug(
            "Hole %s: strokes=%s par=%s hole_handicap=%s handicap_strokes=%s net_points=%s",
            score.hole_number, score.strokes, score.par,
            hole_handicap, handicap_strokes, points,
        )
        total += points
    return total


def handicap_strokes_by_hole(
    scores: Iterable[HoleRecord], course_handicap: Optional[float]
) -> Dict[int, int]:
    """Map hole number -> handicap strokes received, for every hole given."""
    if not _has_course_handicap(course_handicap):
        return {s.hole_number: 0 for s in scores}
    return {
        s.hole_number: handicap_strokes_for_hole(resolve_hole_handicap(s), course_handicap)
        for s in scores
    }


def stableford_per_hole(
    scores: Sequence[HoleRecord], course_handicap: Optional[float] = None
) -> List[HolePoints]:
    """Gross and net points per hole, in input order, for display."""
    apply_handicap = _has_course_handicap(course_handicap)
    results: List[HolePoints] = []
    for score in scores:
        if score.strokes is None:
            results.append(HolePoints(gross=0, net=0))
            continue

        gross = hole_stableford(score.strokes, score.par)
        net = gross
        if apply_handicap:
            handicap_strokes = handicap_strokes_for_hole(
                resolve_hole_handicap(score), course_handicap
            )
            net = net_hole_stableford(score.strokes, score.par, handicap_strokes)
        results.append(HolePoints(gross=gross, net=net))
    return results


def format_stableford_score(points: int) -> str:
    return f"{points} pts"
