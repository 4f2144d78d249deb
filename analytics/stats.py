from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from models.hole_record import HoleRecord
from models.round_summary import RoundHistoryEntry

ROUNDS_NEEDED_FOR_HANDICAP = 5

SCORE_MODES = ("stroke", "stableford")
SCORE_TYPES = ("gross", "net")


def _min_or_none(values: List[int]) -> Optional[int]:
    return min(values) if values else None


def golfer_stats(rounds: Sequence[RoundHistoryEntry]) -> Dict[str, Any]:
    """Headline numbers for a golfer's dashboard."""
    if not rounds:
        return {
            "total_rounds": 0,
            "best_gross_score": 0,
            "best_net_score": None,
            "best_to_par": 0,
            "best_to_par_net": None,
            "average_score": 0.0,
            "best_stableford_gross": None,
            "best_stableford_net": None,
            "rounds_needed_for_handicap": ROUNDS_NEEDED_FOR_HANDICAP,
        }

    gross = [r.gross_score for r in rounds]
    to_par = [r.to_par_gross for r in rounds if r.to_par_gross is not None]
    with_net = [r for r in rounds if r.net_score is not None and r.to_par_net is not None]
    stableford_gross = [r.stableford_gross for r in rounds if r.stableford_gross is not None]
    stableford_net = [r.stableford_net for r in rounds if r.stableford_net is not None]

    return {
        "total_rounds": len(rounds),
        "best_gross_score": min(gross),
        "best_net_score": _min_or_none([r.net_score for r in with_net]),
        "best_to_par": min(to_par) if to_par else 0,
        "best_to_par_net": _min_or_none([r.to_par_net for r in with_net]),
        "average_score": sum(gross) / len(gross),
        # Higher is better for Stableford
        "best_stableford_gross": max(stableford_gross) if stableford_gross else None,
        "best_stableford_net": max(stableford_net) if stableford_net else None,
        "rounds_needed_for_handicap": max(0, ROUNDS_NEEDED_FOR_HANDICAP - len(rounds)),
    }


def course_stats(
    rounds: Iterable[RoundHistoryEntry], score_type: str = "gross"
) -> List[Dict[str, Any]]:
    """
    Per-course performance, one row per course played.

    Rounds without a course id are skipped. With score_type="net", only
    rounds that carry a net score count towards best/average.
    """
    if score_type not in SCORE_TYPES:
        raise ValueError(f"score_type must be one of {SCORE_TYPES}, got {score_type!r}")

    by_course: Dict[str, List[RoundHistoryEntry]] = {}
    for round_obj in rounds:
        if round_obj.course_id is None:
            continue
        by_course.setdefault(round_obj.course_id, []).append(round_obj)

    results: List[Dict[str, Any]] = []
    for course_id, course_rounds in by_course.items():
        if score_type == "gross":
            scores = [r.gross_score for r in course_rounds]
            to_par = [r.to_par_gross for r in course_rounds if r.to_par_gross is not None]
        else:
            scores = [r.net_score for r in course_rounds if r.net_score is not None]
            to_par = [r.to_par_net for r in course_rounds if r.to_par_net is not None]

        results.append(
            {
                "course_id": course_id,
                "course_name": course_rounds[0].course_name or "Unknown Course",
                "rounds_played": len(course_rounds),
                "best_score": min(scores) if scores else 0,
                "best_to_par": min(to_par) if to_par else 0,
                "average_score": sum(scores) / len(scores) if scores else 0.0,
            }
        )
    return results


def potential_best_score(rounds: Iterable[Sequence[HoleRecord]]) -> Optional[Dict[str, Any]]:
    """
    Best score on each hole across rounds at one course, summed.

    Input is the hole records of each round. Returns None for no rounds.
    """
    rounds = list(rounds)
    if not rounds:
        return None

    by_hole: Dict[int, Dict[str, Any]] = {}
    for hole_records in rounds:
        for record in hole_records:
            entry = by_hole.setdefault(record.hole_number, {"par": record.par, "scores": []})
            if record.strokes is not None:
                entry["scores"].append(record.strokes)

    hole_scores = [
        {
            "hole": hole,
            "par": data["par"],
            "best_score": min(data["scores"]) if data["scores"] else 0,
            "rounds": len(data["scores"]),
        }
        for hole, data in sorted(by_hole.items())
    ]
    front = [h for h in hole_scores if h["hole"] <= 9]
    back = [h for h in hole_scores if h["hole"] > 9]

    return {
        "hole_scores": hole_scores,
        "total_par": sum(h["par"] for h in hole_scores),
        "total_best_score": sum(h["best_score"] for h in hole_scores),
        "front_nine_par": sum(h["par"] for h in front),
        "front_nine_best_score": sum(h["best_score"] for h in front),
        "back_nine_par": sum(h["par"] for h in back),
        "back_nine_best_score": sum(h["best_score"] for h in back),
    }


def score_progression(
    rounds: Sequence[RoundHistoryEntry],
    mode: str = "stroke",
    score_type: str = "gross",
) -> List[Dict[str, Any]]:
    """
    Chart rows for a golfer's rounds in chronological order.

    Stroke mode gives score and to-par; Stableford mode gives points. Missing
    net or Stableford values are reported as None rather than estimated.
    """
    if mode not in SCORE_MODES:
        raise ValueError(f"mode must be one of {SCORE_MODES}, got {mode!r}")
    if score_type not in SCORE_TYPES:
        raise ValueError(f"score_type must be one of {SCORE_TYPES}, got {score_type!r}")

    ordered = sorted(
        enumerate(rounds), key=lambda pair: (pair[1].date is None, pair[1].date, pair[0])
    )

    results: List[Dict[str, Any]] = []
    for index, (_, round_obj) in enumerate(ordered, start=1):
        row: Dict[str, Any] = {
            "round_index": index,
            "round_id": round_obj.round_id,
            "date": round_obj.date,
        }
        if mode == "stableford":
            row["points"] = (
                round_obj.stableford_gross if score_type == "gross" else round_obj.stableford_net
            )
        elif score_type == "gross":
            row["score"] = round_obj.gross_score
            row["to_par"] = round_obj.to_par_gross
        else:
            row["score"] = round_obj.net_score
            row["to_par"] = round_obj.to_par_net
        results.append(row)
    return results
