"""Conversion between asyncpg database rows and Pydantic domain models.

Centralizes all mapping logic between the rounds/profiles tables
and the scoring models.
"""

from datetime import datetime
from typing import List, Optional

from models import Golfer, HoleRecord, RoundHistoryEntry, RoundScoreSummary
from scoring.parsing import parse_hole_records


# ================================================================
# Row -> Model (reads)
# ================================================================

def _optional_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def round_history_from_row(row) -> RoundHistoryEntry:
    """public.rounds row -> RoundHistoryEntry."""
    round_date = row["date"]
    if isinstance(round_date, datetime):
        round_date = round_date.date()
    return RoundHistoryEntry(
        round_id=_optional_str(row["id"]),
        date=round_date,
        gross_score=row["gross_score"],
        holes_played=row["holes_played"] or 18,
        net_score=row["net_score"],
        to_par_gross=row["to_par_gross"],
        to_par_net=row["to_par_net"],
        stableford_gross=row["stableford_gross"],
        stableford_net=row["stableford_net"],
        course_id=_optional_str(row["course_id"]),
        # Only present when the query joins courses
        course_name=row.get("course_name"),
    )


def hole_records_from_row(row) -> List[HoleRecord]:
    """Decode the JSON hole_scores column. Raises HoleScoreParseError when malformed."""
    return parse_hole_records(row["hole_scores"])


def golfer_from_row(row) -> Golfer:
    """public.profiles row -> Golfer."""
    handicap = row["handicap"]
    return Golfer(
        id=str(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        handicap_index=float(handicap) if handicap is not None else None,
    )


# ================================================================
# Model -> Row dict (writes)
# ================================================================

def round_scores_to_row(summary: RoundScoreSummary) -> dict:
    """RoundScoreSummary -> dict of derived columns on public.rounds.

    holes_played is left alone: it is the length of the round, not the
    number of holes entered so far.
    """
    return {
        "gross_score": summary.gross_strokes,
        "net_score": summary.net_strokes,
        "to_par_gross": summary.to_par_gross,
        "to_par_net": summary.to_par_net,
        "stableford_gross": summary.stableford_gross,
        "stableford_net": summary.stableford_net,
    }
