import json
from datetime import date, datetime
from uuid import UUID, uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from database.converters import (
    golfer_from_row,
    hole_records_from_row,
    round_history_from_row,
    round_scores_to_row,
)
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from database.repositories.profile_repo import ProfileRepositoryDB
from database.repositories.round_repo import RoundRepositoryDB
from models import RoundScoreSummary
from scoring.exceptions import HoleScoreParseError


# ================================================================
# Fixtures
# ================================================================

@pytest.fixture
def mock_pool():
    pool = MagicMock()
    conn = AsyncMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    return pool, conn


def _round_row(round_id=1, *, gross_score=82, holes_played=18, course_id=None, **extra):
    """Helper: minimal public.rounds row dict."""
    row = {
        "id": round_id,
        "user_id": uuid4(),
        "course_id": course_id,
        "date": date(2026, 5, 4),
        "gross_score": gross_score,
        "holes_played": holes_played,
        "net_score": None,
        "to_par_gross": None,
        "to_par_net": None,
        "stableford_gross": None,
        "stableford_net": None,
    }
    row.update(extra)
    return row


def _profile_row(golfer_id, *, handicap=None):
    return {
        "id": golfer_id,
        "first_name": "Alex",
        "last_name": "Moore",
        "email": "alex@example.com",
        "handicap": handicap,
    }


# ================================================================
# Converter tests
# ================================================================

def test_round_history_from_row():
    course_id = uuid4()
    row = _round_row(
        7, course_id=course_id, net_score=71, to_par_net=-1,
        stableford_net=37, course_name="Harbour Links",
    )
    entry = round_history_from_row(row)

    assert entry.round_id == "7"
    assert entry.gross_score == 82
    assert entry.net_score == 71
    assert entry.course_id == str(course_id)
    assert entry.course_name == "Harbour Links"


def test_round_history_from_row_defaults():
    row = _round_row(holes_played=None, date=datetime(2026, 5, 4, 9, 30))
    entry = round_history_from_row(row)

    assert entry.holes_played == 18
    assert entry.date == date(2026, 5, 4)
    assert entry.course_id is None
    assert entry.course_name is None


def test_hole_records_from_row():
    row = {"hole_scores": json.dumps([{"hole": 1, "par": 4, "strokes": 5, "handicap": 3}])}
    records = hole_records_from_row(row)
    assert records[0].stroke_index == 3

    with pytest.raises(HoleScoreParseError):
        hole_records_from_row({"hole_scores": "{broken"})


def test_golfer_from_row():
    golfer_id = uuid4()
    golfer = golfer_from_row(_profile_row(golfer_id, handicap=12.48))
    assert golfer.id == str(golfer_id)
    assert golfer.handicap_index == 12.48

    assert golfer_from_row(_profile_row(golfer_id)).handicap_index is None


def test_round_scores_to_row():
    summary = RoundScoreSummary(
        holes_scored=9, gross_strokes=41, to_par_gross=5, net_strokes=36,
        to_par_net=0, stableford_gross=13, stableford_net=18,
    )
    assert round_scores_to_row(summary) == {
        "gross_score": 41,
        "net_score": 36,
        "to_par_gross": 5,
        "to_par_net": 0,
        "stableford_gross": 13,
        "stableford_net": 18,
    }


def test_round_scores_to_row_keeps_round_length():
    # Nine holes entered on an 18-hole round must not turn it into a 9-hole round.
    row = round_scores_to_row(RoundScoreSummary(holes_scored=9, gross_strokes=41))
    assert "holes_played" not in row


# ================================================================
# RoundRepositoryDB tests
# ================================================================

@pytest.mark.asyncio
async def test_golfer_ids_with_rounds(mock_pool):
    pool, conn = mock_pool
    ids = [uuid4(), uuid4()]
    conn.fetch.return_value = [{"user_id": i} for i in ids]

    result = await RoundRepositoryDB(pool).golfer_ids_with_rounds()

    assert result == [str(i) for i in ids]
    assert "DISTINCT user_id" in conn.fetch.call_args[0][0]


@pytest.mark.asyncio
async def test_get_round_history(mock_pool):
    pool, conn = mock_pool
    golfer_id = str(uuid4())
    conn.fetch.return_value = [_round_row(1, gross_score=80), _round_row(2, gross_score=95)]

    history = await RoundRepositoryDB(pool).get_round_history(golfer_id, limit=10)

    assert [h.gross_score for h in history] == [80, 95]
    args = conn.fetch.call_args[0]
    assert args[1] == UUID(golfer_id)
    assert args[2] == 10


@pytest.mark.asyncio
async def test_get_round_history_full_history_by_default(mock_pool):
    pool, conn = mock_pool
    conn.fetch.return_value = []

    assert await RoundRepositoryDB(pool).get_round_history(str(uuid4())) == []
    assert conn.fetch.call_args[0][2] is None


@pytest.mark.asyncio
async def test_get_hole_records(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = {"hole_scores": '[{"hole": 1, "par": 3, "strokes": 2}]'}

    records = await RoundRepositoryDB(pool).get_hole_records(5)

    assert len(records) == 1
    assert records[0].to_par() == -1


@pytest.mark.asyncio
async def test_get_hole_records_missing_round(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = None
    assert await RoundRepositoryDB(pool).get_hole_records(5) is None


@pytest.mark.asyncio
async def test_update_round_scores(mock_pool):
    pool, conn = mock_pool
    conn.execute.return_value = "UPDATE 1"
    summary = RoundScoreSummary(holes_scored=18, gross_strokes=74, stableford_gross=34)

    await RoundRepositoryDB(pool).update_round_scores(3, summary)

    sql, round_id, *values = conn.execute.call_args[0]
    assert sql.startswith("UPDATE public.rounds SET gross_score = $2")
    assert round_id == 3
    assert values[0] == 74
    assert len(values) == 6
    assert "holes_played" not in sql


@pytest.mark.asyncio
async def test_update_round_scores_missing_round(mock_pool):
    pool, conn = mock_pool
    conn.execute.return_value = "UPDATE 0"

    with pytest.raises(NotFoundError):
        await RoundRepositoryDB(pool).update_round_scores(3, RoundScoreSummary())


# ================================================================
# ProfileRepositoryDB tests
# ================================================================

@pytest.mark.asyncio
async def test_get_golfer(mock_pool):
    pool, conn = mock_pool
    golfer_id = uuid4()
    conn.fetchrow.return_value = _profile_row(golfer_id, handicap=3.2)

    golfer = await ProfileRepositoryDB(pool).get_golfer(str(golfer_id))

    assert golfer.display_name == "Alex Moore"
    assert golfer.handicap_index == 3.2


@pytest.mark.asyncio
async def test_get_golfer_not_found(mock_pool):
    pool, conn = mock_pool
    conn.fetchrow.return_value = None
    assert await ProfileRepositoryDB(pool).get_golfer(str(uuid4())) is None


@pytest.mark.asyncio
async def test_update_handicap_stores_unrounded_value(mock_pool):
    pool, conn = mock_pool
    conn.execute.return_value = "UPDATE 1"
    golfer_id = str(uuid4())

    await ProfileRepositoryDB(pool).update_handicap(golfer_id, 12.48)

    args = conn.execute.call_args[0]
    assert args[1] == UUID(golfer_id)
    assert args[2] == 12.48


@pytest.mark.asyncio
async def test_update_handicap_missing_golfer(mock_pool):
    pool, conn = mock_pool
    conn.execute.return_value = "UPDATE 0"

    with pytest.raises(NotFoundError, match="not found"):
        await ProfileRepositoryDB(pool).update_handicap(str(uuid4()), 10.0)


# ================================================================
# DatabaseManager
# ================================================================

@pytest.mark.asyncio
async def test_manager_delegates_to_repositories(mock_pool):
    pool, conn = mock_pool
    golfer_id = uuid4()
    conn.fetch.side_effect = [
        [{"user_id": golfer_id}],
        [_round_row(1, gross_score=88)],
    ]
    conn.execute.return_value = "UPDATE 1"
    manager = DatabaseManager(pool)

    assert await manager.golfer_ids_with_rounds() == [str(golfer_id)]
    history = await manager.get_round_history(str(golfer_id))
    assert history[0].gross_score == 88
    await manager.update_handicap(str(golfer_id), 15.36)

    assert "public.profiles" in conn.execute.call_args[0][0]
