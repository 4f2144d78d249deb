import json

import pytest

from scoring.exceptions import HoleScoreParseError, ScoringError
from scoring.parsing import parse_hole_records


def _stored_payload():
    return [
        {"hole": 1, "par": 4, "strokes": 5, "handicap": 7, "putts": 2},
        {"hole": 2, "par": 3, "strokes": 0, "handicap": 15},
        {"hole": 3, "par": 5},
    ]


def test_parse_stored_json():
    records = parse_hole_records(json.dumps(_stored_payload()))

    assert len(records) == 3
    assert records[0].hole_number == 1
    assert records[0].stroke_index == 7
    assert records[0].putts == 2
    assert records[1].strokes is None      # 0 means not entered
    assert records[2].strokes is None
    assert records[2].stroke_index is None


def test_parse_decoded_list_and_field_names():
    records = parse_hole_records([{"hole_number": 4, "par": 4, "strokes": 4, "stroke_index": 1}])
    assert records[0].hole_number == 4
    assert records[0].stroke_index == 1


def test_parse_bytes():
    assert len(parse_hole_records(json.dumps(_stored_payload()).encode())) == 3


def test_parse_none_is_empty_round():
    assert parse_hole_records(None) == []


def test_malformed_json_raises():
    with pytest.raises(HoleScoreParseError, match="not valid JSON"):
        parse_hole_records('[{"hole": 1, "par": 4,')


def test_non_array_raises():
    with pytest.raises(HoleScoreParseError, match="JSON array"):
        parse_hole_records('{"hole": 1, "par": 4}')


def test_one_bad_entry_rejects_whole_round():
    payload = _stored_payload()
    payload[1]["par"] = "four"
    with pytest.raises(HoleScoreParseError) as exc_info:
        parse_hole_records(payload)
    assert "1.par" in str(exc_info.value)


def test_missing_par_rejected():
    with pytest.raises(HoleScoreParseError):
        parse_hole_records([{"hole": 1, "strokes": 4}])


def test_parse_error_is_a_scoring_error():
    with pytest.raises(ScoringError):
        parse_hole_records("not json")
    with pytest.raises(ValueError):
        parse_hole_records("not json")


def test_zero_stroke_index_is_accepted():
    records = parse_hole_records(
        '[{"hole": 1, "par": 4, "strokes": 5, "handicap": 0},'
        ' {"hole": 2, "par": 3, "strokes": 3, "handicap": 1}]'
    )
    assert records[0].stroke_index == 0
    assert records[1].stroke_index == 1


def test_negative_stroke_index_rejected():
    with pytest.raises(HoleScoreParseError, match="0.handicap"):
        parse_hole_records([{"hole": 1, "par": 4, "handicap": -1}])
