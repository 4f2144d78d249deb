"""Decoding of stored hole-score payloads into HoleRecord lists."""

from __future__ import annotations

import json
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from models.hole_record import HoleRecord

from .exceptions import HoleScoreParseError

_HOLE_RECORDS = TypeAdapter(List[HoleRecord])

Payload = Union[str, bytes, bytearray, List[Any], None]


def parse_hole_records(payload: Payload) -> List[HoleRecord]:
    """
    Parse hole scores stored as a JSON array (or an already decoded list).

    All-or-nothing: any malformed entry raises HoleScoreParseError and no
    records are returned, so the engine is never fed a partial round.
    A None payload is an empty round.
    """
    if payload is None:
        return []

    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise HoleScoreParseError(f"Hole scores are not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise HoleScoreParseError(
            f"Hole scores must be a JSON array, got {type(payload).__name__}"
        )

    try:
        return _HOLE_RECORDS.validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise HoleScoreParseError(
            f"Invalid hole score at {location}: {first['msg']}"
        ) from e
