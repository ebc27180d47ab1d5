"""Domain helpers for user identifiers and record shaping."""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, Sequence, Union

UserId = Union[int, float]

USER_FIELDS = ("name", "role")
ID_PATTERN = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


def parse_user_id(value: str | None) -> Optional[UserId]:
    """
    Convert the textual path identifier to a number, or None when it cannot be one.

    Integer literals become int; decimal literals become float so that ids
    written by older versions of the service (random fractions) stay reachable.
    """
    candidate = (value or "").strip()
    if not ID_PATTERN.fullmatch(candidate):
        return None
    try:
        if candidate.lstrip("-").isdigit():
            return int(candidate)
        number = float(candidate)
    except ValueError:
        # int() refuses literals past the interpreter's digit limit
        return None
    if not math.isfinite(number):
        return None
    return number


def record_id(record: Any) -> Optional[UserId]:
    """Numeric id of a stored record, ignoring booleans and non-numbers."""
    if not isinstance(record, dict):
        return None
    raw = record.get("id")
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    if isinstance(raw, float) and not math.isfinite(raw):
        return None
    return raw


def find_user_index(records: Sequence[Any], user_id: Optional[UserId]) -> Optional[int]:
    """Position of the first record whose id equals user_id."""
    if user_id is None:
        return None
    for idx, record in enumerate(records):
        if record_id(record) == user_id:
            return idx
    return None


def next_user_id(records: Sequence[Any]) -> int:
    """One past the largest id in use; 1 for an empty collection."""
    ids = [record_id(record) for record in records]
    highest = max((math.floor(i) for i in ids if i is not None), default=0)
    return max(highest, 0) + 1


def build_user(user_id: UserId, payload: Mapping[str, Any]) -> dict:
    """New record holding the id plus whichever of name/role the client sent."""
    record: dict = {"id": user_id}
    for field in USER_FIELDS:
        if field in payload:
            record[field] = payload[field]
    return record


def apply_update(record: dict, payload: Mapping[str, Any]) -> dict:
    """Overwrite name/role in place; a field missing from payload is dropped."""
    for field in USER_FIELDS:
        if field in payload:
            record[field] = payload[field]
        else:
            record.pop(field, None)
    return record
