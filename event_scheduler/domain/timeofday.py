"""Same-day wall-clock times, stored as minutes since midnight."""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

from event_scheduler.domain.errors import InvalidInput

MINUTES_PER_DAY = 24 * 60

_HHMM = re.compile(r"^([0-9]{2}):([0-9]{2})$")


def parse_time_of_day(value: str) -> int:
    """Parse a zero-padded ``"HH:MM"`` string into minutes since midnight.

    Raises ``InvalidInput`` for anything else, including out-of-range hours
    or minutes.
    """
    match = _HHMM.match(value.strip())
    if match is None:
        raise InvalidInput(f"Invalid time format: {value!r} (expected HH:MM)")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidInput(f"Invalid time value: {value!r}")
    return hours * 60 + minutes


def format_time_of_day(minutes: int) -> str:
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise InvalidInput(f"Time out of range: {minutes} minutes")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_between(start: int, end: int) -> int:
    return end - start


def _coerce(value: Any) -> int:
    if isinstance(value, str):
        return parse_time_of_day(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value < MINUTES_PER_DAY:
            raise InvalidInput(f"Time out of range: {value} minutes")
        return value
    raise InvalidInput(f"Invalid time: {value!r}")


# Accepts "HH:MM" or an in-range minute count; always serializes as "HH:MM".
TimeOfDay = Annotated[
    int,
    BeforeValidator(_coerce),
    PlainSerializer(format_time_of_day, return_type=str),
    WithJsonSchema({"type": "string", "pattern": _HHMM.pattern, "examples": ["09:30"]}),
]
