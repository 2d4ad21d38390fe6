"""Decoders for fields whose wire shape varies between API releases."""
from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any, Optional

from linode_sdk.errors import DecodeError

TIMESTAMP_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S.%f",
)

# Segments read left to right as hours, minutes, seconds.
_DURATION_MULTIPLIERS = (3600, 60, 1)
_SEGMENT_RE = re.compile(r"\d+", re.ASCII)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if not isinstance(value, str):
        raise DecodeError(f"timestamp must be a string, got {type(value).__name__}")
    raw = value.strip()
    if not raw:
        raise DecodeError("timestamp is empty")
    for layout in TIMESTAMP_LAYOUTS:
        try:
            return datetime.strptime(raw, layout).replace(tzinfo=UTC)
        except ValueError:
            continue
    # Offset-qualified ISO-8601, e.g. 2021-06-01T12:00:00Z or +02:00.
    try:
        return _as_utc(datetime.fromisoformat(raw))
    except ValueError:
        pass
    raise DecodeError(f"unrecognized timestamp format: {value!r}")


def duration_to_seconds(value: str) -> int:
    """Convert ``H``, ``H:M`` or ``H:M:S`` to seconds. Segments are not range-checked."""
    segments = value.strip().split(":")
    if len(segments) > len(_DURATION_MULTIPLIERS):
        raise ValueError(f"invalid duration format: {value!r}")
    total = 0
    for segment, multiplier in zip(segments, _DURATION_MULTIPLIERS):
        if not _SEGMENT_RE.fullmatch(segment):
            raise ValueError(f"invalid duration segment {segment!r} in {value!r}")
        total += int(segment) * multiplier
    return total


def parse_time_remaining(value: Any) -> Optional[int]:
    """Best-effort decode of an advisory "seconds remaining" field.

    The API has returned this as null, a bare integer and an ``H:MM:SS``
    string over time. Shapes that match none of those decode to ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    try:
        return duration_to_seconds(value)
    except ValueError:
        return None
