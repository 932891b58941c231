"""Timestamp normalization to Loki epoch-nanosecond strings.

Loki orders entries by an integer nanosecond epoch carried as a decimal
string, since JSON numbers cannot hold that precision safely.

Two behaviours are available:

* the default resolves the supplied timestamp string or datetime, applies
  ``add_seconds`` and returns that instant;
* ``legacy=True`` parses and validates the input the same way but always
  returns the current wall-clock time and ignores ``add_seconds``. Log
  streams that were shipped with send-time ordering keep it.
"""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta, timezone

from loki_push.errors import ParseError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
EPOCH_PATTERN = re.compile(r"^\d{10}(\d{9})?$")

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
_NANOS_PER_TICK = 100
_TICKS_PER_MILLI = 10_000


def now_epoch_ns() -> int:
    return time.time_ns()


def datetime_to_epoch_ns(value: datetime) -> int:
    """Convert a datetime to integer epoch nanoseconds without float rounding.

    Naive datetimes are interpreted as local time.
    """
    delta = value.astimezone(timezone.utc) - EPOCH
    seconds = delta.days * 86_400 + delta.seconds
    return seconds * NANOS_PER_SECOND + delta.microseconds * 1_000


def _legacy_now_ns() -> int:
    now_ns = now_epoch_ns()
    millis = now_ns // NANOS_PER_MILLI
    sub_milli_ticks = (now_ns // _NANOS_PER_TICK) % _TICKS_PER_MILLI
    return millis * NANOS_PER_MILLI + sub_milli_ticks * _NANOS_PER_TICK


def _parse_timestamp(timestamp: str) -> int:
    raw = timestamp.strip()
    if EPOCH_PATTERN.match(raw):
        seconds = int(raw[:10])
        if len(raw) == 19:
            return seconds * NANOS_PER_SECOND + int(raw[10:])
        return seconds * NANOS_PER_SECOND
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ParseError(
            f"Invalid timestamp: {timestamp!r}",
            context={"timestamp": timestamp},
            cause=exc,
        ) from exc
    return datetime_to_epoch_ns(parsed)


def resolve_epoch_ns(
    timestamp: str | None = None,
    date: datetime | None = None,
) -> int:
    """Resolve the first supplied source (string, datetime, now) to nanoseconds."""
    if timestamp:
        return _parse_timestamp(timestamp)
    if date is not None:
        return datetime_to_epoch_ns(date)
    return now_epoch_ns()


def loki_timestamp(
    timestamp: str | None = None,
    date: datetime | None = None,
    add_seconds: float = 0,
    *,
    legacy: bool = False,
) -> str:
    """Return a Loki timestamp (epoch nanoseconds as a decimal string).

    Args:
        timestamp: ISO-8601 string, or a 10-digit (seconds) / 19-digit
            (nanoseconds) Unix epoch string. Takes precedence over ``date``.
        date: Datetime to convert when ``timestamp`` is not given.
        add_seconds: Signed offset applied to the resolved instant.
        legacy: Always return "now" after validating the input.

    Raises:
        ParseError: ``timestamp`` is neither an epoch nor an ISO-8601 string.
    """
    resolved = resolve_epoch_ns(timestamp, date)
    if legacy:
        return str(_legacy_now_ns())
    if add_seconds:
        offset = timedelta(seconds=add_seconds)
        resolved += (
            (offset.days * 86_400 + offset.seconds) * NANOS_PER_SECOND
            + offset.microseconds * 1_000
        )
    return str(resolved)
