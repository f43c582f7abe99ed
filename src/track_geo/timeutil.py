"""Timestamp parsing and elapsed-time arithmetic."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone

logger = logging.getLogger(__name__)

# Largest representable offset from the epoch, in milliseconds (±100M days).
MAX_EPOCH_MS = 8.64e15


def parse_timestamp(value) -> float | None:
    """Convert a timestamp to epoch milliseconds.

    Accepts datetime/date objects, epoch milliseconds (int or float) and
    ISO 8601 strings. Naive datetimes are taken as UTC. Returns None when
    the value cannot be read as an instant.
    """
    if isinstance(value, bool) or value is None:
        ms = None
    elif isinstance(value, (int, float)):
        try:
            ms = float(value)
        except OverflowError:
            ms = None
    elif isinstance(value, datetime):
        ms = _datetime_ms(value)
    elif isinstance(value, date):
        ms = _datetime_ms(datetime(value.year, value.month, value.day))
    elif isinstance(value, str):
        ms = _parse_iso(value)
    else:
        ms = None

    if ms is None or not math.isfinite(ms) or abs(ms) > MAX_EPOCH_MS:
        logger.debug("Unparseable timestamp: %r", value)
        return None

    return float(math.trunc(ms))


def elapsed_seconds(ts_a, ts_b) -> float:
    """Signed seconds from ``ts_a`` to ``ts_b``.

    Negative when ``ts_b`` precedes ``ts_a``. NaN when either side fails
    to parse.
    """
    ms_a = parse_timestamp(ts_a)
    ms_b = parse_timestamp(ts_b)
    if ms_a is None or ms_b is None:
        return math.nan
    return (ms_b - ms_a) / 1000


def _datetime_ms(dt: datetime) -> float:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp() * 1000


def _parse_iso(raw: str) -> float | None:
    text = raw.strip()
    if not text:
        return None
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    return _datetime_ms(dt)
