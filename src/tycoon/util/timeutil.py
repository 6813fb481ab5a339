"""Timestamp conversion and formatting utilities.

Snapshots carry either ``datetime`` objects or raw epoch seconds; the
engine works on epoch seconds only.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

Timestamp = Union[datetime, float, int]


def epoch_seconds(ts: Timestamp) -> float:
    """Convert a timestamp to epoch seconds. Naive datetimes are read as UTC."""
    if isinstance(ts, datetime):
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts.timestamp()
    return float(ts)


def positive_mod(value: float, modulus: float) -> float:
    """Modulo that is always in ``[0, modulus)`` for a positive modulus."""
    result = value % modulus
    # float % can round up to the modulus itself for tiny negative values
    if result >= modulus:
        return 0.0
    return result

