"""Timestamp helpers."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], str]


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()
