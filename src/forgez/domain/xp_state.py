"""XP ledger state data structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from forgez.core.types import XPSource


@dataclass(frozen=True, slots=True)
class XPTransaction:
    id: str
    amount: int
    source: XPSource
    created_at: str
    source_id: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class PendingLevelUp:
    from_level: int
    to_level: int


@dataclass(slots=True)
class XPState:
    """Accumulated XP for one session.

    ``recent_xp_gain`` and ``pending_level_up`` are UI hints that are cleared
    by explicit acknowledgement and never persisted.
    """

    total_xp: int = 0
    transactions: List[XPTransaction] = field(default_factory=list)
    recent_xp_gain: int | None = None
    pending_level_up: PendingLevelUp | None = None
