"""XP ledger: awards, level-up detection and acknowledgement."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Callable

from forgez.core.clock import Clock, utc_now_iso
from forgez.core.log import get_logger
from forgez.core.types import XP_SOURCES, XPSource
from forgez.domain.level_curve import LevelProgress, level_for_xp, level_progress
from forgez.domain.xp_state import PendingLevelUp, XPState, XPTransaction
from forgez.services.errors import InvalidXPAmountError

logger = get_logger(__name__)


def _new_transaction_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True)
class XPAward:
    """Result of a single award."""

    amount: int
    total_xp: int
    level: int
    level_up: PendingLevelUp | None = None


class XPService:
    def __init__(
        self,
        *,
        clock: Clock = utc_now_iso,
        id_factory: Callable[[], str] = _new_transaction_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory

    def new_state(self) -> XPState:
        return XPState()

    def award_xp(
        self,
        state: XPState,
        amount: int,
        source: XPSource,
        source_id: str | None = None,
        description: str | None = None,
    ) -> XPAward:
        """Add ``amount`` XP and raise a pending level-up if the level changed.

        A level-up that is still unacknowledged keeps its original
        ``from_level`` so the celebration covers every level crossed.
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            logger.warning("Rejected XP award of %r from %s", amount, source)
            raise InvalidXPAmountError(f"XP award must be a positive integer, got {amount!r}.")
        if source not in XP_SOURCES:
            raise ValueError(f"Unknown XP source '{source}'.")

        level_before = level_for_xp(state.total_xp)
        state.transactions.append(
            XPTransaction(
                id=self._id_factory(),
                amount=amount,
                source=source,
                created_at=self._clock(),
                source_id=source_id,
                description=description,
            )
        )
        state.total_xp += amount
        state.recent_xp_gain = amount
        level_after = level_for_xp(state.total_xp)

        level_up: PendingLevelUp | None = None
        if level_after > level_before:
            pending = state.pending_level_up
            from_level = pending.from_level if pending is not None else level_before
            level_up = PendingLevelUp(from_level=from_level, to_level=level_after)
            state.pending_level_up = level_up
            logger.info("Level up %s -> %s", from_level, level_after)
        return XPAward(amount=amount, total_xp=state.total_xp, level=level_after, level_up=level_up)

    def acknowledge_level_up(self, state: XPState) -> None:
        state.pending_level_up = None

    def clear_recent_xp(self, state: XPState) -> None:
        state.recent_xp_gain = None

    def xp_by_source(self, state: XPState, source: XPSource) -> int:
        return sum(tx.amount for tx in state.transactions if tx.source == source)

    def level_progress(self, state: XPState) -> LevelProgress:
        return level_progress(state.total_xp)

    def reset(self, state: XPState) -> None:
        state.total_xp = 0
        state.transactions = []
        state.recent_xp_gain = None
        state.pending_level_up = None
