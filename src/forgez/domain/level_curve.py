"""Cumulative XP to level mapping.

Reaching level ``L`` takes ``100 * (L - 1) ** 2`` total XP, so the gap between
levels grows linearly: 100 XP for level 2, 300 more for level 3, 500 more for
level 4 and so on.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import isqrt

XP_PER_LEVEL_UNIT = 100


@dataclass(frozen=True, slots=True)
class LevelProgress:
    """Level reached plus progress toward the next one."""

    level: int
    current: int
    required: int
    progress: float


def xp_for_level(level: int) -> int:
    """Return the cumulative XP needed to reach ``level``."""
    if level < 1:
        raise ValueError("Level must be at least 1.")
    return XP_PER_LEVEL_UNIT * (level - 1) ** 2


def level_for_xp(total_xp: int) -> int:
    """Return the level reached with ``total_xp`` accumulated."""
    if total_xp < 0:
        raise ValueError("Total XP cannot be negative.")
    return isqrt(total_xp // XP_PER_LEVEL_UNIT) + 1


def level_progress(total_xp: int) -> LevelProgress:
    """Return level and within-level progress for ``total_xp``."""
    level = level_for_xp(total_xp)
    floor = xp_for_level(level)
    required = xp_for_level(level + 1) - floor
    current = total_xp - floor
    return LevelProgress(
        level=level,
        current=current,
        required=required,
        progress=100 * current / required,
    )
