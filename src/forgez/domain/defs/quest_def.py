"""Quest definition data structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QuestDef:
    number: int
    title: str
    subtitle: str
    description: str
    xp_reward: int
    icon: str
