"""Archetype quiz state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from forgez.core.types import ArchetypeId


@dataclass(slots=True)
class ArchetypeState:
    archetype: ArchetypeId | None = None
    game_preference: str | None = None
    domain_interest: str | None = None
    focus_area: str | None = None
    epic_object_id: str | None = None
    quiz_answers: Dict[str, Any] = field(default_factory=dict)
    is_complete: bool = False
