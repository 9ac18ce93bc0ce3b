"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field

from forgez.domain.archetype_state import ArchetypeState
from forgez.domain.quest_state import QuestJourneyState
from forgez.domain.xp_state import XPState


@dataclass
class JourneyState:
    """The three independently persisted containers of one user session."""

    session_id: str
    quests: QuestJourneyState = field(default_factory=QuestJourneyState)
    xp: XPState = field(default_factory=XPState)
    archetype: ArchetypeState = field(default_factory=ArchetypeState)
