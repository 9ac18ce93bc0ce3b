"""Quest progress state data structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from forgez.core.types import QuestStatus


@dataclass(slots=True)
class QuestProgress:
    """Tracks progress for a single quest of the journey."""

    quest_number: int
    status: QuestStatus = "locked"
    xp_earned: int = 0
    progress_data: Dict[str, Any] = field(default_factory=dict)
    started_at: str | None = None
    completed_at: str | None = None


@dataclass(frozen=True, slots=True)
class PendingQuestComplete:
    """Celebration owed to the user after a quest completes."""

    quest_number: int
    quest_title: str
    xp_earned: int


@dataclass(slots=True)
class QuestJourneyState:
    """Per-session quest progression.

    ``pending_quest_complete`` is session-local and never persisted.
    """

    quest_progress: List[QuestProgress] = field(default_factory=list)
    current_quest_number: int = 1
    is_initialized: bool = False
    pending_quest_complete: PendingQuestComplete | None = None
