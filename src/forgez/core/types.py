"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

QuestStatus = Literal["locked", "available", "in_progress", "completed"]
ArchetypeId = Literal["BUILDER", "STRATEGIST", "EXPLORER", "COMPETITOR"]
GamePreference = Literal["sandbox", "strategy", "adventure", "esports"]
DomainInterest = Literal["space", "energy", "robotics", "defense"]
FocusArea = Literal["how_works", "how_build", "who_makes", "who_operates"]
XPSource = Literal[
    "quest_completion",
    "quiz_correct",
    "project_upload",
    "peer_review",
    "hackathon_join",
    "hackathon_submit",
    "guild_join",
    "company_view",
    "role_explore",
    "course_start",
    "deep_dive_complete",
    "archetype_complete",
    "achievement_unlock",
]

# Forward order of the quest state machine.
QUEST_STATUSES: Tuple[QuestStatus, ...] = ("locked", "available", "in_progress", "completed")
ARCHETYPE_IDS: Tuple[ArchetypeId, ...] = ("BUILDER", "STRATEGIST", "EXPLORER", "COMPETITOR")
XP_SOURCES: Tuple[XPSource, ...] = (
    "quest_completion",
    "quiz_correct",
    "project_upload",
    "peer_review",
    "hackathon_join",
    "hackathon_submit",
    "guild_join",
    "company_view",
    "role_explore",
    "course_start",
    "deep_dive_complete",
    "archetype_complete",
    "achievement_unlock",
)
DEFAULT_ARCHETYPE: ArchetypeId = "BUILDER"

__all__ = [
    "ArchetypeId",
    "DomainInterest",
    "FocusArea",
    "GamePreference",
    "QuestStatus",
    "XPSource",
    "ARCHETYPE_IDS",
    "DEFAULT_ARCHETYPE",
    "QUEST_STATUSES",
    "XP_SOURCES",
]
