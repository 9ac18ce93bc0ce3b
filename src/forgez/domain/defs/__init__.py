"""Domain definition exports."""

from .archetype_def import ArchetypeDef, DomainInterestDef, FocusAreaDef, GamePreferenceDef
from .quest_def import QuestDef

__all__ = [
    "ArchetypeDef",
    "DomainInterestDef",
    "FocusAreaDef",
    "GamePreferenceDef",
    "QuestDef",
]
