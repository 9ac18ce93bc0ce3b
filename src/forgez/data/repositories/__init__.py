"""Repository exports."""

from .archetypes_repo import (
    ArchetypesRepository,
    DomainInterestsRepository,
    FocusAreasRepository,
    GamePreferencesRepository,
)
from .quests_repo import QuestsRepository

__all__ = [
    "ArchetypesRepository",
    "DomainInterestsRepository",
    "FocusAreasRepository",
    "GamePreferencesRepository",
    "QuestsRepository",
]
