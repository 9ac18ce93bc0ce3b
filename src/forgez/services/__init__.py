"""Service layer exports."""

from .archetype_service import ArchetypeService
from .errors import InvalidXPAmountError, ProgressionError, QuestLockedError, SaveLoadError
from .journey_service import DashboardView, JourneyService, QuestCompletionResult, build_journey_service
from .quest_service import JourneyView, QuestService, QuestStatusView, QuestUpdate
from .save_service import SaveService
from .session_service import SessionService, build_session_service
from .xp_service import XPAward, XPService

__all__ = [
    "ArchetypeService",
    "DashboardView",
    "InvalidXPAmountError",
    "JourneyService",
    "JourneyView",
    "ProgressionError",
    "QuestCompletionResult",
    "QuestLockedError",
    "QuestService",
    "QuestStatusView",
    "QuestUpdate",
    "SaveLoadError",
    "SaveService",
    "SessionService",
    "XPAward",
    "XPService",
    "build_journey_service",
    "build_session_service",
]
