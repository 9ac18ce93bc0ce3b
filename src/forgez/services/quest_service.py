"""Quest journey orchestration and unlock tracking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping

from forgez.core.clock import Clock, utc_now_iso
from forgez.core.log import get_logger
from forgez.core.types import QuestStatus
from forgez.data.repositories import QuestsRepository
from forgez.domain.defs import QuestDef
from forgez.domain.quest_state import PendingQuestComplete, QuestJourneyState, QuestProgress
from forgez.services.errors import InvalidXPAmountError, QuestLockedError

logger = get_logger(__name__)


@dataclass(slots=True)
class QuestUpdate:
    quest_number: int
    quest_title: str
    started: bool = False
    completed: bool = False
    xp_earned: int = 0
    unlocked_quest_number: int | None = None


@dataclass(slots=True)
class QuestStatusView:
    number: int
    title: str
    subtitle: str
    status: QuestStatus
    xp_reward: int
    xp_earned: int
    is_current: bool


@dataclass(slots=True)
class JourneyView:
    quests: List[QuestStatusView]
    current_quest_number: int
    completed_count: int
    total_quests: int
    total_quest_xp: int


class QuestService:
    """Drives the linear quest journey.

    Quest ``n + 1`` only ever becomes available as part of completing quest
    ``n``; quest 1 is the only quest available in a fresh state.
    """

    def __init__(self, *, quests_repo: QuestsRepository, clock: Clock = utc_now_iso) -> None:
        self._quests_repo = quests_repo
        self._clock = clock

    def new_state(self) -> QuestJourneyState:
        """Return a fresh, uninitialized journey."""
        return QuestJourneyState(quest_progress=self._initial_progress())

    def initialize_quests(self, state: QuestJourneyState) -> None:
        """Materialize the initial progress list once per session."""
        if state.is_initialized:
            return
        state.quest_progress = self._initial_progress()
        state.current_quest_number = 1
        state.is_initialized = True

    def start_quest(self, state: QuestJourneyState, quest_number: int) -> QuestUpdate | None:
        progress = self._find_progress(state, quest_number)
        if progress is None:
            logger.warning("Ignoring start of unknown quest %r", quest_number)
            return None
        if progress.status != "available":
            logger.debug("Quest %s is %s; start ignored", quest_number, progress.status)
            return None
        quest = self._quests_repo.get(quest_number)
        progress.status = "in_progress"
        progress.started_at = self._clock()
        state.current_quest_number = quest_number
        return QuestUpdate(quest_number=quest_number, quest_title=quest.title, started=True)

    def update_quest_progress(
        self, state: QuestJourneyState, quest_number: int, data: Mapping[str, Any]
    ) -> bool:
        """Merge free-form progress data into the quest record."""
        progress = self._find_progress(state, quest_number)
        if progress is None:
            logger.warning("Ignoring progress update for unknown quest %r", quest_number)
            return False
        progress.progress_data.update(data)
        return True

    def complete_quest(
        self, state: QuestJourneyState, quest_number: int, xp_earned: int | None = None
    ) -> QuestUpdate | None:
        """Complete a quest, unlock its successor and queue the celebration.

        Returns None for unknown or already completed quests. Raises
        QuestLockedError if the quest is still locked and InvalidXPAmountError
        if an explicit ``xp_earned`` is not a non-negative integer.
        """
        progress = self._find_progress(state, quest_number)
        if progress is None:
            logger.warning("Ignoring completion of unknown quest %r", quest_number)
            return None
        if progress.status == "completed":
            return None
        if progress.status == "locked":
            raise QuestLockedError(
                f"Quest {quest_number} is locked; complete quest {quest_number - 1} first."
            )
        if xp_earned is not None and (
            isinstance(xp_earned, bool) or not isinstance(xp_earned, int) or xp_earned < 0
        ):
            raise InvalidXPAmountError(f"xp_earned must be a non-negative integer, got {xp_earned!r}.")

        quest = self._quests_repo.get(quest_number)
        actual_xp = quest.xp_reward if xp_earned is None else xp_earned
        progress.status = "completed"
        progress.xp_earned = actual_xp
        progress.completed_at = self._clock()

        unlocked: int | None = None
        successor = self._find_progress(state, quest_number + 1)
        if successor is not None and successor.status == "locked":
            successor.status = "available"
            unlocked = successor.quest_number

        state.current_quest_number = min(quest_number + 1, self._quests_repo.count())
        state.pending_quest_complete = PendingQuestComplete(
            quest_number=quest_number,
            quest_title=quest.title,
            xp_earned=actual_xp,
        )
        logger.info("Quest %s '%s' completed (+%s XP)", quest_number, quest.title, actual_xp)
        return QuestUpdate(
            quest_number=quest_number,
            quest_title=quest.title,
            completed=True,
            xp_earned=actual_xp,
            unlocked_quest_number=unlocked,
        )

    def acknowledge_quest_complete(self, state: QuestJourneyState) -> None:
        state.pending_quest_complete = None

    def get_quest_status(self, state: QuestJourneyState, quest_number: int) -> QuestStatus:
        progress = self._find_progress(state, quest_number)
        return progress.status if progress is not None else "locked"

    def get_quest_progress(self, state: QuestJourneyState, quest_number: int) -> QuestProgress | None:
        return self._find_progress(state, quest_number)

    def get_current_quest(self, state: QuestJourneyState) -> QuestDef | None:
        return self._quests_repo.find(state.current_quest_number)

    def total_quest_xp(self, state: QuestJourneyState) -> int:
        return sum(progress.xp_earned for progress in state.quest_progress)

    def completed_count(self, state: QuestJourneyState) -> int:
        return sum(1 for progress in state.quest_progress if progress.status == "completed")

    def build_journey_view(self, state: QuestJourneyState) -> JourneyView:
        views: List[QuestStatusView] = []
        for quest in self._quests_repo.all():
            progress = self._find_progress(state, quest.number)
            views.append(
                QuestStatusView(
                    number=quest.number,
                    title=quest.title,
                    subtitle=quest.subtitle,
                    status=progress.status if progress else "locked",
                    xp_reward=quest.xp_reward,
                    xp_earned=progress.xp_earned if progress else 0,
                    is_current=quest.number == state.current_quest_number,
                )
            )
        return JourneyView(
            quests=views,
            current_quest_number=state.current_quest_number,
            completed_count=self.completed_count(state),
            total_quests=len(views),
            total_quest_xp=self.total_quest_xp(state),
        )

    def reset(self, state: QuestJourneyState) -> None:
        state.quest_progress = self._initial_progress()
        state.current_quest_number = 1
        state.is_initialized = False
        state.pending_quest_complete = None

    def _initial_progress(self) -> List[QuestProgress]:
        return [
            QuestProgress(
                quest_number=quest.number,
                status="available" if index == 0 else "locked",
            )
            for index, quest in enumerate(self._quests_repo.all())
        ]

    @staticmethod
    def _find_progress(state: QuestJourneyState, quest_number: int) -> QuestProgress | None:
        if isinstance(quest_number, bool) or not isinstance(quest_number, int):
            return None
        for progress in state.quest_progress:
            if progress.quest_number == quest_number:
                return progress
        return None
