"""Facade tying the quest, XP and archetype services to one journey."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from forgez.data.repositories import (
    ArchetypesRepository,
    DomainInterestsRepository,
    FocusAreasRepository,
    GamePreferencesRepository,
    QuestsRepository,
)
from forgez.domain.defs import ArchetypeDef
from forgez.domain.level_curve import LevelProgress
from forgez.domain.quest_state import PendingQuestComplete
from forgez.domain.state import JourneyState
from forgez.domain.xp_state import PendingLevelUp
from forgez.services.archetype_service import ArchetypeService
from forgez.services.quest_service import JourneyView, QuestService, QuestUpdate
from forgez.services.xp_service import XPAward, XPService


@dataclass(slots=True)
class QuestCompletionResult:
    quest_update: QuestUpdate | None
    xp_award: XPAward | None = None


@dataclass(slots=True)
class DashboardView:
    """Everything the dashboard reads in one pass."""

    journey: JourneyView
    total_xp: int
    level: LevelProgress
    archetype: ArchetypeDef | None
    quiz_complete: bool
    recent_xp_gain: int | None
    pending_level_up: PendingLevelUp | None
    pending_quest_complete: PendingQuestComplete | None


class JourneyService:
    def __init__(
        self,
        *,
        quest_service: QuestService,
        xp_service: XPService,
        archetype_service: ArchetypeService,
    ) -> None:
        self.quests = quest_service
        self.xp = xp_service
        self.archetypes = archetype_service

    def new_journey(self, session_id: str) -> JourneyState:
        state = JourneyState(
            session_id=session_id,
            quests=self.quests.new_state(),
            xp=self.xp.new_state(),
            archetype=self.archetypes.new_state(),
        )
        self.quests.initialize_quests(state.quests)
        return state

    def complete_quest_and_award(
        self, state: JourneyState, quest_number: int, xp_earned: int | None = None
    ) -> QuestCompletionResult:
        """Complete a quest and credit its XP to the ledger in one step.

        Nothing is awarded when the completion was a no-op or earned 0 XP.
        """
        update = self.quests.complete_quest(state.quests, quest_number, xp_earned)
        if update is None or update.xp_earned <= 0:
            return QuestCompletionResult(quest_update=update)
        award = self.xp.award_xp(
            state.xp,
            update.xp_earned,
            "quest_completion",
            source_id=f"quest_{quest_number}",
            description=update.quest_title,
        )
        return QuestCompletionResult(quest_update=update, xp_award=award)

    def acknowledge_all(self, state: JourneyState) -> None:
        self.quests.acknowledge_quest_complete(state.quests)
        self.xp.acknowledge_level_up(state.xp)
        self.xp.clear_recent_xp(state.xp)

    def build_dashboard(self, state: JourneyState) -> DashboardView:
        return DashboardView(
            journey=self.quests.build_journey_view(state.quests),
            total_xp=state.xp.total_xp,
            level=self.xp.level_progress(state.xp),
            archetype=self.archetypes.get_archetype(state.archetype),
            quiz_complete=state.archetype.is_complete,
            recent_xp_gain=state.xp.recent_xp_gain,
            pending_level_up=state.xp.pending_level_up,
            pending_quest_complete=state.quests.pending_quest_complete,
        )

    def reset(self, state: JourneyState) -> None:
        self.quests.reset(state.quests)
        self.xp.reset(state.xp)
        self.archetypes.reset(state.archetype)
        self.quests.initialize_quests(state.quests)


def build_journey_service(definitions_path: Path | str | None = None) -> JourneyService:
    """Construct the journey facade with concrete repositories."""
    quests_repo = QuestsRepository(base_path=definitions_path)
    archetypes_repo = ArchetypesRepository(base_path=definitions_path)
    return JourneyService(
        quest_service=QuestService(quests_repo=quests_repo),
        xp_service=XPService(),
        archetype_service=ArchetypeService(
            archetypes_repo=archetypes_repo,
            game_preferences_repo=GamePreferencesRepository(
                archetypes_repo=archetypes_repo, base_path=definitions_path
            ),
            domain_interests_repo=DomainInterestsRepository(base_path=definitions_path),
            focus_areas_repo=FocusAreasRepository(base_path=definitions_path),
        ),
    )
