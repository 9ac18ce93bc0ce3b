"""Archetype quiz answers and archetype derivation."""
from __future__ import annotations

from typing import List, Tuple

from forgez.core.log import get_logger
from forgez.core.types import DEFAULT_ARCHETYPE, ArchetypeId
from forgez.data.repositories import (
    ArchetypesRepository,
    DomainInterestsRepository,
    FocusAreasRepository,
    GamePreferencesRepository,
)
from forgez.domain.archetype_state import ArchetypeState
from forgez.domain.defs import ArchetypeDef

logger = get_logger(__name__)


class ArchetypeService:
    """Records quiz answers; the archetype depends only on the game preference."""

    def __init__(
        self,
        *,
        archetypes_repo: ArchetypesRepository,
        game_preferences_repo: GamePreferencesRepository,
        domain_interests_repo: DomainInterestsRepository,
        focus_areas_repo: FocusAreasRepository,
    ) -> None:
        self._archetypes_repo = archetypes_repo
        self._game_preferences_repo = game_preferences_repo
        self._domain_interests_repo = domain_interests_repo
        self._focus_areas_repo = focus_areas_repo

    def new_state(self) -> ArchetypeState:
        return ArchetypeState()

    def derive_archetype(self, game_preference: str | None) -> ArchetypeId:
        """Map a game preference to its archetype; unknown answers get the default."""
        if game_preference is None:
            return DEFAULT_ARCHETYPE
        preference = self._game_preferences_repo.find(game_preference)
        if preference is None:
            logger.warning(
                "Unknown game preference %r; falling back to %s", game_preference, DEFAULT_ARCHETYPE
            )
            return DEFAULT_ARCHETYPE
        return preference.archetype

    def set_game_preference(self, state: ArchetypeState, preference: str) -> ArchetypeId:
        archetype = self.derive_archetype(preference)
        state.game_preference = preference
        state.archetype = archetype
        state.quiz_answers["game_preference"] = preference
        return archetype

    def set_domain_interest(self, state: ArchetypeState, interest: str) -> None:
        if self._domain_interests_repo.find(interest) is None:
            raise ValueError(f"Unknown domain interest '{interest}'.")
        state.domain_interest = interest
        state.quiz_answers["domain_interest"] = interest

    def set_focus_area(self, state: ArchetypeState, area: str) -> None:
        if self._focus_areas_repo.find(area) is None:
            raise ValueError(f"Unknown focus area '{area}'.")
        state.focus_area = area
        state.quiz_answers["focus_area"] = area

    def set_epic_object_id(self, state: ArchetypeState, epic_object_id: str) -> None:
        state.epic_object_id = epic_object_id

    def game_preference_options(self) -> List[Tuple[str, str]]:
        return [(pref.id, pref.label) for pref in self._game_preferences_repo.all()]

    def domain_interest_options(self) -> List[Tuple[str, str]]:
        return [(interest.id, interest.label) for interest in self._domain_interests_repo.all()]

    def focus_area_options(self) -> List[Tuple[str, str]]:
        return [(area.id, area.label) for area in self._focus_areas_repo.all()]

    def calculate_archetype(self, state: ArchetypeState) -> ArchetypeId:
        return self.derive_archetype(state.game_preference)

    def complete_quiz(self, state: ArchetypeState) -> ArchetypeId:
        """Recompute the archetype from the stored answer and finalize the quiz."""
        archetype = self.calculate_archetype(state)
        state.archetype = archetype
        state.is_complete = True
        return archetype

    def get_archetype(self, state: ArchetypeState) -> ArchetypeDef | None:
        if state.archetype is None:
            return None
        return self._archetypes_repo.get(state.archetype)

    def reset(self, state: ArchetypeState) -> None:
        state.archetype = None
        state.game_preference = None
        state.domain_interest = None
        state.focus_area = None
        state.epic_object_id = None
        state.quiz_answers = {}
        state.is_complete = False
