from __future__ import annotations

import pytest

from forgez.data.repositories import (
    ArchetypesRepository,
    DomainInterestsRepository,
    FocusAreasRepository,
    GamePreferencesRepository,
)
from forgez.services.archetype_service import ArchetypeService


def _build_archetype_service() -> ArchetypeService:
    archetypes_repo = ArchetypesRepository()
    return ArchetypeService(
        archetypes_repo=archetypes_repo,
        game_preferences_repo=GamePreferencesRepository(archetypes_repo=archetypes_repo),
        domain_interests_repo=DomainInterestsRepository(),
        focus_areas_repo=FocusAreasRepository(),
    )


@pytest.mark.parametrize(
    ("preference", "archetype"),
    [
        ("sandbox", "BUILDER"),
        ("strategy", "STRATEGIST"),
        ("adventure", "EXPLORER"),
        ("esports", "COMPETITOR"),
    ],
)
def test_game_preference_maps_to_archetype(preference: str, archetype: str) -> None:
    service = _build_archetype_service()
    state = service.new_state()

    assert service.set_game_preference(state, preference) == archetype
    assert state.archetype == archetype
    assert state.game_preference == preference
    assert state.quiz_answers["game_preference"] == preference


def test_archetype_is_deterministic_across_instances() -> None:
    results = set()
    for _ in range(3):
        service = _build_archetype_service()
        state = service.new_state()
        service.set_game_preference(state, "sandbox")
        service.set_game_preference(state, "sandbox")
        results.add(state.archetype)
    assert results == {"BUILDER"}


def test_unknown_preference_falls_back_to_default(caplog) -> None:
    service = _build_archetype_service()
    state = service.new_state()

    with caplog.at_level("WARNING"):
        archetype = service.set_game_preference(state, "puzzle")

    assert archetype == "BUILDER"
    assert state.game_preference == "puzzle"
    assert "Unknown game preference" in caplog.text


def test_calculate_without_preference_returns_default() -> None:
    service = _build_archetype_service()
    state = service.new_state()
    assert service.calculate_archetype(state) == "BUILDER"
    assert state.archetype is None


def test_complete_quiz_recomputes_archetype() -> None:
    service = _build_archetype_service()
    state = service.new_state()
    service.set_game_preference(state, "adventure")
    service.set_domain_interest(state, "space")
    service.set_focus_area(state, "how_build")
    state.archetype = "COMPETITOR"

    assert service.complete_quiz(state) == "EXPLORER"
    assert state.archetype == "EXPLORER"
    assert state.is_complete is True
    assert state.quiz_answers == {
        "game_preference": "adventure",
        "domain_interest": "space",
        "focus_area": "how_build",
    }
    archetype = service.get_archetype(state)
    assert archetype is not None and archetype.name == "The Explorer"


def test_unknown_interest_and_focus_rejected() -> None:
    service = _build_archetype_service()
    state = service.new_state()
    with pytest.raises(ValueError):
        service.set_domain_interest(state, "fashion")
    with pytest.raises(ValueError):
        service.set_focus_area(state, "who_cares")
    assert state.domain_interest is None
    assert state.focus_area is None
    assert state.quiz_answers == {}


def test_options_list_every_answer() -> None:
    service = _build_archetype_service()
    assert {pref_id for pref_id, _ in service.game_preference_options()} == {
        "sandbox",
        "strategy",
        "adventure",
        "esports",
    }
    assert len(service.domain_interest_options()) == 4
    assert ("how_works", "How It Works") in service.focus_area_options()


def test_reset_clears_all_fields() -> None:
    service = _build_archetype_service()
    state = service.new_state()
    service.set_game_preference(state, "strategy")
    service.set_domain_interest(state, "energy")
    service.set_epic_object_id(state, "starship")
    service.complete_quiz(state)

    service.reset(state)

    assert state == service.new_state()
    assert service.get_archetype(state) is None
