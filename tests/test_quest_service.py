from __future__ import annotations

import pytest

from forgez.data.repositories import QuestsRepository
from forgez.domain.quest_state import PendingQuestComplete, QuestJourneyState
from forgez.services.errors import InvalidXPAmountError, QuestLockedError
from forgez.services.quest_service import QuestService


def _build_quest_service() -> QuestService:
    return QuestService(quests_repo=QuestsRepository(), clock=lambda: "2026-01-01T00:00:00+00:00")


def _initialized_state(service: QuestService) -> QuestJourneyState:
    state = service.new_state()
    service.initialize_quests(state)
    return state


def test_initial_state_has_only_first_quest_available() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    assert len(state.quest_progress) == 8
    assert service.get_quest_status(state, 1) == "available"
    for number in range(2, 9):
        assert service.get_quest_status(state, number) == "locked"
    assert state.current_quest_number == 1
    assert state.is_initialized is True
    assert state.pending_quest_complete is None


def test_initialize_is_a_no_op_once_initialized() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    service.complete_quest(state, 1)

    service.initialize_quests(state)

    assert service.get_quest_status(state, 1) == "completed"
    assert state.current_quest_number == 2


def test_start_quest_records_start_and_moves_pointer() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    update = service.start_quest(state, 1)

    assert update is not None and update.started is True
    progress = service.get_quest_progress(state, 1)
    assert progress is not None
    assert progress.status == "in_progress"
    assert progress.started_at == "2026-01-01T00:00:00+00:00"
    assert state.current_quest_number == 1


def test_start_quest_is_harmless_when_not_available() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    service.start_quest(state, 1)

    assert service.start_quest(state, 1) is None
    assert service.start_quest(state, 3) is None
    assert service.get_quest_status(state, 1) == "in_progress"
    assert service.get_quest_status(state, 3) == "locked"
    assert state.current_quest_number == 1


def test_end_to_end_first_quest() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    service.start_quest(state, 1)
    update = service.complete_quest(state, 1, 100)

    assert update is not None
    assert update.completed is True
    assert update.unlocked_quest_number == 2
    progress = service.get_quest_progress(state, 1)
    assert progress is not None
    assert progress.status == "completed"
    assert progress.xp_earned == 100
    assert progress.completed_at == "2026-01-01T00:00:00+00:00"
    assert service.get_quest_status(state, 2) == "available"
    assert state.current_quest_number == 2
    assert state.pending_quest_complete == PendingQuestComplete(
        quest_number=1, quest_title="Character Creation", xp_earned=100
    )


def test_complete_without_start_uses_catalog_reward() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    service.complete_quest(state, 1)

    update = service.complete_quest(state, 2)

    assert update is not None and update.xp_earned == 25
    assert service.get_quest_status(state, 3) == "available"
    assert state.pending_quest_complete is not None
    assert state.pending_quest_complete.quest_title == "The Epic Artifact"


def test_completion_sets_pointer_to_next_quest_regardless_of_current() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    for number in range(1, 4):
        service.complete_quest(state, number)
    service.start_quest(state, 4)
    state.current_quest_number = 1

    service.complete_quest(state, 4)

    assert state.current_quest_number == 5


def test_final_quest_keeps_pointer_on_last_quest() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    for number in range(1, 9):
        service.complete_quest(state, number)

    assert state.current_quest_number == 8
    assert service.completed_count(state) == 8
    assert service.total_quest_xp(state) == 460


def test_completing_locked_quest_is_rejected_without_changes() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    with pytest.raises(QuestLockedError):
        service.complete_quest(state, 5)

    assert service.get_quest_status(state, 5) == "locked"
    assert service.get_quest_status(state, 6) == "locked"
    assert state.current_quest_number == 1
    assert state.pending_quest_complete is None


def test_recompleting_a_quest_is_a_no_op() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    service.complete_quest(state, 1, 100)
    service.acknowledge_quest_complete(state)

    assert service.complete_quest(state, 1, 500) is None
    progress = service.get_quest_progress(state, 1)
    assert progress is not None and progress.xp_earned == 100
    assert state.pending_quest_complete is None


def test_newer_completion_overwrites_pending_celebration() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    service.complete_quest(state, 1)
    service.complete_quest(state, 2)

    assert state.pending_quest_complete is not None
    assert state.pending_quest_complete.quest_number == 2

    service.acknowledge_quest_complete(state)
    assert state.pending_quest_complete is None


def test_unknown_quest_numbers_are_locked_and_ignored(caplog) -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    assert service.get_quest_status(state, 0) == "locked"
    assert service.get_quest_status(state, 99) == "locked"
    assert service.get_quest_progress(state, 99) is None
    assert service.start_quest(state, 99) is None
    assert service.start_quest(state, True) is None
    assert service.start_quest(state, 1.0) is None
    assert service.get_quest_status(state, True) == "locked"
    assert service.update_quest_progress(state, 1.0, {"seen": True}) is False
    with caplog.at_level("WARNING"):
        assert service.complete_quest(state, 99) is None
        assert service.complete_quest(state, True) is None
    assert "unknown quest" in caplog.text
    assert state.current_quest_number == 1
    assert service.get_quest_status(state, 1) == "available"


def test_negative_xp_earned_is_rejected() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    with pytest.raises(ValueError):
        service.complete_quest(state, 1, -5)
    assert service.get_quest_status(state, 1) == "available"


def test_update_quest_progress_merges_data() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    assert service.update_quest_progress(state, 2, {"videos_watched": 1}) is True
    assert service.update_quest_progress(state, 2, {"specs_viewed": True}) is True
    assert service.update_quest_progress(state, 42, {"x": 1}) is False

    progress = service.get_quest_progress(state, 2)
    assert progress is not None
    assert progress.progress_data == {"videos_watched": 1, "specs_viewed": True}
    assert progress.status == "locked"


def test_current_quest_and_journey_view() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    service.complete_quest(state, 1)

    current = service.get_current_quest(state)
    assert current is not None and current.title == "The Epic Artifact"

    view = service.build_journey_view(state)
    assert view.total_quests == 8
    assert view.completed_count == 1
    assert view.total_quest_xp == 100
    assert [quest.status for quest in view.quests[:3]] == ["completed", "available", "locked"]
    assert [quest.number for quest in view.quests if quest.is_current] == [2]


def test_reset_restores_initial_state() -> None:
    service = _build_quest_service()
    state = _initialized_state(service)
    for number in range(1, 5):
        service.complete_quest(state, number)
    service.start_quest(state, 5)

    service.reset(state)

    fresh = service.new_state()
    assert state == fresh
    assert service.get_quest_status(state, 1) == "available"
    assert state.current_quest_number == 1
    assert state.pending_quest_complete is None


@pytest.mark.parametrize("xp_earned", [50.5, True, "10"])
def test_non_integer_xp_earned_is_rejected_before_completion(xp_earned) -> None:
    service = _build_quest_service()
    state = _initialized_state(service)

    with pytest.raises(InvalidXPAmountError):
        service.complete_quest(state, 1, xp_earned)
    assert service.get_quest_status(state, 1) == "available"
    assert service.get_quest_status(state, 2) == "locked"
    assert state.pending_quest_complete is None
