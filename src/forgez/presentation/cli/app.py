"""Console-driven menu loop over a single local journey session."""
from __future__ import annotations

from typing import List, Literal, Sequence, Tuple

from forgez.core.log import get_logger, setup_logging
from forgez.data.session_store import JsonFileSessionStore
from forgez.domain.state import JourneyState
from forgez.presentation.cli import config, render
from forgez.services.errors import ProgressionError
from forgez.services.session_service import SessionService, build_session_service

MenuAction = Literal["start_quest", "complete_quest", "quiz", "reset", "quit"]

logger = get_logger(__name__)


def main() -> None:
    """Start the interactive CLI session."""
    settings = config.load_config()
    setup_logging(settings["log_level"])
    sessions = build_session_service(JsonFileSessionStore(config.get_sessions_dir()))
    run_session(sessions, settings["session_id"])
    print("Goodbye!")


def run_session(sessions: SessionService, session_id: str) -> None:
    running = True
    while running:
        with sessions.open(session_id) as state:
            _show_dashboard(sessions, state)
            options = _main_menu_options(state)
        action = _prompt_menu(options)
        if action == "quit":
            running = False
            continue
        try:
            with sessions.open(session_id) as state:
                _dispatch(sessions, state, action)
        except ProgressionError as exc:
            print(str(exc))


def _main_menu_options(state: JourneyState) -> List[Tuple[str, MenuAction]]:
    options: List[Tuple[str, MenuAction]] = []
    statuses = [progress.status for progress in state.quests.quest_progress]
    if "available" in statuses:
        options.append(("Start Quest", "start_quest"))
    if "available" in statuses or "in_progress" in statuses:
        options.append(("Complete Quest", "complete_quest"))
    if not state.archetype.is_complete:
        options.append(("Take Archetype Quiz", "quiz"))
    options.append(("Reset Journey", "reset"))
    options.append(("Quit", "quit"))
    return options


def _prompt_menu(options: Sequence[Tuple[str, MenuAction]]) -> MenuAction:
    while True:
        print()
        for index, (label, _) in enumerate(options, start=1):
            print(f"{index}. {label}")
        choice = input("Select an option: ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1][1]
        print(f"Invalid selection. Please enter 1-{len(options)}.")


def _show_dashboard(sessions: SessionService, state: JourneyState) -> None:
    view = sessions.journey.build_dashboard(state)
    for line in render.render_dashboard(view, debug=config.debug_enabled()):
        print(line)
    for line in render.format_notifications(view):
        print(f"** {line} **")
    sessions.journey.acknowledge_all(state)


def _dispatch(sessions: SessionService, state: JourneyState, action: MenuAction) -> None:
    journey = sessions.journey
    if action == "start_quest":
        number = _prompt_quest_number(state, ("available",))
        if number is not None:
            update = journey.quests.start_quest(state.quests, number)
            if update is not None:
                print(f"Started quest {update.quest_number}: {update.quest_title}")
    elif action == "complete_quest":
        number = _prompt_quest_number(state, ("available", "in_progress"))
        if number is not None:
            journey.complete_quest_and_award(state, number)
    elif action == "quiz":
        _run_quiz(sessions, state)
    elif action == "reset":
        if input("Reset all progress? (y/N): ").strip().lower() == "y":
            journey.reset(state)
            logger.info("Journey %s reset", state.session_id)


def _prompt_quest_number(state: JourneyState, statuses: Sequence[str]) -> int | None:
    candidates = [
        progress.quest_number for progress in state.quests.quest_progress if progress.status in statuses
    ]
    if not candidates:
        print("No quests to choose from.")
        return None
    raw = input(f"Quest number ({', '.join(str(n) for n in candidates)}): ").strip()
    if not raw.isdigit() or int(raw) not in candidates:
        print("Invalid quest number.")
        return None
    return int(raw)


def _run_quiz(sessions: SessionService, state: JourneyState) -> None:
    archetypes = sessions.journey.archetypes
    preference = _prompt_choice("Which games do you enjoy most?", archetypes.game_preference_options())
    archetypes.set_game_preference(state.archetype, preference)
    interest = _prompt_choice("Which domain excites you?", archetypes.domain_interest_options())
    archetypes.set_domain_interest(state.archetype, interest)
    area = _prompt_choice("What do you want to learn first?", archetypes.focus_area_options())
    archetypes.set_focus_area(state.archetype, area)
    archetype_id = archetypes.complete_quiz(state.archetype)
    archetype = archetypes.get_archetype(state.archetype)
    print(f"You are {archetype.name if archetype else archetype_id}!")


def _prompt_choice(question: str, options: Sequence[Tuple[str, str]]) -> str:
    while True:
        print(question)
        for index, (_, label) in enumerate(options, start=1):
            print(f"{index}. {label}")
        choice = input("Select an option: ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1][0]
        print(f"Invalid selection. Please enter 1-{len(options)}.")
