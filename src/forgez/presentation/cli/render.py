"""Text rendering for the journey dashboard."""
from __future__ import annotations

from typing import List

from forgez.core.types import QuestStatus
from forgez.services.journey_service import DashboardView

_STATUS_MARKERS: dict[QuestStatus, str] = {
    "locked": "[ ]",
    "available": "[>]",
    "in_progress": "[~]",
    "completed": "[x]",
}


def progress_bar(percent: float, width: int = 20) -> str:
    """Return a fixed-width bar such as ``[#####---------------]``."""
    clamped = max(0.0, min(100.0, percent))
    filled = int(round(width * clamped / 100))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_level_line(view: DashboardView) -> str:
    level = view.level
    return (
        f"Level {level.level} {progress_bar(level.progress)} "
        f"{level.current}/{level.required} XP (total {view.total_xp})"
    )


def format_quest_lines(view: DashboardView) -> List[str]:
    lines: List[str] = []
    for quest in view.journey.quests:
        pointer = "*" if quest.is_current else " "
        earned = f" +{quest.xp_earned} XP" if quest.status == "completed" else f" ({quest.xp_reward} XP)"
        lines.append(
            f"{pointer}{_STATUS_MARKERS[quest.status]} {quest.number}. {quest.title} - {quest.subtitle}{earned}"
        )
    return lines


def format_notifications(view: DashboardView) -> List[str]:
    lines: List[str] = []
    if view.recent_xp_gain:
        lines.append(f"+{view.recent_xp_gain} XP")
    pending_quest = view.pending_quest_complete
    if pending_quest is not None:
        lines.append(
            f"Quest complete: {pending_quest.quest_title} (+{pending_quest.xp_earned} XP)"
        )
    pending_level = view.pending_level_up
    if pending_level is not None:
        lines.append(f"LEVEL UP! {pending_level.from_level} -> {pending_level.to_level}")
    return lines


def render_dashboard(view: DashboardView, *, debug: bool = False) -> List[str]:
    lines = ["=== Forgez Journey ===", format_level_line(view)]
    if view.archetype is not None:
        suffix = "" if view.quiz_complete else " (quiz in progress)"
        lines.append(f"Archetype: {view.archetype.name} - {view.archetype.tagline}{suffix}")
    else:
        lines.append("Archetype: not chosen yet")
    lines.append(
        f"Quests: {view.journey.completed_count}/{view.journey.total_quests} completed"
    )
    lines.extend(format_quest_lines(view))
    if debug:
        lines.append(
            f"[debug] current_quest={view.journey.current_quest_number} "
            f"quest_xp={view.journey.total_quest_xp} ledger_xp={view.total_xp}"
        )
    return lines
