"""Serialization helpers for the per-container progression snapshots."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from forgez.core.types import ARCHETYPE_IDS, QUEST_STATUSES, XP_SOURCES, ArchetypeId, QuestStatus, XPSource
from forgez.data.repositories import QuestsRepository
from forgez.domain.archetype_state import ArchetypeState
from forgez.domain.quest_state import QuestJourneyState, QuestProgress
from forgez.domain.xp_state import XPState, XPTransaction
from forgez.services.errors import SaveLoadError

SavePayload = Dict[str, Any]


class SaveService:
    """Converts state containers to/from validated, versioned payloads.

    Pending celebrations and the recent XP gain are session-local and are
    never written, so a reload does not replay an old toast.
    """

    SAVE_VERSION = 1

    def __init__(self, *, quests_repo: QuestsRepository) -> None:
        self._quests_repo = quests_repo

    def serialize_quests(self, state: QuestJourneyState) -> SavePayload:
        return {
            "save_version": self.SAVE_VERSION,
            "quest_progress": [
                {
                    "quest_number": progress.quest_number,
                    "status": progress.status,
                    "xp_earned": progress.xp_earned,
                    "progress_data": dict(progress.progress_data),
                    "started_at": progress.started_at,
                    "completed_at": progress.completed_at,
                }
                for progress in state.quest_progress
            ],
            "current_quest_number": state.current_quest_number,
            "is_initialized": state.is_initialized,
        }

    def deserialize_quests(self, payload: Mapping[str, Any]) -> QuestJourneyState:
        self._check_header(payload, "quests")
        raw_progress = payload.get("quest_progress")
        if not isinstance(raw_progress, list):
            raise SaveLoadError("quests.quest_progress must be a list.")
        progress_list = [
            self._coerce_quest_progress(entry, f"quests.quest_progress[{index}]")
            for index, entry in enumerate(raw_progress)
        ]
        expected = [quest.number for quest in self._quests_repo.all()]
        found = sorted(progress.quest_number for progress in progress_list)
        if found != expected:
            raise SaveLoadError("quests.quest_progress must hold exactly one record per quest.")
        progress_list.sort(key=lambda progress: progress.quest_number)

        current = self._require_int(payload.get("current_quest_number"), "quests.current_quest_number")
        if current not in expected:
            raise SaveLoadError(f"quests.current_quest_number {current} is not a known quest.")
        return QuestJourneyState(
            quest_progress=progress_list,
            current_quest_number=current,
            is_initialized=self._require_bool(payload.get("is_initialized"), "quests.is_initialized"),
        )

    def serialize_xp(self, state: XPState) -> SavePayload:
        return {
            "save_version": self.SAVE_VERSION,
            "total_xp": state.total_xp,
            "transactions": [
                {
                    "id": tx.id,
                    "amount": tx.amount,
                    "source": tx.source,
                    "source_id": tx.source_id,
                    "description": tx.description,
                    "created_at": tx.created_at,
                }
                for tx in state.transactions
            ],
        }

    def deserialize_xp(self, payload: Mapping[str, Any]) -> XPState:
        self._check_header(payload, "xp")
        total_xp = self._require_non_negative_int(payload.get("total_xp"), "xp.total_xp")
        raw_transactions = payload.get("transactions", [])
        if not isinstance(raw_transactions, list):
            raise SaveLoadError("xp.transactions must be a list.")
        transactions: List[XPTransaction] = []
        for index, entry in enumerate(raw_transactions):
            ctx = f"xp.transactions[{index}]"
            if not isinstance(entry, Mapping):
                raise SaveLoadError(f"{ctx} must be an object.")
            transactions.append(
                XPTransaction(
                    id=self._require_str(entry.get("id"), f"{ctx}.id"),
                    amount=self._require_non_negative_int(entry.get("amount"), f"{ctx}.amount"),
                    source=self._require_source(entry.get("source"), f"{ctx}.source"),
                    created_at=self._require_str(entry.get("created_at"), f"{ctx}.created_at"),
                    source_id=self._coerce_optional_str(entry.get("source_id"), f"{ctx}.source_id"),
                    description=self._coerce_optional_str(entry.get("description"), f"{ctx}.description"),
                )
            )
        return XPState(total_xp=total_xp, transactions=transactions)

    def serialize_archetype(self, state: ArchetypeState) -> SavePayload:
        return {
            "save_version": self.SAVE_VERSION,
            "archetype": state.archetype,
            "game_preference": state.game_preference,
            "domain_interest": state.domain_interest,
            "focus_area": state.focus_area,
            "epic_object_id": state.epic_object_id,
            "quiz_answers": dict(state.quiz_answers),
            "is_complete": state.is_complete,
        }

    def deserialize_archetype(self, payload: Mapping[str, Any]) -> ArchetypeState:
        self._check_header(payload, "archetype")
        quiz_answers = payload.get("quiz_answers", {})
        if not isinstance(quiz_answers, Mapping):
            raise SaveLoadError("archetype.quiz_answers must be an object.")
        return ArchetypeState(
            archetype=self._coerce_archetype(payload.get("archetype")),
            game_preference=self._coerce_optional_str(payload.get("game_preference"), "archetype.game_preference"),
            domain_interest=self._coerce_optional_str(payload.get("domain_interest"), "archetype.domain_interest"),
            focus_area=self._coerce_optional_str(payload.get("focus_area"), "archetype.focus_area"),
            epic_object_id=self._coerce_optional_str(payload.get("epic_object_id"), "archetype.epic_object_id"),
            quiz_answers=dict(quiz_answers),
            is_complete=self._require_bool(payload.get("is_complete", False), "archetype.is_complete"),
        )

    def _check_header(self, payload: Mapping[str, Any], context: str) -> None:
        if not isinstance(payload, Mapping):
            raise SaveLoadError(f"{context} snapshot must be a JSON object.")
        if payload.get("save_version") != self.SAVE_VERSION:
            raise SaveLoadError(f"{context} snapshot has unsupported save_version {payload.get('save_version')!r}.")

    def _coerce_quest_progress(self, value: Any, context: str) -> QuestProgress:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        progress_data = value.get("progress_data", {})
        if not isinstance(progress_data, Mapping):
            raise SaveLoadError(f"{context}.progress_data must be an object.")
        return QuestProgress(
            quest_number=self._require_int(value.get("quest_number"), f"{context}.quest_number"),
            status=self._require_status(value.get("status"), f"{context}.status"),
            xp_earned=self._require_non_negative_int(value.get("xp_earned", 0), f"{context}.xp_earned"),
            progress_data=dict(progress_data),
            started_at=self._coerce_optional_str(value.get("started_at"), f"{context}.started_at"),
            completed_at=self._coerce_optional_str(value.get("completed_at"), f"{context}.completed_at"),
        )

    @staticmethod
    def _require_status(value: Any, context: str) -> QuestStatus:
        if value not in QUEST_STATUSES:
            raise SaveLoadError(f"{context} has invalid quest status {value!r}.")
        return value

    @staticmethod
    def _require_source(value: Any, context: str) -> XPSource:
        if value not in XP_SOURCES:
            raise SaveLoadError(f"{context} has invalid XP source {value!r}.")
        return value

    @staticmethod
    def _coerce_archetype(value: Any) -> ArchetypeId | None:
        if value is None:
            return None
        if value not in ARCHETYPE_IDS:
            raise SaveLoadError(f"archetype.archetype has invalid value {value!r}.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _coerce_optional_str(value: Any, context: str) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string or null.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    def _require_non_negative_int(self, value: Any, context: str) -> int:
        number = self._require_int(value, context)
        if number < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return number

    @staticmethod
    def _require_bool(value: Any, context: str) -> bool:
        if not isinstance(value, bool):
            raise SaveLoadError(f"{context} must be a boolean.")
        return value
