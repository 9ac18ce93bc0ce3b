"""Per-session loading, locking and saving of journey state."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator

from forgez.core.log import get_logger
from forgez.data.repositories import QuestsRepository
from forgez.data.session_store import SessionStore
from forgez.domain.state import JourneyState
from forgez.services.journey_service import JourneyService, build_journey_service
from forgez.services.save_service import SaveService

logger = get_logger(__name__)


@dataclass(slots=True)
class _SessionLock:
    lock: threading.RLock = field(default_factory=threading.RLock)
    users: int = 0


class SessionService:
    """Serializes mutations per session and saves after each one.

    Live states are kept in memory so the session-local notification fields
    survive between calls; only the durable fields go to the store.
    """

    def __init__(
        self,
        *,
        store: SessionStore,
        journey_service: JourneyService,
        save_service: SaveService,
    ) -> None:
        self._store = store
        self._journey = journey_service
        self._save_service = save_service
        self._states: Dict[str, JourneyState] = {}
        self._locks: Dict[str, _SessionLock] = {}
        self._registry_lock = threading.Lock()

    @property
    def journey(self) -> JourneyService:
        return self._journey

    @contextmanager
    def open(self, session_id: str) -> Iterator[JourneyState]:
        """Yield the session's state under its lock and save on clean exit.

        If the block raises, nothing is saved and the cached state is dropped
        so the next open starts again from the last saved snapshot.
        """
        SessionStore.validate_session_id(session_id)
        with self._session_lock(session_id):
            state = self._states.get(session_id)
            if state is None:
                state = self.load(session_id)
                self._states[session_id] = state
            try:
                yield state
            except BaseException:
                self._states.pop(session_id, None)
                raise
            self.save(state)

    def load(self, session_id: str) -> JourneyState:
        """Rebuild a session from the store, creating missing containers fresh."""
        state = self._journey.new_journey(session_id)
        quests_payload = self._store.load(session_id, "quests")
        if quests_payload is not None:
            state.quests = self._save_service.deserialize_quests(quests_payload)
        xp_payload = self._store.load(session_id, "xp")
        if xp_payload is not None:
            state.xp = self._save_service.deserialize_xp(xp_payload)
        archetype_payload = self._store.load(session_id, "archetype")
        if archetype_payload is not None:
            state.archetype = self._save_service.deserialize_archetype(archetype_payload)
        logger.debug("Loaded session %s", session_id)
        return state

    def save(self, state: JourneyState) -> None:
        self._store.save(state.session_id, "quests", self._save_service.serialize_quests(state.quests))
        self._store.save(state.session_id, "xp", self._save_service.serialize_xp(state.xp))
        self._store.save(
            state.session_id, "archetype", self._save_service.serialize_archetype(state.archetype)
        )

    def delete(self, session_id: str) -> None:
        """Forget the session both in memory and in the store."""
        with self._session_lock(session_id):
            self._states.pop(session_id, None)
            self._store.delete(session_id)

    def evict(self, session_id: str) -> None:
        """Drop the in-memory state; pending notifications are lost."""
        with self._session_lock(session_id):
            self._states.pop(session_id, None)

    @contextmanager
    def _session_lock(self, session_id: str) -> Iterator[None]:
        """Hold the session's lock; the entry is dropped once no caller uses it."""
        with self._registry_lock:
            entry = self._locks.get(session_id)
            if entry is None:
                entry = _SessionLock()
                self._locks[session_id] = entry
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._registry_lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[session_id]


def build_session_service(
    store: SessionStore, definitions_path: Path | str | None = None
) -> SessionService:
    """Construct a SessionService over ``store`` with concrete repositories."""
    return SessionService(
        store=store,
        journey_service=build_journey_service(definitions_path),
        save_service=SaveService(quests_repo=QuestsRepository(base_path=definitions_path)),
    )
