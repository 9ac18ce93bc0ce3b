"""Storage for per-session progression snapshots."""
from __future__ import annotations

import copy
import re
import shutil
from pathlib import Path
from typing import Any, Dict, Literal, Tuple

from forgez.data.errors import DataLoadError, SessionStoreError
from forgez.data.json_loader import load_json, write_json

Container = Literal["quests", "xp", "archetype"]
CONTAINERS: Tuple[Container, ...] = ("quests", "xp", "archetype")

_SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class SessionStore:
    """Keeps one JSON snapshot per state container and session."""

    def load(self, session_id: str, container: Container) -> Dict[str, Any] | None:
        """Return the stored payload, or None when nothing was saved yet."""
        raise NotImplementedError

    def save(self, session_id: str, container: Container, payload: Dict[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, session_id: str) -> None:
        """Drop every container of the session; missing sessions are ignored."""
        raise NotImplementedError

    def exists(self, session_id: str) -> bool:
        return any(self.load(session_id, container) is not None for container in CONTAINERS)

    @staticmethod
    def validate_session_id(session_id: str) -> str:
        if not isinstance(session_id, str) or not _SESSION_ID_PATTERN.match(session_id):
            raise ValueError(
                "Session id must be 1-64 characters of letters, digits, '-' or '_'."
            )
        return session_id

    @staticmethod
    def _validate_container(container: str) -> None:
        if container not in CONTAINERS:
            raise ValueError(f"Unknown state container '{container}'.")


class InMemorySessionStore(SessionStore):
    """Process-local store; payloads are deep-copied in and out."""

    def __init__(self) -> None:
        self._payloads: Dict[Tuple[str, str], Dict[str, Any]] = {}

    def load(self, session_id: str, container: Container) -> Dict[str, Any] | None:
        self.validate_session_id(session_id)
        self._validate_container(container)
        payload = self._payloads.get((session_id, container))
        return copy.deepcopy(payload) if payload is not None else None

    def save(self, session_id: str, container: Container, payload: Dict[str, Any]) -> None:
        self.validate_session_id(session_id)
        self._validate_container(container)
        self._payloads[(session_id, container)] = copy.deepcopy(payload)

    def delete(self, session_id: str) -> None:
        self.validate_session_id(session_id)
        for container in CONTAINERS:
            self._payloads.pop((session_id, container), None)


class JsonFileSessionStore(SessionStore):
    """Writes ``<base_dir>/<session_id>/<container>.json`` files."""

    def __init__(self, base_dir: Path | str) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def load(self, session_id: str, container: Container) -> Dict[str, Any] | None:
        path = self._container_path(session_id, container)
        if not path.exists():
            return None
        try:
            payload = load_json(path)
        except DataLoadError as exc:
            raise SessionStoreError(f"Snapshot for session '{session_id}' is unreadable: {exc}") from exc
        if not isinstance(payload, dict):
            raise SessionStoreError(f"Snapshot {path} must contain a JSON object.")
        return payload

    def save(self, session_id: str, container: Container, payload: Dict[str, Any]) -> None:
        path = self._container_path(session_id, container)
        try:
            write_json(path, payload)
        except OSError as exc:
            raise SessionStoreError(f"Unable to write snapshot {path}: {exc}") from exc

    def delete(self, session_id: str) -> None:
        session_dir = self._session_dir(session_id)
        if session_dir.exists():
            shutil.rmtree(session_dir)

    def _session_dir(self, session_id: str) -> Path:
        return self._base_dir / self.validate_session_id(session_id)

    def _container_path(self, session_id: str, container: Container) -> Path:
        self._validate_container(container)
        return self._session_dir(session_id) / f"{container}.json"
