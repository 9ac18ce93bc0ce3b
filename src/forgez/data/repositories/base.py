"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from forgez.data import paths
from forgez.data.errors import DataValidationError
from forgez.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Lazy loading and caching shared by every definition repository."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        return paths.get_definitions_path(self._base_path) / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            self._definitions = self._build(self._load_raw())
        return self._definitions

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        try:
            return self._loaded()[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def find(self, def_id: str) -> T | None:
        """Return a definition by id, or None when it does not exist."""
        return self._loaded().get(def_id)

    def all(self) -> List[T]:
        """Return all definitions sorted deterministically by id."""
        definitions = self._loaded()
        return [definitions[key] for key in sorted(definitions.keys())]

    def ids(self) -> List[str]:
        return sorted(self._loaded().keys())

    def _entries(self, raw: dict[str, object], section: str) -> dict[str, dict[str, object]]:
        """Return the ``section`` object with every entry checked to be an object."""
        container = self._require_mapping(raw.get(section), f"{self._filename}.{section}")
        entries: dict[str, dict[str, object]] = {}
        for key, payload in container.items():
            entry = self._require_mapping(payload, f"{self._filename}.{section}['{key}']")
            entry_id = entry.get("id", key)
            if entry_id != key:
                raise DataValidationError(
                    f"{self._filename}.{section}['{key}'] id must match key (found '{entry_id}')."
                )
            entries[key] = entry
        return entries

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value:
            raise DataValidationError(f"{context} must be a non-empty string.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(entry)
        return result

    @staticmethod
    def _require_non_negative_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise DataValidationError(f"{context} must be a non-negative integer.")
        return value
