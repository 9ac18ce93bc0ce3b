"""Repositories for the archetype quiz definitions."""
from __future__ import annotations

from typing import Dict

from forgez.core.types import ARCHETYPE_IDS
from forgez.data.errors import DataReferenceError, DataValidationError
from forgez.data.repositories.base import RepositoryBase
from forgez.domain.defs import ArchetypeDef, DomainInterestDef, FocusAreaDef, GamePreferenceDef


class ArchetypesRepository(RepositoryBase[ArchetypeDef]):
    """Loads the four work-style archetypes."""

    def __init__(self, base_path=None) -> None:
        super().__init__("archetypes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArchetypeDef]:
        definitions: Dict[str, ArchetypeDef] = {}
        for archetype_id, entry in self._entries(raw, "archetypes").items():
            ctx = f"archetype '{archetype_id}'"
            if archetype_id not in ARCHETYPE_IDS:
                raise DataValidationError(f"{ctx} is not one of {', '.join(ARCHETYPE_IDS)}.")
            definitions[archetype_id] = ArchetypeDef(
                id=archetype_id,  # type: ignore[arg-type]
                name=self._require_str(entry.get("name"), f"{ctx} name"),
                tagline=self._require_str(entry.get("tagline"), f"{ctx} tagline"),
                description=self._require_str(entry.get("description"), f"{ctx} description"),
                traits=tuple(self._require_str_list(entry.get("traits", []), f"{ctx} traits")),
                color=self._require_str(entry.get("color"), f"{ctx} color"),
                icon=self._require_str(entry.get("icon"), f"{ctx} icon"),
            )
        return definitions


class GamePreferencesRepository(RepositoryBase[GamePreferenceDef]):
    """Loads game-genre answers and the archetype each one maps to."""

    def __init__(self, *, archetypes_repo: ArchetypesRepository, base_path=None) -> None:
        super().__init__("game_preferences.json", base_path)
        self._archetypes_repo = archetypes_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, GamePreferenceDef]:
        definitions: Dict[str, GamePreferenceDef] = {}
        for preference_id, entry in self._entries(raw, "game_preferences").items():
            ctx = f"game preference '{preference_id}'"
            archetype = self._require_str(entry.get("archetype"), f"{ctx} archetype")
            if self._archetypes_repo.find(archetype) is None:
                raise DataReferenceError(f"{ctx} references unknown archetype '{archetype}'.")
            definitions[preference_id] = GamePreferenceDef(
                id=preference_id,
                label=self._require_str(entry.get("label"), f"{ctx} label"),
                description=self._require_str(entry.get("description"), f"{ctx} description"),
                archetype=archetype,  # type: ignore[arg-type]
                icon=self._require_str(entry.get("icon"), f"{ctx} icon"),
            )
        return definitions


class DomainInterestsRepository(RepositoryBase[DomainInterestDef]):
    def __init__(self, base_path=None) -> None:
        super().__init__("domain_interests.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, DomainInterestDef]:
        definitions: Dict[str, DomainInterestDef] = {}
        for interest_id, entry in self._entries(raw, "domain_interests").items():
            ctx = f"domain interest '{interest_id}'"
            definitions[interest_id] = DomainInterestDef(
                id=interest_id,
                label=self._require_str(entry.get("label"), f"{ctx} label"),
                description=self._require_str(entry.get("description"), f"{ctx} description"),
                icon=self._require_str(entry.get("icon"), f"{ctx} icon"),
                color=self._require_str(entry.get("color"), f"{ctx} color"),
            )
        return definitions


class FocusAreasRepository(RepositoryBase[FocusAreaDef]):
    def __init__(self, base_path=None) -> None:
        super().__init__("focus_areas.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, FocusAreaDef]:
        definitions: Dict[str, FocusAreaDef] = {}
        for area_id, entry in self._entries(raw, "focus_areas").items():
            ctx = f"focus area '{area_id}'"
            definitions[area_id] = FocusAreaDef(
                id=area_id,
                label=self._require_str(entry.get("label"), f"{ctx} label"),
                description=self._require_str(entry.get("description"), f"{ctx} description"),
                icon=self._require_str(entry.get("icon"), f"{ctx} icon"),
            )
        return definitions
