"""Archetype quiz definition data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from forgez.core.types import ArchetypeId


@dataclass(frozen=True, slots=True)
class ArchetypeDef:
    id: ArchetypeId
    name: str
    tagline: str
    description: str
    traits: Tuple[str, ...]
    color: str
    icon: str


@dataclass(frozen=True, slots=True)
class GamePreferenceDef:
    """A quiz answer about favourite game genre; it decides the archetype."""

    id: str
    label: str
    description: str
    archetype: ArchetypeId
    icon: str


@dataclass(frozen=True, slots=True)
class DomainInterestDef:
    id: str
    label: str
    description: str
    icon: str
    color: str


@dataclass(frozen=True, slots=True)
class FocusAreaDef:
    id: str
    label: str
    description: str
    icon: str
