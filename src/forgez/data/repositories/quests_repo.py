"""Repository for the ordered quest catalog."""
from __future__ import annotations

from typing import Dict, List

from forgez.data.errors import DataValidationError
from forgez.data.repositories.base import RepositoryBase
from forgez.domain.defs import QuestDef


class QuestsRepository(RepositoryBase[QuestDef]):
    """Loads quest definitions keyed by quest number.

    Numbers must run from 1 to N with no gaps, since unlocking walks the
    catalog one number at a time.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("quests.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, QuestDef]:
        definitions: Dict[str, QuestDef] = {}
        container = self._require_mapping(raw.get("quests"), "quests.json.quests")
        for key, payload in container.items():
            ctx = f"quest '{key}'"
            quest_map = self._require_mapping(payload, ctx)
            number = quest_map.get("number")
            if isinstance(number, bool) or not isinstance(number, int) or number < 1:
                raise DataValidationError(f"{ctx} number must be a positive integer.")
            if str(number) != key:
                raise DataValidationError(f"{ctx} number must match key (found {number}).")
            definitions[key] = QuestDef(
                number=number,
                title=self._require_str(quest_map.get("title"), f"{ctx} title"),
                subtitle=self._require_str(quest_map.get("subtitle"), f"{ctx} subtitle"),
                description=self._require_str(quest_map.get("description"), f"{ctx} description"),
                xp_reward=self._require_non_negative_int(quest_map.get("xp_reward"), f"{ctx} xp_reward"),
                icon=self._require_str(quest_map.get("icon", "Circle"), f"{ctx} icon"),
            )
        if not definitions:
            raise DataValidationError("quests.json must define at least one quest.")
        expected = {str(number) for number in range(1, len(definitions) + 1)}
        if set(definitions) != expected:
            raise DataValidationError("quests.json quest numbers must run from 1 with no gaps.")
        return definitions

    def get(self, number: int) -> QuestDef:  # type: ignore[override]
        """Return the quest with ``number``; raises KeyError when unknown."""
        return super().get(str(number))

    def find(self, number: int) -> QuestDef | None:  # type: ignore[override]
        if isinstance(number, bool) or not isinstance(number, int):
            return None
        return super().find(str(number))

    def all(self) -> List[QuestDef]:
        return sorted(self._loaded().values(), key=lambda quest: quest.number)

    def count(self) -> int:
        return len(self._loaded())
