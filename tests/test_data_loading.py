import json
from pathlib import Path

import pytest

from forgez.data.errors import DataLoadError, DataReferenceError, DataValidationError
from forgez.data.repositories import (
    ArchetypesRepository,
    DomainInterestsRepository,
    FocusAreasRepository,
    GamePreferencesRepository,
    QuestsRepository,
)


def test_packaged_quest_catalog_is_ordered() -> None:
    repo = QuestsRepository()
    quests = repo.all()

    assert [quest.number for quest in quests] == list(range(1, 9))
    assert quests[0].title == "Character Creation"
    assert [quest.xp_reward for quest in quests] == [100, 25, 75, 10, 25, 100, 25, 100]
    assert repo.get(6).title == "Leader's Wisdom"
    assert repo.find(9) is None
    assert repo.count() == 8
    with pytest.raises(KeyError):
        repo.get(42)


def test_packaged_archetype_definitions_are_consistent() -> None:
    archetypes_repo = ArchetypesRepository()
    preferences_repo = GamePreferencesRepository(archetypes_repo=archetypes_repo)

    assert archetypes_repo.ids() == ["BUILDER", "COMPETITOR", "EXPLORER", "STRATEGIST"]
    mapped = {pref.archetype for pref in preferences_repo.all()}
    assert mapped == set(archetypes_repo.ids())
    assert len(DomainInterestsRepository().all()) == 4
    assert FocusAreasRepository().get("who_operates").label == "Who Operates It"


def test_quests_repo_rejects_gaps(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "quests.json",
        {"quests": {"1": _quest(1), "3": _quest(3)}},
    )
    with pytest.raises(DataValidationError):
        QuestsRepository(base_path=definitions_dir).all()


def test_quests_repo_rejects_mismatched_key(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "quests.json", {"quests": {"1": _quest(2)}})
    with pytest.raises(DataValidationError):
        QuestsRepository(base_path=definitions_dir).all()


def test_quests_repo_rejects_negative_reward(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    quest = _quest(1)
    quest["xp_reward"] = -5
    _write_json(definitions_dir / "quests.json", {"quests": {"1": quest}})
    with pytest.raises(DataValidationError):
        QuestsRepository(base_path=definitions_dir).all()


def test_custom_catalog_size_is_respected(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "quests.json",
        {"quests": {str(n): _quest(n) for n in range(1, 4)}},
    )
    repo = QuestsRepository(base_path=definitions_dir)
    assert [quest.number for quest in repo.all()] == [1, 2, 3]


def test_game_preference_must_reference_known_archetype(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "archetypes.json",
        {
            "archetypes": {
                "BUILDER": {
                    "name": "The Builder",
                    "tagline": "Creating is understanding",
                    "description": "Hands on.",
                    "traits": ["Creative"],
                    "color": "#F97316",
                    "icon": "Hammer",
                }
            }
        },
    )
    _write_json(
        definitions_dir / "game_preferences.json",
        {
            "game_preferences": {
                "strategy": {
                    "label": "Strategy Games",
                    "description": "Planning",
                    "archetype": "STRATEGIST",
                    "icon": "Map",
                }
            }
        },
    )
    archetypes_repo = ArchetypesRepository(base_path=definitions_dir)
    repo = GamePreferencesRepository(archetypes_repo=archetypes_repo, base_path=definitions_dir)
    with pytest.raises(DataReferenceError):
        repo.all()


def test_archetypes_repo_rejects_unknown_id(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "archetypes.json",
        {
            "archetypes": {
                "DREAMER": {
                    "name": "The Dreamer",
                    "tagline": "x",
                    "description": "x",
                    "traits": [],
                    "color": "#000000",
                    "icon": "Cloud",
                }
            }
        },
    )
    with pytest.raises(DataValidationError):
        ArchetypesRepository(base_path=definitions_dir).all()


def test_missing_and_invalid_files_raise_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    with pytest.raises(DataLoadError):
        FocusAreasRepository(base_path=definitions_dir).all()

    (definitions_dir / "focus_areas.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        FocusAreasRepository(base_path=definitions_dir).all()


def _quest(number: int) -> dict[str, object]:
    return {
        "number": number,
        "title": f"Quest {number}",
        "subtitle": "Sub",
        "description": "Desc",
        "xp_reward": 10,
        "icon": "Circle",
    }


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_json(path: Path, data: dict[str, object]) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
