from pathlib import Path

import pytest

from heroforge.data import ConfigLookup
from heroforge.data.errors import DataReferenceError, DataValidationError, DefinitionFileMissingError
from tests.helpers.definitions import (
    CLASSES,
    hero_payloads,
    make_definitions_dir,
    seed_hero_definitions,
    write_json,
)


def test_get_returns_definition_or_none(tmp_path: Path) -> None:
    lookup = ConfigLookup(seed_hero_definitions(make_definitions_dir(tmp_path)))

    assert lookup.get("classes", "paladin").name == "Paladin"
    assert lookup.get("specializations", "paladin_protection").role == "tank"
    assert lookup.get("classes", "bard") is None


def test_absent_table_is_none_and_empty_table_is_empty(tmp_path: Path) -> None:
    definitions_dir = make_definitions_dir(tmp_path)
    write_json(definitions_dir / "classes.json", CLASSES)
    write_json(definitions_dir / "bloodlines.json", {"bloodlines": {}})
    lookup = ConfigLookup(definitions_dir)

    assert lookup.table("talents") is None
    assert lookup.get("talents", "paladin") is None
    assert lookup.table("bloodlines") == {}
    assert lookup.has_table("classes") is True
    assert lookup.has_table("talents") is False


def test_present_but_empty_definition_is_not_none() -> None:
    lookup = ConfigLookup.from_payloads({"talents": {"rogue": {}}})

    schema = lookup.get("talents", "rogue")

    assert schema is not None
    assert schema.trees == {}


def test_unknown_table_name_raises_key_error() -> None:
    with pytest.raises(KeyError):
        ConfigLookup.from_payloads({}).table("items")


def test_from_payloads_ignores_bundled_files() -> None:
    lookup = ConfigLookup.from_payloads({"classes": CLASSES})

    assert lookup.table("specializations") is None
    assert lookup.starting_stats() is None
    assert set(lookup.table("classes")) == set(CLASSES)


def test_from_payloads_validates_content() -> None:
    with pytest.raises(DataValidationError):
        ConfigLookup.from_payloads({"classes": {"monk": {"resourceType": "mana"}}})


def test_table_preserves_source_order() -> None:
    lookup = ConfigLookup.from_payloads(hero_payloads())

    assert list(lookup.table("classes")) == list(CLASSES)


def test_starting_stats_returns_copy(tmp_path: Path) -> None:
    lookup = ConfigLookup(seed_hero_definitions(make_definitions_dir(tmp_path)))

    stats = lookup.starting_stats()
    stats["health"] = 1

    assert lookup.starting_stats()["health"] == 100


def test_starting_stats_none_without_world_config(tmp_path: Path) -> None:
    lookup = ConfigLookup(seed_hero_definitions(make_definitions_dir(tmp_path), world_config=None))

    assert lookup.starting_stats() is None


def test_reload_reads_updated_file(tmp_path: Path) -> None:
    definitions_dir = seed_hero_definitions(make_definitions_dir(tmp_path))
    lookup = ConfigLookup(definitions_dir)
    assert lookup.get("classes", "monk") is None

    write_json(definitions_dir / "classes.json", {**CLASSES, "monk": {"name": "Monk"}})
    fresh = lookup.reload("classes")

    assert "monk" in fresh
    assert lookup.get("classes", "monk").name == "Monk"


def test_reload_failure_keeps_previous_table(tmp_path: Path) -> None:
    definitions_dir = seed_hero_definitions(make_definitions_dir(tmp_path))
    lookup = ConfigLookup(definitions_dir)
    assert lookup.get("classes", "paladin") is not None

    write_json(definitions_dir / "classes.json", {"paladin": {"name": 7}})
    with pytest.raises(DataValidationError):
        lookup.reload("classes")

    assert lookup.get("classes", "paladin").name == "Paladin"


def test_reload_of_absent_table_raises(tmp_path: Path) -> None:
    lookup = ConfigLookup(make_definitions_dir(tmp_path))

    with pytest.raises(DefinitionFileMissingError):
        lookup.reload("classes")


def test_validate_references_passes_for_consistent_tables() -> None:
    ConfigLookup.from_payloads(hero_payloads()).validate_references()


def test_validate_references_flags_missing_specialization() -> None:
    classes = {"bard": {"name": "Bard", "availableSpecs": ["lute"]}}
    lookup = ConfigLookup.from_payloads(hero_payloads(classes=classes))

    with pytest.raises(DataReferenceError):
        lookup.validate_references()
