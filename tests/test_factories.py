import threading
from pathlib import Path

import pytest

from heroforge.core.result import Err, Ok
from heroforge.core.rng import RNG
from heroforge.data import ConfigLookup
from heroforge.domain.entities import TalentProgress
from heroforge.domain.names import FIRST_NAMES, LAST_NAMES
from heroforge.services import ErrorReporter
from heroforge.services.errors import ConfigNotFoundError
from heroforge.services.factories import HeroFactory, HeroIdSequence, build_hero_factory
from tests.helpers.definitions import (
    CLASSES,
    SPECIALIZATIONS,
    ScriptedRNG,
    hero_payloads,
    make_definitions_dir,
    seed_hero_definitions,
    write_json,
)


def _factory(rng=None, **overrides) -> HeroFactory:
    lookup = ConfigLookup.from_payloads(hero_payloads(**overrides))
    return HeroFactory(lookup, rng=rng or RNG(12345), reporter=ErrorReporter())


def test_create_hero_builds_expected_stats_and_loadout() -> None:
    factory = _factory()

    hero = factory.create_hero("paladin", "protection", bloodline_id="frostborn")

    assert hero is not None
    assert hero.id == "hero_0"
    assert hero.class_id == "paladin"
    assert hero.spec_id == "protection"
    assert hero.role == "tank"
    assert hero.level == 1
    assert hero.experience == 0
    assert hero.bloodline_id == "frostborn"
    assert hero.bloodline_name == "Frostborn"
    assert hero.base_stats == {
        "health": 120,
        "maxHealth": 120,
        "attack": 10,
        "defense": 11,
        "speed": 50,
    }
    assert hero.current_stats == hero.base_stats
    assert hero.current_stats is not hero.base_stats
    assert hero.abilities == ("crusader_strike", "judgment", "consecration", "judgment")
    assert hero.resource_type == "mana"
    assert hero.max_resource == 150
    assert hero.current_resource == 150


def test_create_hero_uses_level_argument() -> None:
    hero = _factory().create_hero("rogue", "combat", level=7)

    assert hero.level == 7
    assert hero.experience == 0


def test_health_equals_max_health_for_every_class_and_spec() -> None:
    factory = _factory()
    for class_id, class_data in CLASSES.items():
        for spec_id in class_data["availableSpecs"]:
            hero = factory.create_hero(class_id, spec_id)
            assert hero is not None
            assert hero.base_stats["health"] == hero.base_stats["maxHealth"]
            assert hero.current_stats["health"] == hero.base_stats["maxHealth"]


@pytest.mark.parametrize(
    ("class_id", "spec_id", "expected_type", "expected_current", "expected_max"),
    [
        ("warrior", "arms", "rage", 0, 100),
        ("rogue", "combat", "energy", 100, 100),
        ("hunter", "marksmanship", "focus", 100, 100),
        ("priest", "shadow", "mana", 150, 150),
    ],
)
def test_resource_pool_per_kind(class_id, spec_id, expected_type, expected_current, expected_max) -> None:
    hero = _factory(bloodlines={"bloodlines": {}}).create_hero(class_id, spec_id)

    assert hero.resource_type == expected_type
    assert hero.current_resource == expected_current
    assert hero.max_resource == expected_max


def test_mana_pool_uses_bloodline_intellect() -> None:
    hero = _factory().create_hero("priest", "holy", bloodline_id="void_walker")

    assert hero.base_stats["intellect"] == 4
    assert hero.base_stats["spellPower"] == 8
    assert hero.max_resource == 60
    assert hero.current_resource == 60


def test_mana_pool_keeps_fractional_intellect() -> None:
    bloodlines = {"bloodlines": {"sage": {"name": "Sage", "statBonuses": {"intellect": 12.5}}}}
    hero = _factory(bloodlines=bloodlines).create_hero("priest", "holy", bloodline_id="sage")

    assert hero.base_stats["intellect"] == 12.5
    assert hero.max_resource == 12.5 * 15
    assert hero.current_resource == hero.max_resource


def test_identifiers_increase_by_one_per_creation() -> None:
    factory = _factory()

    first = factory.create_hero("paladin", "holy")
    second = factory.create_hero("warrior", "arms")
    third = factory.create_hero("rogue", "combat")

    assert [first.id, second.id, third.id] == ["hero_0", "hero_1", "hero_2"]


def test_failed_creation_does_not_consume_identifier() -> None:
    factory = _factory()

    factory.create_hero("paladin", "holy")
    assert factory.create_hero("bard", "lute") is None
    hero = factory.create_hero("paladin", "holy")

    assert hero.id == "hero_1"


def test_id_sequence_is_unique_across_threads() -> None:
    sequence = HeroIdSequence()
    allocated: list[str] = []

    def allocate() -> None:
        for _ in range(200):
            allocated.append(sequence.next_id())

    threads = [threading.Thread(target=allocate) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(allocated) == 1600
    assert set(allocated) == {f"hero_{n}" for n in range(1600)}
    assert sequence.next_id() == "hero_1600"


def test_injected_id_sequence_is_used() -> None:
    lookup = ConfigLookup.from_payloads(hero_payloads())
    factory = HeroFactory(lookup, rng=RNG(1), id_sequence=HeroIdSequence(start=41))

    assert factory.create_hero("paladin", "holy").id == "hero_41"


def test_unknown_class_returns_none_and_reports_once() -> None:
    factory = _factory()

    hero = factory.create_hero("bard", "lute")

    assert hero is None
    records = factory.reporter.records
    assert len(records) == 1
    assert records[0].context == "createEntity"
    assert records[0].severity == "error"
    assert records[0].message == "Class not found: bard"


def test_unknown_specialization_returns_none_and_reports_once() -> None:
    factory = _factory()

    hero = factory.create_hero("paladin", "retribution")

    assert hero is None
    assert [record.message for record in factory.reporter.records] == [
        "Specialization not found: paladin_retribution"
    ]


def test_try_create_hero_returns_result_values() -> None:
    factory = _factory()

    ok = factory.try_create_hero("paladin", "holy")
    err = factory.try_create_hero("paladin", "shadow")

    assert isinstance(ok, Ok)
    assert ok.ok is True
    assert ok.value.spec_id == "holy"
    assert isinstance(err, Err)
    assert err.ok is False
    assert isinstance(err.error, ConfigNotFoundError)
    assert factory.reporter.records == []


def test_missing_class_table_reports_not_found() -> None:
    lookup = ConfigLookup.from_payloads({"specializations": SPECIALIZATIONS})
    factory = HeroFactory(lookup, rng=RNG(3))

    assert factory.create_hero("paladin", "holy") is None
    assert factory.reporter.records[0].message == "Class not found: paladin"


def test_equipment_skeleton_is_empty_for_every_class() -> None:
    factory = _factory()
    for class_id, spec_id in [("paladin", "holy"), ("warrior", "arms"), ("hunter", "marksmanship")]:
        hero = factory.create_hero(class_id, spec_id)
        assert len(hero.equipment_slots) == 18
        assert all(value is None for value in hero.equipment_slots.values())


def test_heroes_do_not_share_mutable_state() -> None:
    factory = _factory()

    first = factory.create_hero("paladin", "holy", bloodline_id="frostborn")
    second = factory.create_hero("paladin", "holy", bloodline_id="frostborn")

    assert first.base_stats is not second.base_stats
    assert first.equipment_slots is not second.equipment_slots
    assert first.talent_tree is not second.talent_tree


def test_talent_tree_initialized_from_schema() -> None:
    hero = _factory().create_hero("paladin", "holy")

    assert hero.talent_tree == {
        "holy": {
            "divine_intellect": TalentProgress(points=0, max_points=5),
            "healing_light": TalentProgress(points=0, max_points=0),
        },
        "protection": {"toughness": TalentProgress(points=0, max_points=3)},
    }


def test_talent_tree_empty_when_class_has_no_trees() -> None:
    factory = _factory()

    assert factory.create_hero("warrior", "arms").talent_tree == {}
    assert factory.create_hero("rogue", "combat").talent_tree == {}


def test_missing_optional_tables_use_defaults() -> None:
    lookup = ConfigLookup.from_payloads(
        {"classes": CLASSES, "specializations": SPECIALIZATIONS}
    )
    factory = HeroFactory(lookup, rng=RNG(8))

    hero = factory.create_hero("paladin", "protection")

    assert hero.bloodline is None
    assert hero.talent_tree == {}
    assert hero.base_stats == {
        "health": 120,
        "maxHealth": 120,
        "attack": 10,
        "defense": 5,
        "speed": 50,
    }


def test_world_config_without_defense_still_creates_heroes() -> None:
    world_config = {"player": {"startingStats": {"health": 90, "maxHealth": 90, "attack": 12, "speed": 40}}}
    factory = _factory(bloodlines={"bloodlines": {}}, world_config=world_config)

    rogue = factory.create_hero("rogue", "combat")
    tank = factory.create_hero("paladin", "protection")

    assert rogue.base_stats == {"health": 90, "maxHealth": 90, "attack": 12, "speed": 40}
    assert tank.base_stats == {"health": 108, "maxHealth": 108, "attack": 12, "speed": 40}
    assert factory.reporter.records == []


def test_random_bloodline_and_name_drawn_from_injected_rng() -> None:
    rng = ScriptedRNG([1, 4, 2])
    factory = _factory(rng=rng)

    hero = factory.create_hero("paladin", "holy")

    assert hero.bloodline_id == "void_walker"
    assert hero.name == f"{FIRST_NAMES[4]} {LAST_NAMES[2]}"


def test_requested_bloodline_skips_bloodline_draw() -> None:
    rng = ScriptedRNG([0, 0])
    factory = _factory(rng=rng)

    hero = factory.create_hero("paladin", "holy", bloodline_id="frostborn")

    assert hero.name == f"{FIRST_NAMES[0]} {LAST_NAMES[0]}"
    assert rng.calls == [FIRST_NAMES, LAST_NAMES]


def test_same_seed_produces_same_heroes() -> None:
    factory_a = _factory(rng=RNG(77))
    factory_b = _factory(rng=RNG(77))

    heroes_a = [factory_a.create_hero("priest", "holy"), factory_a.create_hero("warrior", "arms")]
    heroes_b = [factory_b.create_hero("priest", "holy"), factory_b.create_hero("warrior", "arms")]

    assert heroes_a == heroes_b


def test_hero_is_frozen() -> None:
    hero = _factory().create_hero("paladin", "holy")

    with pytest.raises(AttributeError):
        hero.level = 2


def test_classes_for_role_lists_each_class_once() -> None:
    factory = _factory()

    assert factory.classes_for_role("healer") == ["paladin", "priest"]
    assert factory.classes_for_role("tank") == ["paladin", "warrior"]
    assert factory.classes_for_role("dps") == ["warrior", "rogue", "hunter", "priest"]
    assert factory.classes_for_role("bard") == []


def test_classes_for_role_skips_specs_missing_from_table() -> None:
    classes = {"paladin": {"name": "Paladin", "availableSpecs": ["holy", "ghost"]}}
    factory = _factory(classes=classes)

    assert factory.classes_for_role("healer") == ["paladin"]
    assert factory.classes_for_role("dps") == []


def test_specializations_for_class() -> None:
    factory = _factory()

    assert factory.specializations_for_class("priest") == ["discipline", "holy", "shadow"]
    assert factory.specializations_for_class("bard") == []


def test_reload_class_table_picks_up_new_class(tmp_path: Path) -> None:
    definitions_dir = seed_hero_definitions(make_definitions_dir(tmp_path))
    factory = build_hero_factory(definitions_dir, seed=4)
    existing = factory.create_hero("paladin", "holy")

    classes = {**CLASSES, "monk": {"name": "Monk", "availableSpecs": ["mistweaver"]}}
    write_json(definitions_dir / "classes.json", classes)
    specs = {**SPECIALIZATIONS, "monk_mistweaver": {"name": "Mistweaver", "role": "healer"}}
    write_json(definitions_dir / "specializations.json", specs)

    assert factory.create_hero("monk", "mistweaver") is None
    assert factory.reload_class_table() is True
    assert factory.reload_specialization_table() is True
    assert factory.reload_class_table() is True
    monk = factory.create_hero("monk", "mistweaver")

    assert monk is not None
    assert monk.id == "hero_1"
    assert existing.id == "hero_0"
    assert existing.class_id == "paladin"
    assert "monk" in factory.classes_for_role("healer")


def test_reload_failure_is_reported_and_keeps_previous_table(tmp_path: Path) -> None:
    definitions_dir = seed_hero_definitions(make_definitions_dir(tmp_path))
    factory = build_hero_factory(definitions_dir, seed=4)

    (definitions_dir / "classes.json").write_text("{broken", encoding="utf-8")
    assert factory.reload_class_table() is False

    records = factory.reporter.records
    assert len(records) == 1
    assert records[0].context == "HeroFactory.reload_class_table"
    assert factory.create_hero("paladin", "holy") is not None


def test_build_hero_factory_over_bundled_definitions(monkeypatch) -> None:
    monkeypatch.delenv("HEROFORGE_DEFINITIONS_DIR", raising=False)
    factory = build_hero_factory(seed=1)

    hero = factory.create_hero("paladin", "protection")

    assert hero is not None
    assert hero.base_stats["health"] == hero.base_stats["maxHealth"]
