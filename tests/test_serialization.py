import json

from heroforge.core.rng import RNG
from heroforge.data import ConfigLookup
from heroforge.services import hero_to_payload
from heroforge.services.factories import HeroFactory
from tests.helpers.definitions import hero_payloads


def test_hero_payload_uses_save_data_keys() -> None:
    factory = HeroFactory(ConfigLookup.from_payloads(hero_payloads()), rng=RNG(2))
    hero = factory.create_hero("paladin", "protection", bloodline_id="frostborn")

    payload = hero_to_payload(hero)

    assert payload["id"] == "hero_0"
    assert payload["classId"] == "paladin"
    assert payload["specId"] == "protection"
    assert payload["bloodlineId"] == "frostborn"
    assert payload["bloodlineName"] == "Frostborn"
    assert payload["baseStats"]["maxHealth"] == 120
    assert payload["talentTree"]["protection"]["toughness"] == {"points": 0, "maxPoints": 3}
    assert payload["equipmentSlots"]["offhand"] is None
    assert payload["abilities"] == ["crusader_strike", "judgment", "consecration", "judgment"]
    assert payload["resourceType"] == "mana"
    assert payload["currentResource"] == payload["maxResource"] == 150
    json.dumps(payload)


def test_hero_payload_without_bloodline() -> None:
    lookup = ConfigLookup.from_payloads(hero_payloads(bloodlines=None))
    hero = HeroFactory(lookup, rng=RNG(2)).create_hero("warrior", "arms")

    payload = hero_to_payload(hero)

    assert payload["bloodlineId"] is None
    assert payload["bloodlineName"] is None
    assert payload["talentTree"] == {}
