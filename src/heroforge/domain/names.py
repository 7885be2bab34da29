"""Hero name generation."""
from __future__ import annotations

from heroforge.core.rng import RNG

FIRST_NAMES: tuple[str, ...] = (
    "Aelric", "Brenna", "Cedric", "Dara", "Erik", "Fara", "Gareth", "Hilda",
    "Ivor", "Jenna", "Kael", "Lara", "Marcus", "Nora", "Owen", "Petra",
    "Quinn", "Rhea", "Soren", "Tara", "Ulric", "Vera", "Wynn", "Yara",
    "Zane", "Aria", "Bram", "Cora", "Dane", "Elara", "Finn", "Gwen",
    "Hale", "Iris", "Jace", "Kira", "Liam", "Maya", "Nox", "Orin",
)

LAST_NAMES: tuple[str, ...] = (
    "Ironforge", "Stormwind", "Shadowbane", "Brightblade", "Darkwood",
    "Frostweaver", "Lightbringer", "Thunderstrike", "Bloodmoon", "Starfall",
    "Dragonheart", "Wolfbane", "Firesoul", "Iceborn", "Stormcaller",
    "Shadowstep", "Brightshield", "Darkblade", "Frostwind", "Lightward",
    "Thunderclap", "Bloodfang", "Stargazer", "Dragonwing", "Wolfsong",
    "Firebrand", "Iceheart", "Stormrider", "Shadowwhisper", "Brightstar",
)


def generate_hero_name(rng: RNG) -> str:
    """Draw a first name then a last name; names are not unique across heroes."""
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
