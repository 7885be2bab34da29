"""Equipment slot layout shared by every hero."""
from __future__ import annotations

from heroforge.domain.entities import EquipmentSlots

EQUIPMENT_SLOTS: tuple[str, ...] = (
    "head",
    "neck",
    "shoulder",
    "cloak",
    "chest",
    "shirt",
    "tabard",
    "bracer",
    "hands",
    "waist",
    "legs",
    "boots",
    "ring1",
    "ring2",
    "trinket1",
    "trinket2",
    "weapon",
    "offhand",
)


def empty_equipment_slots() -> EquipmentSlots:
    """Return a fresh slot map with nothing equipped."""
    return {slot: None for slot in EQUIPMENT_SLOTS}
