"""Hero runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from heroforge.core.types import ResourceType, Role, StatBlock, StatValue


@dataclass(frozen=True, slots=True)
class BloodlineRef:
    """Id and display name of the bloodline a hero was born with."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class TalentProgress:
    points: int
    max_points: int


TalentTree = Dict[str, Dict[str, TalentProgress]]
EquipmentSlots = Dict[str, Optional[str]]


@dataclass(frozen=True, slots=True)
class HeroEntity:
    """A freshly created hero.

    ``current_stats`` is a snapshot of ``base_stats`` taken at creation; later
    systems own how it diverges.
    """

    id: str
    name: str
    class_id: str
    spec_id: str
    bloodline: Optional[BloodlineRef]
    role: Role
    level: int
    base_stats: StatBlock
    equipment_slots: EquipmentSlots
    talent_tree: TalentTree
    abilities: tuple[str, ...]
    current_stats: StatBlock
    resource_type: ResourceType
    current_resource: StatValue
    max_resource: StatValue
    experience: int = field(default=0)

    @property
    def bloodline_id(self) -> Optional[str]:
        return self.bloodline.id if self.bloodline else None

    @property
    def bloodline_name(self) -> Optional[str]:
        return self.bloodline.name if self.bloodline else None
