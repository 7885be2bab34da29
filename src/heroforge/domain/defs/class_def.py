"""Hero class definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from heroforge.core.types import ResourceType


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Defines the resource pool, core abilities and specs offered by a class."""

    id: str
    name: str
    resource_type: ResourceType = "mana"
    core_abilities: tuple[str, ...] = ()
    available_specs: tuple[str, ...] = ()
