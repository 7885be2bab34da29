"""Starting resource pool rules."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from heroforge.core.types import ResourceType, StatValue

MANA_PER_INTELLECT = 15
DEFAULT_INTELLECT = 10
FLAT_RESOURCE_MAX = 100


@dataclass(frozen=True, slots=True)
class ResourcePool:
    resource_type: ResourceType
    current: StatValue
    maximum: StatValue


def derive_resource_pool(resource_type: ResourceType, base_stats: Mapping[str, StatValue]) -> ResourcePool:
    """Mana scales with intellect; every other pool is a flat 100.

    Rage starts empty, everything else starts full. Missing or zero intellect
    counts as 10. Fractional intellect yields a fractional mana pool.
    """
    if resource_type == "mana":
        intellect = base_stats.get("intellect") or DEFAULT_INTELLECT
        maximum = intellect * MANA_PER_INTELLECT
    else:
        maximum = FLAT_RESOURCE_MAX
    current = 0 if resource_type == "rage" else maximum
    return ResourcePool(resource_type=resource_type, current=current, maximum=maximum)
