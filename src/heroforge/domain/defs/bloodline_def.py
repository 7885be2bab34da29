"""Bloodline definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from heroforge.core.types import StatValue


@dataclass(frozen=True, slots=True)
class BloodlineDef:
    """A hero lineage granting additive stat bonuses."""

    id: str
    name: str
    stat_bonuses: Dict[str, StatValue] = field(default_factory=dict)
