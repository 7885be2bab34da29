"""Talent tree schema structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True, slots=True)
class TalentDef:
    id: str
    max_points: int = 0


@dataclass(frozen=True, slots=True)
class TalentTreeSchema:
    """All talent trees of one class: tree id -> talent id -> talent."""

    class_id: str
    trees: Dict[str, Dict[str, TalentDef]] = field(default_factory=dict)
