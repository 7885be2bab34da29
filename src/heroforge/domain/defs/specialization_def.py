"""Specialization definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from heroforge.core.types import Role


@dataclass(frozen=True, slots=True)
class PassiveEffects:
    """Fractional multipliers applied to base stats at creation time."""

    health_bonus: float | None = None
    defense_bonus: float | None = None


@dataclass(frozen=True, slots=True)
class SpecializationDef:
    """A class specialization, stored under ``specialization_key(class, spec)``."""

    id: str
    name: str
    role: Role
    spec_abilities: tuple[str, ...] = ()
    passive_effects: PassiveEffects | None = None


def specialization_key(class_id: str, spec_id: str) -> str:
    """Return the table key for a class/spec pair."""
    return f"{class_id}_{spec_id}"
