"""Base stat composition for newly created heroes.

Steps run in a fixed order and the order changes results: bloodline bonuses
are added before the specialization multipliers, so a defense bonus from the
bloodline is itself scaled by ``defense_bonus``.

1. copy the world default stat block
2. add bloodline bonuses (unknown stats are introduced with the bonus value)
3. scale ``maxHealth`` by ``1 + health_bonus`` (floored)
4. scale ``defense`` by ``1 + defense_bonus`` (floored; skipped without a defense stat)
5. set ``health`` to ``maxHealth``
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from heroforge.core.types import StatBlock, StatValue
from heroforge.domain.defs import BloodlineDef, PassiveEffects, SpecializationDef

DEFAULT_STARTING_STATS: Mapping[str, StatValue] = {
    "health": 100,
    "maxHealth": 100,
    "attack": 10,
    "defense": 5,
    "speed": 50,
}


@dataclass(frozen=True, slots=True)
class StatCompositionBreakdown:
    """Every intermediate block of one composition, for tooling and tests."""

    defaults: StatBlock
    after_bloodline: StatBlock
    after_passives: StatBlock
    final: StatBlock


def apply_bloodline_bonuses(stats: StatBlock, bloodline: Optional[BloodlineDef]) -> StatBlock:
    result = dict(stats)
    if bloodline is None:
        return result
    for stat, bonus in bloodline.stat_bonuses.items():
        if stat in result:
            result[stat] += bonus
        else:
            result[stat] = bonus
    return result


def apply_passive_effects(stats: StatBlock, passives: Optional[PassiveEffects]) -> StatBlock:
    result = dict(stats)
    if passives is None:
        return result
    # A zero bonus is treated like an unset one.
    if passives.health_bonus:
        result["maxHealth"] = math.floor(result["maxHealth"] * (1 + passives.health_bonus))
    if passives.defense_bonus and "defense" in result:
        result["defense"] = math.floor(result["defense"] * (1 + passives.defense_bonus))
    return result


def explain_base_stats(
    world_defaults: Optional[Mapping[str, StatValue]],
    bloodline: Optional[BloodlineDef],
    specialization: SpecializationDef,
) -> StatCompositionBreakdown:
    defaults = dict(world_defaults if world_defaults is not None else DEFAULT_STARTING_STATS)
    after_bloodline = apply_bloodline_bonuses(defaults, bloodline)
    after_passives = apply_passive_effects(after_bloodline, specialization.passive_effects)
    final = dict(after_passives)
    final["health"] = final["maxHealth"]
    return StatCompositionBreakdown(
        defaults=defaults,
        after_bloodline=after_bloodline,
        after_passives=after_passives,
        final=final,
    )


def compose_base_stats(
    world_defaults: Optional[Mapping[str, StatValue]],
    bloodline: Optional[BloodlineDef],
    specialization: SpecializationDef,
) -> StatBlock:
    """Return the composed base stat block; inputs are never mutated."""
    return explain_base_stats(world_defaults, bloodline, specialization).final
