"""Factory for creating heroes from class, specialization and bloodline tables."""
from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from heroforge.core.result import Err, Ok, Result
from heroforge.core.rng import RNG
from heroforge.data.config_lookup import (
    BLOODLINES,
    CLASSES,
    SPECIALIZATIONS,
    TALENTS,
    ConfigLookup,
)
from heroforge.data.errors import DataError
from heroforge.domain.defs import ClassDef, SpecializationDef, specialization_key
from heroforge.domain.entities import BloodlineRef, HeroEntity
from heroforge.domain.equipment_slots import empty_equipment_slots
from heroforge.domain.names import generate_hero_name
from heroforge.domain.resource_pool import derive_resource_pool
from heroforge.domain.stat_composition import compose_base_stats
from heroforge.domain.talent_tree import build_empty_talent_tree
from heroforge.services.error_reporter import ErrorReporter
from heroforge.services.errors import ConfigNotFoundError, FactoryError

from .bloodline_selector import select_bloodline
from .id_factory import HeroIdSequence

logger = logging.getLogger(__name__)

CREATE_CONTEXT = "createEntity"


class HeroFactory:
    """Assemble fully initialized heroes from the definition tables.

    Tables are snapshotted at construction. ``reload_class_table`` and
    ``reload_specialization_table`` swap in fresh snapshots without touching
    heroes already created or the identifier sequence.
    """

    def __init__(
        self,
        config: ConfigLookup,
        *,
        rng: RNG | None = None,
        reporter: ErrorReporter | None = None,
        id_sequence: HeroIdSequence | None = None,
    ) -> None:
        self._config = config
        self._rng = rng or RNG.from_entropy()
        self._reporter = reporter or ErrorReporter()
        self._ids = id_sequence or HeroIdSequence()

        self._classes: Optional[Mapping[str, ClassDef]] = config.table(CLASSES)
        self._specializations: Optional[Mapping[str, SpecializationDef]] = config.table(
            SPECIALIZATIONS
        )
        self._bloodlines = config.table(BLOODLINES)
        self._talents = config.table(TALENTS)
        self._starting_stats = config.starting_stats()
        logger.info("HeroFactory initialized")

    @property
    def reporter(self) -> ErrorReporter:
        return self._reporter

    def generate_hero_name(self) -> str:
        return generate_hero_name(self._rng)

    def try_create_hero(
        self,
        class_id: str,
        spec_id: str,
        level: int = 1,
        bloodline_id: str | None = None,
    ) -> Result[HeroEntity, FactoryError]:
        """Build a hero, returning ``Err(ConfigNotFoundError)`` instead of raising."""
        class_def = (self._classes or {}).get(class_id)
        if class_def is None:
            return Err(ConfigNotFoundError(f"Class not found: {class_id}"))
        spec_key = specialization_key(class_id, spec_id)
        spec_def = (self._specializations or {}).get(spec_key)
        if spec_def is None:
            return Err(ConfigNotFoundError(f"Specialization not found: {spec_key}"))

        bloodline = select_bloodline(self._bloodlines, bloodline_id, self._rng)
        base_stats = compose_base_stats(self._starting_stats, bloodline, spec_def)
        schema = (self._talents or {}).get(class_id)
        talent_tree = build_empty_talent_tree(schema)
        abilities = class_def.core_abilities + spec_def.spec_abilities
        name = generate_hero_name(self._rng)
        pool = derive_resource_pool(class_def.resource_type, base_stats)

        # The id is taken last so that a failed creation never consumes one.
        hero = HeroEntity(
            id=self._ids.next_id(),
            name=name,
            class_id=class_id,
            spec_id=spec_id,
            bloodline=BloodlineRef(id=bloodline.id, name=bloodline.name) if bloodline else None,
            role=spec_def.role,
            level=level,
            experience=0,
            base_stats=base_stats,
            equipment_slots=empty_equipment_slots(),
            talent_tree=talent_tree,
            abilities=abilities,
            current_stats={**base_stats, "health": base_stats["maxHealth"]},
            resource_type=pool.resource_type,
            current_resource=pool.current,
            max_resource=pool.maximum,
        )
        logger.info(
            "Created hero %s: %s - %s %s %s (Level %d)",
            hero.id,
            hero.name,
            bloodline.name if bloodline else "No Bloodline",
            class_def.name,
            spec_def.name,
            level,
        )
        return Ok(hero)

    def create_hero(
        self,
        class_id: str,
        spec_id: str,
        level: int = 1,
        bloodline_id: str | None = None,
    ) -> HeroEntity | None:
        """Build a hero or report the failure and return None."""
        result = self.try_create_hero(class_id, spec_id, level, bloodline_id)
        if isinstance(result, Err):
            self._reporter.report(result.error, CREATE_CONTEXT)
            return None
        return result.value

    def classes_for_role(self, role: str) -> List[str]:
        """Class ids with at least one spec of ``role``, in table order."""
        classes: List[str] = []
        specs = self._specializations or {}
        for class_id, class_def in (self._classes or {}).items():
            for spec_id in class_def.available_specs:
                spec_def = specs.get(specialization_key(class_id, spec_id))
                if spec_def is not None and spec_def.role == role:
                    classes.append(class_id)
                    break
        return classes

    def specializations_for_class(self, class_id: str) -> List[str]:
        class_def = (self._classes or {}).get(class_id)
        if class_def is None:
            return []
        return list(class_def.available_specs)

    def specialization_role(self, class_id: str, spec_id: str) -> str | None:
        spec_def = (self._specializations or {}).get(specialization_key(class_id, spec_id))
        return spec_def.role if spec_def is not None else None

    def reload_class_table(self) -> bool:
        """Swap in a fresh classes table; on failure keep the current one."""
        return self._reload(CLASSES, "_classes", "HeroFactory.reload_class_table")

    def reload_specialization_table(self) -> bool:
        """Swap in a fresh specializations table; on failure keep the current one."""
        return self._reload(
            SPECIALIZATIONS, "_specializations", "HeroFactory.reload_specialization_table"
        )

    def _reload(self, table: str, attribute: str, context: str) -> bool:
        try:
            fresh = self._config.reload(table)
        except DataError as exc:
            self._reporter.report(exc, context)
            return False
        setattr(self, attribute, fresh)
        logger.info("Reloaded %s table for hot-reload", table)
        return True


def build_hero_factory(
    base_path=None,
    *,
    seed: int | None = None,
    reporter: ErrorReporter | None = None,
) -> HeroFactory:
    """Wire a factory over the definitions directory (bundled data by default)."""
    rng = RNG(seed) if seed is not None else None
    return HeroFactory(ConfigLookup(base_path), rng=rng, reporter=reporter)
