"""Talent tree schema repository."""
from __future__ import annotations

from typing import Dict

from heroforge.data.errors import DataValidationError
from heroforge.data.repositories.base import RepositoryBase
from heroforge.domain.defs import TalentDef, TalentTreeSchema


class TalentsRepository(RepositoryBase[TalentTreeSchema]):
    """Loads per-class talent trees; only ``maxPoints`` matters at creation."""

    def __init__(self, base_path=None) -> None:
        super().__init__("talents.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, TalentTreeSchema]:
        schemas: Dict[str, TalentTreeSchema] = {}
        for class_id, payload in raw.items():
            if not isinstance(class_id, str):
                raise DataValidationError("Talent class IDs must be strings.")
            class_data = self._require_mapping(payload, f"talents '{class_id}'")
            trees_raw = self._require_mapping(
                class_data.get("trees", {}), f"talents '{class_id}' trees"
            )

            trees: Dict[str, Dict[str, TalentDef]] = {}
            for tree_id, tree_payload in trees_raw.items():
                tree_context = f"talents '{class_id}' tree '{tree_id}'"
                tree_data = self._require_mapping(tree_payload, tree_context)
                talents_raw = self._require_mapping(
                    tree_data.get("talents", {}), f"{tree_context} talents"
                )
                talents: Dict[str, TalentDef] = {}
                for talent_id, talent_payload in talents_raw.items():
                    talent_context = f"{tree_context} talent '{talent_id}'"
                    talent_data = self._require_mapping(talent_payload, talent_context)
                    max_points = talent_data.get("maxPoints") or 0
                    talents[talent_id] = TalentDef(
                        id=talent_id,
                        max_points=self._require_int(max_points, f"{talent_context} maxPoints"),
                    )
                trees[tree_id] = talents
            schemas[class_id] = TalentTreeSchema(class_id=class_id, trees=trees)
        return schemas
