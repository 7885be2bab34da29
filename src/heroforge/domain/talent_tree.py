"""Talent tree initialization."""
from __future__ import annotations

from typing import Optional

from heroforge.domain.defs import TalentTreeSchema
from heroforge.domain.entities import TalentProgress, TalentTree


def build_empty_talent_tree(schema: Optional[TalentTreeSchema]) -> TalentTree:
    """Mirror the class schema with zero points spent; no schema gives ``{}``."""
    if schema is None:
        return {}
    return {
        tree_id: {
            talent_id: TalentProgress(points=0, max_points=talent.max_points)
            for talent_id, talent in talents.items()
        }
        for tree_id, talents in schema.trees.items()
    }
