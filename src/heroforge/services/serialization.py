"""Save-data payloads for heroes."""
from __future__ import annotations

from typing import Any, Dict

from heroforge.domain.entities import HeroEntity


def hero_to_payload(hero: HeroEntity) -> Dict[str, Any]:
    """Return the camelCase save-data shape of ``hero`` (JSON-serializable)."""
    return {
        "id": hero.id,
        "name": hero.name,
        "classId": hero.class_id,
        "specId": hero.spec_id,
        "bloodlineId": hero.bloodline_id,
        "bloodlineName": hero.bloodline_name,
        "role": hero.role,
        "level": hero.level,
        "experience": hero.experience,
        "baseStats": dict(hero.base_stats),
        "equipmentSlots": dict(hero.equipment_slots),
        "talentTree": {
            tree_id: {
                talent_id: {"points": progress.points, "maxPoints": progress.max_points}
                for talent_id, progress in talents.items()
            }
            for tree_id, talents in hero.talent_tree.items()
        },
        "abilities": list(hero.abilities),
        "currentStats": dict(hero.current_stats),
        "resourceType": hero.resource_type,
        "currentResource": hero.current_resource,
        "maxResource": hero.max_resource,
    }
