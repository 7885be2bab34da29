"""Specializations repository."""
from __future__ import annotations

from typing import Dict

from heroforge.core.types import ROLES
from heroforge.data.errors import DataValidationError
from heroforge.data.repositories.base import RepositoryBase
from heroforge.domain.defs import PassiveEffects, SpecializationDef


class SpecializationsRepository(RepositoryBase[SpecializationDef]):
    """Loads specializations keyed by ``{classId}_{specId}``."""

    def __init__(self, base_path=None) -> None:
        super().__init__("specializations.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, SpecializationDef]:
        specs: Dict[str, SpecializationDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Specialization IDs must be strings.")
            spec_data = self._require_mapping(payload, f"specialization '{raw_id}'")
            self._assert_exact_fields(
                spec_data,
                {"name", "role"},
                f"specialization '{raw_id}'",
                optional_fields={"specAbilities", "passiveEffects"},
            )
            role = self._require_str(spec_data["role"], f"specialization '{raw_id}' role")
            if role not in ROLES:
                raise DataValidationError(
                    f"specialization '{raw_id}' role must be one of {list(ROLES)}."
                )

            specs[raw_id] = SpecializationDef(
                id=raw_id,
                name=self._require_str(spec_data["name"], f"specialization '{raw_id}' name"),
                role=role,  # type: ignore[arg-type]
                spec_abilities=tuple(
                    self._require_str_list(
                        spec_data.get("specAbilities", []),
                        f"specialization '{raw_id}' specAbilities",
                    )
                ),
                passive_effects=self._parse_passive_effects(
                    spec_data.get("passiveEffects"), raw_id
                ),
            )
        return specs

    def _parse_passive_effects(self, value: object, spec_id: str) -> PassiveEffects | None:
        if value is None:
            return None
        context = f"specialization '{spec_id}' passiveEffects"
        effects = self._require_mapping(value, context)
        # Other passive keys drive combat systems and are not read at creation.
        health_bonus = effects.get("healthBonus")
        defense_bonus = effects.get("defenseBonus")
        return PassiveEffects(
            health_bonus=(
                None
                if health_bonus is None
                else float(self._require_number(health_bonus, f"{context} healthBonus"))
            ),
            defense_bonus=(
                None
                if defense_bonus is None
                else float(self._require_number(defense_bonus, f"{context} defenseBonus"))
            ),
        )
