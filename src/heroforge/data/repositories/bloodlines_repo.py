"""Bloodlines repository."""
from __future__ import annotations

from typing import Dict

from heroforge.core.types import StatValue
from heroforge.data.errors import DataValidationError
from heroforge.data.repositories.base import RepositoryBase
from heroforge.domain.defs import BloodlineDef


class BloodlinesRepository(RepositoryBase[BloodlineDef]):
    """Loads bloodlines from the ``{"bloodlines": {...}}`` envelope.

    A file without the envelope key yields an empty table.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("bloodlines.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, BloodlineDef]:
        envelope = raw.get("bloodlines")
        if envelope is None:
            return {}
        entries = self._require_mapping(envelope, "bloodlines")

        bloodlines: Dict[str, BloodlineDef] = {}
        for raw_id, payload in entries.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Bloodline IDs must be strings.")
            data = self._require_mapping(payload, f"bloodline '{raw_id}'")
            # Unique abilities and runtime passives are consumed by combat systems.
            self._assert_exact_fields(
                data,
                {"name"},
                f"bloodline '{raw_id}'",
                optional_fields={"id", "statBonuses", "uniqueAbility", "passiveEffects"},
            )
            declared_id = data.get("id", raw_id)
            if declared_id != raw_id:
                raise DataValidationError(
                    f"bloodline '{raw_id}' declares mismatched id '{declared_id}'."
                )
            bloodlines[raw_id] = BloodlineDef(
                id=raw_id,
                name=self._require_str(data["name"], f"bloodline '{raw_id}' name"),
                stat_bonuses=self._parse_stat_bonuses(data.get("statBonuses", {}), raw_id),
            )
        return bloodlines

    def _parse_stat_bonuses(self, value: object, bloodline_id: str) -> Dict[str, StatValue]:
        context = f"bloodline '{bloodline_id}' statBonuses"
        bonuses = self._require_mapping(value, context)
        return {
            str(stat): self._require_number(amount, f"{context} '{stat}'")
            for stat, amount in bonuses.items()
        }
