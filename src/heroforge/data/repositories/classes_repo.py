"""Hero classes repository."""
from __future__ import annotations

from typing import Dict

from heroforge.core.types import RESOURCE_TYPES
from heroforge.data.errors import DataValidationError
from heroforge.data.repositories.base import RepositoryBase
from heroforge.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads class definitions and validates their resource kind."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Class IDs must be strings.")
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_exact_fields(
                class_data,
                {"name"},
                f"class '{raw_id}'",
                optional_fields={"resourceType", "coreAbilities", "availableSpecs"},
            )

            resource_type = self._require_str(
                class_data.get("resourceType", "mana"), f"class '{raw_id}' resourceType"
            )
            if resource_type not in RESOURCE_TYPES:
                raise DataValidationError(
                    f"class '{raw_id}' resourceType must be one of {list(RESOURCE_TYPES)}."
                )

            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"class '{raw_id}' name"),
                resource_type=resource_type,  # type: ignore[arg-type]
                core_abilities=tuple(
                    self._require_str_list(
                        class_data.get("coreAbilities", []), f"class '{raw_id}' coreAbilities"
                    )
                ),
                available_specs=tuple(
                    self._require_str_list(
                        class_data.get("availableSpecs", []), f"class '{raw_id}' availableSpecs"
                    )
                ),
            )
        return classes
