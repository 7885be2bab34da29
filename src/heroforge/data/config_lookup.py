"""Read-only accessor over the definition tables used for hero creation."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping

from heroforge.core.types import StatBlock
from heroforge.data.errors import DataReferenceError, DefinitionFileMissingError
from heroforge.data.repositories import (
    WORLD_CONFIG_KEY,
    BloodlinesRepository,
    ClassesRepository,
    SpecializationsRepository,
    TalentsRepository,
    WorldConfigRepository,
)
from heroforge.data.repositories.base import RepositoryBase
from heroforge.domain.defs import specialization_key

logger = logging.getLogger(__name__)

CLASSES = "classes"
SPECIALIZATIONS = "specializations"
BLOODLINES = "bloodlines"
TALENTS = "talents"
WORLD_CONFIG = "world_config"

class ConfigLookup:
    """Keyed lookups over classes, specializations, bloodlines and talents.

    ``None`` always means "absent": either the table has no source or the key
    is not in it. An empty table is returned as an empty mapping so callers
    can tell the two apart.
    """

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._repositories: Dict[str, RepositoryBase] = {
            CLASSES: ClassesRepository(base_path=base_path),
            SPECIALIZATIONS: SpecializationsRepository(base_path=base_path),
            BLOODLINES: BloodlinesRepository(base_path=base_path),
            TALENTS: TalentsRepository(base_path=base_path),
            WORLD_CONFIG: WorldConfigRepository(base_path=base_path),
        }
        self._payload_only = False

    @classmethod
    def from_payloads(cls, payloads: Mapping[str, object]) -> "ConfigLookup":
        """Build a lookup from already-loaded raw tables.

        Tables not present in ``payloads`` are treated as absent.
        """
        lookup = cls()
        lookup._payload_only = True
        for name, raw in payloads.items():
            lookup._repository(name).load_payload(raw)
        return lookup

    def _repository(self, table: str) -> RepositoryBase:
        try:
            return self._repositories[table]
        except KeyError as exc:
            raise KeyError(f"Unknown table '{table}'.") from exc

    def has_table(self, table: str) -> bool:
        repo = self._repository(table)
        if self._payload_only:
            return repo.preloaded
        return repo.exists()

    def table(self, table: str) -> Mapping[str, object] | None:
        """Return a snapshot of the whole table, or None when it is absent."""
        if not self.has_table(table):
            return None
        return self._repository(table).as_mapping()

    def get(self, table: str, key: str):
        """Return one definition, or None when the table or the key is absent."""
        entries = self.table(table)
        if entries is None:
            return None
        return entries.get(key)

    def reload(self, table: str) -> Mapping[str, object]:
        """Re-read ``table`` from its source and return the fresh snapshot.

        Load and validation errors propagate; the previously cached table is
        left untouched when they do.
        """
        repo = self._repository(table)
        if not self.has_table(table):
            raise DefinitionFileMissingError(f"No source for table '{table}' ({repo.filename}).")
        repo.reload()
        logger.debug("Reloaded table '%s' from %s", table, repo.filename)
        return repo.as_mapping()

    def starting_stats(self) -> StatBlock | None:
        """Return world-config ``player.startingStats`` or None when not configured."""
        world = self.get(WORLD_CONFIG, WORLD_CONFIG_KEY)
        if world is None or world.starting_stats is None:
            return None
        return dict(world.starting_stats)

    def validate_references(self) -> None:
        """Ensure every spec a class offers exists in the specializations table."""
        classes = self.table(CLASSES) or {}
        specs = self.table(SPECIALIZATIONS) or {}
        for class_id, class_def in classes.items():
            for spec_id in class_def.available_specs:
                key = specialization_key(class_id, spec_id)
                if key not in specs:
                    raise DataReferenceError(
                        f"class '{class_id}' references missing specialization '{key}'."
                    )
