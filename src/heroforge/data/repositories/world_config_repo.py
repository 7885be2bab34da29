"""World config repository (single-document table)."""
from __future__ import annotations

from typing import Dict

from heroforge.data.errors import DataValidationError
from heroforge.data.repositories.base import RepositoryBase
from heroforge.domain.defs import WorldConfigDef

WORLD_CONFIG_KEY = "world"
# ``health`` is synced to this stat, so every starting block needs it.
REQUIRED_STARTING_STATS = frozenset({"maxHealth"})


class WorldConfigRepository(RepositoryBase[WorldConfigDef]):
    """Reads ``player.startingStats`` from the world config document.

    The document is stored under the single key ``"world"``; other sections
    belong to systems outside hero creation and are ignored.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("world_config.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WorldConfigDef]:
        player = raw.get("player")
        if player is None:
            return {WORLD_CONFIG_KEY: WorldConfigDef()}
        player_data = self._require_mapping(player, "world config player")
        starting = player_data.get("startingStats")
        if starting is None:
            return {WORLD_CONFIG_KEY: WorldConfigDef()}
        starting_data = self._require_mapping(starting, "world config player.startingStats")
        stats = {
            str(stat): self._require_number(value, f"world config startingStats '{stat}'")
            for stat, value in starting_data.items()
        }
        missing = sorted(REQUIRED_STARTING_STATS - stats.keys())
        if missing:
            raise DataValidationError(f"world config startingStats missing stats: {missing}.")
        return {WORLD_CONFIG_KEY: WorldConfigDef(starting_stats=stats)}
