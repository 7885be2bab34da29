"""World configuration structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from heroforge.core.types import StatBlock


@dataclass(frozen=True, slots=True)
class WorldConfigDef:
    """Subset of the world config read at hero creation."""

    starting_stats: Optional[StatBlock] = None
