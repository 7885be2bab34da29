"""Bloodline selection for new heroes."""
from __future__ import annotations

from typing import Mapping, Optional

from heroforge.core.rng import RNG
from heroforge.domain.defs import BloodlineDef


def select_bloodline(
    bloodlines: Optional[Mapping[str, BloodlineDef]],
    requested_id: Optional[str],
    rng: RNG,
) -> Optional[BloodlineDef]:
    """Return the requested bloodline, else a uniformly random one, else None.

    An unknown ``requested_id`` falls through to the random pick. Never raises.
    """
    if not bloodlines:
        return None
    if requested_id and requested_id in bloodlines:
        return bloodlines[requested_id]
    return bloodlines[rng.choice(list(bloodlines.keys()))]
