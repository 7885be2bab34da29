"""Five-hero party assembly for a new game."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

from heroforge.domain.entities import HeroEntity
from heroforge.services.errors import PartyCompositionError
from heroforge.services.factories import HeroFactory

PARTY_SLOTS: Tuple[str, ...] = ("tank", "healer", "dps1", "dps2", "dps3")

Selection = Tuple[str, str]


@dataclass(frozen=True, slots=True)
class Party:
    heroes: Tuple[HeroEntity, ...]

    @property
    def size(self) -> int:
        return len(self.heroes)

    def by_slot(self) -> Dict[str, HeroEntity]:
        return dict(zip(PARTY_SLOTS, self.heroes))


def slot_role(slot: str) -> str:
    return "dps" if slot.startswith("dps") else slot


class PartyService:
    """Create the starting party: one tank, one healer and three dps."""

    def __init__(self, *, factory: HeroFactory) -> None:
        self._factory = factory

    def create_party(self, selections: Mapping[str, Selection], level: int = 1) -> Party:
        """Build heroes in slot order from ``slot -> (class_id, spec_id)``.

        Raises PartyCompositionError for a missing slot, a spec whose role does
        not fit its slot, or a hero the factory could not create.
        """
        missing = [slot for slot in PARTY_SLOTS if slot not in selections]
        if missing:
            raise PartyCompositionError(f"Missing party selections: {', '.join(missing)}.")

        for slot in PARTY_SLOTS:
            class_id, spec_id = selections[slot]
            if spec_id not in self._factory.specializations_for_class(class_id):
                raise PartyCompositionError(
                    f"Slot '{slot}': '{spec_id}' is not a specialization of '{class_id}'."
                )
            role = self._factory.specialization_role(class_id, spec_id)
            if role != slot_role(slot):
                raise PartyCompositionError(
                    f"Slot '{slot}': {class_id}/{spec_id} has role '{role}', expected '{slot_role(slot)}'."
                )

        heroes = []
        for slot in PARTY_SLOTS:
            class_id, spec_id = selections[slot]
            hero = self._factory.create_hero(class_id, spec_id, level)
            if hero is None:
                raise PartyCompositionError(f"Slot '{slot}': hero creation failed.")
            heroes.append(hero)
        return Party(heroes=tuple(heroes))
