"""Runtime entity exports."""

from .hero import BloodlineRef, EquipmentSlots, HeroEntity, TalentProgress, TalentTree

__all__ = [
    "BloodlineRef",
    "EquipmentSlots",
    "HeroEntity",
    "TalentProgress",
    "TalentTree",
]
