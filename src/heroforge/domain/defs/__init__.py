"""Domain definition exports."""

from .bloodline_def import BloodlineDef
from .class_def import ClassDef
from .specialization_def import PassiveEffects, SpecializationDef, specialization_key
from .talent_def import TalentDef, TalentTreeSchema
from .world_config_def import WorldConfigDef

__all__ = [
    "BloodlineDef",
    "ClassDef",
    "PassiveEffects",
    "SpecializationDef",
    "TalentDef",
    "TalentTreeSchema",
    "WorldConfigDef",
    "specialization_key",
]
