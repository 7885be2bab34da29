"""Repository exports."""

from .bloodlines_repo import BloodlinesRepository
from .classes_repo import ClassesRepository
from .specializations_repo import SpecializationsRepository
from .talents_repo import TalentsRepository
from .world_config_repo import WORLD_CONFIG_KEY, WorldConfigRepository

__all__ = [
    "BloodlinesRepository",
    "ClassesRepository",
    "SpecializationsRepository",
    "TalentsRepository",
    "WORLD_CONFIG_KEY",
    "WorldConfigRepository",
]
