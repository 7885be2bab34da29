"""Factory helpers for runtime entities."""

from .bloodline_selector import select_bloodline
from .hero_factory import HeroFactory, build_hero_factory
from .id_factory import HeroIdSequence, make_instance_id

__all__ = [
    "HeroFactory",
    "HeroIdSequence",
    "build_hero_factory",
    "make_instance_id",
    "select_bloodline",
]
