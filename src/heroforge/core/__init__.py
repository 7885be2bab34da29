"""Core utilities shared by every layer."""

from .result import Err, Ok, Result
from .rng import RNG

__all__ = ["Err", "Ok", "RNG", "Result"]
