"""Shared type aliases for the core and domain layers."""
from typing import Dict, Literal, Union

ResourceType = Literal["mana", "energy", "rage", "focus"]
Role = Literal["tank", "healer", "dps"]
Severity = Literal["debug", "info", "warn", "error"]
StatValue = Union[int, float]
StatBlock = Dict[str, StatValue]

RESOURCE_TYPES: tuple[str, ...] = ("mana", "energy", "rage", "focus")
ROLES: tuple[str, ...] = ("tank", "healer", "dps")

__all__ = [
    "RESOURCE_TYPES",
    "ROLES",
    "ResourceType",
    "Role",
    "Severity",
    "StatBlock",
    "StatValue",
]
