"""Data layer utilities for loading definition tables."""

from .errors import (
    DataError,
    DataLoadError,
    DataReferenceError,
    DataValidationError,
    DefinitionFileMissingError,
)
from .paths import get_definitions_path, get_repo_root
from .config_lookup import ConfigLookup

__all__ = [
    "ConfigLookup",
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "DefinitionFileMissingError",
    "get_definitions_path",
    "get_repo_root",
]
