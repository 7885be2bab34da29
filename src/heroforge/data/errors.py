"""Custom exceptions for definition loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition file cannot be read or parsed."""


class DefinitionFileMissingError(DataLoadError):
    """Raised when a definition file does not exist."""


class DataValidationError(DataError):
    """Raised when table content fails structural validation."""


class DataReferenceError(DataError):
    """Raised when definitions reference missing related data."""
