"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a hero cannot be created."""


class ConfigNotFoundError(FactoryError):
    """Raised when a class or specialization key is missing from the tables."""


class PartyCompositionError(FactoryError):
    """Raised when a party selection cannot be turned into heroes."""
