"""Service layer: factories, error reporting and party assembly."""

from .error_reporter import ErrorRecord, ErrorReporter
from .errors import ConfigNotFoundError, FactoryError, PartyCompositionError
from .party_service import PARTY_SLOTS, Party, PartyService
from .serialization import hero_to_payload

__all__ = [
    "ConfigNotFoundError",
    "ErrorRecord",
    "ErrorReporter",
    "FactoryError",
    "PARTY_SLOTS",
    "Party",
    "PartyService",
    "PartyCompositionError",
    "hero_to_payload",
]
