"""
Core infrastructure for the Banjara translator backend.
Provides exceptions, error handlers, database access, logging and dependency wiring.
"""

from .exceptions import (
    ErrorCode,
    BanjaraTranslatorException,
    InputValidationError,
    DictionaryConfigurationError,
    PersistenceError,
    ExternalServiceError,
)

__all__ = [
    "ErrorCode",
    "BanjaraTranslatorException",
    "InputValidationError",
    "DictionaryConfigurationError",
    "PersistenceError",
    "ExternalServiceError",
]
