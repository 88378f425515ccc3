"""
Custom exceptions for the Banjara translator backend.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Configuration errors
    DICTIONARY_CONFIGURATION_ERROR = "DICTIONARY_CONFIGURATION_ERROR"

    # Collaborator errors
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    EXTERNAL_SERVICE_UNAVAILABLE = "EXTERNAL_SERVICE_UNAVAILABLE"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    # Generic errors
    PROCESSING_TIMEOUT = "PROCESSING_TIMEOUT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class BanjaraTranslatorException(Exception):
    """Base exception for the translator backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class InputValidationError(BanjaraTranslatorException):
    """Raised when a request carries missing or empty text."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            status_code=400
        )


class DictionaryConfigurationError(BanjaraTranslatorException):
    """Raised at startup when the Banjara dictionary is empty or malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.DICTIONARY_CONFIGURATION_ERROR,
            details=details,
            status_code=500
        )


class PersistenceError(BanjaraTranslatorException):
    """Raised when the translation history store cannot append or read."""

    def __init__(self, operation: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Translation history {operation} failed",
            error_code=ErrorCode.PERSISTENCE_FAILED,
            details={"operation": operation, **(details or {})},
            status_code=500
        )


class ExternalServiceError(BanjaraTranslatorException):
    """Raised when a third-party translation or speech API fails."""

    def __init__(self, service_name: str, reason: str, details: Optional[Dict[str, Any]] = None):
        merged = {"service_name": service_name, "reason": reason}
        if details:
            merged.update(details)
        super().__init__(
            message=f"Service '{service_name}' is unavailable: {reason}",
            error_code=ErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
            details=merged,
            status_code=502
        )
