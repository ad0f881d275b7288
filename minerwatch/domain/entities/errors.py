"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidFragmentError(DomainError):
    """Raised when the arrays of a history fragment disagree in length."""

    def __init__(self, lengths: Dict[str, int]):
        message = f"History fragment arrays have mismatched lengths: {lengths}"
        super().__init__(message, {"lengths": lengths})


class DeviceGatewayError(DomainError):
    """Raised when the device API cannot be reached or answers with an error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class StorageError(DomainError):
    """Raised by key/value stores when a read or write fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class SeriesPersistenceError(DomainError):
    """Raised when the series buffer cannot be written to durable storage."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
