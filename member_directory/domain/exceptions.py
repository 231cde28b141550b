"""
Domain-level exceptions for the hexagonal architecture.

These exceptions represent business rule violations and store failures.
They are mapped to HTTP responses in the API layer.
"""

from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-level errors."""
    pass


class ValidationError(DomainException):
    """Raised when input is malformed, before any store call is made."""
    pass


class NotFoundError(DomainException):
    """Base exception for entities not found."""
    pass


class SearchHistoryNotFoundError(NotFoundError):
    """Raised when a search history entry is not found."""
    pass


class StoreUnavailableError(DomainException):
    """Raised when the backing store cannot be reached.

    Surfaced to the caller unchanged; the service never retries internally.
    """

    def __init__(self, operation: str, reason: Optional[str] = None):
        self.operation = operation
        self.reason = reason

        message = f"Store unavailable during {operation}"
        if reason:
            message += f": {reason}"

        super().__init__(message)


__all__ = [
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "SearchHistoryNotFoundError",
    "StoreUnavailableError",
]
