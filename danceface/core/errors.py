"""Error types shared by services, storage and the HTTP layer."""

from __future__ import annotations


class DanceFaceError(Exception):
    """Base class for application errors carrying a client-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DanceFaceError):
    """Rejected input. Surfaced as a 400 response."""


class AuthorizationError(DanceFaceError):
    """Missing or bad admin credentials. Surfaced as a 401 response."""


class PersistenceError(DanceFaceError):
    """A record store could not read or write its backing file."""


__all__ = [
    "AuthorizationError",
    "DanceFaceError",
    "PersistenceError",
    "ValidationError",
]
