"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application layer can catch them uniformly and turn them into
user-facing messages.
"""

from __future__ import annotations

from pathlib import Path


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A product attribute broke one of the catalog rules."""


class PersistenceError(DomainException):
    """The product file could not be read or written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path
