"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A product record failed one of the validation rules.

    ``rule`` names the field whose rule was violated (``None`` for
    errors that are not tied to a single field).
    """

    def __init__(self, message: str, rule: str | None = None) -> None:
        super().__init__(message)
        self.rule = rule


class DuplicateKeyError(DomainException):
    """A record with the same product ID already exists."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
