"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly. None of them knows
about status codes; the boundary that catches them decides how to present
each kind.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A payload is malformed or a business rule was violated.

    ``fields`` names every offending field when the failure comes from
    validating a record, so callers get the whole list at once.
    """

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConflictError(DomainException):
    """The operation would break a uniqueness rule."""


class StorageError(DomainException):
    """The backing store could not be read or written."""
