"""Domain-level exceptions.

Validation raises MalformedEntityError before anything reaches storage.
Repository adapters translate driver failures into NotFoundError,
ConflictError or InternalError so callers only ever see these kinds.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds a caller can branch on."""
    MALFORMED_ENTITY = 'malformed_entity'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    INTERNAL = 'internal'


class DomainError(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class MalformedEntityError(DomainError):
    """Email is not well-formed or password is too short."""

    kind = ErrorKind.MALFORMED_ENTITY


class NotFoundError(DomainError):
    """No stored user matches the given email."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    """A user with the same email already exists."""

    kind = ErrorKind.CONFLICT


class InternalError(DomainError):
    """Storage failed for reasons unrelated to the input."""

    kind = ErrorKind.INTERNAL


class OperationCancelledError(InternalError):
    """The operation context was cancelled before the work completed."""


class DeadlineExceededError(OperationCancelledError):
    """The operation context's deadline passed."""
