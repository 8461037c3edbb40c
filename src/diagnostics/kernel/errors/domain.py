"""Domain errors – invariant violations and rejected input."""

from __future__ import annotations

from diagnostics.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An internal invariant was violated.

    Signals a programming error rather than bad input; callers are not
    expected to recover from it.
    """

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


__all__ = [
    "DomainError",
    "InvariantViolationError",
    "ValidationError",
]
