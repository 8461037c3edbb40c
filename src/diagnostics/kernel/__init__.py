"""Kernel – framework-agnostic building blocks (errors, clock)."""

from diagnostics.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvariantViolationError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "SerializationError",
    "ValidationError",
]
