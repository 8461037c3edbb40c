"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   └── ValidationError
    │       └── InvalidIdError   (observability.tracing.errors)
    ├── ApplicationError     (application.py)
    │   └── ConfigError          (config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError
"""

from diagnostics.kernel.errors.application import ApplicationError
from diagnostics.kernel.errors.base import BaseError
from diagnostics.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    ValidationError,
)
from diagnostics.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
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
