"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── InvalidConfigurationError
    ├── ApplicationError         (application.py)
    │   └── RateLimitExceededError
    └── InfrastructureError      (infrastructure.py)
        └── StoreUnavailableError
            ├── StoreTimeoutError
            ├── CASConflictExhaustedError
            └── StateCodecError
"""

from tollgate.kernel.errors.application import ApplicationError, RateLimitExceededError
from tollgate.kernel.errors.base import BaseError
from tollgate.kernel.errors.domain import DomainError, InvalidConfigurationError
from tollgate.kernel.errors.infrastructure import (
    CASConflictExhaustedError,
    InfrastructureError,
    StateCodecError,
    StoreTimeoutError,
    StoreUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CASConflictExhaustedError",
    "DomainError",
    "InfrastructureError",
    "InvalidConfigurationError",
    "RateLimitExceededError",
    "StateCodecError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
