"""Shared domain building blocks."""

from rede.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InternalError,
    ValidationError,
)
from rede.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "InternalError",
    "ValidationError",
    "utc_now",
]
