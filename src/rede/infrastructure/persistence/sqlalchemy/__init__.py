"""SQLAlchemy persistence for the account service."""

from rede.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from rede.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
