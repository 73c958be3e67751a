"""SQLAlchemy model for the User aggregate."""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON, Index, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from rede.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    ``name_with_surname`` is stored for querying convenience but is always
    recomputed by the aggregate. ``permissions`` holds the 13 flags under
    their camelCase keys.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    surname: Mapped[str] = mapped_column(String(255), nullable=False)
    name_with_surname: Mapped[str] = mapped_column(String(511), nullable=False)
    discord: Mapped[Optional[str]] = mapped_column(
        String(255),
        unique=True,
        nullable=True,
    )
    # unique ignoring case, see the lower() indexes below
    ign: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="member", nullable=False)
    permissions: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, ign={self.ign}, role={self.role})>"


Index("uq_users_ign_lower", func.lower(UserModel.ign), unique=True)
Index("uq_users_email_lower", func.lower(UserModel.email), unique=True)
