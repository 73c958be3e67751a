"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from rede.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Every call is a suspension point; implementations must not block the
    event loop while talking to the store.
    """

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> list[User]:
        """Return up to ``limit`` users after skipping ``offset``, in insertion order."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_ign(self, ign: str) -> Optional[User]:
        """Find the first user whose in-game name matches, ignoring case."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the first user whose email matches, ignoring case."""

    @abstractmethod
    async def find_conflicting(
        self,
        email: str,
        ign: str,
        discord: Optional[str] = None,
    ) -> Optional[User]:
        """Find any user sharing the email, the in-game name or the discord handle.

        Email and in-game name compare case-insensitively, discord exactly.
        The discord clause is skipped when ``discord`` is None.
        """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert a new user or update an existing one."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""
