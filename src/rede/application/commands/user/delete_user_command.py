import logging
from uuid import UUID

from rede.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to hard-delete a user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        await self._user_repo.delete(user_id)
        logger.info("Deleted user %s", user_id)
