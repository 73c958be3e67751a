import logging
from uuid import UUID

from rede.application.dtos import UpdateUserInput
from rede.domain.user import User, UserNotFoundError, UserRepository
from rede_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Command to partially update an existing user.

    Unlike registration, an update neither re-checks uniqueness against
    other users nor re-derives the avatar from a changed in-game name.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(self, user_id: UUID, data: UpdateUserInput) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        password_hash = (
            self._password_service.hash(data.password) if data.password else None
        )

        user.apply_changes(
            name=data.name,
            surname=data.surname,
            discord=data.discord,
            ign=data.ign,
            email=data.email,
            password_hash=password_hash,
            avatar_url=data.avatar_url,
            role=data.role,
            permissions=data.permissions.supplied() if data.permissions else None,
        )

        await self._user_repo.save(user)
        logger.info("Updated user %s", user.id)
        return user
