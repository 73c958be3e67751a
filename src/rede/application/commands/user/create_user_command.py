import logging

from rede.application.dtos import CreateUserInput
from rede.domain.user import User, UserAlreadyExistsError, UserRepository
from rede_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to register a new user."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(self, data: CreateUserInput) -> User:
        existing = await self._user_repo.find_conflicting(
            email=data.email,
            ign=data.ign,
            discord=data.discord,
        )
        if existing:
            raise UserAlreadyExistsError(_clashing_fields(existing, data))

        user = User.create(
            name=data.name,
            surname=data.surname,
            ign=data.ign,
            email=data.email,
            password_hash=self._password_service.hash(data.password),
            discord=data.discord,
            avatar_url=data.avatar_url,
            role=data.role,
            permissions=data.permissions.to_permissions(),
        )

        await self._user_repo.save(user)
        logger.info("Created user %s (ign: %s)", user.id, user.ign)
        return user


def _clashing_fields(existing: User, data: CreateUserInput) -> list[str]:
    fields = []
    if existing.email.lower() == data.email.lower():
        fields.append("email")
    if existing.ign.lower() == data.ign.lower():
        fields.append("ign")
    if data.discord is not None and existing.discord == data.discord:
        fields.append("discord")
    return fields
