"""Query to list users page by page."""

from rede.application.dtos import ListUsersParams
from rede.domain.user import User, UserRepository


class ListUsersQuery:
    """Return one page of users in insertion order, without filtering."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, params: ListUsersParams) -> list[User]:
        return await self._user_repo.find_page(
            offset=params.offset,
            limit=params.limit,
        )
