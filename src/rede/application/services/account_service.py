"""Account service: the entry point for every user operation.

Each operation validates its raw input through the validation gateway,
then runs the matching command or query against the injected repository.
Domain errors propagate unchanged. Anything else raised by a collaborator
is logged and re-raised as ``InternalError`` so internals never reach
the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from rede.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from rede.application.dtos import CreateUserInput, ListUsersParams, UpdateUserInput
from rede.application.queries import (
    GetUserByEmailQuery,
    GetUserByIdQuery,
    GetUserByIgnQuery,
    ListUsersQuery,
)
from rede.application.validation import FieldError, InvalidInputError, validate
from rede.domain.shared.exceptions import DomainException, InternalError
from rede.domain.user import User, UserRepository, parse_user_id
from rede_auth import PasswordHashingService, WeakPasswordError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _operation(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Translate unexpected collaborator failures into ``InternalError``."""

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except DomainException:
            raise
        except WeakPasswordError as e:
            raise InvalidInputError(
                (FieldError(field="password", rule="too_long", message=e.message),)
            ) from e
        except Exception as e:
            logger.exception("Account operation %s failed", func.__name__)
            raise InternalError from e

    return wrapper


class AccountService:
    """Create, read, update and delete community accounts.

    Parameters
    ----------
    user_repository
        Persistence collaborator; pass an in-memory implementation in tests.
    password_service
        One-way hashing primitive used for every stored password.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ) -> None:
        self._user_repo = user_repository
        self._password_service = password_service

    @_operation
    async def list_users(self, params: Mapping[str, Any] | None = None) -> list[User]:
        query_params = validate(params, ListUsersParams).unwrap()
        return await ListUsersQuery(self._user_repo).execute(query_params)

    @_operation
    async def get_user(self, raw_id: str) -> User:
        user_id = parse_user_id(raw_id)
        return await GetUserByIdQuery(self._user_repo).execute(user_id)

    @_operation
    async def get_user_by_ign(self, ign: str) -> User:
        return await GetUserByIgnQuery(self._user_repo).execute(ign)

    @_operation
    async def get_user_by_email(self, email: str) -> User:
        return await GetUserByEmailQuery(self._user_repo).execute(email)

    @_operation
    async def create_user(self, payload: Any) -> User:
        data = validate(payload, CreateUserInput).unwrap()
        command = CreateUserCommand(
            user_repository=self._user_repo,
            password_service=self._password_service,
        )
        return await command.execute(data)

    @_operation
    async def update_user(self, raw_id: str, payload: Any) -> User:
        user_id = parse_user_id(raw_id)
        data = validate(payload, UpdateUserInput).unwrap()
        command = UpdateUserCommand(
            user_repository=self._user_repo,
            password_service=self._password_service,
        )
        return await command.execute(user_id, data)

    @_operation
    async def delete_user(self, raw_id: str) -> None:
        user_id = parse_user_id(raw_id)
        await DeleteUserCommand(user_repository=self._user_repo).execute(user_id)
