"""Users router: account CRUD and identity lookups.

Request bodies and query strings are handed to the AccountService as raw
data; its validation gateway produces the field-level errors.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request, Response, status

from rede.domain.user import User
from rede.presentation.api.dependencies import Accounts, AppSettings, DBSession
from rede.presentation.api.schemas import ErrorResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input or id"},
    404: {"model": ErrorResponse, "description": "User not found"},
}

UserBody = Body(
    None,
    description="User fields in camelCase (see the create/update contracts)",
)


def _to_response(user: User, settings: AppSettings) -> UserResponse:
    return UserResponse.from_user(
        user,
        include_password=settings.api_expose_password_hash,
    )


@router.get(
    "",
    summary="List users",
    response_model=list[UserResponse],
    response_model_exclude_unset=True,
    responses={400: ERROR_RESPONSES[400]},
)
async def list_users(
    request: Request,
    accounts: Accounts,
    settings: AppSettings,
) -> list[UserResponse]:
    """Return one page of users (`?page=1&limit=10`) in insertion order."""
    users = await accounts.list_users(dict(request.query_params))
    return [_to_response(u, settings) for u in users]


@router.get(
    "/ign/{ign}",
    summary="Get a user by in-game name",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_user_by_ign(
    ign: str,
    accounts: Accounts,
    settings: AppSettings,
) -> UserResponse:
    """Case-insensitive lookup by IGN."""
    return _to_response(await accounts.get_user_by_ign(ign), settings)


@router.get(
    "/email/{email}",
    summary="Get a user by email",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    responses={404: ERROR_RESPONSES[404]},
)
async def get_user_by_email(
    email: str,
    accounts: Accounts,
    settings: AppSettings,
) -> UserResponse:
    """Case-insensitive lookup by email address."""
    return _to_response(await accounts.get_user_by_email(email), settings)


@router.get(
    "/{user_id}",
    summary="Get a user by id",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
)
async def get_user(
    user_id: str,
    accounts: Accounts,
    settings: AppSettings,
) -> UserResponse:
    return _to_response(await accounts.get_user(user_id), settings)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    responses={
        400: ERROR_RESPONSES[400],
        409: {"model": ErrorResponse, "description": "Email, discord or IGN taken"},
    },
)
async def create_user(
    accounts: Accounts,
    session: DBSession,
    settings: AppSettings,
    payload: Any = UserBody,
) -> UserResponse:
    """Create a user.

    `nameWithSurname` is derived, the password is stored as a bcrypt hash,
    and `avatarUrl` defaults to the avatar of the given IGN.
    """
    user = await accounts.create_user(payload)
    await session.commit()
    return _to_response(user, settings)


@router.put(
    "/{user_id}",
    summary="Update a user",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
)
async def update_user(
    user_id: str,
    accounts: Accounts,
    session: DBSession,
    settings: AppSettings,
    payload: Any = UserBody,
) -> UserResponse:
    """Partially update a user.

    Omitted fields keep their value; `permissions` is merged flag by flag.
    """
    user = await accounts.update_user(user_id, payload)
    await session.commit()
    return _to_response(user, settings)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    response_class=Response,
    responses=ERROR_RESPONSES,
)
async def delete_user(
    user_id: str,
    accounts: Accounts,
    session: DBSession,
) -> Response:
    await accounts.delete_user(user_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
