"""Input contracts for account operations.

These models describe the shape of untrusted payloads. They accept the
camelCase keys used on the wire as well as the Python field names, and
silently drop keys they do not know.

Email addresses and avatar URLs are checked for format but kept exactly
as the client sent them. String lengths are capped at the column sizes
of the ``users`` table.
"""

from dataclasses import asdict
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    StrictBool,
    StrictStr,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from rede.domain.user import Permissions, UserRole

MAX_TEXT_LENGTH = 255
MAX_URL_LENGTH = 2048

_http_url = TypeAdapter(HttpUrl)


def _check_email(value: str) -> str:
    # display-name form ("Steve <steve@example.com>") is not an address
    if "<" in value:
        raise ValueError("value is not a valid email address")
    validate_email(value)
    return value


def _check_http_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError(e.errors()[0]["msg"]) from None
    return value


Text = Annotated[StrictStr, Field(max_length=MAX_TEXT_LENGTH)]
Handle = Annotated[StrictStr, Field(min_length=3, max_length=MAX_TEXT_LENGTH)]
Email = Annotated[
    StrictStr,
    Field(max_length=MAX_TEXT_LENGTH),
    AfterValidator(_check_email),
]
AvatarUrl = Annotated[
    StrictStr,
    Field(max_length=MAX_URL_LENGTH),
    AfterValidator(_check_http_url),
]
Password = Annotated[StrictStr, Field(min_length=6, max_length=72)]


class _InputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PermissionsInput(_InputModel):
    """The complete set of 13 permission flags."""

    can_create_post: StrictBool
    can_delete_post: StrictBool
    can_edit_post: StrictBool

    can_fix_post: StrictBool
    can_delete_all_post: StrictBool
    can_edit_all_post: StrictBool

    can_create_comment: StrictBool
    can_delete_comment: StrictBool
    can_edit_comment: StrictBool

    can_delete_all_comment: StrictBool
    can_edit_all_comment: StrictBool

    can_delete_user: StrictBool
    can_edit_user: StrictBool

    @classmethod
    def baseline(cls) -> "PermissionsInput":
        return cls(**asdict(Permissions()))

    def to_permissions(self) -> Permissions:
        return Permissions(**self.model_dump())


class PermissionsPatch(_InputModel):
    """Any subset of the permission flags."""

    can_create_post: Optional[StrictBool] = None
    can_delete_post: Optional[StrictBool] = None
    can_edit_post: Optional[StrictBool] = None

    can_fix_post: Optional[StrictBool] = None
    can_delete_all_post: Optional[StrictBool] = None
    can_edit_all_post: Optional[StrictBool] = None

    can_create_comment: Optional[StrictBool] = None
    can_delete_comment: Optional[StrictBool] = None
    can_edit_comment: Optional[StrictBool] = None

    can_delete_all_comment: Optional[StrictBool] = None
    can_edit_all_comment: Optional[StrictBool] = None

    can_delete_user: Optional[StrictBool] = None
    can_edit_user: Optional[StrictBool] = None

    def supplied(self) -> dict[str, bool]:
        """Return only the flags the client actually sent."""
        return self.model_dump(exclude_none=True)


class CreateUserInput(_InputModel):
    """Payload for registering a new user."""

    name: Text
    surname: Text
    discord: Optional[Handle] = None
    ign: Handle
    email: Email
    password: Password
    avatar_url: Optional[AvatarUrl] = None
    role: UserRole = UserRole.MEMBER
    permissions: PermissionsInput = Field(default_factory=PermissionsInput.baseline)


class UpdateUserInput(_InputModel):
    """Payload for a partial update; every field is optional.

    The per-field rules are the same as for creation. ``null`` counts as
    not supplied.
    """

    name: Optional[Text] = None
    surname: Optional[Text] = None
    discord: Optional[Handle] = None
    ign: Optional[Handle] = None
    email: Optional[Email] = None
    password: Optional[Password] = None
    avatar_url: Optional[AvatarUrl] = None
    role: Optional[UserRole] = None
    permissions: Optional[PermissionsPatch] = None


class ListUsersParams(_InputModel):
    """Pagination parameters for listing users."""

    limit: int = Field(default=10, ge=1)
    page: int = Field(default=1, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
