"""Tests for the user read model returned by the API."""

from rede.domain.user import Permissions, User, UserRole
from rede.presentation.api.schemas import UserResponse


def _user() -> User:
    return User.create(
        name="Alex",
        surname="Crafter",
        ign="Alex",
        email="alex@example.com",
        password_hash="$2b$04$hash",
        role=UserRole.MANAGER_PLUS,
        permissions=Permissions(can_edit_user=True),
    )


class TestUserResponse:
    def test_camel_case_keys(self):
        data = UserResponse.from_user(_user(), include_password=True).model_dump(
            by_alias=True,
            mode="json",
        )

        assert data["nameWithSurname"] == "Alex Crafter"
        assert data["avatarUrl"] == "https://mc-heads.net/avatar/Alex/400"
        assert data["role"] == "manager+"
        assert data["permissions"]["canEditUser"] is True
        assert data["password"] == "$2b$04$hash"
        assert data["discord"] is None

    def test_password_left_unset_when_hidden(self):
        response = UserResponse.from_user(_user(), include_password=False)

        data = response.model_dump(by_alias=True, exclude_unset=True)

        assert "password" not in data
        assert "nameWithSurname" in data
