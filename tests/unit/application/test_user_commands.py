"""Unit tests for user commands and queries."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

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
from rede.domain.user import (
    Permissions,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from rede_auth.services import PasswordHashingService

TEST_EMAIL = "steve@example.com"
TEST_PASSWORD = "diamond123"


def _existing_user(**overrides) -> User:
    fields = {
        "name": "Steve",
        "surname": "Minecraft",
        "ign": "Steve",
        "email": TEST_EMAIL,
        "password_hash": "old_hash",
        "discord": "steve#0001",
    }
    fields.update(overrides)
    return User.create(**fields)


class TestCreateUserCommand:
    """Tests for CreateUserCommand."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "hashed_password"

        self.command = CreateUserCommand(
            user_repository=self.user_repo,
            password_service=self.password_service,
        )

    def _input(self, **overrides) -> CreateUserInput:
        payload = {
            "name": "Steve",
            "surname": "Minecraft",
            "ign": "Steve",
            "email": TEST_EMAIL,
            "password": TEST_PASSWORD,
        }
        payload.update(overrides)
        return CreateUserInput.model_validate(payload)

    @pytest.mark.asyncio
    async def test_create_user_success(self):
        self.user_repo.find_conflicting.return_value = None

        user = await self.command.execute(self._input())

        assert user.name_with_surname == "Steve Minecraft"
        assert user.password_hash == "hashed_password"
        assert user.avatar_url == "https://mc-heads.net/avatar/Steve/400"
        assert user.permissions == Permissions()
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.user_repo.save.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_checks_all_three_identity_keys(self):
        self.user_repo.find_conflicting.return_value = None

        await self.command.execute(self._input(discord="steve#0001"))

        self.user_repo.find_conflicting.assert_called_once_with(
            email=TEST_EMAIL,
            ign="Steve",
            discord="steve#0001",
        )

    @pytest.mark.asyncio
    async def test_supplied_avatar_is_kept(self):
        self.user_repo.find_conflicting.return_value = None

        user = await self.command.execute(
            self._input(avatarUrl="https://cdn.example.com/steve.png"),
        )

        assert user.avatar_url == "https://cdn.example.com/steve.png"

    @pytest.mark.asyncio
    async def test_duplicate_raises_without_hashing_or_saving(self):
        self.user_repo.find_conflicting.return_value = _existing_user()

        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await self.command.execute(self._input(ign="Other", discord="x#1234"))

        assert exc_info.value.fields == ["email"]
        self.password_service.hash.assert_not_called()
        self.user_repo.save.assert_not_called()


class TestUpdateUserCommand:
    """Tests for UpdateUserCommand."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "new_hash"

        self.command = UpdateUserCommand(
            user_repository=self.user_repo,
            password_service=self.password_service,
        )

    @pytest.mark.asyncio
    async def test_missing_user_raises(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.command.execute(uuid4(), UpdateUserInput(name="Alex"))

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_without_password_keeps_hash(self):
        user = _existing_user()
        self.user_repo.find_by_id.return_value = user

        result = await self.command.execute(user.id, UpdateUserInput(name="Alex"))

        assert result.password_hash == "old_hash"
        assert result.name_with_surname == "Alex Minecraft"
        self.password_service.hash.assert_not_called()
        self.user_repo.save.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_with_password_rehashes(self):
        user = _existing_user()
        self.user_repo.find_by_id.return_value = user

        result = await self.command.execute(
            user.id,
            UpdateUserInput(password="emerald456"),
        )

        assert result.password_hash == "new_hash"
        self.password_service.hash.assert_called_once_with("emerald456")

    @pytest.mark.asyncio
    async def test_does_not_check_uniqueness(self):
        user = _existing_user()
        self.user_repo.find_by_id.return_value = user

        await self.command.execute(user.id, UpdateUserInput(email="taken@example.com"))

        self.user_repo.find_conflicting.assert_not_called()


class TestDeleteUserCommand:
    """Tests for DeleteUserCommand."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.command = DeleteUserCommand(user_repository=self.user_repo)

    @pytest.mark.asyncio
    async def test_delete_user_success(self):
        user = _existing_user()
        self.user_repo.find_by_id.return_value = user

        await self.command.execute(user.id)

        self.user_repo.delete.assert_called_once_with(user.id)

    @pytest.mark.asyncio
    async def test_delete_nonexistent_user_raises(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.command.execute(uuid4())

        self.user_repo.delete.assert_not_called()


class TestUserQueries:
    def setup_method(self):
        self.user_repo = AsyncMock()

    @pytest.mark.asyncio
    async def test_list_uses_offset_and_limit(self):
        self.user_repo.find_page.return_value = []

        await ListUsersQuery(self.user_repo).execute(ListUsersParams(page=3, limit=5))

        self.user_repo.find_page.assert_called_once_with(offset=10, limit=5)

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await GetUserByIdQuery(self.user_repo).execute(uuid4())

    @pytest.mark.asyncio
    async def test_get_by_ign_not_found(self):
        self.user_repo.find_by_ign.return_value = None

        with pytest.raises(UserNotFoundError):
            await GetUserByIgnQuery(self.user_repo).execute("nobody")

    @pytest.mark.asyncio
    async def test_get_by_email_returns_user(self):
        user = _existing_user()
        self.user_repo.find_by_email.return_value = user

        result = await GetUserByEmailQuery(self.user_repo).execute("STEVE@example.com")

        assert result is user
        self.user_repo.find_by_email.assert_called_once_with("STEVE@example.com")
