"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/          # Fast, isolated tests (mocks and in-memory fakes)
    ├── integration/   # SQLite-backed repository and API tests
    └── shared/        # Shared fixtures and fakes
"""

import pytest

from rede_auth import PasswordHashingService
from rede_config import clear_settings_cache
from tests.shared.fixtures.in_memory_user_repository import InMemoryUserRepository

# bcrypt minimum work factor keeps the suite fast
TEST_HASH_ROUNDS = 4


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Make every test read settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def create_payload() -> dict:
    """A valid registration payload using the wire (camelCase) keys."""
    return {
        "name": "Steve",
        "surname": "Minecraft",
        "discord": "steve#0001",
        "ign": "Steve",
        "email": "steve@example.com",
        "password": "diamond123",
    }
