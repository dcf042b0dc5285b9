"""Pytest configuration and shared fixtures for greeting service tests."""

from __future__ import annotations

from typing import Generator

import pytest
import structlog

from greeting_service.adapters.outbound import InMemoryUserNameRepository
from greeting_service.infrastructure.config import Config, DirectoryConfig
from greeting_service.infrastructure.container import Container


class StubUserNameRepository:
    """Test double resolving user 1 to Alice, everyone else to Unknown."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[int] = []

    def get_user_name(self, user_id: int) -> str:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        if user_id == 1:
            return "Alice"
        return "Unknown"


@pytest.fixture(autouse=True)
def reset_globals() -> Generator[None, None, None]:
    """Reset the DI container and structlog config around each test."""
    Container.reset()
    structlog.reset_defaults()
    yield
    Container.reset()
    structlog.reset_defaults()


@pytest.fixture
def stub_repository() -> StubUserNameRepository:
    """Provide a repository that knows Alice."""
    return StubUserNameRepository()


@pytest.fixture
def failing_repository() -> StubUserNameRepository:
    """Provide a repository whose lookups always fail."""
    return StubUserNameRepository(error=RuntimeError("user not found"))


@pytest.fixture
def in_memory_repository() -> InMemoryUserNameRepository:
    """Provide a seeded in-memory user directory."""
    return InMemoryUserNameRepository({1: "Alice", 2: "Bob"})


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config(directory=DirectoryConfig(users={1: "Alice", 2: "Bob"}))


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
