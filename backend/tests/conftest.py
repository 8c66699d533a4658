"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest

from api.dependencies import ServiceContainer, reset_container, set_container
from modules.auth.token_store import MemoryTokenStore
from modules.client import ApiClient
from shared.config import Settings

from fakes import TEST_API_BASE, FakeBackend, create_test_token


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def api_client(backend: FakeBackend, token_store: MemoryTokenStore) -> ApiClient:
    """API client talking to the fake backend."""
    return ApiClient(TEST_API_BASE, token_store, transport=backend.transport)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        api_base_url=TEST_API_BASE,
        token_store_path=tmp_path / "session.json",
        calendar_timezone="UTC",
    )


@pytest.fixture
def container(
    settings: Settings,
    backend: FakeBackend,
    token_store: MemoryTokenStore,
) -> ServiceContainer:
    """Service container wired to the fake backend, installed as the singleton."""
    container = ServiceContainer(
        settings=settings, transport=backend.transport, token_store=token_store
    )
    set_container(container)
    return container
