"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from typing import Any, Generator, TypeAlias

import pytest
from pytest_mock import AsyncMockType, MockerFixture

from configuration import AppConfig
from utils.types import Singleton

ProviderFixtures: TypeAlias = Generator[
    tuple[
        AsyncMockType,
        AsyncMockType,
    ],
    None,
    None,
]


@pytest.fixture(autouse=True)
def reset_singletons() -> None:
    """Reset provider client holders between tests."""
    Singleton._instances = {}  # pylint: disable=protected-access


@pytest.fixture(name="minimal_config")
def minimal_config_fixture() -> AppConfig:
    """Create a minimal AppConfig with only required fields.

    The fixture also resets the process-wide caches, so every test starts
    with empty response and search caches.

    Returns:
        AppConfig: A minimal AppConfig instance with required fields only.
    """
    cfg = AppConfig()
    cfg.init_from_dict(minimal_config_dict())
    return cfg


def minimal_config_dict() -> dict[str, Any]:
    """Return the smallest valid configuration dictionary."""
    return {
        "name": "test",
        "chat_provider": {"api_key": "test-chat-key"},
        "search_provider": {"api_key": "test-search-key"},
    }


@pytest.fixture(name="prepare_provider_mocks")
def prepare_provider_mocks_fixture(
    mocker: MockerFixture,
) -> ProviderFixtures:
    """Prepare mocks for the chat completion and web search clients.

    The chat endpoint retrieves its clients from the holders, so the
    holders are patched to return the mocks.

    Yields:
        tuple: (mock_chat_client, mock_search_client)
    """
    mock_chat_client = mocker.AsyncMock()
    mock_search_client = mocker.AsyncMock()

    chat_holder = mocker.patch("app.endpoints.chat.AsyncChatClientHolder")
    chat_holder.return_value.get_client.return_value = mock_chat_client
    search_holder = mocker.patch("app.endpoints.chat.AsyncSearchClientHolder")
    search_holder.return_value.get_client.return_value = mock_search_client

    yield mock_chat_client, mock_search_client
