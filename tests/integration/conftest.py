"""Shared fixtures for integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from pytest_mock import AsyncMockType, MockerFixture

from configuration import AppConfig, configuration
from utils.types import Singleton

CONFIGURATION_FILE = "tests/configuration/chat-service.yaml"


@pytest.fixture(name="test_config")
def test_config_fixture() -> AppConfig:
    """Load the real test configuration.

    Reloading also drops the response and search caches, so every test
    starts with empty caches.
    """
    Singleton._instances = {}  # pylint: disable=protected-access
    configuration.load_configuration(CONFIGURATION_FILE)
    return configuration


@pytest.fixture(name="provider_clients")
def provider_clients_fixture(
    mocker: MockerFixture,
) -> tuple[AsyncMockType, AsyncMockType]:
    """Mock only the external chat completion and web search services.

    Returns:
        tuple: (mock_chat_client, mock_search_client) used by the chat endpoint.
    """
    mock_chat_client = mocker.AsyncMock()
    mock_search_client = mocker.AsyncMock()

    chat_holder = mocker.patch("app.endpoints.chat.AsyncChatClientHolder")
    chat_holder.return_value.get_client.return_value = mock_chat_client
    search_holder = mocker.patch("app.endpoints.chat.AsyncSearchClientHolder")
    search_holder.return_value.get_client.return_value = mock_search_client

    return mock_chat_client, mock_search_client


@pytest.fixture(name="client")
def client_fixture(test_config: AppConfig) -> Generator[TestClient, None, None]:
    """REST API client running the application lifespan."""
    _ = test_config
    from app.main import app  # pylint: disable=import-outside-toplevel

    with TestClient(app) as test_client:
        yield test_client
