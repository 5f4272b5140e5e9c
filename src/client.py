"""Chat completion and web search client retrieval classes."""

import logging

from typing import Optional

from openai import AsyncOpenAI
from tavily import AsyncTavilyClient

from models.config import ChatProviderConfiguration, SearchProviderConfiguration
from utils.types import Singleton


logger = logging.getLogger(__name__)


class AsyncChatClientHolder(metaclass=Singleton):
    """Container for an initialised AsyncOpenAI client."""

    _client: Optional[AsyncOpenAI] = None

    def load(self, chat_provider_config: ChatProviderConfiguration) -> None:
        """
        Create the AsyncOpenAI client according to the provided config.

        The client talks to any OpenAI-compatible chat completion API found
        at `chat_provider_config.url`. Every call is bounded by the configured
        timeout and is never retried.

        Parameters:
            chat_provider_config (ChatProviderConfiguration): Base URL, API
            key and timeout of the chat completion provider.
        """
        logger.info("Using chat completion API at %s", chat_provider_config.url)
        self._client = AsyncOpenAI(
            api_key=chat_provider_config.api_key.get_secret_value(),
            base_url=chat_provider_config.url,
            timeout=chat_provider_config.timeout,
            max_retries=0,
        )

    def is_loaded(self) -> bool:
        """Return True when the client has been created."""
        return self._client is not None

    def get_client(self) -> AsyncOpenAI:
        """
        Get the initialized client held by this holder.

        Returns:
            AsyncOpenAI: The initialized client instance.

        Raises:
            RuntimeError: If the client has not been initialized; call `load(...)` first.
        """
        if not self._client:
            raise RuntimeError(
                "AsyncOpenAI client has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._client


class AsyncSearchClientHolder(metaclass=Singleton):
    """Container for an initialised AsyncTavilyClient."""

    _client: Optional[AsyncTavilyClient] = None

    def load(self, search_provider_config: SearchProviderConfiguration) -> None:
        """
        Create the AsyncTavilyClient according to the provided config.

        Parameters:
            search_provider_config (SearchProviderConfiguration): API key of
            the web search provider.
        """
        logger.info("Using Tavily web search API")
        self._client = AsyncTavilyClient(
            api_key=search_provider_config.api_key.get_secret_value()
        )

    def is_loaded(self) -> bool:
        """Return True when the client has been created."""
        return self._client is not None

    def get_client(self) -> AsyncTavilyClient:
        """
        Get the initialized client held by this holder.

        Returns:
            AsyncTavilyClient: The initialized client instance.

        Raises:
            RuntimeError: If the client has not been initialized; call `load(...)` first.
        """
        if not self._client:
            raise RuntimeError(
                "AsyncTavilyClient has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._client
