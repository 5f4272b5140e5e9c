"""Web search adapter used by the webSearch tool."""

import asyncio
import logging
from typing import Any

import constants
from cache.cache import Cache

logger = logging.getLogger(__name__)


class WebSearchAdapter:
    """Run web searches and condense their results into one text blob.

    Results are cached by the literal query string. A failing provider call
    is not retried and nothing is cached for it; the error propagates to the
    caller.
    """

    def __init__(
        self,
        client: Any,
        cache: Cache[str],
        max_results: int = constants.DEFAULT_SEARCH_MAX_RESULTS,
        timeout: float = constants.DEFAULT_PROVIDER_TIMEOUT,
    ) -> None:
        """Initialize the adapter.

        Parameters:
            client: Async search client exposing `search(query)` that returns
            a mapping with a `results` list (AsyncTavilyClient).
            cache: Search cache keyed by query string.
            max_results: Number of leading results that are kept.
            timeout: Timeout in seconds for one provider call.
        """
        self.client = client
        self.cache = cache
        self.max_results = max_results
        self.timeout = timeout

    async def search(self, query: str) -> str:
        """Return condensed search results for the query.

        Parameters:
            query (str): Search query exactly as requested by the model.

        Returns:
            str: Content of the top results joined by a blank line.

        Raises:
            TimeoutError: If the provider does not answer within the timeout.
            Exception: Any error raised by the search client.
        """
        cached = self.cache.get(query)
        if cached is not None:
            logger.info("Web search cache hit: %s", query)
            return cached

        logger.info("Web search cache miss, calling provider: %s", query)
        response = await asyncio.wait_for(
            self.client.search(query), timeout=self.timeout
        )
        content = condense_results(response, self.max_results)

        self.cache.set(query, content)
        return content


def condense_results(response: Any, max_results: int) -> str:
    """Join the content of the leading search results.

    Parameters:
        response: Search provider response with a `results` list whose items
        carry a `content` field.
        max_results: Number of leading results to keep; all of them are used
        when there are fewer.

    Returns:
        str: The `content` of each kept result separated by a blank line.

    Raises:
        KeyError: If the response has no `results` list.
        TypeError: If the response is not a mapping.
    """
    results = response["results"][:max_results]
    return constants.SEARCH_RESULTS_SEPARATOR.join(
        str(result.get("content") or "") for result in results
    )
