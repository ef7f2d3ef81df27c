"""HTTP transport for the Solr FAQ service."""

import logging
from collections.abc import AsyncIterator

import httpx

from faqbot.config import get_settings
from faqbot.errors import BackendUnavailableError
from .models import QueryTarget


class SolrTransport:
    """Issues qa queries against Solr and streams back the response units."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize Solr transport.

        Args:
            client: HTTP client to use, one is created when omitted
            timeout: Request timeout in seconds, defaults to settings.request_timeout
            logger: Logger used for observability, defaults to the module logger
        """
        self.timeout = timeout or get_settings().request_timeout
        self.client = client or httpx.AsyncClient(timeout=self.timeout)
        self.logger = logger or logging.getLogger(__name__)

    async def fetch(self, target: QueryTarget) -> AsyncIterator[str]:
        """Send the query and yield every non-blank line of the response.

        The connection is released once iteration finishes or fails.

        Args:
            target: Query built by QueryBuilder

        Yields:
            Raw response units, one JSON object each

        Raises:
            BackendUnavailableError: On connection errors, timeouts or a non-200 status
        """
        try:
            async with self.client.stream(
                "GET",
                target.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            ) as response:
                self.logger.debug(f"FAQ service response status: {response.status_code}")
                if response.status_code != 200:
                    raise BackendUnavailableError(
                        f"FAQ service returned HTTP {response.status_code} for {target.url}"
                    )

                async for line in response.aiter_lines():
                    if line.strip():
                        self.logger.debug(f"Received raw reply from FAQ service: {line}")
                        yield line

        except httpx.TimeoutException as e:
            raise BackendUnavailableError(
                f"FAQ service timed out after {self.timeout}s: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise BackendUnavailableError(f"FAQ service request failed: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
