"""
Async HTTP Transport for the Agent Finder SDK.

Async twin of :mod:`agentfinder.transport` built on ``httpx.AsyncClient``.
The retry policy and error parsing are shared with the sync transport.
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from agentfinder.exceptions import AgentFinderError, ServerError, ServiceUnavailableError
from agentfinder.logging import log_http_request, log_http_response
from agentfinder.transport import (
    RetryConfig,
    backoff_time,
    parse_error_response,
    parse_success_response,
    should_retry,
)


class AsyncHTTPTransport:
    """
    Async HTTP transport layer with retry logic.

    Handles:
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "http://localhost:8004")
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a request with automatic retry.

        Args:
            method: HTTP method
            path: API path
            params: Query parameters
            body: JSON request body (for POST/PUT)

        Returns:
            Parsed JSON response

        Raises:
            AgentFinderError: On upstream errors
        """
        url = f"{self.base_url}{path}"

        async def make_request() -> httpx.Response:
            log_http_request(method, url, params=params, body=body)
            started = time.monotonic()
            response = await self._client.request(method, path, params=params, json=body)
            log_http_response(
                response.status_code,
                url,
                elapsed_ms=(time.monotonic() - started) * 1000,
            )
            return response

        return await self._execute_with_retry(make_request)

    async def _execute_with_retry(
        self, request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]]
    ) -> Any:
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = await request_fn()

                if response.status_code < 400:
                    return parse_success_response(response)

                error = parse_error_response(response)

                if not should_retry(self.retry_config, response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                await asyncio.sleep(backoff_time(self.retry_config, attempt, retry_after))

            except httpx.RequestError as e:
                if attempt >= self.retry_config.max_retries:
                    raise ServiceUnavailableError("CONNECTION_ERROR", str(e), 503) from e

                last_error = e
                await asyncio.sleep(backoff_time(self.retry_config, attempt, None))

        if last_error:
            if isinstance(last_error, AgentFinderError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")
