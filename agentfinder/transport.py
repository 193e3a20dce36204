"""
HTTP Transport for the Agent Finder SDK.

Handles HTTP communication with the upstream services, automatic retry
logic and translation of error responses into typed exceptions.
"""

import json
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from agentfinder.exceptions import (
    AgentFinderError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ServiceUnavailableError,
    ValidationError,
)
from agentfinder.logging import log_http_request, log_http_response


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


def should_retry(config: RetryConfig, status_code: int, attempt: int) -> bool:
    """
    Determine if a request should be retried.

    Args:
        config: Retry policy in effect
        status_code: HTTP status code
        attempt: Current attempt number (0-indexed)

    Returns:
        True if the request should be retried
    """
    if attempt >= config.max_retries:
        return False

    return status_code in config.retry_on


def backoff_time(config: RetryConfig, attempt: int, retry_after: str | None) -> float:
    """
    Calculate backoff time for retry.

    Uses exponential backoff with jitter, respecting the Retry-After header
    if present.

    Args:
        config: Retry policy in effect
        attempt: Current attempt number (0-indexed)
        retry_after: Value of Retry-After header (if present)

    Returns:
        Time to wait in seconds
    """
    if retry_after and config.respect_retry_after:
        try:
            return float(retry_after)
        except ValueError:
            pass  # Fall through to exponential backoff

    base_wait = config.backoff_factor ** attempt

    jitter_range = base_wait * config.jitter
    jitter = random.uniform(-jitter_range, jitter_range)
    wait_time = base_wait + jitter

    return min(wait_time, config.max_backoff)


def _error_message(data: Any, text: str, fallback: str) -> str:
    if isinstance(data, dict):
        detail = data.get("detail") or data.get("error")
        if isinstance(detail, str) and detail:
            return detail
        if isinstance(detail, dict):
            message = detail.get("message") or detail.get("msg")
            if isinstance(message, str) and message:
                return message
        if isinstance(detail, list) and detail:
            first = detail[0]
            if isinstance(first, dict) and isinstance(first.get("msg"), str):
                return first["msg"]
    return text or fallback


def parse_error_response(response: httpx.Response) -> AgentFinderError:
    """
    Parse an error response into a typed exception.

    Understands FastAPI-style ``{"detail": ...}`` bodies and
    ``{"error": ...}`` bodies, falling back to the raw response text.

    Args:
        response: HTTP response with error status

    Returns:
        Appropriate AgentFinderError subclass
    """
    text = response.text.strip()
    try:
        data = response.json()
    except ValueError:
        data = None

    status_code = response.status_code
    message = _error_message(data, text, f"HTTP {status_code}")
    details = text or None

    if status_code == 404:
        return NotFoundError("NOT_FOUND", message, status_code, details)
    elif status_code == 429:
        retry_after_str = response.headers.get("Retry-After", "60")
        try:
            retry_after = int(retry_after_str)
        except ValueError:
            retry_after = 60
        return RateLimitedError("RATE_LIMITED", message, retry_after, status_code, details)
    elif status_code >= 500:
        return ServerError("UPSTREAM_ERROR", message, status_code, details)
    else:
        return ValidationError("BAD_REQUEST", message, status_code, details)


def parse_success_response(response: httpx.Response) -> Any:
    """
    Decode the JSON body of a successful response.

    Raises:
        ServerError: If the body is not valid JSON
    """
    if not response.content:
        return {}
    try:
        return response.json()
    except (ValueError, json.JSONDecodeError) as e:
        raise ServerError(
            "INVALID_RESPONSE",
            f"Upstream returned a non-JSON body: {e}",
            response.status_code,
            response.text[:500] or None,
        ) from e


class HTTPTransport:
    """
    HTTP transport layer with retry logic.

    Handles:
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Error response parsing into typed exceptions
    - Debug logging of every upstream exchange
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "http://localhost:8004")
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
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
            path: API path (e.g., "/api/v1/agents/search")
            params: Query parameters
            body: JSON request body (for POST/PUT)

        Returns:
            Parsed JSON response

        Raises:
            AgentFinderError: On upstream errors
        """
        url = f"{self.base_url}{path}"

        def make_request() -> httpx.Response:
            log_http_request(method, url, params=params, body=body)
            started = time.monotonic()
            response = self._client.request(method, path, params=params, json=body)
            log_http_response(
                response.status_code,
                url,
                elapsed_ms=(time.monotonic() - started) * 1000,
            )
            return response

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> Any:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            Parsed JSON response

        Raises:
            AgentFinderError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    return parse_success_response(response)

                error = parse_error_response(response)

                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                time.sleep(self._get_backoff_time(attempt, retry_after))

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServiceUnavailableError("CONNECTION_ERROR", str(e), 503) from e

                last_error = e
                time.sleep(self._get_backoff_time(attempt, None))

        if last_error:
            if isinstance(last_error, AgentFinderError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        return should_retry(self.retry_config, status_code, attempt)

    def _get_backoff_time(self, attempt: int, retry_after: str | None) -> float:
        return backoff_time(self.retry_config, attempt, retry_after)
