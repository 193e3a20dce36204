"""
Configuration for reaching the upstream Agent Finder services.

Backend locations are resolved once, here, and handed to the transports.
Nothing else in the SDK reads the environment.
"""

import os
from dataclasses import dataclass, field
from urllib.parse import urlparse

from agentfinder.exceptions import ConfigurationError
from agentfinder.transport import RetryConfig

DEFAULT_AGENT_FINDER_URL = "http://localhost:8004"
DEFAULT_API_PREFIX = "/api/v1"
DEFAULT_TIMEOUT = 30.0


def _validate_url(name: str, url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{name} must be an absolute http(s) URL, got {url!r}")
    return url.rstrip("/")


@dataclass
class AgentFinderConfig:
    """
    Locations and policies for the upstream services.

    The recommender and sentiment services default to the agent finder
    service when no dedicated URL is given.
    """

    agent_finder_url: str = DEFAULT_AGENT_FINDER_URL
    recommender_url: str | None = None
    sentiment_url: str | None = None
    api_prefix: str = DEFAULT_API_PREFIX
    timeout: float = DEFAULT_TIMEOUT
    retry_config: RetryConfig = field(default_factory=RetryConfig)

    def __post_init__(self) -> None:
        self.agent_finder_url = _validate_url("agent_finder_url", self.agent_finder_url)
        if self.recommender_url:
            self.recommender_url = _validate_url("recommender_url", self.recommender_url)
        if self.sentiment_url:
            self.sentiment_url = _validate_url("sentiment_url", self.sentiment_url)

        prefix = self.api_prefix.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = f"/{prefix}"
        self.api_prefix = prefix

        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    @property
    def recommender_base_url(self) -> str:
        """Base URL of the recommender service."""
        return self.recommender_url or self.agent_finder_url

    @property
    def sentiment_base_url(self) -> str:
        """Base URL of the sentiment/ML service."""
        return self.sentiment_url or self.agent_finder_url

    @classmethod
    def from_env(cls, retry_config: RetryConfig | None = None) -> "AgentFinderConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            AGENT_FINDER_API_URL: Agent search/detail service (default: http://localhost:8004)
            AGENT_RECOMMENDER_URL: Recommender service (optional)
            AGENT_SENTIMENT_URL: Sentiment/ML service (optional)
            AGENT_FINDER_API_PREFIX: Versioned path prefix (default: /api/v1)
            AGENT_FINDER_TIMEOUT: Request timeout in seconds (default: 30)

        Args:
            retry_config: Configuration for retry behavior (optional)

        Returns:
            Configured AgentFinderConfig instance

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        timeout_raw = os.environ.get("AGENT_FINDER_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid AGENT_FINDER_TIMEOUT: {timeout_raw!r}. Must be a number of seconds"
                ) from None

        return cls(
            agent_finder_url=os.environ.get("AGENT_FINDER_API_URL", DEFAULT_AGENT_FINDER_URL),
            recommender_url=os.environ.get("AGENT_RECOMMENDER_URL") or None,
            sentiment_url=os.environ.get("AGENT_SENTIMENT_URL") or None,
            api_prefix=os.environ.get("AGENT_FINDER_API_PREFIX", DEFAULT_API_PREFIX),
            timeout=timeout,
            retry_config=retry_config or RetryConfig(),
        )
