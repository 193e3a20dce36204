"""
Agent Finder SDK main client.

Provides the primary interface for the upstream agent services. Every
payload that carries agent data is normalized before it is returned.
"""

from typing import Any

from agentfinder.clients import (
    AgentsClient,
    LocationsClient,
    RecommendationsClient,
    SentimentClient,
    SystemClient,
)
from agentfinder.config import AgentFinderConfig
from agentfinder.logging import get_logger
from agentfinder.transport import HTTPTransport, RetryConfig

_logger = get_logger()


class AgentFinderClient:
    """
    Main client for the Agent Finder services.

    Aggregates all resource clients. Services that share a base URL share a
    transport.

    Example:
        ```python
        from agentfinder import AgentFinderClient, AgentFinderConfig
        from agentfinder.types import AgentSearchRequest

        config = AgentFinderConfig(agent_finder_url="http://localhost:8004")
        with AgentFinderClient(config) as client:
            results = client.agents.search(
                AgentSearchRequest(user_type="buyer", state="TX", city="Austin")
            )
            for row in results["recommendations"]:
                print(row["full_name"], row["matching_score"])
        ```
    """

    def __init__(self, config: AgentFinderConfig | None = None) -> None:
        """
        Initialize the Agent Finder client.

        Args:
            config: Service locations and policies (default: AgentFinderConfig())
        """
        self.config = config or AgentFinderConfig()
        self._transports: dict[str, HTTPTransport] = {}

        agent_finder = self._transport_for(self.config.agent_finder_url)
        recommender = self._transport_for(self.config.recommender_base_url)
        sentiment = self._transport_for(self.config.sentiment_base_url)

        self.agents = AgentsClient(agent_finder, self.config.api_prefix)
        self.recommendations = RecommendationsClient(recommender)
        self.sentiment = SentimentClient(sentiment)
        self.locations = LocationsClient(agent_finder, recommender, self.config.api_prefix)
        self.system = SystemClient(sentiment)

    def _transport_for(self, base_url: str) -> HTTPTransport:
        if base_url not in self._transports:
            _logger.debug("Creating transport for %s", base_url)
            self._transports[base_url] = HTTPTransport(
                base_url=base_url,
                timeout=self.config.timeout,
                retry_config=self.config.retry_config,
            )
        return self._transports[base_url]

    @classmethod
    def from_env(cls, retry_config: RetryConfig | None = None) -> "AgentFinderClient":
        """
        Create a client from environment variables.

        See :meth:`AgentFinderConfig.from_env` for the variables read.

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        return cls(AgentFinderConfig.from_env(retry_config=retry_config))

    @property
    def transports(self) -> list[HTTPTransport]:
        """The underlying HTTP transports, one per distinct base URL."""
        return list(self._transports.values())

    def close(self) -> None:
        """Close the client and release resources."""
        for transport in self._transports.values():
            transport.close()

    def __enter__(self) -> "AgentFinderClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
