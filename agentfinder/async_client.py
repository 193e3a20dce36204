"""
Agent Finder SDK async client.

Async twin of :class:`agentfinder.client.AgentFinderClient`.
"""

from typing import Any

from agentfinder.async_clients import (
    AsyncAgentsClient,
    AsyncLocationsClient,
    AsyncRecommendationsClient,
    AsyncSentimentClient,
    AsyncSystemClient,
)
from agentfinder.async_transport import AsyncHTTPTransport
from agentfinder.config import AgentFinderConfig
from agentfinder.transport import RetryConfig


class AsyncAgentFinderClient:
    """
    Async client for the Agent Finder services.

    Example:
        ```python
        import asyncio
        from agentfinder import AsyncAgentFinderClient

        async def main():
            async with AsyncAgentFinderClient.from_env() as client:
                detail, sentiment = await asyncio.gather(
                    client.agents.get(14),
                    client.sentiment.get(14),
                )

        asyncio.run(main())
        ```
    """

    def __init__(self, config: AgentFinderConfig | None = None) -> None:
        """
        Initialize the async Agent Finder client.

        Args:
            config: Service locations and policies (default: AgentFinderConfig())
        """
        self.config = config or AgentFinderConfig()
        self._transports: dict[str, AsyncHTTPTransport] = {}

        agent_finder = self._transport_for(self.config.agent_finder_url)
        recommender = self._transport_for(self.config.recommender_base_url)
        sentiment = self._transport_for(self.config.sentiment_base_url)

        self.agents = AsyncAgentsClient(agent_finder, self.config.api_prefix)
        self.recommendations = AsyncRecommendationsClient(recommender)
        self.sentiment = AsyncSentimentClient(sentiment)
        self.locations = AsyncLocationsClient(agent_finder, recommender, self.config.api_prefix)
        self.system = AsyncSystemClient(sentiment)

    def _transport_for(self, base_url: str) -> AsyncHTTPTransport:
        if base_url not in self._transports:
            self._transports[base_url] = AsyncHTTPTransport(
                base_url=base_url,
                timeout=self.config.timeout,
                retry_config=self.config.retry_config,
            )
        return self._transports[base_url]

    @classmethod
    def from_env(cls, retry_config: RetryConfig | None = None) -> "AsyncAgentFinderClient":
        """Create a client from environment variables."""
        return cls(AgentFinderConfig.from_env(retry_config=retry_config))

    @property
    def transports(self) -> list[AsyncHTTPTransport]:
        return list(self._transports.values())

    async def close(self) -> None:
        """Close the client and release resources."""
        for transport in self._transports.values():
            await transport.close()

    async def __aenter__(self) -> "AsyncAgentFinderClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
