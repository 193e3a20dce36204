"""Agent Finder SDK async resource clients."""

from agentfinder.async_clients.agents import AsyncAgentsClient
from agentfinder.async_clients.locations import AsyncLocationsClient
from agentfinder.async_clients.recommendations import AsyncRecommendationsClient
from agentfinder.async_clients.sentiment import AsyncSentimentClient
from agentfinder.async_clients.system import AsyncSystemClient

__all__ = [
    "AsyncAgentsClient",
    "AsyncRecommendationsClient",
    "AsyncSentimentClient",
    "AsyncLocationsClient",
    "AsyncSystemClient",
]
