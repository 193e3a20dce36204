"""Agent Finder SDK resource clients."""

from agentfinder.clients.agents import AgentsClient
from agentfinder.clients.locations import LocationsClient
from agentfinder.clients.recommendations import RecommendationsClient
from agentfinder.clients.sentiment import SentimentClient, parse_agent_id
from agentfinder.clients.system import SystemClient

__all__ = [
    "AgentsClient",
    "RecommendationsClient",
    "SentimentClient",
    "LocationsClient",
    "SystemClient",
    "parse_agent_id",
]
