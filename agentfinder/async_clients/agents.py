"""Async Agents resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.clients.agents import require_agent_id
from agentfinder.normalize import (
    sanitize_agent_detail,
    sanitize_reviews_response,
    sanitize_search_response,
)
from agentfinder.types.agents import AgentSearchRequest

if TYPE_CHECKING:
    from agentfinder.async_transport import AsyncHTTPTransport


class AsyncAgentsClient:
    """Async client for agent search, detail and review operations."""

    def __init__(self, transport: "AsyncHTTPTransport", api_prefix: str = "/api/v1") -> None:
        """
        Initialize the async agents client.

        Args:
            transport: Async HTTP transport for the agent finder service
            api_prefix: Versioned path prefix of the service
        """
        self.transport = transport
        self.api_prefix = api_prefix

    async def get(self, agent_id: int | str) -> dict[str, Any]:
        """
        Get the full record of one agent.

        Raises:
            ValidationError: If agent_id is empty
            NotFoundError: If the agent does not exist
        """
        agent_id = require_agent_id(agent_id)
        response = await self.transport.request(
            method="GET",
            path=f"{self.api_prefix}/agents/{agent_id}",
        )
        return sanitize_agent_detail(response)

    async def search(self, request: AgentSearchRequest) -> dict[str, Any]:
        """
        Search agents matching buyer or seller criteria.

        Raises:
            ValidationError: If the request is incomplete or rejected upstream
        """
        request.validate()
        response = await self.transport.request(
            method="POST",
            path=f"{self.api_prefix}/agents/search",
            body=request.to_payload(),
        )
        return sanitize_search_response(response)

    async def reviews(self, agent_id: int | str) -> dict[str, Any]:
        """Get review counts and the most recent reviews for an agent."""
        agent_id = require_agent_id(agent_id)
        response = await self.transport.request(
            method="POST",
            path=f"{self.api_prefix}/agents/reviews",
            params={"agent_id": agent_id},
        )
        return sanitize_reviews_response(response)
