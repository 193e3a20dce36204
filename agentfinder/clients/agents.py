"""Agents resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.exceptions import ValidationError
from agentfinder.normalize import (
    sanitize_agent_detail,
    sanitize_reviews_response,
    sanitize_search_response,
)
from agentfinder.types.agents import AgentSearchRequest

if TYPE_CHECKING:
    from agentfinder.transport import HTTPTransport


def require_agent_id(agent_id: int | str) -> str:
    """
    Render an agent id for use in a path or query string.

    Raises:
        ValidationError: If the id is empty
    """
    text = str(agent_id).strip() if agent_id is not None else ""
    if not text:
        raise ValidationError("MISSING_AGENT_ID", "Agent ID is required", 400)
    return text


class AgentsClient:
    """Client for agent search, detail and review operations."""

    def __init__(self, transport: "HTTPTransport", api_prefix: str = "/api/v1") -> None:
        """
        Initialize the agents client.

        Args:
            transport: HTTP transport for the agent finder service
            api_prefix: Versioned path prefix of the service
        """
        self.transport = transport
        self.api_prefix = api_prefix

    def get(self, agent_id: int | str) -> dict[str, Any]:
        """
        Get the full record of one agent.

        Args:
            agent_id: The agent identifier

        Returns:
            Normalized agent detail, ``{"agent": {...}}`` when the service wraps it

        Raises:
            ValidationError: If agent_id is empty
            NotFoundError: If the agent does not exist
        """
        agent_id = require_agent_id(agent_id)
        response = self.transport.request(
            method="GET",
            path=f"{self.api_prefix}/agents/{agent_id}",
        )
        return sanitize_agent_detail(response)

    def search(self, request: AgentSearchRequest) -> dict[str, Any]:
        """
        Search agents matching buyer or seller criteria.

        Args:
            request: Search criteria

        Returns:
            Normalized search response with ``total_results`` and ``recommendations``

        Raises:
            ValidationError: If the request is incomplete or rejected upstream
        """
        request.validate()
        response = self.transport.request(
            method="POST",
            path=f"{self.api_prefix}/agents/search",
            body=request.to_payload(),
        )
        return sanitize_search_response(response)

    def reviews(self, agent_id: int | str) -> dict[str, Any]:
        """
        Get review counts and the most recent reviews for an agent.

        Args:
            agent_id: The agent identifier

        Returns:
            Normalized reviews response

        Raises:
            ValidationError: If agent_id is empty
        """
        agent_id = require_agent_id(agent_id)
        response = self.transport.request(
            method="POST",
            path=f"{self.api_prefix}/agents/reviews",
            params={"agent_id": agent_id},
        )
        return sanitize_reviews_response(response)
