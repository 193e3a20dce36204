"""Async review sentiment resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.clients.sentiment import parse_agent_id
from agentfinder.normalize import sanitize_sentiment_response

if TYPE_CHECKING:
    from agentfinder.async_transport import AsyncHTTPTransport


class AsyncSentimentClient:
    """Async client for sentiment analysis of agent reviews."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get(self, agent_id: int | str) -> dict[str, Any]:
        """
        Get the sentiment breakdown of an agent's reviews.

        Raises:
            ValidationError: If agent_id is not an integer
            NotFoundError: If no analysis exists for the agent
        """
        numeric_id = parse_agent_id(agent_id)
        response = await self.transport.request(
            method="GET",
            path=f"/agents/{numeric_id}/reviews/sentiment",
        )
        return sanitize_sentiment_response(response, agent_id=numeric_id)
