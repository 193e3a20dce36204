"""Review sentiment resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.exceptions import ValidationError
from agentfinder.normalize import sanitize_sentiment_response

if TYPE_CHECKING:
    from agentfinder.transport import HTTPTransport


def parse_agent_id(agent_id: int | str) -> int:
    """
    Parse a numeric agent id.

    Raises:
        ValidationError: If the id is not an integer
    """
    if isinstance(agent_id, bool):
        raise ValidationError("INVALID_AGENT_ID", "Invalid agent ID", 400)
    try:
        return int(str(agent_id).strip())
    except ValueError:
        raise ValidationError("INVALID_AGENT_ID", "Invalid agent ID", 400) from None


class SentimentClient:
    """Client for sentiment analysis of agent reviews."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the sentiment client.

        Args:
            transport: HTTP transport for the sentiment service
        """
        self.transport = transport

    def get(self, agent_id: int | str) -> dict[str, Any]:
        """
        Get the sentiment breakdown of an agent's reviews.

        Args:
            agent_id: Numeric agent identifier

        Returns:
            Normalized sentiment analysis

        Raises:
            ValidationError: If agent_id is not an integer
            NotFoundError: If no analysis exists for the agent
        """
        numeric_id = parse_agent_id(agent_id)
        response = self.transport.request(
            method="GET",
            path=f"/agents/{numeric_id}/reviews/sentiment",
        )
        return sanitize_sentiment_response(response, agent_id=numeric_id)
