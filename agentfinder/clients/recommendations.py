"""Recommender resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.normalize import sanitize_recommend_response
from agentfinder.types.recommendations import RecommendRequest

if TYPE_CHECKING:
    from agentfinder.transport import HTTPTransport


class RecommendationsClient:
    """Client for ranked agent recommendations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the recommendations client.

        Args:
            transport: HTTP transport for the recommender service
        """
        self.transport = transport

    def recommend(self, request: RecommendRequest | None = None) -> dict[str, Any]:
        """
        Get ranked agent recommendations with explanations.

        Args:
            request: Recommender filters (default: no filters)

        Returns:
            Normalized response with ``recommendations`` and ``explanations``
        """
        request = request or RecommendRequest()
        response = self.transport.request(
            method="POST",
            path="/recommend",
            body=request.to_payload(),
        )
        return sanitize_recommend_response(response)
