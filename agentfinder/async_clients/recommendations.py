"""Async recommender resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.normalize import sanitize_recommend_response
from agentfinder.types.recommendations import RecommendRequest

if TYPE_CHECKING:
    from agentfinder.async_transport import AsyncHTTPTransport


class AsyncRecommendationsClient:
    """Async client for ranked agent recommendations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def recommend(self, request: RecommendRequest | None = None) -> dict[str, Any]:
        """Get ranked agent recommendations with explanations."""
        request = request or RecommendRequest()
        response = await self.transport.request(
            method="POST",
            path="/recommend",
            body=request.to_payload(),
        )
        return sanitize_recommend_response(response)
