"""Async locations resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.exceptions import ValidationError

if TYPE_CHECKING:
    from agentfinder.async_transport import AsyncHTTPTransport


class AsyncLocationsClient:
    """Async client for the location catalogs."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        recommender_transport: "AsyncHTTPTransport",
        api_prefix: str = "/api/v1",
    ) -> None:
        self.transport = transport
        self.recommender_transport = recommender_transport
        self.api_prefix = api_prefix

    async def list(self) -> Any:
        """List the locations known to the recommender."""
        return await self.recommender_transport.request(method="GET", path="/locations")

    async def states(self) -> Any:
        """List the states covered by the agent finder service."""
        return await self.transport.request(
            method="GET",
            path=f"{self.api_prefix}/locations/states",
        )

    async def cities(self, state_name: str) -> Any:
        """
        List the cities of a state.

        Raises:
            ValidationError: If state_name is empty
        """
        if not state_name or not state_name.strip():
            raise ValidationError(
                "MISSING_STATE_NAME", "state_name query parameter is required", 400
            )
        return await self.transport.request(
            method="GET",
            path=f"{self.api_prefix}/locations/cities",
            params={"state_name": state_name.strip()},
        )
