"""Locations resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.exceptions import ValidationError

if TYPE_CHECKING:
    from agentfinder.transport import HTTPTransport


class LocationsClient:
    """Client for the location catalogs. Payloads are returned as sent."""

    def __init__(
        self,
        transport: "HTTPTransport",
        recommender_transport: "HTTPTransport",
        api_prefix: str = "/api/v1",
    ) -> None:
        """
        Initialize the locations client.

        Args:
            transport: HTTP transport for the agent finder service
            recommender_transport: HTTP transport for the recommender service
            api_prefix: Versioned path prefix of the agent finder service
        """
        self.transport = transport
        self.recommender_transport = recommender_transport
        self.api_prefix = api_prefix

    def list(self) -> Any:
        """List the locations known to the recommender."""
        return self.recommender_transport.request(method="GET", path="/locations")

    def states(self) -> Any:
        """List the states covered by the agent finder service."""
        return self.transport.request(
            method="GET",
            path=f"{self.api_prefix}/locations/states",
        )

    def cities(self, state_name: str) -> Any:
        """
        List the cities of a state.

        Raises:
            ValidationError: If state_name is empty
        """
        if not state_name or not state_name.strip():
            raise ValidationError(
                "MISSING_STATE_NAME", "state_name query parameter is required", 400
            )
        return self.transport.request(
            method="GET",
            path=f"{self.api_prefix}/locations/cities",
            params={"state_name": state_name.strip()},
        )
