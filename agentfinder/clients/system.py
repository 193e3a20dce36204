"""System resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.types.system import TrainRequest

if TYPE_CHECKING:
    from agentfinder.transport import HTTPTransport


class SystemClient:
    """Client for health, statistics and retraining of the ML service."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def stats(self) -> Any:
        """Get system statistics."""
        return self.transport.request(method="GET", path="/stats")

    def health(self) -> Any:
        """Get the health report of the service."""
        return self.transport.request(method="GET", path="/health")

    def train(self, request: TrainRequest | None = None) -> Any:
        """
        Retrain the recommender.

        Args:
            request: Cache options (default: use and save the cache)
        """
        request = request or TrainRequest()
        return self.transport.request(
            method="POST",
            path="/train",
            body=request.to_payload(),
        )
