"""Async system resource client."""

from typing import TYPE_CHECKING, Any

from agentfinder.types.system import TrainRequest

if TYPE_CHECKING:
    from agentfinder.async_transport import AsyncHTTPTransport


class AsyncSystemClient:
    """Async client for health, statistics and retraining of the ML service."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def stats(self) -> Any:
        return await self.transport.request(method="GET", path="/stats")

    async def health(self) -> Any:
        return await self.transport.request(method="GET", path="/health")

    async def train(self, request: TrainRequest | None = None) -> Any:
        request = request or TrainRequest()
        return await self.transport.request(
            method="POST",
            path="/train",
            body=request.to_payload(),
        )
