"""
Framework-neutral request handlers for the agent finder API routes.

Each handler calls the SDK and turns the outcome into a ``ProxyResponse``
(HTTP status plus JSON body) that any web framework can serialize. Upstream
failures are mapped to client-facing status codes here; the normalizer
below never fails.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from agentfinder.client import AgentFinderClient
from agentfinder.exceptions import (
    AgentFinderError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationError,
)
from agentfinder.logging import get_logger
from agentfinder.types.agents import AgentSearchRequest
from agentfinder.types.recommendations import RecommendRequest
from agentfinder.types.system import TrainRequest

_logger = get_logger("proxy")

UNREACHABLE_MESSAGE = "Unable to connect to the agent finder backend. Please ensure the backend is running."


@dataclass
class ProxyResponse:
    """Status code and JSON body to hand back to the caller."""

    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return self.status < 400


def error_response(
    status: int, message: str, details: str | None = None
) -> ProxyResponse:
    body: dict[str, Any] = {"success": False, "error": message}
    if details:
        body["details"] = details
    return ProxyResponse(status, body)


def _message(error: AgentFinderError, fallback: str) -> str:
    # Upstream errors with an empty body only carry a generic "HTTP nnn"
    if error.message == f"HTTP {error.status_code}":
        return fallback
    return error.message


class AgentFinderProxy:
    """Route handlers backed by an :class:`AgentFinderClient`."""

    def __init__(self, client: AgentFinderClient) -> None:
        self.client = client

    def _handle(
        self,
        action: str,
        call: Callable[[], Any],
        failure_message: str,
        not_found_message: str | None = None,
    ) -> ProxyResponse:
        try:
            return ProxyResponse(200, call())
        except ValidationError as e:
            _logger.warning("%s rejected: %s", action, e)
            return error_response(e.status_code or 400, _message(e, failure_message), e.details)
        except NotFoundError as e:
            _logger.info("%s: not found upstream", action)
            return error_response(404, not_found_message or e.message, e.details)
        except ServiceUnavailableError as e:
            _logger.error("%s: upstream unreachable: %s", action, e.message)
            return error_response(503, UNREACHABLE_MESSAGE, e.message)
        except AgentFinderError as e:
            _logger.error("%s failed upstream: %s", action, e)
            return error_response(e.status_code or 500, _message(e, failure_message), e.details)
        except Exception as e:
            _logger.exception("%s failed", action)
            return error_response(500, "Internal server error", str(e))

    def agent_detail(self, agent_id: str) -> ProxyResponse:
        return self._handle(
            "agent_detail",
            lambda: self.client.agents.get(agent_id),
            "Failed to get agent details",
            "Agent not found",
        )

    def search(self, body: Any) -> ProxyResponse:
        if not isinstance(body, dict):
            return error_response(400, "Request body must be a JSON object")

        def call() -> Any:
            result = self.client.agents.search(AgentSearchRequest.from_dict(body))
            _logger.info("Found %s agents", result["total_results"])
            return result

        return self._handle("search", call, "Failed to get agent recommendations")

    def reviews(self, agent_id: str) -> ProxyResponse:
        return self._handle(
            "reviews",
            lambda: self.client.agents.reviews(agent_id),
            "Failed to get agent reviews",
        )

    def recommend(self, body: Any) -> ProxyResponse:
        if not isinstance(body, dict):
            return error_response(400, "Request body must be a JSON object")
        return self._handle(
            "recommend",
            lambda: self.client.recommendations.recommend(RecommendRequest.from_dict(body)),
            "Failed to get agent recommendations",
        )

    def sentiment(self, agent_id: str) -> ProxyResponse:
        return self._handle(
            "sentiment",
            lambda: self.client.sentiment.get(agent_id),
            "Failed to get sentiment analysis",
            "Agent sentiment analysis not found",
        )

    def locations(self) -> ProxyResponse:
        return self._handle("locations", self.client.locations.list, "Failed to get locations")

    def states(self) -> ProxyResponse:
        return self._handle("states", self.client.locations.states, "Failed to get states")

    def cities(self, state_name: str | None) -> ProxyResponse:
        return self._handle(
            "cities",
            lambda: self.client.locations.cities(state_name or ""),
            "Failed to get cities",
        )

    def stats(self) -> ProxyResponse:
        return self._handle("stats", self.client.system.stats, "Failed to get system stats")

    def health(self) -> ProxyResponse:
        return self._handle(
            "health", self.client.system.health, "Agent Finder service is not healthy"
        )

    def train(self, body: Any = None) -> ProxyResponse:
        options = body if isinstance(body, dict) else {}
        request = TrainRequest(
            use_cache=options.get("use_cache", True),
            save_cache=options.get("save_cache", True),
        )
        return self._handle(
            "train",
            lambda: self.client.system.train(request),
            "Failed to train Agent Finder system",
        )
