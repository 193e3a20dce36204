"""Agent Finder SDK - Python client for the agent recommendation services."""

from agentfinder.async_client import AsyncAgentFinderClient
from agentfinder.client import AgentFinderClient
from agentfinder.config import AgentFinderConfig
from agentfinder.exceptions import (
    AgentFinderError,
    ConfigurationError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ServiceUnavailableError,
    ValidationError,
)
from agentfinder.logging import configure_logging, get_logger
from agentfinder.normalize import (
    clean_number,
    clean_string,
    normalize_metric,
    sanitize_record,
)
from agentfinder.proxy import AgentFinderProxy, ProxyResponse
from agentfinder.transport import HTTPTransport, RetryConfig
from agentfinder.types import AgentSearchRequest, RecommendRequest, TrainRequest

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "AgentFinderClient",
    "AsyncAgentFinderClient",
    "AgentFinderConfig",
    # Normalization
    "clean_string",
    "clean_number",
    "normalize_metric",
    "sanitize_record",
    # Proxy
    "AgentFinderProxy",
    "ProxyResponse",
    # Request types
    "AgentSearchRequest",
    "RecommendRequest",
    "TrainRequest",
    # Exceptions
    "AgentFinderError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "ServiceUnavailableError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
