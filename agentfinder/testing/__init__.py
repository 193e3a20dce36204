"""Agent Finder SDK testing utilities.

Provides mock transports, mock clients and realistic raw upstream payloads
for testing applications that use the SDK.
"""

from agentfinder.testing.fixtures import (
    configure_all_routes,
    raw_agent_detail,
    raw_explanation,
    raw_metrics,
    raw_profile,
    raw_recommend_response,
    raw_recommendation,
    raw_review,
    raw_reviews_response,
    raw_search_response,
    raw_search_result,
    raw_sentiment_response,
)
from agentfinder.testing.mock import (
    AsyncMockAgentFinderClient,
    AsyncMockTransport,
    MockAgentFinderClient,
    MockCall,
    MockResponse,
    MockTransport,
)

__all__ = [
    # Mock transports and clients
    "MockTransport",
    "AsyncMockTransport",
    "MockAgentFinderClient",
    "AsyncMockAgentFinderClient",
    "MockCall",
    "MockResponse",
    # Raw payload builders
    "configure_all_routes",
    "raw_profile",
    "raw_metrics",
    "raw_review",
    "raw_recommendation",
    "raw_explanation",
    "raw_recommend_response",
    "raw_agent_detail",
    "raw_search_result",
    "raw_search_response",
    "raw_reviews_response",
    "raw_sentiment_response",
]
