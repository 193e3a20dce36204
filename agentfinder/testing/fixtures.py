"""
Pytest fixtures and raw upstream payloads for Agent Finder SDK testing.

The ``raw_*`` builders return payloads shaped like what the upstream
services actually emit, placeholder tokens and percentage-scaled metrics
included, so tests exercise the normalizer on realistic input.
"""

from collections.abc import Generator
from typing import Any

import pytest

from agentfinder.testing.mock import (
    AsyncMockAgentFinderClient,
    AsyncMockTransport,
    MockAgentFinderClient,
    MockTransport,
)

# ============================================================================
# Raw payload builders
# ============================================================================


def raw_profile(**overrides: Any) -> dict[str, Any]:
    """Create an agent profile block as sent by the recommender."""
    profile: dict[str, Any] = {
        "state": "TX",
        "city": " Austin ",
        "rating": "4.8",
        "review_count": 132,
        "experience_years": "nan",
        "specializations": "first_time_buyers, luxury",
        "languages": "English, Spanish",
        "agent_type": "buyer_agent",
        "office_name": "Hill Country Realty",
        "phone": None,
        "website": "https://example.com/agents/jane",
        "bio": "  Helping Austin families since 2012.  ",
    }
    profile.update(overrides)
    return profile


def raw_metrics(**overrides: Any) -> dict[str, Any]:
    """Create a metrics block mixing fraction and percentage scales."""
    metrics: dict[str, Any] = {
        "responsiveness": 92,
        "negotiation": 0.81,
        "professionalism": "88",
        "market_expertise": "nan",
        "q_prior": 0.74,
        "wilson_lower_bound": 0.69,
        "recency_score": 1.7,
    }
    metrics.update(overrides)
    return metrics


def raw_review(**overrides: Any) -> dict[str, Any]:
    """Create a review entry."""
    review: dict[str, Any] = {
        "review_id": "r-1001",
        "advertiser_id": "14",
        "review_rating": "5",
        "review_comment": " Fantastic negotiator. ",
        "review_created_date": "2024-03-02",
        "transaction_date": None,
        "reviewer_role": "BUYER",
        "reviewer_location": "Austin, TX",
        "sentiment": "good",
        "sentiment_confidence": 97,
    }
    review.update(overrides)
    return review


def raw_recommendation(agent_id: Any = "14", rank: int = 1, **overrides: Any) -> dict[str, Any]:
    """Create a ranked recommendation entry."""
    recommendation: dict[str, Any] = {
        "agent_id": agent_id,
        "name": "  Jane Doe ",
        "rank": rank,
        "utility_score": 0.912,
        "availability_fit": "nan",
        "confidence_score": 83,
        "profile": raw_profile(),
        "metrics": raw_metrics(),
    }
    recommendation.update(overrides)
    return recommendation


def raw_explanation(agent_id: Any = "14", rank: int = 1, **overrides: Any) -> dict[str, Any]:
    """Create the explanation of a recommendation."""
    explanation: dict[str, Any] = {
        "agent_id": agent_id,
        "agent_name": "Jane Doe",
        "rank": rank,
        "preference_matches": [
            {"aspect": "negotiation", "match_quality": "strong", "agent_performance": "top 10%"},
        ],
        "theme_strengths": [
            {"theme_name": "Communication", "strength_score": 88, "examples": ["quick replies", None]},
        ],
        "confidence_metrics": {
            "confidence_level": "high",
            "review_count": "132",
            "wilson_lower_bound": 0.69,
        },
        "why_recommended": "Strong negotiation record in your price range.",
    }
    explanation.update(overrides)
    return explanation


def raw_recommend_response() -> dict[str, Any]:
    """Create a recommender response with two agents."""
    return {
        "recommendations": [
            raw_recommendation("14", 1),
            raw_recommendation(27, 2, name="John Roe", profile=None, metrics="nan"),
        ],
        "explanations": [raw_explanation("14", 1), raw_explanation(27, 2)],
        "model_version": "2024.06",
    }


def raw_agent_detail() -> dict[str, Any]:
    """Create an agent detail response."""
    return {
        "success": True,
        "agent": {
            "agent_id": "14",
            "name": "Jane Doe",
            "profile": raw_profile(),
            "metrics": raw_metrics(),
            "reviews": {
                "review_counts": {
                    "total_review_count": "132",
                    "positive_review_count": 120,
                    "negative_review_count": 4,
                    "neutral_review_count": "nan",
                },
                "recent_reviews": [raw_review(), raw_review(review_id="r-1002", sentiment_confidence=None)],
            },
        },
    }


def raw_search_result(**overrides: Any) -> dict[str, Any]:
    """Create one row of a search response."""
    row: dict[str, Any] = {
        "advertiser_id": 14,
        "full_name": "Jane Doe",
        "state": "TX",
        "agent_base_city": "Austin",
        "agent_base_zipcode": None,
        "phone_primary": "5125550100",
        "office_phone": "nan",
        "agent_website": None,
        "office_name": "Hill Country Realty",
        "agent_photo_url": None,
        "experience_years": 12,
        "matching_score": 87.5,
        "proximity_score": 0.9,
        "distance_km": "3.2",
        "review_count": 132,
        "agent_rating": 4.8,
        "positive_review_count": 120,
        "negative_review_count": 4,
        "recently_sold_count": 18,
        "active_listings_count": 6,
        "days_since_last_sale": None,
        "property_types": ["single_family", "condo"],
        "additional_specializations": ["relocation", ""],
        "avg_responsiveness": 0.93,
        "avg_negotiation": None,
        "avg_professionalism": 91,
        "avg_market_expertise": "nan",
        "buyer_seller_fit": "buyer",
    }
    row.update(overrides)
    return row


def raw_search_response() -> dict[str, Any]:
    """Create a search response."""
    return {
        "success": True,
        "message": "Found 1 agents",
        "total_results": "1",
        "recommendations": [raw_search_result()],
    }


def raw_reviews_response() -> dict[str, Any]:
    """Create a reviews endpoint response."""
    return {
        "success": True,
        "agent_id": 14,
        "agent_name": "Jane Doe",
        "review_counts": {
            "total_review_count": 2,
            "positive_review_count": 1,
            "negative_review_count": 0,
            "neutral_review_count": 1,
        },
        "recent_reviews": [raw_review(), raw_review(review_id="r-1003", sentiment="neutral")],
    }


def raw_sentiment_response() -> dict[str, Any]:
    """Create a sentiment analysis response."""
    return {
        "agent_id": "14",
        "agent_name": None,
        "total_reviews": 2,
        "recent_reviews_count": "2",
        "sentiment_summary": {"good": 1, "bad": "nan", "neutral": 1},
        "sentiment_distribution": {"good": 50.0, "bad": 0, "neutral": 50.0},
        "classified_reviews": [
            {
                "review_id": 1001,
                "review_text": "Great agent",
                "review_rating": 5,
                "sentiment": "good",
                "sentiment_score": 0.98,
                "review_date": "2024-03-02",
                "reviewer_role": "SELLER",
                # 1-5 star sub-score; values above 1 are read as percentages, so 5 becomes
                # 0.05 (see the percentage heuristic in DESIGN.md open questions)
                "sub_scores": {"responsiveness": 5, "negotiation": None},
            },
            {
                "review_id": "1002",
                "review_text": None,
                "review_rating": "nan",
                "sentiment": "mixed",
                "sentiment_score": "nan",
                "review_date": None,
                "reviewer_role": None,
            },
        ],
    }


# ============================================================================
# Transport and client fixtures
# ============================================================================


@pytest.fixture
def mock_transport() -> Generator[MockTransport, None, None]:
    """Provide a MockTransport with no routes configured."""
    transport = MockTransport()
    yield transport
    transport.reset()


@pytest.fixture
def async_mock_transport() -> Generator[AsyncMockTransport, None, None]:
    """Provide an AsyncMockTransport with no routes configured."""
    transport = AsyncMockTransport()
    yield transport
    transport.reset()


@pytest.fixture
def mock_client(mock_transport: MockTransport) -> MockAgentFinderClient:
    """
    Provide a MockAgentFinderClient with every endpoint configured.

    Example:
        ```python
        def test_detail(mock_client):
            detail = mock_client.agents.get(14)
            assert detail["agent"]["agent_id"] == 14
        ```
    """
    configure_all_routes(mock_transport)
    return MockAgentFinderClient(mock_transport)


@pytest.fixture
def async_mock_client(async_mock_transport: AsyncMockTransport) -> AsyncMockAgentFinderClient:
    """Provide an AsyncMockAgentFinderClient with every endpoint configured."""
    configure_all_routes(async_mock_transport)
    return AsyncMockAgentFinderClient(async_mock_transport)


def configure_all_routes(transport: MockTransport, api_prefix: str = "/api/v1") -> None:
    """Configure every upstream route with the raw payloads above."""
    transport.configure("GET", f"{api_prefix}/agents/14", data=raw_agent_detail())
    transport.configure("POST", f"{api_prefix}/agents/search", data=raw_search_response())
    transport.configure("POST", f"{api_prefix}/agents/reviews", data=raw_reviews_response())
    transport.configure("POST", "/recommend", data=raw_recommend_response())
    transport.configure("GET", "/agents/14/reviews/sentiment", data=raw_sentiment_response())
    transport.configure("GET", "/locations", data={"locations": ["Austin, TX", "Dallas, TX"]})
    transport.configure(
        "GET", f"{api_prefix}/locations/states", data={"success": True, "states": ["TX", "CA"]}
    )
    transport.configure(
        "GET",
        f"{api_prefix}/locations/cities",
        data={"success": True, "cities": ["Austin", "Dallas"]},
    )
    transport.configure("GET", "/stats", data={"total_agents": 5210, "total_reviews": 88412})
    transport.configure("GET", "/health", data={"status": "healthy"})
    transport.configure("POST", "/train", data={"status": "trained", "agents_indexed": 5210})
