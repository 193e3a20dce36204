#!/usr/bin/env python3
"""
Agent Finder SDK - Buyer Search Example

This example walks through what the search page does:
1. Check that the backend is healthy
2. Look up the states and cities the backend knows about
3. Search for buyer agents in a city
4. Load details, reviews and sentiment for the best match

Point it at a running backend with AGENT_FINDER_API_URL (and optionally
AGENT_RECOMMENDER_URL / AGENT_SENTIMENT_URL).
"""

import logging
import sys

from agentfinder import AgentFinderClient, AgentSearchRequest, configure_logging
from agentfinder.exceptions import AgentFinderError, NotFoundError


def show_metric(label: str, value: float) -> None:
    print(f"   {label:<18} {value * 100:5.1f}%")


def main() -> None:
    """Run the search example."""
    print("=== Agent Finder SDK Example ===\n")
    configure_logging(level=logging.WARNING)

    with AgentFinderClient.from_env() as client:
        # Step 1: Health check
        print("1. Checking backend health...")
        health = client.system.health()
        print(f"   Status: {health.get('status', 'unknown')}")

        # Step 2: Locations
        print("\n2. Loading locations...")
        states = client.locations.states().get("states", [])
        print(f"   {len(states)} states available")
        state = "Texas" if "Texas" in states else (states[0] if states else "Texas")
        cities = client.locations.cities(state).get("cities", [])
        city = cities[0] if cities else "Austin"
        print(f"   Searching in {city}, {state}")

        # Step 3: Search
        print("\n3. Searching for buyer agents...")
        result = client.agents.search(
            AgentSearchRequest(
                user_type="buyer",
                state=state,
                city=city,
                max_price=750000,
                sub_score_preferences={"responsiveness": 0.4, "negotiation": 0.6},
                max_results=5,
            )
        )
        print(f"   Found {result['total_results']} agents")
        for row in result["recommendations"]:
            print(f"   - {row['full_name']} (match {row['matching_score']:.0f}%)")

        if not result["recommendations"]:
            return

        # Step 4: Details for the top match
        agent_id = result["recommendations"][0]["advertiser_id"]
        print(f"\n4. Loading agent {agent_id}...")
        detail = client.agents.get(agent_id)["agent"]
        print(f"   {detail['name']} - {detail['profile']['office_name'] or 'independent'}")
        for name, value in detail["metrics"].items():
            if isinstance(value, float):
                show_metric(name, value)

        reviews = client.agents.reviews(agent_id)
        counts = reviews["review_counts"]
        print(f"   Reviews: {counts['total_review_count']} total, "
              f"{counts['positive_review_count']} positive")

        try:
            sentiment = client.sentiment.get(agent_id)
            print(f"   Sentiment: {sentiment['sentiment_summary']}")
        except NotFoundError:
            print("   Sentiment analysis not available yet")

    print("\n=== Example completed successfully! ===")


if __name__ == "__main__":
    try:
        main()
    except AgentFinderError as e:
        print(f"\nError: [{e.code}] {e.message}")
        sys.exit(1)
