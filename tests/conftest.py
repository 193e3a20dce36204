"""Shared fixtures for the Agent Finder SDK test suite."""

from agentfinder.testing.fixtures import (  # noqa: F401
    async_mock_client,
    async_mock_transport,
    mock_client,
    mock_transport,
)
