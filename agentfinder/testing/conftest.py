"""
Pytest plugin for Agent Finder SDK testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["agentfinder.testing.conftest"]
"""

from agentfinder.testing.fixtures import (
    async_mock_client,
    async_mock_transport,
    mock_client,
    mock_transport,
)

__all__ = [
    "mock_transport",
    "async_mock_transport",
    "mock_client",
    "async_mock_client",
]
