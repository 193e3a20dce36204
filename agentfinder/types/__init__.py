"""Agent Finder SDK request types.

Responses are plain normalized dicts; these models describe what callers
send upstream.
"""

from agentfinder.types.agents import AgentSearchRequest
from agentfinder.types.recommendations import RecommendRequest
from agentfinder.types.system import TrainRequest

__all__ = [
    "AgentSearchRequest",
    "RecommendRequest",
    "TrainRequest",
]
