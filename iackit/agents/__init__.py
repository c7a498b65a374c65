"""CI agents that supply inputs, collect outputs and execute processes."""

from .github import GitHubActionsAgent
from .models import ExecResult
from .protocols import AgentProtocol, OutputValue, ToolAgentProtocol

__all__ = [
    "AgentProtocol",
    "ExecResult",
    "GitHubActionsAgent",
    "OutputValue",
    "ToolAgentProtocol",
]
