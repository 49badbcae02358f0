"""
Lightweight agent abstractions used by the demo shell.

This package provides:
- BaseAgent / GoalAgent: minimal interfaces for text steps and typed goals
- LlmAgent: one LLM completion step
- Workflow (sequential) agent: composes steps deterministically
- AgentRegistry: result type -> agent factory mapping
- AgentPlatform / AgentInvocation: invoke an agent by the type it produces
"""

from .base import BaseAgent, GoalAgent, AgentContext, AgentResult  # noqa: F401
from .llm_agent import LlmAgent  # noqa: F401
from .workflow.sequential import SequentialAgent  # noqa: F401
from .registry import AgentRegistry  # noqa: F401
from .platform import AgentPlatform, AgentInvocation  # noqa: F401
from .write_and_review import WriteAndReviewAgent  # noqa: F401
