"""
Exception hierarchy for configuration binding and agent invocation
"""
from typing import Any, Optional


class StoryShellError(Exception):
    """Base exception for all storyshell errors"""
    pass


class ConfigurationBindingError(StoryShellError):
    """Raised when a present property value cannot be coerced to its declared type"""

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Failed to bind property '{key}' with value {value!r}: {reason}")


class AgentInvocationError(StoryShellError):
    """Base exception for failures raised while invoking an agent"""
    pass


class AgentNotFoundError(AgentInvocationError):
    """No agent is registered for the requested result type"""

    def __init__(self, result_type: type):
        self.result_type = result_type
        super().__init__(f"No agent registered that produces {result_type.__name__}")


class AgentExecutionError(AgentInvocationError):
    """An agent failed while running or produced an unusable result"""

    def __init__(self, agent_name: str, message: str, cause: Optional[BaseException] = None):
        self.agent_name = agent_name
        self.cause = cause
        super().__init__(f"Agent '{agent_name}' failed: {message}")


class LLMError(StoryShellError):
    """Raised by the LLM client when a completion cannot be obtained or parsed"""
    pass
