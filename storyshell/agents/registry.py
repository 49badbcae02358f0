from typing import Callable, Dict
from storyshell.agents.base import GoalAgent
from storyshell.core.exceptions import AgentNotFoundError


class AgentRegistry:
    """Maps the result type an agent produces to a factory for that agent"""

    def __init__(self):
        self._factories: Dict[type, Callable[[], GoalAgent]] = {}

    def register(self, result_type: type, factory: Callable[[], GoalAgent]) -> None:
        self._factories[result_type] = factory

    def create(self, result_type: type) -> GoalAgent:
        if result_type not in self._factories:
            raise AgentNotFoundError(result_type)
        return self._factories[result_type]()
