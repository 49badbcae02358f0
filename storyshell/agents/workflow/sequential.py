from typing import List
from storyshell.agents.base import BaseAgent, AgentContext, AgentResult


class SequentialAgent(BaseAgent):
    name = "sequential"

    def __init__(self, steps: List[BaseAgent]):
        self.steps = steps

    async def run(self, prompt: str, context: AgentContext) -> AgentResult:
        current_prompt = prompt
        last = None
        history = context.metadata.setdefault("steps", [])
        for agent in self.steps:
            last = await agent.run(current_prompt, context)
            history.append(last)
            current_prompt = last.content
        return last or AgentResult(content="")
