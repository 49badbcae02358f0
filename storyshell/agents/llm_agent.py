from storyshell.agents.base import BaseAgent, AgentContext, AgentResult
from storyshell.services.litellm_client import LiteLLMClient


class LlmAgent(BaseAgent):
    def __init__(
        self,
        client: LiteLLMClient,
        model: str,
        temperature: float,
        instruction: str = "{prompt}",
        name: str = "llm_agent",
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.instruction = instruction
        self.name = name

    async def run(self, prompt: str, context: AgentContext) -> AgentResult:
        reply = await self.client.complete(
            self.instruction.format(prompt=prompt), self.model, self.temperature
        )
        return AgentResult(
            content=reply,
            metadata={
                "step": self.name,
                "model": self.model,
                "session_id": context.session_id,
            },
        )
