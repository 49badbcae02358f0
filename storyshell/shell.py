"""
Demo shell: the two operations exposed to the command line
"""
from storyshell.agents.platform import AgentPlatform, AgentInvocation, run_blocking
from storyshell.core.config import settings
from storyshell.models.schemas import UserInput, ReviewedStory
from storyshell.services.injected_demo import InjectedDemo


class DemoShell:
    """
    Holds the collaborators the shell commands delegate to
    Errors raised by either collaborator propagate unchanged
    """

    def __init__(self, injected_demo: InjectedDemo, agent_platform: AgentPlatform,
                 prompt: str = None):
        self.injected_demo = injected_demo
        self.agent_platform = agent_platform
        self.prompt = prompt or settings.demo_prompt

    def demo(self) -> str:
        """Call the write-and-review agent programmatically"""
        reviewed_story = AgentInvocation.create(
            self.agent_platform, ReviewedStory
        ).invoke(UserInput(self.prompt))
        return reviewed_story.content

    def animal(self) -> str:
        """Invent an animal through the injected helper"""
        return str(run_blocking(self.injected_demo.invent_animal()))
