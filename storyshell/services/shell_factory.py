"""
Factory for the demo shell and everything it depends on
Builds each collaborator once and passes it down explicitly
"""
from typing import Mapping, Optional

from storyshell.agents.platform import AgentPlatform
from storyshell.agents.registry import AgentRegistry
from storyshell.agents.write_and_review import WriteAndReviewAgent
from storyshell.core.bundles import StoryConfigs, load_story_configs, story_property_keys
from storyshell.core.config import Settings
from storyshell.core.properties import PropertySource
from storyshell.services.injected_demo import InjectedDemo
from storyshell.services.litellm_client import LiteLLMClient
from storyshell.shell import DemoShell
from storyshell.utils.logging import get_logger

logger = get_logger(__name__)


class ShellFactory:
    """
    Wires configuration bundles, LLM client, agents and the demo shell
    Each getter builds its component on first use and then reuses it
    """

    def __init__(self, config: Settings, properties: Optional[Mapping[str, str]] = None):
        self.config = config
        self._properties = PropertySource(properties) if properties is not None else None
        self._story_configs = None
        self._client = None
        self._registry = None
        self._platform = None
        self._injected_demo = None
        self._shell = None

    def get_properties(self) -> PropertySource:
        """Get the merged .properties file and environment overrides"""
        if self._properties is None:
            self._properties = PropertySource.from_settings(self.config, story_property_keys())
        return self._properties

    def get_story_configs(self) -> StoryConfigs:
        """Get the bound story.generation and story.review bundles"""
        if self._story_configs is None:
            self._story_configs = load_story_configs(self.get_properties())
        return self._story_configs

    def get_client(self) -> LiteLLMClient:
        if self._client is None:
            self._client = LiteLLMClient(**self.config.llm_config)
        return self._client

    def get_registry(self) -> AgentRegistry:
        """Get the registry with every agent this shell can invoke"""
        if self._registry is None:
            configs = self.get_story_configs()
            client = self.get_client()
            self._registry = AgentRegistry()
            self._registry.register(
                WriteAndReviewAgent.produces,
                lambda: WriteAndReviewAgent(client, configs.generation, configs.review),
            )
        return self._registry

    def get_platform(self) -> AgentPlatform:
        if self._platform is None:
            self._platform = AgentPlatform(self.get_registry(), timeout=self.config.agent_timeout)
        return self._platform

    def get_injected_demo(self) -> InjectedDemo:
        if self._injected_demo is None:
            self._injected_demo = InjectedDemo(self.get_client(), self.get_story_configs().generation)
        return self._injected_demo

    def create_shell(self) -> DemoShell:
        """Create fully configured demo shell"""
        if self._shell is None:
            self._shell = DemoShell(
                injected_demo=self.get_injected_demo(),
                agent_platform=self.get_platform(),
                prompt=self.config.demo_prompt,
            )
            logger.info("Demo shell initialized")
        return self._shell
