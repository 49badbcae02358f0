"""
Example usage of configuration bundles and the write-and-review agent
Demonstrates binding, programmatic agent invocation and the injected helper
"""
import asyncio
from storyshell.agents.platform import AgentInvocation
from storyshell.core.bundles import StoryGenerationConfig, bind
from storyshell.core.config import settings
from storyshell.core.exceptions import ConfigurationBindingError
from storyshell.models.schemas import UserInput, ReviewedStory
from storyshell.services.shell_factory import ShellFactory


def demonstrate_binding():
    """Show defaults, overrides and a failing bind"""
    print("⚙️  Configuration Bundle Demo")
    print("=" * 50)

    samples = [
        {},
        {"story.generation.temperature": "0.5"},
        {"story.generation.model": "gpt-4o", "story.generation.word-count": "150"},
        {"story.generation.temperature": "warm"},
    ]

    for raw in samples:
        try:
            config = bind(raw, "story.generation", StoryGenerationConfig)
            print(f"   ✅ {raw or '(empty)'} → {config}")
        except ConfigurationBindingError as e:
            print(f"   ❌ {raw} → {e}")


async def demonstrate_agents():
    """Invoke the story agent and the injected helper"""
    print("\n🤖 Story Agent Demo")
    print("=" * 50)

    factory = ShellFactory(settings)
    configs = factory.get_story_configs()
    print(f"   Writer: {configs.generation.model} @ {configs.generation.temperature}")
    print(f"   Reviewer: {configs.review.model} @ {configs.review.temperature}")

    print("\n1. Programmatic invocation...")
    try:
        reviewed = await AgentInvocation.create(
            factory.get_platform(), ReviewedStory
        ).invoke_async(UserInput("Tell me a story about a lighthouse keeper"))
        print(reviewed.content)
    except Exception as e:
        print(f"   ❌ Story agent failed: {e}")

    print("\n2. Injected helper...")
    try:
        animal = await factory.get_injected_demo().invent_animal()
        print(f"   ✅ {animal}")
    except Exception as e:
        print(f"   ❌ Animal invention failed: {e}")


if __name__ == "__main__":
    print("Note: the agent part of this demo requires an LLM API key (see .env.example)")

    demonstrate_binding()
    try:
        asyncio.run(demonstrate_agents())
    except KeyboardInterrupt:
        print("\n\nDemo interrupted by user")
