"""
Demo helper that talks to the LLM directly instead of through an agent
"""
from storyshell.core.bundles import StoryGenerationConfig
from storyshell.models.schemas import Animal
from storyshell.services.litellm_client import LiteLLMClient
from storyshell.utils.logging import get_logger

logger = get_logger(__name__)

ANIMAL_PROMPT = """Invent a new animal that does not exist.
Return JSON in this exact format:
{
    "name": "<the animal's name>",
    "species": "<the kind of creature it is>",
    "habitat": "<where it lives>",
    "description": "<one or two sentences about how it looks and behaves>"
}
"""


class InjectedDemo:
    """Uses the LLM client handed to it, configured with the generation bundle"""

    def __init__(self, client: LiteLLMClient, generation_config: StoryGenerationConfig):
        self.client = client
        self.generation_config = generation_config

    async def invent_animal(self) -> Animal:
        animal = await self.client.create_object(
            ANIMAL_PROMPT,
            Animal,
            model=self.generation_config.model,
            temperature=self.generation_config.temperature,
        )
        logger.info(f"Invented animal: {animal.name}")
        return animal
