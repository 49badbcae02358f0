"""
Write-and-review story agent

Two LLM steps run in sequence: a writer drafts a short story from the
user's request, then a reviewer critiques the draft. Each step takes its
model, temperature and word budget from its own configuration bundle.
"""
from storyshell.agents.base import GoalAgent, AgentContext
from storyshell.agents.llm_agent import LlmAgent
from storyshell.agents.workflow.sequential import SequentialAgent
from storyshell.core.bundles import StoryGenerationConfig, StoryReviewConfig
from storyshell.core.exceptions import AgentExecutionError
from storyshell.models.schemas import UserInput, Story, ReviewedStory
from storyshell.services.litellm_client import LiteLLMClient
from storyshell.utils.logging import get_contextual_logger

REVIEWER_NAME = "Roger, literary critic"

WRITER_INSTRUCTION = """Craft a short story in {word_count} words or less.
The story should be engaging and imaginative.
Use the user's input as inspiration if possible.
If the user has provided a name, include it in the story.

# User input
{{prompt}}
"""

REVIEWER_INSTRUCTION = """You are {reviewer}. You will be given a short story to review.
Review it in {word_count} words or less.
Consider whether or not the story is engaging, imaginative, and well-written.
Also consider whether the story is appropriate given the original user input.

# Story
{{prompt}}

# User input that inspired the story
{user_input}
"""


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


class WriteAndReviewAgent(GoalAgent):
    """Writes a story from user input, then reviews it"""

    name = "write_and_review"
    produces = ReviewedStory

    def __init__(
        self,
        client: LiteLLMClient,
        generation_config: StoryGenerationConfig,
        review_config: StoryReviewConfig,
    ):
        self.client = client
        self.generation_config = generation_config
        self.review_config = review_config

    def build_pipeline(self, user_input: UserInput) -> SequentialAgent:
        writer = LlmAgent(
            self.client,
            model=self.generation_config.model,
            temperature=self.generation_config.temperature,
            instruction=WRITER_INSTRUCTION.format(
                word_count=self.generation_config.word_count
            ),
            name="craft_story",
        )
        reviewer = LlmAgent(
            self.client,
            model=self.review_config.model,
            temperature=self.review_config.temperature,
            instruction=REVIEWER_INSTRUCTION.format(
                reviewer=REVIEWER_NAME,
                word_count=self.review_config.word_count,
                user_input=_escape(user_input.content),
            ),
            name="review_story",
        )
        return SequentialAgent([writer, reviewer])

    async def achieve(self, user_input: UserInput, context: AgentContext) -> ReviewedStory:
        logger = get_contextual_logger(__name__, {"session_id": context.session_id})
        logger.info(f"Writing story for: {user_input.content[:100]}")

        await self.build_pipeline(user_input).run(user_input.content, context)
        story_result, review_result = context.metadata["steps"][-2:]

        if not story_result.content.strip():
            raise AgentExecutionError(self.name, "writer returned an empty story")
        if not review_result.content.strip():
            raise AgentExecutionError(self.name, "reviewer returned an empty review")

        logger.info(f"Story of {len(story_result.content.split())} words reviewed")
        return ReviewedStory(
            story=Story(text=story_result.content),
            review=review_result.content,
            reviewer=REVIEWER_NAME,
        )
