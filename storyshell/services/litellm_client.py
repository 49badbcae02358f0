"""
LiteLLM client used by agent steps for text and structured completions
"""
import litellm
import asyncio
import json
from typing import Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from storyshell.core.config import settings
from storyshell.core.exceptions import LLMError
from storyshell.utils.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if the model added one"""
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


class LiteLLMClient:
    """Thin async wrapper over litellm.completion"""

    def __init__(self, api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key or settings.llm_api_key
        self.timeout = timeout or settings.llm_timeout

    async def complete(self, prompt: str, model: str, temperature: float) -> str:
        """
        Send a single-turn prompt and return the reply text

        Args:
            prompt: User prompt
            model: LiteLLM model name, e.g. "gpt-4o-mini"
            temperature: Sampling temperature

        Returns:
            Stripped reply text

        Raises:
            LLMError: If the request fails or the reply is empty
        """
        logger.debug(f"Requesting completion from {model} (temperature={temperature}): {prompt[:100]}...")

        try:
            response = await asyncio.to_thread(
                litellm.completion,
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                timeout=self.timeout,
                api_key=self.api_key,
            )
        except Exception as e:
            logger.error(f"LiteLLM API error: {e}")
            raise LLMError(f"Completion request to {model} failed: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise LLMError(f"No response from {model}")

        return response.choices[0].message.content.strip()

    async def create_object(self, prompt: str, model_cls: Type[M], model: str,
                            temperature: float) -> M:
        """
        Ask for a JSON object and validate it into model_cls

        Raises:
            LLMError: If the reply is not valid JSON for model_cls
        """
        response_text = await self.complete(prompt, model, temperature)

        try:
            payload = json.loads(strip_code_fences(response_text))
            return model_cls.model_validate(payload)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse LiteLLM response as JSON: {e}")
            raise LLMError(f"Response from {model} was not valid JSON") from e
        except ValidationError as e:
            logger.error(f"LiteLLM response did not match {model_cls.__name__}: {e}")
            raise LLMError(f"Response from {model} did not match {model_cls.__name__}") from e
