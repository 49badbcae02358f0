"""
Configuration bundles for agent behavior

A bundle groups the model, sampling temperature and target word count one
agent step runs with. Bundles are bound from the property source under a
fixed prefix, for example:

    story.generation.model=gpt-4o
    story.generation.temperature=0.7
    story.generation.word-count=150

Any key left out falls back to the bundle's default. A value that is present
but cannot be coerced (temperature=warm) fails the bind instead of defaulting.
"""
from typing import Any, ClassVar, Dict, List, Mapping, NamedTuple, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError

from storyshell.core.exceptions import ConfigurationBindingError
from storyshell.utils.logging import get_logger

logger = get_logger(__name__)

B = TypeVar("B", bound="ConfigurationBundle")


class ConfigurationBundle(BaseModel):
    """Immutable model/temperature/word-count settings for one agent step"""

    PREFIX: ClassVar[str] = ""

    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    word_count: int = 100

    class Config:
        frozen = True
        extra = "forbid"
        coerce_numbers_to_str = True


class StoryGenerationConfig(ConfigurationBundle):
    """Story generation settings, bound from story.generation.*"""

    PREFIX: ClassVar[str] = "story.generation"

    model: str = Field(default="gpt-4o-mini", description="Model used to write the story")
    temperature: float = Field(default=0.7, description="Sampling temperature for writing")
    word_count: int = Field(default=100, description="Target story length in words")


class StoryReviewConfig(ConfigurationBundle):
    """Story review settings, bound from story.review.*"""

    PREFIX: ClassVar[str] = "story.review"

    model: str = Field(default="gpt-4o-mini", description="Model used to review the story")
    temperature: float = Field(default=0.2, description="Sampling temperature for reviewing")
    word_count: int = Field(default=100, description="Target review length in words")


class StoryConfigs(NamedTuple):
    generation: StoryGenerationConfig
    review: StoryReviewConfig


def _key_spellings(field_name: str) -> List[str]:
    """word_count -> ['word-count', 'word_count', 'wordCount']"""
    head, *rest = field_name.split("_")
    camel = head + "".join(part.capitalize() for part in rest)
    return list(dict.fromkeys([field_name.replace("_", "-"), field_name, camel]))


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def bind(raw: Mapping[str, Any], prefix: str, bundle_cls: Type[B],
         defaults: Optional[Mapping[str, Any]] = None) -> B:
    """
    Bind a configuration bundle from a flat property mapping

    Args:
        raw: Property keys to raw values (strings or numbers)
        prefix: Key prefix the bundle lives under, e.g. "story.generation"
        bundle_cls: Bundle type to construct
        defaults: Optional per-field defaults overriding the bundle's own

    Returns:
        The bound, immutable bundle

    Raises:
        ConfigurationBindingError: If a present value cannot be coerced
    """
    values: Dict[str, Any] = dict(defaults or {})
    sources: Dict[str, str] = {}
    known_keys = set()

    for field_name in bundle_cls.model_fields:
        for spelling in _key_spellings(field_name):
            key = f"{prefix}.{spelling}"
            known_keys.add(key)
            value = raw.get(key)
            if _is_absent(value):
                continue
            if field_name not in sources:
                values[field_name] = value.strip() if isinstance(value, str) else value
                sources[field_name] = key

    for key in raw:
        if key.startswith(prefix + ".") and key not in known_keys:
            logger.debug(f"Ignoring unknown property '{key}' for {bundle_cls.__name__}")

    try:
        bundle = bundle_cls(**values)
    except ValidationError as e:
        error = e.errors()[0]
        field_name = str(error["loc"][0]) if error.get("loc") else ""
        key = sources.get(field_name, f"{prefix}.{field_name.replace('_', '-')}")
        raise ConfigurationBindingError(key, values.get(field_name), error["msg"]) from e

    logger.debug(f"Bound {bundle_cls.__name__} from {sorted(sources.values()) or 'defaults'}")
    return bundle


def load_story_configs(source: Mapping[str, Any]) -> StoryConfigs:
    """Bind both story bundles from the property source once at startup"""
    generation = bind(source, StoryGenerationConfig.PREFIX, StoryGenerationConfig)
    review = bind(source, StoryReviewConfig.PREFIX, StoryReviewConfig)
    logger.info(
        f"Story generation: model={generation.model} temperature={generation.temperature} "
        f"word_count={generation.word_count}; review: model={review.model} "
        f"temperature={review.temperature} word_count={review.word_count}"
    )
    return StoryConfigs(generation=generation, review=review)


def story_property_keys() -> List[str]:
    """Every property key the story bundles understand, in all accepted spellings"""
    keys = []
    for bundle_cls in (StoryGenerationConfig, StoryReviewConfig):
        for field_name in bundle_cls.model_fields:
            keys.extend(f"{bundle_cls.PREFIX}.{s}" for s in _key_spellings(field_name))
    return keys
