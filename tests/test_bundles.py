"""
Tests for configuration bundle binding
"""
import pytest
from pydantic import ValidationError

from storyshell.core.bundles import (
    StoryGenerationConfig,
    StoryReviewConfig,
    StoryConfigs,
    bind,
    load_story_configs,
    story_property_keys,
)
from storyshell.core.exceptions import ConfigurationBindingError


class TestBindDefaults:
    """Missing keys fall back to the documented defaults"""

    def test_empty_input_gives_generation_defaults(self):
        config = bind({}, "story.generation", StoryGenerationConfig)

        assert config == StoryGenerationConfig(model="gpt-4o-mini", temperature=0.7, word_count=100)

    def test_empty_input_gives_review_defaults(self):
        config = bind({}, "story.review", StoryReviewConfig)

        assert config.model == "gpt-4o-mini"
        assert config.temperature == 0.2
        assert config.word_count == 100

    def test_partial_input_keeps_other_defaults(self):
        config = bind({"story.generation.temperature": "0.5"}, "story.generation", StoryGenerationConfig)

        assert config.temperature == 0.5
        assert config.model == "gpt-4o-mini"
        assert config.word_count == 100

    def test_blank_and_none_values_are_treated_as_absent(self):
        raw = {"story.review.model": "   ", "story.review.temperature": None}

        config = bind(raw, "story.review", StoryReviewConfig)

        assert config.model == "gpt-4o-mini"
        assert config.temperature == 0.2

    def test_explicit_defaults_override_class_defaults(self):
        config = bind({}, "story.generation", StoryGenerationConfig, defaults={"word_count": 250})

        assert config.word_count == 250
        assert config.temperature == 0.7

    def test_present_value_beats_explicit_default(self):
        config = bind(
            {"story.generation.word-count": "80"},
            "story.generation",
            StoryGenerationConfig,
            defaults={"word_count": 250},
        )

        assert config.word_count == 80


class TestBindValues:
    """Well-typed present values are bound exactly"""

    def test_all_keys_bound(self):
        raw = {
            "story.generation.model": "gpt-4o",
            "story.generation.temperature": "0.9",
            "story.generation.word-count": "150",
        }

        config = bind(raw, "story.generation", StoryGenerationConfig)

        assert config.model == "gpt-4o"
        assert config.temperature == 0.9
        assert config.word_count == 150

    def test_numeric_values_are_accepted(self):
        raw = {"story.review.temperature": 0.3, "story.review.word-count": 42}

        config = bind(raw, "story.review", StoryReviewConfig)

        assert config.temperature == 0.3
        assert config.word_count == 42

    @pytest.mark.parametrize("key", ["word-count", "word_count", "wordCount"])
    def test_word_count_spellings(self, key):
        config = bind({f"story.review.{key}": "64"}, "story.review", StoryReviewConfig)

        assert config.word_count == 64

    def test_kebab_case_wins_over_other_spellings(self):
        raw = {"story.review.wordCount": "10", "story.review.word-count": "20"}

        config = bind(raw, "story.review", StoryReviewConfig)

        assert config.word_count == 20

    def test_other_prefixes_are_ignored(self):
        raw = {"story.review.temperature": "0.9", "story.generation.unknown": "x"}

        config = bind(raw, "story.generation", StoryGenerationConfig)

        assert config.temperature == 0.7

    @pytest.mark.parametrize("value,expected", [(4, "4"), (3.5, "3.5")])
    def test_numeric_model_is_bound_as_text(self, value, expected):
        config = bind({"story.generation.model": value}, "story.generation", StoryGenerationConfig)

        assert config.model == expected

    def test_values_are_stripped(self):
        config = bind({"story.generation.model": "  gpt-4o \n"}, "story.generation", StoryGenerationConfig)

        assert config.model == "gpt-4o"


class TestBindErrors:
    """Present values that cannot be coerced fail the bind"""

    def test_non_numeric_temperature_fails(self):
        with pytest.raises(ConfigurationBindingError) as exc_info:
            bind({"story.generation.temperature": "warm"}, "story.generation", StoryGenerationConfig)

        assert exc_info.value.key == "story.generation.temperature"
        assert exc_info.value.value == "warm"

    def test_non_numeric_word_count_fails(self):
        with pytest.raises(ConfigurationBindingError) as exc_info:
            bind({"story.review.word-count": "many"}, "story.review", StoryReviewConfig)

        assert exc_info.value.key == "story.review.word-count"
        assert "story.review.word-count" in str(exc_info.value)

    def test_fractional_word_count_fails(self):
        with pytest.raises(ConfigurationBindingError):
            bind({"story.review.wordCount": "12.5"}, "story.review", StoryReviewConfig)

    def test_error_names_the_spelling_that_was_used(self):
        with pytest.raises(ConfigurationBindingError) as exc_info:
            bind({"story.review.wordCount": "lots"}, "story.review", StoryReviewConfig)

        assert exc_info.value.key == "story.review.wordCount"


class TestBundleImmutability:

    def test_assignment_is_rejected(self):
        config = StoryGenerationConfig()

        with pytest.raises(ValidationError):
            config.temperature = 0.1

        assert config.temperature == 0.7


class TestLoadStoryConfigs:

    def test_binds_both_bundles(self):
        source = {
            "story.generation.model": "gpt-4o",
            "story.review.temperature": "0.1",
        }

        configs = load_story_configs(source)

        assert isinstance(configs, StoryConfigs)
        assert configs.generation.model == "gpt-4o"
        assert configs.generation.temperature == 0.7
        assert configs.review.model == "gpt-4o-mini"
        assert configs.review.temperature == 0.1

    def test_bad_value_in_either_bundle_fails(self):
        with pytest.raises(ConfigurationBindingError):
            load_story_configs({"story.review.temperature": "cold"})

    def test_property_keys_cover_both_prefixes(self):
        keys = story_property_keys()

        assert "story.generation.word-count" in keys
        assert "story.review.wordCount" in keys
        assert "story.review.model" in keys
