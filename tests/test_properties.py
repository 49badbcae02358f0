"""
Tests for the .properties file reader and environment overrides
"""
import pytest

from storyshell.core.config import Settings
from storyshell.core.properties import (
    PropertySource,
    environment_overrides,
    environment_variable_name,
    load_properties,
    split_property,
)


class TestLoadProperties:

    def test_missing_file_gives_empty_mapping(self, tmp_path):
        assert load_properties(tmp_path / "absent.properties") == {}

    def test_parses_keys_comments_and_separators(self, tmp_path):
        path = tmp_path / "application.properties"
        path.write_text(
            "# story settings\n"
            "! also a comment\n"
            "\n"
            "story.generation.model = gpt-4o\n"
            "story.generation.temperature:0.9\n"
            "story.review.model=azure/gpt-4o:latest\n",
            encoding="utf-8",
        )

        properties = load_properties(path)

        assert properties == {
            "story.generation.model": "gpt-4o",
            "story.generation.temperature": "0.9",
            "story.review.model": "azure/gpt-4o:latest",
        }

    def test_whitespace_separator_and_continuations(self, tmp_path):
        path = tmp_path / "application.properties"
        path.write_text(
            "story.generation.model gpt-4o\n"
            "story.generation.temperature \\\n"
            "    0.9\n"
            "story.review.model = gpt-\\\n"
            "   4o-mini\n"
            "story.review.word-count\n",
            encoding="utf-8",
        )

        properties = load_properties(path)

        assert properties == {
            "story.generation.model": "gpt-4o",
            "story.generation.temperature": "0.9",
            "story.review.model": "gpt-4o-mini",
            "story.review.word-count": "",
        }

    @pytest.mark.parametrize("line,expected", [
        ("a=b", ("a", "b")),
        ("a = b", ("a", "b")),
        ("a:b", ("a", "b")),
        ("a b", ("a", "b")),
        ("a  : b c", ("a", "b c")),
        ("a", ("a", "")),
        ("a==b", ("a", "=b")),
    ])
    def test_split_property(self, line, expected):
        assert split_property(line) == expected

    def test_later_lines_win(self, tmp_path):
        path = tmp_path / "application.properties"
        path.write_text("story.review.word-count=10\nstory.review.word-count=20\n", encoding="utf-8")

        assert load_properties(path)["story.review.word-count"] == "20"


class TestEnvironmentOverrides:

    @pytest.mark.parametrize("key,expected", [
        ("story.generation.model", "STORY_GENERATION_MODEL"),
        ("story.review.word-count", "STORY_REVIEW_WORD_COUNT"),
        ("story.review.wordCount", "STORY_REVIEW_WORDCOUNT"),
    ])
    def test_environment_variable_name(self, key, expected):
        assert environment_variable_name(key) == expected

    def test_only_known_keys_are_collected(self):
        environ = {"STORY_GENERATION_MODEL": "gpt-4o", "STORY_OTHER": "x"}

        overrides = environment_overrides(["story.generation.model", "story.review.model"], environ)

        assert overrides == {"story.generation.model": "gpt-4o"}

    def test_environment_wins_over_file(self, tmp_path):
        path = tmp_path / "application.properties"
        path.write_text("story.generation.temperature=0.7\nstory.generation.model=gpt-4o\n", encoding="utf-8")
        config = Settings(properties_file=str(path))

        source = PropertySource.from_settings(
            config,
            ["story.generation.temperature"],
            environ={"STORY_GENERATION_TEMPERATURE": "0.95"},
        )

        assert source["story.generation.temperature"] == "0.95"
        assert source["story.generation.model"] == "gpt-4o"
        assert len(source) == 2


class TestPropertySource:

    def test_behaves_as_read_only_mapping(self):
        source = PropertySource({"a": "1"})

        assert source.get("a") == "1"
        assert source.get("b") is None
        assert "a" in source
        assert list(source) == ["a"]
        with pytest.raises(TypeError):
            source["a"] = "2"
