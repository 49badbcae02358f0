"""
Property source for the story.* configuration bundles

Reads a Java-style .properties file and overlays environment variables,
so STORY_GENERATION_TEMPERATURE=0.9 wins over story.generation.temperature=0.7.
"""
import os
from collections.abc import Mapping as MappingABC
from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from storyshell.core.config import Settings
from storyshell.utils.logging import get_logger

logger = get_logger(__name__)

_COMMENT_PREFIXES = ("#", "!")
_KEY_TERMINATORS = "=:"


def _logical_lines(handle: Iterable[str]) -> Iterator[str]:
    """Join backslash-continued lines, dropping blanks and comments"""
    pending = None
    for raw_line in handle:
        line = raw_line.rstrip("\r\n")
        if pending is None:
            stripped = line.lstrip()
            if not stripped or stripped.startswith(_COMMENT_PREFIXES):
                continue
        else:
            line = line.lstrip()

        # An odd number of trailing backslashes continues onto the next line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue

        yield (pending or "") + line
        pending = None

    if pending is not None:
        yield pending


def split_property(line: str) -> Tuple[str, str]:
    """
    Split one logical line into key and value

    The key ends at the first "=", ":" or whitespace; whitespace around a
    single "=" or ":" separator is skipped, so "key value", "key = value"
    and "key:value" are all equivalent. A bare key has an empty value.
    """
    line = line.lstrip()
    end = len(line)
    for index, char in enumerate(line):
        if char in _KEY_TERMINATORS or char.isspace():
            end = index
            break

    rest = line[end:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:]
    return line[:end], rest.strip()


def load_properties(path: Union[str, Path]) -> Dict[str, str]:
    """
    Parse a .properties file into a flat key/value mapping

    Args:
        path: File to read

    Returns:
        Mapping of property keys to raw string values, empty if the file is missing
    """
    path = Path(path)
    if not path.is_file():
        logger.info(f"Properties file {path} not found, using defaults")
        return {}

    properties: Dict[str, str] = {}
    with path.open(encoding="utf-8") as handle:
        for line in _logical_lines(handle):
            key, value = split_property(line)
            properties[key] = value

    logger.debug(f"Loaded {len(properties)} properties from {path}")
    return properties


def environment_variable_name(key: str) -> str:
    """story.generation.word-count -> STORY_GENERATION_WORD_COUNT"""
    return key.upper().replace(".", "_").replace("-", "_")


def environment_overrides(keys: Iterable[str],
                          environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect environment variables that override the given property keys"""
    environ = os.environ if environ is None else environ
    overrides = {}
    for key in keys:
        name = environment_variable_name(key)
        if name in environ:
            overrides[key] = environ[name]
    return overrides


class PropertySource(MappingABC):
    """Read-only mapping over the merged file and environment properties"""

    def __init__(self, properties: Optional[Mapping[str, str]] = None):
        self._properties = dict(properties or {})

    @classmethod
    def from_settings(cls, config: Settings, known_keys: Iterable[str] = (),
                      environ: Optional[Mapping[str, str]] = None) -> "PropertySource":
        properties = load_properties(config.properties_file)
        properties.update(environment_overrides(known_keys, environ))
        return cls(properties)

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __iter__(self):
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)
