"""
Services used by the demo shell
"""
from .litellm_client import LiteLLMClient  # noqa: F401
from .injected_demo import InjectedDemo  # noqa: F401
