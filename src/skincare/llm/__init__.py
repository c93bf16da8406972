"""LLM client entrypoints."""

from .client import generate_image_analysis
from .env import LLMConfigError

__all__ = [
    "LLMConfigError",
    "generate_image_analysis",
]
