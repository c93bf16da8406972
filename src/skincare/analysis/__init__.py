"""Prompting, normalization and rendering of skin analyses."""

from .normalizer import normalize
from .prompt import build_prompt
from .renderer import render

__all__ = ["build_prompt", "normalize", "render"]
