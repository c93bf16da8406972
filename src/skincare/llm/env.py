"""Environment and client helpers for the LLM."""

from __future__ import annotations

import logging
from typing import Optional

from anthropic import Anthropic

from ..config.settings import Settings, get_settings
from ..core.exceptions import ConfigurationError

logger = logging.getLogger("skincare.llm")


class LLMConfigError(ConfigurationError):
    """Raised when LLM environment is missing or invalid."""


def get_anthropic_client(settings: Optional[Settings] = None) -> Anthropic:
    settings = settings or get_settings()
    api_key = settings.anthropic_api_key
    if not api_key:
        raise LLMConfigError("Missing ANTHROPIC_API_KEY/API_KEY.")
    base_url = settings.anthropic_base_url
    if base_url:
        logger.debug("Using Anthropic endpoint %s", base_url)
        return Anthropic(api_key=api_key, base_url=base_url.strip().rstrip("/"))
    return Anthropic(api_key=api_key)


def get_anthropic_model(settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    model = (settings.anthropic_model or "").strip()
    if not model:
        raise LLMConfigError("Missing ANTHROPIC_MODEL/MODEL.")
    return model
