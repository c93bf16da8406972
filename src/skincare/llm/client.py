"""LLM client helpers."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

import anthropic

from ..config.settings import Settings, get_settings
from ..core.exceptions import ResponseError, TransportError
from ..core.models import SelectedImage
from .anthropic import build_image_message, extract_usage, parse_response_text
from .env import get_anthropic_client, get_anthropic_model

logger = logging.getLogger("skincare.llm")


def generate_image_analysis(
    prompt: str,
    image: SelectedImage,
    *,
    settings: Optional[Settings] = None,
) -> str:
    """Send ``prompt`` and ``image`` to the model and return its raw text.

    Raises:
        LLMConfigError: credentials are missing.
        TransportError: the request failed (network, auth, HTTP status).
        ResponseError: the model refused or returned no text.
    """
    settings = settings or get_settings()
    client = get_anthropic_client(settings)
    model = get_anthropic_model(settings)
    request_id = uuid.uuid4().hex

    logger.info(
        "Analysis request id=%s model=%s image=%s bytes=%d prompt_chars=%d",
        request_id,
        model,
        image.name,
        image.size,
        len(prompt),
    )
    start = time.perf_counter()
    try:
        message = client.messages.create(
            model=model,
            max_tokens=settings.max_tokens,
            messages=[build_image_message(prompt, image)],
        )
    except anthropic.APIStatusError as exc:
        logger.warning("Anthropic returned status %s id=%s", exc.status_code, request_id)
        raise TransportError(
            f"Model request failed with status {exc.status_code}.",
            context={"status_code": exc.status_code, "request_id": request_id},
        ) from exc
    except anthropic.APIError as exc:
        logger.warning("Anthropic request failed id=%s: %s", request_id, exc)
        raise TransportError(
            f"Could not reach the model: {exc}",
            context={"request_id": request_id},
        ) from exc
    elapsed_ms = (time.perf_counter() - start) * 1000

    stop_reason = getattr(message, "stop_reason", None)
    logger.info(
        "Analysis response id=%s ms=%.1f stop_reason=%s usage=%s",
        request_id,
        elapsed_ms,
        stop_reason,
        extract_usage(message),
    )
    if stop_reason == "refusal":
        raise ResponseError(
            "The model declined to analyze this image.",
            context={"request_id": request_id},
        )
    text = parse_response_text(message)
    if not text.strip():
        raise ResponseError(
            "The model returned an empty response.",
            context={"request_id": request_id},
        )
    return text
