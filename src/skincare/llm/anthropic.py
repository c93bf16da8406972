"""Anthropic message building and response parsing."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.models import SelectedImage
from ..utils.image import encode_base64


def build_image_message(prompt: str, image: SelectedImage) -> Dict[str, Any]:
    """Single user turn: the image first, then the instruction text."""
    return {
        "role": "user",
        "content": [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": image.media_type,
                    "data": encode_base64(image.data),
                },
            },
            {"type": "text", "text": prompt},
        ],
    }


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def parse_response_text(message: Any) -> str:
    content_blocks = _field(message, "content") or []
    text_parts: List[str] = []
    for block in content_blocks:
        if _field(block, "type") == "text":
            text = _field(block, "text")
            if text:
                text_parts.append(text)
    return "".join(text_parts)


def extract_usage(message: Any) -> Dict[str, int]:
    usage = _field(message, "usage")
    if usage is None:
        return {}
    payload: Dict[str, int] = {}
    for key in ("input_tokens", "output_tokens"):
        value = _field(usage, key)
        if isinstance(value, int):
            payload[key] = value
    return payload
