"""Shared helpers for identifying and encoding uploaded images."""

from __future__ import annotations

import base64
import io
import logging
from typing import Dict

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Formats the Anthropic Messages API accepts for image blocks.
SUPPORTED_MEDIA_TYPES: Dict[str, str] = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "GIF": "image/gif",
    "WEBP": "image/webp",
}


def detect_media_type(raw: bytes) -> str:
    """Return the media type of an encoded image.

    Only the header is inspected; the pixel data is never decoded or altered.
    Raises ValueError for data Pillow cannot identify or for formats the
    model provider does not accept.
    """
    try:
        with Image.open(io.BytesIO(raw)) as img:
            img_format = (img.format or "").upper()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError("File is not a recognised image.") from exc

    media_type = SUPPORTED_MEDIA_TYPES.get(img_format)
    if media_type is None:
        logger.info("Rejected image format %s", img_format or "unknown")
        raise ValueError(f"Unsupported image format: {img_format or 'unknown'}.")
    return media_type


def encode_base64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")
