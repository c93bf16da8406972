"""Turn an uploaded file into a SelectedImage."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any, Optional

from ..core.exceptions import InvalidInputError
from ..core.models import SelectedImage
from .image import detect_media_type

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_NAME = "image"


def select_image(upload: Optional[Any], *, max_bytes: int) -> SelectedImage:
    """Read and validate an uploaded image.

    ``upload`` is any file-like object exposing ``filename`` and ``read()``
    (a werkzeug ``FileStorage`` in the web app). The bytes are kept as-is.
    """
    if upload is None:
        raise InvalidInputError("No image file provided.")

    filename = getattr(upload, "filename", None) or ""
    # Browsers submit an empty part when the picker was left blank.
    if not filename:
        raise InvalidInputError("No image file provided.")

    # Read one byte past the limit so oversized uploads are detected
    # without buffering the whole body.
    raw = upload.read(max_bytes + 1)
    if not raw:
        raise InvalidInputError("Uploaded file is empty.", context={"filename": filename})
    if len(raw) > max_bytes:
        raise InvalidInputError(
            f"Image exceeds the {max_bytes} byte limit.",
            context={"filename": filename},
        )

    try:
        media_type = detect_media_type(raw)
    except ValueError as exc:
        raise InvalidInputError(str(exc), context={"filename": filename}) from exc

    name = PurePath(filename.replace("\\", "/")).name or DEFAULT_IMAGE_NAME
    logger.info("Selected image %s (%s, %d bytes)", name, media_type, len(raw))
    return SelectedImage(data=raw, name=name, media_type=media_type)
