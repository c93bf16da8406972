from __future__ import annotations

import base64
import io

import pytest
from PIL import Image

from skincare.utils.image import detect_media_type, encode_base64


def test_detects_png(png_bytes):
    assert detect_media_type(png_bytes) == "image/png"


def test_detects_jpeg(jpeg_bytes):
    assert detect_media_type(jpeg_bytes) == "image/jpeg"


def test_rejects_unsupported_format():
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2)).save(buffer, format="BMP")
    with pytest.raises(ValueError, match="Unsupported image format: BMP"):
        detect_media_type(buffer.getvalue())


def test_rejects_non_image_bytes():
    with pytest.raises(ValueError, match="not a recognised image"):
        detect_media_type(b"definitely not an image")


def test_encode_base64_is_ascii(png_bytes):
    encoded = encode_base64(png_bytes)
    assert base64.b64decode(encoded) == png_bytes
