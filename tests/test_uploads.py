"""Tests for turning uploaded files into SelectedImage values."""

import pytest

from skincare.core.exceptions import InvalidInputError
from skincare.utils.uploads import select_image

MAX_BYTES = 1024 * 1024


class TestSelectImage:
    def test_missing_upload_is_rejected(self):
        with pytest.raises(InvalidInputError, match="No image file provided"):
            select_image(None, max_bytes=MAX_BYTES)

    def test_blank_file_part_is_rejected(self, fake_upload, png_bytes):
        with pytest.raises(InvalidInputError, match="No image file provided"):
            select_image(fake_upload(png_bytes, filename=""), max_bytes=MAX_BYTES)

    def test_empty_payload_is_rejected(self, fake_upload):
        with pytest.raises(InvalidInputError, match="empty"):
            select_image(fake_upload(b"", filename="selfie.png"), max_bytes=MAX_BYTES)

    def test_oversized_payload_is_rejected(self, fake_upload, png_bytes):
        with pytest.raises(InvalidInputError) as excinfo:
            select_image(fake_upload(png_bytes), max_bytes=10)
        assert excinfo.value.message == "Image exceeds the 10 byte limit."
        assert excinfo.value.context == {"filename": "selfie.png"}

    def test_non_image_is_rejected(self, fake_upload):
        with pytest.raises(InvalidInputError, match="not a recognised image"):
            select_image(fake_upload(b"%PDF-1.4 nope", filename="doc.pdf"), max_bytes=MAX_BYTES)

    def test_valid_png_is_kept_byte_for_byte(self, fake_upload, png_bytes):
        image = select_image(fake_upload(png_bytes), max_bytes=MAX_BYTES)
        assert image.data == png_bytes
        assert image.name == "selfie.png"
        assert image.media_type == "image/png"
        assert image.size == len(png_bytes)

    def test_jpeg_media_type(self, fake_upload, jpeg_bytes):
        image = select_image(fake_upload(jpeg_bytes, filename="me.jpg"), max_bytes=MAX_BYTES)
        assert image.media_type == "image/jpeg"

    def test_client_paths_are_reduced_to_basename(self, fake_upload, png_bytes):
        image = select_image(
            fake_upload(png_bytes, filename="C:\\Users\\me\\Pictures\\selfie.png"),
            max_bytes=MAX_BYTES,
        )
        assert image.name == "selfie.png"

    def test_payload_at_limit_is_accepted(self, fake_upload, png_bytes):
        image = select_image(fake_upload(png_bytes), max_bytes=len(png_bytes))
        assert image.data == png_bytes
