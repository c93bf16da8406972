"""Shared test fixtures.

The model call is always replaced with a ``RecordingGenerator`` so no test
talks to the network.
"""

import io
from typing import Callable, List, Optional, Tuple

import pytest
from PIL import Image

from skincare.config.settings import Settings
from skincare.core.models import SelectedImage


def make_image_bytes(fmt: str = "PNG", size: Tuple[int, int] = (4, 4)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(210, 160, 140)).save(buffer, format=fmt)
    return buffer.getvalue()


class FakeUpload:
    """Minimal stand-in for werkzeug's FileStorage."""

    def __init__(self, data: bytes, filename: Optional[str] = "selfie.png"):
        self.filename = filename
        self._stream = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)


class RecordingGenerator:
    """Replaces the model call; records each (prompt, image) it receives."""

    def __init__(self, reply: str = "Healthy skin", error: Optional[BaseException] = None):
        self.reply = reply
        self.error = error
        self.calls: List[Tuple[str, SelectedImage]] = []

    def __call__(self, prompt: str, image: SelectedImage) -> str:
        self.calls.append((prompt, image))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def selected_image(png_bytes: bytes) -> SelectedImage:
    return SelectedImage(data=png_bytes, name="selfie.png", media_type="image/png")


@pytest.fixture
def fake_upload() -> Callable[..., FakeUpload]:
    return FakeUpload


@pytest.fixture
def recording_generator() -> Callable[..., RecordingGenerator]:
    return RecordingGenerator


@pytest.fixture(scope="session")
def log_file(tmp_path_factory) -> str:
    return str(tmp_path_factory.mktemp("logs") / "backend.log")


@pytest.fixture
def settings(log_file: str) -> Settings:
    return Settings(
        _env_file=None,
        anthropic_api_key="test-key",
        anthropic_model="test-model",
        max_tokens=512,
        secret_key="test-secret",
        rate_limit="1000 per minute",
        log_file=log_file,
    )
