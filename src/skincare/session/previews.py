"""Revocable preview references for selected images."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional
from uuid import uuid4

from ..core.models import SelectedImage

logger = logging.getLogger(__name__)


class PreviewRegistry:
    """Maps opaque preview tokens to in-memory images.

    A token stays valid until it is revoked; the owner must revoke it when
    the image is replaced or the session ends.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: Dict[str, SelectedImage] = {}

    def issue(self, image: SelectedImage) -> str:
        token = uuid4().hex
        with self._lock:
            self._items[token] = image
        return token

    def resolve(self, token: str) -> Optional[SelectedImage]:
        with self._lock:
            return self._items.get(token)

    def revoke(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            removed = self._items.pop(token, None)
        if removed is not None:
            logger.debug("Revoked preview %s", token)
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
