"""Per-session state: the selected image and the single analysis slot.

Transitions:

    idle/done/failed --begin_analysis--> pending --finish_analysis--> done|failed

``begin_analysis`` is atomic, so at most one analysis per session is in
flight no matter how many requests arrive.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..analysis.renderer import render
from ..core.exceptions import AnalysisInProgressError
from ..core.models import (
    AnalysisOutcome,
    AnalysisStatus,
    AnalysisSuccess,
    DisplayLine,
    SelectedImage,
)
from .previews import PreviewRegistry


@dataclass
class SessionState:
    session_id: str
    image: Optional[SelectedImage] = None
    preview_token: Optional[str] = None
    status: AnalysisStatus = AnalysisStatus.IDLE
    outcome: Optional[AnalysisOutcome] = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def can_analyze(self) -> bool:
        return self.image is not None and self.status is not AnalysisStatus.PENDING

    @property
    def display_lines(self) -> List[DisplayLine]:
        if isinstance(self.outcome, AnalysisSuccess):
            return render(self.outcome.text)
        return []

    def select_image(self, image: SelectedImage, previews: PreviewRegistry) -> str:
        """Replace the selected image and swap its preview reference."""
        token = previews.issue(image)
        with self._lock:
            previous = self.preview_token
            self.image = image
            self.preview_token = token
        previews.revoke(previous)
        return token

    def begin_analysis(self) -> Optional[SelectedImage]:
        """Claim the analysis slot.

        Returns the image to analyse, or None when nothing is selected.
        """
        with self._lock:
            if self.image is None:
                return None
            if self.status is AnalysisStatus.PENDING:
                raise AnalysisInProgressError(
                    "An analysis is already in progress.",
                    context={"session_id": self.session_id},
                )
            self.status = AnalysisStatus.PENDING
            return self.image

    def finish_analysis(self, outcome: AnalysisOutcome) -> None:
        with self._lock:
            self.outcome = outcome
            if isinstance(outcome, AnalysisSuccess):
                self.status = AnalysisStatus.DONE
            else:
                self.status = AnalysisStatus.FAILED

    def release(self, previews: PreviewRegistry) -> None:
        """Drop the selected image and revoke its preview."""
        with self._lock:
            token = self.preview_token
            self.image = None
            self.preview_token = None
        previews.revoke(token)

    def to_dict(self, *, preview_url: Optional[str] = None) -> Dict[str, Any]:
        image = None
        if self.image is not None:
            image = {
                "name": self.image.name,
                "media_type": self.image.media_type,
                "size": self.image.size,
                "preview_url": preview_url,
            }
        outcome = None
        if self.outcome is not None:
            outcome = self.outcome.to_dict()
            if isinstance(self.outcome, AnalysisSuccess):
                outcome["lines"] = [line.to_dict() for line in self.display_lines]
        return {
            "session_id": self.session_id,
            "status": self.status.value,
            "can_analyze": self.can_analyze,
            "image": image,
            "outcome": outcome,
        }
