"""Core domain types shared across acquisition, analysis and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


@dataclass(frozen=True)
class SelectedImage:
    """The user's uploaded photo, held in memory for one session."""

    data: bytes
    name: str
    media_type: str

    @property
    def size(self) -> int:
        return len(self.data)


class AnalysisStatus(str, Enum):
    """Lifecycle of the single analysis slot in a session."""

    IDLE = "idle"
    PENDING = "pending"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class AnalysisSuccess:
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "success", "text": self.text}


@dataclass(frozen=True)
class AnalysisFailure:
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "failure", "reason": self.reason}


AnalysisOutcome = Union[AnalysisSuccess, AnalysisFailure]


@dataclass(frozen=True)
class DisplayLine:
    """One rendered line of analysis text."""

    content: str
    is_warning: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "is_warning": self.is_warning}
