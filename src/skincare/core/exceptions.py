"""Custom exception hierarchy for SkinCare AI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SkincareException(Exception):
    """Base exception type for all SkinCare AI errors."""

    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class ConfigurationError(SkincareException):
    """Raised when configuration is missing or invalid."""


class InvalidInputError(SkincareException):
    """Raised when an uploaded file is missing or not a usable image."""


class AnalysisInProgressError(SkincareException):
    """Raised when an analysis is requested while one is already pending."""


class AnalysisError(SkincareException):
    """Raised when the external model call does not produce an analysis."""


class TransportError(AnalysisError):
    """Raised on network, authentication or HTTP failures talking to the model."""


class ResponseError(AnalysisError):
    """Raised when the model response is empty, malformed or refused."""
