"""Session state for the web app."""

from .previews import PreviewRegistry
from .state import SessionState
from .store import SessionStore

__all__ = ["PreviewRegistry", "SessionState", "SessionStore"]
