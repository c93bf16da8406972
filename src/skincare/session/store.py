"""In-memory store for browser sessions.

Sessions idle for longer than ``idle_timeout`` seconds are ended on the next
store access, which releases their image and preview.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, List, Optional
from uuid import uuid4

from ..core.models import AnalysisStatus
from .previews import PreviewRegistry
from .state import SessionState

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT = 30 * 60


class SessionStore:
    def __init__(
        self,
        previews: Optional[PreviewRegistry] = None,
        *,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.previews = previews or PreviewRegistry()
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: Dict[str, SessionState] = {}
        self._last_seen: Dict[str, float] = {}

    def get_or_create(self, session_id: Optional[str]) -> SessionState:
        self.purge_expired()
        now = self._clock()
        with self._lock:
            if session_id and session_id in self._sessions:
                self._last_seen[session_id] = now
                return self._sessions[session_id]
            new_id = session_id or f"sess_{uuid4().hex}"
            state = SessionState(session_id=new_id)
            self._sessions[new_id] = state
            self._last_seen[new_id] = now
        logger.debug("Created session %s", new_id)
        return state

    def get(self, session_id: str) -> Optional[SessionState]:
        with self._lock:
            return self._sessions.get(session_id)

    def end(self, session_id: str) -> bool:
        """Remove a session and release its preview."""
        with self._lock:
            state = self._sessions.pop(session_id, None)
            self._last_seen.pop(session_id, None)
        if state is None:
            return False
        state.release(self.previews)
        logger.info("Ended session %s", session_id)
        return True

    def purge_expired(self) -> int:
        """End every idle session past the timeout. Pending sessions are kept."""
        cutoff = self._clock() - self.idle_timeout
        with self._lock:
            expired: List[str] = [
                session_id
                for session_id, seen in self._last_seen.items()
                if seen <= cutoff
                and self._sessions[session_id].status is not AnalysisStatus.PENDING
            ]
        for session_id in expired:
            self.end(session_id)
        if expired:
            logger.info("Expired %d idle session(s)", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
