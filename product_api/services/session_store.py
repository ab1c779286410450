"""
Server-side HTTP session store

Maps session id -> attributes in process memory. Sessions expire after
``timeout_seconds`` without access; expired entries are removed by
``sweep_expired``, which also runs opportunistically from ``get`` and
``create`` at most once per ``sweep_interval_seconds``.

For multiple API instances the store would need a shared backend (Redis,
a database table); the interface stays the same.
"""
import logging
import secrets
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class SessionData:
    id: str
    created_at: float
    last_accessed_at: float
    attributes: Dict[str, Any] = field(default_factory=dict)
    invalidated: bool = False


class SessionStore:
    """
    In-memory session store with idle timeout.

    ``clock`` returns seconds and defaults to time.time; tests pass a fake.
    """

    def __init__(
        self,
        timeout_seconds: int = 1800,
        sweep_interval_seconds: int = 60,
        clock: Callable[[], float] = time.time,
    ):
        self.timeout_seconds = timeout_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._sessions)

    def _is_expired(self, session: SessionData, now: float) -> bool:
        return now - session.last_accessed_at > self.timeout_seconds

    def _maybe_sweep(self) -> None:
        # Only sweep periodically to avoid scanning on every request
        if self._clock() - self._last_sweep >= self.sweep_interval_seconds:
            self.sweep_expired()

    def create(self) -> SessionData:
        """Mint a new active session"""
        self._maybe_sweep()
        now = self._clock()

        with self._lock:
            session_id = secrets.token_urlsafe(24)
            while session_id in self._sessions:
                session_id = secrets.token_urlsafe(24)
            session = SessionData(id=session_id, created_at=now, last_accessed_at=now)
            self._sessions[session_id] = session

        logger.debug(f"Session created: {session_id[:8]}...")
        return session

    def get(self, session_id: Optional[str]) -> Optional[SessionData]:
        """
        Return the active session for this id and mark it as accessed

        Returns None for unknown, invalidated or expired ids.
        """
        if not session_id:
            return None

        self._maybe_sweep()
        now = self._clock()

        with self._lock:
            session = self._sessions.get(session_id)
            if session is None or session.invalidated:
                return None
            if self._is_expired(session, now):
                session.invalidated = True
                del self._sessions[session_id]
                logger.info(f"Session expired: {session_id[:8]}...")
                return None
            session.last_accessed_at = now
            return session

    def invalidate(self, session_id: str) -> bool:
        """End a session. Returns False if it was not active."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
            if session is None:
                return False
            session.invalidated = True
            session.attributes.clear()

        logger.info(f"Session invalidated: {session_id[:8]}...")
        return True

    def sweep_expired(self) -> int:
        """Remove every session idle past the timeout. Returns how many were removed."""
        now = self._clock()

        with self._lock:
            expired = [
                session_id for session_id, session in self._sessions.items()
                if self._is_expired(session, now)
            ]
            for session_id in expired:
                self._sessions.pop(session_id).invalidated = True
            self._last_sweep = now

        if expired:
            logger.info(f"Swept {len(expired)} expired session(s)")
        return len(expired)
