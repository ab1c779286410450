"""
Request-scoped HTTP session handle

``HttpSession`` wraps the process-wide SessionStore for one request. The
session is resolved lazily: nothing is created until the handler reads
the id or an attribute. The session id travels in a cookie.

Once a session is invalidated, the next access (in the same request or a
later one still carrying the old cookie) starts a fresh session with a
new id instead of failing.
"""
import logging
from typing import Any, Optional

from fastapi import Request, Response

from product_api.services.session_store import SessionData, SessionStore

logger = logging.getLogger(__name__)


class HttpSession:
    """Session handle bound to one request/response pair"""

    def __init__(
        self,
        store: SessionStore,
        response: Response,
        cookie_name: str,
        requested_id: Optional[str] = None,
    ):
        self._store = store
        self._response = response
        self._cookie_name = cookie_name
        self._requested_id = requested_id
        self._session: Optional[SessionData] = None

    def _current(self) -> SessionData:
        if self._session is not None and not self._session.invalidated:
            return self._session

        session = None
        if self._requested_id:
            # The client's cookie is only honoured once per request
            session = self._store.get(self._requested_id)
            self._requested_id = None

        if session is None:
            session = self._store.create()
            self._response.set_cookie(
                self._cookie_name,
                session.id,
                httponly=True,
                samesite="lax",
                path="/",
            )

        self._session = session
        return session

    @property
    def id(self) -> str:
        return self._current().id

    def get_attribute(self, key: str) -> Any:
        return self._current().attributes.get(key)

    def set_attribute(self, key: str, value: Any) -> None:
        self._current().attributes[key] = value

    def invalidate(self) -> None:
        """End the session and clear the cookie. No-op if nothing is active."""
        if self._session is not None and not self._session.invalidated:
            self._store.invalidate(self._session.id)
        elif self._requested_id:
            self._store.invalidate(self._requested_id)
            self._requested_id = None

        self._session = None
        self._response.delete_cookie(self._cookie_name, path="/")


def get_session_store(request: Request) -> SessionStore:
    """FastAPI dependency returning the application's SessionStore"""
    return request.app.state.session_store
