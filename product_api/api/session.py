"""
Session API Endpoints
Read and write attributes of the caller's server-side HTTP session

``key`` and ``value`` are plain request parameters (query string or
form fields), not JSON.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Query

from product_api.core.dependencies import get_http_session
from product_api.core.exceptions import EntityValidationError
from product_api.core.session import HttpSession

router = APIRouter()


@router.post("/set")
def set_session_attribute(
    key: Optional[str] = Query(None),
    value: Optional[str] = Query(None),
    form_key: Optional[str] = Form(None, alias="key"),
    form_value: Optional[str] = Form(None, alias="value"),
    session: HttpSession = Depends(get_http_session),
) -> Dict[str, str]:
    """
    Store ``value`` under ``key`` in the current session

    Creates the session (and sets its cookie) if there is none yet.
    """
    key = key if key is not None else form_key
    value = value if value is not None else form_value

    missing = {
        name: f"{name.capitalize()} is required"
        for name, given in (("key", key), ("value", value))
        if given is None
    }
    if missing:
        raise EntityValidationError(missing)

    session.set_attribute(key, value)
    return {
        "message": "Session attribute set successfully",
        "sessionId": session.id,
    }


@router.get("/get")
def get_session_attribute(
    key: str = Query(...),
    session: HttpSession = Depends(get_http_session),
) -> Dict[str, Any]:
    """
    Read ``key`` from the current session

    The value is null when the key was never set.
    """
    return {
        "sessionId": session.id,
        key: session.get_attribute(key),
    }


@router.get("/invalidate")
def invalidate_session(session: HttpSession = Depends(get_http_session)) -> Dict[str, str]:
    """End the current session, reporting the id it had"""
    session_id = session.id
    session.invalidate()
    return {
        "message": "Session invalidated",
        "sessionId": session_id,
    }
