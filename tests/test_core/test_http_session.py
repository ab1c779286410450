"""
Unit tests for the request-scoped HttpSession handle
"""
from fastapi import Response

from product_api.core.session import HttpSession


def make_handle(store, requested_id=None):
    response = Response()
    return HttpSession(store, response, cookie_name="SESSION", requested_id=requested_id), response


def set_cookie_headers(response):
    return [value for key, value in response.raw_headers if key == b"set-cookie"]


class TestHttpSession:

    def test_session_is_created_lazily(self, session_store):
        handle, response = make_handle(session_store)

        assert len(session_store) == 0
        assert set_cookie_headers(response) == []

        session_id = handle.id

        assert len(session_store) == 1
        assert any(session_id.encode() in header for header in set_cookie_headers(response))

    def test_existing_cookie_is_reused(self, session_store):
        existing = session_store.create()
        existing.attributes["foo"] = "bar"

        handle, response = make_handle(session_store, requested_id=existing.id)

        assert handle.id == existing.id
        assert handle.get_attribute("foo") == "bar"
        assert set_cookie_headers(response) == []

    def test_unknown_cookie_starts_fresh_session(self, session_store):
        handle, _ = make_handle(session_store, requested_id="stale")

        assert handle.id != "stale"
        assert handle.get_attribute("foo") is None

    def test_use_after_invalidate_starts_fresh_session(self, session_store):
        handle, _ = make_handle(session_store)
        handle.set_attribute("foo", "bar")
        first_id = handle.id

        handle.invalidate()

        assert handle.get_attribute("foo") is None
        assert handle.id != first_id
        assert session_store.get(first_id) is None

    def test_invalidate_via_cookie_without_access(self, session_store):
        existing = session_store.create()
        handle, response = make_handle(session_store, requested_id=existing.id)

        handle.invalidate()

        assert session_store.get(existing.id) is None
        assert any(b"SESSION=" in header for header in set_cookie_headers(response))

    def test_set_attribute_overwrites_previous_value(self, session_store):
        handle, _ = make_handle(session_store)
        handle.set_attribute("foo", "bar")
        handle.set_attribute("foo", "baz")

        assert handle.get_attribute("foo") == "baz"
        assert handle.get_attribute("missing") is None
        assert session_store.get(handle.id).attributes == {"foo": "baz"}
