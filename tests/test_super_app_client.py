"""
Tests for SuperAppClient.
"""
import json
from unittest.mock import Mock

import requests

from ku_research_api.app.clients.super_app import SuperAppClient


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://superapp.test/register"
    if body is not None:
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response


def make_client(session):
    return SuperAppClient(base_url="http://superapp.test/", api_key="super-secret-key", timeout=3, session=session)


class TestRegister:
    """Tests for SuperAppClient.register"""

    def test_posts_registration_payload(self):
        session = Mock()
        session.request.return_value = make_response(200, {"status": "registered"})

        data, error = make_client(session).register(
            "Ku Research", ("get-research", "add-paper"), "http://ku-research.test:8083"
        )

        assert error is None
        assert data == {"status": "registered"}
        session.request.assert_called_once_with(
            method="POST",
            url="http://superapp.test/register",
            json={
                "name": "Ku Research",
                "capabilities": ["get-research", "add-paper"],
                "callback_url": "http://ku-research.test:8083",
            },
            headers={"Authorization": "Bearer super-secret-key"},
            timeout=3,
        )

    def test_empty_success_body(self):
        session = Mock()
        session.request.return_value = make_response(204)
        data, error = make_client(session).register("Ku Research", [], "http://x")
        assert data is None
        assert error is None

    def test_non_json_success_body(self):
        session = Mock()
        session.request.return_value = make_response(200, b"OK")
        data, error = make_client(session).register("Ku Research", [], "http://x")
        assert error is None
        assert data == {"raw": "OK"}

    def test_http_error_mapped(self):
        session = Mock()
        session.request.return_value = make_response(401, {"error": "invalid key"})
        data, error = make_client(session).register("Ku Research", [], "http://x")
        assert data is None
        assert error == {"status_code": 401, "message": "invalid key"}

    def test_http_error_with_text_body(self):
        session = Mock()
        session.request.return_value = make_response(502, b"Bad Gateway")
        _, error = make_client(session).register("Ku Research", [], "http://x")
        assert error == {"status_code": 502, "message": "Bad Gateway"}

    def test_connection_error_mapped(self):
        session = Mock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        data, error = make_client(session).register("Ku Research", [], "http://x")
        assert data is None
        assert error["status_code"] is None
        assert "connection refused" in error["message"]

    def test_timeout_mapped(self):
        session = Mock()
        session.request.side_effect = requests.Timeout("read timed out")
        _, error = make_client(session).register("Ku Research", [], "http://x")
        assert error["status_code"] is None

    def test_no_auth_header_without_key(self):
        session = Mock()
        session.request.return_value = make_response(200, {})
        SuperAppClient(base_url="http://superapp.test", api_key="", session=session).register("n", [], "u")
        assert session.request.call_args.kwargs["headers"] == {}
