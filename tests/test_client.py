"""
Tests for the requests-based API client, with the network stubbed out.
"""

import pytest
import requests

from socialnet_client import api


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


@pytest.fixture
def calls(monkeypatch):
    """Records outgoing requests and replays queued responses."""
    recorded = []
    responses = []

    def fake(method):
        def send(url, **kwargs):
            recorded.append((method, url, kwargs))
            return responses.pop(0)
        return send

    monkeypatch.setattr(api, "SOCIALNET_API_URL", "http://api.test")
    monkeypatch.setattr(api.requests, "post", fake("POST"))
    monkeypatch.setattr(api.requests, "get", fake("GET"))
    return recorded, responses


def test_register_user_posts_json(calls):
    recorded, responses = calls
    user = {"id": "abc", "username": "alice", "email": "a@x.com"}
    responses.append(FakeResponse(200, user))

    assert api.register_user("alice", "a@x.com", "secret123") == user
    method, url, kwargs = recorded[0]
    assert (method, url) == ("POST", "http://api.test/api/auth/register")
    assert kwargs["json"] == {"username": "alice", "email": "a@x.com", "password": "secret123"}


def test_login_user_reports_server_detail(calls):
    recorded, responses = calls
    responses.append(FakeResponse(400, {"detail": "Wrong password"}))

    result = api.login_user("a@x.com", "wrong")
    assert result == {"status": "error", "status_code": 400, "message": "Wrong password"}
    assert recorded[0][1] == "http://api.test/api/auth/login"


def test_server_error_message_is_returned(calls):
    _, responses = calls
    responses.append(FakeResponse(503, {"status": "error", "message": "Database unavailable"}))

    result = api.login_user("a@x.com", "secret123")
    assert result["status_code"] == 503
    assert result["message"] == "Database unavailable"


def test_non_json_error_falls_back_to_text(calls):
    _, responses = calls
    responses.append(FakeResponse(502, text="Bad Gateway"))

    result = api.register_user("alice", "a@x.com", "secret123")
    assert result == {"status": "error", "status_code": 502, "message": "Bad Gateway"}


def test_network_failure(monkeypatch):
    def refuse(url, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(api.requests, "post", refuse)
    monkeypatch.setattr(api.requests, "get", refuse)
    assert api.login_user("a@x.com", "x") == {"status": "error", "message": "connection refused"}
    assert api.get_health() == {"status": "error", "message": "connection refused"}


def test_get_health(calls):
    recorded, responses = calls
    responses.append(FakeResponse(200, {"status": "ok", "database": "connected"}))

    assert api.get_health() == {"status": "ok", "database": "connected"}
    assert recorded[0][:2] == ("GET", "http://api.test/api/health")


def test_non_json_success_is_reported_as_error(calls):
    _, responses = calls
    responses.append(FakeResponse(200, text="<html>proxy login</html>"))
    responses.append(FakeResponse(200, text="<html>proxy login</html>"))

    for result in (api.register_user("alice", "a@x.com", "secret123"), api.login_user("a@x.com", "x")):
        assert result == {"status": "error", "status_code": 200, "message": "Invalid JSON in response"}
