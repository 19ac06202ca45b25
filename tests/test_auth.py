"""Tests for the authentication strategies."""

import base64

import requests

from jiracloud import BasicAuth, BearerAuth


def _prepared():
    return requests.Request("GET", "https://example.atlassian.net/rest/api/3/myself").prepare()


def test_basic_auth_sets_header():
    request = BasicAuth("user@example.com", "tok")(_prepared())
    token = base64.b64encode(b"user@example.com:tok").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {token}"


def test_bearer_auth_sets_header():
    request = BearerAuth("abc123")(_prepared())
    assert request.headers["Authorization"] == "Bearer abc123"


def test_auth_touches_only_its_request():
    auth = BearerAuth("abc123")
    first, second = _prepared(), _prepared()
    auth(first)
    assert "Authorization" not in second.headers
    assert auth.token == "abc123"


def test_credentials_hidden_from_repr():
    assert "tok" not in repr(BasicAuth("user@example.com", "tok"))
    assert "abc123" not in repr(BearerAuth("abc123"))


def test_basic_auth_accessors():
    auth = BasicAuth("user@example.com", "tok")
    assert auth.email == "user@example.com"
    assert auth.api_token == "tok"
