"""Pytest configuration and fixtures."""

import io
import json
from http.client import responses as reasons
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
from requests.adapters import HTTPAdapter
from urllib3.response import HTTPResponse

from jiracloud import BasicAuth, Client

BASE_URL = "https://example.atlassian.net"


class FakeJira(HTTPAdapter):
    """
    Transport adapter standing in for a Jira site.

    Every request sent through it is recorded; answers come from the queue
    filled by ``respond`` (200 with an empty body once it runs dry).
    """

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self.queue: List[Tuple[int, bytes, Dict[str, str]]] = []

    def respond(self, status: int = 200, body: Any = None, headers: Optional[Dict[str, str]] = None):
        headers = dict(headers or {})
        if body is None:
            data = b""
        elif isinstance(body, bytes):
            data = body
        elif isinstance(body, str):
            data = body.encode("utf-8")
        else:
            data = json.dumps(body).encode("utf-8")
            headers.setdefault("Content-Type", "application/json")
        self.queue.append((status, data, headers))

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        status, data, headers = self.queue.pop(0) if self.queue else (200, b"", {})
        raw = HTTPResponse(
            body=io.BytesIO(data),
            headers=headers,
            status=status,
            reason=reasons.get(status, ""),
            preload_content=False,
        )
        return self.build_response(request, raw)

    @property
    def last(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def last_path(self) -> str:
        return urlsplit(self.last.url).path

    def last_query(self) -> Dict[str, List[str]]:
        return parse_qs(urlsplit(self.last.url).query, keep_blank_values=True)

    def last_json(self) -> Any:
        body = self.last.body
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return json.loads(body)


@pytest.fixture
def fake_jira():
    return FakeJira()


@pytest.fixture
def session(fake_jira):
    s = requests.Session()
    s.mount("https://", fake_jira)
    s.mount("http://", fake_jira)
    return s


@pytest.fixture
def client(session):
    """A client pointed at the fake site with basic auth."""
    return Client(BASE_URL, auth=BasicAuth("user@example.com", "api-token"), session=session)


@pytest.fixture
def issue_payload():
    """An issue as GET /rest/api/3/issue/{key} returns it."""
    return {
        "id": "10002",
        "key": "TEST-2",
        "self": f"{BASE_URL}/rest/api/3/issue/10002",
        "fields": {
            "summary": "Build API",
            "status": {"name": "In Progress", "id": "3", "statusCategory": {"key": "indeterminate"}},
            "issuetype": {"id": "10001", "name": "Story", "subtask": False},
            "project": {"id": "10000", "key": "TEST", "name": "Test Project"},
            "created": "2024-01-15T10:30:45.123-0500",
            "duedate": "2024-02-01",
            "labels": ["backend"],
            "customfield_10115": 5,
            "issuelinks": [
                {
                    "id": "20000",
                    "type": {"name": "Blocks", "inward": "is blocked by", "outward": "blocks"},
                    "inwardIssue": {"key": "TEST-1"},
                }
            ],
        },
    }


@pytest.fixture
def search_payload(issue_payload):
    """One page of GET /rest/api/3/search/jql."""
    return {
        "issues": [issue_payload, {"id": "10003", "key": "TEST-3", "fields": {"summary": "Create frontend"}}],
        "nextPageToken": "page-2",
        "isLast": False,
    }
