"""
Jira Response - Envelope around the HTTP response of a single call
"""

from typing import Any, Optional

import requests


class Response:
    """
    Wraps a ``requests.Response``.

    Attribute access falls through to the wrapped response, so ``status_code``,
    ``headers``, ``url`` and friends work as usual. List endpoints additionally
    get their ``startAt``/``maxResults``/``total`` copied here when present.
    """

    def __init__(self, http_response: requests.Response):
        self.http_response = http_response
        self.start_at: Optional[int] = None
        self.max_results: Optional[int] = None
        self.total: Optional[int] = None

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not set in __init__
        if name == "http_response":
            raise AttributeError(name)
        return getattr(self.http_response, name)

    def populate_page_values(self, payload: Any) -> None:
        """Copy pagination values from a decoded payload"""
        if not isinstance(payload, dict):
            return
        if isinstance(payload.get("startAt"), int):
            self.start_at = payload["startAt"]
        if isinstance(payload.get("maxResults"), int):
            self.max_results = payload["maxResults"]
        if isinstance(payload.get("total"), int):
            self.total = payload["total"]

    def __repr__(self):
        return f"<Response [{self.http_response.status_code}]>"
