"""
Jira Errors - Exceptions raised by the Jira client
"""

import json
from typing import Dict, List, Optional

import requests


class JiraError(Exception):
    """Base exception for everything the client raises itself"""


class InvalidPathError(JiraError):
    """The request path could not be resolved against the base URL"""


class SerializationError(JiraError):
    """The request body could not be encoded as JSON"""


class APIError(JiraError):
    """
    Jira answered with a status outside 200-299.

    The error payload is parsed best-effort: ``errorMessages`` is a list of
    human readable messages, ``errors`` maps field names to messages. Either
    may be empty when the body was empty or not JSON.
    """

    def __init__(
        self,
        status_code: int,
        method: str,
        url: str,
        error_messages: Optional[List[str]] = None,
        errors: Optional[Dict[str, str]] = None,
        response=None,
    ):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.error_messages = error_messages or []
        self.errors = errors or {}
        self.response = response
        super().__init__(self._format())

    def _format(self) -> str:
        prefix = f"{self.method} {self.url}: {self.status_code}"
        if self.error_messages:
            return f"{prefix} {', '.join(self.error_messages)}"
        if self.errors:
            details = ", ".join(f"{field}: {message}" for field, message in sorted(self.errors.items()))
            return f"{prefix} {details}"
        return prefix

    @classmethod
    def from_response(cls, http_response: requests.Response, response=None) -> "APIError":
        """Build an APIError from a failed HTTP response"""
        request = http_response.request
        method = request.method if request is not None else ""
        url = request.url if request is not None else http_response.url

        error_messages: List[str] = []
        errors: Dict[str, str] = {}

        data = http_response.content
        if data:
            try:
                payload = json.loads(data)
            except ValueError:
                payload = None

            if isinstance(payload, dict):
                messages = payload.get("errorMessages")
                if isinstance(messages, list):
                    error_messages = [str(m) for m in messages]
                field_errors = payload.get("errors")
                if isinstance(field_errors, dict):
                    errors = {str(k): str(v) for k, v in field_errors.items()}

        return cls(
            status_code=http_response.status_code,
            method=method,
            url=url,
            error_messages=error_messages,
            errors=errors,
            response=response,
        )


class DecodeError(JiraError):
    """A successful response body could not be decoded into the expected shape"""

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response
