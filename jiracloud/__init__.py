"""
jiracloud - A typed client for the Jira Cloud REST API v3
"""

import logging

from jiracloud.auth import BasicAuth, BearerAuth
from jiracloud.client import DEFAULT_BASE_URL, USER_AGENT, Client, encode_query
from jiracloud.config import DEFAULT_TIMEOUT, ClientConfig
from jiracloud.errors import APIError, DecodeError, InvalidPathError, JiraError, SerializationError
from jiracloud.response import Response
from jiracloud.services.base import API_VERSION
from jiracloud.types import Date, JiraModel, Time

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "API_VERSION",
    "APIError",
    "BasicAuth",
    "BearerAuth",
    "Client",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "Date",
    "DecodeError",
    "InvalidPathError",
    "JiraError",
    "JiraModel",
    "Response",
    "SerializationError",
    "Time",
    "USER_AGENT",
    "encode_query",
]
