#!/usr/bin/env python3
"""
Jira Config - Client settings read from environment variables
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from requests.auth import AuthBase

from jiracloud.auth import BasicAuth, BearerAuth

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ClientConfig:
    """Everything needed to build a Client"""

    base_url: str
    auth: Optional[AuthBase] = None
    user_agent: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Read the configuration from environment variables

        JIRA_BASE_URL is always required. Credentials come either from
        JIRA_EMAIL + JIRA_TOKEN (basic auth) or from JIRA_BEARER_TOKEN.
        JIRA_USER_AGENT and JIRA_TIMEOUT are optional.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If required variables are missing or JIRA_TIMEOUT is not a number
        """
        env = os.environ if environ is None else environ

        base_url = env.get("JIRA_BASE_URL")
        email = env.get("JIRA_EMAIL")
        token = env.get("JIRA_TOKEN")
        bearer_token = env.get("JIRA_BEARER_TOKEN")

        if bearer_token:
            missing = [] if base_url else ["JIRA_BASE_URL"]
            auth = BearerAuth(bearer_token)
        else:
            missing = [
                name
                for name, value in (
                    ("JIRA_BASE_URL", base_url),
                    ("JIRA_EMAIL", email),
                    ("JIRA_TOKEN", token),
                )
                if not value
            ]
            auth = BasicAuth(email, token) if email and token else None

        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

        raw_timeout = env.get("JIRA_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"JIRA_TIMEOUT must be a number of seconds, got {raw_timeout!r}")

        return cls(
            base_url=base_url.rstrip("/"),
            auth=auth,
            user_agent=env.get("JIRA_USER_AGENT") or None,
            timeout=timeout,
        )
