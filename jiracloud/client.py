#!/usr/bin/env python3
"""
Jira API Client - Common module for Jira Cloud REST API v3 interactions

    client = Client("https://yoursite.atlassian.net", auth=BasicAuth(email, token))

    issue, _ = client.issues.get("PROJ-123")
    results, _ = client.search.do("project = PROJ")
    projects, _ = client.projects.list()

Every service method returns ``(result, response)``; methods without a result
return the response alone. Failures are raised (see jiracloud.errors).
"""

import json
import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlsplit

import requests
from requests.exceptions import InvalidSchema, InvalidURL, MissingSchema

from jiracloud.config import DEFAULT_TIMEOUT, ClientConfig
from jiracloud.errors import APIError, DecodeError, InvalidPathError, SerializationError
from jiracloud.response import Response
from jiracloud.services import (
    ApplicationRolesService,
    AttachmentsService,
    AuditRecordsService,
    AvatarsService,
    CommentsService,
    ComponentsService,
    DashboardsService,
    FieldsService,
    FiltersService,
    GroupsService,
    IssueLinksService,
    IssueLinkTypesService,
    IssuesService,
    IssueTypesService,
    JQLService,
    LabelsService,
    MyselfService,
    PermissionsService,
    PrioritiesService,
    ProjectRolesService,
    ProjectsService,
    ResolutionsService,
    ScreensService,
    SearchService,
    ServerInfoService,
    StatusesService,
    UsersService,
    VersionsService,
    VotesService,
    WatchersService,
    WorkflowSchemesService,
    WorkflowsService,
    WorklogsService,
)
from jiracloud.types import decode, empty_value, to_json

logger = logging.getLogger(__name__)

# Placeholder only; callers pass their own site URL
DEFAULT_BASE_URL = "https://your-domain.atlassian.net"

USER_AGENT = "go-jira/1.0"

# Control characters, whitespace, and '%' not followed by two hex digits
_INVALID_PATH = re.compile(r"[\x00-\x20\x7f]|%(?![0-9A-Fa-f]{2})")


def encode_query(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Turn keyword parameters into query pairs

    None, "", False, 0 and empty lists are left out; True is sent as "true";
    lists become repeated keys.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None or value is False or value == "":
            continue
        if value is True:
            pairs.append((key, "true"))
        elif isinstance(value, (list, tuple, set)):
            pairs.extend((key, str(item)) for item in value if item is not None and item != "")
        elif isinstance(value, (int, float)) and value == 0:
            continue
        else:
            pairs.append((key, str(value)))
    return pairs


class Client:
    """Jira Cloud API client"""

    def __init__(
        self,
        base_url: str = "",
        *,
        auth=None,
        session: Optional[requests.Session] = None,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Args:
            base_url: Site URL, e.g. https://yoursite.atlassian.net
            auth: BasicAuth, BearerAuth or None for anonymous access
            session: requests.Session to send through (a new one by default)
            user_agent: Value of the User-Agent header
            timeout: Seconds before a call gives up

        Raises:
            InvalidPathError: If base_url has no scheme or host
        """
        base_url = base_url or DEFAULT_BASE_URL
        try:
            parsed = urlsplit(base_url)
        except ValueError as e:
            raise InvalidPathError(f"invalid base URL {base_url!r}: {e}") from e
        if not parsed.scheme or not parsed.netloc:
            raise InvalidPathError(f"invalid base URL {base_url!r}: scheme and host are required")

        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.session = session if session is not None else requests.Session()
        self.user_agent = user_agent
        self.timeout = timeout

        self.issues = IssuesService(self)
        self.search = SearchService(self)
        self.projects = ProjectsService(self)
        self.users = UsersService(self)
        self.groups = GroupsService(self)
        self.filters = FiltersService(self)
        self.dashboards = DashboardsService(self)
        self.issue_types = IssueTypesService(self)
        self.priorities = PrioritiesService(self)
        self.resolutions = ResolutionsService(self)
        self.statuses = StatusesService(self)
        self.components = ComponentsService(self)
        self.versions = VersionsService(self)
        self.issue_links = IssueLinksService(self)
        self.issue_link_types = IssueLinkTypesService(self)
        self.attachments = AttachmentsService(self)
        self.comments = CommentsService(self)
        self.worklogs = WorklogsService(self)
        self.watchers = WatchersService(self)
        self.votes = VotesService(self)
        self.fields = FieldsService(self)
        self.screens = ScreensService(self)
        self.workflows = WorkflowsService(self)
        self.workflow_schemes = WorkflowSchemesService(self)
        self.permissions = PermissionsService(self)
        self.project_roles = ProjectRolesService(self)
        self.labels = LabelsService(self)
        self.server_info = ServerInfoService(self)
        self.myself = MyselfService(self)
        self.application_roles = ApplicationRolesService(self)
        self.audit_records = AuditRecordsService(self)
        self.avatars = AvatarsService(self)
        self.jql = JQLService(self)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, session: Optional[requests.Session] = None
    ) -> "Client":
        """Build a client from JIRA_* environment variables (see ClientConfig.from_env)"""
        config = ClientConfig.from_env(environ)
        return cls(
            config.base_url,
            auth=config.auth,
            session=session,
            user_agent=config.user_agent or USER_AGENT,
            timeout=config.timeout,
        )

    def __repr__(self):
        return f"Client({self.base_url!r}, auth={self.auth!r})"

    def _url(self, path: str) -> str:
        if _INVALID_PATH.search(path):
            raise InvalidPathError(f"invalid path {path!r}")
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url + path

    def _prepare(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        data: Any = None,
        files: Any = None,
    ) -> requests.PreparedRequest:
        request_headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        request_headers.update(headers or {})

        request = requests.Request(
            method=method.upper(),
            url=self._url(path),
            headers=request_headers,
            params=encode_query(params),
            data=data,
            files=files,
            auth=self.auth,
        )
        try:
            return self.session.prepare_request(request)
        except (InvalidURL, InvalidSchema, MissingSchema) as e:
            raise InvalidPathError(f"invalid path {path!r}: {e}") from e

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.PreparedRequest:
        """
        Build a request against the API

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. /rest/api/3/issue/PROJ-1
            body: Anything JSON-encodable, including models; None for no body
            params: Query parameters (see encode_query)
            headers: Extra headers

        Raises:
            InvalidPathError: If the path cannot be turned into a URL
            SerializationError: If the body cannot be encoded
        """
        data = None
        extra_headers = dict(headers or {})
        if body is not None:
            try:
                data = to_json(body)
            except (TypeError, ValueError) as e:
                raise SerializationError(f"cannot encode request body: {e}") from e
            extra_headers["Content-Type"] = "application/json"

        return self._prepare(method, path, params=params, headers=extra_headers, data=data)

    def new_multipart_request(
        self,
        method: str,
        path: str,
        files: Iterable[Tuple[str, Any]],
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> requests.PreparedRequest:
        """
        Build a multipart/form-data upload; each (filename, content) pair goes
        in its own ``file`` part. Content may be bytes or a file object.
        """
        parts = [("file", (filename, content)) for filename, content in files]
        return self._prepare(
            method,
            path,
            params=params,
            headers={"X-Atlassian-Token": "no-check"},
            files=parts,
        )

    def new_raw_request(
        self,
        method: str,
        path: str,
        data: Any,
        content_type: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> requests.PreparedRequest:
        """Build a request with a binary body, e.g. an image/png avatar"""
        return self._prepare(
            method,
            path,
            params=params,
            headers={"Content-Type": content_type, "X-Atlassian-Token": "no-check"},
            data=data,
        )

    def do(
        self,
        request: requests.PreparedRequest,
        target: Any = None,
        *,
        stream: bool = False,
        timeout: Optional[float] = None,
    ) -> Tuple[Any, Response]:
        """
        Send a request and decode the answer

        Args:
            request: Output of new_request and friends
            target: What to decode the body into: a model class, List[...],
                Dict[...], a primitive type, or an object with ``write``
                that receives the raw bytes. None skips decoding.
            stream: Return the raw body stream instead of decoding
            timeout: Seconds, overriding the client default

        Returns:
            (result, response)

        Raises:
            APIError: Status outside 200-299
            DecodeError: A 2xx body that does not decode into target
        """
        logger.debug(f"{request.method} {request.url}")

        settings = self.session.merge_environment_settings(request.url, {}, stream, None, None)
        http_response = self.session.send(request, timeout=timeout or self.timeout, **settings)
        response = Response(http_response)

        logger.debug(f"{request.method} {request.url} -> {http_response.status_code}")

        if not 200 <= http_response.status_code <= 299:
            error = APIError.from_response(http_response, response)
            http_response.close()
            raise error

        if stream:
            http_response.raw.decode_content = True
            return http_response.raw, response

        if target is None or http_response.status_code == 204:
            return None, response

        if not isinstance(target, type) and hasattr(target, "write"):
            for chunk in http_response.iter_content(chunk_size=8192):
                target.write(chunk)
            return target, response

        content = http_response.content
        if not content or not content.strip():
            return empty_value(target), response

        try:
            payload = json.loads(content)
        except ValueError as e:
            raise DecodeError(f"{request.method} {request.url}: response is not valid JSON: {e}", response) from e

        response.populate_page_values(payload)

        try:
            result = decode(target, payload)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"{request.method} {request.url}: unexpected response shape: {e}", response) from e

        return result, response
