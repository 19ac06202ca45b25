"""
Issue Links - Links between two issues
"""

from dataclasses import dataclass
from typing import Any, Optional

from jiracloud.models import IssueLink, Visibility
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class IssueLinkTypeRef(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class IssueRef(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None


@dataclass
class CommentRef(JiraModel):
    """Comment added to the outward issue; body is a string or an ADF document"""

    body: Any = None
    visibility: Optional[Visibility] = None


@dataclass
class IssueLinkCreateRequest(JiraModel):
    type: Optional[IssueLinkTypeRef] = None
    inward_issue: Optional[IssueRef] = None
    outward_issue: Optional[IssueRef] = None
    comment: Optional[CommentRef] = None


class IssueLinksService(Service):
    """Issue link endpoints (/rest/api/3/issueLink)"""

    def get(self, link_id: str):
        return self._call("GET", api_path("issueLink/{}", link_id), target=IssueLink)

    def create(self, link: IssueLinkCreateRequest):
        """Jira answers 201 with no body, so only the response comes back"""
        return self._send("POST", api_path("issueLink"), body=link)

    def delete(self, link_id: str):
        return self._send("DELETE", api_path("issueLink/{}", link_id))
