"""
Issue Types - Issue types, their avatars and issue type schemes
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import Avatar, IssueType, PageBean
from jiracloud.services.base import Service, api_path
from jiracloud.services.projects import ProjectListResult
from jiracloud.types import JiraModel


@dataclass
class IssueTypeCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    hierarchy_level: Optional[int] = None


@dataclass
class IssueTypeUpdateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    avatar_id: Optional[int] = None


@dataclass
class IssueTypeScheme(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    default_issue_type_id: Optional[str] = None
    is_default: Optional[bool] = None


@dataclass
class IssueTypeSchemeListResult(PageBean):
    values: Optional[List[IssueTypeScheme]] = None


@dataclass
class IssueTypeSchemeCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    default_issue_type_id: Optional[str] = None
    issue_type_ids: Optional[List[str]] = None


@dataclass
class IssueTypeSchemeCreateResponse(JiraModel):
    issue_type_scheme_id: Optional[str] = None


@dataclass
class IssueTypeSchemeUpdateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    default_issue_type_id: Optional[str] = None


class IssueTypesService(Service):
    """Issue type endpoints (/rest/api/3/issuetype, /rest/api/3/issuetypescheme)"""

    def list(self):
        """Every issue type the user can see, as ([IssueType], Response)"""
        return self._call("GET", api_path("issuetype"), target=List[IssueType])

    def get(self, issue_type_id: str):
        return self._call("GET", api_path("issuetype/{}", issue_type_id), target=IssueType)

    def create(self, issue_type: IssueTypeCreateRequest):
        """
        Create an issue type

        Args:
            issue_type: type is "standard" or "subtask"
        """
        return self._call("POST", api_path("issuetype"), body=issue_type, target=IssueType)

    def update(self, issue_type_id: str, issue_type: IssueTypeUpdateRequest):
        return self._call("PUT", api_path("issuetype/{}", issue_type_id), body=issue_type, target=IssueType)

    def delete(self, issue_type_id: str, alternative_issue_type_id: Optional[str] = None):
        """Delete an issue type, moving its issues to the alternative when given"""
        params = {"alternativeIssueTypeId": alternative_issue_type_id}
        return self._send("DELETE", api_path("issuetype/{}", issue_type_id), params=params)

    def get_alternatives(self, issue_type_id: str):
        return self._call(
            "GET", api_path("issuetype/{}/alternatives", issue_type_id), target=List[IssueType]
        )

    def load_avatar(self, issue_type_id: str, data: bytes, *, x: int = 0, y: int = 0, size: int = 0):
        """
        Upload a PNG as a custom avatar of an issue type

        Args:
            data: Image bytes
            x, y: Top left corner of the crop
            size: Length of the crop square's side; 0 lets Jira choose
        """
        params = {"x": str(x), "y": str(y), "size": str(size)}
        return self._upload(
            api_path("issuetype/{}/avatar2", issue_type_id),
            data,
            "image/png",
            params=params,
            target=Avatar,
        )

    def list_schemes(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[int]] = None,
        expand: Optional[str] = None,
        query_string: Optional[str] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "expand": expand,
            "queryString": query_string,
        }
        return self._call(
            "GET", api_path("issuetypescheme"), params=params, target=IssueTypeSchemeListResult
        )

    def create_scheme(self, scheme: IssueTypeSchemeCreateRequest):
        return self._call(
            "POST", api_path("issuetypescheme"), body=scheme, target=IssueTypeSchemeCreateResponse
        )

    def update_scheme(self, scheme_id: int, scheme: IssueTypeSchemeUpdateRequest):
        return self._send("PUT", api_path("issuetypescheme/{}", scheme_id), body=scheme)

    def delete_scheme(self, scheme_id: int):
        return self._send("DELETE", api_path("issuetypescheme/{}", scheme_id))

    def add_issue_types_to_scheme(self, scheme_id: int, issue_type_ids: List[str]):
        return self._send(
            "PUT",
            api_path("issuetypescheme/{}/issuetype", scheme_id),
            body={"issueTypeIds": issue_type_ids},
        )

    def remove_issue_type_from_scheme(self, scheme_id: int, issue_type_id: str):
        return self._send(
            "DELETE", api_path("issuetypescheme/{}/issuetype/{}", scheme_id, issue_type_id)
        )

    def reorder_issue_types_in_scheme(
        self,
        scheme_id: int,
        issue_type_ids: List[str],
        *,
        position: Optional[str] = None,
        after: Optional[str] = None,
    ):
        """Move issue types to "First"/"Last" position, or after another issue type"""
        body: Dict[str, Any] = {"issueTypeIds": issue_type_ids}
        if position:
            body["position"] = position
        if after:
            body["after"] = after
        return self._send("PUT", api_path("issuetypescheme/{}/issuetype/move", scheme_id), body=body)

    def list_projects_for_scheme(self, scheme_id: int, *, start_at: int = 0, max_results: int = 0):
        params = {"startAt": start_at, "maxResults": max_results}
        return self._call(
            "GET",
            api_path("issuetypescheme/{}/project", scheme_id),
            params=params,
            target=ProjectListResult,
        )

    def assign_scheme_to_project(self, scheme_id: int, project_id: str):
        body = {"issueTypeSchemeId": str(scheme_id), "projectId": project_id}
        return self._send("PUT", api_path("issuetypescheme/project"), body=body)

    def get_issue_types_for_project(self, project_id: int, level: int = 0):
        """Issue types of a project, optionally only one hierarchy level"""
        params = {"projectId": str(project_id), "level": level}
        return self._call("GET", api_path("issuetype/project"), params=params, target=List[IssueType])
