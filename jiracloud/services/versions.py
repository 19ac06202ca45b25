"""
Versions - Project versions (releases)
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import PageBean, Version
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel, json_field


@dataclass
class VersionCreateRequest(JiraModel):
    """Dates are "YYYY-MM-DD" strings"""

    name: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[int] = None
    project: Optional[str] = None
    archived: Optional[bool] = None
    released: Optional[bool] = None
    start_date: Optional[str] = None
    release_date: Optional[str] = None
    move_unfixed_issues_to: Optional[str] = None


@dataclass
class VersionUpdateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    archived: Optional[bool] = None
    released: Optional[bool] = None
    start_date: Optional[str] = None
    release_date: Optional[str] = None
    move_unfixed_issues_to: Optional[str] = None


@dataclass
class CustomFieldReplacement(JiraModel):
    custom_field_id: Optional[int] = None
    move_to: Optional[int] = None


@dataclass
class DeleteAndReplaceRequest(JiraModel):
    move_fix_issues_to: Optional[int] = None
    move_affected_issues_to: Optional[int] = None
    custom_field_replacement_list: Optional[List[CustomFieldReplacement]] = None


@dataclass
class VersionMoveRequest(JiraModel):
    """Either ``after`` (a version URL) or ``position``: Earlier, Later, First or Last"""

    after: Optional[str] = None
    position: Optional[str] = None


@dataclass
class VersionUsageInCustomField(JiraModel):
    field_name: Optional[str] = None
    custom_field_id: Optional[int] = None
    issue_count_with_version_in_custom_field: Optional[int] = None


@dataclass
class VersionIssueCounts(JiraModel):
    self_url: Optional[str] = json_field("self")
    issues_fixed_count: Optional[int] = None
    issues_affected_count: Optional[int] = None
    issue_count_with_custom_fields_showing_version: Optional[int] = None
    custom_field_usage: Optional[List[VersionUsageInCustomField]] = None


@dataclass
class VersionUnresolvedIssueCounts(JiraModel):
    self_url: Optional[str] = json_field("self")
    issues_unresolved_count: Optional[int] = None
    issues_count: Optional[int] = None


@dataclass
class VersionListResult(PageBean):
    values: Optional[List[Version]] = None


class VersionsService(Service):
    """Version endpoints (/rest/api/3/version)"""

    def get(self, version_id: str, expand: Optional[List[str]] = None):
        params = {"expand": comma_list(expand)}
        return self._call("GET", api_path("version/{}", version_id), params=params, target=Version)

    def create(self, version: VersionCreateRequest):
        return self._call("POST", api_path("version"), body=version, target=Version)

    def update(self, version_id: str, version: VersionUpdateRequest):
        return self._call("PUT", api_path("version/{}", version_id), body=version, target=Version)

    def delete(
        self,
        version_id: str,
        *,
        move_fix_issues_to: Optional[str] = None,
        move_affected_issues_to: Optional[str] = None,
    ):
        params = {
            "moveFixIssuesTo": move_fix_issues_to,
            "moveAffectedIssuesTo": move_affected_issues_to,
        }
        return self._send("DELETE", api_path("version/{}", version_id), params=params)

    def delete_and_replace(self, version_id: str, request: DeleteAndReplaceRequest):
        """Delete a version, swapping it for others in fix, affects and custom fields"""
        return self._send("POST", api_path("version/{}/removeAndSwap", version_id), body=request)

    def merge(self, version_id: str, move_issues_to: str):
        """Move every issue of a version to another one and delete it"""
        return self._send("PUT", api_path("version/{}/mergeto/{}", version_id, move_issues_to))

    def move(self, version_id: str, request: VersionMoveRequest):
        return self._call("POST", api_path("version/{}/move", version_id), body=request, target=Version)

    def get_issue_counts(self, version_id: str):
        return self._call(
            "GET", api_path("version/{}/relatedIssueCounts", version_id), target=VersionIssueCounts
        )

    def get_unresolved_issue_counts(self, version_id: str):
        return self._call(
            "GET",
            api_path("version/{}/unresolvedIssueCount", version_id),
            target=VersionUnresolvedIssueCounts,
        )

    def list_project_versions(
        self,
        project_id_or_key: str,
        *,
        start_at: int = 0,
        max_results: int = 0,
        order_by: Optional[str] = None,
        query: Optional[str] = None,
        status: Optional[str] = None,
        expand: Optional[List[str]] = None,
    ):
        """
        One page of a project's versions

        Args:
            status: Comma separated list of "released", "unreleased", "archived"
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "orderBy": order_by,
            "query": query,
            "status": status,
            "expand": comma_list(expand),
        }
        return self._call(
            "GET",
            api_path("project/{}/version", project_id_or_key),
            params=params,
            target=VersionListResult,
        )

    def list_all_project_versions(self, project_id_or_key: str, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("project/{}/versions", project_id_or_key),
            params={"expand": comma_list(expand)},
            target=List[Version],
        )
