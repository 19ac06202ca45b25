"""
Permissions - Permission checks, permission schemes and issue security schemes
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from jiracloud.models import PageBean, Project, Scope
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.services.projects import ProjectIssueSecurityLevels
from jiracloud.types import JiraModel, json_field


@dataclass
class Permission(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    have_permission: Optional[bool] = None
    deprecated_key: Optional[bool] = None


@dataclass
class PermissionsResult(JiraModel):
    permissions: Optional[Dict[str, Permission]] = None


@dataclass
class BulkProjectPermission(JiraModel):
    issues: Optional[List[int]] = None
    projects: Optional[List[int]] = None
    permissions: Optional[List[str]] = None


@dataclass
class BulkPermissionsRequest(JiraModel):
    """Permissions to check; ``account_id`` defaults to the caller"""

    project_permissions: Optional[List[BulkProjectPermission]] = None
    global_permissions: Optional[List[str]] = None
    account_id: Optional[str] = None


@dataclass
class BulkProjectPermissionGrant(JiraModel):
    permission: Optional[str] = None
    issues: Optional[List[int]] = None
    projects: Optional[List[int]] = None


@dataclass
class BulkPermissionsResult(JiraModel):
    project_permissions: Optional[List[BulkProjectPermissionGrant]] = None
    global_permissions: Optional[List[str]] = None


@dataclass
class PermittedProjectsResult(JiraModel):
    projects: Optional[List[Project]] = None


@dataclass
class PermissionHolder(JiraModel):
    """``type`` is e.g. "group", "projectRole", "user" or "anyone"; ``parameter`` is its ID"""

    type: Optional[str] = None
    parameter: Optional[str] = None
    expand: Optional[str] = None
    value: Optional[str] = None


@dataclass
class PermissionGrant(JiraModel):
    id: Optional[int] = None
    self_url: Optional[str] = json_field("self")
    holder: Optional[PermissionHolder] = None
    permission: Optional[str] = None


@dataclass
class PermissionScheme(JiraModel):
    id: Optional[int] = None
    self_url: Optional[str] = json_field("self")
    name: Optional[str] = None
    description: Optional[str] = None
    scope: Optional[Scope] = None
    permissions: Optional[List[PermissionGrant]] = None
    expand: Optional[str] = None


@dataclass
class PermissionSchemeListResult(JiraModel):
    permission_schemes: Optional[List[PermissionScheme]] = None


@dataclass
class PermissionGrantInput(JiraModel):
    holder: Optional[PermissionHolder] = None
    permission: Optional[str] = None


@dataclass
class PermissionSchemeCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[PermissionGrantInput]] = None
    scope: Optional[Scope] = None


PermissionSchemeUpdateRequest = PermissionSchemeCreateRequest


@dataclass
class _PermissionGrants(JiraModel):
    permissions: Optional[List[PermissionGrant]] = None


@dataclass
class ProjectPermissionScheme(JiraModel):
    id: Optional[int] = None
    self_url: Optional[str] = json_field("self")
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class IssueSecurityScheme(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    default_security_level_id: Optional[int] = None


@dataclass
class IssueSecuritySchemeListResult(PageBean):
    values: Optional[List[IssueSecurityScheme]] = None


class PermissionsService(Service):
    """Permission endpoints (/rest/api/3/permissions, /rest/api/3/permissionscheme, ...)"""

    def list_all(self):
        """Every global and project permission known to the site"""
        return self._call("GET", api_path("permissions"), target=PermissionsResult)

    def get_my_permissions(
        self,
        *,
        project_key: Optional[str] = None,
        project_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        issue_id: Optional[str] = None,
        permissions: Optional[str] = None,
        project_uuid: Optional[str] = None,
        project_configuration_uuid: Optional[str] = None,
    ):
        """
        Which permissions the caller has, globally or in a project or issue

        Args:
            permissions: Comma separated keys, e.g. "BROWSE_PROJECTS,EDIT_ISSUES"
        """
        params = {
            "projectKey": project_key,
            "projectId": project_id,
            "issueKey": issue_key,
            "issueId": issue_id,
            "permissions": permissions,
            "projectUuid": project_uuid,
            "projectConfigurationUuid": project_configuration_uuid,
        }
        return self._call("GET", api_path("mypermissions"), params=params, target=PermissionsResult)

    def check_bulk(self, request: BulkPermissionsRequest):
        return self._call(
            "POST", api_path("permissions/check"), body=request, target=BulkPermissionsResult
        )

    def get_permitted_projects(self, permissions: List[str]):
        return self._call(
            "POST",
            api_path("permissions/project"),
            body={"permissions": permissions},
            target=PermittedProjectsResult,
        )

    def list_schemes(self, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("permissionscheme"),
            params={"expand": comma_list(expand)},
            target=PermissionSchemeListResult,
        )

    def get_scheme(self, scheme_id: int, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("permissionscheme/{}", scheme_id),
            params={"expand": comma_list(expand)},
            target=PermissionScheme,
        )

    def create_scheme(self, scheme: PermissionSchemeCreateRequest, expand: Optional[List[str]] = None):
        return self._call(
            "POST",
            api_path("permissionscheme"),
            params={"expand": comma_list(expand)},
            body=scheme,
            target=PermissionScheme,
        )

    def update_scheme(
        self,
        scheme_id: int,
        scheme: PermissionSchemeUpdateRequest,
        expand: Optional[List[str]] = None,
    ):
        """Replace a scheme; grants left out of ``scheme.permissions`` are removed"""
        return self._call(
            "PUT",
            api_path("permissionscheme/{}", scheme_id),
            params={"expand": comma_list(expand)},
            body=scheme,
            target=PermissionScheme,
        )

    def delete_scheme(self, scheme_id: int):
        return self._send("DELETE", api_path("permissionscheme/{}", scheme_id))

    def get_scheme_grants(self, scheme_id: int, expand: Optional[List[str]] = None):
        """Returns ([PermissionGrant], Response)"""
        result, response = self._call(
            "GET",
            api_path("permissionscheme/{}/permission", scheme_id),
            params={"expand": comma_list(expand)},
            target=_PermissionGrants,
        )
        return result.permissions or [], response

    def create_scheme_grant(
        self,
        scheme_id: int,
        grant: PermissionGrantInput,
        expand: Optional[List[str]] = None,
    ):
        return self._call(
            "POST",
            api_path("permissionscheme/{}/permission", scheme_id),
            params={"expand": comma_list(expand)},
            body=grant,
            target=PermissionGrant,
        )

    def get_scheme_grant(self, scheme_id: int, grant_id: int, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("permissionscheme/{}/permission/{}", scheme_id, grant_id),
            params={"expand": comma_list(expand)},
            target=PermissionGrant,
        )

    def delete_scheme_grant(self, scheme_id: int, grant_id: int):
        return self._send("DELETE", api_path("permissionscheme/{}/permission/{}", scheme_id, grant_id))

    def get_project_scheme(self, project_key_or_id: str, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("project/{}/permissionscheme", project_key_or_id),
            params={"expand": comma_list(expand)},
            target=ProjectPermissionScheme,
        )

    def assign_project_scheme(self, project_key_or_id: str, scheme_id: int):
        return self._send(
            "PUT", api_path("project/{}/permissionscheme", project_key_or_id), body={"id": scheme_id}
        )

    def get_security_levels_for_project(self, project_key_or_id: str):
        """Issue security levels the caller can set on the project's issues"""
        return self._call(
            "GET",
            api_path("project/{}/securitylevel", project_key_or_id),
            target=ProjectIssueSecurityLevels,
        )

    def list_security_schemes(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[int]] = None,
        project_id: Optional[str] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "projectId": project_id,
        }
        return self._call(
            "GET", api_path("issuesecurityschemes"), params=params, target=IssueSecuritySchemeListResult
        )

    def get_security_scheme(self, scheme_id: int):
        return self._call("GET", api_path("issuesecurityschemes/{}", scheme_id), target=IssueSecurityScheme)
