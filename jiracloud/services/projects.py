"""
Projects - Project lookup, lifecycle and per-project configuration
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import (
    Field,
    Group,
    IssueType,
    PageBean,
    Project,
    ProjectRole,
    SecurityLevel,
    Status,
    User,
)
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel, json_field


@dataclass
class ProjectListResult(PageBean):
    values: Optional[List[Project]] = None


@dataclass
class ProjectCreateRequest(JiraModel):
    """Body for creating a project; key and name are required by Jira"""

    key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    lead: Optional[str] = None
    lead_account_id: Optional[str] = None
    url: Optional[str] = None
    assignee_type: Optional[str] = None
    avatar_id: Optional[int] = None
    issue_security_scheme: Optional[int] = None
    permission_scheme: Optional[int] = None
    notification_scheme: Optional[int] = None
    category_id: Optional[int] = None
    project_type_key: Optional[str] = None
    project_template_key: Optional[str] = None
    workflow_scheme: Optional[int] = None
    issue_type_screen_scheme: Optional[int] = None
    issue_type_scheme: Optional[int] = None
    field_configuration_scheme: Optional[int] = None


@dataclass
class ProjectUpdateRequest(JiraModel):
    key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    lead: Optional[str] = None
    lead_account_id: Optional[str] = None
    url: Optional[str] = None
    assignee_type: Optional[str] = None
    avatar_id: Optional[int] = None
    issue_security_scheme: Optional[int] = None
    permission_scheme: Optional[int] = None
    notification_scheme: Optional[int] = None
    category_id: Optional[int] = None


@dataclass
class ProjectCreateResponse(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[int] = None
    key: Optional[str] = None


@dataclass
class IssueTypeWithStatuses(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    subtask: Optional[bool] = None
    statuses: Optional[List[Status]] = None


@dataclass
class HierarchyLevel(JiraModel):
    entity_id: Optional[str] = None
    level: Optional[int] = None
    name: Optional[str] = None
    issue_types: Optional[List[IssueType]] = None


@dataclass
class ProjectIssueTypeHierarchy(JiraModel):
    project_id: Optional[int] = None
    hierarchy: Optional[List[HierarchyLevel]] = None


@dataclass
class NotificationEvent(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class EventNotification(JiraModel):
    """Who gets notified for an event; ``parameter`` holds the group, role or field ID"""

    id: Optional[int] = None
    notification_type: Optional[str] = None
    parameter: Optional[str] = None
    expand: Optional[str] = None
    group: Optional[Group] = None
    field: Optional[Field] = None
    email_address: Optional[str] = None
    project_role: Optional[ProjectRole] = None
    user: Optional[User] = None


@dataclass
class NotificationSchemeEvent(JiraModel):
    event: Optional[NotificationEvent] = None
    notifications: Optional[List[EventNotification]] = None


@dataclass
class NotificationScheme(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    notification_scheme_events: Optional[List[NotificationSchemeEvent]] = None
    expand: Optional[str] = None


@dataclass
class ProjectIssueSecurityLevels(JiraModel):
    levels: Optional[List[SecurityLevel]] = None


class ProjectsService(Service):
    """Project endpoints (/rest/api/3/project)"""

    def list(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        order_by: Optional[str] = None,
        ids: Optional[List[int]] = None,
        keys: Optional[List[str]] = None,
        query: Optional[str] = None,
        type_key: Optional[str] = None,
        category_id: int = 0,
        action: Optional[str] = None,
        expand: Optional[List[str]] = None,
        status: Optional[List[str]] = None,
        properties: Optional[List[str]] = None,
        property_query: Optional[str] = None,
    ):
        """
        Page through the projects visible to the user

        Args:
            order_by: e.g. "key", "-lastIssueUpdatedTime"
            ids: Only these project IDs
            keys: Only these project keys
            query: Matched against project key and name
            status: Any of "live", "archived", "deleted"

        Returns:
            (ProjectListResult, Response)
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "orderBy": order_by,
            "query": query,
            "typeKey": type_key,
            "categoryId": category_id,
            "action": action,
            "expand": comma_list(expand),
            "status": status,
            "keys": keys,
            "id": ids,
            "properties": properties,
            "propertyQuery": property_query,
        }
        return self._call("GET", api_path("project/search"), params=params, target=ProjectListResult)

    def get(
        self,
        project_id_or_key: str,
        *,
        expand: Optional[List[str]] = None,
        properties: Optional[List[str]] = None,
    ):
        params = {"expand": comma_list(expand), "properties": properties}
        return self._call("GET", api_path("project/{}", project_id_or_key), params=params, target=Project)

    def create(self, project: ProjectCreateRequest):
        return self._call("POST", api_path("project"), body=project, target=ProjectCreateResponse)

    def update(self, project_id_or_key: str, project: ProjectUpdateRequest):
        return self._call("PUT", api_path("project/{}", project_id_or_key), body=project, target=Project)

    def delete(self, project_id_or_key: str, enable_undo: bool = False):
        """Delete a project; with enable_undo it goes to the recycle bin instead"""
        params = {"enableUndo": enable_undo}
        return self._send("DELETE", api_path("project/{}", project_id_or_key), params=params)

    def archive(self, project_id_or_key: str):
        return self._send("POST", api_path("project/{}/archive", project_id_or_key))

    def restore(self, project_id_or_key: str):
        """Restore an archived or deleted project"""
        return self._call("POST", api_path("project/{}/restore", project_id_or_key), target=Project)

    def get_statuses(self, project_id_or_key: str):
        """Returns ([IssueTypeWithStatuses], Response)"""
        return self._call(
            "GET", api_path("project/{}/statuses", project_id_or_key), target=List[IssueTypeWithStatuses]
        )

    def get_hierarchy(self, project_id: int):
        return self._call(
            "GET", api_path("project/{}/hierarchy", project_id), target=ProjectIssueTypeHierarchy
        )

    def get_notification_scheme(self, project_key_or_id: str, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("project/{}/notificationscheme", project_key_or_id),
            params={"expand": comma_list(expand)},
            target=NotificationScheme,
        )

    def list_recent(self, expand: Optional[List[str]] = None):
        """Up to 20 projects the user looked at most recently"""
        return self._call(
            "GET", api_path("project/recent"), params={"expand": comma_list(expand)}, target=List[Project]
        )

    def get_security_levels(self, project_key_or_id: str):
        return self._call(
            "GET",
            api_path("project/{}/securitylevel", project_key_or_id),
            target=ProjectIssueSecurityLevels,
        )
