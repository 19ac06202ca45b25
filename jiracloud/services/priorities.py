"""
Priorities - Issue priorities and priority schemes
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from jiracloud.models import PageBean, Priority
from jiracloud.services.base import Service, api_path, move_body
from jiracloud.services.projects import ProjectListResult
from jiracloud.types import JiraModel, json_field


@dataclass
class PriorityListResult(PageBean):
    values: Optional[List[Priority]] = None


@dataclass
class PriorityCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    status_color: Optional[str] = None


PriorityUpdateRequest = PriorityCreateRequest


@dataclass
class PriorityCreateResponse(JiraModel):
    id: Optional[str] = None


@dataclass
class PriorityScheme(JiraModel):
    id: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    name: Optional[str] = None
    description: Optional[str] = None
    default_priority_id: Optional[str] = None
    priorities: Optional[List[Priority]] = None
    project_ids: Optional[List[str]] = None
    is_default: Optional[bool] = None


@dataclass
class PrioritySchemeListResult(PageBean):
    values: Optional[List[PriorityScheme]] = None


@dataclass
class PrioritySchemeCreateRequest(JiraModel):
    """``mappings`` moves issues from a dropped priority ID to a kept one"""

    name: Optional[str] = None
    description: Optional[str] = None
    default_priority_id: Optional[int] = None
    priority_ids: Optional[List[int]] = None
    project_ids: Optional[List[int]] = None
    mappings: Optional[Dict[str, str]] = None


@dataclass
class PrioritySchemeUpdateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    default_priority_id: Optional[int] = None
    priority_ids: Optional[List[int]] = None
    mappings: Optional[Dict[str, str]] = None


class PrioritiesService(Service):
    """Priority endpoints (/rest/api/3/priority, /rest/api/3/priorityscheme)"""

    def list(self):
        return self._call("GET", api_path("priority"), target=List[Priority])

    def get(self, priority_id: str):
        return self._call("GET", api_path("priority/{}", priority_id), target=Priority)

    def search(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[str]] = None,
        project_ids: Optional[List[str]] = None,
        only_default: bool = False,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "projectId": project_ids,
            "onlyDefault": only_default,
        }
        return self._call("GET", api_path("priority/search"), params=params, target=PriorityListResult)

    def create(self, priority: PriorityCreateRequest):
        return self._call("POST", api_path("priority"), body=priority, target=PriorityCreateResponse)

    def update(self, priority_id: str, priority: PriorityUpdateRequest):
        return self._send("PUT", api_path("priority/{}", priority_id), body=priority)

    def delete(self, priority_id: str, replace_with: Optional[str] = None):
        """Delete a priority; issues move to ``replace_with`` when given"""
        params = {"replaceWith": replace_with}
        return self._send("DELETE", api_path("priority/{}", priority_id), params=params)

    def set_default(self, priority_id: str):
        return self._send("PUT", api_path("priority/default"), body={"id": priority_id})

    def move(self, ids: List[str], *, position: Optional[str] = None, after: Optional[str] = None):
        """Reorder priorities: to "First"/"Last" position, or after another priority"""
        return self._send("PUT", api_path("priority/move"), body=move_body(ids, position, after))

    def list_schemes(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[int]] = None,
        only_default: bool = False,
        expand: Optional[str] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "onlyDefault": only_default,
            "expand": expand,
        }
        return self._call(
            "GET", api_path("priorityscheme"), params=params, target=PrioritySchemeListResult
        )

    def get_scheme(self, scheme_id: str, expand: Optional[str] = None):
        return self._call(
            "GET",
            api_path("priorityscheme/{}", scheme_id),
            params={"expand": expand},
            target=PriorityScheme,
        )

    def create_scheme(self, scheme: PrioritySchemeCreateRequest):
        return self._call("POST", api_path("priorityscheme"), body=scheme, target=PriorityScheme)

    def update_scheme(self, scheme_id: str, scheme: PrioritySchemeUpdateRequest):
        return self._call(
            "PUT", api_path("priorityscheme/{}", scheme_id), body=scheme, target=PriorityScheme
        )

    def delete_scheme(self, scheme_id: str):
        return self._send("DELETE", api_path("priorityscheme/{}", scheme_id))

    def list_scheme_projects(self, scheme_id: str, *, start_at: int = 0, max_results: int = 0):
        params = {"startAt": start_at, "maxResults": max_results}
        return self._call(
            "GET",
            api_path("priorityscheme/{}/project", scheme_id),
            params=params,
            target=ProjectListResult,
        )

    def assign_scheme_to_projects(self, scheme_id: str, project_ids: List[int]):
        return self._send(
            "PUT", api_path("priorityscheme/{}/project", scheme_id), body={"projectIds": project_ids}
        )

    def unassign_scheme_from_projects(self, scheme_id: str, project_ids: List[int]):
        return self._send(
            "POST", api_path("priorityscheme/{}/project", scheme_id), body={"projectIds": project_ids}
        )
