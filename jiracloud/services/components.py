"""
Components - Project components
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import Component, PageBean
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel, json_field


@dataclass
class ComponentCreateRequest(JiraModel):
    """
    ``assignee_type`` is one of PROJECT_DEFAULT, COMPONENT_LEAD, PROJECT_LEAD
    or UNASSIGNED
    """

    name: Optional[str] = None
    description: Optional[str] = None
    lead_account_id: Optional[str] = None
    lead_user_name: Optional[str] = None
    assignee_type: Optional[str] = None
    project: Optional[str] = None
    project_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class ComponentUpdateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    lead_account_id: Optional[str] = None
    lead_user_name: Optional[str] = None
    assignee_type: Optional[str] = None


@dataclass
class ComponentIssueCount(JiraModel):
    self_url: Optional[str] = json_field("self")
    issue_count: Optional[int] = None


@dataclass
class ComponentListResult(PageBean):
    values: Optional[List[Component]] = None


class ComponentsService(Service):
    """Component endpoints (/rest/api/3/component)"""

    def get(self, component_id: str):
        return self._call("GET", api_path("component/{}", component_id), target=Component)

    def create(self, component: ComponentCreateRequest):
        return self._call("POST", api_path("component"), body=component, target=Component)

    def update(self, component_id: str, component: ComponentUpdateRequest):
        return self._call("PUT", api_path("component/{}", component_id), body=component, target=Component)

    def delete(self, component_id: str, move_issues_to: Optional[str] = None):
        params = {"moveIssuesTo": move_issues_to}
        return self._send("DELETE", api_path("component/{}", component_id), params=params)

    def get_issue_count(self, component_id: str):
        return self._call(
            "GET",
            api_path("component/{}/relatedIssueCounts", component_id),
            target=ComponentIssueCount,
        )

    def list_project_components(
        self,
        project_id_or_key: str,
        *,
        start_at: int = 0,
        max_results: int = 0,
        order_by: Optional[str] = None,
        query: Optional[str] = None,
    ):
        """One page of a project's components"""
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "orderBy": order_by,
            "query": query,
        }
        return self._call(
            "GET",
            api_path("project/{}/component", project_id_or_key),
            params=params,
            target=ComponentListResult,
        )

    def list_all_project_components(self, project_id_or_key: str):
        """Every component of a project, unpaged"""
        return self._call(
            "GET", api_path("project/{}/components", project_id_or_key), target=List[Component]
        )

    def find_components_used_by_user(
        self,
        *,
        project_ids: Optional[List[int]] = None,
        component_ids: Optional[List[int]] = None,
        start_at: int = 0,
        max_results: int = 0,
    ):
        params = {
            "projectIds": project_ids,
            "componentIds": component_ids,
            "startAt": start_at,
            "maxResults": max_results,
        }
        return self._call("GET", api_path("component"), params=params, target=ComponentListResult)
