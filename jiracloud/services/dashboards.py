"""
Dashboards - Dashboards and their gadgets
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import PageBean, User
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.services.filters import SharePermission
from jiracloud.types import JiraModel, json_field


@dataclass
class Dashboard(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    is_favourite: Optional[bool] = None
    name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[User] = None
    popularity: Optional[int] = None
    rank: Optional[int] = None
    share_permissions: Optional[List[SharePermission]] = None
    edit_permissions: Optional[List[SharePermission]] = None
    view: Optional[str] = None
    is_writable: Optional[bool] = None
    system_dashboard: Optional[bool] = None


@dataclass
class DashboardListResult(JiraModel):
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    dashboards: Optional[List[Dashboard]] = None


@dataclass
class SearchDashboardsResult(PageBean):
    values: Optional[List[Dashboard]] = None


@dataclass
class DashboardCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    share_permissions: Optional[List[SharePermission]] = None
    edit_permissions: Optional[List[SharePermission]] = None


DashboardUpdateRequest = DashboardCreateRequest


@dataclass
class GadgetPosition(JiraModel):
    row: Optional[int] = None
    column: Optional[int] = None


@dataclass
class DashboardGadget(JiraModel):
    id: Optional[int] = None
    module_key: Optional[str] = None
    uri: Optional[str] = None
    color: Optional[str] = None
    position: Optional[GadgetPosition] = None
    title: Optional[str] = None


@dataclass
class GadgetListResult(JiraModel):
    gadgets: Optional[List[DashboardGadget]] = None


@dataclass
class GadgetCreateRequest(JiraModel):
    module_key: Optional[str] = None
    uri: Optional[str] = None
    color: Optional[str] = None
    position: Optional[GadgetPosition] = None
    title: Optional[str] = None
    ignore_uri: Optional[bool] = json_field("ignoreURI")


@dataclass
class GadgetUpdateRequest(JiraModel):
    color: Optional[str] = None
    position: Optional[GadgetPosition] = None
    title: Optional[str] = None


@dataclass
class AvailableGadget(JiraModel):
    module_key: Optional[str] = None
    uri: Optional[str] = None
    title: Optional[str] = None


@dataclass
class AvailableGadgetsResult(JiraModel):
    gadgets: Optional[List[AvailableGadget]] = None


@dataclass
class BulkEditResult(JiraModel):
    modified_dashboards: Optional[List[str]] = None
    not_modified_dashboards: Optional[List[str]] = None


class DashboardsService(Service):
    """Dashboard endpoints (/rest/api/3/dashboard)"""

    def list(self, *, filter: Optional[str] = None, start_at: int = 0, max_results: int = 0):
        """
        List dashboards

        Args:
            filter: "my" or "favourite"; all dashboards when omitted
        """
        params = {"filter": filter, "startAt": start_at, "maxResults": max_results}
        return self._call("GET", api_path("dashboard"), params=params, target=DashboardListResult)

    def search(
        self,
        *,
        dashboard_name: Optional[str] = None,
        account_id: Optional[str] = None,
        owner: Optional[str] = None,
        group_name: Optional[str] = None,
        group_id: Optional[str] = None,
        project_id: int = 0,
        order_by: Optional[str] = None,
        start_at: int = 0,
        max_results: int = 0,
        status: Optional[str] = None,
        expand: Optional[List[str]] = None,
    ):
        params = {
            "dashboardName": dashboard_name,
            "accountId": account_id,
            "owner": owner,
            "groupname": group_name,
            "groupId": group_id,
            "projectId": project_id,
            "orderBy": order_by,
            "startAt": start_at,
            "maxResults": max_results,
            "status": status,
            "expand": comma_list(expand),
        }
        return self._call("GET", api_path("dashboard/search"), params=params, target=SearchDashboardsResult)

    def get(self, dashboard_id: str):
        return self._call("GET", api_path("dashboard/{}", dashboard_id), target=Dashboard)

    def create(self, dashboard: DashboardCreateRequest):
        return self._call("POST", api_path("dashboard"), body=dashboard, target=Dashboard)

    def update(self, dashboard_id: str, dashboard: DashboardUpdateRequest):
        return self._call("PUT", api_path("dashboard/{}", dashboard_id), body=dashboard, target=Dashboard)

    def delete(self, dashboard_id: str):
        return self._send("DELETE", api_path("dashboard/{}", dashboard_id))

    def copy(self, dashboard_id: str, dashboard: DashboardCreateRequest):
        return self._call("POST", api_path("dashboard/{}/copy", dashboard_id), body=dashboard, target=Dashboard)

    def list_gadgets(
        self,
        dashboard_id: str,
        *,
        module_key: Optional[str] = None,
        uri: Optional[str] = None,
        gadget_id: Optional[str] = None,
    ):
        params = {"moduleKey": module_key, "uri": uri, "gadgetId": gadget_id}
        return self._call(
            "GET", api_path("dashboard/{}/gadget", dashboard_id), params=params, target=GadgetListResult
        )

    def add_gadget(self, dashboard_id: str, gadget: GadgetCreateRequest):
        return self._call(
            "POST", api_path("dashboard/{}/gadget", dashboard_id), body=gadget, target=DashboardGadget
        )

    def update_gadget(self, dashboard_id: str, gadget_id: int, gadget: GadgetUpdateRequest):
        return self._send("PUT", api_path("dashboard/{}/gadget/{}", dashboard_id, gadget_id), body=gadget)

    def remove_gadget(self, dashboard_id: str, gadget_id: int):
        return self._send("DELETE", api_path("dashboard/{}/gadget/{}", dashboard_id, gadget_id))

    def list_available_gadgets(self):
        return self._call("GET", api_path("dashboard/gadgets"), target=AvailableGadgetsResult)

    def bulk_edit(
        self,
        action: str,
        dashboard_ids: List[str],
        *,
        change_owner_account_id: Optional[str] = None,
        share_permissions: Optional[List[SharePermission]] = None,
        extend_admin_permissions: bool = False,
    ):
        """
        Apply one action to many dashboards

        Args:
            action: "changeOwner", "changePermission", "addPermission" or "removePermission"
        """
        body: Dict[str, Any] = {"action": action, "selectedDashboardIds": dashboard_ids}
        if change_owner_account_id:
            body["newOwner"] = {"accountId": change_owner_account_id}
        if share_permissions is not None:
            body["sharePermissions"] = share_permissions
        if extend_admin_permissions:
            body["extendAdminPermissions"] = True
        return self._call("PUT", api_path("dashboard/bulk/edit"), body=body, target=BulkEditResult)
