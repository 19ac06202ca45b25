"""
Filters - Saved JQL filters, favourites and sharing
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import Group, PageBean, Project, ProjectRole, User
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel, json_field


@dataclass
class SharePermission(JiraModel):
    """Who a filter or dashboard is shared with: a project, role, group, user or everyone"""

    id: Optional[int] = None
    type: Optional[str] = None
    project: Optional[Project] = None
    role: Optional[ProjectRole] = None
    group: Optional[Group] = None
    user: Optional[User] = None


@dataclass
class FilterSubscription(JiraModel):
    id: Optional[int] = None
    user: Optional[User] = None
    group: Optional[Group] = None


@dataclass
class Filter(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[User] = None
    jql: Optional[str] = None
    view_url: Optional[str] = None
    search_url: Optional[str] = None
    favourite: Optional[bool] = None
    favourited_count: Optional[int] = None
    share_permissions: Optional[List[SharePermission]] = None
    edit_permissions: Optional[List[SharePermission]] = None
    subscriptions: Optional[List[FilterSubscription]] = None
    expand: Optional[str] = None


@dataclass
class FilterCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    jql: Optional[str] = None
    favourite: Optional[bool] = None
    share_permissions: Optional[List[SharePermission]] = None
    edit_permissions: Optional[List[SharePermission]] = None


FilterUpdateRequest = FilterCreateRequest


@dataclass
class SearchFiltersResult(PageBean):
    values: Optional[List[Filter]] = None


@dataclass
class DefaultShareScope(JiraModel):
    """One of GLOBAL, AUTHENTICATED or PRIVATE"""

    scope: Optional[str] = None


@dataclass
class SharePermissionRequest(JiraModel):
    type: Optional[str] = None
    project_id: Optional[str] = None
    group_name: Optional[str] = json_field("groupname")
    group_id: Optional[str] = None
    project_role_id: Optional[str] = None
    account_id: Optional[str] = None
    rights: Optional[int] = None


class FiltersService(Service):
    """Filter endpoints (/rest/api/3/filter)"""

    def create(
        self,
        filter: FilterCreateRequest,
        *,
        expand: Optional[List[str]] = None,
        override_share_permissions: bool = False,
    ):
        params = {
            "expand": comma_list(expand),
            "overrideSharePermissions": override_share_permissions,
        }
        return self._call("POST", api_path("filter"), params=params, body=filter, target=Filter)

    def get(
        self,
        filter_id: int,
        *,
        expand: Optional[List[str]] = None,
        override_share_permissions: bool = False,
    ):
        params = {
            "expand": comma_list(expand),
            "overrideSharePermissions": override_share_permissions,
        }
        return self._call("GET", api_path("filter/{}", filter_id), params=params, target=Filter)

    def update(
        self,
        filter_id: int,
        filter: FilterUpdateRequest,
        *,
        expand: Optional[List[str]] = None,
        override_share_permissions: bool = False,
    ):
        params = {
            "expand": comma_list(expand),
            "overrideSharePermissions": override_share_permissions,
        }
        return self._call("PUT", api_path("filter/{}", filter_id), params=params, body=filter, target=Filter)

    def delete(self, filter_id: int):
        return self._send("DELETE", api_path("filter/{}", filter_id))

    def list_my(self, *, expand: Optional[List[str]] = None, include_favourites: bool = False):
        """Filters owned by the caller"""
        params = {"expand": comma_list(expand), "includeFavourites": include_favourites}
        return self._call("GET", api_path("filter/my"), params=params, target=List[Filter])

    def search(
        self,
        *,
        filter_name: Optional[str] = None,
        account_id: Optional[str] = None,
        owner: Optional[str] = None,
        group_name: Optional[str] = None,
        group_id: Optional[str] = None,
        project_id: int = 0,
        ids: Optional[List[int]] = None,
        order_by: Optional[str] = None,
        start_at: int = 0,
        max_results: int = 0,
        expand: Optional[List[str]] = None,
        override_share_permissions: bool = False,
    ):
        params = {
            "filterName": filter_name,
            "accountId": account_id,
            "owner": owner,
            "groupname": group_name,
            "groupId": group_id,
            "projectId": project_id,
            "id": ids,
            "orderBy": order_by,
            "startAt": start_at,
            "maxResults": max_results,
            "expand": comma_list(expand),
            "overrideSharePermissions": override_share_permissions,
        }
        return self._call("GET", api_path("filter/search"), params=params, target=SearchFiltersResult)

    def list_favourite(self, expand: Optional[List[str]] = None):
        return self._call(
            "GET", api_path("filter/favourite"), params={"expand": comma_list(expand)}, target=List[Filter]
        )

    def set_favourite(self, filter_id: int, expand: Optional[List[str]] = None):
        return self._call(
            "PUT",
            api_path("filter/{}/favourite", filter_id),
            params={"expand": comma_list(expand)},
            target=Filter,
        )

    def remove_favourite(self, filter_id: int, expand: Optional[List[str]] = None):
        return self._call(
            "DELETE",
            api_path("filter/{}/favourite", filter_id),
            params={"expand": comma_list(expand)},
            target=Filter,
        )

    def get_default_share_scope(self):
        return self._call("GET", api_path("filter/defaultShareScope"), target=DefaultShareScope)

    def set_default_share_scope(self, scope: str):
        return self._call(
            "PUT",
            api_path("filter/defaultShareScope"),
            body=DefaultShareScope(scope=scope),
            target=DefaultShareScope,
        )

    def get_share_permissions(self, filter_id: int):
        return self._call("GET", api_path("filter/{}/permission", filter_id), target=List[SharePermission])

    def add_share_permission(self, filter_id: int, permission: SharePermissionRequest):
        """Share a filter; returns every share permission the filter now has"""
        return self._call(
            "POST",
            api_path("filter/{}/permission", filter_id),
            body=permission,
            target=List[SharePermission],
        )

    def get_share_permission(self, filter_id: int, permission_id: int):
        return self._call(
            "GET", api_path("filter/{}/permission/{}", filter_id, permission_id), target=SharePermission
        )

    def delete_share_permission(self, filter_id: int, permission_id: int):
        return self._send("DELETE", api_path("filter/{}/permission/{}", filter_id, permission_id))

    def change_owner(self, filter_id: int, account_id: str):
        return self._send("PUT", api_path("filter/{}/owner", filter_id), body={"accountId": account_id})
