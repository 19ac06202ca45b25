"""
Groups - Group management and membership
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import Group, PageBean, User
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class GroupBulkResult(PageBean):
    values: Optional[List[Group]] = None


@dataclass
class GroupMembersResult(PageBean):
    values: Optional[List[User]] = None


@dataclass
class GroupLabel(JiraModel):
    text: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None


@dataclass
class GroupSuggestion(JiraModel):
    name: Optional[str] = None
    html: Optional[str] = None
    labels: Optional[List[GroupLabel]] = None
    group_id: Optional[str] = None


@dataclass
class FoundGroups(JiraModel):
    header: Optional[str] = None
    total: Optional[int] = None
    groups: Optional[List[GroupSuggestion]] = None


class GroupsService(Service):
    """Group endpoints (/rest/api/3/group)"""

    def create(self, name: str):
        return self._call("POST", api_path("group"), body={"name": name}, target=Group)

    def delete(self, group_name: str, swap_group: Optional[str] = None):
        """Delete a group, optionally moving its restrictions to ``swap_group``"""
        params = {"groupname": group_name, "swapGroup": swap_group}
        return self._send("DELETE", api_path("group"), params=params)

    def get(self, group_name: str, expand: Optional[List[str]] = None):
        params = {"groupname": group_name, "expand": expand}
        return self._call("GET", api_path("group"), params=params, target=Group)

    def bulk_get(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        group_ids: Optional[List[str]] = None,
        group_names: Optional[List[str]] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "groupId": group_ids,
            "groupName": group_names,
        }
        return self._call("GET", api_path("group/bulk"), params=params, target=GroupBulkResult)

    def get_members(
        self,
        group_name: str,
        *,
        include_inactive_users: bool = False,
        start_at: int = 0,
        max_results: int = 0,
    ):
        params = {
            "groupname": group_name,
            "includeInactiveUsers": include_inactive_users,
            "startAt": start_at,
            "maxResults": max_results,
        }
        return self._call("GET", api_path("group/member"), params=params, target=GroupMembersResult)

    def add_user(self, group_name: str, account_id: str):
        return self._call(
            "POST",
            api_path("group/user"),
            params={"groupname": group_name},
            body={"accountId": account_id},
            target=Group,
        )

    def remove_user(self, group_name: str, account_id: str):
        params = {"groupname": group_name, "accountId": account_id}
        return self._send("DELETE", api_path("group/user"), params=params)

    def find(
        self,
        query: Optional[str] = None,
        *,
        account_id: Optional[str] = None,
        exclude: Optional[List[str]] = None,
        exclude_id: Optional[List[str]] = None,
        max_results: int = 0,
        case_insensitive: bool = False,
    ):
        """Group suggestions for a picker"""
        params = {
            "accountId": account_id,
            "query": query,
            "exclude": exclude,
            "excludeId": exclude_id,
            "maxResults": max_results,
            "caseInsensitive": case_insensitive,
        }
        return self._call("GET", api_path("groups/picker"), params=params, target=FoundGroups)
