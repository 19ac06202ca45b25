"""
Users - User lookup, search, columns and group membership
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from jiracloud.models import PageBean, User
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel, json_field


@dataclass
class UserCreateRequest(JiraModel):
    email_address: Optional[str] = None
    display_name: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None
    products: Optional[List[str]] = None


@dataclass
class BulkGetResult(PageBean):
    values: Optional[List[User]] = None


@dataclass
class AccountIDMigrationResult(JiraModel):
    key: Optional[str] = None
    account_id: Optional[str] = None


@dataclass
class ColumnItem(JiraModel):
    label: Optional[str] = None
    value: Optional[str] = None


@dataclass
class GroupName(JiraModel):
    name: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    group_id: Optional[str] = None


@dataclass
class UserPickerUser(JiraModel):
    account_id: Optional[str] = None
    account_type: Optional[str] = None
    html: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass
class UserPickerResult(JiraModel):
    users: Optional[List[UserPickerUser]] = None
    total: Optional[int] = None
    header: Optional[str] = None


@dataclass
class UserEmail(JiraModel):
    account_id: Optional[str] = None
    email: Optional[str] = None


@dataclass
class UserEmailList(JiraModel):
    emails: Optional[Dict[str, str]] = None


class UsersService(Service):
    """User endpoints (/rest/api/3/user)"""

    def search(
        self,
        query: Optional[str] = None,
        *,
        account_id: Optional[str] = None,
        start_at: int = 0,
        max_results: int = 0,
        property: Optional[str] = None,
    ):
        """
        Find users by display name or email address

        Returns:
            ([User], Response)
        """
        params = {
            "query": query,
            "accountId": account_id,
            "startAt": start_at,
            "maxResults": max_results,
            "property": property,
        }
        return self._call("GET", api_path("user/search"), params=params, target=List[User])

    def get(self, account_id: str, expand: Optional[List[str]] = None):
        params = {"accountId": account_id, "expand": comma_list(expand)}
        return self._call("GET", api_path("user"), params=params, target=User)

    def create(self, user: UserCreateRequest):
        return self._call("POST", api_path("user"), body=user, target=User)

    def delete(self, account_id: str):
        return self._send("DELETE", api_path("user"), params={"accountId": account_id})

    def bulk_get(self, account_ids: List[str], *, start_at: int = 0, max_results: int = 0):
        params = {"accountId": account_ids, "startAt": start_at, "maxResults": max_results}
        return self._call("GET", api_path("user/bulk"), params=params, target=BulkGetResult)

    def bulk_get_migration(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        user_keys: Optional[List[str]] = None,
        usernames: Optional[List[str]] = None,
    ):
        """Map legacy user keys or usernames to account IDs"""
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "key": user_keys,
            "username": usernames,
        }
        return self._call(
            "GET", api_path("user/bulk/migration"), params=params, target=List[AccountIDMigrationResult]
        )

    def get_default_columns(self, account_id: Optional[str] = None):
        """Issue navigator columns of a user (the caller when account_id is omitted)"""
        return self._call(
            "GET", api_path("user/columns"), params={"accountId": account_id}, target=List[ColumnItem]
        )

    def set_default_columns(self, columns: List[str], account_id: Optional[str] = None):
        return self._send(
            "PUT", api_path("user/columns"), params={"accountId": account_id}, body={"columns": columns}
        )

    def reset_default_columns(self, account_id: Optional[str] = None):
        return self._send("DELETE", api_path("user/columns"), params={"accountId": account_id})

    def get_groups(self, account_id: str):
        return self._call(
            "GET", api_path("user/groups"), params={"accountId": account_id}, target=List[GroupName]
        )

    def find_assignable_users(
        self,
        query: Optional[str] = None,
        *,
        project: Optional[str] = None,
        issue_key: Optional[str] = None,
        account_id: Optional[str] = None,
        start_at: int = 0,
        max_results: int = 0,
        action_descriptor_id: int = 0,
        recommend: bool = False,
    ):
        """Users that can be assigned issues in a project, or a given issue"""
        params = {
            "query": query,
            "project": project,
            "issueKey": issue_key,
            "accountId": account_id,
            "startAt": start_at,
            "maxResults": max_results,
            "actionDescriptorId": action_descriptor_id,
            "recommend": recommend,
        }
        return self._call("GET", api_path("user/assignable/search"), params=params, target=List[User])

    def find_assignable_multi_project(
        self,
        project_keys: List[str],
        query: Optional[str] = None,
        *,
        start_at: int = 0,
        max_results: int = 0,
    ):
        params = {
            "projectKeys": comma_list(project_keys),
            "query": query,
            "startAt": start_at,
            "maxResults": max_results,
        }
        return self._call(
            "GET", api_path("user/assignable/multiProjectSearch"), params=params, target=List[User]
        )

    def find_users_with_permissions(
        self,
        permissions: List[str],
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        project_key: Optional[str] = None,
        start_at: int = 0,
        max_results: int = 0,
    ):
        """Users holding all of ``permissions`` (e.g. ["BROWSE_PROJECTS"]) in a project or issue"""
        params = {
            "permissions": comma_list(permissions),
            "query": query,
            "accountId": account_id,
            "issueKey": issue_key,
            "projectKey": project_key,
            "startAt": start_at,
            "maxResults": max_results,
        }
        return self._call("GET", api_path("user/permission/search"), params=params, target=List[User])

    def find_users_for_picker(
        self,
        query: str,
        *,
        max_results: int = 0,
        show_avatar: bool = False,
        exclude: Optional[str] = None,
        exclude_account_ids: Optional[str] = None,
        avatar_size: Optional[str] = None,
        exclude_connect_users: bool = False,
    ):
        params = {
            "query": query,
            "maxResults": max_results,
            "showAvatar": show_avatar,
            "exclude": exclude,
            "excludeAccountIds": exclude_account_ids,
            "avatarSize": avatar_size,
            "excludeConnectUsers": exclude_connect_users,
        }
        return self._call("GET", api_path("user/picker"), params=params, target=UserPickerResult)

    def get_all_users(self, *, start_at: int = 0, max_results: int = 0):
        """Every user, including app and inactive users"""
        params = {"startAt": start_at, "maxResults": max_results}
        return self._call("GET", api_path("users/search"), params=params, target=List[User])

    def get_email(self, account_id: str):
        return self._call("GET", api_path("user/email"), params={"accountId": account_id}, target=UserEmail)

    def bulk_get_email(self, account_ids: List[str]):
        return self._call(
            "GET", api_path("user/email/bulk"), params={"accountId": account_ids}, target=UserEmailList
        )
