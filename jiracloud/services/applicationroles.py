"""
Application Roles - Product access (Jira Software, Service Management, ...)
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import Group
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class ApplicationRole(JiraModel):
    key: Optional[str] = None
    groups: Optional[List[str]] = None
    group_details: Optional[List[Group]] = None
    name: Optional[str] = None
    default_groups: Optional[List[str]] = None
    default_groups_details: Optional[List[Group]] = None
    selected_by_default: Optional[bool] = None
    defined: Optional[bool] = None
    number_of_seats: Optional[int] = None
    remaining_seats: Optional[int] = None
    user_count: Optional[int] = None
    user_count_description: Optional[str] = None
    has_unlimited_seats: Optional[bool] = None
    platform: Optional[bool] = None


class ApplicationRolesService(Service):
    def list_all(self):
        return self._call("GET", api_path("applicationrole"), target=List[ApplicationRole])

    def get(self, key: str):
        """key: e.g. jira-software"""
        return self._call("GET", api_path("applicationrole/{}", key), target=ApplicationRole)
