"""
Project Roles - Roles and the users and groups playing them in each project
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from jiracloud.models import ProjectRole
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class ProjectRoleCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None


ProjectRoleUpdateRequest = ProjectRoleCreateRequest


@dataclass
class ActorRequest(JiraModel):
    """Account IDs in ``user``, group names in ``group``"""

    user: Optional[List[str]] = None
    group: Optional[List[str]] = None


def _actor_params(user: Optional[str], group: Optional[str]) -> Dict[str, Optional[str]]:
    return {"user": user, "group": group}


class ProjectRolesService(Service):
    """Project role endpoints (/rest/api/3/role, /rest/api/3/project/{key}/role)"""

    def list_all(self):
        return self._call("GET", api_path("role"), target=List[ProjectRole])

    def get(self, role_id: int):
        return self._call("GET", api_path("role/{}", role_id), target=ProjectRole)

    def create(self, role: ProjectRoleCreateRequest):
        return self._call("POST", api_path("role"), body=role, target=ProjectRole)

    def update(self, role_id: int, role: ProjectRoleUpdateRequest):
        """Replace both name and description"""
        return self._call("PUT", api_path("role/{}", role_id), body=role, target=ProjectRole)

    def partial_update(self, role_id: int, *, name: Optional[str] = None, description: Optional[str] = None):
        """Change only the name or description given"""
        body: Dict[str, str] = {}
        if name:
            body["name"] = name
        if description:
            body["description"] = description
        return self._call("POST", api_path("role/{}", role_id), body=body, target=ProjectRole)

    def delete(self, role_id: int, swap: int = 0):
        """
        Delete a role

        Args:
            swap: Role that takes over the deleted role's uses in schemes
        """
        return self._send("DELETE", api_path("role/{}", role_id), params={"swap": swap})

    def list_for_project(self, project_id_or_key: str):
        """Returns ({role name: role URL}, Response)"""
        return self._call("GET", api_path("project/{}/role", project_id_or_key), target=Dict[str, str])

    def get_for_project(self, project_id_or_key: str, role_id: int, exclude_inactive_users: bool = False):
        return self._call(
            "GET",
            api_path("project/{}/role/{}", project_id_or_key, role_id),
            params={"excludeInactiveUsers": exclude_inactive_users},
            target=ProjectRole,
        )

    def get_role_details(
        self,
        project_id_or_key: str,
        *,
        current_member: bool = False,
        exclude_connect_addons: bool = False,
        role_ids: Optional[List[int]] = None,
    ):
        params = {
            "currentMember": current_member,
            "excludeConnectAddons": exclude_connect_addons,
            "id": role_ids,
        }
        return self._call(
            "GET",
            api_path("project/{}/roledetails", project_id_or_key),
            params=params,
            target=List[ProjectRole],
        )

    def set_actors(self, project_id_or_key: str, role_id: int, actors: ActorRequest):
        """Replace the role's actors in a project"""
        return self._call(
            "PUT",
            api_path("project/{}/role/{}", project_id_or_key, role_id),
            body={"categorisedActors": actors},
            target=ProjectRole,
        )

    def add_actors(self, project_id_or_key: str, role_id: int, actors: ActorRequest):
        return self._call(
            "POST",
            api_path("project/{}/role/{}", project_id_or_key, role_id),
            body=actors,
            target=ProjectRole,
        )

    def remove_actor(
        self,
        project_id_or_key: str,
        role_id: int,
        *,
        user: Optional[str] = None,
        group: Optional[str] = None,
    ):
        return self._send(
            "DELETE",
            api_path("project/{}/role/{}", project_id_or_key, role_id),
            params=_actor_params(user, group),
        )

    def get_default_actors(self, role_id: int):
        return self._call("GET", api_path("role/{}/actors", role_id), target=ProjectRole)

    def add_default_actors(
        self,
        role_id: int,
        users: Optional[List[str]] = None,
        groups: Optional[List[str]] = None,
    ):
        """Actors given the role in every new project"""
        return self._call(
            "POST",
            api_path("role/{}/actors", role_id),
            body=ActorRequest(user=users or None, group=groups or None),
            target=ProjectRole,
        )

    def remove_default_actor(self, role_id: int, *, user: Optional[str] = None, group: Optional[str] = None):
        return self._send("DELETE", api_path("role/{}/actors", role_id), params=_actor_params(user, group))
