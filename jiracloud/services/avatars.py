"""
Avatars - System and custom avatars of projects, issue types and users
"""

from typing import Optional

from jiracloud.models import Avatar, Avatars
from jiracloud.services.base import Service, api_path


class AvatarsService(Service):
    """Avatar endpoints (/rest/api/3/avatar, /rest/api/3/universal_avatar)"""

    def get_system_avatars(self, avatar_type: str):
        """avatar_type: "issuetype", "project" or "user" """
        return self._call("GET", api_path("avatar/{}/system", avatar_type), target=Avatars)

    def get_project_avatars(self, project_id_or_key: str):
        return self._call("GET", api_path("project/{}/avatars", project_id_or_key), target=Avatars)

    def set_project_avatar(self, project_id_or_key: str, avatar_id: str):
        return self._send("PUT", api_path("project/{}/avatar", project_id_or_key), body={"id": avatar_id})

    def delete_project_avatar(self, project_id_or_key: str, avatar_id: int):
        return self._send("DELETE", api_path("project/{}/avatar/{}", project_id_or_key, avatar_id))

    def load_project_avatar(self, project_id_or_key: str, data: bytes, *, x: int = 0, y: int = 0, size: int = 0):
        """
        Upload a PNG as a custom project avatar

        Args:
            x, y: Top left corner of the crop
            size: Length of the crop square's side; 0 lets Jira choose
        """
        return self._upload(
            api_path("project/{}/avatar2", project_id_or_key),
            data,
            "image/png",
            params={"x": str(x), "y": str(y), "size": str(size)},
            target=Avatar,
        )

    def get_issue_type_avatars(self, issue_type_id: str):
        return self._call("GET", api_path("issuetype/{}/avatars", issue_type_id), target=Avatars)

    def load_issue_type_avatar(self, issue_type_id: str, data: bytes, *, x: int = 0, y: int = 0, size: int = 0):
        return self._upload(
            api_path("issuetype/{}/avatar2", issue_type_id),
            data,
            "image/png",
            params={"x": str(x), "y": str(y), "size": str(size)},
            target=Avatar,
        )

    def get_universal_avatar(
        self,
        avatar_type: str,
        owner_id: str,
        *,
        avatar_id: int = 0,
        size: Optional[str] = None,
    ):
        """
        Stream an avatar image

        Args:
            size: "xsmall", "small", "medium", "large" or "xlarge"

        Returns:
            (file-like raw body, Response); the caller reads and closes it
        """
        return self._call(
            "GET",
            api_path("universal_avatar/view/type/{}/owner/{}", avatar_type, owner_id),
            params={"id": avatar_id, "size": size},
            stream=True,
        )
