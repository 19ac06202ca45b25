"""
Myself - The calling user, their preferences and locale
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import User
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel


@dataclass
class CurrentUserPreferences(JiraModel):
    locale: Optional[str] = None


class MyselfService(Service):
    """Endpoints about the authenticated user (/rest/api/3/myself, /rest/api/3/mypreferences)"""

    def get(self, expand: Optional[List[str]] = None):
        """
        The user the client is authenticated as

        Args:
            expand: e.g. ["groups", "applicationRoles"]

        Returns:
            (User, Response)
        """
        return self._call("GET", api_path("myself"), params={"expand": comma_list(expand)}, target=User)

    def get_preference(self, key: str):
        """Returns (str, Response)"""
        return self._call("GET", api_path("mypreferences"), params={"key": key}, target=str)

    def set_preference(self, key: str, value: str):
        return self._send("PUT", api_path("mypreferences"), params={"key": key}, body=value)

    def delete_preference(self, key: str):
        return self._send("DELETE", api_path("mypreferences"), params={"key": key})

    def get_locale(self):
        return self._call("GET", api_path("mypreferences/locale"), target=CurrentUserPreferences)

    def set_locale(self, locale: str):
        return self._send("PUT", api_path("mypreferences/locale"), body={"locale": locale})

    def delete_locale(self):
        return self._send("DELETE", api_path("mypreferences/locale"))
