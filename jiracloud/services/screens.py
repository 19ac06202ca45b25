"""
Screens - Screens, their tabs and fields, and screen schemes
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import PageBean, Scope
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel


@dataclass
class Screen(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    scope: Optional[Scope] = None


@dataclass
class ScreenListResult(PageBean):
    values: Optional[List[Screen]] = None


@dataclass
class ScreenCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None


ScreenUpdateRequest = ScreenCreateRequest


@dataclass
class ScreenTab(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None


@dataclass
class ScreenTabField(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None


@dataclass
class ScreenSchemeScreens(JiraModel):
    """Screen IDs per issue operation; ``default`` covers the ones left unset"""

    default: Optional[int] = None
    view: Optional[int] = None
    edit: Optional[int] = None
    create: Optional[int] = None


@dataclass
class ScreenScheme(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    screens: Optional[ScreenSchemeScreens] = None


@dataclass
class ScreenSchemeListResult(PageBean):
    values: Optional[List[ScreenScheme]] = None


@dataclass
class ScreenSchemeCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    screens: Optional[ScreenSchemeScreens] = None


@dataclass
class FieldScreen(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None


@dataclass
class FieldScreensResult(PageBean):
    values: Optional[List[FieldScreen]] = None


class ScreensService(Service):
    """Screen endpoints (/rest/api/3/screens, /rest/api/3/screenscheme)"""

    def list(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[int]] = None,
        query_string: Optional[str] = None,
        scope: Optional[List[str]] = None,
        order_by: Optional[str] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "queryString": query_string,
            "scope": scope,
            "orderBy": order_by,
        }
        return self._call("GET", api_path("screens"), params=params, target=ScreenListResult)

    def create(self, screen: ScreenCreateRequest):
        return self._call("POST", api_path("screens"), body=screen, target=Screen)

    def update(self, screen_id: int, screen: ScreenUpdateRequest):
        return self._call("PUT", api_path("screens/{}", screen_id), body=screen, target=Screen)

    def delete(self, screen_id: int):
        return self._send("DELETE", api_path("screens/{}", screen_id))

    def list_tabs(self, screen_id: int, project_key: Optional[str] = None):
        return self._call(
            "GET",
            api_path("screens/{}/tabs", screen_id),
            params={"projectKey": project_key},
            target=List[ScreenTab],
        )

    def create_tab(self, screen_id: int, name: str):
        return self._call("POST", api_path("screens/{}/tabs", screen_id), body={"name": name}, target=ScreenTab)

    def update_tab(self, screen_id: int, tab_id: int, name: str):
        return self._call(
            "PUT", api_path("screens/{}/tabs/{}", screen_id, tab_id), body={"name": name}, target=ScreenTab
        )

    def delete_tab(self, screen_id: int, tab_id: int):
        return self._send("DELETE", api_path("screens/{}/tabs/{}", screen_id, tab_id))

    def move_tab(self, screen_id: int, tab_id: int, position: int):
        """Move a tab to a zero-based position"""
        return self._send("POST", api_path("screens/{}/tabs/{}/move/{}", screen_id, tab_id, position))

    def list_tab_fields(self, screen_id: int, tab_id: int, project_key: Optional[str] = None):
        return self._call(
            "GET",
            api_path("screens/{}/tabs/{}/fields", screen_id, tab_id),
            params={"projectKey": project_key},
            target=List[ScreenTabField],
        )

    def add_tab_field(self, screen_id: int, tab_id: int, field_id: str):
        return self._call(
            "POST",
            api_path("screens/{}/tabs/{}/fields", screen_id, tab_id),
            body={"fieldId": field_id},
            target=ScreenTabField,
        )

    def remove_tab_field(self, screen_id: int, tab_id: int, field_id: str):
        return self._send("DELETE", api_path("screens/{}/tabs/{}/fields/{}", screen_id, tab_id, field_id))

    def move_tab_field(self, screen_id: int, tab_id: int, field_id: str, after: Optional[str] = None):
        body: Dict[str, str] = {}
        if after:
            body["after"] = after
        return self._send(
            "POST", api_path("screens/{}/tabs/{}/fields/{}/move", screen_id, tab_id, field_id), body=body
        )

    def list_schemes(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[int]] = None,
        expand: Optional[str] = None,
        query_string: Optional[str] = None,
        order_by: Optional[str] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "expand": expand,
            "queryString": query_string,
            "orderBy": order_by,
        }
        return self._call("GET", api_path("screenscheme"), params=params, target=ScreenSchemeListResult)

    def create_scheme(self, scheme: ScreenSchemeCreateRequest):
        return self._call("POST", api_path("screenscheme"), body=scheme, target=ScreenScheme)

    def update_scheme(
        self,
        scheme_id: int,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        screens: Optional[ScreenSchemeScreens] = None,
    ):
        body: Dict[str, Any] = {}
        if name:
            body["name"] = name
        if description:
            body["description"] = description
        if screens is not None:
            body["screens"] = screens
        return self._send("PUT", api_path("screenscheme/{}", scheme_id), body=body)

    def delete_scheme(self, scheme_id: int):
        return self._send("DELETE", api_path("screenscheme/{}", scheme_id))

    def get_field_screens(
        self,
        field_id: str,
        *,
        start_at: int = 0,
        max_results: int = 0,
        expand: Optional[List[str]] = None,
    ):
        """Screens a field is on"""
        params = {"startAt": start_at, "maxResults": max_results, "expand": comma_list(expand)}
        return self._call(
            "GET", api_path("field/{}/screens", field_id), params=params, target=FieldScreensResult
        )
