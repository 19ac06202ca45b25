"""
Resolutions - Issue resolutions
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import PageBean, Resolution
from jiracloud.services.base import Service, api_path, move_body
from jiracloud.types import JiraModel


@dataclass
class ResolutionListResult(PageBean):
    values: Optional[List[Resolution]] = None


@dataclass
class ResolutionCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None


ResolutionUpdateRequest = ResolutionCreateRequest


@dataclass
class ResolutionCreateResponse(JiraModel):
    id: Optional[str] = None


class ResolutionsService(Service):
    def list(self):
        return self._call("GET", api_path("resolution"), target=List[Resolution])

    def get(self, resolution_id: str):
        return self._call("GET", api_path("resolution/{}", resolution_id), target=Resolution)

    def search(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        ids: Optional[List[str]] = None,
        only_default: bool = False,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "id": ids,
            "onlyDefault": only_default,
        }
        return self._call(
            "GET", api_path("resolution/search"), params=params, target=ResolutionListResult
        )

    def create(self, resolution: ResolutionCreateRequest):
        return self._call(
            "POST", api_path("resolution"), body=resolution, target=ResolutionCreateResponse
        )

    def update(self, resolution_id: str, resolution: ResolutionUpdateRequest):
        return self._send("PUT", api_path("resolution/{}", resolution_id), body=resolution)

    def delete(self, resolution_id: str, replace_with: Optional[str] = None):
        params = {"replaceWith": replace_with}
        return self._send("DELETE", api_path("resolution/{}", resolution_id), params=params)

    def set_default(self, resolution_id: str):
        return self._send("PUT", api_path("resolution/default"), body={"id": resolution_id})

    def move(self, ids: List[str], *, position: Optional[str] = None, after: Optional[str] = None):
        return self._send("PUT", api_path("resolution/move"), body=move_body(ids, position, after))
