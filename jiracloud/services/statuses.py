"""
Statuses - Workflow statuses and status categories
"""

from dataclasses import dataclass, field
from typing import List, Optional

from jiracloud.models import PageBean, Status, StatusCategory
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel


@dataclass
class StatusListResult(PageBean):
    values: Optional[List[Status]] = None


@dataclass
class StatusCreateInput(JiraModel):
    """``status_category`` is one of TODO, IN_PROGRESS or DONE"""

    name: Optional[str] = None
    description: Optional[str] = None
    status_category: Optional[str] = None


@dataclass
class StatusScopeProject(JiraModel):
    id: Optional[str] = None


@dataclass
class StatusScope(JiraModel):
    """PROJECT scope needs the project; GLOBAL does not"""

    type: Optional[str] = None
    project: Optional[StatusScopeProject] = None


@dataclass
class StatusCreateRequest(JiraModel):
    statuses: List[StatusCreateInput] = field(default_factory=list)
    scope: Optional[StatusScope] = None


@dataclass
class StatusUpdateInput(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status_category: Optional[str] = None


@dataclass
class StatusUpdateRequest(JiraModel):
    statuses: List[StatusUpdateInput] = field(default_factory=list)


class StatusesService(Service):
    """Status endpoints (/rest/api/3/status, /rest/api/3/statuses, /rest/api/3/statuscategory)"""

    def list(self):
        return self._call("GET", api_path("status"), target=List[Status])

    def get(self, status_id_or_name: str):
        return self._call("GET", api_path("status/{}", status_id_or_name), target=Status)

    def search(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        expand: Optional[str] = None,
        project_id: Optional[str] = None,
        search_string: Optional[str] = None,
        status_category: Optional[str] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "expand": expand,
            "projectId": project_id,
            "searchString": search_string,
            "statusCategory": status_category,
        }
        return self._call("GET", api_path("statuses/search"), params=params, target=StatusListResult)

    def bulk_get(self, ids: List[str], expand: Optional[str] = None):
        params = {"id": comma_list(ids), "expand": expand}
        return self._call("GET", api_path("statuses"), params=params, target=List[Status])

    def create(self, request: StatusCreateRequest):
        return self._call("POST", api_path("statuses"), body=request, target=List[Status])

    def update(self, request: StatusUpdateRequest):
        return self._call("PUT", api_path("statuses"), body=request, target=List[Status])

    def delete(self, ids: List[str]):
        return self._send("DELETE", api_path("statuses"), params={"id": comma_list(ids)})

    def list_categories(self):
        return self._call("GET", api_path("statuscategory"), target=List[StatusCategory])

    def get_category(self, category_id_or_key: str):
        return self._call(
            "GET", api_path("statuscategory/{}", category_id_or_key), target=StatusCategory
        )
