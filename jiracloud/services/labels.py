"""
Labels - Labels in use across the site
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import PageBean
from jiracloud.services.base import Service, api_path


@dataclass
class LabelsListResult(PageBean):
    values: Optional[List[str]] = None


class LabelsService(Service):
    def list(self, *, start_at: int = 0, max_results: int = 0):
        params = {"startAt": start_at, "maxResults": max_results}
        return self._call("GET", api_path("label"), params=params, target=LabelsListResult)
