"""
Issue Link Types - Kinds of issue links ("blocks", "relates to", ...)
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import IssueLinkType
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class IssueLinkTypesResult(JiraModel):
    issue_link_types: Optional[List[IssueLinkType]] = None


@dataclass
class IssueLinkTypeCreateRequest(JiraModel):
    name: Optional[str] = None
    inward: Optional[str] = None
    outward: Optional[str] = None


IssueLinkTypeUpdateRequest = IssueLinkTypeCreateRequest


class IssueLinkTypesService(Service):
    def list(self):
        return self._call("GET", api_path("issueLinkType"), target=IssueLinkTypesResult)

    def get(self, link_type_id: str):
        return self._call("GET", api_path("issueLinkType/{}", link_type_id), target=IssueLinkType)

    def create(self, link_type: IssueLinkTypeCreateRequest):
        return self._call("POST", api_path("issueLinkType"), body=link_type, target=IssueLinkType)

    def update(self, link_type_id: str, link_type: IssueLinkTypeUpdateRequest):
        return self._call(
            "PUT", api_path("issueLinkType/{}", link_type_id), body=link_type, target=IssueLinkType
        )

    def delete(self, link_type_id: str):
        return self._send("DELETE", api_path("issueLinkType/{}", link_type_id))
