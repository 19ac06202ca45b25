"""
Audit Records - The site's audit log
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class AssociatedItem(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_name: Optional[str] = None
    parent_id: Optional[str] = None
    parent_name: Optional[str] = None


@dataclass
class ChangedValue(JiraModel):
    field_name: Optional[str] = None
    changed_from: Optional[str] = None
    changed_to: Optional[str] = None


@dataclass
class AuditRecord(JiraModel):
    id: Optional[int] = None
    summary: Optional[str] = None
    remote_address: Optional[str] = None
    author_key: Optional[str] = None
    author_account_id: Optional[str] = None
    created: Optional[str] = None
    category: Optional[str] = None
    event_source: Optional[str] = None
    description: Optional[str] = None
    object_item: Optional[AssociatedItem] = None
    changed_values: Optional[List[ChangedValue]] = None
    associated_items: Optional[List[AssociatedItem]] = None


@dataclass
class AuditRecordsResult(JiraModel):
    offset: Optional[int] = None
    limit: Optional[int] = None
    total: Optional[int] = None
    records: Optional[List[AuditRecord]] = None


class AuditRecordsService(Service):
    def list(
        self,
        *,
        offset: int = 0,
        limit: int = 0,
        filter: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ):
        """
        Page through audit records

        Args:
            filter: Text matched against summary, category, author and items
            from_date: "yyyy-MM-dd", inclusive
            to_date: "yyyy-MM-dd", inclusive
        """
        params = {
            "offset": offset,
            "limit": limit,
            "filter": filter,
            "from": from_date,
            "to": to_date,
        }
        return self._call("GET", api_path("auditing/record"), params=params, target=AuditRecordsResult)
