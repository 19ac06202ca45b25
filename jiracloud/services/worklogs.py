"""
Worklogs - Time logged against issues
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from jiracloud.models import EntityProperty, PropertyKeys, Visibility, Worklog
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel, Time, json_field


@dataclass
class WorklogListResult(JiraModel):
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    worklogs: Optional[List[Worklog]] = None


@dataclass
class WorklogCreateRequest(JiraModel):
    """
    Time logged on an issue

    ``time_spent`` uses Jira duration syntax ("3h 20m"); ``time_spent_seconds``
    is the alternative. ``comment`` is plain text or an ADF document.
    """

    comment: Any = None
    started: Optional[Time] = None
    time_spent: Optional[str] = None
    time_spent_seconds: Optional[int] = None
    visibility: Optional[Visibility] = None
    properties: Optional[List[EntityProperty]] = None


WorklogUpdateRequest = WorklogCreateRequest


@dataclass
class WorklogID(JiraModel):
    worklog_id: Optional[int] = None
    updated_time: Optional[int] = None


@dataclass
class WorklogIDsResult(JiraModel):
    """Worklog IDs changed since a UNIX timestamp in milliseconds, one page at a time"""

    values: Optional[List[WorklogID]] = None
    since: Optional[int] = None
    until: Optional[int] = None
    self_url: Optional[str] = json_field("self")
    next_page: Optional[str] = None
    last_page: Optional[bool] = None


class WorklogsService(Service):
    """Worklog endpoints (/rest/api/3/issue/{key}/worklog, /rest/api/3/worklog)"""

    def list_issue_worklogs(
        self,
        issue_id_or_key: str,
        *,
        start_at: int = 0,
        max_results: int = 0,
        started_after: int = 0,
        started_before: int = 0,
        expand: Optional[List[str]] = None,
    ):
        """
        One page of an issue's worklogs

        Args:
            started_after: UNIX timestamp in milliseconds
            started_before: UNIX timestamp in milliseconds
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "startedAfter": started_after,
            "startedBefore": started_before,
            "expand": comma_list(expand),
        }
        return self._call(
            "GET",
            api_path("issue/{}/worklog", issue_id_or_key),
            params=params,
            target=WorklogListResult,
        )

    def get(self, issue_id_or_key: str, worklog_id: str, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("issue/{}/worklog/{}", issue_id_or_key, worklog_id),
            params={"expand": comma_list(expand)},
            target=Worklog,
        )

    def add(
        self,
        issue_id_or_key: str,
        worklog: WorklogCreateRequest,
        *,
        notify_users: bool = True,
        adjust_estimate: Optional[str] = None,
        new_estimate: Optional[str] = None,
        reduce_by: Optional[str] = None,
        override_editable_flag: bool = False,
        expand: Optional[List[str]] = None,
    ):
        """
        Log work on an issue

        Args:
            adjust_estimate: "new", "leave", "manual" or "auto"
            new_estimate: Remaining estimate when adjust_estimate is "new"
            reduce_by: Amount to cut when adjust_estimate is "manual"
        """
        params = {
            "notifyUsers": None if notify_users else "false",
            "adjustEstimate": adjust_estimate,
            "newEstimate": new_estimate,
            "reduceBy": reduce_by,
            "overrideEditableFlag": override_editable_flag,
            "expand": comma_list(expand),
        }
        return self._call(
            "POST",
            api_path("issue/{}/worklog", issue_id_or_key),
            params=params,
            body=worklog,
            target=Worklog,
        )

    def update(
        self,
        issue_id_or_key: str,
        worklog_id: str,
        worklog: WorklogUpdateRequest,
        *,
        notify_users: bool = True,
        adjust_estimate: Optional[str] = None,
        new_estimate: Optional[str] = None,
        override_editable_flag: bool = False,
        expand: Optional[List[str]] = None,
    ):
        params = {
            "notifyUsers": None if notify_users else "false",
            "adjustEstimate": adjust_estimate,
            "newEstimate": new_estimate,
            "overrideEditableFlag": override_editable_flag,
            "expand": comma_list(expand),
        }
        return self._call(
            "PUT",
            api_path("issue/{}/worklog/{}", issue_id_or_key, worklog_id),
            params=params,
            body=worklog,
            target=Worklog,
        )

    def delete(
        self,
        issue_id_or_key: str,
        worklog_id: str,
        *,
        notify_users: bool = True,
        adjust_estimate: Optional[str] = None,
        new_estimate: Optional[str] = None,
        increase_by: Optional[str] = None,
        override_editable_flag: bool = False,
    ):
        params = {
            "notifyUsers": None if notify_users else "false",
            "adjustEstimate": adjust_estimate,
            "newEstimate": new_estimate,
            "increaseBy": increase_by,
            "overrideEditableFlag": override_editable_flag,
        }
        return self._send(
            "DELETE", api_path("issue/{}/worklog/{}", issue_id_or_key, worklog_id), params=params
        )

    def list_updated(self, since: int = 0, expand: Optional[List[str]] = None):
        params = {"since": since, "expand": comma_list(expand)}
        return self._call("GET", api_path("worklog/updated"), params=params, target=WorklogIDsResult)

    def list_deleted(self, since: int = 0):
        return self._call(
            "GET", api_path("worklog/deleted"), params={"since": since}, target=WorklogIDsResult
        )

    def get_by_ids(self, ids: List[int], expand: Optional[List[str]] = None):
        return self._call(
            "POST",
            api_path("worklog/list"),
            params={"expand": comma_list(expand)},
            body={"ids": ids},
            target=List[Worklog],
        )

    def get_property_keys(self, issue_id_or_key: str, worklog_id: str):
        """Returns ([str], Response)"""
        result, response = self._call(
            "GET",
            api_path("issue/{}/worklog/{}/properties", issue_id_or_key, worklog_id),
            target=PropertyKeys,
        )
        return result.names(), response

    def get_property(self, issue_id_or_key: str, worklog_id: str, property_key: str):
        return self._call(
            "GET",
            api_path("issue/{}/worklog/{}/properties/{}", issue_id_or_key, worklog_id, property_key),
            target=EntityProperty,
        )

    def set_property(self, issue_id_or_key: str, worklog_id: str, property_key: str, value: Any):
        return self._send(
            "PUT",
            api_path("issue/{}/worklog/{}/properties/{}", issue_id_or_key, worklog_id, property_key),
            body=value,
        )

    def delete_property(self, issue_id_or_key: str, worklog_id: str, property_key: str):
        return self._send(
            "DELETE",
            api_path("issue/{}/worklog/{}/properties/{}", issue_id_or_key, worklog_id, property_key),
        )
