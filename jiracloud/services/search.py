"""
Search - JQL search, issue picker and JQL matching
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import Issue
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class SearchResult(JiraModel):
    """
    One page of search results.

    ``/search/jql`` pages with ``next_page_token`` (pass it back as
    ``next_page_token=`` until it is empty); the legacy endpoint uses
    ``start_at``/``total``.
    """

    expand: Optional[str] = None
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    issues: Optional[List[Issue]] = None
    warning_messages: Optional[List[str]] = None
    names: Optional[Dict[str, str]] = None
    schema: Optional[Dict[str, Any]] = None
    next_page_token: Optional[str] = None
    is_last: Optional[bool] = None


@dataclass
class SearchRequest(JiraModel):
    jql: Optional[str] = None
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    fields: Optional[List[str]] = None
    expand: Optional[List[str]] = None
    properties: Optional[List[str]] = None
    fields_by_keys: Optional[bool] = None
    validate_query: Optional[str] = None
    next_page_token: Optional[str] = None


@dataclass
class PickerIssue(JiraModel):
    key: Optional[str] = None
    key_html: Optional[str] = None
    img: Optional[str] = None
    summary: Optional[str] = None
    summary_text: Optional[str] = None


@dataclass
class PickerSection(JiraModel):
    label: Optional[str] = None
    sub: Optional[str] = None
    id: Optional[str] = None
    msg: Optional[str] = None
    issues: Optional[List[PickerIssue]] = None


@dataclass
class PickerSuggestions(JiraModel):
    sections: Optional[List[PickerSection]] = None


@dataclass
class MatchRequest(JiraModel):
    issue_ids: Optional[List[int]] = None
    jqls: Optional[List[str]] = None


@dataclass
class MatchEntry(JiraModel):
    matched_issues: Optional[List[int]] = None
    errors: Optional[List[str]] = None


@dataclass
class MatchResult(JiraModel):
    matches: Optional[List[MatchEntry]] = None


class SearchService(Service):
    """Issue search endpoints"""

    def do(
        self,
        jql: str,
        *,
        fields: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
        properties: Optional[List[str]] = None,
        fields_by_keys: bool = False,
        max_results: int = 0,
        next_page_token: Optional[str] = None,
        start_at: int = 0,
        validate_query: Optional[str] = None,
    ):
        """
        Search for issues with JQL (GET /search/jql)

        Args:
            jql: e.g. 'project = PROJ AND status = "In Progress"'
            fields: Fields to return for each issue
            expand: Extra information to include per issue
            max_results: Page size
            next_page_token: Token from the previous page

        Returns:
            (SearchResult, Response)
        """
        params = {
            "jql": jql,
            "maxResults": max_results,
            "nextPageToken": next_page_token,
            "startAt": start_at,
            "fields": fields,
            "expand": expand,
            "properties": properties,
            "validateQuery": validate_query,
            "fieldsByKeys": fields_by_keys,
        }
        return self._call("GET", api_path("search/jql"), params=params, target=SearchResult)

    def do_post(self, search_request: SearchRequest):
        """Same as do() with the query in the body, for JQL too long for a URL"""
        return self._call("POST", api_path("search/jql"), body=search_request, target=SearchResult)

    def legacy(
        self,
        jql: str,
        *,
        fields: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
        max_results: int = 0,
        start_at: int = 0,
    ):
        """Search through the older /search endpoint, paged by start_at"""
        params = {
            "jql": jql,
            "maxResults": max_results,
            "startAt": start_at,
            "fields": fields,
            "expand": expand,
        }
        return self._call("GET", api_path("search"), params=params, target=SearchResult)

    def picker(
        self,
        query: Optional[str] = None,
        *,
        current_jql: Optional[str] = None,
        current_issue_key: Optional[str] = None,
        current_project_id: Optional[str] = None,
        show_sub_tasks: bool = False,
        show_sub_task_parent: bool = False,
    ):
        """Issue suggestions for a picker, matching ``query`` against key and summary"""
        params = {
            "query": query,
            "currentJQL": current_jql,
            "currentIssueKey": current_issue_key,
            "currentProjectId": current_project_id,
            "showSubTasks": show_sub_tasks,
            "showSubTaskParent": show_sub_task_parent,
        }
        return self._call("GET", api_path("issue/picker"), params=params, target=PickerSuggestions)

    def match(self, match_request: MatchRequest):
        """Check which of the given issues match each JQL query"""
        return self._call("POST", api_path("jql/match"), body=match_request, target=MatchResult)
