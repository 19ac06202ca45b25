"""
Issues - Create, read, update, transition and archive issues
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import (
    Changelog,
    EditMeta,
    EntityProperty,
    ErrorCollection,
    FieldMeta,
    Group,
    Issue,
    Transition,
    User,
)
from jiracloud.services.base import Service, api_path, comma_list, optional_bool
from jiracloud.types import JiraModel, json_field


@dataclass
class TransitionInput(JiraModel):
    id: Optional[str] = None
    looped: Optional[bool] = None


@dataclass
class HistoryMetadataParticipant(JiraModel):
    id: Optional[str] = None
    display_name: Optional[str] = None
    display_name_key: Optional[str] = None
    type: Optional[str] = None
    avatar_url: Optional[str] = None
    url: Optional[str] = None


@dataclass
class HistoryMetadata(JiraModel):
    """Extra information recorded in the issue history for a change"""

    type: Optional[str] = None
    description: Optional[str] = None
    description_key: Optional[str] = None
    activity_description: Optional[str] = None
    activity_description_key: Optional[str] = None
    email_description: Optional[str] = None
    email_description_key: Optional[str] = None
    actor: Optional[HistoryMetadataParticipant] = None
    generator: Optional[HistoryMetadataParticipant] = None
    cause: Optional[HistoryMetadataParticipant] = None
    extra_data: Optional[Dict[str, str]] = None


@dataclass
class IssueCreateRequest(JiraModel):
    """
    Body for creating (or, as IssueUpdateRequest, editing) an issue.

    ``fields`` sets values outright, e.g.
    ``{"project": {"key": "PROJ"}, "summary": "...", "issuetype": {"name": "Task"}}``;
    ``update`` holds operations such as ``{"labels": [{"add": "x"}]}``.
    """

    fields: Optional[Dict[str, Any]] = None
    update: Optional[Dict[str, Any]] = None
    transition: Optional[TransitionInput] = None
    history_metadata: Optional[HistoryMetadata] = None
    properties: Optional[List[EntityProperty]] = None


IssueUpdateRequest = IssueCreateRequest


@dataclass
class IssueTransitionRequest(JiraModel):
    transition: Optional[TransitionInput] = None
    fields: Optional[Dict[str, Any]] = None
    update: Optional[Dict[str, Any]] = None
    history_metadata: Optional[HistoryMetadata] = None
    properties: Optional[List[EntityProperty]] = None


@dataclass
class TransitionResult(JiraModel):
    status: Optional[int] = None
    error_collection: Optional[ErrorCollection] = None


@dataclass
class IssueCreateResponse(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    transition: Optional[TransitionResult] = None


@dataclass
class BulkOperationError(JiraModel):
    status: Optional[int] = None
    element_errors: Optional[ErrorCollection] = None
    failed_element_number: Optional[int] = None


@dataclass
class IssuesBulkResponse(JiraModel):
    issues: Optional[List[IssueCreateResponse]] = None
    errors: Optional[List[BulkOperationError]] = None


@dataclass
class RestrictedPermission(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None


@dataclass
class NotificationRecipients(JiraModel):
    reporter: Optional[bool] = None
    assignee: Optional[bool] = None
    watchers: Optional[bool] = None
    voters: Optional[bool] = None
    users: Optional[List[User]] = None
    groups: Optional[List[Group]] = None


@dataclass
class NotificationRestrict(JiraModel):
    groups: Optional[List[Group]] = None
    permissions: Optional[List[RestrictedPermission]] = None


@dataclass
class Notification(JiraModel):
    subject: Optional[str] = None
    text_body: Optional[str] = None
    html_body: Optional[str] = None
    to: Optional[NotificationRecipients] = None
    restrict: Optional[NotificationRestrict] = None


@dataclass
class CreateMetaIssueType(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    name: Optional[str] = None
    subtask: Optional[bool] = None
    avatar_id: Optional[int] = None
    fields: Optional[Dict[str, FieldMeta]] = None


@dataclass
class CreateMetaProject(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    avatar_urls: Optional[Dict[str, str]] = None
    issue_types: Optional[List[CreateMetaIssueType]] = json_field("issuetypes")


@dataclass
class CreateMeta(JiraModel):
    expand: Optional[str] = None
    projects: Optional[List[CreateMetaProject]] = None


@dataclass
class _TransitionsResult(JiraModel):
    transitions: Optional[List[Transition]] = None


class IssuesService(Service):
    """Issue endpoints (/rest/api/3/issue)"""

    def get(
        self,
        issue_id_or_key: str,
        *,
        fields: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
        properties: Optional[List[str]] = None,
        fields_by_keys: bool = False,
        update_history: bool = False,
    ):
        """
        Get a single issue

        Args:
            issue_id_or_key: e.g. "PROJ-123" or "10001"
            fields: Fields to return, e.g. ["summary", "status"] or ["*all"]
            expand: e.g. ["changelog", "renderedFields"]
            properties: Issue properties to return
            fields_by_keys: Treat ``fields`` as field keys instead of IDs
            update_history: Add the issue to the user's recently viewed list

        Returns:
            (Issue, Response)
        """
        params = {
            "fields": comma_list(fields),
            "expand": comma_list(expand),
            "properties": comma_list(properties),
            "fieldsByKeys": fields_by_keys,
            "updateHistory": update_history,
        }
        return self._call("GET", api_path("issue/{}", issue_id_or_key), params=params, target=Issue)

    def create(self, issue: IssueCreateRequest):
        return self._call("POST", api_path("issue"), body=issue, target=IssueCreateResponse)

    def create_bulk(self, issues: List[IssueCreateRequest]):
        """Create up to 50 issues in one call; failures are listed in the result's ``errors``"""
        return self._call(
            "POST", api_path("issue/bulk"), body={"issueUpdates": issues}, target=IssuesBulkResponse
        )

    def update(
        self,
        issue_id_or_key: str,
        issue: IssueUpdateRequest,
        *,
        notify_users: Optional[bool] = None,
        override_screen_security: bool = False,
        override_editable_flag: bool = False,
        return_issue: bool = False,
        expand: Optional[List[str]] = None,
    ):
        """
        Edit an issue

        ``notify_users`` left at None lets Jira apply its default (notify);
        False explicitly suppresses the notification email.
        """
        params = {
            "notifyUsers": optional_bool(notify_users),
            "overrideScreenSecurity": override_screen_security,
            "overrideEditableFlag": override_editable_flag,
            "returnIssue": return_issue,
            "expand": comma_list(expand),
        }
        return self._send("PUT", api_path("issue/{}", issue_id_or_key), params=params, body=issue)

    def delete(self, issue_id_or_key: str, delete_subtasks: bool = False):
        params = {"deleteSubtasks": delete_subtasks}
        return self._send("DELETE", api_path("issue/{}", issue_id_or_key), params=params)

    def assign(self, issue_id_or_key: str, account_id: Optional[str] = None):
        """Assign an issue; an empty account ID unassigns it"""
        body = {"accountId": account_id} if account_id else {}
        return self._send("PUT", api_path("issue/{}/assignee", issue_id_or_key), body=body)

    def get_transitions(
        self,
        issue_id_or_key: str,
        *,
        transition_id: Optional[str] = None,
        skip_remote_only_condition: bool = False,
        include_unavailable_transitions: bool = False,
        sort_by_ops_bar_and_status: bool = False,
        expand: Optional[List[str]] = None,
    ):
        """Returns ([Transition], Response)"""
        params = {
            "transitionId": transition_id,
            "skipRemoteOnlyCondition": skip_remote_only_condition,
            "includeUnavailableTransitions": include_unavailable_transitions,
            "sortByOpsBarAndStatus": sort_by_ops_bar_and_status,
            "expand": comma_list(expand),
        }
        result, response = self._call(
            "GET",
            api_path("issue/{}/transitions", issue_id_or_key),
            params=params,
            target=_TransitionsResult,
        )
        return result.transitions or [], response

    def do_transition(self, issue_id_or_key: str, transition: IssueTransitionRequest):
        return self._send("POST", api_path("issue/{}/transitions", issue_id_or_key), body=transition)

    def get_changelog(self, issue_id_or_key: str, start_at: int = 0, max_results: int = 0):
        params = {"startAt": start_at, "maxResults": max_results}
        return self._call(
            "GET", api_path("issue/{}/changelog", issue_id_or_key), params=params, target=Changelog
        )

    def notify(self, issue_id_or_key: str, notification: Notification):
        """Queue an email notification about an issue"""
        return self._send("POST", api_path("issue/{}/notify", issue_id_or_key), body=notification)

    def get_edit_meta(
        self,
        issue_id_or_key: str,
        *,
        override_screen_security: bool = False,
        override_editable_flag: bool = False,
    ):
        params = {
            "overrideScreenSecurity": override_screen_security,
            "overrideEditableFlag": override_editable_flag,
        }
        return self._call(
            "GET", api_path("issue/{}/editmeta", issue_id_or_key), params=params, target=EditMeta
        )

    def get_create_meta(
        self,
        *,
        project_ids: Optional[List[str]] = None,
        project_keys: Optional[List[str]] = None,
        issue_type_ids: Optional[List[str]] = None,
        issue_type_names: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
    ):
        params = {
            "projectIds": comma_list(project_ids),
            "projectKeys": comma_list(project_keys),
            "issuetypeIds": comma_list(issue_type_ids),
            "issuetypeNames": comma_list(issue_type_names),
            "expand": comma_list(expand),
        }
        return self._call("GET", api_path("issue/createmeta"), params=params, target=CreateMeta)

    def archive(self, issue_ids_or_keys: List[str]):
        return self._send("PUT", api_path("issue/archive"), body={"issueIdsOrKeys": issue_ids_or_keys})

    def unarchive(self, issue_ids_or_keys: List[str]):
        return self._send("PUT", api_path("issue/unarchive"), body={"issueIdsOrKeys": issue_ids_or_keys})
