"""
Workflow Schemes - Which workflow each issue type uses, plus scheme drafts
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.models import IssueType, PageBean, User
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel, json_field


@dataclass
class WorkflowScheme(JiraModel):
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    default_workflow: Optional[str] = None
    # Issue type ID to workflow name
    issue_type_mappings: Optional[Dict[str, str]] = None
    original_default_workflow: Optional[str] = None
    original_issue_type_mappings: Optional[Dict[str, str]] = None
    draft: Optional[bool] = None
    last_modified_user: Optional[User] = None
    last_modified: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    update_draft_if_needed: Optional[bool] = None
    issue_types: Optional[Dict[str, IssueType]] = None


@dataclass
class WorkflowSchemeListResult(PageBean):
    values: Optional[List[WorkflowScheme]] = None


@dataclass
class WorkflowSchemeCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    default_workflow: Optional[str] = None
    issue_type_mappings: Optional[Dict[str, str]] = None


@dataclass
class WorkflowSchemeUpdateRequest(JiraModel):
    """With ``update_draft_if_needed``, changes to an active scheme go to its draft"""

    name: Optional[str] = None
    description: Optional[str] = None
    default_workflow: Optional[str] = None
    issue_type_mappings: Optional[Dict[str, str]] = None
    update_draft_if_needed: Optional[bool] = None


@dataclass
class DefaultWorkflow(JiraModel):
    workflow: Optional[str] = None
    update_draft_if_needed: Optional[bool] = None


@dataclass
class IssueTypeWorkflow(JiraModel):
    issue_type: Optional[str] = None
    workflow: Optional[str] = None
    update_draft_if_needed: Optional[bool] = None


class WorkflowSchemesService(Service):
    """Workflow scheme endpoints (/rest/api/3/workflowscheme)"""

    def list(self, *, start_at: int = 0, max_results: int = 0, expand: Optional[str] = None):
        params = {"startAt": start_at, "maxResults": max_results, "expand": expand}
        return self._call("GET", api_path("workflowscheme"), params=params, target=WorkflowSchemeListResult)

    def get(self, scheme_id: int, return_draft_if_exists: bool = False):
        return self._call(
            "GET",
            api_path("workflowscheme/{}", scheme_id),
            params={"returnDraftIfExists": return_draft_if_exists},
            target=WorkflowScheme,
        )

    def create(self, scheme: WorkflowSchemeCreateRequest):
        return self._call("POST", api_path("workflowscheme"), body=scheme, target=WorkflowScheme)

    def update(self, scheme_id: int, scheme: WorkflowSchemeUpdateRequest):
        return self._call("PUT", api_path("workflowscheme/{}", scheme_id), body=scheme, target=WorkflowScheme)

    def delete(self, scheme_id: int):
        return self._send("DELETE", api_path("workflowscheme/{}", scheme_id))

    def get_default(self, scheme_id: int, return_draft_if_exists: bool = False):
        return self._call(
            "GET",
            api_path("workflowscheme/{}/default", scheme_id),
            params={"returnDraftIfExists": return_draft_if_exists},
            target=DefaultWorkflow,
        )

    def set_default(self, scheme_id: int, workflow: str, update_draft_if_needed: bool = False):
        body = DefaultWorkflow(workflow=workflow, update_draft_if_needed=update_draft_if_needed)
        return self._call(
            "PUT", api_path("workflowscheme/{}/default", scheme_id), body=body, target=WorkflowScheme
        )

    def delete_default(self, scheme_id: int, update_draft_if_needed: bool = False):
        """Reset the default workflow to Jira's built-in one"""
        return self._call(
            "DELETE",
            api_path("workflowscheme/{}/default", scheme_id),
            params={"updateDraftIfNeeded": update_draft_if_needed},
            target=WorkflowScheme,
        )

    def get_issue_type_mapping(self, scheme_id: int, issue_type: str, return_draft_if_exists: bool = False):
        return self._call(
            "GET",
            api_path("workflowscheme/{}/issuetype/{}", scheme_id, issue_type),
            params={"returnDraftIfExists": return_draft_if_exists},
            target=IssueTypeWorkflow,
        )

    def set_issue_type_mapping(
        self,
        scheme_id: int,
        issue_type: str,
        workflow: str,
        update_draft_if_needed: bool = False,
    ):
        body = IssueTypeWorkflow(
            issue_type=issue_type, workflow=workflow, update_draft_if_needed=update_draft_if_needed
        )
        return self._call(
            "PUT",
            api_path("workflowscheme/{}/issuetype/{}", scheme_id, issue_type),
            body=body,
            target=WorkflowScheme,
        )

    def delete_issue_type_mapping(self, scheme_id: int, issue_type: str, update_draft_if_needed: bool = False):
        return self._call(
            "DELETE",
            api_path("workflowscheme/{}/issuetype/{}", scheme_id, issue_type),
            params={"updateDraftIfNeeded": update_draft_if_needed},
            target=WorkflowScheme,
        )

    def get_draft(self, scheme_id: int):
        return self._call("GET", api_path("workflowscheme/{}/draft", scheme_id), target=WorkflowScheme)

    def create_draft(self, scheme_id: int):
        """Draft copy of an active scheme"""
        return self._call("POST", api_path("workflowscheme/{}/createdraft", scheme_id), target=WorkflowScheme)

    def update_draft(self, scheme_id: int, scheme: WorkflowSchemeUpdateRequest):
        return self._call(
            "PUT", api_path("workflowscheme/{}/draft", scheme_id), body=scheme, target=WorkflowScheme
        )

    def delete_draft(self, scheme_id: int):
        return self._send("DELETE", api_path("workflowscheme/{}/draft", scheme_id))

    def publish_draft(self, scheme_id: int, status_mappings: Optional[Any] = None):
        """
        Make the draft the active scheme

        Args:
            status_mappings: How issues in statuses missing from the new
                workflows move, as Jira's list of
                {"issueTypeId", "statusId", "newStatusId"} entries
        """
        body: Dict[str, Any] = {}
        if status_mappings is not None:
            body["statusMappings"] = status_mappings
        return self._send("POST", api_path("workflowscheme/{}/draft/publish", scheme_id), body=body)
