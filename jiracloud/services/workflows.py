"""
Workflows - Workflows, transition properties and transition rules
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from jiracloud.models import PageBean, Scope
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel, json_field


@dataclass
class TransitionScreen(JiraModel):
    id: Optional[str] = None


@dataclass
class WorkflowRule(JiraModel):
    """A condition, validator or post function with its configuration"""

    type: Optional[str] = None
    configuration: Optional[Dict[str, str]] = None


WorkflowCondition = WorkflowRule
WorkflowValidator = WorkflowRule
WorkflowFunction = WorkflowRule


@dataclass
class ConditionGroup(JiraModel):
    """Conditions joined by ``operation`` ("ALL" or "ANY"), nesting further groups"""

    operation: Optional[str] = None
    conditions: Optional[List[WorkflowCondition]] = None
    groups: Optional[List["ConditionGroup"]] = json_field("conditionGroups")


@dataclass
class TransitionRules(JiraModel):
    conditions: Optional[List[WorkflowCondition]] = None
    validators: Optional[List[WorkflowValidator]] = None
    post_functions: Optional[List[WorkflowFunction]] = None
    condition_groups: Optional[List[ConditionGroup]] = None


@dataclass
class WorkflowTransition(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    from_: Optional[List[str]] = None
    to: Optional[str] = None
    type: Optional[str] = None
    screen: Optional[TransitionScreen] = None
    rules: Optional[TransitionRules] = None
    properties: Optional[Dict[str, str]] = None


@dataclass
class WorkflowStatus(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    properties: Optional[Dict[str, str]] = None


@dataclass
class Workflow(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_default: Optional[bool] = None
    scope: Optional[Scope] = None
    transitions: Optional[List[WorkflowTransition]] = None
    statuses: Optional[List[WorkflowStatus]] = None


@dataclass
class WorkflowListResult(PageBean):
    values: Optional[List[Workflow]] = None


@dataclass
class WorkflowTransitionCreate(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    from_: Optional[List[str]] = None
    to: Optional[str] = None
    type: Optional[str] = None
    properties: Optional[Dict[str, str]] = None


@dataclass
class WorkflowStatusCreate(JiraModel):
    id: Optional[str] = None
    properties: Optional[Dict[str, str]] = None


@dataclass
class WorkflowCreateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    transitions: Optional[List[WorkflowTransitionCreate]] = None
    statuses: Optional[List[WorkflowStatusCreate]] = None


@dataclass
class TransitionRule(JiraModel):
    id: Optional[str] = None
    type: Optional[str] = None
    configuration: Optional[Dict[str, str]] = None


@dataclass
class TransitionRulesResult(JiraModel):
    workflow_id: Optional[str] = None
    rules: Optional[List[TransitionRule]] = None


class WorkflowsService(Service):
    """Workflow endpoints (/rest/api/3/workflow)"""

    def list(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        workflow_names: Optional[List[str]] = None,
        expand: Optional[str] = None,
        query_string: Optional[str] = None,
        order_by: Optional[str] = None,
        is_active: bool = False,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "workflowName": workflow_names,
            "expand": expand,
            "queryString": query_string,
            "orderBy": order_by,
            "isActive": is_active,
        }
        return self._call("GET", api_path("workflow/search"), params=params, target=WorkflowListResult)

    def get(self, workflow_id: str, expand: Optional[str] = None):
        return self._call(
            "GET", api_path("workflow/{}", workflow_id), params={"expand": expand}, target=Workflow
        )

    def create(self, workflow: WorkflowCreateRequest):
        return self._call("POST", api_path("workflow"), body=workflow, target=Workflow)

    def delete(self, workflow_id: str):
        """Delete an inactive workflow"""
        return self._send("DELETE", api_path("workflow/{}", workflow_id))

    def get_transition_properties(
        self,
        transition_id: int,
        workflow_name: str,
        *,
        include_reserved_keys: bool = False,
        key: Optional[str] = None,
        workflow_mode: Optional[str] = None,
    ):
        """
        Properties of a workflow transition

        Args:
            workflow_mode: "live" or "draft"

        Returns:
            ({key: value}, Response)
        """
        params = {
            "workflowName": workflow_name,
            "includeReservedKeys": include_reserved_keys,
            "key": key,
            "workflowMode": workflow_mode,
        }
        return self._call(
            "GET",
            api_path("workflow/transitions/{}/properties", transition_id),
            params=params,
            target=Dict[str, str],
        )

    def set_transition_property(
        self,
        transition_id: int,
        key: str,
        workflow_name: str,
        value: str,
        workflow_mode: Optional[str] = None,
    ):
        params = {"key": key, "workflowName": workflow_name, "workflowMode": workflow_mode}
        return self._send(
            "PUT",
            api_path("workflow/transitions/{}/properties", transition_id),
            params=params,
            body={"value": value},
        )

    def delete_transition_property(
        self,
        transition_id: int,
        key: str,
        workflow_name: str,
        workflow_mode: Optional[str] = None,
    ):
        params = {"key": key, "workflowName": workflow_name, "workflowMode": workflow_mode}
        return self._send(
            "DELETE", api_path("workflow/transitions/{}/properties", transition_id), params=params
        )

    def get_transition_rule_configurations(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        types: Optional[List[str]] = None,
        keys: Optional[List[str]] = None,
        workflow_names: Optional[List[str]] = None,
        with_tags: Optional[List[str]] = None,
        draft: bool = False,
        expand: Optional[List[str]] = None,
    ):
        """
        Configurations of the Connect/Forge rules on workflow transitions

        Args:
            types: Any of "postfunction", "condition", "validator"
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "types": types,
            "keys": keys,
            "workflowNames": workflow_names,
            "withTags": with_tags,
            "draft": draft,
            "expand": comma_list(expand),
        }
        return self._call(
            "GET", api_path("workflow/rule/config"), params=params, target=List[TransitionRulesResult]
        )
