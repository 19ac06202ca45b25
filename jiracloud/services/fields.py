"""
Fields - System and custom fields, custom field contexts and options
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from jiracloud.models import Field, PageBean
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel


@dataclass
class FieldCreateRequest(JiraModel):
    """
    A new custom field

    ``type`` is the field type key, e.g.
    "com.atlassian.jira.plugin.system.customfieldtypes:textfield"
    """

    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    searcher_key: Optional[str] = None


@dataclass
class FieldUpdateRequest(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    searcher_key: Optional[str] = None


@dataclass
class FieldListResult(PageBean):
    values: Optional[List[Field]] = None


@dataclass
class FieldContext(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    is_global_context: Optional[bool] = None
    is_any_issue_type: Optional[bool] = None


@dataclass
class ContextListResult(PageBean):
    values: Optional[List[FieldContext]] = None


@dataclass
class ContextCreateRequest(JiraModel):
    """No project IDs makes the context global; no issue type IDs covers every type"""

    name: Optional[str] = None
    description: Optional[str] = None
    project_ids: Optional[List[str]] = None
    issue_type_ids: Optional[List[str]] = None


@dataclass
class FieldOption(JiraModel):
    id: Optional[str] = None
    value: Optional[str] = None
    disabled: Optional[bool] = None


@dataclass
class OptionsListResult(PageBean):
    values: Optional[List[FieldOption]] = None


@dataclass
class FieldOptionInput(JiraModel):
    """``option_id`` identifies the option on updates"""

    value: Optional[str] = None
    disabled: Optional[bool] = None
    option_id: Optional[str] = None


@dataclass
class OptionCreateRequest(JiraModel):
    options: List[FieldOptionInput] = field(default_factory=list)


class FieldsService(Service):
    """Field endpoints (/rest/api/3/field)"""

    def list(self):
        return self._call("GET", api_path("field"), target=List[Field])

    def create(self, field: FieldCreateRequest):
        return self._call("POST", api_path("field"), body=field, target=Field)

    def update(self, field_id: str, field: FieldUpdateRequest):
        return self._send("PUT", api_path("field/{}", field_id), body=field)

    def delete(self, field_id: str):
        return self._send("DELETE", api_path("field/{}", field_id))

    def search(
        self,
        *,
        start_at: int = 0,
        max_results: int = 0,
        type: Optional[List[str]] = None,
        ids: Optional[List[str]] = None,
        query: Optional[str] = None,
        order_by: Optional[str] = None,
        expand: Optional[List[str]] = None,
    ):
        """
        One page of fields

        Args:
            type: "custom" and/or "system"
            order_by: e.g. "name", "-lastUsed"
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "type": type,
            "id": ids,
            "query": query,
            "orderBy": order_by,
            "expand": comma_list(expand),
        }
        return self._call("GET", api_path("field/search"), params=params, target=FieldListResult)

    def trash(self, field_id: str):
        return self._send("POST", api_path("field/{}/trash", field_id))

    def restore(self, field_id: str):
        return self._send("POST", api_path("field/{}/restore", field_id))

    def list_contexts(
        self,
        field_id: str,
        *,
        start_at: int = 0,
        max_results: int = 0,
        is_any_issue_type: bool = False,
        is_global_context: bool = False,
        context_ids: Optional[List[int]] = None,
    ):
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "isAnyIssueType": is_any_issue_type,
            "isGlobalContext": is_global_context,
            "contextId": context_ids,
        }
        return self._call(
            "GET", api_path("field/{}/context", field_id), params=params, target=ContextListResult
        )

    def create_context(self, field_id: str, context: ContextCreateRequest):
        return self._call("POST", api_path("field/{}/context", field_id), body=context, target=FieldContext)

    def update_context(
        self,
        field_id: str,
        context_id: int,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ):
        body: Dict[str, str] = {}
        if name:
            body["name"] = name
        if description:
            body["description"] = description
        return self._send("PUT", api_path("field/{}/context/{}", field_id, context_id), body=body)

    def delete_context(self, field_id: str, context_id: int):
        return self._send("DELETE", api_path("field/{}/context/{}", field_id, context_id))

    def list_context_options(
        self,
        field_id: str,
        context_id: int,
        *,
        start_at: int = 0,
        max_results: int = 0,
        option_ids: Optional[List[int]] = None,
    ):
        params = {"startAt": start_at, "maxResults": max_results, "optionId": option_ids}
        return self._call(
            "GET",
            api_path("field/{}/context/{}/option", field_id, context_id),
            params=params,
            target=OptionsListResult,
        )

    def create_context_options(self, field_id: str, context_id: int, options: List[FieldOptionInput]):
        return self._call(
            "POST",
            api_path("field/{}/context/{}/option", field_id, context_id),
            body=OptionCreateRequest(options=options),
            target=OptionsListResult,
        )

    def update_context_options(self, field_id: str, context_id: int, options: List[FieldOptionInput]):
        return self._call(
            "PUT",
            api_path("field/{}/context/{}/option", field_id, context_id),
            body=OptionCreateRequest(options=options),
            target=OptionsListResult,
        )

    def delete_context_option(self, field_id: str, context_id: int, option_id: int):
        return self._send(
            "DELETE", api_path("field/{}/context/{}/option/{}", field_id, context_id, option_id)
        )
