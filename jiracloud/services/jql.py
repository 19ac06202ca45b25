"""
JQL - Autocomplete data, parsing, sanitizing and migrating JQL queries
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from jiracloud.services.base import Service, api_path
from jiracloud.services.search import MatchResult
from jiracloud.types import JiraModel, json_field

logger = logging.getLogger(__name__)


@dataclass
class FieldReferenceData(JiraModel):
    value: Optional[str] = None
    display_name: Optional[str] = None
    orderable: Optional[str] = None
    searchable: Optional[str] = None
    auto: Optional[str] = None
    cfid: Optional[str] = None
    operators: Optional[List[str]] = None
    types: Optional[List[str]] = None


FieldRef = FieldReferenceData


@dataclass
class FunctionRef(JiraModel):
    value: Optional[str] = None
    display_name: Optional[str] = None
    is_list: Optional[str] = None
    types: Optional[List[str]] = None


@dataclass
class AutocompleteData(JiraModel):
    visible_field_names: Optional[List[FieldRef]] = None
    visible_function_names: Optional[List[FunctionRef]] = None
    jql_reserved_words: Optional[List[str]] = None


@dataclass
class AutocompleteSuggestion(JiraModel):
    value: Optional[str] = None
    display_name: Optional[str] = None


@dataclass
class AutocompleteSuggestionsResult(JiraModel):
    results: Optional[List[AutocompleteSuggestion]] = None


@dataclass
class JQLField(JiraModel):
    name: Optional[str] = None
    property: Optional[List["JQLField"]] = None


@dataclass
class JQLOperand(JiraModel):
    """``type`` is "value", "list", "function" or "keyword" """

    type: Optional[str] = None
    value: Optional[str] = None
    values: Optional[List["JQLOperand"]] = None
    function: Optional[str] = None
    arguments: Optional[List[str]] = None
    keyword: Optional[str] = None
    encoded_value: Optional[str] = None


@dataclass
class JQLClause(JiraModel):
    """``type`` is "field", "compound" or "not" """

    type: Optional[str] = None
    field: Optional[JQLField] = None
    operator: Optional[str] = None
    operand: Optional[JQLOperand] = None
    clauses: Optional[List["JQLClause"]] = None
    predicate: Optional["JQLClause"] = None


@dataclass
class JQLOrderBy(JiraModel):
    field: Optional[JQLField] = None
    direction: Optional[str] = None


@dataclass
class JQLStructure(JiraModel):
    where: Optional[JQLClause] = None
    order_by: Optional[List[JQLOrderBy]] = None


@dataclass
class ParsedJQL(JiraModel):
    jql: Optional[str] = None
    structure: Optional[JQLStructure] = None
    errors: Optional[List[str]] = None


@dataclass
class ParseJQLResult(JiraModel):
    queries: Optional[List[ParsedJQL]] = None


@dataclass
class ConvertedJQL(JiraModel):
    jql: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ConvertJQLResult(JiraModel):
    query_strings: Optional[List[ConvertedJQL]] = None


@dataclass
class SanitizeJQLInput(JiraModel):
    account_id: Optional[str] = None
    query: Optional[str] = None


@dataclass
class SanitizeErrors(JiraModel):
    error_messages: Optional[List[str]] = None
    errors: Optional[Dict[str, str]] = None


@dataclass
class SanitizedJQL(JiraModel):
    initial_query: Optional[str] = None
    sanitized_query: Optional[str] = None
    errors: Optional[SanitizeErrors] = None
    account_id: Optional[str] = None


@dataclass
class SanitizeJQLResult(JiraModel):
    queries: Optional[List[SanitizedJQL]] = None


@dataclass
class FunctionPrecomputation(JiraModel):
    arguments: Optional[List[str]] = None
    created: Optional[str] = None
    error: Optional[str] = None
    field: Optional[str] = None
    function_key: Optional[str] = None
    function_name: Optional[str] = None
    id: Optional[str] = None
    operator: Optional[str] = None
    updated: Optional[str] = None
    value: Optional[str] = None


@dataclass
class FunctionPrecomputationsResult(JiraModel):
    next_page_token: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    values: Optional[List[FunctionPrecomputation]] = None


@dataclass
class MigratedJQL(JiraModel):
    original_query: Optional[str] = None
    migrated_query: Optional[str] = None


@dataclass
class MigrateJQLResult(JiraModel):
    query_strings: Optional[List[MigratedJQL]] = None


class JQLService(Service):
    """JQL endpoints (/rest/api/3/jql)"""

    def get_autocomplete_data(self):
        return self._call("GET", api_path("jql/autocompletedata"), target=AutocompleteData)

    def get_autocomplete_suggestions(
        self,
        *,
        field_name: Optional[str] = None,
        field_value: Optional[str] = None,
        predicate_name: Optional[str] = None,
        predicate_value: Optional[str] = None,
    ):
        params = {
            "fieldName": field_name,
            "fieldValue": field_value,
            "predicateName": predicate_name,
            "predicateValue": predicate_value,
        }
        return self._call(
            "GET",
            api_path("jql/autocompletedata/suggestions"),
            params=params,
            target=AutocompleteSuggestionsResult,
        )

    def get_field_autocomplete_suggestions(self, field_name: str, field_value: Optional[str] = None):
        """Suggested values for one field, e.g. ("reporter", "Jo")"""
        return self.get_autocomplete_suggestions(field_name=field_name, field_value=field_value)

    def get_field_reference_data(self):
        return self._call("GET", api_path("jql/autocompletedata/fields"), target=List[FieldReferenceData])

    def get_visible_fields(self, project_key: Optional[str] = None, issue_type_id: Optional[str] = None):
        """Field reference data narrowed to a project and issue type"""
        return self._call(
            "GET",
            api_path("jql/autocompletedata/fields"),
            params={"projectKey": project_key, "issueTypeId": issue_type_id},
            target=List[FieldReferenceData],
        )

    def parse(self, queries: List[str], validation: Optional[str] = None):
        """
        Parse queries into their abstract syntax trees

        Args:
            validation: "strict", "warn" or "none"
        """
        return self._call(
            "POST",
            api_path("jql/parse"),
            params={"validation": validation},
            body={"queries": list(queries)},
            target=ParseJQLResult,
        )

    def validate_jql(self, jql: str):
        """
        Strictly parse one query

        Returns:
            (valid, errors, Response)
        """
        result, response = self.parse([jql], "strict")
        if result.queries and result.queries[0].errors:
            logger.debug(f"JQL {jql!r} rejected: {result.queries[0].errors}")
            return False, result.queries[0].errors, response
        return True, [], response

    def convert_to_ids(self, queries: List[str]):
        """Replace user names and keys in queries with account IDs"""
        return self._call(
            "POST",
            api_path("jql/pdcleaner"),
            body={"queryStrings": list(queries)},
            target=ConvertJQLResult,
        )

    def migrate(self, queries: List[str]):
        """Same endpoint as convert_to_ids, decoded as original/migrated pairs"""
        return self._call(
            "POST",
            api_path("jql/pdcleaner"),
            body={"queryStrings": list(queries)},
            target=MigrateJQLResult,
        )

    def sanitize(self, queries: List[SanitizeJQLInput]):
        """Rewrite queries so they reveal nothing the given account cannot see"""
        return self._call(
            "POST", api_path("jql/sanitize"), body={"queries": list(queries)}, target=SanitizeJQLResult
        )

    def get_function_precomputations(
        self,
        *,
        function_keys: Optional[List[str]] = None,
        start_at: int = 0,
        max_results: int = 0,
        order_by: Optional[str] = None,
        filter: Optional[str] = None,
    ):
        params = {
            "functionKey": function_keys,
            "startAt": start_at,
            "maxResults": max_results,
            "orderBy": order_by,
            "filter": filter,
        }
        return self._call(
            "GET",
            api_path("jql/function/computation"),
            params=params,
            target=FunctionPrecomputationsResult,
        )

    def update_function_precomputations(self, values: List[FunctionPrecomputation]):
        return self._send("POST", api_path("jql/function/computation"), body={"values": list(values)})

    def match(self, issue_ids: List[int], jqls: List[str]):
        """Check which of the given issues match each query"""
        return self._call(
            "POST",
            api_path("jql/match"),
            body={"issueIds": list(issue_ids), "jqls": list(jqls)},
            target=MatchResult,
        )
