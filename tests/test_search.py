"""Tests for the search and JQL services."""

import logging
from urllib.parse import urlsplit

from jiracloud.services.jql import SanitizeJQLInput
from jiracloud.services.search import MatchRequest, SearchRequest


def test_search_jql(client, fake_jira, search_payload):
    fake_jira.respond(200, search_payload)

    result, _ = client.search.do(
        'project = TEST AND summary ~ "A&B"', fields=["summary", "status"], max_results=50
    )

    assert [issue.key for issue in result.issues] == ["TEST-2", "TEST-3"]
    assert result.next_page_token == "page-2"
    assert result.is_last is False
    assert fake_jira.last_path() == "/rest/api/3/search/jql"
    assert fake_jira.last_query() == {
        "jql": ['project = TEST AND summary ~ "A&B"'],
        "maxResults": ["50"],
        "fields": ["summary", "status"],
    }


def test_search_next_page(client, fake_jira):
    fake_jira.respond(200, {"issues": [], "isLast": True})
    result, _ = client.search.do("project = TEST", next_page_token="page-2")
    assert result.issues == []
    assert fake_jira.last_query()["nextPageToken"] == ["page-2"]


def test_search_post_body(client, fake_jira, search_payload):
    fake_jira.respond(200, search_payload)

    client.search.do_post(SearchRequest(jql="project = TEST", max_results=10, fields=["summary"]))

    assert fake_jira.last.method == "POST"
    assert fake_jira.last_json() == {"jql": "project = TEST", "maxResults": 10, "fields": ["summary"]}


def test_legacy_search_pages(client, fake_jira):
    fake_jira.respond(200, {"startAt": 50, "maxResults": 50, "total": 75, "issues": []})

    result, response = client.search.legacy("project = TEST", start_at=50, max_results=50)

    assert result.total == 75
    assert (response.start_at, response.max_results, response.total) == (50, 50, 75)
    assert fake_jira.last_path() == "/rest/api/3/search"


def test_picker(client, fake_jira):
    fake_jira.respond(200, {"sections": [{"label": "History Search", "issues": [{"key": "TEST-1"}]}]})
    suggestions, _ = client.search.picker("login", show_sub_tasks=True)
    assert suggestions.sections[0].issues[0].key == "TEST-1"
    assert fake_jira.last_query() == {"query": ["login"], "showSubTasks": ["true"]}


def test_match(client, fake_jira):
    fake_jira.respond(200, {"matches": [{"matchedIssues": [10001], "errors": []}]})
    result, _ = client.search.match(MatchRequest(issue_ids=[10001, 10002], jqls=["project = TEST"]))
    assert result.matches[0].matched_issues == [10001]
    assert fake_jira.last_json() == {"issueIds": [10001, 10002], "jqls": ["project = TEST"]}


class TestJQL:
    def test_parse(self, client, fake_jira):
        fake_jira.respond(200, {"queries": [{"jql": "a = 1", "structure": {"where": {"field": {"name": "a"}}}}]})

        result, _ = client.jql.parse(["a = 1"], validation="strict")

        assert result.queries[0].structure.where.field.name == "a"
        assert fake_jira.last_query() == {"validation": ["strict"]}
        assert fake_jira.last_json() == {"queries": ["a = 1"]}

    def test_validate_jql_valid(self, client, fake_jira):
        fake_jira.respond(200, {"queries": [{"jql": "project = TEST"}]})
        valid, errors, _ = client.jql.validate_jql("project = TEST")
        assert valid is True
        assert errors == []

    def test_validate_jql_invalid(self, client, fake_jira):
        fake_jira.respond(200, {"queries": [{"jql": "project = ", "errors": ["Expecting a value"]}]})
        valid, errors, _ = client.jql.validate_jql("project = ")
        assert valid is False
        assert errors == ["Expecting a value"]

    def test_validate_jql_logs_rejection(self, client, fake_jira, caplog):
        fake_jira.respond(200, {"queries": [{"jql": "project = ", "errors": ["Expecting a value"]}]})
        with caplog.at_level(logging.DEBUG, logger="jiracloud.services.jql"):
            client.jql.validate_jql("project = ")
        assert "JQL 'project = ' rejected: ['Expecting a value']" in caplog.text

    def test_sanitize(self, client, fake_jira):
        fake_jira.respond(200, {"queries": [{"initialQuery": "a", "sanitizedQuery": "b"}]})
        result, _ = client.jql.sanitize([SanitizeJQLInput(query="a", account_id="acc")])
        assert result.queries[0].sanitized_query == "b"
        assert fake_jira.last_json() == {"queries": [{"query": "a", "accountId": "acc"}]}

    def test_match_always_sends_both_lists(self, client, fake_jira):
        fake_jira.respond(200, {"matches": []})
        client.jql.match([], ["project = TEST"])
        assert fake_jira.last_json() == {"issueIds": [], "jqls": ["project = TEST"]}

    def test_convert_and_migrate_share_endpoint(self, client, fake_jira):
        fake_jira.respond(200, {"queryStrings": [{"jql": "assignee = abc"}]})
        fake_jira.respond(200, {"queryStrings": [{"originalQuery": "a", "migratedQuery": "b"}]})

        converted, _ = client.jql.convert_to_ids(["assignee = bob"])
        migrated, _ = client.jql.migrate(["a"])

        assert converted.query_strings[0].jql == "assignee = abc"
        assert migrated.query_strings[0].migrated_query == "b"
        assert {urlsplit(r.url).path for r in fake_jira.requests} == {"/rest/api/3/jql/pdcleaner"}

    def test_field_suggestions(self, client, fake_jira):
        fake_jira.respond(200, {"results": [{"value": "Jo", "displayName": "<b>Jo</b>"}]})
        result, _ = client.jql.get_field_autocomplete_suggestions("reporter", "Jo")
        assert result.results[0].display_name == "<b>Jo</b>"
        assert fake_jira.last_query() == {"fieldName": ["reporter"], "fieldValue": ["Jo"]}

    def test_visible_fields(self, client, fake_jira):
        fake_jira.respond(200, [{"value": "summary", "operators": ["~"]}])
        fields, _ = client.jql.get_visible_fields(project_key="TEST")
        assert fields[0].operators == ["~"]
        assert fake_jira.last_query() == {"projectKey": ["TEST"]}
