"""Tests for the issues service."""

import pytest

from jiracloud import APIError
from jiracloud.services.issues import (
    IssueCreateRequest,
    IssueTransitionRequest,
    IssueUpdateRequest,
    Notification,
    NotificationRecipients,
    TransitionInput,
)


def test_get_issue(client, fake_jira, issue_payload):
    fake_jira.respond(200, issue_payload)

    issue, response = client.issues.get("TEST-2", fields=["summary", "status"], expand=["changelog"])

    assert issue.key == "TEST-2"
    assert issue.fields.summary == "Build API"
    assert response.status_code == 200
    assert fake_jira.last.method == "GET"
    assert fake_jira.last_path() == "/rest/api/3/issue/TEST-2"
    assert fake_jira.last_query() == {"fields": ["summary,status"], "expand": ["changelog"]}


def test_get_without_options_sends_no_query(client, fake_jira, issue_payload):
    fake_jira.respond(200, issue_payload)
    client.issues.get("TEST-2")
    assert "?" not in fake_jira.last.url


def test_path_parameters_are_quoted(client, fake_jira):
    fake_jira.respond(200, {})
    client.issues.get("TEST/../1")
    assert fake_jira.last_path() == "/rest/api/3/issue/TEST%2F..%2F1"


def test_get_missing_issue(client, fake_jira):
    fake_jira.respond(404, {"errorMessages": ["Issue does not exist or you do not have permission to see it."]})

    with pytest.raises(APIError) as excinfo:
        client.issues.get("NOPE-1")

    assert excinfo.value.status_code == 404


def test_create_issue(client, fake_jira):
    fake_jira.respond(201, {"id": "10010", "key": "TEST-10"})
    request = IssueCreateRequest(
        fields={"project": {"key": "TEST"}, "summary": "Fix <login> & logout", "issuetype": {"name": "Bug"}}
    )

    created, _ = client.issues.create(request)

    assert created.key == "TEST-10"
    assert fake_jira.last.method == "POST"
    assert fake_jira.last_json() == {
        "fields": {"project": {"key": "TEST"}, "summary": "Fix <login> & logout", "issuetype": {"name": "Bug"}}
    }


def test_create_bulk(client, fake_jira):
    fake_jira.respond(201, {"issues": [{"key": "TEST-11"}], "errors": []})

    result, _ = client.issues.create_bulk([IssueCreateRequest(fields={"summary": "a"})])

    assert result.issues[0].key == "TEST-11"
    assert fake_jira.last_json() == {"issueUpdates": [{"fields": {"summary": "a"}}]}


class TestUpdateNotifyUsers:
    def test_unset_leaves_jira_default(self, client, fake_jira):
        fake_jira.respond(204)
        response = client.issues.update("TEST-1", IssueUpdateRequest(fields={"summary": "x"}))
        assert response.status_code == 204
        assert "notifyUsers" not in fake_jira.last_query()

    def test_explicit_false(self, client, fake_jira):
        fake_jira.respond(204)
        client.issues.update("TEST-1", IssueUpdateRequest(fields={"summary": "x"}), notify_users=False)
        assert fake_jira.last_query()["notifyUsers"] == ["false"]

    def test_explicit_true(self, client, fake_jira):
        fake_jira.respond(204)
        client.issues.update("TEST-1", IssueUpdateRequest(fields={"summary": "x"}), notify_users=True)
        assert fake_jira.last_query()["notifyUsers"] == ["true"]
        assert fake_jira.last.method == "PUT"


def test_delete_with_subtasks(client, fake_jira):
    fake_jira.respond(204)
    client.issues.delete("TEST-1", delete_subtasks=True)
    assert fake_jira.last.method == "DELETE"
    assert fake_jira.last_query() == {"deleteSubtasks": ["true"]}


def test_assign_and_unassign(client, fake_jira):
    client.issues.assign("TEST-1", "abc-123")
    assert fake_jira.last_json() == {"accountId": "abc-123"}
    assert fake_jira.last_path() == "/rest/api/3/issue/TEST-1/assignee"

    client.issues.assign("TEST-1")
    assert fake_jira.last_json() == {}


def test_get_transitions_unwraps_list(client, fake_jira):
    fake_jira.respond(200, {"transitions": [{"id": "21", "name": "In Progress", "to": {"name": "In Progress"}}]})

    transitions, _ = client.issues.get_transitions("TEST-1")

    assert [t.id for t in transitions] == ["21"]


def test_do_transition(client, fake_jira):
    fake_jira.respond(204)
    client.issues.do_transition("TEST-1", IssueTransitionRequest(transition=TransitionInput(id="31")))
    assert fake_jira.last_json() == {"transition": {"id": "31"}}


def test_get_changelog(client, fake_jira):
    fake_jira.respond(
        200,
        {
            "startAt": 0,
            "maxResults": 100,
            "total": 1,
            "histories": [{"id": "1", "items": [{"field": "status", "fromString": "To Do", "toString": "Done"}]}],
        },
    )

    changelog, response = client.issues.get_changelog("TEST-1", max_results=100)

    assert changelog.histories[0].items[0].to_string == "Done"
    assert response.total == 1
    assert fake_jira.last_query() == {"maxResults": ["100"]}


def test_notify(client, fake_jira):
    fake_jira.respond(204)
    notification = Notification(subject="Heads up", to=NotificationRecipients(reporter=True, assignee=True))
    client.issues.notify("TEST-1", notification)
    assert fake_jira.last_json() == {"subject": "Heads up", "to": {"reporter": True, "assignee": True}}


def test_archive(client, fake_jira):
    client.issues.archive(["TEST-1", "TEST-2"])
    assert fake_jira.last.method == "PUT"
    assert fake_jira.last_path() == "/rest/api/3/issue/archive"
    assert fake_jira.last_json() == {"issueIdsOrKeys": ["TEST-1", "TEST-2"]}


def test_get_create_meta(client, fake_jira):
    fake_jira.respond(200, {"projects": [{"key": "TEST", "issuetypes": [{"name": "Bug"}]}]})

    meta, _ = client.issues.get_create_meta(project_keys=["TEST", "OPS"], expand=["projects.issuetypes.fields"])

    assert meta.projects[0].key == "TEST"
    assert fake_jira.last_query() == {"projectKeys": ["TEST,OPS"], "expand": ["projects.issuetypes.fields"]}
