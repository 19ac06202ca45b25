"""Tests for the projects, components and versions services."""

from jiracloud.services.components import ComponentCreateRequest
from jiracloud.services.projects import ProjectCreateRequest, ProjectUpdateRequest
from jiracloud.services.versions import VersionCreateRequest


def test_list_projects(client, fake_jira):
    fake_jira.respond(
        200,
        {
            "startAt": 0,
            "maxResults": 2,
            "total": 3,
            "isLast": False,
            "values": [{"id": "10000", "key": "TEST"}, {"id": "10001", "key": "OPS"}],
        },
    )

    page, response = client.projects.list(max_results=2, keys=["TEST", "OPS"], expand=["lead", "description"])

    assert [p.key for p in page.values] == ["TEST", "OPS"]
    assert page.is_last is False
    assert response.total == 3
    assert fake_jira.last_path() == "/rest/api/3/project/search"
    assert fake_jira.last_query() == {
        "maxResults": ["2"],
        "keys": ["TEST", "OPS"],
        "expand": ["lead,description"],
    }


def test_get_project(client, fake_jira):
    fake_jira.respond(200, {"id": "10000", "key": "TEST", "name": "Test Project"})
    project, _ = client.projects.get("TEST")
    assert project.name == "Test Project"
    assert fake_jira.last_path() == "/rest/api/3/project/TEST"


def test_create_project(client, fake_jira):
    fake_jira.respond(201, {"id": 10002, "key": "NEW"})

    created, _ = client.projects.create(
        ProjectCreateRequest(key="NEW", name="New", lead_account_id="abc", project_type_key="software")
    )

    assert created.id == 10002
    assert fake_jira.last_json() == {
        "key": "NEW",
        "name": "New",
        "leadAccountId": "abc",
        "projectTypeKey": "software",
    }


def test_update_project(client, fake_jira):
    fake_jira.respond(200, {"key": "TEST", "name": "Renamed"})
    project, _ = client.projects.update("TEST", ProjectUpdateRequest(name="Renamed"))
    assert project.name == "Renamed"
    assert fake_jira.last.method == "PUT"
    assert fake_jira.last_json() == {"name": "Renamed"}


def test_delete_project_enable_undo(client, fake_jira):
    fake_jira.respond(204)
    client.projects.delete("TEST", enable_undo=True)
    assert fake_jira.last_query() == {"enableUndo": ["true"]}

    client.projects.delete("TEST")
    assert "?" not in fake_jira.last.url


def test_get_statuses(client, fake_jira):
    fake_jira.respond(200, [{"id": "1", "name": "Bug", "statuses": [{"id": "3", "name": "In Progress"}]}])
    issue_types, _ = client.projects.get_statuses("TEST")
    assert issue_types[0].statuses[0].name == "In Progress"


def test_archive_and_restore(client, fake_jira):
    fake_jira.respond(204)
    fake_jira.respond(200, {"key": "TEST", "archived": False})

    client.projects.archive("TEST")
    project, _ = client.projects.restore("TEST")

    assert [r.method for r in fake_jira.requests] == ["POST", "POST"]
    assert fake_jira.requests[0].url.endswith("/rest/api/3/project/TEST/archive")
    assert project.key == "TEST"


def test_component_lifecycle(client, fake_jira):
    fake_jira.respond(201, {"id": "10100", "name": "Backend"})
    fake_jira.respond(204)

    component, _ = client.components.create(ComponentCreateRequest(name="Backend", project="TEST"))
    client.components.delete(component.id, move_issues_to="10101")

    create, delete = fake_jira.requests
    assert create.url.endswith("/rest/api/3/component")
    assert delete.method == "DELETE"
    assert delete.url.endswith("/rest/api/3/component/10100?moveIssuesTo=10101")


def test_version_create_and_counts(client, fake_jira):
    fake_jira.respond(201, {"id": "10200", "name": "1.0", "releaseDate": "2024-03-01"})
    fake_jira.respond(200, {"issuesFixedCount": 4, "issuesAffectedCount": 1})

    request = VersionCreateRequest(name="1.0", project_id=10000, release_date="2024-03-01")
    version, _ = client.versions.create(request)
    counts, _ = client.versions.get_issue_counts(version.id)

    assert version.parse_release_date().isoformat() == "2024-03-01"
    assert counts.issues_fixed_count == 4
    assert b'"projectId": 10000' in fake_jira.requests[0].body
    assert fake_jira.last_path() == "/rest/api/3/version/10200/relatedIssueCounts"
