"""Tests for the users, groups and myself services."""

from jiracloud.services.users import UserCreateRequest


def test_search_users(client, fake_jira):
    fake_jira.respond(200, [{"accountId": "abc", "displayName": "Ada", "active": True}])

    users, _ = client.users.search("ada", max_results=10)

    assert users[0].display_name == "Ada"
    assert fake_jira.last_path() == "/rest/api/3/user/search"
    assert fake_jira.last_query() == {"query": ["ada"], "maxResults": ["10"]}


def test_get_user_by_account_id(client, fake_jira):
    fake_jira.respond(200, {"accountId": "abc"})
    client.users.get("abc", expand=["groups", "applicationRoles"])
    assert fake_jira.last_query() == {"accountId": ["abc"], "expand": ["groups,applicationRoles"]}


def test_create_user(client, fake_jira):
    fake_jira.respond(201, {"accountId": "new"})
    request = UserCreateRequest(email_address="new@example.com", products=["jira-software"])
    user, _ = client.users.create(request)
    assert user.account_id == "new"
    assert fake_jira.last_json() == {"emailAddress": "new@example.com", "products": ["jira-software"]}


def test_bulk_get_repeats_account_id(client, fake_jira):
    fake_jira.respond(200, {"values": [{"accountId": "a"}, {"accountId": "b"}], "isLast": True})
    result, _ = client.users.bulk_get(["a", "b"])
    assert [u.account_id for u in result.values] == ["a", "b"]
    assert fake_jira.last_query() == {"accountId": ["a", "b"]}


def test_assignable_multi_project_joins_keys(client, fake_jira):
    fake_jira.respond(200, [])
    users, _ = client.users.find_assignable_multi_project(["TEST", "OPS"])
    assert users == []
    assert fake_jira.last_query() == {"projectKeys": ["TEST,OPS"]}


def test_set_default_columns(client, fake_jira):
    client.users.set_default_columns(["summary", "status"])
    assert fake_jira.last.method == "PUT"
    assert fake_jira.last_json() == {"columns": ["summary", "status"]}
    assert "?" not in fake_jira.last.url


def test_group_membership(client, fake_jira):
    fake_jira.respond(201, {"name": "devs", "groupId": "g1"})
    fake_jira.respond(200, {"values": [{"accountId": "abc"}], "total": 1, "isLast": True})

    group, _ = client.groups.add_user("devs", "abc")
    members, response = client.groups.get_members("devs", include_inactive_users=True)

    assert group.group_id == "g1"
    assert fake_jira.requests[0].url.endswith("/rest/api/3/group/user?groupname=devs")
    assert members.values[0].account_id == "abc"
    assert response.total == 1
    assert fake_jira.last_query() == {"groupname": ["devs"], "includeInactiveUsers": ["true"]}


def test_remove_group_user(client, fake_jira):
    client.groups.remove_user("devs", "abc")
    assert fake_jira.last.method == "DELETE"
    assert fake_jira.last_query() == {"groupname": ["devs"], "accountId": ["abc"]}


def test_myself_preferences(client, fake_jira):
    fake_jira.respond(200, {"accountId": "me", "displayName": "Me"})
    fake_jira.respond(200, b'"UTC"')

    me, _ = client.myself.get()
    value, _ = client.myself.get_preference("jira.user.timezone")

    assert me.account_id == "me"
    assert value == "UTC"
    assert fake_jira.last_query() == {"key": ["jira.user.timezone"]}
