"""Tests for fields, field contexts and options, and screens."""

from jiracloud.services.fields import ContextCreateRequest, FieldCreateRequest, FieldOptionInput
from jiracloud.services.screens import ScreenCreateRequest, ScreenSchemeCreateRequest, ScreenSchemeScreens


class TestFields:
    def test_list_decodes_schema(self, client, fake_jira):
        fake_jira.respond(
            200,
            [
                {
                    "id": "customfield_10115",
                    "name": "Story Points",
                    "custom": True,
                    "clauseNames": ["cf[10115]", "Story Points"],
                    "schema": {"type": "number", "customId": 10115},
                }
            ],
        )

        fields, _ = client.fields.list()

        assert fields[0].custom is True
        assert fields[0].schema.custom_id == 10115
        assert fields[0].clause_names == ["cf[10115]", "Story Points"]

    def test_create_custom_field(self, client, fake_jira):
        fake_jira.respond(201, {"id": "customfield_10200", "name": "Risk"})
        request = FieldCreateRequest(
            name="Risk",
            type="com.atlassian.jira.plugin.system.customfieldtypes:select",
            searcher_key="com.atlassian.jira.plugin.system.customfieldtypes:multiselectsearcher",
        )

        created, _ = client.fields.create(request)

        assert created.id == "customfield_10200"
        assert fake_jira.last_json() == {
            "name": "Risk",
            "type": "com.atlassian.jira.plugin.system.customfieldtypes:select",
            "searcherKey": "com.atlassian.jira.plugin.system.customfieldtypes:multiselectsearcher",
        }

    def test_search_query(self, client, fake_jira):
        fake_jira.respond(200, {"startAt": 0, "total": 0, "isLast": True, "values": []})
        client.fields.search(type=["custom"], query="risk", order_by="-lastUsed", expand=["key", "lastUsed"])
        assert fake_jira.last_path() == "/rest/api/3/field/search"
        assert fake_jira.last_query() == {
            "type": ["custom"],
            "query": ["risk"],
            "orderBy": ["-lastUsed"],
            "expand": ["key,lastUsed"],
        }

    def test_trash_and_restore(self, client, fake_jira):
        client.fields.trash("customfield_10200")
        assert fake_jira.last.method == "POST"
        assert fake_jira.last_path() == "/rest/api/3/field/customfield_10200/trash"
        client.fields.restore("customfield_10200")
        assert fake_jira.last_path() == "/rest/api/3/field/customfield_10200/restore"

    def test_list_global_contexts(self, client, fake_jira):
        fake_jira.respond(200, {"isLast": True, "values": [{"id": "10300", "isGlobalContext": True}]})

        page, _ = client.fields.list_contexts("customfield_10200", is_global_context=True, context_ids=[10300])

        assert page.values[0].is_global_context is True
        assert fake_jira.last_query() == {"isGlobalContext": ["true"], "contextId": ["10300"]}

    def test_create_context(self, client, fake_jira):
        fake_jira.respond(201, {"id": "10301", "name": "Ops"})
        client.fields.create_context("customfield_10200", ContextCreateRequest(name="Ops", project_ids=["10000"]))
        assert fake_jira.last_path() == "/rest/api/3/field/customfield_10200/context"
        assert fake_jira.last_json() == {"name": "Ops", "projectIds": ["10000"]}

    def test_update_context_sends_only_given_fields(self, client, fake_jira):
        fake_jira.respond(204)
        client.fields.update_context("customfield_10200", 10301, description="Operations only")
        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_json() == {"description": "Operations only"}

    def test_create_options_wraps_list(self, client, fake_jira):
        fake_jira.respond(200, {"values": [{"id": "1", "value": "High", "disabled": False}]})

        page, _ = client.fields.create_context_options(
            "customfield_10200", 10301, [FieldOptionInput(value="High"), FieldOptionInput(value="Low", disabled=True)]
        )

        assert page.values[0].value == "High"
        assert fake_jira.last_path() == "/rest/api/3/field/customfield_10200/context/10301/option"
        assert fake_jira.last_json() == {"options": [{"value": "High"}, {"value": "Low", "disabled": True}]}

    def test_delete_option(self, client, fake_jira):
        fake_jira.respond(204)
        client.fields.delete_context_option("customfield_10200", 10301, 1)
        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/rest/api/3/field/customfield_10200/context/10301/option/1"


class TestScreens:
    def test_list(self, client, fake_jira):
        fake_jira.respond(
            200, {"isLast": True, "values": [{"id": 1, "name": "Default Screen", "scope": {"type": "GLOBAL"}}]}
        )

        page, _ = client.screens.list(ids=[1, 2], scope=["GLOBAL"], query_string="Default")

        assert page.values[0].scope.type == "GLOBAL"
        assert fake_jira.last_path() == "/rest/api/3/screens"
        assert fake_jira.last_query() == {"id": ["1", "2"], "queryString": ["Default"], "scope": ["GLOBAL"]}

    def test_create(self, client, fake_jira):
        fake_jira.respond(201, {"id": 10005, "name": "Bug screen"})
        screen, _ = client.screens.create(ScreenCreateRequest(name="Bug screen"))
        assert screen.id == 10005
        assert fake_jira.last_json() == {"name": "Bug screen"}

    def test_tabs(self, client, fake_jira):
        fake_jira.respond(200, [{"id": 10000, "name": "Field Tab"}])
        tabs, _ = client.screens.list_tabs(10005, project_key="TEST")
        assert tabs[0].name == "Field Tab"
        assert fake_jira.last_query() == {"projectKey": ["TEST"]}

        fake_jira.respond(200, {"id": 10001, "name": "Details"})
        tab, _ = client.screens.create_tab(10005, "Details")
        assert tab.id == 10001
        assert fake_jira.last_json() == {"name": "Details"}

    def test_move_tab_position_in_path(self, client, fake_jira):
        fake_jira.respond(204)
        client.screens.move_tab(10005, 10001, 0)
        assert fake_jira.last.method == "POST"
        assert fake_jira.last_path() == "/rest/api/3/screens/10005/tabs/10001/move/0"
        assert fake_jira.last.body is None

    def test_add_and_move_tab_field(self, client, fake_jira):
        fake_jira.respond(200, {"id": "summary", "name": "Summary"})
        field, _ = client.screens.add_tab_field(10005, 10001, "summary")
        assert field.name == "Summary"
        assert fake_jira.last_json() == {"fieldId": "summary"}

        fake_jira.respond(204)
        client.screens.move_tab_field(10005, 10001, "summary", after="description")
        assert fake_jira.last_path() == "/rest/api/3/screens/10005/tabs/10001/fields/summary/move"
        assert fake_jira.last_json() == {"after": "description"}

    def test_create_scheme(self, client, fake_jira):
        fake_jira.respond(201, {"id": 10010})
        scheme = ScreenSchemeCreateRequest(name="Bugs", screens=ScreenSchemeScreens(default=10005, create=10006))

        created, _ = client.screens.create_scheme(scheme)

        assert created.id == 10010
        assert fake_jira.last_path() == "/rest/api/3/screenscheme"
        assert fake_jira.last_json() == {"name": "Bugs", "screens": {"default": 10005, "create": 10006}}

    def test_update_scheme_partial(self, client, fake_jira):
        fake_jira.respond(204)
        client.screens.update_scheme(10010, screens=ScreenSchemeScreens(edit=10007))
        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_json() == {"screens": {"edit": 10007}}

    def test_field_screens(self, client, fake_jira):
        fake_jira.respond(200, {"isLast": True, "values": [{"id": 10005, "name": "Bug screen"}]})
        page, _ = client.screens.get_field_screens("customfield_10200", expand=["tab"])
        assert page.values[0].id == 10005
        assert fake_jira.last_path() == "/rest/api/3/field/customfield_10200/screens"
        assert fake_jira.last_query() == {"expand": ["tab"]}
