"""Tests for workflows and workflow schemes."""

from jiracloud.services.workflows import (
    ConditionGroup,
    WorkflowCreateRequest,
    WorkflowRule,
    WorkflowStatusCreate,
    WorkflowTransitionCreate,
)
from jiracloud.services.workflowschemes import WorkflowSchemeCreateRequest, WorkflowSchemeUpdateRequest

WORKFLOW = {
    "id": "classic",
    "name": "Software workflow",
    "isDefault": False,
    "statuses": [{"id": "1", "name": "To Do"}, {"id": "3", "name": "Done"}],
    "transitions": [
        {
            "id": "11",
            "name": "Finish",
            "from": ["1"],
            "to": "3",
            "type": "directed",
            "screen": {"id": "10000"},
            "rules": {
                "postFunctions": [{"type": "UpdateIssueStatusFunction"}],
                "conditionGroups": [
                    {
                        "operation": "ALL",
                        "conditions": [{"type": "PermissionCondition", "configuration": {"permissionKey": "BROWSE"}}],
                        "conditionGroups": [
                            {"operation": "ANY", "conditions": [{"type": "AlwaysFalseCondition"}]},
                        ],
                    }
                ],
            },
        }
    ],
}


class TestWorkflows:
    def test_list(self, client, fake_jira):
        fake_jira.respond(200, {"startAt": 0, "total": 1, "isLast": True, "values": [WORKFLOW]})

        page, response = client.workflows.list(
            workflow_names=["Software workflow", "Bugs"], expand="transitions", is_active=True
        )

        assert page.values[0].name == "Software workflow"
        assert page.values[0].is_default is False
        assert response.total == 1
        assert fake_jira.last_path() == "/rest/api/3/workflow/search"
        assert fake_jira.last_query() == {
            "workflowName": ["Software workflow", "Bugs"],
            "expand": ["transitions"],
            "isActive": ["true"],
        }

    def test_transition_from_key(self, client, fake_jira):
        fake_jira.respond(200, WORKFLOW)

        workflow, _ = client.workflows.get("classic", expand="transitions.rules")

        transition = workflow.transitions[0]
        assert transition.from_ == ["1"]
        assert transition.to == "3"
        assert transition.screen.id == "10000"
        assert fake_jira.last_path() == "/rest/api/3/workflow/classic"

    def test_nested_condition_groups(self, client, fake_jira):
        fake_jira.respond(200, WORKFLOW)

        workflow, _ = client.workflows.get("classic")

        rules = workflow.transitions[0].rules
        assert rules.post_functions[0].type == "UpdateIssueStatusFunction"
        group = rules.condition_groups[0]
        assert group.operation == "ALL"
        assert group.conditions[0].configuration == {"permissionKey": "BROWSE"}
        assert isinstance(group.groups[0], ConditionGroup)
        assert group.groups[0].operation == "ANY"
        assert group.groups[0].conditions[0].type == "AlwaysFalseCondition"

    def test_condition_group_encodes_nested_key(self):
        group = ConditionGroup(
            operation="ALL",
            groups=[ConditionGroup(operation="ANY", conditions=[WorkflowRule(type="AlwaysFalseCondition")])],
        )
        assert group.to_dict() == {
            "operation": "ALL",
            "conditionGroups": [{"operation": "ANY", "conditions": [{"type": "AlwaysFalseCondition"}]}],
        }

    def test_create_sends_from(self, client, fake_jira):
        fake_jira.respond(201, {"entityId": "d7178e8d", "name": "Triage"})
        request = WorkflowCreateRequest(
            name="Triage",
            statuses=[WorkflowStatusCreate(id="1"), WorkflowStatusCreate(id="3")],
            transitions=[
                WorkflowTransitionCreate(name="Create", to="1", type="initial"),
                WorkflowTransitionCreate(name="Close", from_=["1"], to="3", type="directed"),
            ],
        )

        created, _ = client.workflows.create(request)

        assert created.name == "Triage"
        assert fake_jira.last.method == "POST"
        assert fake_jira.last_path() == "/rest/api/3/workflow"
        body = fake_jira.last_json()
        assert body["statuses"] == [{"id": "1"}, {"id": "3"}]
        assert body["transitions"] == [
            {"name": "Create", "to": "1", "type": "initial"},
            {"name": "Close", "from": ["1"], "to": "3", "type": "directed"},
        ]
        assert "from_" not in body["transitions"][1]

    def test_transition_properties(self, client, fake_jira):
        fake_jira.respond(200, {"jira.i18n.title": "finish.title"})

        props, _ = client.workflows.get_transition_properties(
            11, "Software workflow", include_reserved_keys=True, workflow_mode="live"
        )

        assert props == {"jira.i18n.title": "finish.title"}
        assert fake_jira.last_path() == "/rest/api/3/workflow/transitions/11/properties"
        assert fake_jira.last_query() == {
            "workflowName": ["Software workflow"],
            "includeReservedKeys": ["true"],
            "workflowMode": ["live"],
        }

    def test_set_and_delete_transition_property(self, client, fake_jira):
        fake_jira.respond(200, {"key": "jira.i18n.title", "value": "done.title"})
        client.workflows.set_transition_property(11, "jira.i18n.title", "Software workflow", "done.title")
        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_query() == {"key": ["jira.i18n.title"], "workflowName": ["Software workflow"]}
        assert fake_jira.last_json() == {"value": "done.title"}

        fake_jira.respond(204)
        client.workflows.delete_transition_property(
            11, "jira.i18n.title", "Software workflow", workflow_mode="draft"
        )
        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_query()["workflowMode"] == ["draft"]

    def test_rule_configurations(self, client, fake_jira):
        fake_jira.respond(
            200,
            [
                {
                    "workflowId": "classic",
                    "rules": [{"id": "r1", "type": "postfunction", "configuration": {"value": "x"}}],
                }
            ],
        )

        results, _ = client.workflows.get_transition_rule_configurations(
            types=["postfunction", "validator"], draft=True, expand=["transition"]
        )

        assert results[0].workflow_id == "classic"
        assert results[0].rules[0].configuration == {"value": "x"}
        assert fake_jira.last_path() == "/rest/api/3/workflow/rule/config"
        assert fake_jira.last_query() == {
            "types": ["postfunction", "validator"],
            "draft": ["true"],
            "expand": ["transition"],
        }

    def test_delete(self, client, fake_jira):
        fake_jira.respond(204)
        response = client.workflows.delete("classic")
        assert response.status_code == 204
        assert fake_jira.last.method == "DELETE"


SCHEME = {
    "id": 101010,
    "name": "Example workflow scheme",
    "defaultWorkflow": "jira",
    "issueTypeMappings": {"10000": "scrum workflow", "10001": "builds workflow"},
    "draft": False,
    "issueTypes": {"10000": {"id": "10000", "name": "Bug"}},
    "self": "https://example.atlassian.net/rest/api/3/workflowscheme/101010",
}


class TestWorkflowSchemes:
    def test_get_decodes_mappings(self, client, fake_jira):
        fake_jira.respond(200, SCHEME)

        scheme, _ = client.workflow_schemes.get(101010, return_draft_if_exists=True)

        assert scheme.issue_type_mappings == {"10000": "scrum workflow", "10001": "builds workflow"}
        assert scheme.issue_types["10000"].name == "Bug"
        assert scheme.self_url.endswith("/workflowscheme/101010")
        assert fake_jira.last_query() == {"returnDraftIfExists": ["true"]}

    def test_create_and_update(self, client, fake_jira):
        fake_jira.respond(201, SCHEME)
        client.workflow_schemes.create(
            WorkflowSchemeCreateRequest(
                name="Example workflow scheme", default_workflow="jira", issue_type_mappings={"10000": "scrum workflow"}
            )
        )
        assert fake_jira.last_json() == {
            "name": "Example workflow scheme",
            "defaultWorkflow": "jira",
            "issueTypeMappings": {"10000": "scrum workflow"},
        }

        fake_jira.respond(200, SCHEME)
        client.workflow_schemes.update(
            101010, WorkflowSchemeUpdateRequest(description="Updated", update_draft_if_needed=True)
        )
        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_json() == {"description": "Updated", "updateDraftIfNeeded": True}

    def test_default_workflow(self, client, fake_jira):
        fake_jira.respond(200, {"workflow": "jira"})
        default, _ = client.workflow_schemes.get_default(101010)
        assert default.workflow == "jira"
        assert fake_jira.last_path() == "/rest/api/3/workflowscheme/101010/default"

        fake_jira.respond(200, SCHEME)
        client.workflow_schemes.set_default(101010, "scrum workflow", update_draft_if_needed=True)
        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_json() == {"workflow": "scrum workflow", "updateDraftIfNeeded": True}

        fake_jira.respond(200, SCHEME)
        client.workflow_schemes.delete_default(101010, update_draft_if_needed=True)
        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_query() == {"updateDraftIfNeeded": ["true"]}

    def test_issue_type_mapping(self, client, fake_jira):
        fake_jira.respond(200, {"issueType": "10000", "workflow": "jira"})
        mapping, _ = client.workflow_schemes.get_issue_type_mapping(101010, "10000")
        assert mapping.issue_type == "10000"
        assert fake_jira.last_path() == "/rest/api/3/workflowscheme/101010/issuetype/10000"

        fake_jira.respond(200, SCHEME)
        client.workflow_schemes.set_issue_type_mapping(101010, "10000", "scrum workflow", update_draft_if_needed=True)
        assert fake_jira.last_json() == {
            "issueType": "10000",
            "workflow": "scrum workflow",
            "updateDraftIfNeeded": True,
        }

        fake_jira.respond(200, SCHEME)
        client.workflow_schemes.delete_issue_type_mapping(101010, "10000")
        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_query() == {}

    def test_draft_lifecycle(self, client, fake_jira):
        fake_jira.respond(201, dict(SCHEME, draft=True))
        draft, _ = client.workflow_schemes.create_draft(101010)
        assert draft.draft is True
        assert fake_jira.last.method == "POST"
        assert fake_jira.last_path() == "/rest/api/3/workflowscheme/101010/createdraft"
        assert fake_jira.last.body is None

        fake_jira.respond(200, dict(SCHEME, draft=True))
        client.workflow_schemes.update_draft(101010, WorkflowSchemeUpdateRequest(default_workflow="scrum workflow"))
        assert fake_jira.last_path() == "/rest/api/3/workflowscheme/101010/draft"
        assert fake_jira.last_json() == {"defaultWorkflow": "scrum workflow"}

        fake_jira.respond(204)
        client.workflow_schemes.delete_draft(101010)
        assert fake_jira.last.method == "DELETE"

    def test_publish_draft(self, client, fake_jira):
        fake_jira.respond(204)
        client.workflow_schemes.publish_draft(101010)
        assert fake_jira.last_path() == "/rest/api/3/workflowscheme/101010/draft/publish"
        assert fake_jira.last_json() == {}

        fake_jira.respond(204)
        mappings = [{"issueTypeId": "10001", "statusId": "3", "newStatusId": "1"}]
        client.workflow_schemes.publish_draft(101010, status_mappings=mappings)
        assert fake_jira.last_json() == {"statusMappings": mappings}
