#!/usr/bin/env python3
"""
Jira Models - Resource types shared across the Jira services

Every model is a dataclass on top of JiraModel: build one from a raw Jira
payload with ``Model.from_dict(raw)`` and turn it back into a request body
with ``model.to_dict()``. Rich text (ADF) and custom field values are kept
as plain dicts.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jiracloud.types import Date, JiraModel, Time, catch_all, json_field


@dataclass
class User(JiraModel):
    """A Jira user, identified by account ID"""

    self_url: Optional[str] = json_field("self")
    account_id: Optional[str] = None
    account_type: Optional[str] = None
    email_address: Optional[str] = None
    avatar_urls: Optional[Dict[str, str]] = None
    display_name: Optional[str] = None
    active: Optional[bool] = None
    time_zone: Optional[str] = None
    locale: Optional[str] = None


@dataclass
class Users(JiraModel):
    """Members embedded in a group (note the hyphenated paging keys)"""

    size: Optional[int] = None
    items: Optional[List[User]] = None
    max_results: Optional[int] = json_field("max-results")
    start_index: Optional[int] = json_field("start-index")
    end_index: Optional[int] = json_field("end-index")


@dataclass
class Group(JiraModel):
    name: Optional[str] = None
    group_id: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    users: Optional[Users] = None
    expand: Optional[str] = None


@dataclass
class ProjectCategory(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class ProjectInsight(JiraModel):
    total_issue_count: Optional[int] = None
    last_issue_update_time: Optional[Time] = None


@dataclass
class Scope(JiraModel):
    """Whether a status or issue type is global or bound to one project"""

    type: Optional[str] = None
    project: Optional["Project"] = None


@dataclass
class StatusCategory(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[int] = None
    key: Optional[str] = None
    color_name: Optional[str] = None
    name: Optional[str] = None


@dataclass
class Status(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    status_category: Optional[StatusCategory] = None
    scope: Optional[Scope] = None


@dataclass
class IssueType(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    subtask: Optional[bool] = None
    avatar_id: Optional[int] = None
    entity_id: Optional[str] = None
    hierarchy_level: Optional[int] = None
    scope: Optional[Scope] = None


@dataclass
class Priority(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    status_color: Optional[str] = None


@dataclass
class Resolution(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class Component(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    lead: Optional[User] = None
    lead_account_id: Optional[str] = None
    assignee_type: Optional[str] = None
    assignee: Optional[User] = None
    real_assignee_type: Optional[str] = None
    real_assignee: Optional[User] = None
    is_assignee_type_valid: Optional[bool] = None
    project: Optional[str] = None
    project_id: Optional[int] = None


@dataclass
class VersionOperation(JiraModel):
    id: Optional[str] = None
    style_class: Optional[str] = None
    label: Optional[str] = None
    href: Optional[str] = None
    weight: Optional[int] = None


@dataclass
class IssuesStatusForVersion(JiraModel):
    unmapped: Optional[int] = None
    to_do: Optional[int] = None
    in_progress: Optional[int] = None
    done: Optional[int] = None


@dataclass
class Version(JiraModel):
    """A project version; start and release dates are kept as the strings Jira sends"""

    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    archived: Optional[bool] = None
    released: Optional[bool] = None
    start_date: Optional[str] = None
    release_date: Optional[str] = None
    user_start_date: Optional[str] = None
    user_release_date: Optional[str] = None
    project_id: Optional[int] = None
    project: Optional[str] = None
    overdue: Optional[bool] = None
    operations: Optional[List[VersionOperation]] = None
    issues_status_for_fix_version: Optional[IssuesStatusForVersion] = None

    def parse_start_date(self) -> Optional[Date]:
        return Date.parse(self.start_date) if self.start_date else None

    def parse_release_date(self) -> Optional[Date]:
        return Date.parse(self.release_date) if self.release_date else None


@dataclass
class Project(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    lead: Optional[User] = None
    components: Optional[List[Component]] = None
    issue_types: Optional[List[IssueType]] = None
    url: Optional[str] = None
    email: Optional[str] = None
    assignee_type: Optional[str] = None
    versions: Optional[List[Version]] = None
    roles: Optional[Dict[str, str]] = None
    avatar_urls: Optional[Dict[str, str]] = None
    project_category: Optional[ProjectCategory] = None
    project_type_key: Optional[str] = None
    simplified: Optional[bool] = None
    style: Optional[str] = None
    favourite: Optional[bool] = None
    is_private: Optional[bool] = None
    properties: Optional[Dict[str, Any]] = None
    uuid: Optional[str] = None
    insight: Optional[ProjectInsight] = None
    deleted: Optional[bool] = None
    retention_till_date: Optional[str] = None
    deleted_date: Optional[Time] = None
    deleted_by: Optional[User] = None
    archived: Optional[bool] = None
    archived_date: Optional[Time] = None
    archived_by: Optional[User] = None


@dataclass
class Schema(JiraModel):
    type: Optional[str] = None
    items: Optional[str] = None
    system: Optional[str] = None
    custom: Optional[str] = None
    custom_id: Optional[int] = None


@dataclass
class FieldMeta(JiraModel):
    """Metadata about a field on a screen (create, edit or transition)"""

    required: Optional[bool] = None
    schema: Optional[Schema] = None
    name: Optional[str] = None
    key: Optional[str] = None
    auto_complete_url: Optional[str] = None
    has_default_value: Optional[bool] = None
    operations: Optional[List[str]] = None
    allowed_values: Optional[List[Any]] = None
    default_value: Any = None


@dataclass
class Transition(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    to: Optional[Status] = None
    has_screen: Optional[bool] = None
    is_global: Optional[bool] = None
    is_initial: Optional[bool] = None
    is_available: Optional[bool] = None
    is_conditional: Optional[bool] = None
    fields: Optional[Dict[str, FieldMeta]] = None
    is_looped: Optional[bool] = None


@dataclass
class AvatarURLs(JiraModel):
    size_16x16: Optional[str] = json_field("16x16")
    size_24x24: Optional[str] = json_field("24x24")
    size_32x32: Optional[str] = json_field("32x32")
    size_48x48: Optional[str] = json_field("48x48")


@dataclass
class Visibility(JiraModel):
    """Restricts a comment or worklog to a group or a project role"""

    type: Optional[str] = None
    value: Optional[str] = None
    identifier: Optional[str] = None


@dataclass
class EntityProperty(JiraModel):
    key: Optional[str] = None
    value: Any = None


@dataclass
class PropertyKey(JiraModel):
    self_url: Optional[str] = json_field("self")
    key: Optional[str] = None


@dataclass
class PropertyKeys(JiraModel):
    keys: Optional[List[PropertyKey]] = None

    def names(self) -> List[str]:
        return [k.key for k in self.keys or []]


@dataclass
class Comment(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    author: Optional[User] = None
    # Plain text or an ADF document
    body: Any = None
    rendered_body: Optional[str] = None
    update_author: Optional[User] = None
    created: Optional[Time] = None
    updated: Optional[Time] = None
    visibility: Optional[Visibility] = None
    jsd_public: Optional[bool] = None
    properties: Optional[List[EntityProperty]] = None


@dataclass
class Worklog(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    issue_id: Optional[str] = None
    author: Optional[User] = None
    update_author: Optional[User] = None
    comment: Any = None
    created: Optional[Time] = None
    updated: Optional[Time] = None
    started: Optional[Time] = None
    time_spent: Optional[str] = None
    time_spent_seconds: Optional[int] = None
    visibility: Optional[Visibility] = None
    properties: Optional[List[EntityProperty]] = None


@dataclass
class Application(JiraModel):
    type: Optional[str] = None
    name: Optional[str] = None


@dataclass
class Icon(JiraModel):
    url16x16: Optional[str] = json_field("url16x16")
    title: Optional[str] = None
    link: Optional[str] = None


@dataclass
class RemoteLinkStatus(JiraModel):
    resolved: Optional[bool] = None
    icon: Optional[Icon] = None


@dataclass
class RemoteLinkObject(JiraModel):
    url: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    icon: Optional[Icon] = None
    status: Optional[RemoteLinkStatus] = None


@dataclass
class RemoteLink(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[int] = None
    global_id: Optional[str] = None
    application: Optional[Application] = None
    relationship: Optional[str] = None
    object: Optional[RemoteLinkObject] = None


@dataclass
class Watches(JiraModel):
    self_url: Optional[str] = json_field("self")
    watch_count: Optional[int] = None
    is_watching: Optional[bool] = None
    watchers: Optional[List[User]] = None


@dataclass
class Votes(JiraModel):
    self_url: Optional[str] = json_field("self")
    votes: Optional[int] = None
    has_voted: Optional[bool] = None
    voters: Optional[List[User]] = None


@dataclass
class Actor(JiraModel):
    """A user or group holding a project role"""

    id: Optional[int] = None
    display_name: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    actor_user: Optional[User] = None
    actor_group: Optional[Group] = None


@dataclass
class Subscription(JiraModel):
    id: Optional[int] = None
    user: Optional[User] = None
    group: Optional[Group] = None


@dataclass
class Label(JiraModel):
    label: Optional[str] = None


@dataclass
class WorkflowOperations(JiraModel):
    can_edit: Optional[bool] = None
    can_delete: Optional[bool] = None


@dataclass
class IssueLinkType(JiraModel):
    id: Optional[str] = None
    name: Optional[str] = None
    inward: Optional[str] = None
    outward: Optional[str] = None
    self_url: Optional[str] = json_field("self")


@dataclass
class LinkedIssueFields(JiraModel):
    summary: Optional[str] = None
    status: Optional[Status] = None
    priority: Optional[Priority] = None
    issue_type: Optional[IssueType] = json_field("issuetype")


@dataclass
class LinkedIssue(JiraModel):
    id: Optional[str] = None
    key: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    fields: Optional[LinkedIssueFields] = None


@dataclass
class IssueLink(JiraModel):
    id: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    type: Optional[IssueLinkType] = None
    inward_issue: Optional[LinkedIssue] = None
    outward_issue: Optional[LinkedIssue] = None


@dataclass
class Attachment(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    filename: Optional[str] = None
    author: Optional[User] = None
    created: Optional[Time] = None
    size: Optional[int] = None
    mime_type: Optional[str] = None
    content: Optional[str] = None
    thumbnail: Optional[str] = None


@dataclass
class SecurityLevel(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class Progress(JiraModel):
    progress: Optional[int] = None
    total: Optional[int] = None
    percent: Optional[int] = None


@dataclass
class TimeTracking(JiraModel):
    original_estimate: Optional[str] = None
    remaining_estimate: Optional[str] = None
    time_spent: Optional[str] = None
    original_estimate_seconds: Optional[int] = None
    remaining_estimate_seconds: Optional[int] = None
    time_spent_seconds: Optional[int] = None


@dataclass
class Comments(JiraModel):
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    comments: Optional[List[Comment]] = None


@dataclass
class Worklogs(JiraModel):
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    worklogs: Optional[List[Worklog]] = None


@dataclass
class ChangeItem(JiraModel):
    field: Optional[str] = None
    field_type: Optional[str] = json_field("fieldtype")
    field_id: Optional[str] = None
    from_: Optional[str] = None
    from_string: Optional[str] = None
    to: Optional[str] = None
    to_string: Optional[str] = None


@dataclass
class ChangeHistory(JiraModel):
    id: Optional[str] = None
    author: Optional[User] = None
    created: Optional[Time] = None
    items: Optional[List[ChangeItem]] = None


@dataclass
class Changelog(JiraModel):
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    histories: Optional[List[ChangeHistory]] = None


@dataclass
class SimpleLink(JiraModel):
    id: Optional[str] = None
    style_class: Optional[str] = None
    icon_class: Optional[str] = None
    label: Optional[str] = None
    title: Optional[str] = None
    href: Optional[str] = None
    weight: Optional[int] = None


@dataclass
class LinkGroup(JiraModel):
    id: Optional[str] = None
    style_class: Optional[str] = None
    header: Optional[SimpleLink] = None
    weight: Optional[int] = None
    links: Optional[List[SimpleLink]] = None
    groups: Optional[List["LinkGroup"]] = None


@dataclass
class Operations(JiraModel):
    link_groups: Optional[List[LinkGroup]] = None


@dataclass
class EditMeta(JiraModel):
    fields: Optional[Dict[str, FieldMeta]] = None


@dataclass
class IssueFields(JiraModel):
    """
    The fields of an issue.

    System fields are typed attributes. Everything else Jira returns (custom
    fields such as ``customfield_10115``) lands in ``unknowns`` and is sent
    back unchanged when the fields are encoded again.
    """

    summary: Optional[str] = None
    description: Any = None
    issue_type: Optional[IssueType] = json_field("issuetype")
    project: Optional[Project] = None
    resolution: Optional[Resolution] = None
    priority: Optional[Priority] = None
    resolution_date: Optional[Time] = json_field("resolutiondate")
    created: Optional[Time] = None
    updated: Optional[Time] = None
    due_date: Optional[Date] = json_field("duedate")
    watches: Optional[Watches] = None
    assignee: Optional[User] = None
    reporter: Optional[User] = None
    creator: Optional[User] = None
    votes: Optional[Votes] = None
    labels: Optional[List[str]] = None
    comment: Optional[Comments] = None
    components: Optional[List[Component]] = None
    status: Optional[Status] = None
    progress: Optional[Progress] = None
    aggregate_progress: Optional[Progress] = json_field("aggregateprogress")
    time_tracking: Optional[TimeTracking] = json_field("timetracking")
    time_spent: Optional[int] = json_field("timespent")
    time_estimate: Optional[int] = json_field("timeestimate")
    time_original_estimate: Optional[int] = json_field("timeoriginalestimate")
    worklog: Optional[Worklogs] = None
    issue_links: Optional[List[IssueLink]] = json_field("issuelinks")
    attachment: Optional[List[Attachment]] = None
    subtasks: Optional[List["Issue"]] = None
    parent: Optional["Issue"] = None
    fix_versions: Optional[List[Version]] = None
    affects_versions: Optional[List[Version]] = json_field("versions")
    environment: Any = None
    security: Optional[SecurityLevel] = None
    unknowns: Dict[str, Any] = catch_all()


@dataclass
class Issue(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[str] = None
    key: Optional[str] = None
    expand: Optional[str] = None
    fields: Optional[IssueFields] = None
    changelog: Optional[Changelog] = None
    operations: Optional[Operations] = None
    editmeta: Optional[EditMeta] = json_field("editmeta")
    transitions: Optional[List[Transition]] = None
    names: Optional[Dict[str, str]] = None
    schema: Optional[Dict[str, Schema]] = None
    rendered_fields: Optional[Dict[str, Any]] = None
    properties: Optional[List[EntityProperty]] = None

    def __repr__(self):
        summary = f", summary={self.fields.summary!r}" if self.fields and self.fields.summary else ""
        return f"Issue({self.key}{summary})"


@dataclass
class ErrorCollection(JiraModel):
    """Per-item errors reported inside an otherwise successful bulk response"""

    error_messages: Optional[List[str]] = None
    errors: Optional[Dict[str, str]] = None
    status: Optional[int] = None


@dataclass
class PageBean(JiraModel):
    """Common fields of the ``values``-style paginated responses"""

    self_url: Optional[str] = json_field("self")
    next_page: Optional[str] = None
    max_results: Optional[int] = None
    start_at: Optional[int] = None
    total: Optional[int] = None
    is_last: Optional[bool] = None


@dataclass
class Field(JiraModel):
    """A system or custom field"""

    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    custom: Optional[bool] = None
    orderable: Optional[bool] = None
    navigable: Optional[bool] = None
    searchable: Optional[bool] = None
    clause_names: Optional[List[str]] = None
    schema: Optional[Schema] = None
    scope: Optional[Scope] = None
    description: Optional[str] = None
    is_locked: Optional[bool] = None
    searcher_key: Optional[str] = None
    untranslated_name: Optional[str] = None


@dataclass
class ActorUser(JiraModel):
    account_id: Optional[str] = None


@dataclass
class ActorGroup(JiraModel):
    name: Optional[str] = None
    display_name: Optional[str] = None
    group_id: Optional[str] = None


@dataclass
class RoleActor(JiraModel):
    id: Optional[int] = None
    display_name: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    actor_user: Optional[ActorUser] = None
    actor_group: Optional[ActorGroup] = None


@dataclass
class ProjectRole(JiraModel):
    self_url: Optional[str] = json_field("self")
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    actors: Optional[List[RoleActor]] = None
    scope: Optional[Scope] = None
    admin: Optional[bool] = None
    default: Optional[bool] = None


@dataclass
class Avatar(JiraModel):
    id: Optional[str] = None
    owner: Optional[str] = None
    is_system_avatar: Optional[bool] = None
    is_selected: Optional[bool] = None
    is_deletable: Optional[bool] = None
    file_name: Optional[str] = None
    urls: Optional[Dict[str, str]] = None


@dataclass
class Avatars(JiraModel):
    system: Optional[List[Avatar]] = None
    custom: Optional[List[Avatar]] = None
