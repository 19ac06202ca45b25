"""
Jira Services - One façade per group of Jira Cloud REST API v3 endpoints
"""

from jiracloud.services.applicationroles import ApplicationRolesService
from jiracloud.services.attachments import AttachmentsService
from jiracloud.services.auditrecords import AuditRecordsService
from jiracloud.services.avatars import AvatarsService
from jiracloud.services.comments import CommentsService
from jiracloud.services.components import ComponentsService
from jiracloud.services.dashboards import DashboardsService
from jiracloud.services.fields import FieldsService
from jiracloud.services.filters import FiltersService
from jiracloud.services.groups import GroupsService
from jiracloud.services.issuelinks import IssueLinksService
from jiracloud.services.issuelinktypes import IssueLinkTypesService
from jiracloud.services.issues import IssuesService
from jiracloud.services.issuetypes import IssueTypesService
from jiracloud.services.jql import JQLService
from jiracloud.services.labels import LabelsService
from jiracloud.services.myself import MyselfService
from jiracloud.services.permissions import PermissionsService
from jiracloud.services.priorities import PrioritiesService
from jiracloud.services.projectroles import ProjectRolesService
from jiracloud.services.projects import ProjectsService
from jiracloud.services.resolutions import ResolutionsService
from jiracloud.services.screens import ScreensService
from jiracloud.services.search import SearchService
from jiracloud.services.serverinfo import ServerInfoService
from jiracloud.services.statuses import StatusesService
from jiracloud.services.users import UsersService
from jiracloud.services.versions import VersionsService
from jiracloud.services.votes import VotesService
from jiracloud.services.watchers import WatchersService
from jiracloud.services.workflows import WorkflowsService
from jiracloud.services.workflowschemes import WorkflowSchemesService
from jiracloud.services.worklogs import WorklogsService

__all__ = [
    "ApplicationRolesService",
    "AttachmentsService",
    "AuditRecordsService",
    "AvatarsService",
    "CommentsService",
    "ComponentsService",
    "DashboardsService",
    "FieldsService",
    "FiltersService",
    "GroupsService",
    "IssueLinksService",
    "IssueLinkTypesService",
    "IssuesService",
    "IssueTypesService",
    "JQLService",
    "LabelsService",
    "MyselfService",
    "PermissionsService",
    "PrioritiesService",
    "ProjectRolesService",
    "ProjectsService",
    "ResolutionsService",
    "ScreensService",
    "SearchService",
    "ServerInfoService",
    "StatusesService",
    "UsersService",
    "VersionsService",
    "VotesService",
    "WatchersService",
    "WorkflowsService",
    "WorkflowSchemesService",
    "WorklogsService",
]
