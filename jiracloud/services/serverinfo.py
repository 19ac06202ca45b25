"""
Server Info - Version and deployment details of the Jira site
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class HealthCheck(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None
    passed: Optional[bool] = None


@dataclass
class ServerInfo(JiraModel):
    base_url: Optional[str] = None
    version: Optional[str] = None
    version_numbers: Optional[List[int]] = None
    deployment_type: Optional[str] = None
    build_number: Optional[int] = None
    build_date: Optional[str] = None
    server_time: Optional[str] = None
    scm_info: Optional[str] = None
    server_title: Optional[str] = None
    health_checks: Optional[List[HealthCheck]] = None


class ServerInfoService(Service):
    def get(self):
        return self._call("GET", api_path("serverInfo"), target=ServerInfo)
