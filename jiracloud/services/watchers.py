"""
Watchers - Who watches an issue
"""

from dataclasses import dataclass
from typing import List, Optional

from jiracloud.models import Watches
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel


@dataclass
class BulkWatchersResult(JiraModel):
    errors: Optional[List[str]] = None
    success: Optional[List[str]] = None


class WatchersService(Service):
    """Watcher endpoints (/rest/api/3/issue/{key}/watchers)"""

    def get(self, issue_id_or_key: str):
        return self._call("GET", api_path("issue/{}/watchers", issue_id_or_key), target=Watches)

    def add(self, issue_id_or_key: str, account_id: str):
        # Jira takes the account ID as a bare JSON string
        return self._send("POST", api_path("issue/{}/watchers", issue_id_or_key), body=account_id)

    def remove(self, issue_id_or_key: str, account_id: str):
        return self._send(
            "DELETE",
            api_path("issue/{}/watchers", issue_id_or_key),
            params={"accountId": account_id},
        )

    def bulk_add(self, issue_keys: List[str], account_id: str):
        body = {"issueIds": issue_keys, "accountId": account_id}
        return self._call("POST", api_path("issue/watching"), body=body, target=BulkWatchersResult)

    def bulk_remove(self, issue_keys: List[str], account_id: str):
        body = {"issueIds": issue_keys, "accountId": account_id}
        return self._call("DELETE", api_path("issue/watching"), body=body, target=BulkWatchersResult)
