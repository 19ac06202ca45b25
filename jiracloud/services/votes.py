"""
Votes - Votes cast on an issue
"""

from jiracloud.models import Votes
from jiracloud.services.base import Service, api_path


class VotesService(Service):
    def get(self, issue_id_or_key: str):
        return self._call("GET", api_path("issue/{}/votes", issue_id_or_key), target=Votes)

    def add(self, issue_id_or_key: str):
        """Vote for an issue as the calling user"""
        return self._send("POST", api_path("issue/{}/votes", issue_id_or_key))

    def remove(self, issue_id_or_key: str):
        return self._send("DELETE", api_path("issue/{}/votes", issue_id_or_key))
