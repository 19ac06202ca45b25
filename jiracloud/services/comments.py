"""
Comments - Issue comments and comment properties
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from jiracloud.models import Comment, EntityProperty, PageBean, PropertyKeys, Visibility
from jiracloud.services.base import Service, api_path, comma_list
from jiracloud.types import JiraModel


@dataclass
class CommentListResult(JiraModel):
    start_at: Optional[int] = None
    max_results: Optional[int] = None
    total: Optional[int] = None
    comments: Optional[List[Comment]] = None


@dataclass
class CommentCreateRequest(JiraModel):
    """``body`` is plain text or an ADF document"""

    body: Any = None
    visibility: Optional[Visibility] = None


CommentUpdateRequest = CommentCreateRequest


@dataclass
class GetCommentsByIDsResult(PageBean):
    values: Optional[List[Comment]] = None


CommentProperty = EntityProperty


class CommentsService(Service):
    """Comment endpoints (/rest/api/3/issue/{key}/comment, /rest/api/3/comment)"""

    def list_issue_comments(
        self,
        issue_id_or_key: str,
        *,
        start_at: int = 0,
        max_results: int = 0,
        order_by: Optional[str] = None,
        expand: Optional[List[str]] = None,
    ):
        """
        One page of an issue's comments

        Args:
            order_by: "created" or "-created"
            expand: e.g. ["renderedBody"]

        Returns:
            (CommentListResult, Response)
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "orderBy": order_by,
            "expand": comma_list(expand),
        }
        return self._call(
            "GET",
            api_path("issue/{}/comment", issue_id_or_key),
            params=params,
            target=CommentListResult,
        )

    def get(self, issue_id_or_key: str, comment_id: str, expand: Optional[List[str]] = None):
        return self._call(
            "GET",
            api_path("issue/{}/comment/{}", issue_id_or_key, comment_id),
            params={"expand": comma_list(expand)},
            target=Comment,
        )

    def add(self, issue_id_or_key: str, comment: CommentCreateRequest, expand: Optional[List[str]] = None):
        return self._call(
            "POST",
            api_path("issue/{}/comment", issue_id_or_key),
            params={"expand": comma_list(expand)},
            body=comment,
            target=Comment,
        )

    def update(
        self,
        issue_id_or_key: str,
        comment_id: str,
        comment: CommentUpdateRequest,
        *,
        notify_users: bool = True,
        override_editable_flag: bool = False,
        expand: Optional[List[str]] = None,
    ):
        params = {
            "notifyUsers": None if notify_users else "false",
            "overrideEditableFlag": override_editable_flag,
            "expand": comma_list(expand),
        }
        return self._call(
            "PUT",
            api_path("issue/{}/comment/{}", issue_id_or_key, comment_id),
            params=params,
            body=comment,
            target=Comment,
        )

    def delete(self, issue_id_or_key: str, comment_id: str):
        return self._send("DELETE", api_path("issue/{}/comment/{}", issue_id_or_key, comment_id))

    def get_by_ids(self, ids: List[int], expand: Optional[List[str]] = None):
        return self._call(
            "POST",
            api_path("comment/list"),
            params={"expand": comma_list(expand)},
            body={"ids": ids},
            target=GetCommentsByIDsResult,
        )

    def get_property_keys(self, comment_id: str):
        """Returns ([str], Response)"""
        result, response = self._call(
            "GET", api_path("comment/{}/properties", comment_id), target=PropertyKeys
        )
        return result.names(), response

    def get_property(self, comment_id: str, property_key: str):
        return self._call(
            "GET",
            api_path("comment/{}/properties/{}", comment_id, property_key),
            target=CommentProperty,
        )

    def set_property(self, comment_id: str, property_key: str, value: Any):
        return self._send(
            "PUT", api_path("comment/{}/properties/{}", comment_id, property_key), body=value
        )

    def delete_property(self, comment_id: str, property_key: str):
        return self._send("DELETE", api_path("comment/{}/properties/{}", comment_id, property_key))
