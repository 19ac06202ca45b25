"""
Attachments - Issue attachments: metadata, archives, downloads and uploads
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from jiracloud.models import Attachment
from jiracloud.services.base import Service, api_path
from jiracloud.types import JiraModel, json_field


@dataclass
class AttachmentSettings(JiraModel):
    """Whether attachments are enabled and the upload limit in bytes"""

    enabled: Optional[bool] = None
    upload_limit: Optional[int] = None


AttachmentMeta = AttachmentSettings


@dataclass
class AttachmentEntry(JiraModel):
    entry_index: Optional[int] = None
    name: Optional[str] = None
    size: Optional[int] = None
    media_type: Optional[str] = None


@dataclass
class ExpandedContent(JiraModel):
    """Listing of an archive attachment (zip and friends)"""

    id: Optional[str] = None
    media_type: Optional[str] = None
    name: Optional[str] = None
    self_url: Optional[str] = json_field("self")
    entries: Optional[List[AttachmentEntry]] = None
    total_entry_count: Optional[int] = None


class AttachmentsService(Service):
    """Attachment endpoints (/rest/api/3/attachment, /rest/api/3/issue/{key}/attachments)"""

    def get_meta(self):
        return self._call("GET", api_path("attachment/meta"), target=AttachmentMeta)

    def get_settings(self):
        return self._call("GET", api_path("attachment/meta"), target=AttachmentSettings)

    def get(self, attachment_id: str):
        return self._call("GET", api_path("attachment/{}", attachment_id), target=Attachment)

    def delete(self, attachment_id: str):
        return self._send("DELETE", api_path("attachment/{}", attachment_id))

    def expand(self, attachment_id: str):
        """Archive contents, in human readable form"""
        return self._call(
            "GET", api_path("attachment/{}/expand/human", attachment_id), target=ExpandedContent
        )

    def expand_raw(self, attachment_id: str):
        return self._call(
            "GET", api_path("attachment/{}/expand/raw", attachment_id), target=ExpandedContent
        )

    def download(self, attachment_id: str):
        """
        Stream an attachment's content

        Returns:
            (file-like raw body, Response); the caller reads and closes it
        """
        return self._call("GET", api_path("attachment/content/{}", attachment_id), stream=True)

    def get_thumbnail(
        self,
        attachment_id: str,
        *,
        width: int = 0,
        height: int = 0,
        fallback_to_default: bool = False,
    ):
        """Stream a thumbnail of an image attachment, as download() does"""
        params = {"width": width, "height": height, "fallbackToDefault": fallback_to_default}
        return self._call(
            "GET",
            api_path("attachment/thumbnail/{}", attachment_id),
            params=params,
            stream=True,
        )

    def add_to_issue(self, issue_id_or_key: str, files: Mapping[str, Any]):
        """
        Upload files to an issue

        Args:
            issue_id_or_key: e.g. "PROJ-1"
            files: Filename to content (bytes or an open binary file)

        Returns:
            ([Attachment], Response)
        """
        request = self.client.new_multipart_request(
            "POST", api_path("issue/{}/attachments", issue_id_or_key), files.items()
        )
        return self.client.do(request, List[Attachment])

    def add_to_issue_from_bytes(self, issue_id_or_key: str, filename: str, data: bytes):
        return self.add_to_issue(issue_id_or_key, {filename: data})
