"""
Service base - Shared plumbing for the per-resource Jira services
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote

API_VERSION = "3"

API_PREFIX = f"/rest/api/{API_VERSION}"


def api_path(template: str, *args: Any) -> str:
    """
    Build an API path, quoting each path parameter

        api_path("issue/{}/comment/{}", "PROJ-1", 10010)
        -> "/rest/api/3/issue/PROJ-1/comment/10010"
    """
    quoted = [quote(str(arg), safe="") for arg in args]
    return f"{API_PREFIX}/{template.format(*quoted)}"


def comma_list(values: Optional[Iterable[Any]]) -> Optional[str]:
    """Join list parameters Jira expects as one comma separated value"""
    if not values:
        return None
    return ",".join(str(v) for v in values)


def optional_bool(value: Optional[bool]) -> Optional[str]:
    """Query value for a flag that has to distinguish unset from false"""
    if value is None:
        return None
    return "true" if value else "false"


def move_body(ids: Iterable[Any], position: Optional[str], after: Optional[str]) -> Dict[str, Any]:
    """Body of the reorder endpoints: a "First"/"Last" position or the ID to follow"""
    body: Dict[str, Any] = {"ids": list(ids)}
    if position:
        body["position"] = position
    if after:
        body["after"] = after
    return body


class Service:
    """A group of related endpoints sharing one client"""

    def __init__(self, client):
        self.client = client

    def __repr__(self):
        return f"{type(self).__name__}({self.client.base_url!r})"

    def _call(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        target: Any = None,
        stream: bool = False,
    ) -> Tuple[Any, Any]:
        request = self.client.new_request(method, path, body, params=params)
        return self.client.do(request, target, stream=stream)

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ):
        """For calls that return nothing but the response"""
        _, response = self._call(method, path, params=params, body=body)
        return response

    def _upload(
        self,
        path: str,
        data: Any,
        content_type: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        target: Any = None,
    ) -> Tuple[Any, Any]:
        """POST a binary body such as an image"""
        request = self.client.new_raw_request("POST", path, data, content_type, params=params)
        return self.client.do(request, target)
