"""
Jira Authentication - Credential strategies applied to outgoing requests
"""

from requests.auth import AuthBase, HTTPBasicAuth


class BasicAuth(HTTPBasicAuth):
    """Email and API token, sent as ``Authorization: Basic <base64(email:token)>``"""

    def __init__(self, email: str, api_token: str):
        super().__init__(email, api_token)

    @property
    def email(self) -> str:
        return self.username

    @property
    def api_token(self) -> str:
        return self.password

    def __repr__(self):
        return f"BasicAuth(email={self.email!r})"


class BearerAuth(AuthBase):
    """OAuth or personal access token, sent as ``Authorization: Bearer <token>``"""

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r):
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r

    def __eq__(self, other):
        return isinstance(other, BearerAuth) and self.token == other.token

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "BearerAuth(token=***)"
