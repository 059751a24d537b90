"""Credential state shared by every request a client makes.

Example:
    >>> from seymour.core.credentials import Credentials
    >>> creds = Credentials()
    >>> creds.auth_header() is None
    True
    >>> creds.set_auth_token("abc")
    >>> creds.auth_header()
    {'Authorization': 'GoogleLogin auth=abc'}
"""

from __future__ import annotations

from dataclasses import dataclass

AUTH_SCHEME = "GoogleLogin auth="


@dataclass
class Credentials:
    """Auth and post tokens for one account.

    Attributes:
        auth_token: Long-lived token from the ClientLogin exchange.
        post_token: Short-lived CSRF token required by POST endpoints.
    """

    auth_token: str | None = None
    post_token: str | None = None

    def set_auth_token(self, token: str | None) -> None:
        self.auth_token = token

    def set_post_token(self, token: str | None) -> None:
        self.post_token = token

    def auth_header(self) -> dict[str, str] | None:
        """Return the ``Authorization`` header, or None without an auth token."""
        if not self.auth_token:
            return None
        return {"Authorization": AUTH_SCHEME + self.auth_token}
