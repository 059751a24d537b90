"""Auth and post token exchange.

The GReader API layers two tokens:

- The *auth* token comes from a ClientLogin username/password exchange
  and is sent as ``Authorization: GoogleLogin auth=<token>``.
- The *post* token is a short-lived CSRF token fetched with the auth
  token and sent as ``T`` in POST bodies. Servers expire it silently;
  :class:`~seymour.http.client.HttpClient` calls
  :meth:`CredentialManager.refresh_post_token` when a POST is rejected.

Neither token is persisted here; store them yourself and inject them
with :meth:`CredentialManager.set_auth_token` on the next run.
"""

from __future__ import annotations

import asyncio
import logging

from seymour.core.credentials import Credentials
from seymour.core.exceptions import ApiError, InvalidArgumentError
from seymour.http.client import HttpClient

logger = logging.getLogger(__name__)

AUTH_LINE_PREFIX = "Auth="


def parse_auth_token(body: str) -> str | None:
    """Extract the auth token from a ClientLogin response body.

    Example:
        >>> parse_auth_token("SID=x\\nLSID=y\\nAuth=TOKEN123\\n")
        'TOKEN123'
        >>> parse_auth_token("Error=BadAuthentication") is None
        True
    """
    for line in body.splitlines():
        if line.startswith(AUTH_LINE_PREFIX):
            return line[len(AUTH_LINE_PREFIX):].strip()
    return None


class CredentialManager:
    """Obtains and holds the tokens for one account.

    Args:
        http: Engine used to reach the server.
        auth_url: Full ClientLogin URL.
        token_url: Full post token URL.
    """

    def __init__(self, http: HttpClient, auth_url: str, token_url: str) -> None:
        self.http = http
        self.auth_url = auth_url
        self.token_url = token_url
        self._refresh_task: asyncio.Future[str] | None = None

    @property
    def credentials(self) -> Credentials:
        return self.http.credentials

    @property
    def auth_token(self) -> str | None:
        return self.credentials.auth_token

    @property
    def post_token(self) -> str | None:
        return self.credentials.post_token

    def set_auth_token(self, token: str | None) -> None:
        self.credentials.set_auth_token(token)

    def set_post_token(self, token: str | None) -> None:
        self.credentials.set_post_token(token)

    async def get_auth_token(self, username: str, password: str) -> str:
        """Exchange a username and password for an auth token.

        The token is stored and returned.

        Raises:
            InvalidArgumentError: Username or password is empty.
            ApiError: The server rejected the login or sent no ``Auth=`` line.
        """
        if not username or not password:
            raise InvalidArgumentError("missing username or password")

        response = await self.http.send(
            "POST",
            self.auth_url,
            form=[("Email", username), ("Passwd", password)],
        )
        body = response.text
        if not response.is_success:
            raise ApiError(body, response.status_code)

        token = parse_auth_token(body)
        if token is None:
            raise ApiError(body, response.status_code)

        self.set_auth_token(token)
        logger.debug("obtained auth token for %s", username)
        return token

    async def get_post_token(self) -> str:
        """Fetch a new post token, store it verbatim and return it.

        Raises:
            InvalidArgumentError: No auth token is set.
            ApiError: The server rejected the request.
        """
        headers = self.credentials.auth_header()
        if headers is None:
            raise InvalidArgumentError("auth token required")

        response = await self.http.send("GET", self.token_url, headers=headers)
        body = response.text
        if not response.is_success:
            raise ApiError(body, response.status_code)

        self.set_post_token(body)
        return body

    async def refresh_post_token(self) -> str:
        """Refresh the post token, sharing one request among concurrent callers.

        A caller arriving while a refresh is in flight awaits that refresh
        instead of starting another; its result or error goes to everyone.
        """
        task = self._refresh_task
        if task is None or task.done():
            task = asyncio.ensure_future(self.get_post_token())
            self._refresh_task = task
        else:
            logger.debug("joining in-flight post token refresh")
        return await asyncio.shield(task)
