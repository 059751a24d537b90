"""HTTP request engine for the GReader API.

Every API call goes through :meth:`HttpClient.execute`, which:
- Encodes parameters for the HTTP method
- Attaches the ``GoogleLogin`` auth header and the post token
- Decodes successful responses
- Refreshes a stale post token and retries a rejected POST once

Example:
    >>> from seymour.core.credentials import Credentials
    >>> from seymour.http import HttpClient, RequestDescriptor
    >>>
    >>> async with HttpClient(Credentials(auth_token="abc")) as client:
    ...     data = await client.execute(
    ...         RequestDescriptor(url="https://example.com/reader/api/0/user-info")
    ...     )
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Any
from urllib.parse import urlencode

import httpx

from seymour.core.config import DEFAULT_CLIENT
from seymour.core.credentials import Credentials
from seymour.core.exceptions import ApiError, ConfigurationError
from seymour.http.request import (
    HttpMethod,
    RequestDescriptor,
    ResponseType,
    encode_params,
)

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Statuses that mean "post token is stale" when returned for a POST
STALE_TOKEN_STATUSES = (400, 401)

TokenRefresher = Callable[[], Awaitable[Any]]


class HttpClient:
    """Async request engine shared by all API operations.

    Reads tokens from a :class:`~seymour.core.credentials.Credentials`
    object on every call, so a token set or refreshed by one call is seen
    by the next.

    Attributes:
        credentials: Token state read on every request.
        client_id: Value of the ``client`` query parameter.
        token_refresher: Coroutine function called when a POST is rejected
            with 400/401. Normally ``CredentialManager.refresh_post_token``.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        client_id: str = DEFAULT_CLIENT,
        *,
        timeout: float = 30.0,
        user_agent: str = "Seymour/0.1",
        token_refresher: TokenRefresher | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            credentials: Shared token state (a fresh one if omitted).
            client_id: Client identifier sent with every request.
            timeout: Default request timeout in seconds.
            user_agent: User-Agent header.
            token_refresher: Called to refresh the post token.
            http_client: Externally owned httpx client to use instead of
                creating one. It is not closed by :meth:`close`.
            transport: Transport for the internally created client (tests
                pass ``httpx.MockTransport``).
        """
        self.credentials = credentials if credentials is not None else Credentials()
        self.client_id = client_id
        self.token_refresher = token_refresher
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def timeout(self) -> float:
        """Default request timeout in seconds."""
        return self._timeout

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {"User-Agent": self._user_agent}

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the httpx client if this engine created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def send(
        self,
        method: str,
        url: str,
        *,
        params: list[tuple[str, str]] | None = None,
        form: list[tuple[str, str]] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and return the response without classifying it.

        Args:
            method: HTTP method.
            url: Absolute URL.
            params: Query string pairs.
            form: Form body pairs, sent URL-encoded.
            headers: Extra headers.

        Returns:
            The raw httpx response, whatever its status.
        """
        client = await self._ensure_client()
        request_headers = dict(headers or {})
        content: str | None = None
        if form is not None:
            request_headers["Content-Type"] = FORM_CONTENT_TYPE
            content = urlencode(form)

        logger.debug("%s %s", method, url)
        response = await client.request(
            method,
            url,
            params=params,
            content=content,
            headers=request_headers,
        )
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _build(self, descriptor: RequestDescriptor, pairs: list[tuple[str, str]]) -> dict[str, Any]:
        """Split parameters into query and body for the descriptor's method."""
        headers: dict[str, str] = {}
        if not descriptor.no_auth:
            auth = self.credentials.auth_header()
            if auth:
                headers.update(auth)

        if descriptor.method is HttpMethod.GET:
            query = [
                *pairs,
                ("ck", str(int(time.time() * 1000))),
                ("output", "json"),
                ("client", self.client_id),
            ]
            return {"params": query, "form": None, "headers": headers}

        body = list(pairs)
        if self.credentials.post_token:
            body.append(("T", self.credentials.post_token))
        return {"params": [("client", self.client_id)], "form": body, "headers": headers}

    @staticmethod
    def _decode(response: httpx.Response, response_type: ResponseType) -> Any:
        if response_type is ResponseType.JSON:
            return response.json()
        if response_type is ResponseType.TEXT:
            return response.text
        return response

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """Run one API call.

        Args:
            descriptor: What to call and how to decode the result.

        Returns:
            Decoded JSON, text, or the raw response, per
            ``descriptor.response_type``.

        Raises:
            ApiError: Non-2xx response (after at most one retry for POST).
            httpx.RequestError: Transport failure, unwrapped.
        """
        pairs = encode_params(descriptor.params)
        parts = self._build(descriptor, pairs)
        response = await self.send(descriptor.method.value, descriptor.url, **parts)

        if response.is_success:
            return self._decode(response, descriptor.response_type)

        if (
            descriptor.is_post
            and not descriptor.is_retry
            and response.status_code in STALE_TOKEN_STATUSES
        ):
            logger.info("got %s; requesting post token", response.status_code)
            await self.refresh_post_token()

            logger.info("got post token; retrying %s", descriptor.url)
            return await self.execute(replace(descriptor, params=pairs, is_retry=True))

        raise ApiError(response.text, response.status_code)

    async def refresh_post_token(self) -> Any:
        """Ask the configured refresher for a new post token."""
        if self.token_refresher is None:
            raise ConfigurationError("no token_refresher configured")
        return await self.token_refresher()


async def gather_requests(client: HttpClient, *descriptors: RequestDescriptor) -> list[Any]:
    """Execute several descriptors concurrently, preserving order."""
    return list(await asyncio.gather(*(client.execute(d) for d in descriptors)))


__all__ = [
    "FORM_CONTENT_TYPE",
    "HttpClient",
    "TokenRefresher",
    "gather_requests",
]
