"""Shared fixtures: an in-process GReader server behind httpx.MockTransport."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from urllib.parse import parse_qsl

import httpx
import pytest

from seymour.reader import Reader

BASE_URL = "https://example.com/api"
API = "/api/reader/api/0/"
AUTH_PATH = "/api/accounts/ClientLogin"

Responder = httpx.Response | Callable[[httpx.Request], httpx.Response]


def form(request: httpx.Request) -> list[tuple[str, str]]:
    """Decoded form body of a request, in order."""
    return parse_qsl(request.content.decode(), keep_blank_values=True)


def query(request: httpx.Request) -> list[tuple[str, str]]:
    """Decoded query string of a request, in order."""
    return list(request.url.params.multi_items())


class MockServer:
    """Routes requests by method and path and records every request.

    Each route holds a queue of responses; the last one repeats.
    Unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], list[Responder]] = {}

    def add(self, method: str, path: str, *responses: Responder) -> None:
        self._routes[(method, path)] = list(responses)

    def api(self, method: str, endpoint: str, *responses: Responder) -> None:
        self.add(method, API + endpoint, *responses)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def api_calls(self, method: str, endpoint: str) -> list[httpx.Request]:
        return self.calls(method, API + endpoint)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # Give other tasks a turn, like a real network round trip
        await asyncio.sleep(0)

        queue = self._routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, text="not found")
        responder = queue.pop(0) if len(queue) > 1 else queue[0]
        if callable(responder):
            return responder(request)
        # Fresh copy so a repeating response can be read again
        return httpx.Response(responder.status_code, headers=responder.headers, content=responder.content)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def transport(server: MockServer) -> httpx.MockTransport:
    return httpx.MockTransport(server.handler)


@pytest.fixture
async def reader(transport: httpx.MockTransport) -> Reader:
    """Reader with an auth token already set."""
    r = Reader(BASE_URL, transport=transport)
    r.set_auth_token("AUTH")
    yield r
    await r.close()
