"""Tests for seymour.auth - token exchange."""

from __future__ import annotations

import httpx
import pytest

from conftest import AUTH_PATH, BASE_URL, MockServer, form, query
from seymour.auth import parse_auth_token
from seymour.core.exceptions import ApiError, InvalidArgumentError
from seymour.reader import Reader


@pytest.fixture
async def anon(transport: httpx.MockTransport) -> Reader:
    """Reader with no tokens."""
    r = Reader(BASE_URL, transport=transport)
    yield r
    await r.close()


class TestParseAuthToken:
    def test_third_line(self) -> None:
        assert parse_auth_token("SID=a\nLSID=b\nAuth=TOKEN123\n") == "TOKEN123"

    def test_any_line(self) -> None:
        assert parse_auth_token("Auth=abc") == "abc"

    def test_missing(self) -> None:
        assert parse_auth_token("Error=BadAuthentication\n") is None


class TestGetAuthToken:
    """ClientLogin exchange."""

    async def test_returns_and_stores_token(self, anon: Reader, server: MockServer) -> None:
        server.add("POST", AUTH_PATH, httpx.Response(200, text="a\nb\nAuth=TOKEN123\n"))

        token = await anon.get_auth_token("a@b.com", "pw")

        assert token == "TOKEN123"
        assert anon.auth_token == "TOKEN123"

    async def test_sends_credentials_as_form(self, anon: Reader, server: MockServer) -> None:
        server.add("POST", AUTH_PATH, httpx.Response(200, text="Auth=T\n"))

        await anon.get_auth_token("a@b.com", "pw")

        request = server.calls("POST", AUTH_PATH)[0]
        assert str(request.url) == "https://example.com/api/accounts/ClientLogin"
        assert form(request) == [("Email", "a@b.com"), ("Passwd", "pw")]
        assert "Authorization" not in request.headers

    async def test_token_used_by_next_request(self, anon: Reader, server: MockServer) -> None:
        server.add("POST", AUTH_PATH, httpx.Response(200, text="SID=x\nLSID=y\nAuth=NEW\n"))
        server.api("GET", "user-info", httpx.Response(200, json={}))

        await anon.get_auth_token("a@b.com", "pw")
        await anon.get_user_info()

        assert server.api_calls("GET", "user-info")[0].headers["Authorization"] == "GoogleLogin auth=NEW"

    @pytest.mark.parametrize("username,password", [("", "pw"), ("a@b.com", ""), ("", "")])
    async def test_empty_credentials(self, anon: Reader, server: MockServer, username: str, password: str) -> None:
        with pytest.raises(InvalidArgumentError):
            await anon.get_auth_token(username, password)

        assert server.requests == []

    async def test_rejected(self, anon: Reader, server: MockServer) -> None:
        server.add("POST", AUTH_PATH, httpx.Response(403, text="Error=BadAuthentication"))

        with pytest.raises(ApiError) as exc_info:
            await anon.get_auth_token("a@b.com", "wrong")

        assert exc_info.value.status == 403
        assert exc_info.value.body == "Error=BadAuthentication"
        assert anon.auth_token is None

    async def test_rejected_401_not_retried(self, anon: Reader, server: MockServer) -> None:
        """Login failures never go through the post token refresh."""
        server.add("POST", AUTH_PATH, httpx.Response(401, text="Unauthorized"))

        with pytest.raises(ApiError):
            await anon.get_auth_token("a@b.com", "pw")

        assert len(server.requests) == 1

    async def test_no_auth_line(self, anon: Reader, server: MockServer) -> None:
        server.add("POST", AUTH_PATH, httpx.Response(200, text="SID=x\n"))

        with pytest.raises(ApiError):
            await anon.get_auth_token("a@b.com", "pw")


class TestGetPostToken:
    async def test_stores_body_verbatim(self, reader: Reader, server: MockServer) -> None:
        server.api("GET", "token", httpx.Response(200, text="POSTTOKEN"))

        token = await reader.get_post_token()

        assert token == "POSTTOKEN"
        assert reader.post_token == "POSTTOKEN"

    async def test_sends_auth_header(self, reader: Reader, server: MockServer) -> None:
        server.api("GET", "token", httpx.Response(200, text="P"))

        await reader.get_post_token()

        request = server.api_calls("GET", "token")[0]
        assert request.headers["Authorization"] == "GoogleLogin auth=AUTH"
        assert query(request) == []

    async def test_requires_auth_token(self, anon: Reader, server: MockServer) -> None:
        with pytest.raises(InvalidArgumentError):
            await anon.get_post_token()

        assert server.requests == []

    async def test_rejected(self, reader: Reader, server: MockServer) -> None:
        server.api("GET", "token", httpx.Response(401, text="Unauthorized"))

        with pytest.raises(ApiError) as exc_info:
            await reader.get_post_token()

        assert exc_info.value.status == 401


class TestSetters:
    def test_set_tokens(self) -> None:
        r = Reader(BASE_URL)
        r.set_auth_token("A")
        r.set_post_token("P")
        assert r.auth_token == "A"
        assert r.post_token == "P"
        assert r.credentials.auth_header() == {"Authorization": "GoogleLogin auth=A"}
