"""GReader API client.

:class:`Reader` maps each API operation onto a
:class:`~seymour.http.request.RequestDescriptor` and hands it to the
request engine. Feed, label and state arguments may be given bare or in
stream ID form; they are canonicalized before sending.

Example:
    >>> from seymour import Reader
    >>>
    >>> async with Reader("https://rss.example.com/api/greader.php") as reader:
    ...     await reader.get_auth_token("me@example.com", "secret")
    ...     for feed in await reader.get_feeds():
    ...         print(feed.title)
    ...     page = await reader.get_items("user/-/state/com.google/reading-list", num=20)
    ...     await reader.mark_items_read([item.id for item in page.items])
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from typing import Any, Literal
from urllib.parse import quote

import httpx

from seymour.auth import CredentialManager
from seymour.core.config import DEFAULT_CLIENT, Settings, get_settings
from seymour.core.credentials import Credentials
from seymour.core.exceptions import ConfigurationError, InvalidArgumentError
from seymour.http.client import HttpClient, gather_requests
from seymour.http.request import HttpMethod, RequestDescriptor, ResponseType
from seymour.models.account import Tag, UnreadCount, UserInfo
from seymour.models.feed import EditFeed, Feed, NewFeed
from seymour.models.item import Item, ItemList
from seymour.organize import Subscriptions, organize_subscriptions
from seymour.utils.stream_id import STATE_READ, STATE_STARRED, feed_id, label_id, tag_id

logger = logging.getLogger(__name__)

PATH_BASE = "/reader/api/0/"
PATH_AUTH = "/accounts/ClientLogin"

DEFAULT_NUM = 50

Sort = Literal["asc", "desc"]


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _stream_params(
    continuation: str | None,
    num: int | None,
    sort: Sort,
    exclude: str | None,
    s_min: int | None,
    s_max: int | None,
) -> dict[str, Any]:
    if sort not in ("asc", "desc"):
        raise InvalidArgumentError(f"sort must be 'asc' or 'desc', not {sort!r}")
    return {
        "c": continuation or None,
        "n": num if num is not None else DEFAULT_NUM,
        "r": "o" if sort == "asc" else "d",
        "xt": exclude or None,
        "ot": s_min,
        "nt": s_max,
    }


class Reader:
    """Client for one account on a GReader-compatible server.

    Args:
        url: Server base URL, e.g. ``https://host/api/greader.php``.
        client: Client identifier sent with every request.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header.
        credentials: Token state to share (fresh if omitted).
        http_client: Externally owned ``httpx.AsyncClient``.
        transport: Transport for the internally created client.

    Raises:
        InvalidArgumentError: ``url`` is empty.
    """

    def __init__(
        self,
        url: str,
        client: str | None = None,
        *,
        timeout: float = 30.0,
        user_agent: str = "Seymour/0.1",
        credentials: Credentials | None = None,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url:
            raise InvalidArgumentError("url is required")

        base = url.rstrip("/")
        self.url = base + PATH_BASE
        self.url_auth = base + PATH_AUTH
        self.client = client or DEFAULT_CLIENT

        self._http = HttpClient(
            credentials,
            self.client,
            timeout=timeout,
            user_agent=user_agent,
            http_client=http_client,
            transport=transport,
        )
        self._auth = CredentialManager(self._http, self.url_auth, self.url + "token")
        self._http.token_refresher = self._auth.refresh_post_token

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> Reader:
        """Build a reader from :class:`~seymour.core.config.Settings`.

        A stored ``auth_token`` setting is loaded into the new reader.

        Raises:
            ConfigurationError: No base URL is configured.
        """
        settings = settings or get_settings()
        if not settings.base_url:
            raise ConfigurationError("SEYMOUR_BASE_URL is not set")

        reader = cls(
            settings.base_url,
            settings.client,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            **kwargs,
        )
        if settings.auth_token:
            reader.set_auth_token(settings.auth_token)
        return reader

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> Reader:
        await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------

    @property
    def credentials(self) -> Credentials:
        return self._http.credentials

    @property
    def auth_token(self) -> str | None:
        return self._auth.auth_token

    @property
    def post_token(self) -> str | None:
        return self._auth.post_token

    async def get_auth_token(self, username: str, password: str) -> str:
        """Log in and store the auth token. See :class:`~seymour.auth.CredentialManager`."""
        return await self._auth.get_auth_token(username, password)

    def set_auth_token(self, token: str | None) -> None:
        self._auth.set_auth_token(token)

    async def get_post_token(self) -> str:
        """Fetch and store a new post token."""
        return await self._auth.get_post_token()

    def set_post_token(self, token: str | None) -> None:
        self._auth.set_post_token(token)

    async def login(self, settings: Settings | None = None) -> str:
        """Log in with the username and password from settings."""
        settings = settings or get_settings()
        return await self.get_auth_token(settings.username or "", settings.password or "")

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    async def _get(self, path: str, params: Any = None) -> Any:
        return await self._http.execute(RequestDescriptor(url=self.url + path, params=params))

    async def _post(self, path: str, params: Any, response_type: ResponseType = ResponseType.TEXT) -> Any:
        return await self._http.execute(
            RequestDescriptor(
                url=self.url + path,
                method=HttpMethod.POST,
                params=params,
                response_type=response_type,
            )
        )

    async def _edit_feed(self, params: list[tuple[str, Any]]) -> str:
        return await self._post("subscription/edit", params)

    # -------------------------------------------------------------------------
    # Feeds
    # -------------------------------------------------------------------------

    async def get_feeds(self) -> list[Feed]:
        """List subscribed feeds."""
        res = await self._get("subscription/list")
        return [Feed.model_validate(f) for f in res["subscriptions"]]

    async def add_feed(
        self,
        feed: str | NewFeed | Sequence[NewFeed],
        *,
        tag: str | None = None,
    ) -> str:
        """Subscribe to one or more feeds.

        Args:
            feed: Feed URL, or one or more :class:`NewFeed` with titles.
            tag: Label to file the new feed(s) under; created if missing.
        """
        if not feed:
            raise InvalidArgumentError("url or feed object(s) required")

        params: list[tuple[str, Any]] = [("ac", "subscribe")]
        if isinstance(feed, str):
            params.append(("s", feed_id(feed)))
        else:
            for f in _as_list(feed):
                f = NewFeed.model_validate(f)
                params.append(("s", feed_id(f.url)))
                params.append(("t", f.title or ""))

        if tag:
            params.append(("a", label_id(tag)))

        return await self._edit_feed(params)

    async def remove_feed(self, stream_id: str | Sequence[str]) -> str:
        """Unsubscribe from one or more feeds."""
        if not stream_id:
            raise InvalidArgumentError("streamId(s) required")

        params: list[tuple[str, Any]] = [("ac", "unsubscribe")]
        params.extend(("s", feed_id(s)) for s in _as_list(stream_id))
        return await self._edit_feed(params)

    async def rename_feed(self, feed: EditFeed | Sequence[EditFeed]) -> str:
        """Rename one or more feeds."""
        if not feed:
            raise InvalidArgumentError("feed object(s) required")

        params: list[tuple[str, Any]] = [("ac", "edit")]
        for f in _as_list(feed):
            f = EditFeed.model_validate(f)
            params.append(("s", feed_id(f.id)))
            params.append(("t", f.title))
        return await self._edit_feed(params)

    async def set_feed_tag(
        self,
        stream_id: str | Sequence[str],
        *,
        add: str | None = None,
        remove: str | None = None,
    ) -> str:
        """Add a label to and/or remove a label from one or more feeds."""
        if not stream_id:
            raise InvalidArgumentError("streamId(s) required")

        params: list[tuple[str, Any]] = [("ac", "edit")]
        params.extend(("s", feed_id(s)) for s in _as_list(stream_id))
        if add:
            params.append(("a", label_id(add)))
        if remove:
            params.append(("r", label_id(remove)))
        return await self._edit_feed(params)

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    async def get_items(
        self,
        stream_id: str,
        *,
        continuation: str | None = None,
        num: int | None = None,
        sort: Sort = "desc",
        exclude: str | None = None,
        s_min: int | None = None,
        s_max: int | None = None,
    ) -> ItemList:
        """Fetch one page of items from a stream.

        Args:
            stream_id: Stream to read (feed, label or state stream ID).
            continuation: Token from a previous page.
            num: Items per page (default 50).
            sort: ``desc`` (newest first) or ``asc``.
            exclude: Stream ID to exclude, e.g. the read state.
            s_min: Skip items older than this (seconds).
            s_max: Skip items newer than this (seconds).
        """
        if not stream_id:
            raise InvalidArgumentError("streamId required")

        params = _stream_params(continuation, num, sort, exclude, s_min, s_max)
        res = await self._get("stream/contents/" + quote(stream_id, safe=""), params)
        return ItemList.model_validate(res)

    async def iter_items(
        self,
        stream_id: str,
        *,
        limit: int | None = None,
        **opts: Any,
    ) -> AsyncIterator[Item]:
        """Yield items from a stream, following continuations.

        Args:
            stream_id: Stream to read.
            limit: Stop after this many items.
            **opts: Passed to :meth:`get_items`.
        """
        if limit is not None and limit <= 0:
            return
        continuation = opts.pop("continuation", None)
        seen = 0
        while True:
            page = await self.get_items(stream_id, continuation=continuation, **opts)
            for item in page.items:
                if limit is not None and seen >= limit:
                    return
                seen += 1
                yield item
            if not page.continuation or not page.items:
                return
            continuation = page.continuation
            logger.debug("following continuation %s for %s", continuation, stream_id)

    async def get_items_by_id(self, item_id: str | Sequence[str]) -> ItemList:
        """Fetch items by ID."""
        if not item_id:
            raise InvalidArgumentError("item id(s) required")

        params = [("i", i) for i in _as_list(item_id)]
        res = await self._post("stream/items/contents", params, ResponseType.JSON)
        return ItemList.model_validate(res)

    async def get_item_ids(
        self,
        stream_id: str,
        *,
        continuation: str | None = None,
        num: int | None = None,
        sort: Sort = "desc",
        exclude: str | None = None,
        s_min: int | None = None,
        s_max: int | None = None,
    ) -> list[str]:
        """List item IDs in a stream. Options as for :meth:`get_items`."""
        if not stream_id:
            raise InvalidArgumentError("streamId required")

        params = {"s": stream_id, **_stream_params(continuation, num, sort, exclude, s_min, s_max)}
        res = await self._get("stream/items/ids", params)
        return [ref["id"] for ref in res.get("itemRefs", [])]

    async def _set_item_tag(
        self,
        item_id: str | Sequence[str],
        tag: str | Sequence[str],
        mode: Literal["add", "remove"],
    ) -> str:
        if not item_id or not tag:
            raise InvalidArgumentError("itemId and tag required")

        params: list[tuple[str, Any]] = [("i", i) for i in _as_list(item_id)]
        key = "a" if mode == "add" else "r"
        params.extend((key, tag_id(t)) for t in _as_list(tag))
        return await self._post("edit-tag", params)

    async def add_item_tag(self, item_id: str | Sequence[str], tag: str | Sequence[str]) -> str:
        """Tag one or more items. Bare tag names are treated as labels."""
        return await self._set_item_tag(item_id, tag, "add")

    async def remove_item_tag(self, item_id: str | Sequence[str], tag: str | Sequence[str]) -> str:
        """Untag one or more items."""
        return await self._set_item_tag(item_id, tag, "remove")

    async def mark_items_read(self, item_id: str | Sequence[str]) -> str:
        return await self.add_item_tag(item_id, STATE_READ)

    async def mark_items_unread(self, item_id: str | Sequence[str]) -> str:
        return await self.remove_item_tag(item_id, STATE_READ)

    async def star_items(self, item_id: str | Sequence[str]) -> str:
        return await self.add_item_tag(item_id, STATE_STARRED)

    async def unstar_items(self, item_id: str | Sequence[str]) -> str:
        return await self.remove_item_tag(item_id, STATE_STARRED)

    async def set_item_tag_pairs(
        self,
        pairs: Sequence[tuple[str, str]],
        tag: str,
        *,
        add: bool = True,
    ) -> str:
        """Tag items using paired item/stream IDs.

        Some servers expect each ``i`` followed by the ``s`` of the stream
        the item belongs to; the pairs are sent in the order given.

        Args:
            pairs: ``(item_id, stream_id)`` tuples.
            tag: Tag to add or remove.
            add: Remove instead of add when False.
        """
        if not pairs or not tag:
            raise InvalidArgumentError("item/stream pairs and tag required")

        params: list[tuple[str, Any]] = [
            ("async", True),
            ("ac", "edit-tags"),
            ("a" if add else "r", tag_id(tag)),
        ]
        for item, stream in pairs:
            params.append(("i", item))
            params.append(("s", stream))
        return await self._post("edit-tag", params)

    async def set_all_read(self, stream_id: str, *, us_max: int | None = None) -> str:
        """Mark every item in a stream read.

        Args:
            stream_id: Feed, label or state stream ID.
            us_max: Leave items newer than this (microseconds) unread.
        """
        if not stream_id:
            raise InvalidArgumentError("streamId required")

        return await self._post("mark-all-as-read", {"s": stream_id, "ts": us_max})

    # -------------------------------------------------------------------------
    # Tags, counts, user
    # -------------------------------------------------------------------------

    async def get_tags(self) -> list[Tag]:
        res = await self._get("tag/list")
        return [Tag.model_validate(t) for t in res["tags"]]

    async def rename_tag(self, tag: str, new_tag: str) -> str:
        """Rename a label. Either name may be given in stream ID form."""
        if not tag or not new_tag:
            raise InvalidArgumentError("tag and new tag required")

        return await self._post("rename-tag", {"s": label_id(tag), "dest": label_id(new_tag)})

    async def get_unread_counts(self) -> list[UnreadCount]:
        res = await self._get("unread-count")
        return [UnreadCount.model_validate(uc) for uc in res["unreadcounts"]]

    async def get_user_info(self) -> UserInfo:
        res = await self._get("user-info")
        return UserInfo.model_validate(res)

    async def get_subscriptions(self) -> Subscriptions:
        """Fetch feeds, tags and unread counts and group feeds by label."""
        feeds, tags, counts = await gather_requests(
            self._http,
            RequestDescriptor(url=self.url + "subscription/list"),
            RequestDescriptor(url=self.url + "tag/list"),
            RequestDescriptor(url=self.url + "unread-count"),
        )
        return organize_subscriptions(
            [Feed.model_validate(f) for f in feeds["subscriptions"]],
            [Tag.model_validate(t) for t in tags["tags"]],
            [UnreadCount.model_validate(uc) for uc in counts["unreadcounts"]],
        )
