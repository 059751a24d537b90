"""Item (article) models.

Example:
    >>> from seymour.models.item import Item
    >>> item = Item.model_validate({
    ...     "id": "tag:google.com,2005:reader/item/0001",
    ...     "crawlTimeMsec": "1700000000000",
    ...     "timestampUsec": "1700000000000000",
    ...     "categories": ["user/1234/state/com.google/read"],
    ... })
    >>> item.crawl_time_msec
    1700000000000
    >>> item.is_read
    True
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from seymour.models.base import SeymourModel, parse_int
from seymour.utils.stream_id import STATE_READ, STATE_STARRED, correct_id

_TRUE_RE = re.compile(r"^true$", re.IGNORECASE)


class Link(SeymourModel):
    href: str
    type: str | None = None


class Origin(SeymourModel):
    """The feed an item came from."""

    stream_id: str
    title: str = ""
    html_url: str = ""


class Content(SeymourModel):
    content: str = ""
    direction: str | None = None


class Item(SeymourModel):
    """One item from a stream.

    ``crawl_time_msec`` and ``timestamp_usec`` are sent as decimal strings
    and parsed to ``int``.
    """

    id: str
    crawl_time_msec: int | None = None
    timestamp_usec: int | None = None
    published: int | None = None
    updated: int | None = None
    title: str = ""
    canonical: list[Link] = Field(default_factory=list)
    alternate: list[Link] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    origin: Origin | None = None
    summary: Content | None = None
    content: Content | None = None
    author: str = ""

    # A few servers send these directly instead of (or besides) categories
    read: bool | str | None = None
    starred: bool | str | None = None

    @field_validator("crawl_time_msec", "timestamp_usec", mode="before")
    @classmethod
    def parse_timestamps(cls, v: object) -> object:
        return parse_int(v)

    def _flag(self, explicit: bool | str | None, state: str) -> bool:
        if explicit is not None:
            if isinstance(explicit, bool):
                return explicit
            return bool(_TRUE_RE.match(explicit))
        return any(correct_id(category) == state for category in self.categories)

    @property
    def is_read(self) -> bool:
        """True if the item is marked read."""
        return self._flag(self.read, STATE_READ)

    @property
    def is_starred(self) -> bool:
        """True if the item is starred."""
        return self._flag(self.starred, STATE_STARRED)

    @property
    def link(self) -> str | None:
        """The item's canonical URL, falling back to the alternate one."""
        for links in (self.canonical, self.alternate):
            if links:
                return links[0].href
        return None


class ItemList(SeymourModel):
    """A page of items from ``stream/contents`` or ``stream/items/contents``.

    Attributes:
        continuation: Pass back as ``continuation`` to fetch the next page;
            absent on the last page.
    """

    id: str = ""
    title: str | None = None
    updated: int | None = None
    items: list[Item] = Field(default_factory=list)
    continuation: str | None = None
