"""Subscription models."""

from __future__ import annotations

from pydantic import Field, field_validator

from seymour.models.base import SeymourModel, parse_int


class Category(SeymourModel):
    """A label a feed is filed under."""

    id: str
    label: str = ""


class Feed(SeymourModel):
    """A subscribed feed, as returned by ``subscription/list``.

    Example:
        >>> from seymour.models.feed import Feed
        >>> feed = Feed.model_validate({
        ...     "id": "feed/https://x.com/rss",
        ...     "title": "X",
        ...     "categories": [{"id": "user/-/label/News", "label": "News"}],
        ...     "htmlUrl": "https://x.com",
        ... })
        >>> feed.categories[0].label
        'News'
    """

    id: str
    title: str = ""
    categories: list[Category] = Field(default_factory=list)
    url: str = ""
    html_url: str = ""
    icon_url: str = ""
    sortid: str | None = None
    firstitemmsec: int | None = None

    # Filled in by organize_subscriptions(), never sent by the server
    count: int | None = None
    newest_item_timestamp_usec: int | None = None

    @field_validator("firstitemmsec", "newest_item_timestamp_usec", mode="before")
    @classmethod
    def parse_timestamps(cls, v: object) -> object:
        """Timestamps arrive as decimal strings."""
        return parse_int(v)


class NewFeed(SeymourModel):
    """A feed to subscribe to.

    Attributes:
        url: Feed URL; ``feed/<url>`` form optional.
        title: Display title.
    """

    url: str = Field(..., min_length=1)
    title: str | None = None


class EditFeed(SeymourModel):
    """A new title for an existing feed.

    Attributes:
        id: Feed URL or stream ID.
        title: New display title.
    """

    id: str = Field(..., min_length=1)
    title: str
