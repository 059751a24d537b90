"""Group subscriptions under their labels.

Turns the three flat lists the API returns (feeds, tags, unread counts)
into the folder tree a reader UI shows:

- An "All" entry for the reading list, holding every feed
- One entry per label that has feeds, plus "Starred"
- Unlabeled feeds after the labels

Example:
    >>> from seymour.models import Feed, Tag, UnreadCount
    >>> from seymour.organize import organize_subscriptions
    >>> feeds = [Feed(id="feed/a", categories=[{"id": "user/9/label/News", "label": "News"}])]
    >>> tags = [Tag(id="user/9/label/News")]
    >>> counts = [UnreadCount(id="feed/a", count=2)]
    >>> subs = organize_subscriptions(feeds, tags, counts)
    >>> [label.title for label in subs.labels]
    ['All', 'News']
    >>> subs.labels[1].feeds[0].count
    2
"""

from __future__ import annotations

from pydantic import Field

from seymour.models.account import Tag, UnreadCount
from seymour.models.base import SeymourModel
from seymour.models.feed import Feed
from seymour.utils.stream_id import (
    STATE_BLOGGER_FOLLOWING,
    STATE_BROADCAST,
    STATE_READING_LIST,
    STATE_STARRED,
    correct_id,
)

HIDDEN_STREAMS = frozenset({STATE_BROADCAST, STATE_BLOGGER_FOLLOWING, STATE_READING_LIST})


class LabelGroup(SeymourModel):
    """A label (or special stream) and the feeds filed under it."""

    id: str
    title: str
    feeds: list[Feed] = Field(default_factory=list)
    count: int | None = None
    newest_item_timestamp_usec: int | None = None
    is_special: bool = False
    is_all: bool = False


class Subscriptions(SeymourModel):
    labels: list[LabelGroup] = Field(default_factory=list)
    unlabeled: list[Feed] = Field(default_factory=list)


def _title_from_id(stream_id: str) -> str:
    return stream_id.rstrip("/").rsplit("/", 1)[-1]


def organize_subscriptions(
    feeds: list[Feed],
    tags: list[Tag],
    unread_counts: list[UnreadCount],
) -> Subscriptions:
    """Group feeds by label and attach unread counts.

    Stream IDs are compared after :func:`~seymour.utils.stream_id.correct_id`,
    so ``user/1234/label/x`` and ``user/-/label/x`` match. Inputs are not
    modified; feeds appear as copies.

    Args:
        feeds: From ``Reader.get_feeds()``.
        tags: From ``Reader.get_tags()``.
        unread_counts: From ``Reader.get_unread_counts()``.

    Returns:
        Labels in tag order after "All", and feeds with no label.
    """
    counts = {correct_id(uc.id): uc for uc in unread_counts}

    def with_count(feed: Feed) -> Feed:
        feed_id = correct_id(feed.id)
        unread = counts.get(feed_id)
        update: dict[str, object] = {"id": feed_id}
        if unread is not None:
            update["count"] = unread.count
            update["newest_item_timestamp_usec"] = unread.newest_item_timestamp_usec
        return feed.model_copy(update=update)

    counted = [with_count(feed) for feed in feeds]

    labels = [
        LabelGroup(
            id=STATE_READING_LIST,
            title="All",
            feeds=list(counted),
            is_all=True,
            is_special=True,
        )
    ]
    by_id: dict[str, LabelGroup] = {}
    for tag in tags:
        tag_id = correct_id(tag.id)
        if tag_id in HIDDEN_STREAMS or tag_id in by_id:
            continue
        title = _title_from_id(tag_id)
        is_special = tag_id == STATE_STARRED
        group = LabelGroup(
            id=tag_id,
            title=title.capitalize() if is_special else title,
            is_special=is_special,
        )
        by_id[tag_id] = group
        labels.append(group)

    for group in labels:
        unread = counts.get(group.id)
        if unread is not None:
            group.count = unread.count
            group.newest_item_timestamp_usec = unread.newest_item_timestamp_usec

    unlabeled: list[Feed] = []
    for feed in counted:
        if not feed.categories:
            unlabeled.append(feed)
            continue
        for category in feed.categories:
            group = by_id.get(correct_id(category.id))
            if group is not None:
                group.feeds.append(feed.model_copy())

    kept = [group for group in labels if group.feeds or group.is_special]
    return Subscriptions(labels=kept, unlabeled=unlabeled)
