"""Utility helpers."""

from seymour.utils.stream_id import (
    PREFIX_FEED,
    PREFIX_LABEL,
    PREFIX_STATE,
    STATE_READ,
    STATE_READING_LIST,
    STATE_STARRED,
    correct_id,
    feed_id,
    is_canonical,
    label_id,
    state_id,
    tag_id,
)

__all__ = [
    "PREFIX_FEED",
    "PREFIX_LABEL",
    "PREFIX_STATE",
    "STATE_READ",
    "STATE_READING_LIST",
    "STATE_STARRED",
    "correct_id",
    "feed_id",
    "is_canonical",
    "label_id",
    "state_id",
    "tag_id",
]
