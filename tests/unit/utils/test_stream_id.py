"""Tests for seymour.utils.stream_id."""

from __future__ import annotations

import pytest

from seymour.utils.stream_id import (
    STATE_READ,
    STATE_STARRED,
    correct_id,
    feed_id,
    is_canonical,
    label_id,
    state_id,
    tag_id,
)

CANONICAL = [
    "feed/http://x.com/feed",
    "user/-/label/News",
    "user/-/state/com.google/starred",
]


class TestCanonicalIdentity:
    """Canonical IDs pass through every helper unchanged."""

    @pytest.mark.parametrize("stream_id", CANONICAL)
    def test_tag_id_identity(self, stream_id: str) -> None:
        assert tag_id(stream_id) == stream_id

    def test_feed_id_identity(self) -> None:
        assert feed_id("feed/http://x.com/feed") == "feed/http://x.com/feed"

    def test_label_id_identity(self) -> None:
        assert label_id("user/-/label/News") == "user/-/label/News"

    def test_state_id_identity(self) -> None:
        assert state_id(STATE_READ) == STATE_READ

    @pytest.mark.parametrize("helper", [feed_id, label_id, state_id, tag_id])
    @pytest.mark.parametrize("stream_id", CANONICAL)
    def test_any_prefix_passes_every_helper(self, helper, stream_id: str) -> None:
        """An ID of another role is not prefixed again."""
        assert helper(stream_id) == stream_id

    def test_prefix_match_ignores_case(self) -> None:
        """An upper-case prefix is still recognized."""
        assert feed_id("FEED/http://x.com/feed") == "FEED/http://x.com/feed"


class TestPrefixing:
    """Bare values get exactly one prefix for their role."""

    def test_feed(self) -> None:
        assert feed_id("http://x.com/feed") == "feed/http://x.com/feed"

    def test_label(self) -> None:
        assert label_id("News") == "user/-/label/News"

    def test_state(self) -> None:
        assert state_id("starred") == STATE_STARRED

    def test_tag_defaults_to_label(self) -> None:
        assert tag_id("later") == "user/-/label/later"

    @pytest.mark.parametrize(
        "helper,value",
        [
            (feed_id, "http://x.com/feed"),
            (label_id, "News"),
            (state_id, "read"),
            (tag_id, "later"),
        ],
    )
    def test_idempotent(self, helper, value: str) -> None:
        once = helper(value)
        assert helper(once) == once

    def test_bare_feed_and_prefixed_feed_match(self) -> None:
        assert feed_id("http://x.com/feed") == feed_id("feed/http://x.com/feed")


class TestIsCanonical:
    @pytest.mark.parametrize("stream_id", CANONICAL)
    def test_canonical(self, stream_id: str) -> None:
        assert is_canonical(stream_id)

    def test_bare_name(self) -> None:
        assert not is_canonical("News")

    def test_bare_url(self) -> None:
        assert not is_canonical("http://x.com/feed")


class TestCorrectId:
    def test_replaces_numeric_user(self) -> None:
        assert correct_id("user/01723985698/state/com.google/read") == STATE_READ

    def test_leaves_dash_user(self) -> None:
        assert correct_id("user/-/label/News") == "user/-/label/News"

    def test_leaves_feed(self) -> None:
        assert correct_id("feed/http://x.com/user/1/") == "feed/http://x.com/user/1/"
