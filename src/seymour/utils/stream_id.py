"""Stream ID helpers.

Every feed, label and system state on a GReader server is addressed by a
stream ID in one of three shapes::

    feed/<url>
    user/-/label/<name>
    user/-/state/com.google/<state>

Callers may pass bare URLs or names; these helpers add the right prefix
unless the value already carries one of the three prefixes.

Example:
    >>> from seymour.utils.stream_id import feed_id, label_id, state_id
    >>> feed_id("http://x.com/feed")
    'feed/http://x.com/feed'
    >>> feed_id("feed/http://x.com/feed")
    'feed/http://x.com/feed'
    >>> label_id("News")
    'user/-/label/News'
    >>> label_id("user/-/state/com.google/starred")
    'user/-/state/com.google/starred'
    >>> state_id("starred")
    'user/-/state/com.google/starred'
"""

from __future__ import annotations

import re

PREFIX_FEED = "feed/"
PREFIX_LABEL = "user/-/label/"
PREFIX_STATE = "user/-/state/com.google/"

STATE_READ = PREFIX_STATE + "read"
STATE_STARRED = PREFIX_STATE + "starred"
STATE_READING_LIST = PREFIX_STATE + "reading-list"
STATE_BROADCAST = PREFIX_STATE + "broadcast"
STATE_BLOGGER_FOLLOWING = "user/-/state/com.blogger/blogger-following"

CANONICAL_PREFIXES = (PREFIX_FEED, PREFIX_LABEL, PREFIX_STATE)

_USER_ID_RE = re.compile(r"^user/\d*/")


def _prefixed(prefix: str, value: str) -> str:
    # Any canonical prefix passes through, whatever role was asked for
    if is_canonical(value):
        return value
    return prefix + value


def is_canonical(stream_id: str) -> bool:
    """Return True if ``stream_id`` starts with one of the known prefixes.

    Prefix match is case-insensitive, like the servers treat it.
    """
    lowered = stream_id.lower()
    return any(lowered.startswith(prefix) for prefix in CANONICAL_PREFIXES)


def feed_id(value: str) -> str:
    """Canonical stream ID for a feed URL."""
    return _prefixed(PREFIX_FEED, value)


def label_id(value: str) -> str:
    """Canonical stream ID for a user label."""
    return _prefixed(PREFIX_LABEL, value)


def state_id(value: str) -> str:
    """Canonical stream ID for a system state (read, starred, ...)."""
    return _prefixed(PREFIX_STATE, value)


def tag_id(value: str) -> str:
    """Canonical stream ID for an item tag.

    Values already naming a feed, label or state pass through; anything
    else is treated as a label name.

    Example:
        >>> tag_id("user/-/state/com.google/read")
        'user/-/state/com.google/read'
        >>> tag_id("later")
        'user/-/label/later'
    """
    if is_canonical(value):
        return value
    return label_id(value)


def correct_id(stream_id: str) -> str:
    """Replace a numeric user id with ``-`` so IDs compare equal.

    Example:
        >>> correct_id("user/01723985698/label/News")
        'user/-/label/News'
    """
    return _USER_ID_RE.sub("user/-/", stream_id, count=1)
