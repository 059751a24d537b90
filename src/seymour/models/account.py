"""Tag, unread count and user models."""

from __future__ import annotations

from pydantic import field_validator

from seymour.models.base import SeymourModel, parse_int


class Tag(SeymourModel):
    """A label or system state, as returned by ``tag/list``.

    Attributes:
        type: ``folder``, ``tag``, or server specific; often absent.
    """

    id: str
    type: str | None = None
    sortid: str | None = None
    unread_count: int | None = None


class UnreadCount(SeymourModel):
    """Unread item count for one stream.

    Example:
        >>> from seymour.models.account import UnreadCount
        >>> uc = UnreadCount.model_validate(
        ...     {"id": "feed/x", "count": 3, "newestItemTimestampUsec": "1700000000000000"}
        ... )
        >>> uc.newest_item_timestamp_usec
        1700000000000000
    """

    id: str
    count: int = 0
    newest_item_timestamp_usec: int | None = None

    @field_validator("newest_item_timestamp_usec", mode="before")
    @classmethod
    def parse_timestamp(cls, v: object) -> object:
        return parse_int(v)


class UserInfo(SeymourModel):
    user_email: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    user_profile_id: str | None = None
