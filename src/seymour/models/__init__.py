"""Pydantic models for GReader API responses."""

from seymour.models.account import Tag, UnreadCount, UserInfo
from seymour.models.base import SeymourModel
from seymour.models.feed import Category, EditFeed, Feed, NewFeed
from seymour.models.item import Content, Item, ItemList, Link, Origin

__all__ = [
    # Base
    "SeymourModel",
    # Subscriptions
    "Category",
    "EditFeed",
    "Feed",
    "NewFeed",
    # Items
    "Content",
    "Item",
    "ItemList",
    "Link",
    "Origin",
    # Account
    "Tag",
    "UnreadCount",
    "UserInfo",
]
