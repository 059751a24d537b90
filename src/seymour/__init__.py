"""
Seymour - async client for the GReader (Google Reader-compatible) API.

Talks to RSS/Atom aggregators that implement the Google Reader API
(FreshRSS, Miniflux, Inoreader, The Old Reader, ...).

Key Features:
- Async requests over httpx
- ClientLogin auth token and post token handling
- Automatic post token refresh and single retry on rejected POSTs
- Stream ID canonicalization for feeds, labels and states
- Typed pydantic models for responses

Quick Start:
    >>> from seymour import Reader
    >>> async with Reader("https://rss.example.com/api/greader.php") as reader:
    ...     await reader.get_auth_token("me@example.com", "secret")
    ...     feeds = await reader.get_feeds()
"""

from seymour.auth import CredentialManager, parse_auth_token
from seymour.core.config import Settings, get_settings
from seymour.core.credentials import Credentials
from seymour.core.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidArgumentError,
    SeymourError,
)
from seymour.core.logging_config import configure_logging
from seymour.http import HttpClient, HttpMethod, RequestDescriptor, ResponseType
from seymour.models import (
    Category,
    EditFeed,
    Feed,
    Item,
    ItemList,
    NewFeed,
    Tag,
    UnreadCount,
    UserInfo,
)
from seymour.organize import LabelGroup, Subscriptions, organize_subscriptions
from seymour.reader import Reader
from seymour.utils.stream_id import correct_id, feed_id, label_id, state_id, tag_id

__version__ = "0.1.0"

__all__ = [
    # Client
    "Reader",
    # Credentials
    "Credentials",
    "CredentialManager",
    "parse_auth_token",
    # HTTP
    "HttpClient",
    "HttpMethod",
    "RequestDescriptor",
    "ResponseType",
    # Models
    "Category",
    "EditFeed",
    "Feed",
    "Item",
    "ItemList",
    "NewFeed",
    "Tag",
    "UnreadCount",
    "UserInfo",
    # Organizing
    "LabelGroup",
    "Subscriptions",
    "organize_subscriptions",
    # Stream IDs
    "correct_id",
    "feed_id",
    "label_id",
    "state_id",
    "tag_id",
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
    "SeymourError",
    "ApiError",
    "ConfigurationError",
    "InvalidArgumentError",
    # Version
    "__version__",
]
