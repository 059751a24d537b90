#!/usr/bin/env python3
"""
Seymour Quickstart Example

Shows the basic flow: log in, list feeds, read and mark items.

Usage:
    SEYMOUR_BASE_URL=https://rss.example.com/api/greader.php \
    SEYMOUR_USERNAME=me SEYMOUR_PASSWORD=api-password \
    python examples/01_quickstart.py
"""

import asyncio

from seymour import Reader, configure_logging, get_settings

READING_LIST = "user/-/state/com.google/reading-list"
READ = "user/-/state/com.google/read"


async def main() -> None:
    """Log in, print subscriptions, mark the newest unread items read."""
    settings = get_settings()
    configure_logging(settings.log_level)

    async with Reader.from_settings(settings) as reader:
        if not reader.auth_token:
            token = await reader.login(settings)
            print(f"✓ Logged in (save this token: {token})")

        subs = await reader.get_subscriptions()
        for label in subs.labels:
            print(f"{label.title} ({label.count or 0} unread)")
            for feed in label.feeds:
                print(f"    {feed.title} ({feed.count or 0})")

        page = await reader.get_items(READING_LIST, num=10, exclude=READ)
        for item in page.items:
            print(f"- {item.title} {item.link or ''}")

        if page.items:
            await reader.mark_items_read([item.id for item in page.items])
            print(f"✓ Marked {len(page.items)} items read")


if __name__ == "__main__":
    asyncio.run(main())
