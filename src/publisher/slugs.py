"""URL slug helpers for blog posts."""

from __future__ import annotations

import re
import time

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def slugify(title: str) -> str:
    """Lower-case, collapse non-alphanumeric runs to one hyphen, trim hyphens.

    Example: "Hello, World!" -> "hello-world". Titles with no ASCII
    letters or digits yield "".
    """
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def unique_slug(title: str, timestamp_ms: int | None = None) -> str:
    """Append the current time in milliseconds to the title slug.

    Uniqueness holds only while two posts with the same title are not
    generated within the same millisecond.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    base = slugify(title) or "post"
    return f"{base}-{timestamp_ms}"
