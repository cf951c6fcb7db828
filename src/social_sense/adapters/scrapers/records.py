# src/social_sense/adapters/scrapers/records.py
# Maps comment objects handed over by scraper/API clients onto RawComment.

from datetime import datetime, timezone
from typing import Iterable, List

from social_sense.domain.models import RawComment


def _published_at(value):
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return None


def comments_from_records(records: Iterable) -> List[RawComment]:
    """
    Convert scraped comment objects into RawComment records.

    Understands the attribute names used by the YouTube/TikTok/Instagram
    clients: ``author`` (a string or an object with ``name``), ``text``,
    ``like_count`` or ``likes``, and ``published_at`` as a datetime or epoch
    seconds.
    """
    comments: List[RawComment] = []
    for r in records:
        author = getattr(r, "author", None)
        author = getattr(author, "name", author)
        text = getattr(r, "text", None)
        likes = getattr(r, "like_count", None)
        if likes is None:
            likes = getattr(r, "likes", 0)

        try:
            like_count = max(0, int(likes or 0))
        except (TypeError, ValueError):
            like_count = 0

        comments.append(RawComment(
            author=str(author) if author is not None else "[deleted]",
            text=str(text) if text is not None else "",
            like_count=like_count,
            published_at=_published_at(getattr(r, "published_at", None)),
        ))
    return comments
