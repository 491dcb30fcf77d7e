"""Read-only views over a working set snapshot."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from trendfeed.models import ALL_SOURCES, EPOCH, Article, isoformat_utc

ALL = "all"
STATUS_TAG_LIMIT = 20


def _is_all(value: str | None) -> bool:
    return value is None or value.lower() == ALL


def _filter(
    articles: list[Article],
    category: str | None = None,
    source: str | None = None,
    limit: int | None = None,
) -> list[Article]:
    result = articles
    if not _is_all(category):
        wanted = category.lower()
        result = [a for a in result if a.category.lower() == wanted]
    if not _is_all(source):
        wanted = source.lower()
        result = [a for a in result if a.source.lower() == wanted]
    if limit is not None:
        result = result[:max(limit, 0)]
    return list(result)


def get_all(
    articles: list[Article],
    category: str | None = None,
    source: str | None = None,
    limit: int | None = None,
) -> list[Article]:
    return _filter(articles, category, source, limit)


def get_by_category(
    articles: list[Article],
    category: str,
    source: str | None = None,
    limit: int | None = None,
) -> list[Article]:
    """Exact case-insensitive category match; ``"all"`` keeps everything."""
    return _filter(articles, category, source, limit)


def search(
    articles: list[Article],
    query: str,
    category: str | None = None,
    source: str | None = None,
    limit: int | None = 10,
) -> list[Article]:
    """Substring search over title, excerpt and tags.

    Raises ValueError for a blank query.
    """
    if not query or not query.strip():
        raise ValueError("Search query is required")

    needle = query.lower()
    matches = [
        a for a in articles
        if needle in f"{a.title} {a.excerpt} {' '.join(a.tags)}".lower()
    ]
    return _filter(matches, category, source, limit)


def content_status(
    articles: list[Article],
    last_fetch_date: datetime,
    next_check: datetime | None = None,
) -> dict[str, Any]:
    """Summary of the cached working set for health/status endpoints."""
    categories = list(dict.fromkeys(a.category for a in articles))
    tags = list(dict.fromkeys(t for a in articles for t in a.tags))
    return {
        "totalArticles": len(articles),
        "lastFetchDate": (
            isoformat_utc(last_fetch_date) if last_fetch_date != EPOCH else None
        ),
        "isScheduled": next_check is not None,
        "nextCheck": isoformat_utc(next_check) if next_check else None,
        "sources": list(ALL_SOURCES),
        "categories": categories,
        "tags": tags[:STATUS_TAG_LIMIT],
    }
