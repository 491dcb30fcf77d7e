"""Core data models for the trending content cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Provider tags
DEVTO = "DevTo"
HACKERNEWS = "HackerNews"
GITHUB = "GitHub"
PRODUCTHUNT = "ProductHunt"
GENERATED = "Generated"

ALL_SOURCES = [DEVTO, HACKERNEWS, GITHUB, PRODUCTHUNT, GENERATED]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO string, unix seconds or datetime into an aware UTC datetime.

    Returns None for anything unparseable.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (ValueError, OSError, OverflowError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def isoformat_utc(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class RawItem:
    """A provider item before enrichment. Missing fields stay empty."""

    native_id: str
    title: str
    description: str = ""
    body: str = ""
    url: str = ""
    image_url: str = ""
    published_at: datetime | None = None
    tags: list[str] = field(default_factory=list)
    short_title: str = ""  # slug/SEO/image basis when it differs from title
    category: str | None = None  # fixed category, skips keyword matching
    generated: bool = False  # synthesized topic, no external body
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class Article:
    """A normalized trending article from any source."""

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: str
    source_url: str
    category: str
    tags: list[str]
    publish_date: datetime
    fetch_date: datetime
    read_time: int
    seo_title: str
    meta_description: str
    source: str
    trending: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "excerpt": self.excerpt,
            "content": self.content,
            "imageUrl": self.image_url,
            "sourceUrl": self.source_url,
            "category": self.category,
            "tags": list(self.tags),
            "publishDate": isoformat_utc(self.publish_date),
            "fetchDate": isoformat_utc(self.fetch_date),
            "readTime": self.read_time,
            "seoTitle": self.seo_title,
            "metaDescription": self.meta_description,
            "trending": self.trending,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Article:
        """Rebuild an Article from its persisted JSON shape.

        Raises KeyError/ValueError when required fields are missing.
        """
        fetch_date = parse_datetime(data.get("fetchDate")) or EPOCH
        publish_date = parse_datetime(data.get("publishDate")) or fetch_date
        title = data["title"]
        if not title:
            raise ValueError("article without title")
        return cls(
            id=data["id"],
            title=title,
            slug=data.get("slug", ""),
            excerpt=data.get("excerpt", ""),
            content=data.get("content", ""),
            image_url=data.get("imageUrl", ""),
            source_url=data.get("sourceUrl", ""),
            category=data.get("category", ""),
            tags=list(data.get("tags") or []),
            publish_date=publish_date,
            fetch_date=fetch_date,
            read_time=int(data.get("readTime", 1)),
            seo_title=data.get("seoTitle", ""),
            meta_description=data.get("metaDescription", ""),
            trending=bool(data.get("trending", True)),
            source=data.get("source", ""),
        )


@dataclass
class RefreshState:
    """The working set plus the time of the refresh that produced it."""

    articles: list[Article] = field(default_factory=list)
    last_fetch_date: datetime = EPOCH
