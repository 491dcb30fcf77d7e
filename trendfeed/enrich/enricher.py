"""Turn provider RawItems into canonical Articles."""

from __future__ import annotations

from datetime import datetime

from trendfeed.config import get_brand
from trendfeed.enrich.templates import (
    render_github_body,
    render_hackernews_body,
    render_topic_content,
    wrap_editorial,
)
from trendfeed.enrich.text import (
    calculate_read_time,
    categorize_content,
    create_slug,
    extract_excerpt,
    generate_fallback_image,
    generate_meta_description,
    generate_seo_title,
    generate_tags,
    normalize_tags,
)
from trendfeed.models import (
    DEVTO,
    GENERATED,
    GITHUB,
    HACKERNEWS,
    PRODUCTHUNT,
    Article,
    RawItem,
    utcnow,
)

ID_PREFIXES = {
    DEVTO: "devto",
    HACKERNEWS: "hn",
    GITHUB: "github",
    PRODUCTHUNT: "producthunt",
    GENERATED: "generated",
}


class ContentEnricher:
    """Deterministic RawItem -> Article mapping (given a fixed ``now``)."""

    def __init__(self, config: dict | None = None):
        self.config = config or {}
        self.brand = get_brand(self.config)

    def enrich(
        self, item: RawItem, source: str, now: datetime | None = None,
    ) -> Article:
        now = now or utcnow()
        if not item.title:
            raise ValueError(f"{source} item {item.native_id!r} has no title")

        basis = item.short_title or item.title

        if item.generated:
            content = render_topic_content(item.title, self.brand, now)
            # Topic pages read the whole generated text
            read_source = content
            summary_source = content
        else:
            body = self._body(item, source)
            content = wrap_editorial(body, source, self.brand, now)
            read_source = body
            summary_source = item.description or body

        excerpt = extract_excerpt(summary_source) or extract_excerpt(content)
        tags = normalize_tags(item.tags) if item.tags else generate_tags(item.title)
        prefix = ID_PREFIXES.get(source, source.lower())

        return Article(
            id=f"{prefix}-{item.native_id}",
            title=item.title,
            slug=create_slug(basis),
            excerpt=excerpt,
            content=content,
            image_url=item.image_url or generate_fallback_image(basis),
            source_url=item.url,
            category=item.category or categorize_content(item.title),
            tags=tags,
            publish_date=item.published_at or now,
            fetch_date=now,
            read_time=calculate_read_time(read_source),
            seo_title=generate_seo_title(basis, self.brand, now.year),
            meta_description=generate_meta_description(
                summary_source or content, self.brand,
            ),
            source=source,
        )

    @staticmethod
    def _body(item: RawItem, source: str) -> str:
        """Provider body before the editorial wrapper."""
        if source == HACKERNEWS:
            return render_hackernews_body(item.title, item.extra, item.body)
        if source == GITHUB:
            return render_github_body(
                item.short_title or item.title, item.description, item.extra,
            )
        return item.body or item.description
