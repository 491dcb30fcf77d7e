"""Title deduplication, recency ranking and working set bounding."""

from __future__ import annotations

import logging

from trendfeed.config import get_max_articles
from trendfeed.models import Article

logger = logging.getLogger(__name__)

DEFAULT_MAX_ARTICLES = 20


def merge(
    candidates: list[Article], limit: int = DEFAULT_MAX_ARTICLES,
) -> list[Article]:
    """Build a new working set from freshly aggregated candidates.

    The first article seen for each exact title wins, the survivors are
    sorted newest-first by publish date (stable), then cut to ``limit``.
    """
    seen_titles: set[str] = set()
    unique = []
    for article in candidates:
        if article.title in seen_titles:
            continue
        seen_titles.add(article.title)
        unique.append(article)

    ranked = sorted(unique, key=lambda a: a.publish_date, reverse=True)
    return ranked[:limit]


class DedupProcessor:
    """Apply ``merge`` with the configured working set size."""

    def __init__(self, config: dict):
        self.config = config
        self.limit = get_max_articles(config)

    @property
    def name(self) -> str:
        return "dedup"

    def process(self, articles: list[Article]) -> list[Article]:
        result = merge(articles, self.limit)

        removed = len(articles) - len(result)
        if removed:
            logger.info(
                "Dedup/rank kept %d of %d candidates (limit=%d)",
                len(result), len(articles), self.limit,
            )
        return result
