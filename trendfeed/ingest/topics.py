"""Sources that synthesize items from fixed topic lists instead of fetching."""

from __future__ import annotations

import logging
import secrets
import string
import time

from trendfeed.ingest import register_source
from trendfeed.ingest.base import BaseSource
from trendfeed.models import GENERATED, PRODUCTHUNT, RawItem

logger = logging.getLogger(__name__)

PRODUCTHUNT_TOPICS = [
    "AI Resume Builder Trends",
    "Remote Work Design Tools",
    "Professional Portfolio Platforms",
    "Career Development Apps",
    "Design Collaboration Software",
]

NICHE_TOPICS = [
    "Latest Resume Design Trends for 2025",
    "AI-Powered Career Tools Changing Job Search",
    "Remote Work Portfolio Strategies",
    "Professional Branding in the Digital Age",
    "Freelance Design Market Analysis",
    "LinkedIn Optimization for Creative Professionals",
    "Modern CV Templates That Get Interviews",
    "Design Systems for Personal Branding",
    "Career Transition Strategies for Designers",
    "Professional Photography for Portfolios",
]

_ID_ALPHABET = string.ascii_lowercase + string.digits


def synthetic_id() -> str:
    """``<unix-ms>-<9 random chars>``, unique enough within one refresh."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"


class TopicSource(BaseSource):
    """Emit one generated item per configured topic. No relevance filter."""

    default_topics: list[str] = []

    @property
    def topics(self) -> list[str]:
        topics = self.source_config.get("topics")
        return list(self.default_topics if topics is None else topics)

    async def fetch(self) -> list[RawItem]:
        items = [
            RawItem(native_id=synthetic_id(), title=topic, generated=True)
            for topic in self.topics
            if topic
        ]
        logger.info("%s synthesized %d topics", self.name, len(items))
        return items


@register_source("producthunt")
class ProductHuntSource(TopicSource):
    """Product launch themes; the public API needs OAuth so topics are fixed."""

    key = "producthunt"
    default_topics = PRODUCTHUNT_TOPICS

    @property
    def name(self) -> str:
        return PRODUCTHUNT


class GeneratedSource(TopicSource):
    """Niche editorial topics included on every refresh."""

    key = "generated"
    default_topics = NICHE_TOPICS

    @property
    def name(self) -> str:
        return GENERATED
