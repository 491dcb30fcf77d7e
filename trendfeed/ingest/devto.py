"""DEV Community source fetcher via the public articles API."""

from __future__ import annotations

import logging

import httpx

from trendfeed.ingest import register_source
from trendfeed.ingest.base import BaseSource
from trendfeed.models import DEVTO, RawItem, parse_datetime

logger = logging.getLogger(__name__)

DEVTO_API_URL = "https://dev.to/api/articles"
DEFAULT_TAGS = ["career", "design", "productivity"]


@register_source("devto")
class DevToSource(BaseSource):
    """Fetch fresh DEV articles tagged with career/design topics."""

    key = "devto"

    @property
    def name(self) -> str:
        return DEVTO

    async def fetch(self) -> list[RawItem]:
        cfg = self.source_config
        tags = cfg.get("tags", DEFAULT_TAGS)
        limit = cfg.get("limit", 10)
        timeout = cfg.get("timeout", 15)

        try:
            data = await self._fetch_api(tags, limit, timeout)
        except Exception:
            logger.exception("DevTo fetch failed")
            return []

        if not isinstance(data, list):
            logger.warning("DevTo returned unexpected payload: %s", type(data).__name__)
            return []

        items = []
        for entry in data:
            if not isinstance(entry, dict):
                continue
            title = entry.get("title") or ""
            description = entry.get("description") or ""
            if not title or not self.is_relevant(f"{title} {description}"):
                continue

            tag_list = entry.get("tag_list") or []
            if isinstance(tag_list, str):
                tag_list = [t.strip() for t in tag_list.split(",")]

            items.append(
                RawItem(
                    native_id=str(entry.get("id", "")),
                    title=title,
                    description=description,
                    body=entry.get("body_markdown") or "",
                    url=entry.get("url") or "",
                    image_url=entry.get("cover_image") or "",
                    published_at=parse_datetime(entry.get("published_at")),
                    tags=tag_list,
                ),
            )

        logger.info("DevTo fetched %d relevant articles", len(items))
        return items

    @staticmethod
    async def _fetch_api(tags: list[str], limit: int, timeout: float) -> list:
        params = [("tag", tag) for tag in tags]
        params += [("per_page", str(limit)), ("state", "fresh")]
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(DEVTO_API_URL, params=params)
            resp.raise_for_status()
            return resp.json()
