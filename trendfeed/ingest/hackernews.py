"""Hacker News source fetcher via the Firebase top stories API."""

from __future__ import annotations

import asyncio
import logging

import httpx

from trendfeed.ingest import register_source
from trendfeed.ingest.base import BaseSource
from trendfeed.models import HACKERNEWS, RawItem, parse_datetime

logger = logging.getLogger(__name__)

HN_TOP_STORIES_URL = "https://hacker-news.firebaseio.com/v0/topstories.json"
HN_ITEM_URL = "https://hacker-news.firebaseio.com/v0/item/{id}.json"
HN_DISCUSSION_URL = "https://news.ycombinator.com/item?id={id}"


@register_source("hackernews")
class HackerNewsSource(BaseSource):
    """Fetch top Hacker News stories that touch career or design topics."""

    key = "hackernews"

    @property
    def name(self) -> str:
        return HACKERNEWS

    async def fetch(self) -> list[RawItem]:
        cfg = self.source_config
        limit = cfg.get("limit", 20)
        concurrency = cfg.get("concurrency", 10)
        timeout = cfg.get("timeout", 15)

        try:
            story_ids = await self._fetch_json(HN_TOP_STORIES_URL, timeout)
        except Exception:
            logger.exception("HN top stories fetch failed")
            return []

        if not isinstance(story_ids, list):
            logger.warning("HN top stories payload is not a list")
            return []

        semaphore = asyncio.Semaphore(concurrency)

        async def _story(story_id) -> RawItem | None:
            async with semaphore:
                try:
                    story = await self._fetch_json(
                        HN_ITEM_URL.format(id=story_id), timeout,
                    )
                except Exception:
                    logger.debug("HN story %s fetch failed", story_id)
                    return None
            return self._to_item(story)

        results = await asyncio.gather(*[
            _story(story_id) for story_id in story_ids[:limit]
        ])
        items = [item for item in results if item is not None]

        logger.info(
            "HN fetched %d relevant stories out of %d",
            len(items), min(len(story_ids), limit),
        )
        return items

    def _to_item(self, story) -> RawItem | None:
        """Map a story record, or None when it is missing or off-topic."""
        if not isinstance(story, dict):
            return None
        if story.get("deleted") or story.get("dead"):
            return None

        title = story.get("title") or ""
        text = story.get("text") or ""
        if not title or not self.is_relevant(f"{title} {text}"):
            return None

        story_id = story.get("id", "")
        return RawItem(
            native_id=str(story_id),
            title=title,
            body=text,
            url=story.get("url") or HN_DISCUSSION_URL.format(id=story_id),
            published_at=parse_datetime(story.get("time")),
            extra={
                "score": story.get("score") or 0,
                "descendants": story.get("descendants") or 0,
            },
        )

    @staticmethod
    async def _fetch_json(url: str, timeout: float):
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp.json()
