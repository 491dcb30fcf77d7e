"""Refresh pipeline: fan out to sources, enrich, then dedup and rank."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from trendfeed.config import get_active_sources
from trendfeed.enrich import ContentEnricher
from trendfeed.ingest import SOURCES
from trendfeed.ingest.base import BaseSource
from trendfeed.ingest.topics import GeneratedSource
from trendfeed.models import Article, utcnow
from trendfeed.process.dedup import DedupProcessor

logger = logging.getLogger(__name__)


def _pipeline_settings(config: dict) -> tuple[int, float]:
    cfg = config.get("pipeline", {})
    return (
        cfg.get("max_concurrent_sources", 4),
        cfg.get("source_timeout_seconds", 60),
    )


def _enabled_sources(config: dict) -> list[BaseSource]:
    """Instantiate registered sources that are not disabled, in registry order."""
    for name in get_active_sources(config):
        if name not in SOURCES and name != GeneratedSource.key:
            logger.warning("Source '%s' configured but not registered", name)

    sources = [cls(config) for cls in SOURCES.values()]
    return [s for s in sources if s.enabled]


def _enrich_all(
    enricher: ContentEnricher, source: BaseSource, items: list, now: datetime,
) -> list[Article]:
    articles = []
    for item in items:
        try:
            articles.append(enricher.enrich(item, source.name, now=now))
        except Exception:
            logger.exception(
                "Enrichment failed for %s item %r",
                source.name, getattr(item, "native_id", None),
            )
    return articles


async def aggregate(
    config: dict,
    enricher: ContentEnricher | None = None,
    now: datetime | None = None,
) -> list[Article]:
    """Collect enriched candidates from every source plus the generated batch.

    A source that raises or exceeds its timeout contributes nothing; the
    other sources are unaffected.
    """
    enricher = enricher or ContentEnricher(config)
    now = now or utcnow()
    max_concurrent, timeout = _pipeline_settings(config)
    semaphore = asyncio.Semaphore(max_concurrent)

    async def _fetch(source: BaseSource) -> list[Article]:
        async with semaphore:
            try:
                items = await asyncio.wait_for(source.fetch(), timeout=timeout)
            except asyncio.TimeoutError:
                logger.warning(
                    "Source '%s' timed out after %.0fs", source.name, timeout,
                )
                return []
            except Exception:
                logger.exception("Source '%s' failed", source.name)
                return []
        logger.info("Fetched %d items from %s", len(items), source.name)
        return _enrich_all(enricher, source, items, now)

    sources = _enabled_sources(config)
    fetch_results = await asyncio.gather(*[_fetch(s) for s in sources])
    candidates = [a for batch in fetch_results for a in batch]

    generated = GeneratedSource(config)
    candidates.extend(
        _enrich_all(enricher, generated, await generated.fetch(), now),
    )

    logger.info(
        "Aggregated %d candidates from %d sources",
        len(candidates), len(sources) + 1,
    )
    return candidates


async def run_refresh(config: dict, now: datetime | None = None) -> list[Article]:
    """Full rebuild of the working set from freshly aggregated candidates."""
    candidates = await aggregate(config, now=now)
    return DedupProcessor(config).process(candidates)
