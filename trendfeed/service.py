"""Owner of the trending working set and its refresh lifecycle."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from trendfeed.config import get_refresh_interval, get_store_path
from trendfeed.freshness import EPOCH, is_refresh_due
from trendfeed.models import Article, RefreshState, utcnow
from trendfeed.pipeline import run_refresh
from trendfeed.store import SnapshotStore

logger = logging.getLogger(__name__)


class TrendingService:
    """Single writer of the cached working set.

    Refreshes run one at a time under a lock that covers the freshness
    check, aggregation, merge and snapshot write. Readers get a copy of the
    last committed working set and never trigger network activity.
    """

    def __init__(self, config: dict, store: SnapshotStore | None = None):
        self.config = config
        self.store = store or SnapshotStore(get_store_path(config))
        self.interval = get_refresh_interval(config)
        self._state = RefreshState()
        self._lock = asyncio.Lock()

    def load(self) -> None:
        """Replace the in-memory state with the stored snapshot."""
        self._state = self.store.load()

    @property
    def last_fetch_date(self) -> datetime:
        return self._state.last_fetch_date

    @property
    def is_refreshing(self) -> bool:
        return self._lock.locked()

    def get_articles(self) -> list[Article]:
        return list(self._state.articles)

    async def fetch_trending_content(self, now: datetime | None = None) -> list[Article]:
        """Return the working set, refreshing it first if it is stale or empty."""
        async with self._lock:
            return await self._refresh_if_due(now or utcnow())

    async def force_refresh(self, now: datetime | None = None) -> list[Article]:
        """Refresh regardless of when the last refresh happened."""
        async with self._lock:
            self._state.last_fetch_date = EPOCH
            return await self._refresh_if_due(now or utcnow())

    async def _refresh_if_due(self, now: datetime) -> list[Article]:
        state = self._state
        if state.articles and not is_refresh_due(
            state.last_fetch_date, now, self.interval,
        ):
            logger.info(
                "Content is up to date (last fetch %s), skipping fetch",
                state.last_fetch_date.isoformat(),
            )
            return list(state.articles)

        logger.info("Fetching fresh trending content...")
        articles = await run_refresh(self.config, now=now)

        new_state = RefreshState(articles=articles, last_fetch_date=now)
        self._state = new_state
        saved = await asyncio.to_thread(self.store.save, new_state)
        if not saved:
            logger.warning("Snapshot not persisted; in-memory working set kept")

        logger.info("Refreshed working set: %d articles", len(articles))
        return list(articles)
