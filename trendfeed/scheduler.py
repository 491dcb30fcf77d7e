"""Daily refresh check on a cron schedule."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from trendfeed.config import get_schedule_config

if TYPE_CHECKING:
    from trendfeed.service import TrendingService

logger = logging.getLogger(__name__)

JOB_ID = "trending_refresh"


class RefreshScheduler:
    """Fire the gated refresh path once a day.

    A firing that raises is logged and the schedule carries on.
    """

    def __init__(self, service: TrendingService, config: dict):
        self.service = service
        cfg = get_schedule_config(config)
        self.cron = cfg["cron"]
        self.timezone = cfg["timezone"]
        self._scheduler = AsyncIOScheduler(timezone=self.timezone)

    async def run_once(self) -> bool:
        """One scheduled firing. Returns False if the refresh raised."""
        logger.info("Checking for content updates...")
        try:
            articles = await self.service.fetch_trending_content()
        except Exception:
            logger.exception("Scheduled content update failed")
            return False
        logger.info("Scheduled content update completed (%d articles)", len(articles))
        return True

    def start(self) -> None:
        """Register the job and start the scheduler (needs a running loop)."""
        trigger = CronTrigger.from_crontab(self.cron, timezone=self.timezone)
        self._scheduler.add_job(
            self.run_once,
            trigger,
            id=JOB_ID,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self._scheduler.start()
        logger.info(
            "Scheduled content fetching started (cron '%s' %s)",
            self.cron, self.timezone,
        )

    def shutdown(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")

    @property
    def running(self) -> bool:
        return self._scheduler.running

    @property
    def next_run_time(self) -> datetime | None:
        job = self._scheduler.get_job(JOB_ID)
        return job.next_run_time if job else None
