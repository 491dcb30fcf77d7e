"""Tests for source fan-out, failure isolation and the full refresh."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from trendfeed.ingest.base import BaseSource
from trendfeed.ingest.topics import NICHE_TOPICS
from trendfeed.models import RawItem
from trendfeed.pipeline import aggregate, run_refresh

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _source(tag: str, items=None, error: Exception | None = None, delay: float = 0):
    """Build a BaseSource subclass returning fixed items or raising."""

    class FakeSource(BaseSource):
        key = tag.lower()

        @property
        def name(self) -> str:
            return tag

        async def fetch(self) -> list[RawItem]:
            if delay:
                await asyncio.sleep(delay)
            if error is not None:
                raise error
            return list(items or [])

    return FakeSource


def _item(native_id: str, title: str, days_old: int = 1) -> RawItem:
    return RawItem(
        native_id=native_id,
        title=title,
        body="Some career body text",
        published_at=NOW - timedelta(days=days_old),
    )


@pytest.mark.asyncio
async def test_partial_failure_keeps_successful_sources():
    """Two of four sources failing still yields the others plus generated."""
    fakes = {
        "alpha": _source("Alpha", [_item("1", "Alpha Career Story")]),
        "broken": _source("Broken", error=RuntimeError("500")),
        "beta": _source("Beta", [_item("2", "Beta Design Story")]),
        "flaky": _source("Flaky", error=ValueError("bad json")),
    }
    with patch.dict("trendfeed.pipeline.SOURCES", fakes, clear=True):
        articles = await aggregate({}, now=NOW)

    ids = [a.id for a in articles]
    assert ids[:2] == ["alpha-1", "beta-2"]
    assert [a.title for a in articles[2:]] == NICHE_TOPICS
    assert all(a.source == "Generated" for a in articles[2:])


@pytest.mark.asyncio
async def test_slow_source_times_out():
    fakes = {
        "slow": _source("Slow", [_item("1", "Slow Career Story")], delay=5),
        "fast": _source("Fast", [_item("2", "Fast Career Story")]),
    }
    config = {"pipeline": {"source_timeout_seconds": 0.05}}
    with patch.dict("trendfeed.pipeline.SOURCES", fakes, clear=True):
        articles = await aggregate(config, now=NOW)

    assert "slow-1" not in [a.id for a in articles]
    assert "fast-2" in [a.id for a in articles]


@pytest.mark.asyncio
async def test_disabled_source_not_called():
    fakes = {"alpha": _source("Alpha", [_item("1", "Alpha Career Story")])}
    config = {"sources": {"alpha": {"enabled": False}}}
    with patch.dict("trendfeed.pipeline.SOURCES", fakes, clear=True):
        articles = await aggregate(config, now=NOW)

    assert len(articles) == len(NICHE_TOPICS)


@pytest.mark.asyncio
async def test_bad_item_skipped_not_source():
    fakes = {"alpha": _source("Alpha", [
        _item("1", ""),
        _item("2", "Valid Career Story"),
    ])}
    with patch.dict("trendfeed.pipeline.SOURCES", fakes, clear=True):
        articles = await aggregate({"sources": {"generated": {"topics": []}}}, now=NOW)

    assert [a.id for a in articles] == ["alpha-2"]


@pytest.mark.asyncio
async def test_run_refresh_dedups_and_ranks():
    fakes = {
        "alpha": _source("Alpha", [
            _item("1", "Shared Career Title", days_old=3),
            _item("2", "Older Career Title", days_old=9),
        ]),
        "beta": _source("Beta", [_item("3", "Shared Career Title", days_old=0)]),
    }
    config = {"sources": {"generated": {"topics": ["Freelance Design Market Analysis"]}}}
    with patch.dict("trendfeed.pipeline.SOURCES", fakes, clear=True):
        working_set = await run_refresh(config, now=NOW)

    assert [a.id for a in working_set if a.title == "Shared Career Title"] == ["alpha-1"]
    # generated items are published "now" so they rank first
    assert working_set[0].source == "Generated"
    assert [a.id for a in working_set[1:]] == ["alpha-1", "alpha-2"]


@pytest.mark.asyncio
async def test_run_refresh_bounded():
    items = [_item(str(i), f"Career Story {i}", days_old=i + 1) for i in range(30)]
    fakes = {"alpha": _source("Alpha", items)}
    with patch.dict("trendfeed.pipeline.SOURCES", fakes, clear=True):
        working_set = await run_refresh({}, now=NOW)

    assert len(working_set) == 20
    assert sum(a.source == "Generated" for a in working_set) == 10
