"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from trendfeed.config import load_config
from trendfeed.models import Article

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_article(
    title: str,
    days_old: float = 0,
    source: str = "DevTo",
    category: str = "Career Advice",
    tags: list[str] | None = None,
    excerpt: str = "",
    article_id: str | None = None,
) -> Article:
    """Minimal enriched article for ranking/query tests."""
    publish = NOW - timedelta(days=days_old)
    return Article(
        id=article_id or f"{source.lower()}-{abs(hash((title, days_old)))}",
        title=title,
        slug=title.lower().replace(" ", "-"),
        excerpt=excerpt or f"About {title}",
        content=f"<p>{title}</p>",
        image_url="https://images.example.com/cover.png",
        source_url="https://example.com/a",
        category=category,
        tags=tags if tags is not None else ["trending", "professional"],
        publish_date=publish,
        fetch_date=NOW,
        read_time=1,
        seo_title=title,
        meta_description=title,
        source=source,
    )


@pytest.fixture
def article_factory():
    return make_article


@pytest.fixture
def sample_config(tmp_path):
    """Minimal config for testing (no real API keys)."""
    config_text = """
site:
  brand: "TestBrand"

sources:
  devto:
    enabled: true
  hackernews:
    enabled: true
    limit: 5
  github:
    enabled: true
    token: ""
  producthunt:
    enabled: true

pipeline:
  refresh_interval_days: 15
  max_articles: 20
  max_concurrent_sources: 4
  source_timeout_seconds: 5

scheduler:
  cron: "0 6 * * *"
  timezone: "UTC"

store:
  path: "STORE_PATH_PLACEHOLDER"
"""
    store_path = str(tmp_path / "data" / "trending-articles.json")
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(config_text.replace("STORE_PATH_PLACEHOLDER", store_path))
    return load_config(str(cfg_path))


@pytest.fixture
def sample_articles():
    """Working set spanning several categories and sources, newest first."""
    return [
        make_article(
            "Modern CV Templates That Get Interviews", days_old=0,
            source="Generated", category="Career Advice",
            tags=["modern", "templates", "trending", "professional"],
        ),
        make_article(
            "Design Systems for Personal Branding", days_old=1,
            source="Generated", category="Design",
            tags=["design", "systems", "branding", "trending", "professional"],
        ),
        make_article(
            "Remote Work Portfolio Strategies", days_old=2,
            source="ProductHunt", category="Remote Work",
            tags=["remote", "work", "portfolio", "trending", "professional"],
        ),
        make_article(
            "Open Source Project: cv-builder", days_old=3,
            source="GitHub", category="Technology",
            tags=["resume", "cv-builder", "trending", "professional"],
            excerpt="A small static CV generator",
        ),
        make_article(
            "Ask HN: How do you prepare for interviews?", days_old=4,
            source="HackerNews", category="Career Advice",
        ),
    ]
