"""GitHub source fetcher via the repository search API."""

from __future__ import annotations

import logging

import httpx

from trendfeed.ingest import register_source
from trendfeed.ingest.base import BaseSource
from trendfeed.models import GITHUB, RawItem, parse_datetime

logger = logging.getLogger(__name__)

GITHUB_SEARCH_URL = "https://api.github.com/search/repositories"
USER_AGENT = "trendfeed-content-fetcher"
DEFAULT_KEYWORDS = [
    "resume-template", "cv-builder", "portfolio-website", "design-system",
]


@register_source("github")
class GitHubSource(BaseSource):
    """Fetch recently updated repositories for a fixed keyword list."""

    key = "github"

    @property
    def name(self) -> str:
        return GITHUB

    async def fetch(self) -> list[RawItem]:
        cfg = self.source_config
        keywords = cfg.get("keywords", DEFAULT_KEYWORDS)
        per_page = cfg.get("per_page", 5)
        max_items = cfg.get("max_items", 5)
        timeout = cfg.get("timeout", 15)
        token = cfg.get("token", "")

        items = []
        for keyword in keywords:
            try:
                data = await self._search(keyword, per_page, timeout, token)
            except Exception:
                logger.exception("GitHub search failed for '%s'", keyword)
                continue
            if not isinstance(data, dict):
                continue

            for repo in data.get("items") or []:
                item = self._to_item(repo, keyword)
                if item is not None:
                    items.append(item)

        items = items[:max_items]
        logger.info("GitHub fetched %d repositories", len(items))
        return items

    def _to_item(self, repo, keyword: str) -> RawItem | None:
        if not isinstance(repo, dict):
            return None
        name = repo.get("name") or ""
        description = repo.get("description") or ""
        if not name or not self.is_relevant(f"{name} {description}"):
            return None

        license_info = repo.get("license")
        if isinstance(license_info, dict):
            license_name = license_info.get("name") or ""
        else:
            license_name = license_info if isinstance(license_info, str) else ""
        topics = repo.get("topics")
        if not isinstance(topics, list):
            topics = []
        return RawItem(
            native_id=str(repo.get("id", "")),
            title=f"Open Source Project: {name}",
            short_title=name,
            description=description,
            url=repo.get("html_url") or "",
            published_at=parse_datetime(repo.get("updated_at")),
            tags=[str(t) for t in topics] + [keyword],
            category="Technology",
            extra={
                "stars": repo.get("stargazers_count") or 0,
                "forks": repo.get("forks_count") or 0,
                "language": repo.get("language") or "",
                "license": license_name,
            },
        )

    @staticmethod
    async def _search(
        keyword: str, per_page: int, timeout: float, token: str = "",
    ) -> dict:
        params = {
            "q": keyword,
            "sort": "updated",
            "order": "desc",
            "per_page": per_page,
        }
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/vnd.github.v3+json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(GITHUB_SEARCH_URL, params=params, headers=headers)
            resp.raise_for_status()
            return resp.json()
