"""Source fetcher registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trendfeed.ingest.base import BaseSource

SOURCES: dict[str, type[BaseSource]] = {}


def register_source(name: str):
    """Decorator to register a source fetcher."""

    def decorator(cls):
        SOURCES[name] = cls
        return cls

    return decorator


# Import implementations to trigger registration (order is aggregation order)
from trendfeed.ingest.devto import DevToSource  # noqa: E402, F401
from trendfeed.ingest.hackernews import HackerNewsSource  # noqa: E402, F401
from trendfeed.ingest.github import GitHubSource  # noqa: E402, F401
from trendfeed.ingest.topics import GeneratedSource, ProductHuntSource  # noqa: E402, F401
