"""Abstract base class for all source fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from trendfeed.config import get_relevance_keywords, get_source_config
from trendfeed.models import RawItem


class BaseSource(ABC):
    """Base class for trending content fetchers.

    ``fetch`` never raises: failures are logged and yield an empty list.
    """

    key: str = ""

    def __init__(self, config: dict):
        self.config = config
        self.keywords = [k.lower() for k in get_relevance_keywords(config)]

    @property
    def source_config(self) -> dict:
        return get_source_config(self.config, self.key)

    @property
    def enabled(self) -> bool:
        return self.source_config.get("enabled", True)

    def is_relevant(self, text: str) -> bool:
        """True when the text mentions at least one relevance keyword."""
        lower_text = text.lower()
        return any(keyword in lower_text for keyword in self.keywords)

    @abstractmethod
    async def fetch(self) -> list[RawItem]:
        """Fetch candidate items. Returns an empty list on failure."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider tag stamped on every article from this source."""
        ...
