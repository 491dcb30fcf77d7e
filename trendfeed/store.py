"""JSON snapshot of the working set and its refresh timestamp."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from trendfeed.models import EPOCH, Article, RefreshState, isoformat_utc, parse_datetime

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"


class SnapshotStore:
    """Load and atomically rewrite ``{articles, lastFetchDate, version}``."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> RefreshState:
        """Read the snapshot; any problem means a cold start, not an error."""
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("No stored articles at %s, starting fresh", self.path)
            return RefreshState()
        except (OSError, ValueError) as exc:
            logger.info("Unreadable snapshot %s (%s), starting fresh", self.path, exc)
            return RefreshState()

        if not isinstance(data, dict):
            logger.info("Snapshot %s is not an object, starting fresh", self.path)
            return RefreshState()

        version = data.get("version")
        if version != SNAPSHOT_VERSION:
            logger.info(
                "Snapshot version %r not supported, starting fresh", version,
            )
            return RefreshState()

        try:
            articles = [Article.from_dict(a) for a in data.get("articles") or []]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.info("Snapshot articles malformed (%s), starting fresh", exc)
            return RefreshState()

        last_fetch = parse_datetime(data.get("lastFetchDate")) or EPOCH
        logger.info("Loaded %d stored articles from %s", len(articles), self.path)
        return RefreshState(articles=articles, last_fetch_date=last_fetch)

    def save(self, state: RefreshState) -> bool:
        """Write the snapshot via temp file + rename. Returns False on failure."""
        payload = {
            "articles": [a.to_dict() for a in state.articles],
            "lastFetchDate": isoformat_utc(state.last_fetch_date),
            "version": SNAPSHOT_VERSION,
        }
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except Exception:
            logger.exception("Error saving articles to %s", self.path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False

        logger.info("Saved %d articles to %s", len(state.articles), self.path)
        return True
