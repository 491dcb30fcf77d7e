"""Tests for the JSON snapshot store."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from unittest.mock import patch

from trendfeed.models import EPOCH, RefreshState
from trendfeed.store import SNAPSHOT_VERSION, SnapshotStore

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_missing_file_is_cold_start(tmp_path):
    state = SnapshotStore(tmp_path / "none.json").load()
    assert state.articles == []
    assert state.last_fetch_date == EPOCH


def test_corrupt_file_is_cold_start(tmp_path):
    path = tmp_path / "snap.json"
    path.write_text("{not json")
    state = SnapshotStore(path).load()
    assert state.articles == []
    assert state.last_fetch_date == EPOCH


def test_wrong_version_is_cold_start(tmp_path):
    path = tmp_path / "snap.json"
    path.write_text(json.dumps({"articles": [], "lastFetchDate": "2025-01-01T00:00:00Z", "version": "0.9"}))
    assert SnapshotStore(path).load().last_fetch_date == EPOCH


def test_malformed_article_is_cold_start(tmp_path):
    path = tmp_path / "snap.json"
    path.write_text(json.dumps({
        "articles": [{"slug": "no-id-or-title"}],
        "lastFetchDate": "2025-01-01T00:00:00Z",
        "version": SNAPSHOT_VERSION,
    }))
    state = SnapshotStore(path).load()
    assert state.articles == []
    assert state.last_fetch_date == EPOCH


def test_save_writes_versioned_structure(tmp_path, sample_articles):
    path = tmp_path / "nested" / "snap.json"
    store = SnapshotStore(path)

    assert store.save(RefreshState(articles=sample_articles, last_fetch_date=NOW))

    data = json.loads(path.read_text())
    assert set(data) == {"articles", "lastFetchDate", "version"}
    assert data["version"] == "1.0"
    assert data["lastFetchDate"] == "2025-03-01T12:00:00Z"
    first = data["articles"][0]
    assert first["title"] == sample_articles[0].title
    assert first["imageUrl"] == sample_articles[0].image_url
    assert first["publishDate"].endswith("Z")
    assert first["trending"] is True
    # no temp files left behind
    assert [p.name for p in path.parent.iterdir()] == ["snap.json"]


def test_save_then_load(tmp_path, sample_articles):
    store = SnapshotStore(tmp_path / "snap.json")
    store.save(RefreshState(articles=sample_articles, last_fetch_date=NOW))

    state = store.load()

    assert state.last_fetch_date == NOW
    assert state.articles == sample_articles


def test_save_failure_keeps_previous_snapshot(tmp_path, sample_articles):
    path = tmp_path / "snap.json"
    store = SnapshotStore(path)
    store.save(RefreshState(articles=sample_articles[:1], last_fetch_date=NOW))

    with patch("trendfeed.store.os.replace", side_effect=OSError("disk full")):
        ok = store.save(RefreshState(articles=sample_articles, last_fetch_date=NOW))

    assert ok is False
    assert len(store.load().articles) == 1
    assert [p.name for p in tmp_path.iterdir()] == ["snap.json"]


def test_save_to_unwritable_location_returns_false(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    store = SnapshotStore(blocker / "snap.json")
    assert store.save(RefreshState()) is False
