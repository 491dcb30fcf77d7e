"""Tests for the command-line entrypoint."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from trendfeed.__main__ import build_parser, main
from trendfeed.models import RefreshState
from trendfeed.service import TrendingService
from trendfeed.store import SnapshotStore


def test_parser_list_defaults():
    args = build_parser().parse_args(["list"])
    assert args.command == "list"
    assert args.category is None
    assert args.limit is None


def test_parser_search_defaults():
    args = build_parser().parse_args(["search", "resume", "--category", "Design"])
    assert args.query == "resume"
    assert args.category == "Design"
    assert args.limit == 10


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


@pytest.fixture
def config_file(sample_config, tmp_path, sample_articles):
    """Config on disk plus a warm snapshot."""
    SnapshotStore(sample_config["store"]["path"]).save(
        RefreshState(articles=sample_articles, last_fetch_date=sample_articles[0].fetch_date),
    )
    return str(tmp_path / "config.yaml")


@patch("trendfeed.__main__.setup_logging")
def test_list_prints_cached_articles(mock_logging, config_file, capsys):
    main(["--config", config_file, "list", "--source", "Generated"])

    out = capsys.readouterr().out
    assert "Modern CV Templates That Get Interviews" in out
    assert "HackerNews" not in out


@patch("trendfeed.__main__.setup_logging")
def test_search_blank_query_exits(mock_logging, config_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--config", config_file, "search", " "])

    assert exc.value.code == 2
    assert "Search query is required" in capsys.readouterr().out


@patch("trendfeed.__main__.setup_logging")
def test_status_prints_summary(mock_logging, config_file, capsys):
    main(["--config", config_file, "status"])

    out = capsys.readouterr().out
    assert "totalArticles" in out
    assert "2025-03-01T12:00:00Z" in out


@patch("trendfeed.__main__.setup_logging")
@patch.object(TrendingService, "force_refresh", new_callable=AsyncMock)
def test_force_refresh_command(mock_force, mock_logging, config_file, capsys):
    mock_force.return_value = [object()] * 3

    main(["--config", config_file, "force-refresh"])

    mock_force.assert_awaited_once()
    assert "3 articles updated" in capsys.readouterr().out
