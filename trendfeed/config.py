"""Load and validate configuration from YAML with env var substitution."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

DEFAULT_RELEVANCE_KEYWORDS = [
    "resume", "cv", "career", "job", "portfolio", "design", "branding",
    "freelance", "remote work", "productivity", "professional", "linkedin",
    "interview", "hiring", "ux", "ui", "graphic design", "logo",
]


def _load_dotenv(path: str | Path = ".env") -> None:
    """Load a .env file into os.environ (without overwriting existing vars)."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("'\"")
            if key and key not in os.environ:
                os.environ[key] = value


def _resolve_env_vars(value: Any) -> Any:
    """Recursively resolve ${ENV_VAR} patterns in config values."""
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")
        match = pattern.search(value)
        if match:
            if match.group(0) == value:
                return os.environ.get(match.group(1), "")
            return pattern.sub(lambda m: os.environ.get(m.group(1), ""), value)
        return value
    if isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_resolve_env_vars(item) for item in value]
    return value


def load_config(path: str | Path = "config.yaml") -> dict[str, Any]:
    """Load config from YAML file and resolve environment variables."""
    _load_dotenv()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return _resolve_env_vars(raw)


def get_active_sources(config: dict) -> list[str]:
    """Return list of enabled source names (sources are on unless disabled)."""
    sources = config.get("sources", {})
    return [
        name for name, cfg in sources.items()
        if (cfg or {}).get("enabled", True)
    ]


def get_source_config(config: dict, name: str) -> dict:
    """Return the config block for one source, or an empty dict."""
    return config.get("sources", {}).get(name) or {}


def get_store_path(config: dict) -> str:
    """Get snapshot file path from config."""
    return config.get("store", {}).get("path", "data/trending-articles.json")


def get_refresh_interval(config: dict) -> timedelta:
    """Minimum time between two network refreshes."""
    days = config.get("pipeline", {}).get("refresh_interval_days", 15)
    return timedelta(days=days)


def get_max_articles(config: dict) -> int:
    """Working set size cap."""
    return config.get("pipeline", {}).get("max_articles", 20)


def get_schedule_config(config: dict) -> dict:
    """Cron expression and timezone for the daily refresh check."""
    cfg = config.get("scheduler", {})
    return {
        "cron": cfg.get("cron", "0 6 * * *"),
        "timezone": cfg.get("timezone", "UTC"),
    }


def get_brand(config: dict) -> str:
    """Brand name used in SEO copy and editorial blocks."""
    return config.get("site", {}).get("brand", "DesignForge360")


def get_relevance_keywords(config: dict) -> list[str]:
    """Keywords an external item must mention to be kept."""
    keywords = config.get("relevance", {}).get("keywords")
    return list(keywords) if keywords else list(DEFAULT_RELEVANCE_KEYWORDS)
