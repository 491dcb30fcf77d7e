"""CLI entrypoint: python -m trendfeed {serve|refresh|force-refresh|list|search|status|sources}."""

from __future__ import annotations

import argparse
import asyncio
import inspect
import logging
import logging.handlers
import os
import sys
from pathlib import Path

from trendfeed.config import get_store_path, load_config
from trendfeed.query import content_status, get_all, search
from trendfeed.service import TrendingService


def setup_logging(config: dict) -> None:
    """Configure logging with console + rotating file output."""
    root = logging.getLogger()
    root.setLevel(logging.INFO)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    # File handler next to the snapshot (rotate at 5MB, keep 3 backups)
    log_dir = Path(get_store_path(config)).parent
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        str(log_dir / "trendfeed.log"), maxBytes=5 * 1024 * 1024, backupCount=3,
    )
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)


logger = logging.getLogger("trendfeed")


def _print_articles(articles: list) -> None:
    if not articles:
        print("No articles.")
        return
    for i, a in enumerate(articles, 1):
        print(f"{i:>3}. [{a.source}] {a.title[:80]}")
        print(f"     {a.category} | {a.read_time} min | {a.publish_date:%Y-%m-%d}")
        if a.source_url:
            print(f"     {a.source_url[:100]}")


async def cmd_serve(config: dict, args: argparse.Namespace) -> None:
    """Load the snapshot, refresh if stale, then check daily until stopped."""
    from trendfeed.scheduler import RefreshScheduler

    service = TrendingService(config)
    service.load()
    await service.fetch_trending_content()

    scheduler = RefreshScheduler(service, config)
    scheduler.start()
    logger.info("Next scheduled check: %s", scheduler.next_run_time)
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown()


async def cmd_refresh(config: dict, args: argparse.Namespace) -> None:
    """Refresh only if the cached set is stale or empty."""
    service = TrendingService(config)
    service.load()
    articles = await service.fetch_trending_content()
    print(f"{len(articles)} trending articles")


async def cmd_force_refresh(config: dict, args: argparse.Namespace) -> None:
    service = TrendingService(config)
    service.load()
    articles = await service.force_refresh()
    print(f"Force refresh completed - {len(articles)} articles updated")


def cmd_list(config: dict, args: argparse.Namespace) -> None:
    service = TrendingService(config)
    service.load()
    _print_articles(get_all(
        service.get_articles(), args.category, args.source, args.limit,
    ))


def cmd_search(config: dict, args: argparse.Namespace) -> None:
    service = TrendingService(config)
    service.load()
    try:
        results = search(
            service.get_articles(), args.query,
            args.category, args.source, args.limit,
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(2)
    _print_articles(results)


def cmd_status(config: dict, args: argparse.Namespace) -> None:
    service = TrendingService(config)
    service.load()
    status = content_status(service.get_articles(), service.last_fetch_date)
    for key, value in status.items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        print(f"{key:<15} {value}")


async def cmd_sources(config: dict, args: argparse.Namespace) -> None:
    """Fetch every source once without touching the cache (for testing)."""
    from trendfeed.ingest import SOURCES
    from trendfeed.ingest.topics import GeneratedSource

    sources = [cls(config) for cls in SOURCES.values()] + [GeneratedSource(config)]
    total = 0
    for source in sources:
        if not source.enabled:
            print(f"  {source.name}: disabled")
            continue
        items = await source.fetch()
        print(f"  {source.name}: {len(items)} items")
        total += len(items)

    print(f"\nTotal: {total} items fetched")


COMMANDS = {
    "serve": cmd_serve,
    "refresh": cmd_refresh,
    "force-refresh": cmd_force_refresh,
    "list": cmd_list,
    "search": cmd_search,
    "status": cmd_status,
    "sources": cmd_sources,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m trendfeed",
        description="Trending content cache",
    )
    parser.add_argument(
        "--config", default=None,
        help="Config file path (default: config.yaml or CONFIG_PATH env)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("serve", "refresh", "force-refresh", "status", "sources"):
        sub.add_parser(name, help=COMMANDS[name].__doc__)

    list_cmd = sub.add_parser("list", help="Show cached articles")
    search_cmd = sub.add_parser("search", help="Search cached articles")
    search_cmd.add_argument("query")
    for cmd, default_limit in ((list_cmd, None), (search_cmd, 10)):
        cmd.add_argument("--category", default=None)
        cmd.add_argument("--source", default=None)
        cmd.add_argument("--limit", type=int, default=default_limit)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    config_path = args.config or os.environ.get("CONFIG_PATH", "config.yaml")
    config = load_config(config_path)
    setup_logging(config)
    handler = COMMANDS[args.command]

    if inspect.iscoroutinefunction(handler):
        try:
            asyncio.run(handler(config, args))
        except KeyboardInterrupt:
            logger.info("Interrupted")
    else:
        handler(config, args)


if __name__ == "__main__":
    main()
