"""Post-aggregation processing."""

from trendfeed.process.dedup import DedupProcessor, merge

__all__ = ["DedupProcessor", "merge"]
