"""Content enrichment: RawItem -> Article."""

from trendfeed.enrich.enricher import ContentEnricher

__all__ = ["ContentEnricher"]
