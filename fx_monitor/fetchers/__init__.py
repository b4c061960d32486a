"""Content fetching layer for RSS sources."""

from .rss import entry_to_raw_article, fetch_rss_entries

__all__ = ["fetch_rss_entries", "entry_to_raw_article"]
