from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

import feedparser
import requests

from ..models import RawArticle, Source
from ..utils.logging import get_logger

logger = get_logger("fx.fetchers.rss")


_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/127.0.0.0 Safari/537.36"
    )
}


def _parse_iso_date(entry: dict) -> Optional[str]:
    # feedparser normalizes dates to UTC struct_time in '*_parsed'
    for key in ("published_parsed", "updated_parsed"):
        tm = entry.get(key)
        if tm:
            try:
                return datetime(*tm[:6], tzinfo=timezone.utc).isoformat()
            except (TypeError, ValueError):
                return None
    return None


def entry_to_raw_article(entry: dict) -> RawArticle:
    content_val = None
    contents = entry.get("content")
    if contents and isinstance(contents, list):
        content_val = contents[0].get("value")

    return RawArticle(
        title=entry.get("title"),
        link=entry.get("link"),
        pub_date=entry.get("published") or entry.get("updated"),
        iso_date=_parse_iso_date(entry),
        content=content_val,
        content_snippet=entry.get("summary"),
    )


def fetch_rss_entries(source: Source, *, timeout: float = 10.0) -> List[RawArticle]:
    """Fetch and parse RSS/Atom feed entries.

    The request is done with ``requests`` for consistent timeouts and headers;
    the body is parsed by ``feedparser``. Network errors and HTTP status codes
    of 400 and above are raised to the caller.
    """
    logger.debug("Fetching RSS from %s", source.url)
    try:
        resp = requests.get(source.url, headers=_DEFAULT_HEADERS, timeout=timeout)
        if resp.status_code >= 400:
            logger.warning("RSS fetch failed (%s): %s", resp.status_code, source.url)
            resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("RSS request error for %s: %s", source.url, exc)
        raise

    parsed = feedparser.parse(resp.content)
    if getattr(parsed, "bozo", False):
        # feedparser sets bozo on malformed feeds but may still yield entries
        logger.debug("Feed 'bozo' flagged for %s: %s", source.url, getattr(parsed, "bozo_exception", None))

    items = [entry_to_raw_article(entry) for entry in getattr(parsed, "entries", []) or []]
    logger.info("Fetched %d RSS entries from %s", len(items), source.name)
    return items
