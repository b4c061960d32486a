from __future__ import annotations

import hashlib
import html
import re
import unicodedata
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from ..models import Article, RawArticle, Source
from ..utils.logging import get_logger

_whitespace_re = re.compile(r"\s+")
_control_chars_re = re.compile(r"[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F]")

_PUNCT_TRANSLATION = {
    ord("\u2018"): "'",  # left single quote
    ord("\u2019"): "'",  # right single quote
    ord("\u201C"): '"',  # left double quote
    ord("\u201D"): '"',  # right double quote
    ord("\u2013"): "-",  # en dash
    ord("\u2014"): "-",  # em dash
    ord("\u00A0"): " ",  # non-breaking space
}

UNTITLED = "Untitled"

_logger = get_logger("fx.processors.normalize")


def clean_html_to_text(raw_html: str | None) -> str:
    """Clean HTML to normalized plain text.

    - Strip tags
    - Unescape HTML entities
    - Collapse whitespace
    """
    if not raw_html:
        return ""

    soup = BeautifulSoup(raw_html, "html.parser")
    text = soup.get_text(" ")
    text = html.unescape(text)
    text = _whitespace_re.sub(" ", text)
    return text.strip()


def normalize_plain_text(text: str | None) -> str:
    """Normalize plain text for downstream processing.

    - Strip BOM
    - Replace curly quotes/dashes and non-breaking spaces
    - Unicode normalize (NFKC)
    - Remove control characters
    - Collapse whitespace
    """
    if not text:
        return ""

    if text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")

    text = text.translate(_PUNCT_TRANSLATION)
    text = unicodedata.normalize("NFKC", text)
    text = _control_chars_re.sub(" ", text)
    return _whitespace_re.sub(" ", text).strip()


def parse_date_to_iso(value: str | datetime | None) -> Optional[str]:
    """Parse a feed date into an ISO 8601 string, or None if unparseable.

    Accepts ISO 8601 (``Z`` suffix included), RFC 822 as used by RSS, and a
    few numeric day formats. Naive values are taken to be UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip()
        if not text:
            return None
        dt = _parse_date_string(text)
        if dt is None:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


def _parse_date_string(text: str) -> Optional[datetime]:
    iso_candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_candidate)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%d.%m.%Y"):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _fallback_link(source: Source, title: str) -> str:
    digest = hashlib.sha1(title.encode("utf-8")).hexdigest()[:12]
    return f"{source.url}#{digest}"


def transform_article(source: Source, raw: RawArticle) -> Article:
    """Build an ``Article`` from a raw feed item.

    - Title is cleaned of markup and normalized; empty titles become "Untitled"
    - Missing links get a stable fallback derived from the feed URL and title
    - ``iso_date`` is preferred over ``pub_date``; unparseable dates become None
    - Content prefers the full HTML body, then the snippet
    """
    title = normalize_plain_text(clean_html_to_text(raw.title)) or UNTITLED
    link = (raw.link or "").strip() or _fallback_link(source, title)
    published_at = parse_date_to_iso(raw.iso_date) or parse_date_to_iso(raw.pub_date)

    content = normalize_plain_text(clean_html_to_text(raw.content))
    if not content:
        content = normalize_plain_text(clean_html_to_text(raw.content_snippet))

    return Article(
        title=title,
        link=link,
        source_name=source.name,
        published_at=published_at,
        content=content,
    )


def batch_normalize(source: Source, items: Iterable[RawArticle]) -> List[Article]:
    """Normalize feed items from one source.

    Any item that fails normalization is skipped with a warning.
    """
    normalized: List[Article] = []
    for raw in items:
        try:
            normalized.append(transform_article(source, raw))
        except Exception as exc:  # noqa: BLE001 - one bad item must not sink the feed
            _logger.warning("Failed to normalize item '%s' from %s: %s", getattr(raw, "title", "?"), source.name, exc)
    return normalized
