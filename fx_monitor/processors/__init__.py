"""Processing pipeline: normalization, impact analysis, dashboard summary."""

from .normalize import (
    batch_normalize,
    clean_html_to_text,
    normalize_plain_text,
    parse_date_to_iso,
    transform_article,
)
from .impact import analyze, analyze_article
from .summary import build_dashboard_summary

__all__ = [
    "clean_html_to_text",
    "normalize_plain_text",
    "parse_date_to_iso",
    "transform_article",
    "batch_normalize",
    "analyze",
    "analyze_article",
    "build_dashboard_summary",
]
