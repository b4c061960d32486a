from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from ..models import Article, DashboardSummary
from ..utils.logging import get_logger
from .impact import analyze_article

logger = get_logger("fx.processors.summary")


def build_dashboard_summary(articles: Iterable[Article], *, now: Optional[datetime] = None) -> DashboardSummary:
    """Analyze every article, in input order, and stamp the refresh time."""
    stamp = now or datetime.now(timezone.utc)
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    analyses = [analyze_article(article) for article in articles]
    logger.info(
        "Built dashboard summary: articles=%d, impacts=%d",
        len(analyses),
        sum(len(a.impacts) for a in analyses),
    )
    return DashboardSummary(updated_at=stamp.isoformat(), analyses=analyses)
