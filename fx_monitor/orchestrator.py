from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from .fetchers import fetch_rss_entries
from .models import Article, DashboardSummary, RawArticle, Source
from .processors import batch_normalize, build_dashboard_summary
from .utils.logging import get_logger
from .utils.pipeline_config import PipelineConfig

logger = get_logger("fx.orchestrator")

Fetcher = Callable[..., List[RawArticle]]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class RefreshError(Exception):
    """Raised when any source fails during a refresh; the refresh yields nothing."""

    def __init__(self, source: Source, cause: BaseException) -> None:
        super().__init__(f"Failed to fetch {source.name} ({source.url}): {cause}")
        self.source = source


def _published_key(article: Article) -> datetime:
    if not article.published_at:
        return _EPOCH
    try:
        dt = datetime.fromisoformat(article.published_at)
    except ValueError:
        return _EPOCH
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def select_articles(articles: Iterable[Article], *, max_articles: int | None) -> List[Article]:
    """Drop repeated links, order newest first and keep the top ``max_articles``.

    Articles without a usable date sort after all dated ones; ties keep
    their incoming order.
    """
    seen_links: set[str] = set()
    unique: List[Article] = []
    for art in articles:
        if art.link in seen_links:
            logger.debug("Skipping repeated link: %s", art.link)
            continue
        seen_links.add(art.link)
        unique.append(art)

    unique.sort(key=_published_key, reverse=True)
    if max_articles is not None and max_articles >= 0:
        unique = unique[:max_articles]
    return unique


class Orchestrator:
    def __init__(
        self,
        *,
        config: Optional[PipelineConfig] = None,
        fetcher: Fetcher = fetch_rss_entries,
    ) -> None:
        self.config = config or PipelineConfig()
        self.fetcher = fetcher

    def _fetch_source(self, source: Source) -> List[Article]:
        try:
            items = self.fetcher(source, timeout=self.config.fetch_timeout)
        except Exception as exc:  # noqa: BLE001 - any fetch failure aborts the refresh
            logger.error("Failed to fetch from %s: %s", source.name, exc)
            raise RefreshError(source, exc) from exc

        limit = self.config.max_items_per_source
        if limit is not None and limit >= 0:
            items = items[:limit]
        return batch_normalize(source, items)

    def fetch_all(self, sources: Iterable[Source]) -> List[Article]:
        """Fetch articles from all sources concurrently.

        Results are concatenated in source order regardless of completion
        order. The first failing source raises ``RefreshError``.
        """
        src_list = list(sources)
        if not src_list:
            return []

        max_workers = max(1, min(self.config.fetch_workers, len(src_list)))
        logger.debug("Starting concurrent fetch for %d sources (workers=%d)", len(src_list), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self._fetch_source, s) for s in src_list]
            results: List[Article] = []
            for fut in futures:
                results.extend(fut.result())

        logger.info("Concurrent fetch complete: total=%d from sources=%d", len(results), len(src_list))
        return results

    def refresh(self, sources: Iterable[Source], *, now: Optional[datetime] = None) -> DashboardSummary:
        """Fetch every source and rebuild the dashboard summary from scratch."""
        fetched = self.fetch_all(sources)
        selected = select_articles(fetched, max_articles=self.config.max_articles)
        logger.info("Selected %d of %d fetched article(s)", len(selected), len(fetched))
        return build_dashboard_summary(selected, now=now)
