from __future__ import annotations

from typing import Callable, List

import pytest

from fx_monitor.models import (
    Article,
    ArticleAnalysis,
    Confidence,
    CurrencyImpact,
    Direction,
    Source,
)

_PAIRS = {
    "USD": ["EUR/USD", "USD/JPY"],
    "EUR": ["EUR/USD", "EUR/GBP"],
    "JPY": ["USD/JPY", "EUR/JPY"],
    "GBP": ["GBP/USD", "EUR/GBP"],
}


@pytest.fixture
def source() -> Source:
    return Source(id="fxstreet", name="FXStreet", url="https://www.fxstreet.com/rss/news")


@pytest.fixture
def make_article() -> Callable[..., Article]:
    def _make(title: str = "Headline", content: str = "", link: str | None = None, published_at: str | None = None) -> Article:
        return Article(
            title=title,
            link=link or f"https://example.com/{abs(hash(title))}",
            source_name="Example Wire",
            published_at=published_at,
            content=content,
        )

    return _make


@pytest.fixture
def make_impact() -> Callable[..., CurrencyImpact]:
    def _make(
        currency: str = "USD",
        score: float = 0.5,
        direction: Direction = Direction.BULLISH,
        confidence: Confidence = Confidence.LOW,
        economy_name: str | None = None,
        major_pairs: List[str] | None = None,
    ) -> CurrencyImpact:
        return CurrencyImpact(
            economy_id=currency.lower(),
            economy_name=economy_name or f"{currency} economy",
            currency=currency,
            direction=direction,
            confidence=confidence,
            score=score,
            supporting_reasons=["test reason"],
            major_pairs=list(major_pairs if major_pairs is not None else _PAIRS.get(currency, [])),
        )

    return _make


@pytest.fixture
def make_analysis(make_article) -> Callable[..., ArticleAnalysis]:
    counter = {"n": 0}

    def _make(*impacts: CurrencyImpact) -> ArticleAnalysis:
        counter["n"] += 1
        article = make_article(title=f"Article {counter['n']}", link=f"https://example.com/a/{counter['n']}")
        return ArticleAnalysis(article=article, summary="summary", impacts=list(impacts))

    return _make
