"""Typed models used across the application."""

from .source import Source
from .article import Article, RawArticle
from .impact import (
    AggregatedImpact,
    ArticleAnalysis,
    Confidence,
    CurrencyImpact,
    DashboardSummary,
    Direction,
)

__all__ = [
    "Source",
    "Article",
    "RawArticle",
    "Direction",
    "Confidence",
    "CurrencyImpact",
    "ArticleAnalysis",
    "DashboardSummary",
    "AggregatedImpact",
]
