from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .article import Article


class Direction(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(slots=True, frozen=True)
class CurrencyImpact:
    economy_id: str
    economy_name: str
    currency: str
    direction: Direction
    confidence: Confidence
    score: float
    supporting_reasons: List[str] = field(default_factory=list)
    major_pairs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "economyId": self.economy_id,
            "economyName": self.economy_name,
            "currency": self.currency,
            "direction": self.direction.value,
            "confidence": self.confidence.value,
            "score": self.score,
            "supportingReasons": list(self.supporting_reasons),
            "majorPairs": list(self.major_pairs),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CurrencyImpact":
        return cls(
            economy_id=str(data["economyId"]),
            economy_name=str(data["economyName"]),
            currency=str(data["currency"]),
            direction=Direction(data["direction"]),
            confidence=Confidence(data["confidence"]),
            score=float(data["score"]),
            supporting_reasons=[str(r) for r in data.get("supportingReasons") or []],
            major_pairs=[str(p) for p in data.get("majorPairs") or []],
        )


@dataclass(slots=True, frozen=True)
class ArticleAnalysis:
    article: Article
    summary: str
    impacts: List[CurrencyImpact] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "article": self.article.to_dict(),
            "summary": self.summary,
            "impacts": [i.to_dict() for i in self.impacts],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArticleAnalysis":
        return cls(
            article=Article.from_dict(data.get("article") or {}),
            summary=str(data.get("summary") or ""),
            impacts=[CurrencyImpact.from_dict(i) for i in data.get("impacts") or []],
        )


@dataclass(slots=True, frozen=True)
class DashboardSummary:
    updated_at: str
    analyses: List[ArticleAnalysis] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "updatedAt": self.updated_at,
            "analyses": [a.to_dict() for a in self.analyses],
        }

    def to_json_str(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DashboardSummary":
        return cls(
            updated_at=str(data["updatedAt"]),
            analyses=[ArticleAnalysis.from_dict(a) for a in data.get("analyses") or []],
        )


@dataclass(slots=True, frozen=True)
class AggregatedImpact:
    """Per-currency rollup of impacts across every analysed article."""

    economy_id: str
    economy_name: str
    currency: str
    average_score: float
    direction: Direction
    articles: int
    bullish: int
    bearish: int
    neutral: int
    major_pairs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "economyId": self.economy_id,
            "economyName": self.economy_name,
            "currency": self.currency,
            "averageScore": self.average_score,
            "direction": self.direction.value,
            "articles": self.articles,
            "bullish": self.bullish,
            "bearish": self.bearish,
            "neutral": self.neutral,
            "majorPairs": list(self.major_pairs),
        }
