from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..models import Article, ArticleAnalysis, Confidence, CurrencyImpact, Direction
from ..utils.logging import get_logger
from .economies import ECONOMIES, SIGNALS, Economy, Signal

logger = get_logger("fx.processors.impact")

PLACEHOLDER_SUMMARY = "No summary available for this article."
NO_CATALYST_REASON = "Mentioned without a clear directional catalyst"

HEADLINE_MULTIPLIER = 1.5
DIRECTION_THRESHOLD = 0.2
SUMMARY_MAX_SENTENCES = 2
SUMMARY_MAX_WORDS = 45

_sentence_split_re = re.compile(r"(?<=[.!?])\s+")


@dataclass(slots=True)
class _Passage:
    text: str
    is_headline: bool


def _truncate_words(text: str, max_words: int) -> str:
    words = text.split()
    return " ".join(words[:max_words]) + "..." if len(words) > max_words else text


def summarize_content(content: str) -> str:
    """Lead sentences of the article body, or a placeholder when empty."""
    sentences = [s.strip() for s in _sentence_split_re.split(content or "") if s.strip()]
    if not sentences:
        return PLACEHOLDER_SUMMARY
    lead = " ".join(sentences[:SUMMARY_MAX_SENTENCES])
    return _truncate_words(lead, SUMMARY_MAX_WORDS)


def _passages(article: Article) -> List[_Passage]:
    passages = [_Passage(text=article.title.lower(), is_headline=True)]
    for sentence in _sentence_split_re.split(article.content or ""):
        sentence = sentence.strip()
        if sentence:
            passages.append(_Passage(text=sentence.lower(), is_headline=False))
    return passages


def _match_signals(passages: Sequence[_Passage]) -> List[Tuple[Signal, str, float]]:
    """Return (signal, matched phrase, effective weight) per signal, headline hits weighted up."""
    matched: Dict[str, Tuple[Signal, str, float]] = {}
    for signal in SIGNALS:
        for passage in passages:
            m = signal.pattern.search(passage.text)
            if not m:
                continue
            weight = signal.weight * (HEADLINE_MULTIPLIER if passage.is_headline else 1.0)
            current = matched.get(signal.id)
            if current is None or abs(weight) > abs(current[2]):
                matched[signal.id] = (signal, m.group(0), weight)
    # keep table order for stable reasons
    return [matched[s.id] for s in SIGNALS if s.id in matched]


def _direction_for(score: float) -> Direction:
    if score >= DIRECTION_THRESHOLD:
        return Direction.BULLISH
    if score <= -DIRECTION_THRESHOLD:
        return Direction.BEARISH
    return Direction.NEUTRAL


def _confidence_for(signal_count: int, in_headline: bool) -> Confidence:
    if signal_count >= 3 or (signal_count >= 2 and in_headline):
        return Confidence.HIGH
    if signal_count >= 1:
        return Confidence.MEDIUM
    return Confidence.LOW


def _assess_economy(economy: Economy, passages: Sequence[_Passage]) -> CurrencyImpact | None:
    relevant = [p for p in passages if economy.pattern.search(p.text)]
    if not relevant:
        return None

    in_headline = any(p.is_headline for p in relevant)
    signals = _match_signals(relevant)
    raw_score = sum((weight for _, _, weight in signals), 0.0)
    score = round(max(-1.0, min(1.0, raw_score)), 2)

    reasons: List[str] = []
    if in_headline:
        reasons.append(f"{economy.name} referenced in headline")
    reasons.extend(f"{signal.reason} ('{phrase}')" for signal, phrase, _ in signals)
    if not signals:
        reasons.append(NO_CATALYST_REASON)

    return CurrencyImpact(
        economy_id=economy.id,
        economy_name=economy.name,
        currency=economy.currency,
        direction=_direction_for(score),
        confidence=_confidence_for(len(signals), in_headline),
        score=score,
        supporting_reasons=reasons,
        major_pairs=list(economy.major_pairs),
    )


def analyze(article: Article) -> Tuple[str, List[CurrencyImpact]]:
    """Score the currency impact of a single article.

    Each economy is assessed only on the headline and the body sentences that
    mention it, so one article can move several currencies in different
    directions. Returns the article summary and the impacts ordered by
    descending score magnitude.
    """
    passages = _passages(article)
    impacts = [
        impact
        for impact in (_assess_economy(economy, passages) for economy in ECONOMIES)
        if impact is not None
    ]
    impacts.sort(key=lambda i: abs(i.score), reverse=True)
    return summarize_content(article.content), impacts


def analyze_article(article: Article) -> ArticleAnalysis:
    """Analyze an article, degrading to a zero-impact result on malformed input."""
    try:
        summary, impacts = analyze(article)
    except Exception as exc:  # noqa: BLE001 - malformed articles yield no impacts
        logger.warning("Impact analysis failed for '%s': %s", getattr(article, "link", "?"), exc)
        return ArticleAnalysis(article=article, summary=PLACEHOLDER_SUMMARY, impacts=[])
    logger.debug("Analyzed '%s': %d impact(s)", article.title, len(impacts))
    return ArticleAnalysis(article=article, summary=summary, impacts=impacts)
