from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List

from ..models import AggregatedImpact, ArticleAnalysis, Confidence, CurrencyImpact, Direction

CONFIDENCE_WEIGHT: Dict[Confidence, int] = {
    Confidence.HIGH: 3,
    Confidence.MEDIUM: 2,
    Confidence.LOW: 1,
}

# used only when the direction counts do not produce a single leader
SCORE_THRESHOLD = 0.3

_CENTS = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to two decimals with exact ties going away from zero (0.125 -> 0.13)."""
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


@dataclass(slots=True)
class _CurrencyTally:
    economy_id: str
    economy_name: str
    currency: str
    major_pairs: List[str]
    articles: int = 0
    counts: Dict[Direction, int] = field(default_factory=lambda: {d: 0 for d in Direction})
    scores: List[float] = field(default_factory=list)

    def add(self, impact: CurrencyImpact) -> None:
        self.articles += 1
        self.scores.append(impact.score * CONFIDENCE_WEIGHT[impact.confidence])
        self.counts[impact.direction] += 1

    def average_score(self) -> float:
        if not self.scores:
            return 0.0
        return round_half_up(sum(self.scores) / len(self.scores))

    def finalize(self) -> AggregatedImpact:
        average = self.average_score()
        return AggregatedImpact(
            economy_id=self.economy_id,
            economy_name=self.economy_name,
            currency=self.currency,
            average_score=average,
            direction=resolve_direction(self.counts, average),
            articles=self.articles,
            bullish=self.counts[Direction.BULLISH],
            bearish=self.counts[Direction.BEARISH],
            neutral=self.counts[Direction.NEUTRAL],
            major_pairs=list(self.major_pairs),
        )


def resolve_direction(counts: Dict[Direction, int], average_score: float) -> Direction:
    """Majority direction, falling back to the average score on a tie.

    Only the two largest buckets are compared, so a three-way tie also falls
    back to the score thresholds.
    """
    breakdown = sorted(
        ((d, counts.get(d, 0)) for d in (Direction.BULLISH, Direction.BEARISH, Direction.NEUTRAL)),
        key=lambda item: item[1],
        reverse=True,
    )
    if breakdown[0][1] > breakdown[1][1]:
        return breakdown[0][0]
    if average_score > SCORE_THRESHOLD:
        return Direction.BULLISH
    if average_score < -SCORE_THRESHOLD:
        return Direction.BEARISH
    return Direction.NEUTRAL


def aggregate_impacts(analyses: Iterable[ArticleAnalysis]) -> List[AggregatedImpact]:
    """Roll up per-article impacts into one confidence-weighted entry per currency.

    The result is ordered by descending absolute average score; currencies
    with equal magnitude keep first-seen order. Economy name and major pairs
    come from the first impact seen for each currency.
    """
    tallies: Dict[str, _CurrencyTally] = {}
    for analysis in analyses:
        for impact in analysis.impacts:
            tally = tallies.get(impact.currency)
            if tally is None:
                tally = _CurrencyTally(
                    economy_id=impact.economy_id,
                    economy_name=impact.economy_name,
                    currency=impact.currency,
                    major_pairs=list(impact.major_pairs),
                )
                tallies[impact.currency] = tally
            tally.add(impact)

    aggregated = [tally.finalize() for tally in tallies.values()]
    aggregated.sort(key=lambda item: abs(item.average_score), reverse=True)
    return aggregated
