"""Keyword tables driving the rule-based impact analyzer.

Keywords are matched case-insensitively against normalized article text and
must not be glued to other letters or digits ("euro" does not match
"european"). Signal weights are positive for currency-supportive news and
negative for currency-negative news.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Pattern, Tuple


def _phrase_pattern(phrases: Tuple[str, ...]) -> Pattern[str]:
    alternatives = "|".join(re.escape(p) for p in sorted(phrases, key=len, reverse=True))
    return re.compile(rf"(?<![a-z0-9])(?:{alternatives})(?![a-z0-9])")


@dataclass(slots=True, frozen=True)
class Economy:
    id: str
    name: str
    currency: str
    keywords: Tuple[str, ...]
    major_pairs: Tuple[str, ...]
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", _phrase_pattern(self.keywords))


@dataclass(slots=True, frozen=True)
class Signal:
    id: str
    reason: str
    weight: float
    phrases: Tuple[str, ...]
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", _phrase_pattern(self.phrases))


ECONOMIES: List[Economy] = [
    Economy(
        id="us",
        name="United States",
        currency="USD",
        keywords=(
            "united states", "u.s.", "america", "american", "federal reserve", "fed",
            "fomc", "powell", "treasury", "treasuries", "wall street", "nonfarm payrolls",
            "dollar", "greenback",
        ),
        major_pairs=("EUR/USD", "USD/JPY", "GBP/USD", "USD/CAD"),
    ),
    Economy(
        id="eurozone",
        name="Eurozone",
        currency="EUR",
        keywords=(
            "eurozone", "euro zone", "euro area", "ecb", "european central bank", "lagarde",
            "euro", "germany", "german", "france", "french", "italy", "bund", "bunds",
        ),
        major_pairs=("EUR/USD", "EUR/GBP", "EUR/JPY"),
    ),
    Economy(
        id="uk",
        name="United Kingdom",
        currency="GBP",
        keywords=(
            "united kingdom", "uk", "u.k.", "britain", "british", "bank of england", "boe",
            "bailey", "sterling", "pound", "gilt", "gilts",
        ),
        major_pairs=("GBP/USD", "EUR/GBP", "GBP/JPY"),
    ),
    Economy(
        id="japan",
        name="Japan",
        currency="JPY",
        keywords=("japan", "japanese", "bank of japan", "boj", "ueda", "yen", "nikkei", "tokyo"),
        major_pairs=("USD/JPY", "EUR/JPY", "GBP/JPY"),
    ),
    Economy(
        id="china",
        name="China",
        currency="CNY",
        keywords=(
            "china", "chinese", "beijing", "pboc", "people's bank of china", "yuan", "renminbi",
        ),
        major_pairs=("USD/CNH", "AUD/USD"),
    ),
    Economy(
        id="canada",
        name="Canada",
        currency="CAD",
        keywords=("canada", "canadian", "bank of canada", "boc", "macklem", "loonie"),
        major_pairs=("USD/CAD", "CAD/JPY"),
    ),
    Economy(
        id="australia",
        name="Australia",
        currency="AUD",
        keywords=("australia", "australian", "rba", "reserve bank of australia", "aussie"),
        major_pairs=("AUD/USD", "AUD/JPY", "EUR/AUD"),
    ),
    Economy(
        id="switzerland",
        name="Switzerland",
        currency="CHF",
        keywords=("switzerland", "swiss", "snb", "swiss national bank", "swiss franc"),
        major_pairs=("USD/CHF", "EUR/CHF"),
    ),
    Economy(
        id="new-zealand",
        name="New Zealand",
        currency="NZD",
        keywords=("new zealand", "rbnz", "reserve bank of new zealand", "kiwi"),
        major_pairs=("NZD/USD", "AUD/NZD"),
    ),
]


SIGNALS: List[Signal] = [
    # policy
    Signal(
        id="tightening",
        reason="Tighter monetary policy in focus",
        weight=0.35,
        phrases=("rate hike", "rate hikes", "raises rates", "raised rates", "hikes rates", "tightening"),
    ),
    Signal(id="hawkish", reason="Hawkish central bank tone", weight=0.3, phrases=("hawkish",)),
    Signal(
        id="easing",
        reason="Looser monetary policy in focus",
        weight=-0.35,
        phrases=("rate cut", "rate cuts", "cuts rates", "cut rates", "lowers rates", "easing"),
    ),
    Signal(id="dovish", reason="Dovish central bank tone", weight=-0.3, phrases=("dovish",)),
    Signal(
        id="stimulus",
        reason="Stimulus measures weigh on the currency",
        weight=-0.2,
        phrases=("stimulus", "quantitative easing", "bond buying"),
    ),
    # activity and prices
    Signal(
        id="inflation-up",
        reason="Firm inflation supports higher rates",
        weight=0.2,
        phrases=(
            "inflation rises", "inflation rose", "inflation accelerates", "hotter-than-expected",
            "sticky inflation", "price pressures",
        ),
    ),
    Signal(
        id="growth-up",
        reason="Upside surprise in economic data",
        weight=0.25,
        phrases=(
            "strong growth", "beats expectations", "beat expectations", "better-than-expected",
            "stronger-than-expected", "expansion", "rebound",
        ),
    ),
    Signal(
        id="growth-down",
        reason="Growth slowdown risk",
        weight=-0.3,
        phrases=("recession", "contraction", "contracts", "slowdown", "stagnation"),
    ),
    Signal(
        id="data-miss",
        reason="Downside surprise in economic data",
        weight=-0.25,
        phrases=(
            "misses expectations", "missed expectations", "worse-than-expected",
            "weaker-than-expected", "disappointing",
        ),
    ),
    # labour market
    Signal(
        id="jobs-up",
        reason="Labour market strength",
        weight=0.25,
        phrases=("job gains", "jobs growth", "hiring surge", "unemployment falls", "unemployment fell"),
    ),
    Signal(
        id="jobs-down",
        reason="Labour market weakness",
        weight=-0.25,
        phrases=("job losses", "layoffs", "unemployment rises", "unemployment rose", "jobless claims rise"),
    ),
    # external balance and risk
    Signal(id="surplus", reason="External surplus supports demand", weight=0.15, phrases=("trade surplus",)),
    Signal(
        id="deficit",
        reason="Widening deficit weighs on the currency",
        weight=-0.15,
        phrases=("trade deficit", "budget deficit"),
    ),
    Signal(
        id="safe-haven",
        reason="Safe-haven demand",
        weight=0.15,
        phrases=("safe haven", "safe-haven"),
    ),
    Signal(
        id="trade-friction",
        reason="Trade friction risk",
        weight=-0.15,
        phrases=("tariff", "tariffs", "sanctions", "trade war"),
    ),
    # price action
    Signal(
        id="momentum-up",
        reason="Price momentum higher",
        weight=0.15,
        phrases=("rally", "rallies", "strengthens", "surges", "jumps", "climbs"),
    ),
    Signal(
        id="momentum-down",
        reason="Price momentum lower",
        weight=-0.15,
        phrases=("slides", "weakens", "tumbles", "plunges", "slumps", "sinks"),
    ),
]
