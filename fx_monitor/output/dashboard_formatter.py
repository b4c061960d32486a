from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from ..models import AggregatedImpact, ArticleAnalysis, CurrencyImpact, DashboardSummary, Direction

DIRECTION_LABELS: Dict[Direction, str] = {
    Direction.BULLISH: "Bullish pressure expected",
    Direction.BEARISH: "Bearish pressure expected",
    Direction.NEUTRAL: "Outlook uncertain",
}

NO_IMPACT_NOTE = (
    "No direct currency impact detected. Monitor for follow-up releases or "
    "central bank commentary."
)
NO_NEWS_NOTE = "No relevant news detected from the selected sources. Try refreshing in a few minutes."
ERROR_MESSAGE = "Failed to analyze latest news."


def _parse_iso(value: str) -> Optional[datetime]:
    try:
        dt = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(value: str) -> str:
    dt = _parse_iso(value)
    if dt is None:
        return value
    return dt.astimezone(timezone.utc).strftime("%a %d %b %H:%M UTC")


def format_published_at(value: Optional[str]) -> str:
    if not value:
        return "Unknown"
    dt = _parse_iso(value)
    if dt is None:
        return value
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def _pairs(pairs: Sequence[str]) -> str:
    return ", ".join(pairs) if pairs else "-"


def _format_topline(aggregated: Sequence[AggregatedImpact]) -> List[str]:
    lines = [
        "## Currency outlook",
        "",
        "| Currency | Economy | Direction | Avg score | Signals | Focus pairs |",
        "| -------- | ------- | --------- | ---------:| -------:| ----------- |",
    ]
    for item in aggregated:
        lines.append(
            f"| {item.currency} | {item.economy_name} | {item.direction.value.upper()} "
            f"| {item.average_score:.2f} | {item.articles} | {_pairs(item.major_pairs)} |"
        )
    lines.append("")
    return lines


def _format_impact(impact: CurrencyImpact) -> str:
    return (
        f"- **{impact.currency} · {impact.economy_name}**: {DIRECTION_LABELS[impact.direction]} "
        f"(score {impact.score:.2f}, confidence {impact.confidence.value.upper()}; "
        f"pairs {_pairs(impact.major_pairs)})"
    )


def _format_article(analysis: ArticleAnalysis) -> List[str]:
    a = analysis.article
    lines = [
        f"### [{a.title}]({a.link})",
        "",
        f"{a.source_name} · {format_published_at(a.published_at)}",
        "",
        analysis.summary,
        "",
    ]
    if not analysis.impacts:
        lines.extend([f"> {NO_IMPACT_NOTE}", ""])
        return lines
    lines.extend(_format_impact(i) for i in analysis.impacts)
    lines.append("")
    lines.extend(f"  - {i.currency} outlook: {' • '.join(i.supporting_reasons)}" for i in analysis.impacts)
    lines.append("")
    return lines


def format_dashboard_markdown(summary: DashboardSummary, aggregated: Sequence[AggregatedImpact]) -> str:
    """Render the dashboard: per-currency outlook first, then one section per article."""
    lines: List[str] = [
        "# Global FX Intelligence Monitor",
        "",
        f"Last updated {format_timestamp(summary.updated_at)}",
        "",
    ]
    if not summary.analyses:
        lines.append(NO_NEWS_NOTE)
        return "\n".join(lines) + "\n"

    if aggregated:
        lines.extend(_format_topline(aggregated))

    lines.extend(["## Articles", ""])
    for analysis in summary.analyses:
        lines.extend(_format_article(analysis))
    return "\n".join(lines).rstrip("\n") + "\n"


def error_payload(exc: BaseException) -> Dict[str, Any]:
    """JSON body reported when a refresh fails."""
    return {
        "message": ERROR_MESSAGE,
        "error": {"name": type(exc).__name__, "message": str(exc)},
    }
