"""Application entrypoint for the FX intelligence monitor.

This script orchestrates the high-level flow:
1) load the news source configuration
2) fetch feeds and analyze currency impact (or load a saved summary)
3) print the summary as JSON or render the markdown dashboard
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .analysis import aggregate_impacts
from .models import DashboardSummary
from .orchestrator import Orchestrator, RefreshError
from .output.dashboard_formatter import error_payload, format_dashboard_markdown
from .utils.config_loader import ConfigError, load_sources_config
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import PipelineConfig

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_REFRESH_FAILED = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="FX intelligence monitor – score currency impact of financial news feeds"
    )
    parser.add_argument(
        "--config",
        default="config/sources.yaml",
        help="Path to sources configuration file (YAML)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "markdown"],
        default="json",
        help="Output format: raw dashboard summary JSON or rendered markdown dashboard",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write output to this file instead of stdout",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Render a previously saved summary JSON instead of fetching feeds",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--max-items-per-source",
        type=int,
        default=None,
        help="Limit number of feed items taken from each source",
    )
    parser.add_argument(
        "--max-articles",
        type=int,
        default=None,
        help="Limit number of articles analyzed after sorting by recency",
    )
    return parser.parse_args(argv)


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def _render(summary: DashboardSummary, fmt: str) -> str:
    if fmt == "markdown":
        return format_dashboard_markdown(summary, aggregate_impacts(summary.analyses))
    return summary.to_json_str()


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("fx.agent")

    if args.input:
        input_path = Path(args.input)
        logger.info("Rendering saved summary from %s", input_path)
        try:
            summary = DashboardSummary.from_dict(json.loads(input_path.read_text(encoding="utf-8")))
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.exception("Failed to read saved summary: %s", exc)
            return EXIT_CONFIG_ERROR
        _emit(_render(summary, args.format), args.output)
        return EXIT_OK

    config_path = Path(args.config)
    logger.info("Loading sources configuration from %s", config_path)
    try:
        sources = load_sources_config(config_path)
    except ConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return EXIT_CONFIG_ERROR
    logger.info("Loaded %d source(s)", len(sources))

    config = PipelineConfig()
    if args.max_items_per_source is not None:
        config.max_items_per_source = args.max_items_per_source
    if args.max_articles is not None:
        config.max_articles = args.max_articles

    try:
        summary = Orchestrator(config=config).refresh(sources)
    except RefreshError as exc:
        logger.error("Refresh failed: %s", exc)
        _emit(json.dumps(error_payload(exc.__cause__ or exc), ensure_ascii=False, indent=2), args.output)
        return EXIT_REFRESH_FAILED

    _emit(_render(summary, args.format), args.output)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
