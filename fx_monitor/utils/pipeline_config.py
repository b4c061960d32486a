from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(slots=True)
class PipelineConfig:
    """Refresh limits, read from the environment when the instance is created."""

    max_items_per_source: int = field(default_factory=lambda: _env_int("FX_MAX_ITEMS_PER_SOURCE", 8))
    max_articles: int = field(default_factory=lambda: _env_int("FX_MAX_ARTICLES", 24))
    fetch_timeout: float = field(default_factory=lambda: _env_float("FX_FETCH_TIMEOUT", 10.0))
    fetch_workers: int = field(default_factory=lambda: _env_int("FX_FETCH_WORKERS", 8))
