"""Presentation-side rollups over analysed articles."""

from .aggregate import CONFIDENCE_WEIGHT, aggregate_impacts, resolve_direction

__all__ = ["CONFIDENCE_WEIGHT", "aggregate_impacts", "resolve_direction"]
