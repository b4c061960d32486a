from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Source:
    """A configured news feed."""

    id: str
    name: str
    url: str
