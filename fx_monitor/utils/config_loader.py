from __future__ import annotations

import re
from pathlib import Path
from typing import List
from urllib.parse import urlparse

import yaml

from ..models import Source


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


REQUIRED_FIELDS = {"name", "url"}

_slug_re = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    return _slug_re.sub("-", value.lower()).strip("-")


def _validate_source_dict(entry: dict) -> None:
    """Validate a single source mapping from YAML.

    Required fields: name (str), url (http/https).
    Optional fields:
      - id: str, unique across sources (defaults to a slug of the name)
    """
    missing = REQUIRED_FIELDS - set(entry)
    if missing:
        raise ConfigError(f"Missing required fields: {sorted(missing)} in {entry}")

    name = str(entry["name"] or "").strip()
    if not name:
        raise ConfigError(f"Source name must not be empty: {entry}")

    url_str = str(entry["url"]).strip()
    parsed = urlparse(url_str)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid URL '{url_str}'. Must be absolute http(s) URL.")

    if "id" in entry and entry["id"] is not None:
        if not isinstance(entry["id"], str) or not entry["id"].strip():
            raise ConfigError("'id' must be a non-empty string if provided")


def _coerce_source(entry: dict) -> Source:
    name = str(entry["name"]).strip()
    source_id = str(entry.get("id") or "").strip() or slugify(name)
    return Source(id=source_id, name=name, url=str(entry["url"]).strip())


def parse_sources(data: dict) -> List[Source]:
    """Build ``Source`` instances from an already-parsed mapping."""
    sources_raw = data.get("sources")
    if sources_raw is None:
        return []
    if not isinstance(sources_raw, list):
        raise ConfigError("'sources' must be a list in the YAML configuration")

    sources: List[Source] = []
    seen_ids: set[str] = set()
    for item in sources_raw:
        if not isinstance(item, dict):
            raise ConfigError(f"Each source must be a mapping, got: {type(item)}")
        _validate_source_dict(item)
        source = _coerce_source(item)
        if source.id in seen_ids:
            raise ConfigError(f"Duplicate source id '{source.id}'")
        seen_ids.add(source.id)
        sources.append(source)
    return sources


def load_sources_config(path: Path | str) -> List[Source]:
    """Load ``sources.yaml`` into typed ``Source`` instances.

    YAML structure:
      - Top-level mapping
      - Key ``sources``: list of source mappings with fields
          - name: string (required)
          - url: http/https URL of an RSS/Atom feed (required)
          - id: string (optional)

    Unknown top-level keys are ignored for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML value must be a mapping")
    return parse_sources(data)
