from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(slots=True)
class RawArticle:
    """Feed item as delivered by the fetcher; every field may be missing."""

    title: Optional[str] = None
    link: Optional[str] = None
    pub_date: Optional[str] = None
    iso_date: Optional[str] = None
    content: Optional[str] = None
    content_snippet: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Article:
    title: str
    link: str
    source_name: str
    published_at: Optional[str] = None

    # normalized plain text used for analysis; not part of the payload
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "sourceName": self.source_name,
            "publishedAt": self.published_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Article":
        return cls(
            title=str(data.get("title") or ""),
            link=str(data.get("link") or ""),
            source_name=str(data.get("sourceName") or ""),
            published_at=data.get("publishedAt") or None,
        )
