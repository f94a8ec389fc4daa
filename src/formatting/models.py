"""
Defines the records passed between the Workshop.codes responses and the bot replies.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

WORKSHOP_CODES_GREEN = 0x3FBF74


def parse_timestamp(value: str) -> datetime:
    """Parses an ISO-8601 timestamp as sent by Workshop.codes, e.g. '2022-07-25T18:03:12.511Z'."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class CodePost:
    """
    One post from the /search.json endpoint.
    """
    title: str
    username: str
    code: str
    thumbnail: Optional[str]
    categories: Tuple[str, ...]
    created_at: datetime
    last_revision_created_at: datetime

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "CodePost":
        return cls(
            title=data["title"],
            username=data["user"]["username"],
            code=data["code"],
            thumbnail=data.get("thumbnail"),
            categories=tuple(data.get("categories") or ()),
            created_at=parse_timestamp(data["created_at"]),
            last_revision_created_at=parse_timestamp(data["last_revision_created_at"]),
        )


@dataclass(frozen=True)
class WikiArticle:
    """
    One article from the /wiki/search/<query>.json endpoint.
    """
    title: str
    slug: str
    content: str
    category_title: str
    updated_at: datetime

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "WikiArticle":
        return cls(
            title=data["title"],
            slug=data["slug"],
            content=data.get("content") or "",
            category_title=data["category"]["title"],
            updated_at=parse_timestamp(data["updated_at"]),
        )


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True)
class DisplayRecord:
    """
    A formatted search result, independent of how the chat client renders it.
    """
    title: str
    url: str
    description: str
    fields: Tuple[EmbedField, ...]
    footer_text: str
    footer_icon_url: str
    thumbnail_url: Optional[str] = None
    color: int = WORKSHOP_CODES_GREEN


@dataclass(frozen=True)
class SearchReply:
    """The text and records the bot answers a search with."""
    content: str
    records: Tuple[DisplayRecord, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.records)
