"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

UNTITLED = "Untitled Article"
NO_CONTENT = "No readable content found on this page."


class BlockKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BULLET = "bullet"
    NUMBERED = "numbered"
    QUOTE = "quote"


@dataclass(frozen=True)
class ContentBlock:
    """One semantic unit of extracted article content.

    ``level`` is set only for headings and ``items`` only for the two list
    kinds; the classmethod constructors are the intended way to build one.
    """

    kind: BlockKind
    text: str
    level: Optional[int] = None
    items: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is BlockKind.HEADING:
            if self.level is None or not 1 <= self.level <= 6:
                raise ValueError(f"heading level must be 1-6, got {self.level!r}")
        elif self.level is not None:
            raise ValueError(f"{self.kind.value} blocks carry no level")
        if self.items and not self.is_list:
            raise ValueError(f"{self.kind.value} blocks carry no items")

    @classmethod
    def heading(cls, level: int, text: str) -> "ContentBlock":
        return cls(BlockKind.HEADING, text, level=level)

    @classmethod
    def paragraph(cls, text: str) -> "ContentBlock":
        return cls(BlockKind.PARAGRAPH, text)

    @classmethod
    def quote(cls, text: str) -> "ContentBlock":
        return cls(BlockKind.QUOTE, text)

    @classmethod
    def bullet(cls, items) -> "ContentBlock":
        items = tuple(items)
        return cls(BlockKind.BULLET, ", ".join(items), items=items)

    @classmethod
    def numbered(cls, items) -> "ContentBlock":
        items = tuple(items)
        return cls(BlockKind.NUMBERED, ", ".join(items), items=items)

    @property
    def is_list(self) -> bool:
        return self.kind in (BlockKind.BULLET, BlockKind.NUMBERED)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind.value, "text": self.text}
        if self.level is not None:
            data["level"] = self.level
        if self.is_list:
            data["items"] = list(self.items)
        return data


@dataclass(frozen=True)
class PageMetadata:
    """Head/meta values pulled from the unstripped document."""

    title: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    published_date: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class RelayFailure:
    """Why a single relay attempt did not produce usable HTML.

    ``kind`` is one of ``timeout``, ``network``, ``http_status`` or
    ``rejected``.
    """

    relay: str
    kind: str
    reason: str


@dataclass(frozen=True)
class ScrapedArticle:
    """The pipeline's sole output record."""

    source_url: str
    title: str = UNTITLED
    plain_text: str = ""
    content_blocks: Tuple[ContentBlock, ...] = field(default_factory=tuple)
    author: Optional[str] = None
    published_date: Optional[str] = None
    meta_description: Optional[str] = None
    featured_image: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, url: str, message: str) -> "ScrapedArticle":
        """Return an error record: *message* set, every content field empty."""
        return cls(source_url=url, title="", plain_text="", error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_url": self.source_url,
            "title": self.title,
            "plain_text": self.plain_text,
            "content_blocks": [b.to_dict() for b in self.content_blocks],
            "author": self.author,
            "published_date": self.published_date,
            "meta_description": self.meta_description,
            "featured_image": self.featured_image,
            "error": self.error,
        }


@dataclass(frozen=True)
class NoteBlock:
    """A block in the note editor's format (``h1``, ``bullet``, ...)."""

    id: str
    type: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "type": self.type, "content": self.content}
