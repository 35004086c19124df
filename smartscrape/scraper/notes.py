"""Conversion from scraped content blocks to the note editor's block format."""

from __future__ import annotations

import uuid
from typing import Iterable, List

from smartscrape.scraper.models import BlockKind, ContentBlock, NoteBlock


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _heading_type(level: int) -> str:
    # The editor only has three heading sizes.
    return f"h{min(level, 3)}"


def to_note_blocks(blocks: Iterable[ContentBlock]) -> List[NoteBlock]:
    """Map *blocks* onto note blocks.

    Headings, paragraphs and quotes map one-to-one; bullet and numbered lists
    expand into one note block per item.
    """
    notes: List[NoteBlock] = []
    for block in blocks:
        if block.kind is BlockKind.HEADING:
            notes.append(NoteBlock(_new_id(), _heading_type(block.level), block.text))
        elif block.is_list:
            notes.extend(
                NoteBlock(_new_id(), block.kind.value, item) for item in block.items
            )
        else:
            notes.append(NoteBlock(_new_id(), block.kind.value, block.text))
    return notes
