"""Core PageFinder data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Page:
    """Fixed-size slice of a document's text."""

    id: int
    document_id: int
    page_number: int
    content: str


@dataclass(slots=True)
class Document:
    """Imported document with its ordered pages.

    ``original_fingerprint`` is stamped at import time and is never recomputed;
    compare it against ``fingerprint(document.content)`` to detect edits.
    """

    id: int
    name: str
    original_fingerprint: str
    created_at: str
    modified_at: str
    pages: List[Page] = field(default_factory=list)

    @property
    def content(self) -> str:
        return "".join(page.content for page in self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def get_page(self, page_number: int) -> Page:
        if not 1 <= page_number <= len(self.pages):
            raise KeyError(f"Document {self.id} has no page {page_number}")
        return self.pages[page_number - 1]
