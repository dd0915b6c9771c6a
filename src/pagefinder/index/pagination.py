"""Split imported text into fixed-size pages."""

from __future__ import annotations

from typing import List

from pagefinder.config import DEFAULT_PAGE_SIZE
from pagefinder.models import Page
from pagefinder.utils.text import iter_page_slices

PAGE_SIZE = DEFAULT_PAGE_SIZE


def paginate(
    content: str | None, *, page_size: int = PAGE_SIZE, document_id: int = 0
) -> List[Page]:
    """Split ``content`` into pages of ``page_size`` code points.

    Page numbers run from 1 in slice order. Page ids are left at 0 until a
    store assigns them. Empty or missing content still yields a single empty
    page so that every document has a page 1.
    """
    pages = [
        Page(id=0, document_id=document_id, page_number=number, content=chunk)
        for number, chunk in enumerate(iter_page_slices(content or "", page_size=page_size), start=1)
    ]
    if not pages:
        pages.append(Page(id=0, document_id=document_id, page_number=1, content=""))
    return pages
