"""Keyword search over stored document pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from pagefinder.config import DEFAULT_MIN_KEYWORD_LENGTH
from pagefinder.models import Document, Page

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class KeywordMatch:
    document_id: int
    document_name: str
    page_number: int
    context: str

    def describe(self) -> str:
        return f"{self.document_name} (page {self.page_number}): {self.context}"


def _preceding_word(content: str, position: int) -> str | None:
    """Return the whitespace-delimited word before the one starting at ``position``."""
    words = content[:position].split()
    # A match that starts mid-word shares its first token with the prefix.
    if words and position > 0 and not content[position - 1].isspace():
        words.pop()
    return words[-1] if words else None


def _match_page(keyword: str, page: Page) -> str | None:
    position = page.content.find(keyword)
    if position < 0:
        return None
    previous = _preceding_word(page.content, position)
    return f"{previous} {keyword}" if previous else keyword


def find_keyword_matches(
    keyword: str,
    documents: Iterable[Document],
    *,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
) -> List[KeywordMatch]:
    """Return the first occurrence of ``keyword`` in each document.

    Matching is a literal, case-sensitive substring test against page content
    in page order. Documents without a hit are left out.

    Raises:
        ValueError: if ``keyword`` is shorter than ``min_length`` characters.
    """
    if keyword is None or len(keyword) < min_length:
        raise ValueError(f"Keyword must be at least {min_length} characters long")

    matches: List[KeywordMatch] = []
    for document in documents:
        for page in sorted(document.pages, key=lambda p: p.page_number):
            context = _match_page(keyword, page)
            if context is None:
                continue
            matches.append(
                KeywordMatch(
                    document_id=document.id,
                    document_name=document.name,
                    page_number=page.page_number,
                    context=context,
                )
            )
            break

    LOGGER.debug("Keyword %r matched %d document(s)", keyword, len(matches))
    return matches


def search_keyword(
    keyword: str,
    documents: Iterable[Document],
    *,
    min_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
) -> List[str]:
    """Return one human-readable match description per matching document."""
    return [match.describe() for match in find_keyword_matches(keyword, documents, min_length=min_length)]
