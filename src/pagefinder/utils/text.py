"""Text helpers: Arabic normalization, tokenization and fixed-size slicing."""

from __future__ import annotations

import unicodedata
from typing import Iterator, List

# Arabic, Arabic Supplement, Arabic Extended-B, Arabic Extended-A, Presentation Forms-A and -B.
_ARABIC_BLOCKS = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x0870, 0x089F),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)


def is_arabic_letter(char: str) -> bool:
    """Return True for a letter (category ``Lo``) inside one of the Arabic blocks."""
    code = ord(char)
    if not any(start <= code <= end for start, end in _ARABIC_BLOCKS):
        return False
    return unicodedata.category(char) == "Lo"


def normalize_arabic(text: str | None) -> str:
    """Reduce text to Arabic letters separated by single spaces.

    Anything that is neither an Arabic letter nor whitespace is dropped
    outright, so ``"كتاب1قلم"`` becomes one token. Digits, diacritics and
    tatweel go the same way. ``None`` normalizes to ``""``.
    """
    if not text:
        return ""
    kept = "".join(char for char in text if char.isspace() or is_arabic_letter(char))
    return " ".join(kept.split())


def tokenize(text: str) -> List[str]:
    """Split already-normalized text into terms."""
    return text.split()


def iter_page_slices(text: str, *, page_size: int = 100) -> Iterator[str]:
    """Yield successive ``page_size`` slices of text; the last one holds the remainder.

    Yields nothing for empty text.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    for start in range(0, len(text), page_size):
        yield text[start : start + page_size]
