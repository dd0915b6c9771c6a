"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_PAGE_SIZE = 100
DEFAULT_MIN_KEYWORD_LENGTH = 3
DEFAULT_TEXT_EXTENSIONS = (".txt", ".md")


@dataclass(slots=True)
class AppConfig:
    page_size: int = DEFAULT_PAGE_SIZE
    min_keyword_length: int = DEFAULT_MIN_KEYWORD_LENGTH
    text_extensions: Tuple[str, ...] = DEFAULT_TEXT_EXTENSIONS
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        self.text_extensions = tuple(ext.lower() for ext in self.text_extensions)

    def is_text_file(self, name: str) -> bool:
        """Return True when ``name`` ends with one of the importable extensions."""
        return name.lower().endswith(self.text_extensions)
