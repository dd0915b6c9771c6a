"""Text file import pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from pagefinder.config import AppConfig
from pagefinder.index.storage import DocumentStore
from pagefinder.utils.files import fingerprint, iter_text_paths

LOGGER = logging.getLogger(__name__)


def find_text_files(paths: Sequence[Path], config: AppConfig | None = None) -> list[Path]:
    """Find all importable text files under the given paths."""
    extensions = (config or AppConfig()).text_extensions
    return list(iter_text_paths(paths, extensions=extensions))


@dataclass(slots=True)
class IndexStats:
    inserted: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    processed_files: list[Path] = field(default_factory=list)

    def increment(self, status: str, path: Path) -> None:
        if status == "inserted":
            self.inserted += 1
        elif status == "updated":
            self.updated += 1
        elif status == "skipped":
            self.skipped += 1
        else:
            self.failed += 1
        self.processed_files.append(path)


class Indexer:
    """Reads text files and stores them as paginated documents."""

    def __init__(self, store: DocumentStore, config: AppConfig | None = None) -> None:
        self.store = store
        self.config = config or AppConfig()

    def index(self, paths: Sequence[Path]) -> IndexStats:
        """Import every text file found under the given paths."""
        text_files = find_text_files(paths, self.config)
        if not text_files:
            LOGGER.warning("No text files found")
            return IndexStats()

        stats = IndexStats()
        for path in text_files:
            try:
                LOGGER.info("Processing: %s", path)
                status = self._index_single(path, path.name)
            except (OSError, UnicodeDecodeError) as exc:
                LOGGER.error("Failed to import %s: %s", path, exc)
                status = "failed"
            stats.increment(status, path)
        return stats

    def import_file(self, path: Path, name: str | None = None) -> str:
        """Import a single file, returning its status.

        Unsupported extensions and unreadable files report ``"failed"``.
        """
        display_name = name or path.name
        if not self.config.is_text_file(display_name):
            LOGGER.warning("Refusing to import %s: not a text file", display_name)
            return "failed"
        try:
            return self._index_single(path, display_name)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error("Failed to import %s: %s", path, exc)
            return "failed"

    def _index_single(self, path: Path, name: str) -> str:
        content = path.read_text(encoding=self.config.encoding)
        existing = self.store.find_by_name(name)
        if existing is not None:
            if existing.original_fingerprint == fingerprint(content):
                return "skipped"
            self.store.delete(existing.id)
            self.store.create(name, content)
            return "updated"
        self.store.create(name, content)
        return "inserted"
