"""Utility helpers for fingerprinting content and locating text files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from pagefinder.config import DEFAULT_TEXT_EXTENSIONS


def fingerprint(text: str) -> str:
    """Return the MD5 digest of ``text`` (UTF-8) as 32 uppercase hex characters.

    Raises:
        TypeError: if ``text`` is None.
    """
    if text is None:
        raise TypeError("Cannot fingerprint None; pass a string")
    return hashlib.md5(text.encode("utf-8")).hexdigest().upper()


def fingerprint_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Fingerprint a file's text exactly as an import would store it.

    The file is decoded the same way the importer reads it (universal newlines),
    so the result matches the stored ``original_fingerprint``.
    """
    return fingerprint(path.read_text(encoding=encoding))


def get_file_extension(name: str) -> str:
    """Return the text after the last dot of ``name``, or ``""`` when there is none."""
    base = Path(name).name or name
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[1]


def iter_text_paths(
    inputs: Iterable[Path], *, extensions: Sequence[str] = DEFAULT_TEXT_EXTENSIONS
) -> Iterator[Path]:
    """Yield importable text files from input paths, descending into directories."""
    suffixes = tuple(ext.lower() for ext in extensions)
    for item in inputs:
        if item.is_dir():
            children = sorted(child for child in item.rglob("*") if child.is_file())
            yield from iter_text_paths(children, extensions=suffixes)
        elif item.is_file() and item.suffix.lower() in suffixes:
            yield item
