"""In-memory document store."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Protocol

from pagefinder.config import DEFAULT_PAGE_SIZE
from pagefinder.index.pagination import paginate
from pagefinder.models import Document
from pagefinder.utils.files import fingerprint

LOGGER = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class DocumentStore(Protocol):
    """Operations the editor needs from wherever documents are kept."""

    def create(self, name: str, content: str) -> Document: ...

    def get(self, doc_id: int) -> Document | None: ...

    def find_by_name(self, name: str) -> Document | None: ...

    def list_documents(self) -> List[Document]: ...

    def update_page(self, doc_id: int, page_number: int, content: str) -> Document: ...

    def delete(self, doc_id: int) -> bool: ...


class InMemoryDocumentStore:
    """Keeps documents in a dict keyed by id, assigning ids on create."""

    def __init__(self, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size
        self._documents: Dict[int, Document] = {}
        self._next_doc_id = 1
        self._next_page_id = 1
        self._lock = threading.Lock()

    def _take_page_id(self) -> int:
        page_id = self._next_page_id
        self._next_page_id += 1
        return page_id

    @contextmanager
    def transaction(self) -> Iterator[Dict[int, Document]]:
        with self._lock:
            yield self._documents

    def create(self, name: str, content: str) -> Document:
        """Paginate ``content`` and store it as a new document.

        The original fingerprint is taken here, once, from the imported text.
        """
        with self.transaction() as documents:
            doc_id = self._next_doc_id
            self._next_doc_id += 1
            pages = paginate(content, page_size=self.page_size, document_id=doc_id)
            for page in pages:
                page.id = self._take_page_id()
            now = _timestamp()
            document = Document(
                id=doc_id,
                name=name,
                original_fingerprint=fingerprint(content or ""),
                created_at=now,
                modified_at=now,
                pages=pages,
            )
            documents[doc_id] = document
        LOGGER.info("Stored %s as document %d (%d page(s))", name, doc_id, len(pages))
        return document

    def get(self, doc_id: int) -> Document | None:
        with self.transaction() as documents:
            return documents.get(doc_id)

    def find_by_name(self, name: str) -> Document | None:
        with self.transaction() as documents:
            for document in documents.values():
                if document.name == name:
                    return document
        return None

    def list_documents(self) -> List[Document]:
        with self.transaction() as documents:
            return [documents[key] for key in sorted(documents)]

    def update_page(self, doc_id: int, page_number: int, content: str) -> Document:
        """Replace one page's content and re-paginate the document.

        Edited text longer than a page spills onto the following pages. Existing
        page ids are reused in order; extra pages get fresh ids. The original
        fingerprint is left as imported.
        """
        with self.transaction() as documents:
            if doc_id not in documents:
                raise KeyError(f"Unknown document id {doc_id}")
            document = documents[doc_id]
            document.get_page(page_number)
            parts = [page.content for page in document.pages]
            parts[page_number - 1] = content
            pages = paginate("".join(parts), page_size=self.page_size, document_id=doc_id)
            old_ids = [page.id for page in document.pages]
            for index, page in enumerate(pages):
                page.id = old_ids[index] if index < len(old_ids) else self._take_page_id()
            updated = replace(document, pages=pages, modified_at=_timestamp())
            documents[doc_id] = updated
        LOGGER.debug("Updated page %d of document %d (%d page(s))", page_number, doc_id, len(pages))
        return updated

    def delete(self, doc_id: int) -> bool:
        with self.transaction() as documents:
            removed = documents.pop(doc_id, None)
        if removed is None:
            LOGGER.warning("Cannot delete unknown document id %d", doc_id)
            return False
        return True
