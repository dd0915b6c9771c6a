"""Editor facade tying storage, search, scoring and linguistic tools together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from pagefinder.config import AppConfig
from pagefinder.index.indexer import Indexer
from pagefinder.index.search import search_keyword
from pagefinder.index.storage import DocumentStore, InMemoryDocumentStore
from pagefinder.index.tfidf import relevance_against
from pagefinder.models import Document
from pagefinder.nlp.provider import LinguisticProvider, NullLinguisticProvider
from pagefinder.utils.files import fingerprint, get_file_extension

LOGGER = logging.getLogger(__name__)


class EditorService:
    """High-level API used by the editor front end."""

    def __init__(
        self,
        store: DocumentStore | None = None,
        provider: LinguisticProvider | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.store = store if store is not None else InMemoryDocumentStore(page_size=self.config.page_size)
        self.provider = provider or NullLinguisticProvider()
        self.indexer = Indexer(self.store, self.config)

    def create_file(self, name: str, content: str) -> Document:
        return self.store.create(name, content)

    def import_text_file(self, path: Path, name: str | None = None) -> bool:
        """Import a ``.txt``/``.md`` file; returns False for anything that did not import."""
        status = self.indexer.import_file(path, name)
        return status != "failed"

    def update_file(self, doc_id: int, page_number: int, content: str) -> Document:
        return self.store.update_page(doc_id, page_number, content)

    def delete_file(self, doc_id: int) -> bool:
        return self.store.delete(doc_id)

    def get_all_files(self) -> List[Document]:
        return self.store.list_documents()

    def get_document(self, doc_id: int) -> Document:
        document = self.store.get(doc_id)
        if document is None:
            raise KeyError(f"Unknown document id {doc_id}")
        return document

    @staticmethod
    def get_file_extension(name: str) -> str:
        return get_file_extension(name)

    def search(self, keyword: str) -> List[str]:
        return search_keyword(
            keyword, self.store.list_documents(), min_length=self.config.min_keyword_length
        )

    def current_fingerprint(self, doc_id: int) -> str:
        """Fingerprint of the document as currently edited."""
        return fingerprint(self.get_document(doc_id).content)

    def has_drifted(self, doc_id: int) -> bool:
        document = self.get_document(doc_id)
        return fingerprint(document.content) != document.original_fingerprint

    def relevance(self, doc_id: int) -> float:
        """TF-IDF of one document against every other stored document."""
        selected = self.get_document(doc_id)
        others = [doc.content for doc in self.store.list_documents() if doc.id != doc_id]
        score = relevance_against(others, selected.content)
        LOGGER.debug("Relevance of document %d against %d other(s): %.4f", doc_id, len(others), score)
        return score

    def transliterate(self, doc_id: int, page_number: int = 1) -> str:
        page = self.get_document(doc_id).get_page(page_number)
        return self.provider.transliterate(page.content)

    def lemmatize(self, text: str) -> Dict[str, str]:
        return self.provider.lemmatize(text)

    def extract_pos(self, text: str) -> Dict[str, List[str]]:
        return self.provider.extract_pos(text)

    def extract_roots(self, text: str) -> Dict[str, str]:
        return self.provider.extract_roots(text)

    def stem(self, text: str) -> Dict[str, str]:
        return self.provider.stem(text)

    def segment(self, text: str) -> Dict[str, str]:
        return self.provider.segment(text)

    def pmi(self, text: str) -> Dict[str, float]:
        return self.provider.pmi(text)

    def pkl(self, text: str) -> Dict[str, float]:
        return self.provider.pkl(text)
