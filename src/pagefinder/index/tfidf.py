"""Corpus-relative TF-IDF scoring over Arabic-normalized text.

Scoring model:

    tf(t)  = count of t in the query / number of query tokens
    idf(t) = ln(1 + N / df(t))        when df(t) > 0
    score  = sum over distinct query terms of tf(t) * idf(t)

where N is the corpus size and df(t) is the number of corpus documents
containing t. Terms absent from the corpus contribute nothing, so an empty
corpus, an empty query or a query in another alphabet all score 0.0, and any
shared term adds a strictly positive amount.
"""

from __future__ import annotations

import logging
import math
import threading
from collections import Counter
from typing import Dict, Iterable, List, Tuple

from pagefinder.utils.text import normalize_arabic, tokenize

LOGGER = logging.getLogger(__name__)


class TfIdfScorer:
    """Append-only corpus with incrementally maintained document frequencies.

    Adds run under an exclusive lock. Scoring reads the corpus size and the
    document frequencies it needs under the same lock, so it never sees a
    half-applied add.
    """

    def __init__(self) -> None:
        self._corpus: List[str] = []
        self._document_frequency: Dict[str, int] = {}
        self._lock = threading.Lock()

    @property
    def corpus_size(self) -> int:
        with self._lock:
            return len(self._corpus)

    @property
    def corpus(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._corpus)

    def document_frequency(self, term: str) -> int:
        with self._lock:
            return self._document_frequency.get(term, 0)

    def add_document_to_corpus(self, raw_text: str | None) -> None:
        """Normalize ``raw_text`` and append it to the corpus."""
        normalized = normalize_arabic(raw_text)
        terms = set(tokenize(normalized))
        with self._lock:
            self._corpus.append(normalized)
            for term in terms:
                self._document_frequency[term] = self._document_frequency.get(term, 0) + 1
        LOGGER.debug("Added corpus document with %d distinct term(s)", len(terms))

    def add_documents(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.add_document_to_corpus(text)

    def calculate_document_tfidf(self, query_text: str | None) -> float:
        """Return the TF-IDF relevance of ``query_text`` against the current corpus."""
        tokens = tokenize(normalize_arabic(query_text))
        if not tokens:
            return 0.0

        counts = Counter(tokens)
        with self._lock:
            total_docs = len(self._corpus)
            frequencies = {term: self._document_frequency.get(term, 0) for term in counts}

        if total_docs == 0:
            return 0.0

        total_tokens = len(tokens)
        score = 0.0
        for term, count in counts.items():
            df = frequencies[term]
            if df == 0:
                continue
            tf = count / total_tokens
            idf = math.log(1.0 + total_docs / df)
            score += tf * idf

        if not math.isfinite(score):
            LOGGER.warning("Non-finite TF-IDF score for query of %d token(s); returning 0.0", total_tokens)
            return 0.0
        return score


def relevance_against(other_texts: Iterable[str], selected_text: str) -> float:
    """Score ``selected_text`` against a fresh corpus built from ``other_texts``."""
    scorer = TfIdfScorer()
    scorer.add_documents(other_texts)
    return scorer.calculate_document_tfidf(selected_text)
