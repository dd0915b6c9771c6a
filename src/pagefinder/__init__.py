"""PageFinder: pagination, fingerprinting, keyword search and TF-IDF scoring for text documents."""

from pagefinder.index.pagination import PAGE_SIZE, paginate
from pagefinder.index.search import KeywordMatch, find_keyword_matches, search_keyword
from pagefinder.index.tfidf import TfIdfScorer, relevance_against
from pagefinder.models import Document, Page
from pagefinder.utils.files import fingerprint
from pagefinder.utils.text import normalize_arabic

__all__ = [
    "PAGE_SIZE",
    "Document",
    "KeywordMatch",
    "Page",
    "TfIdfScorer",
    "find_keyword_matches",
    "fingerprint",
    "normalize_arabic",
    "paginate",
    "relevance_against",
    "search_keyword",
]
