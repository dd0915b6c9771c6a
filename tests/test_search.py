"""Tests for keyword search."""

from __future__ import annotations

import pytest

from pagefinder.index.search import KeywordMatch, find_keyword_matches, search_keyword
from pagefinder.models import Document, Page


def _document(doc_id: int, name: str, *contents: str) -> Document:
    pages = [
        Page(id=doc_id * 10 + number, document_id=doc_id, page_number=number, content=content)
        for number, content in enumerate(contents, start=1)
    ]
    return Document(
        id=doc_id,
        name=name,
        original_fingerprint=f"hash{doc_id}",
        created_at="2024-01-01",
        modified_at="2024-01-01",
        pages=pages,
    )


@pytest.fixture
def documents() -> list[Document]:
    return [
        _document(
            1,
            "TestDoc1.txt",
            "hello world this is a test document for searching",
            "another page with different content here",
        ),
        _document(2, "TestDoc2.txt", "software testing is important for quality assurance"),
        _document(3, "ArabicDoc.txt", "بسم الله الرحمن الرحيم"),
    ]


class TestKeywordMatch:
    """Test KeywordMatch dataclass."""

    def test_describe(self) -> None:
        """Should render name, page and context."""
        match = KeywordMatch(document_id=1, document_name="a.txt", page_number=2, context="hello world")

        assert match.describe() == "a.txt (page 2): hello world"


class TestSearchKeyword:
    """Test search_keyword function."""

    def test_existing_keyword(self, documents: list[Document]) -> None:
        """Should report the first document containing the keyword."""
        results = search_keyword("test", documents)

        assert results
        assert "TestDoc1.txt" in results[0]

    def test_keyword_in_second_document(self, documents: list[Document]) -> None:
        """Should find keywords present only in a later document."""
        results = search_keyword("testing", documents)

        assert len(results) == 1
        assert "TestDoc2.txt" in results[0]

    def test_preceding_word_context(self, documents: list[Document]) -> None:
        """Should include the word before the keyword."""
        results = search_keyword("world", documents)

        assert "hello" in results[0]
        assert results[0].endswith("hello world")

    def test_keyword_at_start(self, documents: list[Document]) -> None:
        """Should use the keyword alone when nothing precedes it."""
        matches = find_keyword_matches("hello", documents)

        assert len(matches) == 1
        assert matches[0].context == "hello"

    def test_multiple_documents(self) -> None:
        """Should return one description per matching document."""
        docs = [
            _document(10, "DocA.txt", "unit test is good"),
            _document(11, "DocB.txt", "integration test is better"),
        ]

        results = search_keyword("test", docs)

        assert len(results) == 2
        assert "DocA.txt" in results[0] and "unit test" in results[0]
        assert "DocB.txt" in results[1] and "integration test" in results[1]

    def test_first_hit_per_document(self) -> None:
        """Should stop at the first page that matches."""
        docs = [_document(1, "Doc.txt", "no match here", "first keyword hit", "second keyword hit")]

        matches = find_keyword_matches("keyword", docs)

        assert len(matches) == 1
        assert matches[0].page_number == 2
        assert matches[0].context == "first keyword"

    def test_pages_scanned_in_page_order(self) -> None:
        """Should scan pages by page number, not list position."""
        document = _document(1, "Doc.txt", "early keyword", "late keyword")
        document.pages.reverse()

        matches = find_keyword_matches("keyword", [document])

        assert matches[0].page_number == 1

    def test_match_inside_word(self) -> None:
        """Should take the word before the word that contains the match."""
        docs = [_document(1, "Doc.txt", "software testing matters")]

        matches = find_keyword_matches("sting", docs)

        assert matches[0].context == "software sting"

    def test_arabic_keyword(self, documents: list[Document]) -> None:
        """Should match Arabic content literally."""
        matches = find_keyword_matches("الرحمن", documents)

        assert len(matches) == 1
        assert matches[0].document_name == "ArabicDoc.txt"
        assert matches[0].context == "الله الرحمن"

    def test_non_existing_keyword(self, documents: list[Document]) -> None:
        """Should return an empty list when nothing matches."""
        assert search_keyword("xyznonexistent", documents) == []

    def test_empty_document_list(self) -> None:
        """Should return an empty list for no documents."""
        assert search_keyword("test", []) == []

    def test_minimum_length_keyword(self, documents: list[Document]) -> None:
        """Should accept exactly three characters."""
        results = search_keyword("for", documents)

        assert len(results) == 2

    @pytest.mark.parametrize("keyword", ["", "a", "ab", "hi"])
    def test_short_keyword_rejected(self, documents: list[Document], keyword: str) -> None:
        """Should reject keywords shorter than three characters."""
        with pytest.raises(ValueError):
            search_keyword(keyword, documents)

    def test_short_keyword_rejected_without_documents(self) -> None:
        """Should validate before scanning anything."""
        with pytest.raises(ValueError):
            search_keyword("hi", [])

    def test_case_sensitive(self, documents: list[Document]) -> None:
        """Should not match different case."""
        assert search_keyword("HELLO", documents) == []

    def test_length_counts_characters(self) -> None:
        """Should measure keyword length in characters, so two emoji are too short."""
        docs = [_document(1, "Emoji.txt", "hi \U0001F600\U0001F600\U0001F600 there")]

        with pytest.raises(ValueError):
            search_keyword("\U0001F600\U0001F600", docs)
        matches = find_keyword_matches("\U0001F600\U0001F600\U0001F600", docs)

        assert matches[0].context == "hi \U0001F600\U0001F600\U0001F600"

    def test_custom_min_length(self, documents: list[Document]) -> None:
        """Should honour a caller-supplied minimum length."""
        with pytest.raises(ValueError):
            search_keyword("test", documents, min_length=5)
