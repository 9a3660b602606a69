from typing import Optional

import pytest

from docsearch.core.models.document import Document, SearchResult
from docsearch.core.models.query import SearchOptions


def make_result(
    location: str,
    score: float = 2.0,
    category: str = "page",
    title: str = "",
    text: str = "",
    page: str = "",
    doc_id: int = 0,
) -> SearchResult:
    return SearchResult(
        id=doc_id,
        location=location,
        title=title or location,
        text=text,
        category=category,
        page=page,
        score=score,
    )


class FakeIndex:
    """Index double returning canned results and recording queries."""

    def __init__(self, results: Optional[list[SearchResult]] = None):
        self.results = results or []
        self.calls: list[tuple[str, Optional[SearchOptions]]] = []

    @property
    def queries(self) -> list[str]:
        return [query for query, _ in self.calls]

    @property
    def document_count(self) -> int:
        return len(self.results)

    def add_all(self, documents) -> None:
        pass

    def search(self, query: str, options: Optional[SearchOptions] = None) -> list[SearchResult]:
        self.calls.append((query, options))
        if options is None or options.filter is None:
            return list(self.results)
        return [r for r in self.results if options.filter(r)]


@pytest.fixture
def documents() -> list[Document]:
    return [
        Document(0, "index.html", "Home", "Welcome to the documentation of Documenter.", "page"),
        Document(
            1,
            "lib/anchors.html#Documenter.Anchors.add!",
            "Documenter.Anchors.add!",
            "Adds a new anchor to the anchor map.",
            "function",
            "Anchors",
        ),
        Document(2, "man/guide.html", "Guide", "Writing docstrings and building pages.", "page"),
        Document(3, "man/guide.html#Building", "Building", "Call makedocs to render the manual.", "section", "Guide"),
        Document(4, "lib/macros.html#@docs", "@docs", "Splices docstrings into a page.", "macro"),
        Document(5, "man/syntax.html", "Syntax", "Fenced code blocks and admonitions.", "page"),
    ]


@pytest.fixture
def fake_index() -> FakeIndex:
    return FakeIndex(
        [
            make_result("man/guide.html", score=5.0, title="Guide", text="Writing docstrings."),
            make_result("man/guide.html#Building", score=3.0, category="section", title="Building"),
            make_result("man/guide.html", score=2.0, title="Guide again"),
            make_result("lib/anchors.html", score=0.5, category="function", title="anchors"),
        ]
    )
