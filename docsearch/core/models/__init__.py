"""Domain models."""
from .document import Document, SearchResult, SearchResponse
from .query import FilterSet, Query, SearchOptions
from .view import RenderedView, SessionState

__all__ = [
    "Document",
    "SearchResult",
    "SearchResponse",
    "FilterSet",
    "Query",
    "SearchOptions",
    "RenderedView",
    "SessionState",
]
