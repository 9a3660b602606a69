"""Core business services."""
from .search_service import SearchService
from .render_service import ResultRenderer
from .index_service import IndexService
from .debounce import Debouncer
from .session import SearchSession

__all__ = [
    "SearchService",
    "ResultRenderer",
    "IndexService",
    "Debouncer",
    "SearchSession",
]
