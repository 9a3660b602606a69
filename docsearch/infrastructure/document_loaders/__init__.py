"""Search index loader implementations."""
from .search_index_loader import SearchIndexLoader
from .json_loader import JsonLoader
from .composite_loader import CompositeLoader
from .errors import SearchIndexFormatError

__all__ = ["SearchIndexLoader", "JsonLoader", "CompositeLoader", "SearchIndexFormatError"]
