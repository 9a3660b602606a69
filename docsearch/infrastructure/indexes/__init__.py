"""Index implementations."""
from .memory_index import DuplicateDocumentError, MemoryIndex

__all__ = ["DuplicateDocumentError", "MemoryIndex"]
