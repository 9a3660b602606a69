"""Protocol interfaces for dependency injection."""
from .index import IndexProtocol
from .loader import DocumentLoaderProtocol

__all__ = [
    "IndexProtocol",
    "DocumentLoaderProtocol",
]
