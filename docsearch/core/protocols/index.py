"""Index protocol for dependency injection."""
from typing import Iterable, Optional, Protocol, runtime_checkable

from ..models.document import Document, SearchResult
from ..models.query import SearchOptions


@runtime_checkable
class IndexProtocol(Protocol):
    """Protocol for a full-text index over site documents."""

    def add_all(self, documents: Iterable[Document]) -> None:
        """Add documents to the index.

        Args:
            documents: Documents with unique ids.

        Raises:
            DuplicateDocumentError: If an id is already indexed.
        """
        ...

    def search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
    ) -> list[SearchResult]:
        """Search indexed documents.

        Args:
            query: Raw query text.
            options: Overrides for the index search defaults.

        Returns:
            Results accepted by the options filter, best score first.
        """
        ...

    @property
    def document_count(self) -> int:
        """Number of indexed documents."""
        ...
