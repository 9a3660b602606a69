"""Index service - loads the site's document list into the index."""

import logging
from pathlib import Path
from typing import Optional

from ..models.document import Document
from ..protocols.index import IndexProtocol
from ..protocols.loader import DocumentLoaderProtocol

logger = logging.getLogger(__name__)


class IndexService:
    """Service for building the search index from a search index file."""

    def __init__(
        self,
        index: IndexProtocol,
        search_index_path: str = "./build/search_index.js",
        loader: Optional[DocumentLoaderProtocol] = None,
    ):
        """Initialize index service.

        Args:
            index: Index to populate.
            search_index_path: Path to search_index.js or a JSON export.
            loader: Search index file loader.
        """
        self._index = index
        self._path = Path(search_index_path)
        self._loader = loader
        self._documents: list[Document] = []

    @property
    def loader(self) -> DocumentLoaderProtocol:
        """Lazy load document loader."""
        if self._loader is None:
            from docsearch.infrastructure.document_loaders import CompositeLoader

            self._loader = CompositeLoader()
        return self._loader

    @property
    def documents(self) -> list[Document]:
        return self._documents

    @property
    def categories(self) -> list[str]:
        """Distinct document categories in first-seen order."""
        return list(dict.fromkeys(doc.category for doc in self._documents))

    def run(self) -> int:
        """Load documents and add them to the index.

        Returns:
            Number of documents indexed.
        """
        if not self._path.exists():
            logger.error(f"Search index not found: {self._path}")
            return 0

        if not self.loader.supports(self._path):
            logger.error(f"Unsupported search index format: {self._path.name}")
            return 0

        entries = self.loader.load(self._path)
        if not entries:
            logger.info("No documents to index")
            return 0

        documents = [
            Document.from_dict(doc_id, entry) for doc_id, entry in enumerate(entries)
        ]
        self._index.add_all(documents)
        self._documents.extend(documents)

        logger.info(
            f"Indexing complete: {len(documents)} documents "
            f"in {len(self.categories)} categories"
        )
        return len(documents)
