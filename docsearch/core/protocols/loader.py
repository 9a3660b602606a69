"""Document loader protocol for dependency injection."""
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class DocumentLoaderProtocol(Protocol):
    """Protocol for reading a site's search index file."""

    def supports(self, file_path: Path) -> bool:
        """Check whether the file format is handled."""
        ...

    def load(self, file_path: Path) -> Optional[list[dict]]:
        """Read raw document entries.

        Args:
            file_path: Search index file.

        Returns:
            Raw entries, or None if the file could not be read.
        """
        ...
