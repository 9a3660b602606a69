import logging
from pathlib import Path
from typing import Optional

from .json_loader import JsonLoader
from .search_index_loader import SearchIndexLoader

logger = logging.getLogger(__name__)


class CompositeLoader:

    def __init__(self):
        self._loaders = [
            SearchIndexLoader(),
            JsonLoader(),
        ]

    def supports(self, file_path: Path) -> bool:
        return any(loader.supports(file_path) for loader in self._loaders)

    def load(self, file_path: Path) -> Optional[list[dict]]:

        for loader in self._loaders:
            if loader.supports(file_path):
                try:
                    return loader.load(file_path)
                except (OSError, ValueError) as e:
                    logger.error(f"Failed to load {file_path}: {e}")
                    return None
        return None
