"""Search service - query execution and result filtering."""

import logging
from typing import Iterable, Optional

from ..models.document import SearchResponse
from ..models.query import SearchOptions
from ..protocols.index import IndexProtocol
from ..strategies.filtering import (
    AllOf,
    CategoryFilter,
    LocationDedupStrategy,
    MinScoreFilter,
    ResultStrategy,
)

logger = logging.getLogger(__name__)


class SearchService:
    """Runs queries against the index and deduplicates the results."""

    def __init__(
        self,
        index: IndexProtocol,
        min_score: float = 1.0,
        options: Optional[SearchOptions] = None,
        strategies: list[ResultStrategy] | None = None,
    ):
        """Initialize search service.

        Args:
            index: Full-text index.
            min_score: Minimum score a result needs.
            options: Per-query overrides of the index defaults.
            strategies: Post-search strategies, location dedup by default.
        """
        self._index = index
        self._min_score = min_score
        self._options = options or SearchOptions()
        self._strategies = strategies or [LocationDedupStrategy()]

    def search(self, query: str, filters: Iterable[str] = ()) -> SearchResponse:
        """Search documents.

        Args:
            query: Raw query text.
            filters: Selected categories, empty for no restriction.

        Returns:
            Search response with deduplicated results.
        """
        predicate = AllOf([MinScoreFilter(self._min_score), CategoryFilter(filters)])
        options = SearchOptions(
            prefix=self._options.prefix,
            fuzzy=self._options.fuzzy,
            boost=dict(self._options.boost),
            filter=predicate,
        )

        try:
            results = self._index.search(query, options)
        except Exception as e:
            logger.error(f"Search error: {e}")
            return SearchResponse(results=[])

        for strategy in self._strategies:
            results = strategy.apply(query, results)

        logger.info(f"Search: {len(results)} results for '{query[:50]}'")
        return SearchResponse(results=results)
