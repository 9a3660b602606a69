import logging
from abc import ABC, abstractmethod
from typing import Iterable

from ..models.document import SearchResult

logger = logging.getLogger(__name__)


class ResultFilter(ABC):
    """Predicate applied by the index after scoring."""

    @abstractmethod
    def accepts(self, result: SearchResult) -> bool:
        """Check whether a result is kept."""
        ...


class MinScoreFilter(ResultFilter):
    """Drop weak matches."""

    def __init__(self, min_score: float = 1.0):
        """Initialize filter.

        Args:
            min_score: Lowest accepted score.
        """
        self._min_score = min_score

    def accepts(self, result: SearchResult) -> bool:
        return result.score >= self._min_score


class CategoryFilter(ResultFilter):
    """Keep results whose category is selected."""

    def __init__(self, categories: Iterable[str]):
        """Initialize filter.

        Args:
            categories: Selected categories. Empty accepts everything.
        """
        self._categories = frozenset(categories)

    def accepts(self, result: SearchResult) -> bool:
        if not self._categories:
            return True
        return result.category in self._categories


class AllOf(ResultFilter):
    """Conjunction of filters."""

    def __init__(self, filters: Iterable[ResultFilter]):
        self._filters = list(filters)

    def accepts(self, result: SearchResult) -> bool:
        return all(f.accepts(result) for f in self._filters)

    def __call__(self, result: SearchResult) -> bool:
        return self.accepts(result)


class ResultStrategy(ABC):
    """Base class for post-search result strategies."""

    @abstractmethod
    def apply(self, query: str, results: list[SearchResult]) -> list[SearchResult]:
        """Apply strategy to results."""
        ...


class LocationDedupStrategy(ResultStrategy):
    """Collapse results pointing at the same location.

    The first occurrence wins, so index order is kept. Results without a
    location are dropped.
    """

    def apply(self, query: str, results: list[SearchResult]) -> list[SearchResult]:
        seen: set[str] = set()
        unique = []

        for result in results:
            if not result.location:
                continue
            if result.location in seen:
                continue
            seen.add(result.location)
            unique.append(result)

        if len(unique) < len(results):
            logger.debug(f"Dedup: {len(results)} → {len(unique)} results")

        return unique
