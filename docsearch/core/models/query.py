"""Query and filter models."""
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

from .document import SearchResult


class FilterSet:
    """Categories currently toggled on.

    An empty set means no category restriction.
    """

    def __init__(self, categories: Iterable[str] = ()):
        self._selected: set[str] = set(categories)

    def toggle(self, category: str) -> bool:
        """Flip membership of a category.

        Returns:
            True if the category is selected afterwards.
        """
        if category in self._selected:
            self._selected.remove(category)
            return False
        self._selected.add(category)
        return True

    def clear(self) -> None:
        self._selected.clear()

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._selected)

    def __contains__(self, category: object) -> bool:
        return category in self._selected

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._selected))

    def __len__(self) -> int:
        return len(self._selected)

    def __bool__(self) -> bool:
        return bool(self._selected)

    def __repr__(self) -> str:
        return f"FilterSet({sorted(self._selected)!r})"


@dataclass(frozen=True)
class Query:
    """Free text plus the selected categories."""
    text: str
    filters: frozenset[str] = frozenset()

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass
class SearchOptions:
    """Options for a single index search.

    None leaves the index default in place.
    """
    prefix: Optional[bool] = None
    fuzzy: Optional[float] = None
    boost: dict[str, float] = field(default_factory=dict)
    filter: Optional[Callable[[SearchResult], bool]] = None

    def merged_with(self, defaults: "SearchOptions") -> "SearchOptions":
        """Fill unset values from defaults."""
        return SearchOptions(
            prefix=defaults.prefix if self.prefix is None else self.prefix,
            fuzzy=defaults.fuzzy if self.fuzzy is None else self.fuzzy,
            boost={**defaults.boost, **self.boost},
            filter=self.filter if self.filter is not None else defaults.filter,
        )
