"""Result filtering strategies."""
from .filtering import (
    AllOf,
    CategoryFilter,
    LocationDedupStrategy,
    MinScoreFilter,
    ResultFilter,
    ResultStrategy,
)

__all__ = [
    "AllOf",
    "CategoryFilter",
    "LocationDedupStrategy",
    "MinScoreFilter",
    "ResultFilter",
    "ResultStrategy",
]
