import logging
import math
from typing import Callable, Iterable, Optional

import numpy as np
from rank_bm25 import BM25Plus
from rapidfuzz.distance import Levenshtein

from docsearch.core.models.document import Document, SearchResult
from docsearch.core.models.query import SearchOptions
from docsearch.core.processing import process_term, tokenize

logger = logging.getLogger(__name__)

PREFIX_WEIGHT = 0.375
FUZZY_WEIGHT = 0.45
MAX_FUZZY = 6


class DuplicateDocumentError(ValueError):
    """Raised when a document id is added twice."""

    def __init__(self, doc_id: int):
        super().__init__(f"Duplicate document id: {doc_id}")
        self.doc_id = doc_id


class MemoryIndex:
    """In-memory BM25+ index with prefix and fuzzy term expansion."""

    def __init__(
        self,
        fields: Iterable[str] = ("title", "text"),
        search_options: Optional[SearchOptions] = None,
        process_term: Callable[[str], Optional[str]] = process_term,
        tokenize: Callable[[str], list[str]] = tokenize,
        k1: float = 1.2,
        b: float = 0.7,
        delta: float = 0.5,
    ):
        """Initialize index.

        Args:
            fields: Document attributes to index.
            search_options: Defaults for every search.
            process_term: Term normalizer, None discards the term.
            tokenize: Text splitter.
            k1: BM25 term frequency saturation.
            b: BM25 length normalization.
            delta: BM25+ lower bound for matching terms.
        """
        self._fields = list(fields)
        self._defaults = (search_options or SearchOptions()).merged_with(
            SearchOptions(prefix=False, fuzzy=0)
        )
        self._process_term = process_term
        self._tokenize = tokenize
        self._bm25_params = {"k1": k1, "b": b, "delta": delta}

        self._documents: list[Document] = []
        self._ids: set[int] = set()
        self._corpus: dict[str, list[list[str]]] = {f: [] for f in self._fields}
        self._postings: dict[str, dict[str, list[int]]] = {
            f: {} for f in self._fields
        }
        self._vocabulary: list[str] = []
        self._vocabulary_set: frozenset[str] = frozenset()
        self._bm25: dict[str, BM25Plus] = {}

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def _terms(self, text: str) -> list[str]:
        terms = (self._process_term(token) for token in self._tokenize(text))
        return [t for t in terms if t]

    def add_all(self, documents: Iterable[Document]) -> None:
        documents = list(documents)
        batch_ids: set[int] = set()
        for doc in documents:
            if doc.id in self._ids or doc.id in batch_ids:
                raise DuplicateDocumentError(doc.id)
            batch_ids.add(doc.id)

        for doc in documents:
            position = len(self._documents)
            self._documents.append(doc)
            self._ids.add(doc.id)

            for field_name in self._fields:
                terms = self._terms(getattr(doc, field_name) or "")
                self._corpus[field_name].append(terms)
                postings = self._postings[field_name]
                for term in dict.fromkeys(terms):
                    postings.setdefault(term, []).append(position)

        self._rebuild()
        logger.info(
            f"Indexed {len(documents)} documents ({self.document_count} total, "
            f"{len(self._vocabulary)} terms)"
        )

    def _rebuild(self) -> None:
        """Recompute BM25 statistics over the whole corpus."""
        if not self._documents:
            return
        self._bm25 = {
            field_name: BM25Plus(corpus, **self._bm25_params)
            for field_name, corpus in self._corpus.items()
        }
        vocabulary: set[str] = set()
        for postings in self._postings.values():
            vocabulary.update(postings)
        self._vocabulary = sorted(vocabulary)
        self._vocabulary_set = frozenset(vocabulary)

    def _expand(self, term: str, prefix: bool, fuzzy: float) -> dict[str, float]:
        """Map index terms matching a query term to their weight."""
        expansions: dict[str, float] = {}

        if term in self._vocabulary_set:
            expansions[term] = 1.0

        if prefix:
            for candidate in self._vocabulary:
                if candidate != term and candidate.startswith(term):
                    extra = len(candidate) - len(term)
                    expansions[candidate] = (
                        PREFIX_WEIGHT * len(term) / (len(term) + 0.3 * extra)
                    )

        max_distance = fuzzy if fuzzy >= 1 else math.floor(len(term) * fuzzy + 0.5)
        max_distance = int(min(max_distance, MAX_FUZZY))
        if max_distance > 0:
            for candidate in self._vocabulary:
                if candidate == term:
                    continue
                distance = Levenshtein.distance(
                    term, candidate, score_cutoff=max_distance
                )
                if distance > max_distance:
                    continue
                weight = FUZZY_WEIGHT * len(term) / (len(term) + distance)
                if weight > expansions.get(candidate, 0.0):
                    expansions[candidate] = weight

        return expansions

    def search(
        self,
        query: str,
        options: Optional[SearchOptions] = None,
    ) -> list[SearchResult]:
        opts = (options or SearchOptions()).merged_with(self._defaults)

        if not self._documents:
            return []

        query_terms = self._terms(query)
        if not query_terms:
            return []

        totals = np.zeros(len(self._documents))
        matches: dict[int, dict[str, list[str]]] = {}

        for query_term in query_terms:
            expansions = self._expand(query_term, bool(opts.prefix), opts.fuzzy or 0)
            for term, weight in expansions.items():
                for field_name in self._fields:
                    positions = self._postings[field_name].get(term)
                    if not positions:
                        continue
                    boost = opts.boost.get(field_name, 1.0)
                    scores = self._bm25[field_name].get_batch_scores([term], positions)
                    np.add.at(totals, positions, weight * boost * np.asarray(scores))

                    for position in positions:
                        fields = matches.setdefault(position, {}).setdefault(term, [])
                        if field_name not in fields:
                            fields.append(field_name)

        results = []
        for position in sorted(matches):
            result = SearchResult.from_document(
                self._documents[position],
                score=float(totals[position]),
                match=matches[position],
            )
            if opts.filter is None or opts.filter(result):
                results.append(result)

        results.sort(key=lambda r: r.score, reverse=True)
        return results
