"""Document domain models."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    """Entry of the site's search index."""
    id: int  # synthetic, position in the loaded list
    location: str
    title: str
    text: str
    category: str
    page: str = ""

    @classmethod
    def from_dict(cls, doc_id: int, data: dict) -> "Document":
        return cls(
            id=doc_id,
            location=data.get("location") or "",
            title=data.get("title") or "",
            text=data.get("text") or "",
            category=data.get("category") or "",
            page=data.get("page") or "",
        )


@dataclass
class SearchResult:
    """Scored document returned by an index."""
    id: int
    location: str
    title: str
    text: str
    category: str
    page: str
    score: float
    terms: list[str] = field(default_factory=list)
    match: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_document(
        cls,
        document: Document,
        score: float,
        match: dict[str, list[str]] | None = None,
    ) -> "SearchResult":
        match = match or {}
        return cls(
            id=document.id,
            location=document.location,
            title=document.title,
            text=document.text,
            category=document.category,
            page=document.page,
            score=score,
            terms=list(match),
            match=match,
        )


@dataclass
class SearchResponse:
    """Deduplicated results for the presentation layer."""
    results: list[SearchResult]

    @property
    def count(self) -> int:
        return len(self.results)
