import json
from pathlib import Path

from .errors import SearchIndexFormatError


def extract_docs(raw: object, file_path: Path) -> list[dict]:
    """Return the document list from a parsed search index payload."""
    docs = raw.get("docs") if isinstance(raw, dict) else raw
    if not isinstance(docs, list):
        raise SearchIndexFormatError(f"No document list in {file_path}")
    return docs


class JsonLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".json"

    def load(self, file_path: Path) -> list[dict]:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
        return extract_docs(raw, file_path)
