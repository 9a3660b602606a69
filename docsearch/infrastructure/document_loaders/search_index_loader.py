import json
import re
from pathlib import Path

from .errors import SearchIndexFormatError
from .json_loader import extract_docs

# var documenterSearchIndex = {"docs": [...]}
_ASSIGNMENT_RE = re.compile(r"^\s*(?:var|let|const)\s+\w+\s*=\s*", re.ASCII)


class SearchIndexLoader:
    """Loader for the search_index.js file emitted by the site generator."""

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".js"

    def load(self, file_path: Path) -> list[dict]:
        source = file_path.read_text(encoding="utf-8")

        match = _ASSIGNMENT_RE.match(source)
        if not match:
            raise SearchIndexFormatError(f"No index assignment in {file_path}")

        payload = source[match.end():].strip().rstrip(";")
        try:
            raw = json.loads(payload)
        except json.JSONDecodeError as e:
            raise SearchIndexFormatError(f"Invalid index in {file_path}: {e}") from e

        return extract_docs(raw, file_path)
