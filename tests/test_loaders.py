import json

import pytest

from docsearch.infrastructure.document_loaders import (
    CompositeLoader,
    JsonLoader,
    SearchIndexFormatError,
    SearchIndexLoader,
)

DOCS = [
    {"location": "index.html", "page": "Home", "title": "Home", "category": "page", "text": "Welcome"},
    {"location": "lib/a.html#f", "page": "API", "title": "f", "category": "function", "text": "f(x)"},
]


@pytest.fixture
def search_index_js(tmp_path):
    path = tmp_path / "search_index.js"
    path.write_text("var documenterSearchIndex = " + json.dumps({"docs": DOCS}) + ";\n", encoding="utf-8")
    return path


class TestSearchIndexLoader:

    def test_parses_assignment(self, search_index_js):
        assert SearchIndexLoader().load(search_index_js) == DOCS

    def test_supports_js_only(self, tmp_path):
        loader = SearchIndexLoader()
        assert loader.supports(tmp_path / "search_index.js")
        assert not loader.supports(tmp_path / "search_index.json")

    def test_missing_assignment(self, tmp_path):
        path = tmp_path / "broken.js"
        path.write_text('{"docs": []}', encoding="utf-8")
        with pytest.raises(SearchIndexFormatError):
            SearchIndexLoader().load(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.js"
        path.write_text("var documenterSearchIndex = {docs: [}", encoding="utf-8")
        with pytest.raises(SearchIndexFormatError):
            SearchIndexLoader().load(path)


class TestJsonLoader:

    def test_docs_object(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text(json.dumps({"docs": DOCS}), encoding="utf-8")
        assert JsonLoader().load(path) == DOCS

    def test_bare_list(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text(json.dumps(DOCS), encoding="utf-8")
        assert JsonLoader().load(path) == DOCS

    def test_no_document_list(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text(json.dumps({"pages": DOCS}), encoding="utf-8")
        with pytest.raises(SearchIndexFormatError):
            JsonLoader().load(path)


class TestCompositeLoader:

    def test_dispatches_on_suffix(self, search_index_js):
        assert CompositeLoader().load(search_index_js) == DOCS

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "index.txt"
        path.write_text("", encoding="utf-8")
        loader = CompositeLoader()
        assert not loader.supports(path)
        assert loader.load(path) is None

    def test_errors_are_logged_not_raised(self, tmp_path, caplog):
        path = tmp_path / "broken.json"
        path.write_text("not json", encoding="utf-8")

        assert CompositeLoader().load(path) is None
        assert "Failed to load" in caplog.text
