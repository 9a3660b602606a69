import json

import pytest

from docsearch.core.models.document import Document, SearchResult
from docsearch.core.services.index_service import IndexService
from docsearch.core.services.render_service import ResultRenderer
from docsearch.infrastructure.indexes import MemoryIndex

DOCS = [
    {"location": "index.html", "page": "Home", "title": "Home", "category": "page", "text": "Welcome home"},
    {"location": "index.html#Intro", "page": "Home", "title": "Intro", "category": "section", "text": "Introduction"},
    {"location": "lib/a.html#f", "page": "API", "title": "f", "category": "function", "text": "Computes f"},
    {"location": "lib/a.html", "page": "API", "title": "API", "category": "page", "text": "Reference"},
]


@pytest.fixture
def search_index_js(tmp_path):
    path = tmp_path / "search_index.js"
    path.write_text("var documenterSearchIndex = " + json.dumps({"docs": DOCS}), encoding="utf-8")
    return path


class TestIndexService:

    def test_assigns_sequential_ids(self, search_index_js):
        index = MemoryIndex()
        service = IndexService(index, str(search_index_js))

        assert service.run() == 4
        assert [d.id for d in service.documents] == [0, 1, 2, 3]
        assert index.document_count == 4

    def test_categories_in_first_seen_order(self, search_index_js):
        service = IndexService(MemoryIndex(), str(search_index_js))
        service.run()

        assert service.categories == ["page", "section", "function"]

    def test_documents_keep_fields(self, search_index_js):
        service = IndexService(MemoryIndex(), str(search_index_js))
        service.run()

        doc = service.documents[2]
        assert doc.location == "lib/a.html#f"
        assert doc.page == "API"
        assert doc.category == "function"

    def test_missing_file(self, tmp_path, caplog):
        service = IndexService(MemoryIndex(), str(tmp_path / "missing.js"))

        assert service.run() == 0
        assert service.categories == []
        assert "Search index not found" in caplog.text

    def test_unsupported_file(self, tmp_path):
        path = tmp_path / "index.yaml"
        path.write_text("docs: []", encoding="utf-8")

        assert IndexService(MemoryIndex(), str(path)).run() == 0

    def test_null_page_becomes_empty(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text(json.dumps([{"location": "a.html", "title": "A", "category": "page", "text": "", "page": None}]), encoding="utf-8")
        service = IndexService(MemoryIndex(), str(path))
        service.run()

        assert service.documents[0].page == ""

    def test_null_fields_become_empty(self, tmp_path):
        entry = {"location": "a.html", "title": None, "category": None, "text": None, "page": None}
        path = tmp_path / "index.json"
        path.write_text(json.dumps([entry]), encoding="utf-8")
        service = IndexService(MemoryIndex(), str(path))
        service.run()

        document = service.documents[0]
        assert (document.title, document.text, document.category, document.page) == ("", "", "", "")
        assert service.categories == [""]


class TestDocumentFromDict:

    def test_missing_and_null_fields(self):
        document = Document.from_dict(7, {"location": None, "title": None, "text": None, "category": None})

        assert document.id == 7
        assert document.location == ""
        assert document.title == ""
        assert document.text == ""
        assert document.category == ""
        assert document.page == ""

    def test_null_fields_render(self):
        document = Document.from_dict(0, {"location": "a.html", "title": None, "text": None, "category": None})
        result = SearchResult.from_document(document, score=2.0)

        html = ResultRenderer().render_result(result, "a")

        assert 'href="./a.html"' in html
