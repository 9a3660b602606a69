"""Render service - HTML fragments for the search results container."""

import re
from typing import Iterable
from urllib.parse import quote

from ..models.document import SearchResponse, SearchResult
from ..models.view import RenderedView

# Characters left alone by JavaScript's encodeURI.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"

SEARCH_DIVIDER = '<div class="search-divider w-100"></div>'
HIGHLIGHT_TEMPLATE = '<span class="search-result-highlight py-1">{}</span>'
PROSE_CATEGORIES = ("page", "section")


def encode_uri(uri: str) -> str:
    """Percent-encode a URI the way encodeURI does."""
    return quote(uri, safe=_URI_SAFE)


def _find(query: str, text: str) -> re.Match | None:
    return re.search(re.escape(query), text, re.IGNORECASE)


class ResultRenderer:
    """Builds the HTML shown in the search modal."""

    def __init__(
        self,
        base_url: str = ".",
        snippet_context: int = 100,
        link_max_length: int = 50,
        link_ellipsis_threshold: int = 30,
    ):
        """Initialize renderer.

        Args:
            base_url: Prefix for result links.
            snippet_context: Characters kept around a match.
            link_max_length: Display link cut-off.
            link_ellipsis_threshold: Location length that triggers "...".
        """
        self._base_url = base_url.rstrip("/")
        self._snippet_context = snippet_context
        self._link_max_length = link_max_length
        self._link_ellipsis_threshold = link_ellipsis_threshold

    def display_link(self, result: SearchResult) -> str:
        location = result.location
        # The threshold is lower than the cut-off, so 31-50 character
        # locations get "..." without losing anything.
        link = location[: self._link_max_length]
        if len(location) > self._link_ellipsis_threshold:
            link += "..."

        if result.page != "":
            link += f" ({result.page})"

        return link

    def snippet(self, text: str, query: str) -> str:
        """Cut the text around the first match of the query."""
        match = _find(query, text)
        if match is None:
            return ""

        start = max(match.start() - self._snippet_context, 0)
        end = min(match.start() + len(query) + self._snippet_context, len(text))
        return text[start:end]

    def highlight(self, snippet: str, query: str) -> str:
        """Mark the first match inside a snippet."""
        if not snippet:
            return ""

        match = _find(query, snippet)
        if match is not None:
            snippet = (
                snippet[: match.start()]
                + HIGHLIGHT_TEMPLATE.format(match.group(0))
                + snippet[match.end():]
            )
        return f"...{snippet}..."

    def link_target(self, location: str) -> str:
        return encode_uri(f"{self._base_url}/{location}")

    def render_result(self, result: SearchResult, query: str) -> str:
        display_result = self.highlight(self.snippet(result.text, query), query)
        in_code = result.category.lower() not in PROSE_CATEGORIES
        title_class = "search-result-code-title" if in_code else ""

        return f"""
      <a href="{self.link_target(result.location)}" class="search-result-link w-100 is-flex is-flex-direction-column gap-2 px-4 py-2">
        <div class="w-100 is-flex is-flex-wrap-wrap is-justify-content-space-between is-align-items-flex-start">
          <div class="search-result-title has-text-weight-bold {title_class}">{result.title}</div>
          <div class="property-search-result-badge">{result.category}</div>
        </div>
        <p>
          {display_result}
        </p>
        <div
          class="has-text-left"
          style="font-size: smaller;"
          title="{result.location}"
        >
          <i class="fas fa-link"></i> {self.display_link(result)}
        </div>
      </a>
      {SEARCH_DIVIDER}
    """

    def render_filters(self, categories: Iterable[str], selected: Iterable[str] = ()) -> str:
        selected = set(selected)
        chips = ""
        for category in categories:
            css = "search-filter search-filter-selected" if category in selected else "search-filter"
            chips += f'<a href="javascript:;" class="{css}"><span>{category}</span></a>'

        return f"""
        <div class="is-flex gap-2 is-flex-wrap-wrap is-justify-content-flex-start is-align-items-center search-filters">
            <span class="is-size-6">Filters:</span>
            {chips}
        </div>
    """

    def render_placeholder(self) -> RenderedView:
        return RenderedView(
            html='<div class="has-text-centered my-5 py-5">Type something to get started!</div>',
            centered=True,
        )

    def render_response(
        self, response: SearchResponse, query: str, filters_html: str
    ) -> RenderedView:
        if not response.count:
            return RenderedView(html=f"""
           <div class="is-flex is-flex-direction-column gap-2 is-align-items-flex-start">
               {filters_html}
               {SEARCH_DIVIDER}
               <div class="is-size-6">0 result(s)</div>
            </div>
            <div class="has-text-centered my-5 py-5">No result found!</div>
       """)

        results_html = "".join(self.render_result(r, query) for r in response.results)
        return RenderedView(html=f"""
            <div class="is-flex is-flex-direction-column gap-2 is-align-items-flex-start">
                {filters_html}
                {SEARCH_DIVIDER}
                <div class="is-size-6">{response.count} result(s)</div>
                <div class="is-clipped w-100 is-flex is-flex-direction-column gap-2 is-align-items-flex-start has-text-justified mt-1">
                  {results_html}
                </div>
            </div>
        """)
