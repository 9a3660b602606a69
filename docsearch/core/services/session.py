"""Search session - per page load state of the search modal."""

import logging
from typing import Callable, Optional

from ..models.document import SearchResponse
from ..models.query import FilterSet, Query
from ..models.view import RenderedView, SessionState
from .debounce import Debouncer
from .render_service import ResultRenderer
from .search_service import SearchService

logger = logging.getLogger(__name__)

ViewSink = Callable[[RenderedView], None]


class SearchSession:
    """Turns input events into debounced searches and rendered views.

    Holds the query text, the selected filters and the pending timer for a
    single user. Event handlers return immediately; the search runs when
    the debounce timer fires.
    """

    def __init__(
        self,
        search_service: SearchService,
        renderer: ResultRenderer,
        categories: list[str],
        debouncer: Optional[Debouncer] = None,
        on_render: Optional[ViewSink] = None,
    ):
        """Initialize session.

        Args:
            search_service: Query executor.
            renderer: HTML renderer.
            categories: Every known document category, in display order.
            debouncer: Timer owner, 300 ms by default.
            on_render: Receives each rendered view.
        """
        self._search_service = search_service
        self._renderer = renderer
        self._categories = list(categories)
        self._debouncer = debouncer or Debouncer()
        self._on_render = on_render

        self.filters = FilterSet()
        self.query_text = ""
        self.state = SessionState.IDLE
        self._revision = 0
        self.view: RenderedView = renderer.render_placeholder()

    @property
    def categories(self) -> list[str]:
        return self._categories

    @property
    def query(self) -> Query:
        return Query(text=self.query_text, filters=self.filters.snapshot())

    @property
    def revision(self) -> int:
        """Number of events received so far."""
        return self._revision

    def on_input(self, text: str) -> int:
        """Handle a keystroke in the search input.

        Returns:
            Revision of this event.
        """
        self.query_text = text
        return self._schedule()

    def on_filter_click(self, category: str) -> int:
        """Handle a click on a filter chip.

        Returns:
            Revision of this event.
        """
        selected = self.filters.toggle(category)
        logger.debug(f"Filter '{category}' {'on' if selected else 'off'}")
        return self._schedule()

    def _schedule(self) -> int:
        self._revision += 1
        self.state = SessionState.DEBOUNCING
        self._debouncer.call(self.update)
        return self._revision

    async def wait(self) -> RenderedView:
        """Wait for the pending update, if any, and return the current view."""
        await self._debouncer.wait()
        return self.view

    async def wait_for(self, revision: int) -> Optional[RenderedView]:
        """Wait for the pending update.

        Returns:
            The view if no later event superseded revision, else None.
        """
        view = await self.wait()
        if revision != self._revision:
            return None
        return view

    def close(self) -> None:
        self._debouncer.cancel()
        self.state = SessionState.IDLE

    def filters_html(self) -> str:
        return self._renderer.render_filters(self._categories, self.filters)

    def update(self) -> RenderedView:
        """Run the search for the current query and filters, then render."""
        query = self.query

        try:
            if query.is_blank:
                self.filters.clear()
                view = self._renderer.render_placeholder()
            else:
                response = self._search_service.search(query.text, query.filters)
                view = self._renderer.render_response(
                    response, query.text, self.filters_html()
                )
        except Exception as e:
            logger.error(f"Update error for '{query.text[:50]}': {e}")
            view = self._renderer.render_response(
                SearchResponse(results=[]), query.text, self.filters_html()
            )

        self.state = SessionState.EXECUTED
        self.view = view
        if self._on_render is not None:
            self._on_render(view)
        self.state = SessionState.IDLE
        return view
