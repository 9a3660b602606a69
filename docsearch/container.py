import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


container = Container()


def configure_container(settings: Settings, target: Container | None = None) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to configure, the global one by default.

    Returns:
        Configured container.
    """
    from .core.models.query import SearchOptions
    from .core.protocols.index import IndexProtocol
    from .core.protocols.loader import DocumentLoaderProtocol
    from .core.services.debounce import Debouncer
    from .core.services.index_service import IndexService
    from .core.services.render_service import ResultRenderer
    from .core.services.search_service import SearchService
    from .core.services.session import SearchSession
    from .infrastructure.document_loaders import CompositeLoader
    from .infrastructure.indexes import MemoryIndex

    c = target if target is not None else container
    c.reset()

    c.register(
        IndexProtocol,
        lambda: MemoryIndex(
            fields=("title", "text"),
            search_options=SearchOptions(
                prefix=settings.prefix_search,
                fuzzy=settings.fuzzy_distance,
                boost={"title": settings.title_boost},
            ),
        ),
        singleton=True,
    )

    c.register(DocumentLoaderProtocol, CompositeLoader, singleton=True)

    def build_index_service() -> IndexService:
        service = IndexService(
            index=c.resolve(IndexProtocol),
            search_index_path=settings.search_index_path,
            loader=c.resolve(DocumentLoaderProtocol),
        )
        service.run()
        return service

    c.register(IndexService, build_index_service, singleton=True)

    def build_search_service() -> SearchService:
        # populates the index
        c.resolve(IndexService)
        return SearchService(
            index=c.resolve(IndexProtocol),
            min_score=settings.min_score,
        )

    c.register(SearchService, build_search_service, singleton=True)

    c.register(
        ResultRenderer,
        lambda: ResultRenderer(
            base_url=settings.base_url,
            snippet_context=settings.snippet_context,
            link_max_length=settings.link_max_length,
            link_ellipsis_threshold=settings.link_ellipsis_threshold,
        ),
        singleton=True,
    )

    # One session per page load / chat, never cached.
    c.register(
        SearchSession,
        lambda: SearchSession(
            search_service=c.resolve(SearchService),
            renderer=c.resolve(ResultRenderer),
            categories=c.resolve(IndexService).categories,
            debouncer=Debouncer(settings.debounce_delay),
        ),
    )

    logger.info("Container configured")
    return c
