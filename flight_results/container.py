"""Dependency wiring for the results view.

Ports are bound to factories; ``resolve`` builds an instance on first use
and, for shared bindings, keeps it. The Gradio app serves several sessions
from one container, so binding and resolving happen under a lock.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, get_config

Binding = Tuple[Callable[[], Any], bool]


@dataclass
class Container:
    """Port-to-factory bindings plus the shared instances built from them.

    Usage:
        container = Container.create_default()
        service = container.resolve(ResultsViewService)

        # Tests swap one port before anything depending on it is resolved
        container.register(ItinerarySourcePort, lambda: StaticItinerarySource(items))
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], Binding] = field(default_factory=dict, repr=False)
    _shared: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance already built."""
        with self._lock:
            self._bindings[port_type] = (factory, singleton)
            self._shared.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            try:
                factory, shared = self._bindings[port_type]
            except KeyError:
                raise KeyError(f"No binding for {port_type!r}") from None
            if not shared:
                return factory()
            if port_type not in self._shared:
                self._shared[port_type] = factory()
            return self._shared[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind every port to its production adapter.

        The sorted-results cache is a NullCache when FLR_SORT_CACHE_ENABLED is false.
        """
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.rendering import MarkdownResultsRenderer
        from .adapters.source import JSONItinerarySource
        from .ports.cache import CachePort
        from .ports.rendering import ResultsRendererPort
        from .ports.source import ItinerarySourcePort
        from .services import ResultsViewService

        config = config or get_config()
        container = cls(config=config)

        def create_cache() -> CachePort[Any]:
            if not config.sorting.cache_enabled:
                return NullCache(name="sorted")
            return InMemoryCache(name="sorted", max_size=config.sorting.cache_max_size)

        container.register(CachePort, create_cache)

        container.register(
            ItinerarySourcePort,
            lambda: JSONItinerarySource(config.source),
        )

        container.register(
            ResultsRendererPort,
            lambda: MarkdownResultsRenderer(config.display),
        )

        def create_results_view() -> ResultsViewService:
            return ResultsViewService(
                source=container.resolve(ItinerarySourcePort),
                renderer=container.resolve(ResultsRendererPort),
                cache=container.resolve(CachePort),
                pagination=config.pagination,
                sorting=config.sorting,
            )

        container.register(ResultsViewService, create_results_view)

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, building it on first call."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container; the next call builds a new one."""
    global _default_container
    with _container_lock:
        _default_container = None
