"""Results view service - Main orchestrator.

Runs the pipeline for one ViewState:
1. Load the itinerary collection (or take the one passed in)
2. Sort it by the state's sort key (cached per collection and key)
3. Cut the state's page out of the sorted sequence
4. Render the page with the state's visibility map
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Optional

from ..config import PaginationConfig, SortingConfig, get_config
from ..domain.models import Itinerary, Page, SortKey, ViewState
from ..pipeline.paginator import paginate
from ..pipeline.sorter import sort_itineraries
from ..ports.cache import CachePort
from ..ports.rendering import ResultsRendererPort
from ..ports.source import ItinerarySourcePort


@dataclass(frozen=True, slots=True)
class ResultsView:
    """Everything the rendering side needs after one pipeline run.

    Attributes:
        state: The state the view was computed for
        page: The page of itineraries
        rendered: The page as produced by the renderer
    """

    state: ViewState
    page: Page[Itinerary]
    rendered: str

    @property
    def can_go_previous(self) -> bool:
        return self.page.has_previous

    @property
    def can_go_next(self) -> bool:
        return self.page.has_next


@dataclass
class ResultsViewService:
    """Main service turning itineraries and a ViewState into a view.

    Attributes:
        source: Provides the itinerary collection when none is passed in
        renderer: Renders a page under a visibility map
        cache: Cache of sorted sequences; results always equal recomputation
        pagination: Page size and has_next mode
        sorting: Placement of itineraries with missing sort fields
    """

    source: ItinerarySourcePort
    renderer: ResultsRendererPort
    cache: Optional[CachePort[Any]] = None
    pagination: PaginationConfig = field(default_factory=lambda: get_config().pagination)
    sorting: SortingConfig = field(default_factory=lambda: get_config().sorting)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _cache_key(
        self, items: tuple[Itinerary, ...], sort_key: SortKey
    ) -> Optional[Hashable]:
        # The collection itself is part of the key so lookups compare it by
        # equality; two collections that only share a hash never share an entry.
        key = (sort_key.value, self.sorting.missing_placement, items)
        try:
            hash(key)
        except TypeError:
            # Models built with list fields are not hashable; skip caching.
            return None
        return key

    def sorted_itineraries(
        self,
        itineraries: Optional[Iterable[Itinerary]],
        sort_key: SortKey | str | None,
    ) -> tuple[Itinerary, ...]:
        """Sort the collection, reusing a cached ordering when available."""
        items = tuple(itineraries) if itineraries is not None else ()
        key = SortKey.parse(sort_key)

        def compute() -> tuple[Itinerary, ...]:
            return sort_itineraries(
                items, key, missing_placement=self.sorting.missing_placement
            )

        if key is SortKey.NONE or self.cache is None:
            return compute()

        cache_key = self._cache_key(items, key)
        if cache_key is None:
            return compute()
        return self.cache.get_or_compute(cache_key, compute)

    def page(
        self,
        state: ViewState,
        itineraries: Optional[Iterable[Itinerary]] = None,
    ) -> Page[Itinerary]:
        """Return the page of sorted itineraries for ``state``."""
        items = self.source.load() if itineraries is None else tuple(itineraries)
        ordered = self.sorted_itineraries(items, state.sort_key)
        return paginate(
            ordered,
            state.page,
            self.pagination.page_size,
            lookahead=self.pagination.exact_has_next,
        )

    def view(
        self,
        state: Optional[ViewState] = None,
        itineraries: Optional[Iterable[Itinerary]] = None,
    ) -> ResultsView:
        """Run the whole pipeline for ``state``.

        Args:
            state: Current view state; defaults to the first page, input order.
            itineraries: Collection to show; defaults to the source's.

        Returns:
            ResultsView with the page and its rendering.

        Raises:
            SourceError: If the collection has to be loaded and cannot be.
        """
        state = state or ViewState()
        page = self.page(state, itineraries)
        rendered = self.renderer.render(page, state.visibility)

        self._logger.info(
            "View computed",
            extra={
                "sort_key": state.sort_key.value,
                "page": page.page,
                "visible": len(page.items),
                "total": page.total_items,
                "has_next": page.has_next,
            },
        )
        return ResultsView(state=state, page=page, rendered=rendered)
