"""Rendering port - Turns a page of itineraries into something to show.

Renderers are the only consumers of the visibility map.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Itinerary, Page, VisibilityMap


class ResultsRendererPort(Protocol):
    """Port for results rendering.

    Implementations:
    - adapters/rendering/markdown_renderer.py (MarkdownResultsRenderer)
    - adapters/rendering/text_renderer.py (PlainTextResultsRenderer)
    """

    def render(self, page: Page[Itinerary], visibility: VisibilityMap) -> str:
        """Render one page of itineraries.

        Args:
            page: The page to render.
            visibility: Which leg attributes to show.

        Returns:
            The rendered page.
        """
        ...
