"""Markdown results renderer.

Produces the body shown by the Gradio app: one block per leg card and a
footer with the page position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...config import DisplayConfig, get_config
from ...domain.models import Itinerary, Page, VisibilityMap
from .cards import LegCard, build_cards


def _card_lines(card: LegCard) -> List[str]:
    lines: List[str] = []
    if card.airline_name is not None:
        logo = f"![{card.airline_name}]({card.airline_logo_url}) " if card.airline_logo_url else ""
        lines.append(f"{logo}**{card.airline_name}**")
    if card.departure_time is not None:
        lines.append(f"- **Departure:** {card.departure_time} · {card.departure_place}")
    if card.arrival_time is not None:
        lines.append(f"- **Arrival:** {card.arrival_time} · {card.arrival_place}")
    if card.duration is not None:
        lines.append(f"- **Duration:** {card.duration}")
    if card.stops is not None:
        lines.append(f"- **Stops:** {card.stops} · **{card.price}**")
    return lines


@dataclass
class MarkdownResultsRenderer:
    """Markdown renderer implementing ResultsRendererPort."""

    display: DisplayConfig = field(default_factory=lambda: get_config().display)
    empty_message: str = "_No itineraries to show._"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, page: Page[Itinerary], visibility: VisibilityMap) -> str:
        cards = build_cards(page, visibility, self.display)
        self._logger.debug(
            "Rendering page",
            extra={"page": page.page, "cards": len(cards), "renderer_type": "markdown"},
        )

        if not cards:
            blocks = [self.empty_message]
        else:
            blocks = ["\n".join(_card_lines(card)) for card in cards]

        footer = f"_Page {page.page + 1}"
        if page.items:
            first = page.first_index + 1
            footer += f" · itineraries {first}–{first + len(page.items) - 1} of {page.total_items}"
        footer += "_"

        return "\n\n---\n\n".join(blocks) + "\n\n" + footer
