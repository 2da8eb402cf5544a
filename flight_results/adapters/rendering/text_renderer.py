"""Plain text results renderer, one line per leg."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config import DisplayConfig, get_config
from ...domain.models import Itinerary, Page, VisibilityMap
from .cards import LegCard, build_cards


def format_card_line(card: LegCard) -> str:
    parts = []
    if card.airline_name is not None:
        parts.append(card.airline_name)
    if card.departure_time is not None:
        parts.append(f"{card.departure_place} {card.departure_time}")
    if card.arrival_time is not None:
        parts.append(f"-> {card.arrival_place} {card.arrival_time}")
    if card.duration is not None:
        parts.append(card.duration)
    if card.stops is not None:
        parts.append(f"{card.stops} | {card.price}")
    return " | ".join(parts)


@dataclass
class PlainTextResultsRenderer:
    """Plain text renderer implementing ResultsRendererPort."""

    display: DisplayConfig = field(default_factory=lambda: get_config().display)

    def render(self, page: Page[Itinerary], visibility: VisibilityMap) -> str:
        lines = [format_card_line(card) for card in build_cards(page, visibility, self.display)]
        lines.append(
            f"[page {page.page + 1}"
            f"{' | previous' if page.has_previous else ''}"
            f"{' | next' if page.has_next else ''}]"
        )
        return "\n".join(lines)
