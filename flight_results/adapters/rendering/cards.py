"""Display cards: one per leg of each itinerary on the page.

A card holds display strings only. Hidden columns are None; values the
payload did not provide are rendered as the configured placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...config import DisplayConfig
from ...domain.models import Column, Itinerary, Leg, Page, Place, VisibilityMap
from ...pipeline.formatting import (
    format_duration,
    format_place,
    format_stops,
    format_timestamp,
    or_placeholder,
)


@dataclass(frozen=True, slots=True)
class LegCard:
    """Display-ready fields of one leg.

    The price is shown alongside the stops, so it is hidden with them.
    """

    itinerary_id: Optional[str]
    leg_id: str
    airline_name: Optional[str] = None
    airline_logo_url: Optional[str] = None
    departure_time: Optional[str] = None
    departure_place: Optional[str] = None
    arrival_time: Optional[str] = None
    arrival_place: Optional[str] = None
    duration: Optional[str] = None
    stops: Optional[str] = None
    price: Optional[str] = None


def _place(place: Optional[Place], placeholder: str) -> str:
    if place is None:
        return placeholder
    return or_placeholder(format_place(place), placeholder)


def build_card(
    itinerary: Itinerary,
    leg: Leg,
    visibility: VisibilityMap,
    display: DisplayConfig,
) -> LegCard:
    placeholder = display.missing_placeholder
    values: dict[str, Optional[str]] = {}

    if visibility.is_visible(Column.AIRLINE):
        carrier = leg.marketing_carrier
        values["airline_name"] = or_placeholder(carrier.name if carrier else None, placeholder)
        values["airline_logo_url"] = carrier.logo_url if carrier else None

    if visibility.is_visible(Column.DEPARTURE):
        values["departure_time"] = (
            format_timestamp(leg.departure, display.timestamp_format)
            if leg.departure is not None
            else placeholder
        )
        values["departure_place"] = _place(leg.origin, placeholder)

    if visibility.is_visible(Column.ARRIVAL):
        values["arrival_time"] = (
            format_timestamp(leg.arrival, display.timestamp_format)
            if leg.arrival is not None
            else placeholder
        )
        values["arrival_place"] = _place(leg.destination, placeholder)

    if visibility.is_visible(Column.DURATION):
        minutes = leg.duration_in_minutes
        values["duration"] = (
            format_duration(minutes) if minutes is not None and minutes >= 0 else placeholder
        )

    if visibility.is_visible(Column.STOPS):
        count = leg.stop_count
        values["stops"] = format_stops(count) if count is not None and count >= 0 else placeholder
        price = itinerary.price
        values["price"] = or_placeholder(price.formatted if price else None, placeholder)

    return LegCard(itinerary_id=itinerary.id, leg_id=leg.id, **values)


def build_cards(
    page: Page[Itinerary],
    visibility: VisibilityMap,
    display: DisplayConfig,
) -> tuple[LegCard, ...]:
    """Build the cards for every displayable leg on the page, in page order."""
    return tuple(
        build_card(itinerary, leg, visibility, display)
        for itinerary in page.items
        for leg in itinerary.displayable_legs
    )
