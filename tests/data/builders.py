"""Helpers that build domain itineraries for tests."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from flight_results.domain.models import Carrier, Itinerary, Leg, Place, Price


def make_leg(
    leg_id: str = "leg-1",
    *,
    departure: Optional[str] = "2024-02-20T10:00:00",
    arrival: Optional[str] = "2024-02-20T18:00:00",
    duration: Optional[int] = 480,
    stops: Optional[int] = 0,
    carrier: Optional[str] = "British Airways",
    logo_url: Optional[str] = "https://logos.example/BA.png",
) -> Leg:
    return Leg(
        id=leg_id,
        departure=datetime.fromisoformat(departure) if departure else None,
        arrival=datetime.fromisoformat(arrival) if arrival else None,
        duration_in_minutes=duration,
        stop_count=stops,
        origin=Place(name="London Heathrow", display_code="LHR"),
        destination=Place(name="New York John F. Kennedy", display_code="JFK"),
        carriers=(Carrier(name=carrier, logo_url=logo_url),) if carrier else (),
    )


def make_itinerary(
    itinerary_id: str,
    *,
    price: Optional[float] = 100.0,
    formatted: Optional[str] = None,
    departure: Optional[str] = "2024-02-20T10:00:00",
    arrival: Optional[str] = "2024-02-20T18:00:00",
    duration: Optional[int] = 480,
    stops: Optional[int] = 0,
    no_legs: bool = False,
) -> Itinerary:
    if no_legs:
        legs: tuple = ()
    else:
        legs = (
            make_leg(
                f"{itinerary_id}-leg",
                departure=departure,
                arrival=arrival,
                duration=duration,
                stops=stops,
            ),
        )
    if formatted is None and price is not None:
        formatted = f"${price:.0f}"
    return Itinerary(
        id=itinerary_id,
        price=Price(raw=price, formatted=formatted),
        legs=legs,
    )


def ids(itineraries) -> list:
    return [i.id for i in itineraries]
