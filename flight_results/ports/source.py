"""Itinerary source port - Where the raw itinerary collection comes from.

Fetching from the flight search API is someone else's job; a source only
turns an already-fetched payload into domain models.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Itinerary


class ItinerarySourcePort(Protocol):
    """Port for loading itineraries.

    Implementation: adapters/source/json_source.py

    Sources recover malformed entries locally: an itinerary with absent
    fields is still returned, with those fields set to None.
    """

    def load(self) -> tuple[Itinerary, ...]:
        """Load the itinerary collection.

        Returns:
            Itineraries in the order the provider returned them.

        Raises:
            SourceError: If the payload cannot be read at all.
        """
        ...
