"""JSON itinerary source adapter.

Reads a flight search payload from disk and maps it to domain models:
- Accepts ``{"itineraries": [...]}``, ``{"data": {"itineraries": [...]}}``
  or a bare list
- Field-level recovery through the lenient schema
- Entries that are not objects at all are skipped with a warning
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ...config import SourceConfig, get_config
from ...domain.errors import SourceError
from ...domain.models import Carrier, Itinerary, Leg, Place, Price
from ...pipeline.timestamps import parse_timestamp
from .schema import ItinerarySchema, LegSchema, PlaceSchema, PriceSchema

logger = logging.getLogger(__name__)


def _itinerary_entries(payload: Any) -> List[Any]:
    if payload is None:
        return []
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        if isinstance(payload.get("data"), dict):
            return _itinerary_entries(payload["data"])
        entries = payload.get("itineraries")
        if isinstance(entries, list):
            return entries
    logger.warning(
        "Payload has no itinerary list",
        extra={"payload_type": type(payload).__name__},
    )
    return []


def _to_price(schema: Optional[PriceSchema]) -> Optional[Price]:
    if schema is None:
        return None
    return Price(raw=schema.raw, formatted=schema.formatted)


def _to_place(schema: Optional[PlaceSchema]) -> Optional[Place]:
    if schema is None:
        return None
    return Place(name=schema.name or "", display_code=schema.display_code or "")


def _to_leg(schema: LegSchema) -> Leg:
    marketing = schema.carriers.marketing if schema.carriers else None
    carriers = tuple(
        Carrier(name=c.name or "", logo_url=c.logo_url)
        for c in (marketing or [])
        if c is not None
    )
    return Leg(
        id=schema.id or "",
        departure=parse_timestamp(schema.departure),
        arrival=parse_timestamp(schema.arrival),
        duration_in_minutes=schema.duration_in_minutes,
        stop_count=schema.stop_count,
        origin=_to_place(schema.origin),
        destination=_to_place(schema.destination),
        carriers=carriers,
    )


def _to_itinerary(schema: ItinerarySchema) -> Itinerary:
    legs = tuple(
        _to_leg(leg) if leg is not None else None for leg in (schema.legs or [])
    )
    return Itinerary(id=schema.id, price=_to_price(schema.price), legs=legs)


def parse_payload(payload: Any) -> tuple[Itinerary, ...]:
    """Map a decoded search payload to itineraries, in payload order.

    Never raises on data-shape problems: absent or malformed fields become
    None on the resulting models.
    """
    itineraries: List[Itinerary] = []
    skipped = 0

    for index, entry in enumerate(_itinerary_entries(payload)):
        try:
            schema = ItinerarySchema.model_validate(entry)
        except ValidationError:
            skipped += 1
            logger.warning(
                "Skipping itinerary entry that is not an object",
                extra={"index": index, "entry_type": type(entry).__name__},
            )
            continue
        itineraries.append(_to_itinerary(schema))

    logger.debug(
        "Payload parsed",
        extra={"itineraries": len(itineraries), "skipped": skipped},
    )
    return tuple(itineraries)


@dataclass
class JSONItinerarySource:
    """Itinerary source backed by a JSON file.

    This adapter implements ItinerarySourcePort. The file is read once
    and the parsed collection kept until reload() is called.

    Attributes:
        config: Source configuration (data directory, file name)
        path: Explicit file path, overriding the configured one
    """

    config: SourceConfig = field(default_factory=lambda: get_config().source)
    path: Optional[Path] = None

    _itineraries: Optional[tuple[Itinerary, ...]] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def resolved_path(self) -> Path:
        return self.path if self.path is not None else self.config.itineraries_path

    def load(self) -> tuple[Itinerary, ...]:
        """Load itineraries from the JSON file.

        Raises:
            SourceError: If the file cannot be read or is not valid JSON.
        """
        if self._itineraries is not None:
            return self._itineraries

        path = self.resolved_path
        self._logger.debug("Loading itineraries", extra={"path": str(path)})

        try:
            with path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SourceError(
                f"Failed to read itineraries from {path}",
                path=str(path),
                cause=e,
            )

        self._itineraries = parse_payload(payload)
        self._logger.info(
            "Itineraries loaded",
            extra={"path": str(path), "itineraries": len(self._itineraries)},
        )
        return self._itineraries

    def reload(self) -> tuple[Itinerary, ...]:
        self._itineraries = None
        return self.load()


@dataclass
class StaticItinerarySource:
    """Itinerary source over a collection already in memory."""

    itineraries: Iterable[Itinerary] = ()

    def __post_init__(self) -> None:
        self.itineraries = tuple(self.itineraries)

    def load(self) -> tuple[Itinerary, ...]:
        return self.itineraries  # type: ignore[return-value]
