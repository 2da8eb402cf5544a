"""Ordering of itineraries by a user-selected sort key.

Every key compares the first leg of each itinerary (or the itinerary
price). Operands are extracted as Present / Missing first, so an absent
leg, an absent or NaN price, or an unparseable timestamp never reaches a
comparison. Missing operands are grouped at one end of the result, in
their input order.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, Literal, Optional, Tuple, Union

from ..domain.models import (
    FieldValue,
    Itinerary,
    Missing,
    Present,
    SortKey,
    present_or_missing,
)
from .timestamps import to_instant

logger = logging.getLogger(__name__)

MissingPlacement = Literal["first", "last"]

# Where itineraries without a usable operand go unless configured otherwise.
DEFAULT_MISSING_PLACEMENT: MissingPlacement = "last"

OperandExtractor = Callable[[Itinerary], FieldValue[Any]]


def price_operand(itinerary: Itinerary) -> FieldValue[float]:
    price = itinerary.price
    if price is None or price.raw is None:
        return Missing("no price")
    try:
        raw = float(price.raw)
    except (TypeError, ValueError):
        return Missing("price not numeric")
    if math.isnan(raw):
        return Missing("price is NaN")
    return Present(raw)


def departure_operand(itinerary: Itinerary) -> FieldValue[Any]:
    leg = itinerary.first_leg
    if leg is None:
        return Missing("no first leg")
    if leg.departure is None:
        return Missing("no departure time")
    return Present(to_instant(leg.departure))


def arrival_operand(itinerary: Itinerary) -> FieldValue[Any]:
    leg = itinerary.first_leg
    if leg is None:
        return Missing("no first leg")
    if leg.arrival is None:
        return Missing("no arrival time")
    return Present(to_instant(leg.arrival))


def duration_operand(itinerary: Itinerary) -> FieldValue[int]:
    leg = itinerary.first_leg
    if leg is None:
        return Missing("no first leg")
    return present_or_missing(leg.duration_in_minutes, "no duration")


OPERAND_EXTRACTORS: Dict[SortKey, OperandExtractor] = {
    SortKey.PRICE: price_operand,
    SortKey.DEPARTURE: departure_operand,
    SortKey.ARRIVAL: arrival_operand,
    SortKey.DURATION: duration_operand,
}


def _rank_key(
    extract: OperandExtractor, missing_placement: MissingPlacement
) -> Callable[[Itinerary], Tuple[int, Any]]:
    missing_rank = 1 if missing_placement == "last" else -1

    def key(itinerary: Itinerary) -> Tuple[int, Any]:
        operand = extract(itinerary)
        if isinstance(operand, Present):
            return (0, operand.value)
        # Equal tuples for every missing operand; the stable sort keeps input order.
        return (missing_rank, 0)

    return key


def sort_itineraries(
    itineraries: Optional[Iterable[Itinerary]],
    key: Union[SortKey, str, None],
    *,
    missing_placement: MissingPlacement = DEFAULT_MISSING_PLACEMENT,
) -> Tuple[Itinerary, ...]:
    """Return the itineraries ordered by ``key``, ascending.

    Parameters
    ----------
    itineraries:
        Itineraries in the order they were received. ``None`` is treated
        as an empty collection. The input is never mutated.
    key:
        Sort key or its name. ``none``, empty and unrecognized keys keep
        the input order.
    missing_placement:
        ``"last"`` (default) or ``"first"``: where itineraries whose
        operand is Missing are placed.

    Returns
    -------
    tuple[Itinerary, ...]
        A permutation of the input. The sort is stable, so equal keys keep
        their input order.
    """
    items = tuple(itineraries) if itineraries is not None else ()
    sort_key = SortKey.parse(key)

    extract = OPERAND_EXTRACTORS.get(sort_key)
    if extract is None:
        if key not in (None, "", SortKey.NONE, SortKey.NONE.value):
            logger.debug("Unrecognized sort key, keeping input order", extra={"key": key})
        return items

    ordered = tuple(sorted(items, key=_rank_key(extract, missing_placement)))

    logger.debug(
        "Itineraries sorted",
        extra={
            "sort_key": sort_key.value,
            "count": len(ordered),
        },
    )
    return ordered


__all__ = [
    "DEFAULT_MISSING_PLACEMENT",
    "OPERAND_EXTRACTORS",
    "price_operand",
    "departure_operand",
    "arrival_operand",
    "duration_operand",
    "sort_itineraries",
]
