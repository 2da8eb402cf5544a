"""Pydantic schema of the flight search payload.

Every field is lenient: a value of the wrong type or shape validates to
None instead of rejecting the whole itinerary. The payload uses camelCase
keys (``durationInMinutes``, ``displayCode``, ``logoUrl``).
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    NonNegativeInt,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)
from pydantic.alias_generators import to_camel


def _none_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


Lenient = WrapValidator(_none_on_error)

LenientStr = Annotated[Optional[str], Lenient]
LenientFloat = Annotated[Optional[float], Lenient]
LenientCount = Annotated[Optional[NonNegativeInt], Lenient]


class PayloadModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )


class PriceSchema(PayloadModel):
    raw: LenientFloat = None
    formatted: LenientStr = None


class PlaceSchema(PayloadModel):
    name: LenientStr = None
    display_code: LenientStr = None


class CarrierSchema(PayloadModel):
    name: LenientStr = None
    logo_url: LenientStr = None


class CarriersSchema(PayloadModel):
    marketing: Annotated[
        Optional[list[Annotated[Optional[CarrierSchema], Lenient]]], Lenient
    ] = None


class LegSchema(PayloadModel):
    id: LenientStr = None
    departure: LenientStr = None
    arrival: LenientStr = None
    duration_in_minutes: LenientCount = None
    stop_count: LenientCount = None
    origin: Annotated[Optional[PlaceSchema], Lenient] = None
    destination: Annotated[Optional[PlaceSchema], Lenient] = None
    carriers: Annotated[Optional[CarriersSchema], Lenient] = None


class ItinerarySchema(PayloadModel):
    id: LenientStr = None
    price: Annotated[Optional[PriceSchema], Lenient] = None
    legs: Annotated[
        Optional[list[Annotated[Optional[LegSchema], Lenient]]], Lenient
    ] = None
