"""Immutable domain models for the flight results pipeline.

All models are frozen dataclasses with slots. Fields that the upstream
search payload may omit are Optional here; the payload parser puts None
wherever a value was absent or malformed, and the pipeline decides what
a missing value means for sorting and display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

from .errors import InvalidArgumentError

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Present / Missing
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Present(Generic[T]):
    """A field value that was supplied and is usable."""

    value: T


@dataclass(frozen=True, slots=True)
class Missing:
    """A field value that was absent or unusable."""

    reason: str = ""


MISSING = Missing()

FieldValue = Union[Present[T], Missing]


def present_or_missing(value: Optional[T], reason: str = "") -> FieldValue[T]:
    """Wrap an optional value in the Present / Missing sum type."""
    if value is None:
        return Missing(reason) if reason else MISSING
    return Present(value)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class SortKey(str, Enum):
    """Field used to order itineraries.

    NONE keeps the order in which the itineraries were supplied.
    """

    PRICE = "price"
    DEPARTURE = "departure"
    ARRIVAL = "arrival"
    DURATION = "duration"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union[SortKey, str, None]) -> SortKey:
        """Parse a sort key, mapping empty or unrecognized values to NONE."""
        if isinstance(value, SortKey):
            return value
        if not value:
            return cls.NONE
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NONE

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Column(str, Enum):
    """Attribute of a leg that the results list can show or hide."""

    AIRLINE = "airline"
    DEPARTURE = "departure"
    ARRIVAL = "arrival"
    DURATION = "duration"
    STOPS = "stops"

    @classmethod
    def parse(cls, value: Union[Column, str]) -> Column:
        """Parse a column name.

        Raises:
            InvalidArgumentError: If the name is not a known column.
        """
        if isinstance(value, Column):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidArgumentError(
                f"Unknown column {value!r}",
                argument="attribute",
                value=value,
                cause=e,
            )

    @property
    def label(self) -> str:
        return self.value.capitalize()


# ---------------------------------------------------------------------------
# Itinerary data
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Price:
    """Price of an itinerary.

    Attributes:
        raw: Numeric amount used for ordering
        formatted: Display string supplied by the search provider (e.g. '$120')
    """

    raw: Optional[float] = None
    formatted: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Place:
    """An airport or city at one end of a leg.

    Attributes:
        name: Human-readable name (e.g. 'London Heathrow')
        display_code: Short code shown next to the name (e.g. 'LHR')
    """

    name: str = ""
    display_code: str = ""


@dataclass(frozen=True, slots=True)
class Carrier:
    """A marketing carrier of a leg."""

    name: str = ""
    logo_url: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Leg:
    """One flight segment of an itinerary.

    Attributes:
        id: Identifier, unique within its itinerary
        departure: Scheduled departure time
        arrival: Scheduled arrival time
        duration_in_minutes: Block time in minutes
        stop_count: Number of intermediate stops
        origin: Departure place
        destination: Arrival place
        carriers: Marketing carriers, first one is shown
    """

    id: str = ""
    departure: Optional[datetime] = None
    arrival: Optional[datetime] = None
    duration_in_minutes: Optional[int] = None
    stop_count: Optional[int] = None
    origin: Optional[Place] = None
    destination: Optional[Place] = None
    carriers: tuple[Carrier, ...] = field(default_factory=tuple)

    @property
    def marketing_carrier(self) -> Optional[Carrier]:
        """Return the first marketing carrier, if any."""
        return self.carriers[0] if self.carriers else None


@dataclass(frozen=True, slots=True)
class Itinerary:
    """A priced combination of one or more legs.

    ``legs`` may contain None where the payload had a null entry; such
    entries are kept so the itinerary itself is never dropped.
    """

    id: Optional[str] = None
    price: Optional[Price] = None
    legs: tuple[Optional[Leg], ...] = field(default_factory=tuple)

    @property
    def first_leg(self) -> Optional[Leg]:
        """Return the leg the list is ordered by, or None if absent."""
        return self.legs[0] if self.legs else None

    @property
    def displayable_legs(self) -> tuple[Leg, ...]:
        """Return the legs that can be rendered."""
        return tuple(leg for leg in self.legs if leg is not None)


# ---------------------------------------------------------------------------
# View state
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class VisibilityMap:
    """Show/hide flag per column. Every column is visible by default."""

    airline: bool = True
    departure: bool = True
    arrival: bool = True
    duration: bool = True
    stops: bool = True

    def is_visible(self, column: Union[Column, str]) -> bool:
        return bool(getattr(self, Column.parse(column).value))

    def as_dict(self) -> dict[str, bool]:
        return {column.value: self.is_visible(column) for column in Column}

    def visible_columns(self) -> tuple[Column, ...]:
        return tuple(column for column in Column if self.is_visible(column))


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """A bounded slice of an ordered sequence.

    Attributes:
        items: Items to display on this page
        page: Zero-based page index the slice was taken at
        page_size: Maximum number of items per page
        has_previous: Whether an earlier page exists
        has_next: Whether a later page may exist
        total_items: Length of the sequence the page was cut from
    """

    items: tuple[T, ...]
    page: int
    page_size: int
    has_previous: bool
    has_next: bool
    total_items: int = 0

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def first_index(self) -> int:
        """Zero-based index of the first item within the whole sequence."""
        return self.page * self.page_size


@dataclass(frozen=True, slots=True)
class ViewState:
    """What the user is currently looking at.

    Owned by the rendering side and passed by value into the pipeline.
    The page index is clamped at zero and not bounded above; a page past
    the end simply renders empty.
    """

    sort_key: SortKey = SortKey.NONE
    page: int = 0
    visibility: VisibilityMap = field(default_factory=VisibilityMap)

    def __post_init__(self) -> None:
        if self.page < 0:
            object.__setattr__(self, "page", 0)
        if not isinstance(self.sort_key, SortKey):
            object.__setattr__(self, "sort_key", SortKey.parse(self.sort_key))

    def next_page(self) -> ViewState:
        return ViewState(self.sort_key, self.page + 1, self.visibility)

    def previous_page(self) -> ViewState:
        return ViewState(self.sort_key, max(self.page - 1, 0), self.visibility)

    def first_page(self) -> ViewState:
        """Back to page zero, keeping the ordering and the visible columns."""
        return ViewState(self.sort_key, 0, self.visibility)

    def with_sort_key(self, sort_key: Union[SortKey, str, None]) -> ViewState:
        """Change the ordering. The current page index is kept."""
        return ViewState(SortKey.parse(sort_key), self.page, self.visibility)

    def with_visibility(self, visibility: VisibilityMap) -> ViewState:
        return ViewState(self.sort_key, self.page, visibility)
