"""Display helpers shared by the renderers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..domain.errors import InvalidArgumentError
from ..domain.models import Place


def format_duration(minutes: int) -> str:
    """Render a duration as ``"{hours}h {minutes}min"``.

    Parameters
    ----------
    minutes:
        Non-negative number of minutes.

    Returns
    -------
    str
        e.g. ``"2h 5min"`` for 125, ``"0h 0min"`` for 0.

    Raises
    ------
    InvalidArgumentError
        If ``minutes`` is negative or not an integer.
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidArgumentError(
            f"Duration must be an integer number of minutes, got {minutes!r}",
            argument="minutes",
            value=minutes,
        )
    if minutes < 0:
        raise InvalidArgumentError(
            f"Duration must be non-negative, got {minutes}",
            argument="minutes",
            value=minutes,
        )

    hours, remainder = divmod(minutes, 60)
    return f"{hours}h {remainder}min"


def format_stops(stop_count: int) -> str:
    if stop_count < 0:
        raise InvalidArgumentError(
            f"Stop count must be non-negative, got {stop_count}",
            argument="stop_count",
            value=stop_count,
        )
    if stop_count == 0:
        return "Non-stop"
    return f"{stop_count} stop(s)"


def format_timestamp(value: datetime, fmt: str = "%Y-%m-%d %H:%M") -> str:
    return value.strftime(fmt)


def format_place(place: Place) -> str:
    """Render a place as ``"Name (CODE)"``, dropping whichever part is empty."""
    if place.name and place.display_code:
        return f"{place.name} ({place.display_code})"
    return place.name or place.display_code


def or_placeholder(value: Optional[str], placeholder: str = "N/A") -> str:
    return value if value else placeholder
