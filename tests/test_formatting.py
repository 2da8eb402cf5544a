"""Tests for display formatting helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from flight_results.domain.errors import InvalidArgumentError
from flight_results.domain.models import Place
from flight_results.pipeline.formatting import (
    format_duration,
    format_place,
    format_stops,
    format_timestamp,
)


@pytest.mark.parametrize(
    "minutes,expected",
    [
        (125, "2h 5min"),
        (0, "0h 0min"),
        (59, "0h 59min"),
        (60, "1h 0min"),
        (1030, "17h 10min"),
    ],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_format_duration_rejects_negative():
    with pytest.raises(InvalidArgumentError) as excinfo:
        format_duration(-5)
    assert excinfo.value.argument == "minutes"
    assert excinfo.value.value == -5


@pytest.mark.parametrize("value", [1.5, "60", None, True])
def test_format_duration_rejects_non_integers(value):
    with pytest.raises(InvalidArgumentError):
        format_duration(value)


def test_format_stops():
    assert format_stops(0) == "Non-stop"
    assert format_stops(1) == "1 stop(s)"
    assert format_stops(3) == "3 stop(s)"


def test_format_stops_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        format_stops(-1)


def test_format_place():
    assert format_place(Place(name="London Heathrow", display_code="LHR")) == "London Heathrow (LHR)"
    assert format_place(Place(name="", display_code="LHR")) == "LHR"
    assert format_place(Place()) == ""


def test_format_timestamp():
    assert format_timestamp(datetime(2024, 2, 20, 7, 5)) == "2024-02-20 07:05"
    assert format_timestamp(datetime(2024, 2, 20, 7, 5), "%H:%M") == "07:05"
