"""Tests for the column visibility map."""

from __future__ import annotations

import pytest

from flight_results.domain.errors import InvalidArgumentError
from flight_results.domain.models import Column, VisibilityMap
from flight_results.pipeline.visibility import DEFAULT_VISIBILITY, from_visible, toggle


def test_all_columns_visible_by_default():
    assert DEFAULT_VISIBILITY.as_dict() == {
        "airline": True,
        "departure": True,
        "arrival": True,
        "duration": True,
        "stops": True,
    }


def test_toggle_flips_only_the_given_column():
    before = VisibilityMap()
    after = toggle(before, "airline")

    assert after.airline is False
    for column in ("departure", "arrival", "duration", "stops"):
        assert after.as_dict()[column] == before.as_dict()[column]


def test_toggle_does_not_mutate_input():
    before = VisibilityMap()
    toggle(before, Column.STOPS)
    assert before.stops is True


def test_toggle_twice_restores_map():
    original = VisibilityMap(arrival=False)
    assert toggle(toggle(original, "duration"), "duration") == original


def test_toggle_unknown_column_is_rejected():
    with pytest.raises(InvalidArgumentError):
        toggle(VisibilityMap(), "price")


def test_from_visible():
    visibility = from_visible(["airline", Column.STOPS])
    assert visibility.visible_columns() == (Column.AIRLINE, Column.STOPS)
    assert visibility.is_visible("departure") is False


def test_from_visible_empty_hides_everything():
    assert from_visible([]).visible_columns() == ()
