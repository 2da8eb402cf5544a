"""Tests for leg cards and the results renderers."""

import pytest

from flight_results.adapters.rendering import (
    MarkdownResultsRenderer,
    PlainTextResultsRenderer,
    build_cards,
)
from flight_results.config import DisplayConfig
from flight_results.domain.models import Itinerary, Leg, Price, VisibilityMap
from flight_results.pipeline.paginator import paginate
from flight_results.pipeline.visibility import from_visible, toggle
from tests.data.builders import make_itinerary, make_leg


@pytest.fixture
def display():
    return DisplayConfig(timestamp_format="%Y-%m-%d %H:%M", missing_placeholder="N/A")


@pytest.fixture
def page():
    itinerary = make_itinerary(
        "it-1",
        price=239.98,
        formatted="$240",
        departure="2024-02-20T12:35:00",
        arrival="2024-02-20T15:50:00",
        duration=495,
        stops=1,
    )
    return paginate([itinerary], 0, 20)


class TestBuildCards:
    """Test suite for build_cards."""

    def test_all_columns_visible(self, page, display):
        (card,) = build_cards(page, VisibilityMap(), display)

        assert card.itinerary_id == "it-1"
        assert card.airline_name == "British Airways"
        assert card.airline_logo_url == "https://logos.example/BA.png"
        assert card.departure_time == "2024-02-20 12:35"
        assert card.departure_place == "London Heathrow (LHR)"
        assert card.arrival_time == "2024-02-20 15:50"
        assert card.arrival_place == "New York John F. Kennedy (JFK)"
        assert card.duration == "8h 15min"
        assert card.stops == "1 stop(s)"
        assert card.price == "$240"

    def test_hidden_columns_are_none(self, page, display):
        visibility = toggle(toggle(VisibilityMap(), "airline"), "stops")
        (card,) = build_cards(page, visibility, display)

        assert card.airline_name is None
        assert card.airline_logo_url is None
        assert card.stops is None
        assert card.price is None
        assert card.duration == "8h 15min"

    def test_missing_values_use_placeholder(self, display):
        leg = Leg(id="bare", duration_in_minutes=-10)
        itinerary = Itinerary(id="gaps", price=None, legs=(leg,))
        (card,) = build_cards(paginate([itinerary], 0, 20), VisibilityMap(), display)

        assert card.airline_name == "N/A"
        assert card.departure_time == "N/A"
        assert card.departure_place == "N/A"
        assert card.arrival_place == "N/A"
        assert card.duration == "N/A"
        assert card.stops == "N/A"
        assert card.price == "N/A"

    def test_one_card_per_displayable_leg(self, display):
        outbound = make_leg("out")
        inbound = make_leg("in")
        itineraries = [
            Itinerary(id="return", price=Price(raw=1.0, formatted="$1"), legs=(outbound, None, inbound)),
            make_itinerary("legless", no_legs=True),
        ]
        cards = build_cards(paginate(itineraries, 0, 20), VisibilityMap(), display)
        assert [c.leg_id for c in cards] == ["out", "in"]


class TestMarkdownResultsRenderer:
    """Test suite for MarkdownResultsRenderer."""

    def test_renders_visible_fields(self, page, display):
        text = MarkdownResultsRenderer(display).render(page, VisibilityMap())

        assert "**British Airways**" in text
        assert "![British Airways](https://logos.example/BA.png)" in text
        assert "**Departure:** 2024-02-20 12:35 · London Heathrow (LHR)" in text
        assert "**Duration:** 8h 15min" in text
        assert "**Stops:** 1 stop(s) · **$240**" in text
        assert "_Page 1 · itineraries 1–1 of 1_" in text

    def test_hidden_fields_are_not_rendered(self, page, display):
        text = MarkdownResultsRenderer(display).render(page, from_visible(["duration"]))

        assert "British Airways" not in text
        assert "Departure" not in text
        assert "Stops" not in text
        assert "**Duration:** 8h 15min" in text

    def test_empty_page(self, display):
        text = MarkdownResultsRenderer(display).render(paginate([], 0, 20), VisibilityMap())
        assert "_No itineraries to show._" in text
        assert text.endswith("_Page 1_")


class TestPlainTextResultsRenderer:
    """Test suite for PlainTextResultsRenderer."""

    def test_one_line_per_leg_and_footer(self, display):
        items = [make_itinerary(str(n)) for n in range(3)]
        page = paginate(items, 1, 2)

        lines = PlainTextResultsRenderer(display).render(page, VisibilityMap()).splitlines()

        assert len(lines) == 2
        assert lines[0].startswith("British Airways | London Heathrow (LHR) 2024-02-20 10:00")
        assert lines[0].endswith("Non-stop | $100")
        assert lines[-1] == "[page 2 | previous]"
