"""Tests for configuration, the DI container and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from flight_results.adapters.cache import InMemoryCache, NullCache
from flight_results.adapters.rendering import MarkdownResultsRenderer
from flight_results.adapters.source import JSONItinerarySource, StaticItinerarySource
from flight_results.config import AppConfig, ObservabilityConfig, get_config, reset_config
from flight_results.container import Container, get_container, reset_container
from flight_results.domain.errors import ConfigurationError
from flight_results.domain.models import SortKey, ViewState
from flight_results.logging_setup import ROOT_LOGGER_NAME, configure_logging
from flight_results.ports.cache import CachePort
from flight_results.ports.source import ItinerarySourcePort
from flight_results.services import ResultsViewService
from tests.data.builders import make_itinerary


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_default_config():
    config = get_config()
    assert config.pagination.page_size == 20
    assert config.pagination.exact_has_next is False
    assert config.sorting.missing_placement == "last"
    assert config.source.itineraries_path.name == "itineraries.json"
    assert get_config() is config


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FLR_PAGINATION_PAGE_SIZE", "5")
    monkeypatch.setenv("FLR_SORT_MISSING_PLACEMENT", "first")
    monkeypatch.setenv("FLR_SORT_CACHE_ENABLED", "false")

    config = AppConfig()

    assert config.pagination.page_size == 5
    assert config.sorting.missing_placement == "first"
    assert config.sorting.cache_enabled is False


def test_invalid_page_size_rejected_by_config(monkeypatch):
    monkeypatch.setenv("FLR_PAGINATION_PAGE_SIZE", "0")
    with pytest.raises(ValidationError):
        AppConfig()


def test_default_container_wiring():
    container = Container.create_default()

    service = container.resolve(ResultsViewService)

    assert isinstance(service, ResultsViewService)
    assert isinstance(service.source, JSONItinerarySource)
    assert isinstance(service.renderer, MarkdownResultsRenderer)
    assert isinstance(service.cache, InMemoryCache)
    assert container.resolve(ResultsViewService) is service


def test_cache_disabled_uses_null_cache(monkeypatch):
    monkeypatch.setenv("FLR_SORT_CACHE_ENABLED", "false")
    container = Container.create_default(AppConfig())
    assert isinstance(container.resolve(CachePort), NullCache)


def test_override_registration():
    container = Container.create_default()
    items = (make_itinerary("b", price=2.0), make_itinerary("a", price=1.0))
    container.register(ItinerarySourcePort, lambda: StaticItinerarySource(items))

    view = container.resolve(ResultsViewService).view(ViewState(sort_key=SortKey.PRICE))

    assert [i.id for i in view.page.items] == ["a", "b"]
    assert "**$1**" in view.rendered


def test_resolve_unregistered_raises():
    with pytest.raises(KeyError):
        Container().resolve(ResultsViewService)


def test_non_singleton_registration():
    container = Container()
    container.register(list, list, singleton=False)
    assert container.resolve(list) is not container.resolve(list)


def test_register_drops_instance_already_built():
    container = Container()
    container.register(list, lambda: ["old"])
    assert container.resolve(list) == ["old"]
    container.register(list, lambda: ["new"])
    assert container.resolve(list) == ["new"]


def test_get_container_is_shared():
    assert get_container() is get_container()


def test_reset_container_builds_a_new_one():
    first = get_container()
    reset_container()
    assert get_container() is not first


def test_configure_logging_installs_one_handler():
    log = configure_logging(ObservabilityConfig(level="debug"))
    configure_logging(ObservabilityConfig(level="WARNING"))

    assert log.name == ROOT_LOGGER_NAME
    assert log.level == logging.WARNING
    ours = [h for h in log.handlers if getattr(h, "_flight_results", False)]
    assert len(ours) == 1


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="LOUD"))
    assert excinfo.value.setting_name == "FLR_LOG_LEVEL"
