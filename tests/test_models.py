"""Tests for data models."""

import dataclasses

import pytest

from yweather_getter.data import (
    CurrentCondition,
    ForecastDay,
    PlaceIdentifier,
    QueryResult,
    QueryStatus,
    Unit,
    icon_url,
)


def test_unit_values_match_feed_parameter() -> None:
    assert Unit.CELSIUS.value == "c"
    assert Unit.FAHRENHEIT.value == "f"
    assert Unit("f") is Unit.FAHRENHEIT


def test_place_identifier_defaults_to_found() -> None:
    place = PlaceIdentifier(woeid="1118370")
    assert place.found is True
    assert place.neighborhood == ""
    assert place.country == ""


def test_place_identifier_not_found() -> None:
    place = PlaceIdentifier.not_found()
    assert place.found is False
    assert place.woeid == ""


def test_place_identifier_is_frozen() -> None:
    place = PlaceIdentifier(woeid="1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        place.woeid = "2"  # type: ignore[misc]


def test_icon_url_is_derived_from_code() -> None:
    assert icon_url(34) == "http://l.yimg.com/a/i/us/we/52/34.gif"
    assert icon_url(11, "http://icons.test/") == "http://icons.test/11.gif"


def test_condition_and_forecast_icon_urls() -> None:
    condition = CurrentCondition(
        code=34,
        text="Fair",
        temperature=16,
        date="Sat, 18 Oct 2014 9:00 pm JST",
        latitude="35.67",
        longitude="139.77",
        title="Conditions for Tokyo",
    )
    day = ForecastDay(code=11, text="Showers", date="20 Oct 2014", day="Mon", high=19, low=15)
    assert condition.icon_url.endswith("/34.gif")
    assert day.icon_url.endswith("/11.gif")
    assert condition.icon is None
    assert day.icon is None


def test_query_result_ok_only_for_report() -> None:
    assert QueryResult(status=QueryStatus.IDENTIFIER_NOT_FOUND).ok is False
    assert QueryResult(status=QueryStatus.IDENTIFIER_NOT_FOUND).is_fault is False


def test_query_result_fault_carries_error() -> None:
    error = RuntimeError("boom")
    result = QueryResult(status=QueryStatus.CONNECTION_FAILURE, error=error)
    assert result.is_fault is True
    assert result.report is None
    assert result.error is error
