"""Tests for temperature conversion."""

import pytest

from yweather_getter.units import celsius_to_fahrenheit, fahrenheit_to_celsius


@pytest.mark.parametrize(("celsius", "fahrenheit"), [(0, 32), (100, 212), (37, 98)])
def test_celsius_to_fahrenheit_known_pairs(celsius: int, fahrenheit: int) -> None:
    assert celsius_to_fahrenheit(celsius) == fahrenheit


@pytest.mark.parametrize(("fahrenheit", "celsius"), [(32, 0), (212, 100), (98, 36), (-40, -40)])
def test_fahrenheit_to_celsius_known_pairs(fahrenheit: int, celsius: int) -> None:
    assert fahrenheit_to_celsius(fahrenheit) == celsius


def test_truncates_toward_zero_for_negative_values() -> None:
    # (20 - 32) * 5 / 9 = -6.67
    assert fahrenheit_to_celsius(20) == -6
    # -1 * 9 / 5 + 32 = 30.2
    assert celsius_to_fahrenheit(-1) == 30


@pytest.mark.parametrize("temp_c", range(-50, 51))
def test_round_trip_within_truncation_error(temp_c: int) -> None:
    assert abs(fahrenheit_to_celsius(celsius_to_fahrenheit(temp_c)) - temp_c) <= 1
