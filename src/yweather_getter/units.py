"""Temperature conversion between the feed's two units.

Both directions truncate toward zero, so a round trip may lose up to one degree.
"""


def fahrenheit_to_celsius(temp_f: int) -> int:
    return int((temp_f - 32) * 5 / 9)


def celsius_to_fahrenheit(temp_c: int) -> int:
    return int(temp_c * 9 / 5 + 32)
