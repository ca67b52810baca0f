import math

import pytest

from fxcalc.services.formatting import clipboard_text, format_currency, format_rate
from fxcalc.services.input_parsing import parse_number
from fxcalc.services.money import round2


@pytest.mark.parametrize(
    "raw, expected",
    [
        (12.345, 12.35),
        (12.344, 12.34),
        (-12.345, -12.35),
        (1.005, 1.01),
        (43591.836, 43591.84),
        (0.0, 0.0),
    ],
)
def test_round2_half_away_from_zero(raw, expected):
    assert round2(raw) == expected


def test_round2_non_finite_passthrough():
    assert math.isnan(round2(float("nan")))
    assert round2(float("inf")) == float("inf")
    assert round2(float("-inf")) == float("-inf")


def test_round2_huge_value():
    assert round2(1e300) == 1e300


def test_format_currency():
    assert format_currency(1234.5) == "1,234.50"
    assert format_currency(43591.84, 0) == "43,592"
    assert format_currency(1992, 0) == "1,992"
    assert format_currency(-0.001) == "0.00"
    assert format_currency(-2454.17, 0) == "-2,454"


def test_format_rate():
    assert format_rate(21.8085) == "21.8085"
    assert format_rate(31.54) == "31.5400"
    assert format_rate(0.65455) == "0.6546"


def test_format_non_finite():
    assert format_currency(float("nan")) == "NaN"
    assert format_rate(float("inf")) == "∞"
    assert format_currency(float("-inf"), 0) == "-∞"


def test_clipboard_text():
    assert clipboard_text(43591.84) == "43591.84"
    assert clipboard_text(200.0) == "200"
    assert clipboard_text(-2454.17) == "-2454.17"
    assert clipboard_text(1234567.5) == "1234567.5"
    assert clipboard_text(1e-05) == "0.00001"
    assert clipboard_text(1e21) == "1000000000000000000000"
    assert clipboard_text(-0.0) == "0"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2000", 2000.0),
        ("  8 ", 8.0),
        ("0.6545", 0.6545),
        (".5", 0.5),
        ("-3", -3.0),
        ("12abc", 12.0),
        ("1e3", 1000.0),
        ("3.", 3.0),
        ("", 0.0),
        ("abc", 0.0),
        ("nan", 0.0),
        (None, 0.0),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected
