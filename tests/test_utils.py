import time

import pytest

from philosophers.utils import current_time_ms, parse_int


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  -17", -17),
        ("+5", 5),
        ("\t\n\v\f\r 3", 3),
        ("12abc", 12),
        ("800 200", 800),
        ("-0", 0),
    ],
)
def test_parse_int_reads_leading_number(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-+5", "+-5", "--1", "   ", "x12"])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


@pytest.mark.parametrize("value", [0, 1, 7, 60, 200, 410, 2147483647, -2147483648, -1])
def test_parse_int_round_trips_int32_values(value):
    assert parse_int(str(value)) == value


def test_parse_int_wraps_past_int32_max():
    assert parse_int("2147483648") == -2147483648


def test_parse_int_wraps_consistently():
    assert parse_int("4294967296") == parse_int("0")
    assert parse_int("4294967297") == parse_int("1")


def test_parse_int_sign_is_symmetric():
    for text in ("1", "99", "123456"):
        assert parse_int("-" + text) == -parse_int(text)


def test_current_time_ms_is_non_decreasing():
    first = current_time_ms()
    second = current_time_ms()
    assert second >= first


def test_current_time_ms_matches_wall_clock():
    before = int(time.time() * 1000)
    now = current_time_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_current_time_ms_advances_with_sleep():
    start = current_time_ms()
    time.sleep(0.02)
    assert current_time_ms() - start >= 15