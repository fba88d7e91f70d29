from datetime import datetime, time

import pytest

from parsing.temporal import parse_elapsed_time, parse_logged_time, seconds_from_midnight


def test_elapsed_time_shapes() -> None:
    assert parse_elapsed_time("1:02:03") == time(1, 2, 3)
    assert parse_elapsed_time("02:03") == time(0, 2, 3)
    assert parse_elapsed_time("1:2:3:4") is None
    assert parse_elapsed_time("42") is None


def test_elapsed_time_accepts_cjk_components() -> None:
    assert parse_elapsed_time("一:二十:三") == time(1, 20, 3)


@pytest.mark.parametrize("token", ["1:xx:03", "1::03", "24:00:00", "00:60", "10:61", ""])
def test_elapsed_time_never_clamps(token: str) -> None:
    assert parse_elapsed_time(token) is None


def test_logged_time_fixed_layout() -> None:
    assert parse_logged_time("2024-03-05 21:07") == datetime(2024, 3, 5, 21, 7)
    assert parse_logged_time("2024-03-05 21:07:30") is None
    assert parse_logged_time("2024/03/05 21:07") is None
    assert parse_logged_time("2024-02-30 21:07") is None
    assert parse_logged_time("") is None


def test_seconds_from_midnight() -> None:
    assert seconds_from_midnight(time(1, 2, 3)) == 3723
