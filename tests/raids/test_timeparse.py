import datetime

import pytest

from raidbot.raids.timeparse import parse_time_of_day

NOW = datetime.datetime(2026, 10, 19, 9, 30, 15, 500)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3:45pm", (15, 45, 0)),
        ("3:45 PM", (15, 45, 0)),
        ("3:45:10 p.m.", (15, 45, 10)),
        ("4 pm", (16, 0, 0)),
        ("4p", (16, 0, 0)),
        ("11:05 am", (11, 5, 0)),
        ("12am", (0, 0, 0)),
        ("12:30pm", (12, 30, 0)),
        ("15:45", (15, 45, 0)),
        ("0:10", (0, 10, 0)),
        (" 7:00 ", (7, 0, 0)),
    ],
)
def test_parses_time_of_day_on_current_date(raw, expected):
    parsed = parse_time_of_day(raw, NOW)

    assert parsed.date() == NOW.date()
    assert (parsed.hour, parsed.minute, parsed.second) == expected
    assert parsed.microsecond == 0


@pytest.mark.parametrize(
    "raw",
    [None, "", "soon", "25:00", "13pm", "0am", "3:75", "3:5", "3m", "3:45 xm", "3:45pm tomorrow"],
)
def test_rejects_invalid_times(raw):
    assert parse_time_of_day(raw, NOW) is None
