from datetime import datetime, timedelta, timezone

import pytest

from tinytext.clock import (
    PHASES,
    dated_greeting,
    greeting,
    moon_phase,
    moon_phase_name,
    time_details,
    time_of_day_greeting,
    timestamp_report,
)


def test_greeting_without_name():
    assert greeting() == "Hello, you hansome beast!"


def test_greeting_with_name():
    assert greeting("Bob") == "hello, Bob"


def test_dated_greeting():
    moment = datetime(2021, 3, 5, 14, 7, 9)
    assert dated_greeting(moment, "Ann") == (
        "Greetings, Ann!\nToday is Friday, March 05, 2021\nIt is 02:07:09 PM\n"
    )


def test_dated_greeting_without_name_starts_plainly():
    assert dated_greeting(datetime(2021, 3, 5)).startswith("Greetings!\nToday is ")


@pytest.mark.parametrize(
    "hour, expected",
    [
        (0, "Good morning"),
        (11, "Good morning"),
        (12, "Good afternoon"),
        (16, "Good afternoon"),
        (17, "Good evening"),
        (23, "Good evening"),
    ],
)
def test_time_of_day_greeting(hour, expected):
    assert time_of_day_greeting(hour) == expected


def test_time_of_day_greeting_with_name():
    assert time_of_day_greeting(20, "Sam") == "Good evening, Sam"


def test_time_details_fields():
    report = time_details(datetime(2021, 3, 5, 14, 7, 9))
    lines = report.splitlines()
    assert lines[0] == "Time details:"
    assert len(lines) == 9
    assert "            Year: 2021" in lines
    assert "           Month: 3" in lines
    assert "Day of the month: 5" in lines
    assert "          Second: 9" in lines


def test_time_details_day_numbers_advance():
    def field(report, label):
        line = next(line for line in report.splitlines() if line.strip().startswith(label))
        return int(line.split(":")[1])

    first = time_details(datetime(2021, 6, 1))
    second = time_details(datetime(2021, 6, 1) + timedelta(days=1))
    assert field(second, "Day of the year") == field(first, "Day of the year") + 1
    assert field(second, "Day of the week") == (field(first, "Day of the week") + 1) % 7


def test_timestamp_report_utc():
    report = timestamp_report(datetime(2000, 1, 1, tzinfo=timezone.utc))
    assert report.startswith("The computer thinks it's 946684800\n")
    assert report.endswith(" 2000\n")


def test_moon_phase_worked_example():
    assert moon_phase(2000, 0, 1) == 7
    assert moon_phase_name(2000, 0, 1) == "new"


@pytest.mark.parametrize("year", [1850, 1900, 1999, 2024, 2100])
@pytest.mark.parametrize("month", range(12))
def test_moon_phase_in_range(year, month):
    for day in (1, 10, 20, 28):
        phase = moon_phase(year, month, day)
        assert 0 <= phase < len(PHASES)
        assert moon_phase_name(year, month, day) == PHASES[phase]