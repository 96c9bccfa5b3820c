"""Greetings, time reports and a moon-phase estimate."""

from __future__ import annotations

from datetime import datetime

PHASES = (
    "waxing crescent",
    "at first quater",
    "waxing gibbous",
    "full",
    "waning gibbous",
    "at last quater",
    "wanning crescent",
    "new",
)


def greeting(name: str | None = None) -> str:
    """Greet ``name``, or anyone at all when no name is given."""
    if name is None:
        return "Hello, you hansome beast!"
    return f"hello, {name}"


def dated_greeting(moment: datetime, name: str | None = None) -> str:
    """Greet with the date and a 12-hour clock time of ``moment``."""
    who = f", {name}" if name is not None else ""
    return (
        f"Greetings{who}!\n"
        f"Today is {moment:%A, %B %d, %Y}\n"
        f"It is {moment:%I:%M:%S %p}\n"
    )


def time_of_day_greeting(hour: int, name: str | None = None) -> str:
    """Say good morning, afternoon or evening according to ``hour``."""
    if hour < 12:
        part = "morning"
    elif hour < 17:
        part = "afternoon"
    else:
        part = "evening"
    who = f", {name}" if name is not None else ""
    return f"Good {part}{who}"


def time_details(moment: datetime) -> str:
    """List the calendar fields of ``moment``.

    The day of the year counts from 0 and the day of the week from Sunday = 0.
    """
    fields = (
        ("Day of the year", moment.timetuple().tm_yday - 1),
        ("Day of the week", (moment.weekday() + 1) % 7),
        ("Year", moment.year),
        ("Month", moment.month),
        ("Day of the month", moment.day),
        ("Hour", moment.hour),
        ("Minute", moment.minute),
        ("Second", moment.second),
    )
    lines = ["Time details:"]
    lines.extend(f"{label:>16}: {value}" for label, value in fields)
    return "\n".join(lines) + "\n"


def timestamp_report(moment: datetime) -> str:
    """Show ``moment`` as seconds since the epoch and in ctime form."""
    return f"The computer thinks it's {int(moment.timestamp())}\n{moment.ctime()}\n"


def _c_mod(a: int, b: int) -> int:
    remainder = abs(a) % b
    return -remainder if a < 0 else remainder


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def moon_phase(year: int, month: int, day: int) -> int:
    """Estimate the moon phase as an index 0..7 into :data:`PHASES`.

    ``month`` is used as given by the estimate's own convention.
    """
    d = day
    if month == 2:
        d += 31
    elif month > 2:
        d = int(d + 59 + (month - 3) * 30.6 + 0.5)
    g = _c_mod(year - 1900, 19)
    e = _c_mod(11 * g + 29, 30)
    if e in (24, 25):
        e += 1
    return _c_div(_c_mod((e + d) * 6 + 5, 177), 22) & 7


def moon_phase_name(year: int, month: int, day: int) -> str:
    """Return the name of the phase from :func:`moon_phase`."""
    return PHASES[moon_phase(year, month, day)]