"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def calendar_text():
    """A calendar with a timezone (two rules) and two events."""
    return "\r\n".join([
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Example Corp//Calendar//EN",
        "METHOD:PUBLISH",
        "X-WR-CALNAME:Team",
        "BEGIN:VTIMEZONE",
        "TZID:Europe/Paris",
        "X-LIC-LOCATION:Europe/Paris",
        "BEGIN:DAYLIGHT",
        "TZOFFSETFROM:+0100",
        "TZOFFSETTO:+0200",
        "TZNAME:CEST",
        "DTSTART:19700329T020000",
        "RRULE:FREQ=YEARLY;BYMONTH=3;BYDAY=-1SU",
        "END:DAYLIGHT",
        "BEGIN:STANDARD",
        "TZOFFSETFROM:+0200",
        "TZOFFSETTO:+0100",
        "TZNAME:CET",
        "DTSTART:19701025T030000",
        "END:STANDARD",
        "END:VTIMEZONE",
        "BEGIN:VEVENT",
        "UID:event1",
        "SUMMARY:Weekly sync",
        "DTSTAMP:20240102T090000Z",
        "CLASS:PUBLIC",
        "X-FOO:1",
        "END:VEVENT",
        "BEGIN:VEVENT",
        "UID:event2",
        "SUMMARY:Retro",
        "SEQUENCE:3",
        "END:VEVENT",
        "END:VCALENDAR",
        "",
    ])


@pytest.fixture
def calendar_file(tmp_path, calendar_text):
    path = tmp_path / "calendar.ics"
    path.write_text(calendar_text, encoding="utf-8")
    return path
