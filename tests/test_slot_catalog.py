from __future__ import annotations

from datetime import date, timedelta

from cinema_booking.application.use_cases.slot_catalog import (
    available_dates,
    format_booking_date,
    time_slots,
)


def test_available_dates_cover_rolling_week():
    today = date(2026, 10, 19)  # Monday
    dates = available_dates(today)

    assert len(dates) == 7
    for offset, option in enumerate(dates):
        assert option.value == (today + timedelta(days=offset)).isoformat()
    assert [d.value for d in dates] == sorted({d.value for d in dates})
    assert dates[0].day_name == "Mon"
    assert dates[0].day_number == "19"
    assert dates[6].value == "2026-10-25"


def test_available_dates_cross_month_boundary():
    dates = available_dates(date(2026, 12, 29))
    assert [d.day_number for d in dates] == ["29", "30", "31", "1", "2", "3", "4"]
    assert dates[-1].value == "2027-01-04"


def test_available_dates_default_to_today():
    assert available_dates()[0].value == date.today().isoformat()


def test_time_slots_every_fifteen_minutes_until_midnight():
    slots = time_slots()
    values = [slot.value for slot in slots]

    assert values[0] == "08:00"
    assert values[-2] == "23:45"
    assert values[-1] == "00:00"
    assert len(values) == 65
    assert len(set(values)) == len(values)

    minutes = [int(v[:2]) * 60 + int(v[3:]) for v in values[:-1]]
    assert all(b - a == 15 for a, b in zip(minutes, minutes[1:]))
    # Midnight closes the day, 15 minutes after 23:45
    assert 24 * 60 - minutes[-1] == 15


def test_time_slot_labels_are_twelve_hour():
    labels = {slot.value: slot.label for slot in time_slots()}
    assert labels["08:00"] == "8:00 AM"
    assert labels["12:15"] == "12:15 PM"
    assert labels["19:30"] == "7:30 PM"
    assert labels["00:00"] == "00:00"


def test_time_slots_are_deterministic():
    assert time_slots() == time_slots()


def test_format_booking_date():
    assert format_booking_date("2026-10-21") == "October 21, 2026"
    assert format_booking_date("2027-01-04") == "January 4, 2027"
