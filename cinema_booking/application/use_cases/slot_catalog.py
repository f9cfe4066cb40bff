from __future__ import annotations

from datetime import date, datetime, timedelta

from cinema_booking.domain.entities.slot import DateOption, TimeSlot

FIRST_HOUR = 8
SLOT_MINUTES = (0, 15, 30, 45)
MIDNIGHT = "00:00"


def available_dates(today: date | None = None, days: int = 7) -> list[DateOption]:
    """Rolling window of selectable dates starting today (device local date)."""
    if today is None:
        today = date.today()

    options: list[DateOption] = []
    for offset in range(days):
        day = today + timedelta(days=offset)
        options.append(
            DateOption(
                day_name=day.strftime("%a"),
                day_number=str(day.day),
                value=day.isoformat(),
            )
        )
    return options


def time_slots() -> list[TimeSlot]:
    """Slots every 15 minutes from 08:00 through 23:45, then midnight as 00:00."""
    slots: list[TimeSlot] = []
    for hour in range(FIRST_HOUR, 24):
        for minute in SLOT_MINUTES:
            slots.append(TimeSlot(label=_twelve_hour_label(hour, minute), value=f"{hour:02d}:{minute:02d}"))
    slots.append(TimeSlot(label=MIDNIGHT, value=MIDNIGHT))
    return slots


def format_booking_date(value: str) -> str:
    """'2026-10-21' -> 'October 21, 2026'."""
    day = datetime.strptime(value, "%Y-%m-%d").date()
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def _twelve_hour_label(hour: int, minute: int) -> str:
    suffix = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"
