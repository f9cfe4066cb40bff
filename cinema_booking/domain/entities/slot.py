from dataclasses import dataclass


@dataclass(frozen=True)
class DateOption:
    day_name: str  # "Mon"
    day_number: str  # "19"
    value: str  # YYYY-MM-DD


@dataclass(frozen=True)
class TimeSlot:
    label: str  # "7:30 PM"
    value: str  # HH:MM
