from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BookingStatus(IntEnum):
    PENDING = 0
    CONFIRMED = 1
    CANCELED = 2


@dataclass(frozen=True)
class Booking:
    id: str
    branch_name: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    full_name: str
    phone_number: str
    status: BookingStatus = BookingStatus.PENDING
    userid: str | None = None  # client correlation token, not an identity
    promo_code: str | None = None
    discount_percentage: float | None = None
    created_at: float | None = None
    updated_at: float | None = None


@dataclass(frozen=True)
class BookingRequest:
    userid: str
    branch_name: str
    date: str
    time: str
    full_name: str
    phone_number: str
    status: BookingStatus = BookingStatus.PENDING

    def to_payload(self) -> dict[str, object]:
        return {
            "userid": self.userid,
            "branchName": self.branch_name,
            "date": self.date,
            "time": self.time,
            "fullName": self.full_name,
            "phoneNumber": self.phone_number,
            "status": int(self.status),
        }
