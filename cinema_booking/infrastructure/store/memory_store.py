from __future__ import annotations

import time
import uuid
from dataclasses import replace
from typing import Any

from cinema_booking.application.ports.booking_repository import BookingRepositoryPort
from cinema_booking.application.ports.branch_repository import BranchRepositoryPort
from cinema_booking.domain.entities.booking import Booking
from cinema_booking.domain.entities.branch import Branch


class MemoryBookingRepository(BookingRepositoryPort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}

    def create(self, fields: dict[str, Any]) -> Booking:
        now = time.time()
        booking = Booking(id=uuid.uuid4().hex, created_at=now, updated_at=now, **fields)
        self._bookings[booking.id] = booking
        return booking

    def list_all(self) -> list[Booking]:
        return list(self._bookings.values())

    def list_by_user(self, userid: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.userid == userid]

    def get(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def update(self, booking_id: str, fields: dict[str, Any]) -> Booking | None:
        booking = self._bookings.get(booking_id)
        if booking is None:
            return None
        updated = replace(booking, updated_at=time.time(), **fields)
        self._bookings[booking_id] = updated
        return updated

    def delete(self, booking_id: str) -> bool:
        return self._bookings.pop(booking_id, None) is not None


class MemoryBranchRepository(BranchRepositoryPort):
    def __init__(self, branches: list[Branch] | None = None) -> None:
        self._branches: dict[str, Branch] = {b.id: b for b in branches or []}

    def create(self, fields: dict[str, Any]) -> Branch:
        fields = dict(fields)
        fields["images"] = tuple(fields.get("images") or ())
        now = time.time()
        branch = Branch(id=uuid.uuid4().hex, created_at=now, updated_at=now, **fields)
        self._branches[branch.id] = branch
        return branch

    def list_all(self) -> list[Branch]:
        return list(self._branches.values())

    def get(self, branch_id: str) -> Branch | None:
        return self._branches.get(branch_id)

    def update(self, branch_id: str, fields: dict[str, Any]) -> Branch | None:
        branch = self._branches.get(branch_id)
        if branch is None:
            return None
        fields = dict(fields)
        if "images" in fields:
            fields["images"] = tuple(fields["images"] or ())
        updated = replace(branch, updated_at=time.time(), **fields)
        self._branches[branch_id] = updated
        return updated

    def delete(self, branch_id: str) -> bool:
        return self._branches.pop(branch_id, None) is not None
