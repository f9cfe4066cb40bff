from __future__ import annotations

import logging
from typing import Any

from cinema_booking.application.exceptions import BookingNotFoundError
from cinema_booking.application.ports.booking_repository import BookingRepositoryPort
from cinema_booking.domain.entities.booking import Booking, BookingStatus


class BookingRecordsUseCase:
    """Server side booking CRUD. No slot conflict checks; the last write wins."""

    def __init__(self, repository: BookingRepositoryPort) -> None:
        self._repository = repository
        self._logger = logging.getLogger(__name__)

    def create(self, fields: dict[str, Any]) -> Booking:
        fields = dict(fields)
        fields["status"] = BookingStatus(fields.get("status", BookingStatus.PENDING))
        booking = self._repository.create(fields)
        self._logger.info(
            "Booking stored",
            extra={"booking_id": booking.id, "branch": booking.branch_name, "userid": booking.userid},
        )
        return booking

    def list_all(self) -> list[Booking]:
        return self._repository.list_all()

    def list_for_user(self, userid: str) -> list[Booking]:
        return self._repository.list_by_user(userid)

    def get(self, booking_id: str) -> Booking:
        booking = self._repository.get(booking_id)
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        return booking

    def update(self, booking_id: str, fields: dict[str, Any]) -> Booking:
        fields = dict(fields)
        if "status" in fields:
            fields["status"] = BookingStatus(fields["status"])
        booking = self._repository.update(booking_id, fields)
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        self._logger.info("Booking updated", extra={"booking_id": booking_id, "status": booking.status.name})
        return booking

    def delete(self, booking_id: str) -> None:
        if not self._repository.delete(booking_id):
            raise BookingNotFoundError("Booking not found")
        self._logger.info("Booking deleted", extra={"booking_id": booking_id})
