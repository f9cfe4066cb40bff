from abc import ABC, abstractmethod
from typing import Any

from cinema_booking.domain.entities.booking import Booking


class BookingRepositoryPort(ABC):
    @abstractmethod
    def create(self, fields: dict[str, Any]) -> Booking:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Booking]:
        """All bookings ordered by creation time."""
        raise NotImplementedError

    @abstractmethod
    def list_by_user(self, userid: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, booking_id: str, fields: dict[str, Any]) -> Booking | None:
        """Overwrite the given fields. Returns None if the booking does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: str) -> bool:
        raise NotImplementedError
