from abc import ABC, abstractmethod

from cinema_booking.domain.entities.booking import Booking, BookingRequest


class BookingGatewayPort(ABC):
    @abstractmethod
    def create_booking(self, request: BookingRequest) -> Booking:
        """Store a booking and return the server-assigned record."""
        raise NotImplementedError

    @abstractmethod
    def list_user_bookings(self, userid: str) -> list[Booking]:
        raise NotImplementedError
