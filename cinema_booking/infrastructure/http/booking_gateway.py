from __future__ import annotations

from cinema_booking.application.exceptions import ApiError
from cinema_booking.application.ports.booking_gateway import BookingGatewayPort
from cinema_booking.domain.entities.booking import Booking, BookingRequest
from cinema_booking.infrastructure.http.api_client import ApiClient
from cinema_booking.infrastructure.store.records import booking_from_record

BOOKINGS_ENDPOINT = "/bookings"


def user_bookings_endpoint(userid: str) -> str:
    return f"{BOOKINGS_ENDPOINT}/user/{userid}"


class HttpBookingGateway(BookingGatewayPort):
    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def create_booking(self, request: BookingRequest) -> Booking:
        data = self._client.post(BOOKINGS_ENDPOINT, request.to_payload())
        try:
            return booking_from_record(data)
        except (ValueError, AttributeError, TypeError) as e:
            raise ApiError(f"Invalid booking payload: {e}", 200) from e

    def list_user_bookings(self, userid: str) -> list[Booking]:
        data = self._client.get(user_bookings_endpoint(userid))
        if not isinstance(data, list):
            raise ApiError("Invalid booking list payload", 200)
        try:
            return [booking_from_record(item) for item in data]
        except (ValueError, AttributeError, TypeError) as e:
            raise ApiError(f"Invalid booking list payload: {e}", 200) from e
