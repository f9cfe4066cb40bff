from __future__ import annotations

import logging
from collections.abc import Sequence

from cinema_booking.application.exceptions import (
    ApiError,
    BookingCreationError,
    BookingServiceError,
    BranchResolutionError,
    NetworkError,
)
from cinema_booking.application.ports.booking_gateway import BookingGatewayPort
from cinema_booking.domain.entities.booking import Booking, BookingRequest, BookingStatus
from cinema_booking.domain.entities.branch import Branch

BOOKING_FAILED_MESSAGE = "Failed to create booking. Please try again."


def resolve_branch(branch_id: str, branches: Sequence[Branch]) -> Branch:
    for branch in branches:
        if branch.id == branch_id:
            return branch
    raise BranchResolutionError("Selected branch not found")


class BookingPersistenceService:
    def __init__(self, gateway: BookingGatewayPort) -> None:
        self._gateway = gateway
        self._logger = logging.getLogger(__name__)

    def create_booking(
        self,
        userid: str,
        branch_id: str,
        branches: Sequence[Branch],
        date: str,
        time: str,
        full_name: str,
        phone_number: str,
    ) -> Booking:
        # Resolved at call time; nothing is sent when the branch is gone.
        branch = resolve_branch(branch_id, branches)

        request = BookingRequest(
            userid=userid,
            branch_name=branch.name,
            date=date,
            time=time,
            full_name=full_name,
            phone_number=phone_number,
            status=BookingStatus.PENDING,
        )
        try:
            booking = self._gateway.create_booking(request)
        except (ApiError, NetworkError) as e:
            self._logger.error(
                "Error creating booking",
                extra={"branch": branch.name, "userid": userid, "error": str(e)},
            )
            raise BookingCreationError(BOOKING_FAILED_MESSAGE) from e

        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "branch": branch.name, "userid": userid},
        )
        return booking

    def list_user_bookings(self, userid: str) -> list[Booking]:
        try:
            return self._gateway.list_user_bookings(userid)
        except (ApiError, NetworkError) as e:
            self._logger.error("Error listing bookings", extra={"userid": userid, "error": str(e)})
            raise BookingServiceError("Failed to load bookings. Please try again.") from e
