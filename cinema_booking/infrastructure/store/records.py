"""
Record <-> entity mapping.

Records are the wire/document shape shared by the REST API, the JSON files and
the HTTP client: camelCase keys with the identifier under "_id".
"""

from __future__ import annotations

from typing import Any

from cinema_booking.domain.entities.booking import Booking, BookingStatus
from cinema_booking.domain.entities.branch import Branch


def booking_to_record(booking: Booking) -> dict[str, Any]:
    return {
        "_id": booking.id,
        "userid": booking.userid,
        "branchName": booking.branch_name,
        "date": booking.date,
        "time": booking.time,
        "fullName": booking.full_name,
        "phoneNumber": booking.phone_number,
        "status": int(booking.status),
        "promoCode": booking.promo_code,
        "discountPercentage": booking.discount_percentage,
        "createdAt": booking.created_at,
        "updatedAt": booking.updated_at,
    }


def booking_from_record(data: dict[str, Any]) -> Booking:
    booking_id = data.get("_id") or data.get("id")
    if not booking_id:
        raise ValueError("Booking record has no identifier")
    return Booking(
        id=str(booking_id),
        userid=data.get("userid"),
        branch_name=str(data.get("branchName", "")),
        date=str(data.get("date", "")),
        time=str(data.get("time", "")),
        full_name=str(data.get("fullName", "")),
        phone_number=str(data.get("phoneNumber", "")),
        status=BookingStatus(int(data.get("status", BookingStatus.PENDING))),
        promo_code=data.get("promoCode"),
        discount_percentage=data.get("discountPercentage"),
        created_at=_timestamp(data.get("createdAt")),
        updated_at=_timestamp(data.get("updatedAt")),
    )


def branch_to_record(branch: Branch) -> dict[str, Any]:
    return {
        "_id": branch.id,
        "name": branch.name,
        "address": branch.address,
        "googleMapsUrl": branch.google_maps_url,
        "images": list(branch.images),
        "createdAt": branch.created_at,
        "updatedAt": branch.updated_at,
    }


def branch_from_record(data: dict[str, Any]) -> Branch:
    branch_id = data.get("_id") or data.get("id")
    if not branch_id:
        raise ValueError("Branch record has no identifier")
    return Branch(
        id=str(branch_id),
        name=str(data.get("name", "")),
        address=str(data.get("address") or ""),
        google_maps_url=data.get("googleMapsUrl"),
        images=tuple(str(image) for image in data.get("images") or []),
        created_at=_timestamp(data.get("createdAt")),
        updated_at=_timestamp(data.get("updatedAt")),
    )


def _timestamp(value: Any) -> float | None:
    # Foreign servers send ISO strings; those are not needed by the flow.
    if isinstance(value, (int, float)):
        return float(value)
    return None
