from fastapi import APIRouter, Depends, HTTPException

from cinema_booking.api.v1.schemas import (
    BookingCreateSchema,
    BookingSchema,
    BookingUpdateSchema,
    MessageSchema,
)
from cinema_booking.application.exceptions import BookingNotFoundError
from cinema_booking.application.use_cases.booking_records import BookingRecordsUseCase
from cinema_booking.wiring.dependencies import get_booking_records_use_case

router = APIRouter()

NULLABLE_FIELDS = {"promo_code", "discount_percentage"}


@router.post("/bookings", response_model=BookingSchema, status_code=201)
def create_booking(
    req: BookingCreateSchema,
    uc: BookingRecordsUseCase = Depends(get_booking_records_use_case),
):
    try:
        booking = uc.create(req.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BookingSchema.from_entity(booking)


@router.get("/bookings", response_model=list[BookingSchema])
def list_bookings(uc: BookingRecordsUseCase = Depends(get_booking_records_use_case)):
    return [BookingSchema.from_entity(b) for b in uc.list_all()]


@router.get("/bookings/user/{userid}", response_model=list[BookingSchema])
def list_user_bookings(userid: str, uc: BookingRecordsUseCase = Depends(get_booking_records_use_case)):
    return [BookingSchema.from_entity(b) for b in uc.list_for_user(userid)]


@router.get("/bookings/{booking_id}", response_model=BookingSchema)
def get_booking(booking_id: str, uc: BookingRecordsUseCase = Depends(get_booking_records_use_case)):
    try:
        return BookingSchema.from_entity(uc.get(booking_id))
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/bookings/{booking_id}", response_model=BookingSchema)
def update_booking(
    booking_id: str,
    req: BookingUpdateSchema,
    uc: BookingRecordsUseCase = Depends(get_booking_records_use_case),
):
    fields = {
        key: value
        for key, value in req.model_dump(exclude_unset=True).items()
        if value is not None or key in NULLABLE_FIELDS
    }
    try:
        return BookingSchema.from_entity(uc.update(booking_id, fields))
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/bookings/{booking_id}", response_model=MessageSchema)
def delete_booking(booking_id: str, uc: BookingRecordsUseCase = Depends(get_booking_records_use_case)):
    try:
        uc.delete(booking_id)
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MessageSchema(message="Booking deleted")
