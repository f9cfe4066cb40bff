from pydantic import BaseModel, ConfigDict, Field

from cinema_booking.domain.entities.booking import Booking, BookingStatus
from cinema_booking.domain.entities.branch import Branch

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class BookingCreateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    userid: str | None = None
    branch_name: str = Field(alias="branchName", min_length=1)
    date: str = Field(pattern=DATE_PATTERN)
    time: str = Field(pattern=TIME_PATTERN)
    full_name: str = Field(alias="fullName", min_length=1)
    phone_number: str = Field(alias="phoneNumber", min_length=1)
    status: BookingStatus = BookingStatus.PENDING
    promo_code: str | None = Field(default=None, alias="promoCode")
    discount_percentage: float | None = Field(default=None, alias="discountPercentage", ge=0, le=100)


class BookingUpdateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    branch_name: str | None = Field(default=None, alias="branchName", min_length=1)
    date: str | None = Field(default=None, pattern=DATE_PATTERN)
    time: str | None = Field(default=None, pattern=TIME_PATTERN)
    full_name: str | None = Field(default=None, alias="fullName", min_length=1)
    phone_number: str | None = Field(default=None, alias="phoneNumber", min_length=1)
    status: BookingStatus | None = None
    promo_code: str | None = Field(default=None, alias="promoCode")
    discount_percentage: float | None = Field(default=None, alias="discountPercentage", ge=0, le=100)


class BookingSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    userid: str | None = None
    branch_name: str = Field(alias="branchName")
    date: str
    time: str
    full_name: str = Field(alias="fullName")
    phone_number: str = Field(alias="phoneNumber")
    status: int
    promo_code: str | None = Field(default=None, alias="promoCode")
    discount_percentage: float | None = Field(default=None, alias="discountPercentage")
    created_at: float | None = Field(default=None, alias="createdAt")
    updated_at: float | None = Field(default=None, alias="updatedAt")

    @staticmethod
    def from_entity(booking: Booking) -> "BookingSchema":
        return BookingSchema(
            id=booking.id,
            userid=booking.userid,
            branch_name=booking.branch_name,
            date=booking.date,
            time=booking.time,
            full_name=booking.full_name,
            phone_number=booking.phone_number,
            status=int(booking.status),
            promo_code=booking.promo_code,
            discount_percentage=booking.discount_percentage,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class BranchCreateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    address: str = ""
    google_maps_url: str | None = Field(default=None, alias="googleMapsUrl")
    images: list[str] = Field(default_factory=list)


class BranchUpdateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, min_length=1)
    address: str | None = None
    google_maps_url: str | None = Field(default=None, alias="googleMapsUrl")
    images: list[str] | None = None


class BranchSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    address: str
    google_maps_url: str | None = Field(default=None, alias="googleMapsUrl")
    images: list[str] = Field(default_factory=list)
    created_at: float | None = Field(default=None, alias="createdAt")
    updated_at: float | None = Field(default=None, alias="updatedAt")

    @staticmethod
    def from_entity(branch: Branch) -> "BranchSchema":
        return BranchSchema(
            id=branch.id,
            name=branch.name,
            address=branch.address,
            google_maps_url=branch.google_maps_url,
            images=list(branch.images),
            created_at=branch.created_at,
            updated_at=branch.updated_at,
        )


class MessageSchema(BaseModel):
    message: str
