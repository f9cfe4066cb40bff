from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cinema_booking.domain.entities.branch import Branch
from cinema_booking.domain.entities.slot import DateOption, TimeSlot


class FormStep(str, Enum):
    SELECTING_DETAILS = "selecting_details"
    COLLECTING_CONTACT = "collecting_contact"
    REVIEWING_CONTACT = "reviewing_contact"
    VERIFYING_OTP = "verifying_otp"
    EDITING_PHONE = "editing_phone"
    SUBMITTING = "submitting"
    SUCCESS = "success"


@dataclass(frozen=True)
class BookingConfirmation:
    branch_name: str
    date_label: str  # "October 21, 2026"
    time: str
    name: str
    phone: str
    booking_id: str | None = None


@dataclass(frozen=True)
class BookingFormState:
    step: FormStep = FormStep.SELECTING_DETAILS

    # Catalog, computed once per mount
    dates: tuple[DateOption, ...] = ()
    time_slots: tuple[TimeSlot, ...] = ()
    branches: tuple[Branch, ...] = ()
    branches_error: str | None = None

    # Selection
    branch_id: str | None = None
    date: str | None = None
    time: str | None = None

    # Contact
    name: str = ""
    phone: str = ""
    saved_phone: str | None = None  # None when no profile is stored
    code_sent_to: str | None = None

    # Verification
    code: str = ""
    otp_error: bool = False
    is_editing_phone: bool = False
    resend_disabled: bool = False
    resend_remaining: int = 0

    loading: bool = False
    booking_error: str | None = None
    confirmation: BookingConfirmation | None = None

    @property
    def can_confirm(self) -> bool:
        return self.branch_id is not None and self.date is not None and self.time is not None

    @property
    def sheet_open(self) -> bool:
        return self.step in (
            FormStep.COLLECTING_CONTACT,
            FormStep.REVIEWING_CONTACT,
            FormStep.VERIFYING_OTP,
            FormStep.EDITING_PHONE,
            FormStep.SUBMITTING,
        )
