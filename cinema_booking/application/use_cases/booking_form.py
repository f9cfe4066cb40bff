from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date

from cinema_booking.application.exceptions import (
    BookingCreationError,
    BranchDirectoryError,
    BranchResolutionError,
    InvalidSelectionError,
)
from cinema_booking.application.ports.branch_directory import BranchDirectoryPort
from cinema_booking.application.ports.profile_store import ProfileStorePort
from cinema_booking.application.ports.verification import VerificationPort
from cinema_booking.application.use_cases.create_booking import (
    BOOKING_FAILED_MESSAGE,
    BookingPersistenceService,
    resolve_branch,
)
from cinema_booking.application.use_cases.slot_catalog import (
    available_dates,
    format_booking_date,
    time_slots,
)
from cinema_booking.domain.entities.booking_form_state import (
    BookingConfirmation,
    BookingFormState,
    FormStep,
)
from cinema_booking.domain.entities.user_profile import UserProfile

BRANCHES_FAILED_MESSAGE = "Failed to load branches. Please try again."
MISSING_CONTACT_MESSAGE = "Please provide your name and phone number."
INVALID_CODE_MESSAGE = "Invalid OTP. Please try again."

CONTACT_STEPS = (FormStep.COLLECTING_CONTACT, FormStep.REVIEWING_CONTACT)
SHEET_STEPS = CONTACT_STEPS + (FormStep.VERIFYING_OTP, FormStep.EDITING_PHONE)

_NON_DIGITS = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class BookingFormResult:
    action: str
    message: str | None
    updated_state: BookingFormState


class BookingFormUseCase:
    """
    Booking screen state machine.

    Every handler takes the current state and returns a BookingFormResult
    carrying the next state; handlers called from a step they do not belong
    to return action "ignored" with the state untouched.
    """

    def __init__(
        self,
        branch_directory: BranchDirectoryPort,
        profile_store: ProfileStorePort,
        verifier: VerificationPort,
        persistence: BookingPersistenceService,
        resend_cooldown_seconds: int = 30,
        code_length: int = 6,
        window_days: int = 7,
        on_transition: Callable[[BookingFormState], None] | None = None,
    ) -> None:
        self._branch_directory = branch_directory
        self._profile_store = profile_store
        self._verifier = verifier
        self._persistence = persistence
        self._resend_cooldown = resend_cooldown_seconds
        self._code_length = code_length
        self._window_days = window_days
        self._on_transition = on_transition
        self._logger = logging.getLogger(__name__)

    # Mount and branch directory

    def mount(self, today: date | None = None) -> BookingFormResult:
        state = BookingFormState(
            dates=tuple(available_dates(today, self._window_days)),
            time_slots=tuple(time_slots()),
        )
        state = self._prefill_from_profile(state, self._profile_store.get())
        return self._fetch_branches(state)

    def retry_branches(self, state: BookingFormState) -> BookingFormResult:
        return self._fetch_branches(state)

    def _fetch_branches(self, state: BookingFormState) -> BookingFormResult:
        try:
            branches = self._branch_directory.list_branches()
        except BranchDirectoryError as e:
            self._logger.warning("Error fetching branches", extra={"error": str(e)})
            return BookingFormResult(
                action="branches_failed",
                message=BRANCHES_FAILED_MESSAGE,
                updated_state=replace(state, branches=(), branches_error=BRANCHES_FAILED_MESSAGE),
            )
        return BookingFormResult(
            action="branches_loaded",
            message=None,
            updated_state=replace(state, branches=tuple(branches), branches_error=None),
        )

    # Selection

    def select_branch(self, state: BookingFormState, branch_id: str) -> BookingFormResult:
        if state.step != FormStep.SELECTING_DETAILS:
            return self._ignored(state)
        if branch_id not in {branch.id for branch in state.branches}:
            raise InvalidSelectionError(f"Unknown branch: {branch_id}")
        return BookingFormResult(action="selected", message=None, updated_state=replace(state, branch_id=branch_id))

    def select_date(self, state: BookingFormState, value: str) -> BookingFormResult:
        if state.step != FormStep.SELECTING_DETAILS:
            return self._ignored(state)
        if value not in {option.value for option in state.dates}:
            raise InvalidSelectionError(f"Date outside booking window: {value}")
        return BookingFormResult(action="selected", message=None, updated_state=replace(state, date=value))

    def select_time(self, state: BookingFormState, value: str) -> BookingFormResult:
        if state.step != FormStep.SELECTING_DETAILS:
            return self._ignored(state)
        if value not in {slot.value for slot in state.time_slots}:
            raise InvalidSelectionError(f"Unknown time slot: {value}")
        return BookingFormResult(action="selected", message=None, updated_state=replace(state, time=value))

    # Confirmation sheet

    def open_confirmation(self, state: BookingFormState) -> BookingFormResult:
        if state.step != FormStep.SELECTING_DETAILS:
            return self._ignored(state)
        if not state.can_confirm:
            return BookingFormResult(action="incomplete", message=None, updated_state=state)

        profile = self._profile_store.get()
        state = self._prefill_from_profile(state, profile)
        step = FormStep.REVIEWING_CONTACT if profile else FormStep.COLLECTING_CONTACT
        return self._transition("sheet_opened", None, replace(state, step=step, booking_error=None))

    def close_confirmation(self, state: BookingFormState) -> BookingFormResult:
        if state.step not in SHEET_STEPS:
            return self._ignored(state)
        return self._transition(
            "sheet_closed",
            None,
            replace(
                state,
                step=FormStep.SELECTING_DETAILS,
                code="",
                otp_error=False,
                is_editing_phone=False,
                booking_error=None,
            ),
        )

    def update_name(self, state: BookingFormState, name: str) -> BookingFormResult:
        if state.step not in CONTACT_STEPS:
            return self._ignored(state)
        return BookingFormResult(action="edited", message=None, updated_state=replace(state, name=name))

    def update_phone(self, state: BookingFormState, phone: str) -> BookingFormResult:
        if state.step not in CONTACT_STEPS + (FormStep.EDITING_PHONE,):
            return self._ignored(state)
        return BookingFormResult(action="edited", message=None, updated_state=replace(state, phone=phone))

    def confirm_booking(self, state: BookingFormState) -> BookingFormResult:
        if state.step not in CONTACT_STEPS or state.loading:
            return self._ignored(state)

        name = state.name.strip()
        phone = state.phone.strip()
        if not name or not phone:
            return BookingFormResult(action="missing_contact", message=MISSING_CONTACT_MESSAGE, updated_state=state)

        state = replace(state, name=name, phone=phone)
        if not state.saved_phone or phone == state.saved_phone:
            profile = self._profile_store.save(name, phone)
            return self._submit(replace(state, saved_phone=phone), profile.id)

        # Changed phone: stored right away, used for booking only once verified.
        self._profile_store.save(name, phone)
        self._verifier.send(phone)
        return self._transition(
            "code_sent",
            f"Verification code sent to {phone}",
            replace(
                state,
                step=FormStep.VERIFYING_OTP,
                code="",
                otp_error=False,
                code_sent_to=phone,
                resend_disabled=True,
                resend_remaining=self._resend_cooldown,
                booking_error=None,
            ),
        )

    # Verification

    def enter_code(self, state: BookingFormState, text: str) -> BookingFormResult:
        if state.step != FormStep.VERIFYING_OTP:
            return self._ignored(state)
        code = _NON_DIGITS.sub("", text)[: self._code_length]
        return BookingFormResult(action="edited", message=None, updated_state=replace(state, code=code))

    def verify_code(self, state: BookingFormState) -> BookingFormResult:
        if state.step != FormStep.VERIFYING_OTP or state.loading:
            return self._ignored(state)
        if len(state.code) != self._code_length:
            return BookingFormResult(action="code_incomplete", message=None, updated_state=state)

        if not self._verifier.verify(state.phone, state.code):
            self._logger.info("Verification code rejected", extra={"step": state.step.value})
            return BookingFormResult(
                action="code_invalid",
                message=INVALID_CODE_MESSAGE,
                updated_state=replace(state, otp_error=True),
            )

        verified = replace(state, otp_error=False, saved_phone=state.phone)
        return self._submit(verified, self._current_profile(verified).id)

    def resend_code(self, state: BookingFormState) -> BookingFormResult:
        if state.step != FormStep.VERIFYING_OTP or state.resend_disabled:
            return self._ignored(state)
        self._verifier.send(state.phone)
        return BookingFormResult(
            action="code_sent",
            message=f"Verification code sent to {state.phone}",
            updated_state=replace(
                state,
                code="",
                otp_error=False,
                code_sent_to=state.phone,
                resend_disabled=True,
                resend_remaining=self._resend_cooldown,
            ),
        )

    def tick(self, state: BookingFormState) -> BookingFormResult:
        """One-second timer callback for the resend cooldown."""
        if not state.resend_disabled:
            return BookingFormResult(action="tick", message=None, updated_state=state)
        remaining = state.resend_remaining - 1
        if remaining <= 0:
            return BookingFormResult(
                action="resend_enabled",
                message=None,
                updated_state=replace(state, resend_disabled=False, resend_remaining=0),
            )
        return BookingFormResult(action="tick", message=None, updated_state=replace(state, resend_remaining=remaining))

    def edit_phone(self, state: BookingFormState) -> BookingFormResult:
        if state.step != FormStep.VERIFYING_OTP:
            return self._ignored(state)
        return self._transition(
            "editing_phone",
            None,
            replace(state, step=FormStep.EDITING_PHONE, is_editing_phone=True),
        )

    def cancel_phone_edit(self, state: BookingFormState) -> BookingFormResult:
        if state.step != FormStep.EDITING_PHONE:
            return self._ignored(state)
        restored = state.saved_phone if state.saved_phone is not None else (state.code_sent_to or "")
        return self._transition(
            "edit_cancelled",
            None,
            replace(state, step=FormStep.VERIFYING_OTP, phone=restored, is_editing_phone=False),
        )

    def confirm_phone_edit(self, state: BookingFormState) -> BookingFormResult:
        if state.step != FormStep.EDITING_PHONE:
            return self._ignored(state)
        phone = state.phone.strip()
        if not phone or phone == state.saved_phone:
            return BookingFormResult(action="phone_unchanged", message=None, updated_state=state)

        self._profile_store.save(state.name, phone)
        self._verifier.send(phone)
        return self._transition(
            "code_sent",
            f"Verification code sent to {phone}",
            replace(
                state,
                step=FormStep.VERIFYING_OTP,
                phone=phone,
                code="",
                otp_error=False,
                is_editing_phone=False,
                code_sent_to=phone,
                resend_disabled=True,
                resend_remaining=self._resend_cooldown,
            ),
        )

    # Submission

    def _submit(self, state: BookingFormState, userid: str) -> BookingFormResult:
        submitting = replace(state, step=FormStep.SUBMITTING, loading=True, booking_error=None)
        self._notify(submitting)

        try:
            booking = self._persistence.create_booking(
                userid=userid,
                branch_id=submitting.branch_id or "",
                branches=submitting.branches,
                date=submitting.date or "",
                time=submitting.time or "",
                full_name=submitting.name,
                phone_number=submitting.phone,
            )
        except (BranchResolutionError, BookingCreationError) as e:
            self._logger.warning("Booking submission failed", extra={"userid": userid, "error": str(e)})
            return self._transition(
                "failed",
                BOOKING_FAILED_MESSAGE,
                replace(
                    submitting,
                    step=FormStep.COLLECTING_CONTACT,
                    loading=False,
                    is_editing_phone=False,
                    booking_error=BOOKING_FAILED_MESSAGE,
                ),
            )

        confirmation = BookingConfirmation(
            branch_name=resolve_branch(submitting.branch_id or "", submitting.branches).name,
            date_label=format_booking_date(submitting.date or ""),
            time=submitting.time or "",
            name=submitting.name,
            phone=submitting.phone,
            booking_id=booking.id,
        )
        return self._transition(
            "booked",
            None,
            replace(
                submitting,
                step=FormStep.SUCCESS,
                loading=False,
                code="",
                otp_error=False,
                is_editing_phone=False,
                resend_disabled=False,
                resend_remaining=0,
                confirmation=confirmation,
            ),
        )

    def done(self, state: BookingFormState) -> BookingFormResult:
        """Leave the success screen. The stored profile is kept for the next booking."""
        if state.step != FormStep.SUCCESS:
            return self._ignored(state)
        return self._transition(
            "reset",
            None,
            replace(
                state,
                step=FormStep.SELECTING_DETAILS,
                branch_id=None,
                date=None,
                time=None,
                code="",
                code_sent_to=None,
                otp_error=False,
                is_editing_phone=False,
                resend_disabled=False,
                resend_remaining=0,
                booking_error=None,
                confirmation=None,
            ),
        )

    # Helpers

    def _current_profile(self, state: BookingFormState) -> UserProfile:
        profile = self._profile_store.get()
        if profile is None:
            profile = self._profile_store.save(state.name, state.phone)
        return profile

    def _prefill_from_profile(self, state: BookingFormState, profile: UserProfile | None) -> BookingFormState:
        if profile is None:
            return replace(state, saved_phone=None)
        return replace(state, name=profile.name, phone=profile.phone, saved_phone=profile.phone)

    def _transition(self, action: str, message: str | None, state: BookingFormState) -> BookingFormResult:
        self._logger.info("Booking form %s", action, extra={"step": state.step.value})
        self._notify(state)
        return BookingFormResult(action=action, message=message, updated_state=state)

    def _notify(self, state: BookingFormState) -> None:
        if self._on_transition is not None:
            self._on_transition(state)

    def _ignored(self, state: BookingFormState) -> BookingFormResult:
        return BookingFormResult(action="ignored", message=None, updated_state=state)
