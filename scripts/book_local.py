#!/usr/bin/env python3
"""
Interactive booking harness (terminal stand-in for the booking screen).

Usage:
  uvicorn cinema_booking.main:app --port 8000     # in another terminal
  python3 scripts/book_local.py

What it does:
- Loads branches from API_BASE_URL and the local profile from PROFILE_PATH
- Walks the same BookingFormUseCase the mobile screen uses: branch, date,
  time, contact details, verification code when the phone changed
- Prints every action and message the state machine returns
"""

import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cinema_booking.application.use_cases.booking_form import BookingFormResult, BookingFormUseCase
from cinema_booking.application.exceptions import InvalidSelectionError
from cinema_booking.core.logging import configure_logging
from cinema_booking.domain.entities.booking_form_state import BookingFormState, FormStep
from cinema_booking.wiring.dependencies import get_booking_form_use_case


def _print_result(result: BookingFormResult) -> None:
    print(f"[{result.action}] step={result.updated_state.step.value}")
    if result.message:
        print(f"  {result.message}")


def _choose(prompt: str, options: list[tuple[str, str]]) -> str | None:
    for index, (_, label) in enumerate(options, 1):
        print(f"  {index:>2}. {label}")
    raw = input(f"{prompt} (number, blank to quit): ").strip()
    if not raw:
        return None
    choice = int(raw) if raw.isdigit() else 0
    if 1 <= choice <= len(options):
        return options[choice - 1][0]
    print("  Not a valid choice.")
    return _choose(prompt, options)


def _select_details(use_case: BookingFormUseCase, state: BookingFormState) -> BookingFormState | None:
    while state.branches_error:
        print(state.branches_error)
        if input("Retry? [Y/n] ").strip().lower() == "n":
            return None
        result = use_case.retry_branches(state)
        _print_result(result)
        state = result.updated_state

    branch_id = _choose("Branch", [(b.id, f"{b.name} - {b.address}") for b in state.branches])
    date_value = _choose("Date", [(d.value, f"{d.day_name} {d.day_number} ({d.value})") for d in state.dates])
    time_value = _choose("Time", [(s.value, s.label) for s in state.time_slots])
    if branch_id is None or date_value is None or time_value is None:
        return None

    try:
        state = use_case.select_branch(state, branch_id).updated_state
        state = use_case.select_date(state, date_value).updated_state
        state = use_case.select_time(state, time_value).updated_state
    except InvalidSelectionError as e:
        print(f"  {e}")
        return None
    return state


def _advance_timer(use_case: BookingFormUseCase, state: BookingFormState, last_tick: float) -> tuple[BookingFormState, float]:
    """Replay the one-second ticks that elapsed while waiting for input."""
    now = time.monotonic()
    while now - last_tick >= 1.0:
        state = use_case.tick(state).updated_state
        last_tick += 1.0
    return state, last_tick


def _run_sheet(use_case: BookingFormUseCase, state: BookingFormState) -> BookingFormState:
    last_tick = time.monotonic()
    while state.step != FormStep.SUCCESS:
        state, last_tick = _advance_timer(use_case, state, last_tick)
        if state.step in (FormStep.COLLECTING_CONTACT, FormStep.REVIEWING_CONTACT):
            if state.booking_error:
                print(state.booking_error)
            name = input(f"Full name [{state.name}]: ").strip() or state.name
            phone = input(f"Phone number [{state.phone}]: ").strip() or state.phone
            state = use_case.update_name(state, name).updated_state
            state = use_case.update_phone(state, phone).updated_state
            result = use_case.confirm_booking(state)
        elif state.step == FormStep.VERIFYING_OTP:
            raw = input("Code (/resend, /edit): ").strip()
            if raw == "/resend":
                result = use_case.resend_code(state)
                if result.action == "ignored":
                    print(f"  Resend available in {state.resend_remaining}s")
            elif raw == "/edit":
                result = use_case.edit_phone(state)
            else:
                state = use_case.enter_code(state, raw).updated_state
                result = use_case.verify_code(state)
        elif state.step == FormStep.EDITING_PHONE:
            phone = input("New phone number (blank to cancel): ").strip()
            if not phone:
                result = use_case.cancel_phone_edit(state)
            else:
                state = use_case.update_phone(state, phone).updated_state
                result = use_case.confirm_phone_edit(state)
        else:
            break
        _print_result(result)
        state = result.updated_state
    return state


def main() -> None:
    configure_logging("WARNING")
    use_case = get_booking_form_use_case()
    result = use_case.mount()
    _print_result(result)
    state = result.updated_state

    while True:
        try:
            selected = _select_details(use_case, state)
            if selected is None:
                print("Bye!")
                return
            result = use_case.open_confirmation(selected)
            _print_result(result)
            state = _run_sheet(use_case, result.updated_state)
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if state.confirmation:
            c = state.confirmation
            print("\n--- Booking confirmed ---")
            print(f"branch: {c.branch_name}")
            print(f"date:   {c.date_label}")
            print(f"time:   {c.time}")
            print(f"name:   {c.name}")
            print(f"phone:  {c.phone}")
            print("-" * 60)
        state = use_case.done(state).updated_state


if __name__ == "__main__":
    main()
