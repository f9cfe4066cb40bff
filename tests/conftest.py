from __future__ import annotations

import pytest

from cinema_booking.application.exceptions import BranchDirectoryError
from cinema_booking.application.ports.booking_gateway import BookingGatewayPort
from cinema_booking.application.ports.branch_directory import BranchDirectoryPort
from cinema_booking.application.ports.verification import VerificationPort
from cinema_booking.application.use_cases.booking_form import BookingFormUseCase
from cinema_booking.application.use_cases.create_booking import BookingPersistenceService
from cinema_booking.domain.entities.booking import Booking, BookingRequest
from cinema_booking.domain.entities.branch import Branch
from cinema_booking.domain.entities.user_profile import UserProfile
from cinema_booking.infrastructure.profile.memory_profile_store import MemoryProfileStore


class FakeBranchDirectory(BranchDirectoryPort):
    def __init__(self, branches: list[Branch], failures: int = 0) -> None:
        self.branches = branches
        self.failures = failures
        self.calls = 0

    def list_branches(self) -> list[Branch]:
        self.calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise BranchDirectoryError("Network request failed")
        return list(self.branches)


class FakeVerifier(VerificationPort):
    def __init__(self, expected_code: str = "123456") -> None:
        self.expected_code = expected_code
        self.sent_to: list[str] = []
        self.verified: list[tuple[str, str]] = []

    def send(self, phone: str) -> None:
        self.sent_to.append(phone)

    def verify(self, phone: str, code: str) -> bool:
        self.verified.append((phone, code))
        return code == self.expected_code


class RecordingGateway(BookingGatewayPort):
    def __init__(self, error: Exception | None = None) -> None:
        self.requests: list[BookingRequest] = []
        self.error = error

    def create_booking(self, request: BookingRequest) -> Booking:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return Booking(
            id=f"booking_{len(self.requests)}",
            userid=request.userid,
            branch_name=request.branch_name,
            date=request.date,
            time=request.time,
            full_name=request.full_name,
            phone_number=request.phone_number,
            status=request.status,
        )

    def list_user_bookings(self, userid: str) -> list[Booking]:
        if self.error is not None:
            raise self.error
        return []


BRANCHES = [
    Branch(id="br_downtown", name="Downtown", address="1 Main St", images=("downtown.jpg",)),
    Branch(id="br_riverside", name="Riverside", address="22 River Rd"),
]


@pytest.fixture
def branches() -> list[Branch]:
    return list(BRANCHES)


@pytest.fixture
def make_form():
    """Build a BookingFormUseCase with fakes; returns (use_case, fakes dict)."""

    def _make(
        profile: UserProfile | None = None,
        branch_failures: int = 0,
        gateway_error: Exception | None = None,
    ):
        directory = FakeBranchDirectory(list(BRANCHES), failures=branch_failures)
        store = MemoryProfileStore(profile)
        verifier = FakeVerifier()
        gateway = RecordingGateway(error=gateway_error)
        transitions = []
        use_case = BookingFormUseCase(
            branch_directory=directory,
            profile_store=store,
            verifier=verifier,
            persistence=BookingPersistenceService(gateway),
            resend_cooldown_seconds=30,
            on_transition=transitions.append,
        )
        fakes = {
            "directory": directory,
            "store": store,
            "verifier": verifier,
            "gateway": gateway,
            "transitions": transitions,
        }
        return use_case, fakes

    return _make
