from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from cinema_booking.application.exceptions import ApiError, BranchDirectoryError, NetworkError
from cinema_booking.application.use_cases.booking_form import BookingFormUseCase
from cinema_booking.application.use_cases.create_booking import BookingPersistenceService
from cinema_booking.domain.entities.booking import BookingRequest, BookingStatus
from cinema_booking.infrastructure.http.api_client import ApiClient
from cinema_booking.infrastructure.http.booking_gateway import HttpBookingGateway
from cinema_booking.infrastructure.http.branch_directory import HttpBranchDirectory
from cinema_booking.infrastructure.profile.memory_profile_store import MemoryProfileStore
from cinema_booking.infrastructure.verification.simulated_otp import SimulatedOtpVerifier

BASE_URL = "http://cinema.test/api"


def _client(handler, attempts: int = 3) -> tuple[ApiClient, list[float]]:
    sleeps: list[float] = []
    client = ApiClient(
        base_url=BASE_URL,
        retry_attempts=attempts,
        retry_delay_seconds=1.0,
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        sleep=sleeps.append,
    )
    return client, sleeps


def test_get_returns_json_and_sends_headers():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"_id": "b1", "name": "Downtown"}])

    client, sleeps = _client(handler)
    assert client.get("/branches") == [{"_id": "b1", "name": "Downtown"}]
    assert str(seen[0].url) == f"{BASE_URL}/branches"
    assert seen[0].headers["Accept"] == "application/json"
    assert seen[0].headers["X-Platform"] == "python"
    assert sleeps == []


def test_server_errors_are_retried_then_surface():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(503, json={"message": "unavailable"})

    client, sleeps = _client(handler)
    with pytest.raises(ApiError) as excinfo:
        client.get("/branches")

    assert excinfo.value.status == 503
    assert str(excinfo.value) == "unavailable"
    assert calls["count"] == 3
    assert sleeps == [1.0, 1.0]


def test_network_errors_are_retried_until_success():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] < 3:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(201, json={"_id": "bk1"})

    client, sleeps = _client(handler)
    assert client.post("/bookings", {"fullName": "Jane"}) == {"_id": "bk1"}
    assert calls["count"] == 3
    assert len(sleeps) == 2


def test_network_error_after_all_attempts():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client, _ = _client(handler, attempts=2)
    with pytest.raises(NetworkError):
        client.get("/branches")


def test_client_errors_are_not_retried():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(400, json={"error": "Booking validation failed"})

    client, sleeps = _client(handler)
    with pytest.raises(ApiError) as excinfo:
        client.post("/bookings", {})

    assert excinfo.value.status == 400
    assert str(excinfo.value) == "Booking validation failed"
    assert calls["count"] == 1
    assert sleeps == []


def test_non_json_success_is_invalid_format():
    client, _ = _client(lambda request: httpx.Response(200, text="<html></html>"))
    with pytest.raises(ApiError, match="Invalid response format"):
        client.get("/branches")


def test_branch_directory_parses_records_and_wraps_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {"_id": "b1", "name": "Downtown", "address": "1 Main St", "images": ["a.jpg", "b.jpg"]},
                {"name": "no id"},
            ],
        )

    client, _ = _client(handler)
    branches = HttpBranchDirectory(client).list_branches()
    assert [b.id for b in branches] == ["b1"]
    assert branches[0].images == ("a.jpg", "b.jpg")

    failing, _ = _client(lambda request: httpx.Response(500, json={"error": "boom"}))
    with pytest.raises(BranchDirectoryError):
        HttpBranchDirectory(failing).list_branches()


def test_branch_directory_skips_record_with_non_list_images():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {"_id": "b1", "name": "Downtown", "images": 5},
                {"_id": "b2", "name": "Riverside", "address": "2 River Rd"},
            ],
        )

    client, _ = _client(handler)
    assert [b.id for b in HttpBranchDirectory(client).list_branches()] == ["b2"]


def test_booking_gateway_rejects_malformed_user_bookings():
    client, _ = _client(
        lambda request: httpx.Response(200, json=[{"_id": "a", "branchName": "Downtown", "status": 9}])
    )
    with pytest.raises(ApiError, match="Invalid booking list payload"):
        HttpBookingGateway(client).list_user_bookings("u-1")


def test_booking_gateway_posts_wire_fields():
    payloads: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payloads.append(request.content)
        return httpx.Response(
            201,
            json={
                "_id": "bk1",
                "userid": "u-1",
                "branchName": "Downtown",
                "date": "2026-10-21",
                "time": "19:30",
                "fullName": "Jane Doe",
                "phoneNumber": "5551234",
                "status": 0,
            },
        )

    client, _ = _client(handler)
    booking = HttpBookingGateway(client).create_booking(
        BookingRequest(
            userid="u-1",
            branch_name="Downtown",
            date="2026-10-21",
            time="19:30",
            full_name="Jane Doe",
            phone_number="5551234",
        )
    )

    assert booking.id == "bk1"
    assert booking.status == BookingStatus.PENDING
    body = json.loads(payloads[0])
    assert body == {
        "userid": "u-1",
        "branchName": "Downtown",
        "date": "2026-10-21",
        "time": "19:30",
        "fullName": "Jane Doe",
        "phoneNumber": "5551234",
        "status": 0,
    }


def test_mount_survives_malformed_branch_payload():
    client, _ = _client(lambda request: httpx.Response(200, json=[{"_id": "b1", "name": "Downtown", "images": 5}]))
    use_case = BookingFormUseCase(
        branch_directory=HttpBranchDirectory(client),
        profile_store=MemoryProfileStore(),
        verifier=SimulatedOtpVerifier(sleep=lambda _: None),
        persistence=BookingPersistenceService(HttpBookingGateway(client)),
    )

    result = use_case.mount(today=date(2026, 10, 19))
    assert result.action == "branches_loaded"
    assert result.updated_state.branches == ()
