from functools import lru_cache

from cinema_booking.core.config import settings
from cinema_booking.application.ports.booking_repository import BookingRepositoryPort
from cinema_booking.application.ports.branch_repository import BranchRepositoryPort
from cinema_booking.application.ports.profile_store import ProfileStorePort
from cinema_booking.application.ports.verification import VerificationPort
from cinema_booking.application.use_cases.booking_form import BookingFormUseCase
from cinema_booking.application.use_cases.booking_records import BookingRecordsUseCase
from cinema_booking.application.use_cases.branch_records import BranchRecordsUseCase
from cinema_booking.application.use_cases.create_booking import BookingPersistenceService
from cinema_booking.infrastructure.http.api_client import ApiClient
from cinema_booking.infrastructure.http.booking_gateway import HttpBookingGateway
from cinema_booking.infrastructure.http.branch_directory import HttpBranchDirectory
from cinema_booking.infrastructure.profile.json_profile_store import JsonProfileStore
from cinema_booking.infrastructure.store.json_store import JsonBookingRepository, JsonBranchRepository
from cinema_booking.infrastructure.store.memory_store import MemoryBookingRepository, MemoryBranchRepository
from cinema_booking.infrastructure.verification.simulated_otp import SimulatedOtpVerifier


_booking_repository: BookingRepositoryPort | None = None
_branch_repository: BranchRepositoryPort | None = None


def _uses_files() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


# Server side

def get_booking_repository() -> BookingRepositoryPort:
    global _booking_repository
    if _booking_repository is None:
        if _uses_files():
            _booking_repository = JsonBookingRepository(data_dir=settings.DATA_DIR)
        else:
            _booking_repository = MemoryBookingRepository()
    return _booking_repository


def get_branch_repository() -> BranchRepositoryPort:
    global _branch_repository
    if _branch_repository is None:
        if _uses_files():
            _branch_repository = JsonBranchRepository(data_dir=settings.DATA_DIR)
        else:
            _branch_repository = MemoryBranchRepository()
    return _branch_repository


def get_booking_records_use_case() -> BookingRecordsUseCase:
    return BookingRecordsUseCase(repository=get_booking_repository())


def get_branch_records_use_case() -> BranchRecordsUseCase:
    return BranchRecordsUseCase(repository=get_branch_repository())


# Client side

@lru_cache
def get_api_client() -> ApiClient:
    return ApiClient(
        base_url=settings.API_BASE_URL,
        retry_attempts=settings.API_RETRY_ATTEMPTS,
        retry_delay_seconds=settings.API_RETRY_DELAY_SECONDS,
        timeout_seconds=settings.API_TIMEOUT_SECONDS,
        platform=settings.CLIENT_PLATFORM,
    )


def get_profile_store() -> ProfileStorePort:
    return JsonProfileStore(path=settings.PROFILE_PATH)


def get_verifier() -> VerificationPort:
    return SimulatedOtpVerifier(
        expected_code=settings.OTP_EXPECTED_CODE,
        code_length=settings.OTP_LENGTH,
        send_delay_seconds=settings.OTP_SEND_DELAY_SECONDS,
        verify_delay_seconds=settings.OTP_VERIFY_DELAY_SECONDS,
    )


def get_booking_persistence_service() -> BookingPersistenceService:
    return BookingPersistenceService(gateway=HttpBookingGateway(get_api_client()))


def get_booking_form_use_case() -> BookingFormUseCase:
    return BookingFormUseCase(
        branch_directory=HttpBranchDirectory(get_api_client()),
        profile_store=get_profile_store(),
        verifier=get_verifier(),
        persistence=get_booking_persistence_service(),
        resend_cooldown_seconds=settings.OTP_RESEND_COOLDOWN_SECONDS,
        code_length=settings.OTP_LENGTH,
        window_days=settings.BOOKING_WINDOW_DAYS,
    )
