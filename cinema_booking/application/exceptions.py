
class NetworkError(RuntimeError):
    """Raised when no response is received (connection refused, timeout, DNS)."""
    pass


class ApiError(RuntimeError):
    """Raised for non-2xx responses or responses that are not JSON."""

    def __init__(self, message: str, status: int, errors: dict[str, list[str]] | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.errors = errors

    @property
    def is_retryable(self) -> bool:
        return self.status >= 500


class BranchDirectoryError(RuntimeError):
    """Raised when the branch list cannot be fetched."""
    pass


class BranchResolutionError(RuntimeError):
    """Raised when a selected branch id is not in the last fetched branch list."""
    pass


class BookingServiceError(RuntimeError):
    """Raised when the booking API could not be reached or refused the request."""
    pass


class BookingCreationError(BookingServiceError):
    """Raised when the server did not store the booking."""
    pass


class InvalidSelectionError(ValueError):
    pass


class BookingNotFoundError(LookupError):
    pass


class BranchNotFoundError(LookupError):
    pass
