from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from cinema_booking.application.exceptions import ApiError, NetworkError


class ApiClient:
    """
    JSON client for the booking API.

    Network failures and 5xx responses are retried a fixed number of times
    with a fixed delay; 4xx and malformed responses are raised at once.
    """

    def __init__(
        self,
        base_url: str,
        retry_attempts: int = 3,
        retry_delay_seconds: float = 1.0,
        timeout_seconds: float = 30.0,
        platform: str = "python",
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._retry_attempts = max(1, retry_attempts)
        self._retry_delay = retry_delay_seconds
        self._platform = platform
        self._client = client or httpx.Client(timeout=timeout_seconds)
        self._sleep = sleep
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Platform": self._platform,
        }

    def get(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: dict[str, Any] | None = None) -> Any:
        return self._request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: dict[str, Any] | None = None) -> Any:
        return self._request("PUT", endpoint, json=data)

    def delete(self, endpoint: str) -> Any:
        return self._request("DELETE", endpoint)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        url = f"{self._base_url}{endpoint}"
        attempt = 1
        while True:
            try:
                return self._send_once(method, url, **kwargs)
            except (NetworkError, ApiError) as e:
                retryable = isinstance(e, NetworkError) or (isinstance(e, ApiError) and e.is_retryable)
                if not retryable or attempt >= self._retry_attempts:
                    raise
                self._logger.warning(
                    "Request failed, retrying",
                    extra={"attempt": attempt, "error": f"{method} {url}: {e}"},
                )
                self._sleep(self._retry_delay)
                attempt += 1

    def _send_once(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.TransportError as e:
            raise NetworkError("Network request failed") from e
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        is_json = "application/json" in response.headers.get("content-type", "")

        if response.is_error:
            if not is_json:
                raise ApiError("Invalid response format", response.status_code)
            try:
                error_data = response.json()
            except ValueError:
                raise ApiError("Invalid response format", response.status_code)
            message = "An error occurred"
            errors = None
            if isinstance(error_data, dict):
                message = (
                    error_data.get("message") or error_data.get("error") or error_data.get("detail") or message
                )
                errors = error_data.get("errors")
            raise ApiError(str(message), response.status_code, errors)

        if not is_json:
            raise ApiError("Invalid response format", response.status_code)
        try:
            return response.json()
        except ValueError:
            raise ApiError("Invalid response format", response.status_code)
