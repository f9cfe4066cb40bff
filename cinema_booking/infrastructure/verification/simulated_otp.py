from __future__ import annotations

import logging
import time
from collections.abc import Callable

from cinema_booking.application.ports.verification import VerificationPort


class SimulatedOtpVerifier(VerificationPort):
    """
    Stand-in for an SMS one-time-code channel.

    Nothing is sent; every phone number accepts the same fixed code after a
    short artificial delay.
    """

    def __init__(
        self,
        expected_code: str = "123456",
        code_length: int = 6,
        send_delay_seconds: float = 1.0,
        verify_delay_seconds: float = 1.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._expected_code = expected_code
        self._code_length = code_length
        self._send_delay = send_delay_seconds
        self._verify_delay = verify_delay_seconds
        self._sleep = sleep
        self._logger = logging.getLogger(__name__)

    def send(self, phone: str) -> None:
        self._sleep(self._send_delay)
        self._logger.info("Simulated verification code issued", extra={"step": "send"})

    def verify(self, phone: str, code: str) -> bool:
        if len(code) != self._code_length or not code.isdigit():
            return False
        self._sleep(self._verify_delay)
        return code == self._expected_code
