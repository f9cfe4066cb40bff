from abc import ABC, abstractmethod


class VerificationPort(ABC):
    @abstractmethod
    def send(self, phone: str) -> None:
        """Issue a one-time code for the phone number."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, phone: str, code: str) -> bool:
        """Return True if the code matches the one issued for the phone."""
        raise NotImplementedError
