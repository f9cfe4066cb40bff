from abc import ABC, abstractmethod

from cinema_booking.domain.entities.user_profile import UserProfile


class ProfileStorePort(ABC):
    @abstractmethod
    def get(self) -> UserProfile | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, name: str, phone: str) -> UserProfile:
        """
        Save name and phone. The profile id is generated on the first save
        and kept on every later one.
        """
        raise NotImplementedError
