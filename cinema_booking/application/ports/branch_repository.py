from abc import ABC, abstractmethod
from typing import Any

from cinema_booking.domain.entities.branch import Branch


class BranchRepositoryPort(ABC):
    @abstractmethod
    def create(self, fields: dict[str, Any]) -> Branch:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Branch]:
        """All branches ordered by creation time."""
        raise NotImplementedError

    @abstractmethod
    def get(self, branch_id: str) -> Branch | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, branch_id: str, fields: dict[str, Any]) -> Branch | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, branch_id: str) -> bool:
        raise NotImplementedError
