from abc import ABC, abstractmethod

from cinema_booking.domain.entities.branch import Branch


class BranchDirectoryPort(ABC):
    @abstractmethod
    def list_branches(self) -> list[Branch]:
        """Fetch all branches. Raises BranchDirectoryError on failure."""
        raise NotImplementedError
