from __future__ import annotations

import logging
from typing import Any

from cinema_booking.application.exceptions import BranchNotFoundError
from cinema_booking.application.ports.branch_repository import BranchRepositoryPort
from cinema_booking.domain.entities.branch import Branch


class BranchRecordsUseCase:
    def __init__(self, repository: BranchRepositoryPort) -> None:
        self._repository = repository
        self._logger = logging.getLogger(__name__)

    def create(self, fields: dict[str, Any]) -> Branch:
        branch = self._repository.create(fields)
        self._logger.info("Branch stored", extra={"branch": branch.name})
        return branch

    def list_all(self) -> list[Branch]:
        return self._repository.list_all()

    def get(self, branch_id: str) -> Branch:
        branch = self._repository.get(branch_id)
        if branch is None:
            raise BranchNotFoundError("Branch not found")
        return branch

    def update(self, branch_id: str, fields: dict[str, Any]) -> Branch:
        branch = self._repository.update(branch_id, fields)
        if branch is None:
            raise BranchNotFoundError("Branch not found")
        return branch

    def delete(self, branch_id: str) -> None:
        if not self._repository.delete(branch_id):
            raise BranchNotFoundError("Branch not found")
        self._logger.info("Branch deleted", extra={"branch": branch_id})
