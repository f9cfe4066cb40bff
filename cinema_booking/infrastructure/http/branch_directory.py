from __future__ import annotations

import logging

from cinema_booking.application.exceptions import ApiError, BranchDirectoryError, NetworkError
from cinema_booking.application.ports.branch_directory import BranchDirectoryPort
from cinema_booking.domain.entities.branch import Branch
from cinema_booking.infrastructure.http.api_client import ApiClient
from cinema_booking.infrastructure.store.records import branch_from_record

BRANCHES_ENDPOINT = "/branches"


class HttpBranchDirectory(BranchDirectoryPort):
    def __init__(self, client: ApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def list_branches(self) -> list[Branch]:
        try:
            data = self._client.get(BRANCHES_ENDPOINT)
        except (ApiError, NetworkError) as e:
            raise BranchDirectoryError(str(e)) from e

        if not isinstance(data, list):
            raise BranchDirectoryError("Unexpected branch list payload")

        branches: list[Branch] = []
        for item in data:
            try:
                branches.append(branch_from_record(item))
            except (ValueError, AttributeError, TypeError):
                self._logger.warning("Skipping malformed branch record", extra={"error": repr(item)[:200]})
                continue
        return branches
