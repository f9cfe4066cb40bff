from __future__ import annotations

import json
import logging
import threading
import time
import uuid
from dataclasses import replace
from pathlib import Path
from typing import Any

from cinema_booking.application.ports.booking_repository import BookingRepositoryPort
from cinema_booking.application.ports.branch_repository import BranchRepositoryPort
from cinema_booking.domain.entities.booking import Booking
from cinema_booking.domain.entities.branch import Branch
from cinema_booking.infrastructure.store.records import (
    booking_from_record,
    booking_to_record,
    branch_from_record,
    branch_to_record,
)


class JsonCollection:
    """One JSON file holding an ordered list of records, rewritten whole on every change."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self.lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def load(self) -> list[dict[str, Any]]:
        """Load records from the JSON file, return an empty list if missing."""
        if not self._file_path.exists():
            return []

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            # Corrupted file: start over rather than failing every request
            self._logger.warning(
                "Unreadable collection file, starting empty",
                extra={"error": f"{self._file_path}: {e}"},
            )
            return []

        items = data.get("items", []) if isinstance(data, dict) else []
        return sorted(items, key=lambda item: item.get("createdAt") or 0)

    def save(self, records: list[dict[str, Any]]) -> None:
        """Save records to the JSON file atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"version": 1, "items": records}, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise


class JsonBookingRepository(BookingRepositoryPort):
    def __init__(self, data_dir: str = "./data/db") -> None:
        self._collection = JsonCollection(Path(data_dir) / "bookings.json")

    def create(self, fields: dict[str, Any]) -> Booking:
        now = time.time()
        booking = Booking(id=uuid.uuid4().hex, created_at=now, updated_at=now, **fields)
        with self._collection.lock:
            records = self._collection.load()
            records.append(booking_to_record(booking))
            self._collection.save(records)
        return booking

    def list_all(self) -> list[Booking]:
        with self._collection.lock:
            records = self._collection.load()
        return [booking_from_record(record) for record in records]

    def list_by_user(self, userid: str) -> list[Booking]:
        return [booking for booking in self.list_all() if booking.userid == userid]

    def get(self, booking_id: str) -> Booking | None:
        with self._collection.lock:
            records = self._collection.load()
        for record in records:
            if record.get("_id") == booking_id:
                return booking_from_record(record)
        return None

    def update(self, booking_id: str, fields: dict[str, Any]) -> Booking | None:
        with self._collection.lock:
            records = self._collection.load()
            for index, record in enumerate(records):
                if record.get("_id") != booking_id:
                    continue
                updated = replace(booking_from_record(record), updated_at=time.time(), **fields)
                records[index] = booking_to_record(updated)
                self._collection.save(records)
                return updated
        return None

    def delete(self, booking_id: str) -> bool:
        with self._collection.lock:
            records = self._collection.load()
            remaining = [record for record in records if record.get("_id") != booking_id]
            if len(remaining) == len(records):
                return False
            self._collection.save(remaining)
        return True


class JsonBranchRepository(BranchRepositoryPort):
    def __init__(self, data_dir: str = "./data/db") -> None:
        self._collection = JsonCollection(Path(data_dir) / "branches.json")

    def create(self, fields: dict[str, Any]) -> Branch:
        fields = dict(fields)
        fields["images"] = tuple(fields.get("images") or ())
        now = time.time()
        branch = Branch(id=uuid.uuid4().hex, created_at=now, updated_at=now, **fields)
        with self._collection.lock:
            records = self._collection.load()
            records.append(branch_to_record(branch))
            self._collection.save(records)
        return branch

    def list_all(self) -> list[Branch]:
        with self._collection.lock:
            records = self._collection.load()
        return [branch_from_record(record) for record in records]

    def get(self, branch_id: str) -> Branch | None:
        for branch in self.list_all():
            if branch.id == branch_id:
                return branch
        return None

    def update(self, branch_id: str, fields: dict[str, Any]) -> Branch | None:
        fields = dict(fields)
        if "images" in fields:
            fields["images"] = tuple(fields["images"] or ())
        with self._collection.lock:
            records = self._collection.load()
            for index, record in enumerate(records):
                if record.get("_id") != branch_id:
                    continue
                updated = replace(branch_from_record(record), updated_at=time.time(), **fields)
                records[index] = branch_to_record(updated)
                self._collection.save(records)
                return updated
        return None

    def delete(self, branch_id: str) -> bool:
        with self._collection.lock:
            records = self._collection.load()
            remaining = [record for record in records if record.get("_id") != branch_id]
            if len(remaining) == len(records):
                return False
            self._collection.save(remaining)
        return True
