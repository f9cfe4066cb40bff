from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path

from cinema_booking.application.ports.profile_store import ProfileStorePort
from cinema_booking.domain.entities.user_profile import UserProfile

USER_DATA_KEY = "user_data"


class JsonProfileStore(ProfileStorePort):
    """Device-local profile: one record under a fixed key, read and written whole."""

    def __init__(self, path: str = "./data/user_data.json") -> None:
        self._path = Path(path)
        self._logger = logging.getLogger(__name__)

    def get(self) -> UserProfile | None:
        if not self._path.exists():
            return None
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                record = json.load(f).get(USER_DATA_KEY)
        except (json.JSONDecodeError, IOError, AttributeError) as e:
            self._logger.error("Error reading user data", extra={"error": str(e)})
            return None
        if not isinstance(record, dict) or not record.get("id"):
            return None
        return UserProfile(id=str(record["id"]), name=str(record.get("name", "")), phone=str(record.get("phone", "")))

    def save(self, name: str, phone: str) -> UserProfile:
        existing = self.get()
        profile = UserProfile(id=existing.id if existing else str(uuid.uuid4()), name=name, phone=phone)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_suffix(".json.tmp")
        with open(temp_path, "w", encoding="utf-8") as f:
            json.dump({USER_DATA_KEY: {"id": profile.id, "name": profile.name, "phone": profile.phone}}, f)
        temp_path.replace(self._path)
        return profile
