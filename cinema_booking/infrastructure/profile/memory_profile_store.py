from __future__ import annotations

import uuid

from cinema_booking.application.ports.profile_store import ProfileStorePort
from cinema_booking.domain.entities.user_profile import UserProfile


class MemoryProfileStore(ProfileStorePort):
    def __init__(self, profile: UserProfile | None = None) -> None:
        self._profile = profile

    def get(self) -> UserProfile | None:
        return self._profile

    def save(self, name: str, phone: str) -> UserProfile:
        profile_id = self._profile.id if self._profile else str(uuid.uuid4())
        self._profile = UserProfile(id=profile_id, name=name, phone=phone)
        return self._profile
