from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Branch:
    id: str
    name: str
    address: str = ""
    google_maps_url: str | None = None
    images: tuple[str, ...] = ()
    created_at: float | None = None
    updated_at: float | None = None
