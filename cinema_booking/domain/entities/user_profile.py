from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    id: str
    name: str
    phone: str
