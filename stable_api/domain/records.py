from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OwnerRecord:
    """Plain, persistence-agnostic view of a stored owner."""

    id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class HorseRecord:
    """Plain, persistence-agnostic view of a stored horse.

    ``health_status`` holds the enum value as stored (e.g. ``"HEALTHY"``).
    """

    id: int
    name: str
    age: int
    breed: str
    health_status: str
    owner_id: int
