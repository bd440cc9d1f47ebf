from __future__ import annotations

from enum import Enum

from stable_api.errors import DomainValidationError

MIN_AGE = 1
MAX_AGE = 30


class HealthStatus(str, Enum):
    HEALTHY = "HEALTHY"
    INJURED = "INJURED"
    RECOVERING = "RECOVERING"


def validate_age(age: int) -> int:
    """Return ``age`` if it lies in the inclusive range [MIN_AGE, MAX_AGE]."""
    if isinstance(age, bool) or not isinstance(age, int):
        raise DomainValidationError("Horse age must be an integer")
    if age < MIN_AGE:
        raise DomainValidationError(f"Horse must be at least {MIN_AGE} year old")
    if age > MAX_AGE:
        raise DomainValidationError(f"Age cannot exceed {MAX_AGE} years")
    return age


def parse_health_status(value: HealthStatus | str) -> HealthStatus:
    """Coerce ``value`` into the closed HealthStatus set."""
    if isinstance(value, HealthStatus):
        return value
    try:
        return HealthStatus(value)
    except ValueError:
        allowed = ", ".join(status.value for status in HealthStatus)
        raise DomainValidationError(
            f"Invalid health status {value!r}; expected one of: {allowed}"
        ) from None
