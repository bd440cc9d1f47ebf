from stable_api.errors import DomainValidationError


def require_text(entity: str, field: str, value: str) -> str:
    """Return ``value`` unless it is empty or whitespace only."""
    if not isinstance(value, str) or not value.strip():
        raise DomainValidationError(f"{entity} {field} must not be empty")
    return value
