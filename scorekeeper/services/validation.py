"""Registration payload validation."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .results import ValidationFailure

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "firstName", "lastName")
# Usernames and passwords must arrive already trimmed.
EXPLICITLY_TRIMMED_FIELDS = ("username", "password")
SIZED_FIELDS: Dict[str, Dict[str, int]] = {
    "username": {"min": 1},
    "password": {"min": 8, "max": 72},  # bcrypt input limit
}


def validate_user_payload(payload: Mapping[str, Any]) -> Optional[ValidationFailure]:
    """Return the first problem with a registration payload, or ``None``."""

    for field in REQUIRED_FIELDS:
        if field not in payload:
            return ValidationFailure("Missing field", field)

    for field in STRING_FIELDS:
        if field in payload and not isinstance(payload[field], str):
            return ValidationFailure("Incorrect field type: expected string", field)

    for field in EXPLICITLY_TRIMMED_FIELDS:
        if payload[field].strip() != payload[field]:
            return ValidationFailure("Cannot start or end with whitespace", field)

    for field, bounds in SIZED_FIELDS.items():
        if "min" in bounds and len(payload[field].strip()) < bounds["min"]:
            return ValidationFailure(
                f"Must be at least {bounds['min']} characters long", field
            )

    for field, bounds in SIZED_FIELDS.items():
        if "max" in bounds and len(payload[field].strip()) > bounds["max"]:
            return ValidationFailure(
                f"Must be at most {bounds['max']} characters long", field
            )

    return None


__all__ = ["validate_user_payload"]
