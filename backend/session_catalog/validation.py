"""
Payload validation for session writes.

Runs before any store call; the result lists every violated constraint
instead of stopping at the first.
"""

from dataclasses import dataclass, field
from typing import List

from session_catalog.errors import ValidationError
from session_catalog.schemas import SessionPayload


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_session_payload(payload: SessionPayload) -> ValidationResult:
    result = ValidationResult()
    if payload.title is None:
        result.errors.append("title is required")
    elif payload.title == "":
        result.errors.append("title cannot be empty")
    return result


def require_valid_payload(payload: SessionPayload) -> None:
    """Raise ValidationError if the payload violates any constraint"""
    result = validate_session_payload(payload)
    if not result.ok:
        raise ValidationError(result.errors)
