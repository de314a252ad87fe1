"""Security utilities for Filegate."""

from filegate.security.paths import (
    MAX_NAME_LENGTH,
    RejectionReason,
    require_safe_path,
    sanitize,
    validate_name,
)

__all__ = [
    "MAX_NAME_LENGTH",
    "RejectionReason",
    "require_safe_path",
    "sanitize",
    "validate_name",
]
