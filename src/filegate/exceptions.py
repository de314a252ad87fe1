"""Filegate domain exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filegate.security.paths import RejectionReason

GENERIC_REJECTION_MESSAGE = "invalid file request"


class FilegateError(Exception):
    """Base exception for all Filegate errors."""


class InvalidFileRequestError(FilegateError):
    """Raised when a requested file name fails validation."""

    def __init__(self, reason: "RejectionReason") -> None:
        self.reason = reason
        super().__init__(f"{GENERIC_REJECTION_MESSAGE}: {reason.description}")


class ConfigError(FilegateError):
    """Raised when configuration cannot be loaded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in '{source}': {reason}")
