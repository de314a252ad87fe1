"""Safe composition of user-supplied file names under a trusted directory."""

import re
import unicodedata
from enum import Enum
from pathlib import Path

from filegate.exceptions import InvalidFileRequestError

MAX_NAME_LENGTH = 255

_TRAVERSAL_PATTERN = re.compile(r"\.\.|/|\\")
_ALLOWED_PATTERN = re.compile(r"[A-Za-z0-9 _\-()\[\]]+")


class RejectionReason(Enum):
    """Why a requested file name was refused."""

    INVALID_LENGTH = "invalid_length"
    CONTROL_CHARACTER = "control_character"
    PATH_TRAVERSAL = "path_traversal"
    DISALLOWED_CHARACTER = "disallowed_character"

    @property
    def description(self) -> str:
        """Fixed text that is safe to show to a client."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    RejectionReason.INVALID_LENGTH: f"name must be 1 to {MAX_NAME_LENGTH} characters long",
    RejectionReason.CONTROL_CHARACTER: "name contains a control character",
    RejectionReason.PATH_TRAVERSAL: "name contains '..' or a path separator",
    RejectionReason.DISALLOWED_CHARACTER: "name contains a character outside the allowed set",
}


def validate_name(raw_name: str) -> str | RejectionReason:
    """
    Normalize and validate an untrusted file name.

    Checks run in order and the first failure wins.

    Args:
        raw_name: Name taken verbatim from the request

    Returns:
        The NFC-normalized name, or the reason it was rejected
    """
    name = unicodedata.normalize("NFC", raw_name)

    if not name or len(name) > MAX_NAME_LENGTH:
        return RejectionReason.INVALID_LENGTH
    if any(unicodedata.category(char) == "Cc" for char in name):
        return RejectionReason.CONTROL_CHARACTER
    if _TRAVERSAL_PATTERN.search(name):
        return RejectionReason.PATH_TRAVERSAL
    if not _ALLOWED_PATTERN.fullmatch(name):
        return RejectionReason.DISALLOWED_CHARACTER
    return name


def sanitize(base_path: str | Path, raw_name: str, extension: str) -> Path | RejectionReason:
    """
    Build a path for raw_name inside base_path with the given extension.

    Args:
        base_path: Trusted directory the result must live in
        raw_name: Untrusted file name from a caller
        extension: Trusted extension, with or without a leading dot

    Returns:
        base_path / name.extension, or the reason raw_name was rejected
    """
    name = validate_name(raw_name)
    if isinstance(name, RejectionReason):
        return name

    extension = extension.lstrip(".")
    suffix = f".{extension}" if extension else ""
    return (Path(base_path) / name).with_suffix(suffix)


def require_safe_path(base_path: str | Path, raw_name: str, extension: str) -> Path:
    """
    Like sanitize(), but raise instead of returning a rejection.

    Raises:
        InvalidFileRequestError: If raw_name fails validation
    """
    result = sanitize(base_path, raw_name, extension)
    if isinstance(result, RejectionReason):
        raise InvalidFileRequestError(result)
    return result
