"""Turn untrusted file names from requests into safe paths."""

from pathlib import Path

from fastapi import HTTPException, status

from filegate.exceptions import GENERIC_REJECTION_MESSAGE
from filegate.security.paths import RejectionReason, sanitize


def rejection_detail(reason: RejectionReason, expose_reason: bool = False) -> str:
    """Client-facing message for a rejection. Never includes the raw name."""
    if expose_reason:
        return f"{GENERIC_REJECTION_MESSAGE}: {reason.description}"
    return GENERIC_REJECTION_MESSAGE


def clean_user_file_request(
    base_path: str | Path,
    raw_name: str,
    extension: str,
    expose_reason: bool = False,
) -> Path:
    """
    Sanitize a file name taken from a request.

    Args:
        base_path: Directory the file must live in
        raw_name: Name exactly as the client sent it
        extension: Extension to force on the result
        expose_reason: Include the specific rejection reason in the response

    Returns:
        Safe path under base_path

    Raises:
        HTTPException: 400 if the name is rejected
    """
    result = sanitize(base_path, raw_name, extension)
    if isinstance(result, RejectionReason):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=rejection_detail(result, expose_reason),
        )
    return result
