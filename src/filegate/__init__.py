"""Filegate: safe file paths from untrusted file names."""

from filegate.config import FilegateConfig
from filegate.exceptions import ConfigError, FilegateError, InvalidFileRequestError
from filegate.security import (
    MAX_NAME_LENGTH,
    RejectionReason,
    require_safe_path,
    sanitize,
    validate_name,
)

try:
    from filegate._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"  # Fallback before package is built

__all__ = [
    "__version__",
    # Core
    "sanitize",
    "validate_name",
    "require_safe_path",
    "RejectionReason",
    "MAX_NAME_LENGTH",
    # Configuration
    "FilegateConfig",
    # Exceptions
    "FilegateError",
    "InvalidFileRequestError",
    "ConfigError",
]
