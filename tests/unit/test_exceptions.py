"""Tests for exception classes."""

from filegate.exceptions import (
    GENERIC_REJECTION_MESSAGE,
    ConfigError,
    FilegateError,
    InvalidFileRequestError,
)
from filegate.security.paths import RejectionReason


class TestInvalidFileRequestError:
    """Tests for InvalidFileRequestError."""

    def test_is_subclass_of_filegate_error(self):
        """InvalidFileRequestError is a FilegateError subclass."""
        assert issubclass(InvalidFileRequestError, FilegateError)

    def test_keeps_reason(self):
        """The rejection reason is available as an attribute."""
        err = InvalidFileRequestError(RejectionReason.CONTROL_CHARACTER)
        assert err.reason is RejectionReason.CONTROL_CHARACTER

    def test_message_is_generic(self):
        """Message starts with the generic text and names the reason."""
        err = InvalidFileRequestError(RejectionReason.PATH_TRAVERSAL)
        assert str(err).startswith(GENERIC_REJECTION_MESSAGE)
        assert RejectionReason.PATH_TRAVERSAL.description in str(err)


class TestConfigError:
    """Tests for ConfigError."""

    def test_is_subclass_of_filegate_error(self):
        """ConfigError is a FilegateError subclass."""
        assert issubclass(ConfigError, FilegateError)

    def test_message_names_source(self):
        """ConfigError formats message with source and reason."""
        err = ConfigError("filegate.yaml", "unknown setting 'colour'")
        assert "filegate.yaml" in str(err)
        assert "colour" in str(err)
        assert err.source == "filegate.yaml"
