import pytest

from knight_tour.core.exceptions import (
    ConfigurationError,
    InvalidPositionError,
    TourError,
)


class TestTourError:
    """Test TourError base exception class."""

    def test_tour_error_creation_basic(self):
        """Test creating a TourError with just a message."""
        msg = "Test error message"
        exc = TourError(msg)

        assert str(exc) == msg
        assert exc.details == {}

    def test_tour_error_with_details(self):
        """Test creating a TourError with details."""
        details = {"key1": "value1", "key2": 42}
        exc = TourError("Test error message", details=details)

        assert exc.details == details

    def test_tour_error_none_details_defaults_to_empty(self):
        """Test that None details defaults to empty dict."""
        exc = TourError("message", details=None)

        assert exc.details == {}

    def test_tour_error_inheritance(self):
        """Test that TourError inherits from Exception."""
        assert isinstance(TourError("test"), Exception)


class TestConfigurationError:
    """Test ConfigurationError exception class."""

    def test_configuration_error_with_message_only(self):
        """Test ConfigurationError with only a message (treated as config_key)."""
        exc = ConfigurationError(config_key="Missing config key")

        assert "configuration" in str(exc).lower()
        assert "Missing config key" in str(exc)
        assert exc.config_key == "configuration"

    def test_configuration_error_with_key_and_message(self):
        """Test ConfigurationError with both key and message."""
        exc = ConfigurationError(config_key="board_size", message="must be positive")

        assert "board_size" in str(exc)
        assert "must be positive" in str(exc)
        assert exc.config_key == "board_size"

    def test_configuration_error_with_details(self):
        """Test ConfigurationError with details."""
        exc = ConfigurationError(
            config_key="board_size",
            message="out of range",
            details={"provided": 30, "max": 14},
        )

        assert exc.details == {"provided": 30, "max": 14}

    def test_configuration_error_none_key_defaults(self):
        """Test ConfigurationError with None key."""
        exc = ConfigurationError(config_key=None, message="Something is wrong")

        assert "configuration" in str(exc).lower()
        assert "Something is wrong" in str(exc)

    def test_configuration_error_no_args(self):
        """Test ConfigurationError with no arguments."""
        exc = ConfigurationError()

        assert "Invalid configuration" in str(exc)
        assert exc.details == {}

    def test_configuration_error_inheritance(self):
        """Test that ConfigurationError inherits from TourError."""
        exc = ConfigurationError(config_key="test")

        assert isinstance(exc, TourError)
        assert not isinstance(exc, ValueError)


class TestInvalidPositionError:
    """Test InvalidPositionError exception class."""

    def test_default_message_names_square_and_board(self):
        exc = InvalidPositionError(-1, 0, 8)

        assert "(-1, 0)" in str(exc)
        assert "8x8" in str(exc)
        assert exc.x == -1
        assert exc.y == 0
        assert exc.board_size == 8
        assert exc.details == {"board_size": 8}

    def test_custom_message(self):
        exc = InvalidPositionError(board_size=5, message="Cannot parse square 'zz'")

        assert str(exc) == "Cannot parse square 'zz'"
        assert exc.x is None
        assert exc.y is None

    def test_is_value_error_and_tour_error(self):
        exc = InvalidPositionError(9, 9, 8)

        assert isinstance(exc, ValueError)
        assert isinstance(exc, TourError)

    def test_caught_as_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidPositionError(0, 9, 8)
