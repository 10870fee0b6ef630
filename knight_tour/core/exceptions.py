"""Custom exceptions used throughout the knight_tour package."""

from typing import Any, Optional


class TourError(Exception):
    """Base exception for all knight's tour errors.

    All package-specific exceptions should inherit from this class.
    This allows catching all tour errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(TourError):
    """Raised when there's an error in configuration.

    This includes:
    - Unreadable or malformed YAML
    - Missing required configuration
    - Values outside the allowed range (e.g. board size limits)
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class InvalidPositionError(TourError, ValueError):
    """Raised when a square is not on the board or cannot be parsed.

    Examples:
    - set_start() with coordinates outside the board
    - Algebraic notation such as "z9" or "e" that names no square
    """

    def __init__(
        self,
        x: Optional[int] = None,
        y: Optional[int] = None,
        board_size: Optional[int] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = (
                f"Position ({x}, {y}) is outside the {board_size}x{board_size} board"
            )
        details = details or {}
        if board_size is not None:
            details["board_size"] = board_size
        super().__init__(message=message, details=details)
        self.x = x
        self.y = y
        self.board_size = board_size
