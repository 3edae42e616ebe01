"""Exception classes for Linefold.

Ordinary data never raises: absent values are skipped and normalization
always yields a string. These exceptions flag programming errors only.
"""

from __future__ import annotations


class LinefoldError(Exception):
    """Base exception for all Linefold errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(LinefoldError):
    """Invalid FormatConfig value.

    Raised at construction time so a bad config never reaches the renderer.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending FormatConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"FormatConfig.{field_name}: {message}")


class PartError(LinefoldError, TypeError):
    """A primitive append received something other than a string."""

    def __init__(self, operation: str, value: object) -> None:
        """Initialize part error.

        Args:
            operation: Name of the append primitive that was called
            value: The rejected value
        """
        self.operation = operation
        self.value = value
        super().__init__(
            f"{operation}() expects str, got {type(value).__name__}"
        )


class RenderError(LinefoldError):
    """Error during rendering.

    Raised when the renderer meets a part whose kind it does not know.
    """

    pass
