"""Exceptions for failures outside the operation-result protocol."""


class MyTubeError(Exception):
    """Base class for console-level errors."""


class InputParseError(MyTubeError, ValueError):
    """Raised when typed input cannot be parsed into the expected type."""
