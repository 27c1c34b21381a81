"""Exception hierarchy for xlpp.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from XLPPError for easy catching of any xlpp-specific error.
"""

from __future__ import annotations


class XLPPError(Exception):
    """Base exception for all xlpp errors."""

    pass


class SchemaError(XLPPError):
    """Raised when a value model declares an invalid wire layout.

    Examples:
        - Field without FixedPoint() metadata
        - Unsupported field type
        - Width outside 1-4 bytes or non-positive scale
    """

    pass


class EncodeError(XLPPError):
    """Raised when writing a value to a stream fails.

    Examples:
        - The underlying stream raised an I/O error or accepted no bytes
        - Channel outside 0-255, or a plain value on a reserved channel
        - String containing an embedded NUL terminator
        - Writer reused after a previous failure
    """

    pass


class DecodeError(XLPPError):
    """Raised when reading a value from a stream fails.

    Examples:
        - Truncated data (end of stream in the middle of a value)
        - Unregistered type tag
        - Varint longer than 10 bytes
        - Containers nested deeper than the configured maximum
    """

    pass


class UnexpectedEndOfData(DecodeError):
    """Raised when the stream ends before a value is complete."""

    def __init__(self, needed: int | None = None, got: int = 0) -> None:
        if needed is None:
            message = "unexpected end of data"
        else:
            message = f"unexpected end of data: need {needed} bytes, got {got}"
        super().__init__(message)
        self.needed = needed
        self.got = got


class UnregisteredTypeError(DecodeError):
    """Raised when a type tag has no entry in the registry."""

    def __init__(self, tag: int) -> None:
        super().__init__(f"unregistered type tag 0x{tag:02x}")
        self.tag = tag


class VarintOverflowError(DecodeError):
    """Raised when a varint does not terminate within 10 bytes."""

    pass


class MaxDepthExceededError(DecodeError):
    """Raised when containers are nested deeper than allowed."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"container nesting exceeds maximum depth {max_depth}")
        self.max_depth = max_depth
