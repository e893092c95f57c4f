"""Exception hierarchy for rzcobs.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RzcobsError for easy catching of any rzcobs-specific error.
"""

from __future__ import annotations


class RzcobsError(Exception):
    """Base exception for all rzcobs errors."""

    pass


class DecodeError(RzcobsError):
    """Raised when a frame cannot be produced from the buffered bytes.

    Use the two subclasses to tell "try again later" apart from
    "this frame is broken".
    """

    pass


class UnexpectedEofError(DecodeError):
    """Raised when there is not enough data to make a decision.

    Examples:
        - No frame separator has been received yet
        - A table was handed a payload shorter than its message layout

    When a stream decoder raises it because no separator has arrived, its
    buffer is left untouched, so feeding more bytes and retrying is safe.
    A table raising it for a delimited payload is reported by the stream
    decoders as MalformedError instead.
    """

    pass


class MalformedError(DecodeError):
    """Raised when delimited bytes violate the encoding or do not parse.

    Examples:
        - A 0x00 byte inside encoded content
        - A control byte asking for more literal bytes than remain
        - A payload rejected by the table
        - A buffer overflowing the configured limit without a separator

    When raised by a stream decoder the buffer has already moved past the
    offending frame, so the next call can resynchronize.
    """

    pass


class SchemaError(RzcobsError):
    """Raised when a table message definition is invalid.

    Examples:
        - Missing or out-of-range table index
        - Two messages registered under the same index
        - struct format that does not match the message fields
    """

    pass


class ConfigError(RzcobsError, ValueError):
    """Raised when a decoder configuration is invalid."""

    pass
