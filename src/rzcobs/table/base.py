"""Table interface.

A table turns a fully reconstructed payload into a structured frame. The
stream decoders only ever read from a table, so one table may be shared by
any number of decoders, including decoders running on different threads.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from ..exceptions import MalformedError, UnexpectedEofError

FrameT = TypeVar("FrameT")
FrameT_co = TypeVar("FrameT_co", covariant=True)


class Table(Protocol[FrameT_co]):
    """Anything that can decode a payload into a frame."""

    def decode(self, data: bytes) -> tuple[FrameT_co, int]:
        """Decode a payload.

        Args:
            data: Decoded rzCOBS payload

        Returns:
            Tuple of (frame, number of payload bytes consumed)

        Raises:
            UnexpectedEofError: If the payload is shorter than the frame needs
            MalformedError: If the payload does not parse
        """
        ...


def decode_with(table: Table[FrameT], payload: bytes) -> FrameT:
    """Decode a delimited payload with a table.

    The payload was cut out by a separator, so there is no more data coming
    for it: a table asking for more bytes is reported as malformed.

    Raises:
        MalformedError: If the table rejects the payload for any reason
    """
    try:
        frame, _consumed = table.decode(payload)
    except UnexpectedEofError as e:
        raise MalformedError(f"Truncated payload ({len(payload)} bytes): {e}") from e
    return frame
