"""rzCOBS frame decoding.

rzCOBS is a reverse, run/bitmap based encoding that never emits a 0x00
byte, which leaves 0x00 free to act as a frame separator on the wire.

An encoded frame is read from its last byte to its first. Each step reads
one control byte:

- ``0x00``: invalid, a separator can never appear inside a frame
- ``0x01``-``0x7f``: bitmap of 7 flags, bit 6 first; a set flag is a zero
  byte, a clear flag is one literal byte
- ``0x80``-``0xfe``: one zero byte followed by ``(c & 0x7f) + 7`` literals
- ``0xff``: 134 literals, no zero byte

The output is accumulated in that reversed order and flipped once at the end.
"""

from __future__ import annotations

from typing import Iterator

from ..exceptions import MalformedError

BITMAP_FLAGS = 7
RUN_BASE = 7
RAW_RUN_LENGTH = 134


def decode(data: bytes | bytearray | memoryview) -> bytes:
    """Decode one complete rzCOBS frame.

    Partial frames cannot be decoded: ``data`` must hold everything that
    preceded a separator, and must not include the separator itself.

    Args:
        data: Encoded frame content

    Returns:
        Decoded payload

    Raises:
        MalformedError: If the frame contains a 0x00 byte or ends in the
            middle of a construct

    Example:
        >>> decode(bytes([1, 2, 3, 4, 5, 6, 7, 0x80]))
        b'\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x00'
        >>> decode(b"\\x7f")
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    result = bytearray()
    stream = reversed(bytes(data))

    for control in stream:
        if control == 0:
            raise MalformedError("Separator byte 0x00 inside encoded frame")

        if control < 0x80:
            # Bitmap: flags from bit 6 down to bit 0
            for bit in range(BITMAP_FLAGS - 1, -1, -1):
                if control & (1 << bit):
                    result.append(0)
                else:
                    result.append(_next_literal(stream, control))
        elif control < 0xFF:
            result.append(0)
            for _ in range((control & 0x7F) + RUN_BASE):
                result.append(_next_literal(stream, control))
        else:
            for _ in range(RAW_RUN_LENGTH):
                result.append(_next_literal(stream, control))

    result.reverse()
    return bytes(result)


def _next_literal(stream: Iterator[int], control: int) -> int:
    try:
        return next(stream)
    except StopIteration:
        raise MalformedError(
            f"Truncated frame: control byte 0x{control:02x} needs more literal bytes"
        ) from None
