"""Buffer management shared by the stream decoders.

The encoded buffer only ever grows at the end (``received``) and shrinks at
the front (``advance``). After every ``advance`` the buffer is either empty
or starts with a non-zero byte, so a run of separators is never mistaken
for an empty frame.
"""

from __future__ import annotations

from typing import Optional

SEPARATOR = 0x00


def received(buffer: bytearray, data: bytes | bytearray | memoryview) -> None:
    """Append newly received bytes to the buffer.

    When the buffer is empty, leading separator bytes are dropped so that
    storage starts at the first non-zero byte.

    Args:
        buffer: Encoded buffer, modified in place
        data: Bytes as they arrived from the transport
    """
    data = memoryview(data).cast("B")
    if not buffer:
        start = 0
        while start < len(data) and data[start] == SEPARATOR:
            start += 1
        data = data[start:]

    buffer.extend(data)


def find_separator(buffer: bytearray) -> Optional[int]:
    """Return the index of the first separator, or None if there is none."""
    index = buffer.find(SEPARATOR)
    return index if index >= 0 else None


def advance(buffer: bytearray, zero: int) -> None:
    """Drop a consumed frame together with its separator run.

    Called whether or not the frame decoded, so a bad frame can never stall
    the stream.

    Args:
        buffer: Encoded buffer, modified in place
        zero: Index of the separator terminating the consumed frame
    """
    end = zero
    while end < len(buffer) and buffer[end] == SEPARATOR:
        end += 1

    if end >= len(buffer):
        buffer.clear()
    else:
        del buffer[:end]
