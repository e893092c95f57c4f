"""Pass-through table returning payloads as they were decoded."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RawFrame(BaseModel):
    """A decoded payload with no further structure."""

    model_config = ConfigDict(frozen=True)

    payload: bytes

    def hex(self) -> str:
        """Payload as space separated hex, e.g. ``"01 02 ff"``."""
        return self.payload.hex(" ")


class RawTable:
    """Table that wraps every payload in a RawFrame.

    The rzCOBS encoder may leave zero padding at the end of a payload.
    With ``strip_padding=True`` that padding is removed from the frame and
    not counted as consumed.

    Example:
        >>> frame, consumed = RawTable(strip_padding=True).decode(b"ab\\x00\\x00")
        >>> frame.payload, consumed
        (b'ab', 2)
    """

    def __init__(self, *, strip_padding: bool = False) -> None:
        self.strip_padding = strip_padding

    def decode(self, data: bytes) -> tuple[RawFrame, int]:
        payload = data.rstrip(b"\x00") if self.strip_padding else bytes(data)
        return RawFrame(payload=payload), len(payload)
