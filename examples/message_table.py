"""Decoding structured messages with a MessageTable."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from rzcobs import MessageTable, SharedRzcobsDecoder, TableMessage

table = MessageTable()


@table.register
class Temperature(TableMessage):
    """Temperature reading."""

    sensor_id: int = Field(ge=0, le=15)
    millidegrees: int

    rz_index: ClassVar[int] = 1
    rz_format: ClassVar[str] = "Bi"


# Temperature(sensor_id=5, millidegrees=21500), then an unknown index 9
STREAM = bytes([0x01, 0x05, 0xFC, 0x53, 0x62, 0x00, 0x09, 0x7E, 0x00])


def on_frame(raw: bytes, frame: Optional[TableMessage], decoded_len: int) -> None:
    if frame is not None:
        print(f"{type(frame).__name__}: {frame.model_dump()}")
    elif decoded_len:
        print(f"unrecognized payload of {decoded_len} bytes")
    else:
        print(f"corrupt frame: {raw.hex(' ')}")


def main() -> None:
    decoder = SharedRzcobsDecoder(table)
    decoder.received(STREAM)
    count = decoder.drain(on_frame)
    print(f"{count} frames processed")


if __name__ == "__main__":
    main()
