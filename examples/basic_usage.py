"""Basic rzcobs usage: pull frames out of a byte stream."""

from __future__ import annotations

from rzcobs import MalformedError, RawTable, RzcobsDecoder, UnexpectedEofError

# Chunks as they might arrive from a serial port: idle padding, a frame
# split across reads, a corrupt frame and a frame of seven zero bytes
CHUNKS = [
    b"\x00\x00\x01\x02\x03",
    b"\x04\x05\x06\x07\x80\x00",
    b"\x01\x00\x7f",
    b"\x00",
]


def main() -> None:
    decoder = RzcobsDecoder(RawTable())

    for chunk in CHUNKS:
        decoder.received(chunk)
        while True:
            try:
                frame = decoder.decode()
            except UnexpectedEofError:
                break
            except MalformedError as e:
                print(f"skipped corrupt frame: {e}")
                continue
            print(f"frame: {frame.hex()}")


if __name__ == "__main__":
    main()
