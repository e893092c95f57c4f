"""Stream dump CLI command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Optional

from ..stream import SharedRzcobsDecoder
from ..table import RawFrame, RawTable

DEFAULT_CHUNK_SIZE = 4096


def open_source(source: str) -> BinaryIO:
    """Open a file path, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.buffer
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.open("rb")


def dump_stream(
    stream: BinaryIO,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    strip_padding: bool = False,
) -> int:
    """Print one line per frame found in an rzCOBS byte stream.

    Each line shows the frame number, encoded and decoded lengths, the
    status and the payload hex:

    - ``ok``: frame decoded
    - ``table-error``: framing was fine but the table rejected the payload
    - ``malformed``: the encoded bytes themselves are corrupt

    Args:
        stream: Binary stream to read from
        chunk_size: Number of bytes fed to the decoder per read
        strip_padding: Drop encoder zero padding from payloads

    Returns:
        Number of frames printed
    """
    decoder: SharedRzcobsDecoder[RawFrame] = SharedRzcobsDecoder(
        RawTable(strip_padding=strip_padding)
    )
    count = 0

    def report(raw: bytes, frame: Optional[RawFrame], decoded_len: int) -> None:
        nonlocal count
        if frame is not None:
            status, payload = "ok", frame.hex()
        elif decoded_len:
            status, payload = "table-error", ""
        else:
            status, payload = "malformed", raw.hex(" ")
        print(f"#{count:<5} enc={len(raw):<4} dec={decoded_len:<4} {status:<11} {payload}".rstrip())
        count += 1

    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        decoder.received(chunk)
        decoder.drain(report)

    if decoder.pending:
        print(f"{decoder.pending} trailing bytes without separator")

    return count
