"""rzcobs: rzCOBS stream decoding

A Python library for pulling frames out of rzCOBS encoded byte streams.
rzCOBS is a reverse, run/bitmap based, zero-byte-free encoding: the byte
0x00 never appears inside an encoded frame, so it is used as the frame
separator on the wire (serial links, sockets, log captures).

Key Features:
- Pure Python frame codec
- Incremental stream decoders tolerant of arbitrary chunk boundaries
- Automatic resynchronization after corrupt frames
- Pluggable tables turning payloads into structured frames (Pydantic based)

Quick Start:
    >>> from rzcobs import RawTable, RzcobsDecoder
    >>>
    >>> decoder = RzcobsDecoder(RawTable())
    >>> decoder.received(b"\\x00\\x01\\x02\\x03\\x04")
    >>> decoder.received(b"\\x05\\x06\\x07\\x80\\x00")
    >>> decoder.decode().payload
    b'\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x00'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import decode
from .exceptions import (
    ConfigError,
    DecodeError,
    MalformedError,
    RzcobsError,
    SchemaError,
    UnexpectedEofError,
)
from .stream import (
    DecoderConfig,
    RzcobsDecoder,
    SharedRzcobsDecoder,
    StreamDecoder,
    advance,
    find_separator,
    received,
)
from .table import MessageTable, RawFrame, RawTable, Table, TableMessage, decode_with

__all__ = [
    # Codec
    "decode",
    # Stream decoders
    "RzcobsDecoder",
    "SharedRzcobsDecoder",
    "StreamDecoder",
    "DecoderConfig",
    # Buffer helpers
    "received",
    "advance",
    "find_separator",
    # Tables
    "Table",
    "decode_with",
    "RawTable",
    "RawFrame",
    "MessageTable",
    "TableMessage",
    # Exceptions
    "RzcobsError",
    "DecodeError",
    "UnexpectedEofError",
    "MalformedError",
    "SchemaError",
    "ConfigError",
    # Version
    "__version__",
]
