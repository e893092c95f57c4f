"""Incremental stream decoding for rzCOBS framed byte streams.

This module provides the buffer helpers and the two stream decoders built
on top of them.
"""

from __future__ import annotations

from .buffer import advance, find_separator, received
from .config import DecoderConfig
from .decoder import RzcobsDecoder, SharedRzcobsDecoder, StreamDecoder

__all__ = [
    "DecoderConfig",
    "RzcobsDecoder",
    "SharedRzcobsDecoder",
    "StreamDecoder",
    "advance",
    "find_separator",
    "received",
]
