"""Tables turning decoded payloads into frames.

This module provides the Table protocol the stream decoders depend on and
two ready-made tables.
"""

from __future__ import annotations

from .base import Table, decode_with
from .message import MessageTable, TableMessage
from .raw import RawFrame, RawTable

__all__ = [
    "Table",
    "decode_with",
    "MessageTable",
    "TableMessage",
    "RawFrame",
    "RawTable",
]
