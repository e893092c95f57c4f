"""rzCOBS frame codec.

This module provides the stateless decoder for single rzCOBS frames.
"""

from __future__ import annotations

from .rzcobs import decode

__all__ = [
    "decode",
]
