"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable

import pytest


def rzcobs_encode(data: bytes) -> bytes:
    """Reference rzCOBS encoder used to build test streams.

    The decoder may return the original payload followed by zero padding,
    since the final group is always closed with zero flags or a zero run.
    """
    out = bytearray()
    run = 0
    zeros = 0

    for byte in data:
        if run < 7:
            if byte == 0:
                zeros |= 1 << run
            else:
                out.append(byte)
            run += 1
            if run == 7 and zeros != 0:
                out.append(zeros)
                run = 0
                zeros = 0
        elif byte == 0:
            out.append((run - 7) | 0x80)
            run = 0
            zeros = 0
        else:
            out.append(byte)
            run += 1
            if run == 134:
                out.append(0xFF)
                run = 0
                zeros = 0

    if 1 <= run <= 6:
        out.append((zeros | (0xFF << run)) & 0x7F)
    elif run >= 7:
        out.append((run - 7) | 0x80)

    return bytes(out)


@pytest.fixture(scope="session")
def encode() -> Callable[[bytes], bytes]:
    """Reference encoder (session scoped so hypothesis tests can use it)."""
    return rzcobs_encode


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload with zeros and non-zero runs."""
    return b"\x01\x00\x00Hello, rzcobs!\x00\xff\x00"
