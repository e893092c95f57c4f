"""Unit tests for stream buffer helpers."""

from __future__ import annotations

from rzcobs import advance, find_separator, received


class TestReceived:
    """Test appending received bytes."""

    def test_trims_leading_zeros_when_empty(self) -> None:
        """Test leading separators are dropped on an empty buffer."""
        buffer = bytearray()
        received(buffer, b"\x00\x00\x01\x02\x00")

        assert buffer == bytearray(b"\x01\x02\x00")

    def test_all_zeros_when_empty(self) -> None:
        """Test a chunk of only separators leaves the buffer empty."""
        buffer = bytearray()
        received(buffer, b"\x00\x00\x00")

        assert buffer == bytearray()

    def test_keeps_zeros_when_not_empty(self) -> None:
        """Test separators are kept once the buffer holds data."""
        buffer = bytearray(b"\x01")
        received(buffer, b"\x00\x00\x02")

        assert buffer == bytearray(b"\x01\x00\x00\x02")

    def test_empty_chunk(self) -> None:
        """Test an empty chunk is a no-op."""
        buffer = bytearray(b"\x01")
        received(buffer, b"")

        assert buffer == bytearray(b"\x01")

    def test_bytes_like(self) -> None:
        """Test bytearray and memoryview chunks."""
        buffer = bytearray()
        received(buffer, bytearray(b"\x00\x05"))
        received(buffer, memoryview(b"\x06"))

        assert buffer == bytearray(b"\x05\x06")


class TestFindSeparator:
    """Test separator lookup."""

    def test_found(self) -> None:
        """Test index of the first separator."""
        assert find_separator(bytearray(b"\x01\x02\x00\x03\x00")) == 2

    def test_not_found(self) -> None:
        """Test None without separator."""
        assert find_separator(bytearray(b"\x01\x02")) is None
        assert find_separator(bytearray()) is None


class TestAdvance:
    """Test dropping consumed frames."""

    def test_single_separator(self) -> None:
        """Test frame and separator are removed."""
        buffer = bytearray(b"\x01\x02\x00\x03")
        advance(buffer, 2)

        assert buffer == bytearray(b"\x03")

    def test_separator_run(self) -> None:
        """Test consecutive separators are skipped as padding."""
        buffer = bytearray(b"\x01\x00\x00\x00\x04\x05\x00")
        advance(buffer, 1)

        assert buffer == bytearray(b"\x04\x05\x00")

    def test_clears_when_only_zeros_left(self) -> None:
        """Test the buffer is cleared when nothing non-zero remains."""
        buffer = bytearray(b"\x01\x02\x00\x00\x00")
        advance(buffer, 2)

        assert buffer == bytearray()

    def test_invariant(self) -> None:
        """Test buffer is empty or starts non-zero after each advance."""
        buffer = bytearray(b"\x01\x00\x02\x03\x00\x00\x04\x00\x00")

        while (zero := find_separator(buffer)) is not None:
            advance(buffer, zero)
            assert not buffer or buffer[0] != 0

        assert buffer == bytearray()
