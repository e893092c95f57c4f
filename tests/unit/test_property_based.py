"""Property-based tests using hypothesis."""

from __future__ import annotations

from typing import Callable

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rzcobs import (
    MalformedError,
    RawTable,
    RzcobsDecoder,
    SharedRzcobsDecoder,
    UnexpectedEofError,
    decode,
)

Encoder = Callable[[bytes], bytes]


def collect(decoder: RzcobsDecoder) -> list[object]:
    """Decode until no complete frame is left, keeping errors in the result."""
    results: list[object] = []
    while True:
        try:
            results.append(decoder.decode().payload)
        except MalformedError:
            results.append(MalformedError)
        except UnexpectedEofError:
            return results


class TestCodecProperties:
    """Property-based tests for the frame codec."""

    @given(payload=st.binary(max_size=600))
    def test_encoded_has_no_zero(self, encode: Encoder, payload: bytes) -> None:
        """Test the reference encoding never contains a separator."""
        assert 0 not in encode(payload)

    @given(payload=st.binary(max_size=600))
    def test_decode_restores_payload(self, encode: Encoder, payload: bytes) -> None:
        """Test decoding gives the payload followed only by zero padding."""
        decoded = decode(encode(payload))

        assert decoded[: len(payload)] == payload
        assert not any(decoded[len(payload) :])

    @given(data=st.binary(max_size=300).map(lambda b: b.replace(b"\x00", b"\x01")))
    def test_arbitrary_frames_only_malformed(self, data: bytes) -> None:
        """Test arbitrary non-zero input either decodes or is malformed."""
        try:
            decode(data)
        except MalformedError:
            pass


class TestStreamProperties:
    """Property-based tests for the stream decoders."""

    @given(
        payloads=st.lists(st.binary(min_size=1, max_size=200), max_size=8),
        cuts=st.lists(st.integers(min_value=0, max_value=2000), max_size=10),
    )
    def test_chunking_does_not_matter(
        self, encode: Encoder, payloads: list[bytes], cuts: list[int]
    ) -> None:
        """Test arbitrary chunk boundaries give the same frames."""
        stream = b"".join(encode(payload) + b"\x00" for payload in payloads)

        whole = RzcobsDecoder(RawTable())
        whole.received(stream)
        expected = collect(whole)

        chunked = RzcobsDecoder(RawTable())
        frames: list[object] = []
        start = 0
        for cut in sorted(cut % (len(stream) + 1) for cut in cuts) + [len(stream)]:
            chunked.received(stream[start:cut])
            frames.extend(collect(chunked))
            start = cut

        assert frames == expected
        assert len(frames) == len(payloads)

    @given(garbage=st.binary(max_size=200), payload=st.binary(min_size=1, max_size=50))
    def test_resynchronizes_after_garbage(
        self, encode: Encoder, garbage: bytes, payload: bytes
    ) -> None:
        """Test a valid frame after arbitrary bytes always decodes."""
        decoder = RzcobsDecoder(RawTable())
        decoder.received(garbage + b"\x00" + encode(payload) + b"\x00")

        results = collect(decoder)

        assert results[-1] == decode(encode(payload))
        assert decoder.pending == 0

    @given(stream=st.binary(max_size=300))
    def test_frame_and_decode_always_progresses(self, stream: bytes) -> None:
        """Test every processed frame shrinks the buffer."""
        decoder = SharedRzcobsDecoder(RawTable())
        decoder.received(stream)

        before = decoder.pending
        while decoder.frame_and_decode(lambda raw, frame, decoded_len: None):
            assert decoder.pending < before
            before = decoder.pending


@pytest.mark.parametrize("size", [6, 7, 8, 133, 134, 135, 268, 269])
def test_run_boundaries(encode: Encoder, size: int) -> None:
    """Test payload sizes around the bitmap and raw-run limits."""
    payload = bytes((i % 255) + 1 for i in range(size))
    decoded = decode(encode(payload))

    assert decoded[:size] == payload
    assert not any(decoded[size:])
