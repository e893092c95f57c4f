"""Stream decoders for rzCOBS framed byte streams.

Bytes are fed in with ``received()`` as they arrive, in chunks of any size,
and frames are pulled out once their separator has been seen.

Two decoders share one implementation (``StreamDecoder``):

- RzcobsDecoder: single-frame pull interface, ``decode()`` returns a frame
  or raises
- SharedRzcobsDecoder: hands out its table with ``table()`` and adds the
  callback-driven ``frame_and_decode()`` for diagnostics

Neither decoder blocks. "Not enough data yet" is reported with
UnexpectedEofError and the caller owns the retry loop.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, Optional

from ..codec import rzcobs
from ..exceptions import DecodeError, MalformedError, UnexpectedEofError
from ..table.base import FrameT, Table, decode_with
from .buffer import advance, find_separator, received
from .config import DecoderConfig

logger = logging.getLogger(__name__)

FrameCallback = Callable[[bytes, Optional[FrameT], int], None]


class StreamDecoder(Generic[FrameT]):
    """Buffering state machine shared by both stream decoders.

    Owns the encoded buffer and knows how to cut one frame off its front;
    turning a payload into a frame is delegated to the table.
    """

    def __init__(self, table: Table[FrameT], config: Optional[DecoderConfig] = None) -> None:
        self._table = table
        self._config = config or DecoderConfig()
        self._raw = bytearray()

    @property
    def pending(self) -> int:
        """Number of encoded bytes currently buffered."""
        return len(self._raw)

    def received(self, data: bytes | bytearray | memoryview) -> None:
        """Feed newly received bytes into the decoder."""
        received(self._raw, data)

    def _separator(self) -> Optional[int]:
        zero = find_separator(self._raw)
        if zero is None:
            limit = self._config.max_buffer_size
            if limit is not None and len(self._raw) > limit:
                logger.warning(
                    "Discarding %d buffered bytes without a separator (limit %d)",
                    len(self._raw),
                    limit,
                )
                return len(self._raw)
        return zero

    def _decode_frame(self) -> FrameT:
        zero = self._separator()
        if zero is None:
            raise UnexpectedEofError("No frame separator received yet")

        overflow = zero == len(self._raw)
        try:
            try:
                if overflow:
                    raise MalformedError(f"Buffer exceeded {self._config.max_buffer_size} bytes")
                payload = rzcobs.decode(self._raw[:zero])
            finally:
                # Even if decoding failed, drop the frame so the stream can't get stuck
                advance(self._raw, zero)
            return decode_with(self._table, payload)
        except MalformedError as e:
            logger.debug("Dropped malformed frame: %s", e)
            raise


class RzcobsDecoder(StreamDecoder[FrameT]):
    """Pull-style stream decoder.

    Example:
        ```python
        from rzcobs import RawTable, RzcobsDecoder, UnexpectedEofError

        decoder = RzcobsDecoder(RawTable())
        decoder.received(b"\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x80\\x00")
        frame = decoder.decode()
        ```
    """

    def decode(self) -> FrameT:
        """Decode the next buffered frame.

        Returns:
            The frame produced by the table

        Raises:
            UnexpectedEofError: If no complete frame is buffered; the buffer
                is left untouched
            MalformedError: If the frame is corrupt or the table rejects it;
                the buffer has moved past the frame
        """
        return self._decode_frame()

    def __iter__(self) -> Iterator[FrameT]:
        """Yield buffered frames until no complete frame is left.

        MalformedError propagates; iterating again resumes at the next frame.
        """
        while True:
            try:
                frame = self.decode()
            except UnexpectedEofError:
                return
            yield frame


class SharedRzcobsDecoder(StreamDecoder[FrameT]):
    """Stream decoder sharing its table with other holders.

    The decoder keeps no state in the table, so the same table object can
    back many decoders while each one is moved around independently.
    """

    def table(self) -> Table[FrameT]:
        """Return the table this decoder decodes with."""
        return self._table

    def decode(self) -> FrameT:
        """Decode the next buffered frame, like RzcobsDecoder.decode()."""
        return self._decode_frame()

    def frame_and_decode(self, callback: FrameCallback[FrameT]) -> bool:
        """Extract at most one frame and report it to ``callback``.

        The callback receives:

        - the still-encoded bytes of the frame
        - the frame, or None if the codec or the table failed
        - the decoded payload length, 0 if the codec itself failed

        Args:
            callback: Called once per extracted frame

        Returns:
            True if a frame was processed, False if none is buffered

        The buffer moves past the frame even when the table or the callback
        raises; the exception then propagates and the next call continues
        with the following frame.
        """
        zero = self._separator()
        if zero is None:
            return False

        raw = bytes(self._raw[:zero])
        frame: Optional[FrameT] = None
        decoded_len = 0
        try:
            try:
                if zero == len(self._raw):
                    raise MalformedError(f"Buffer exceeded {self._config.max_buffer_size} bytes")
                payload = rzcobs.decode(raw)
                decoded_len = len(payload)
                frame = decode_with(self._table, payload)
            except DecodeError as e:
                logger.debug("Frame of %d encoded bytes did not decode: %s", len(raw), e)

            callback(raw, frame, decoded_len)
        finally:
            advance(self._raw, zero)
        return True

    def drain(self, callback: FrameCallback[FrameT]) -> int:
        """Call frame_and_decode() until the buffer holds no complete frame.

        Returns:
            Number of frames processed
        """
        count = 0
        while self.frame_and_decode(callback):
            count += 1
        return count
