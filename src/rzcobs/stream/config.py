"""Configuration for stream decoders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigError


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration shared by RzcobsDecoder and SharedRzcobsDecoder.

    Attributes:
        max_buffer_size: Upper bound in bytes for buffered data that has no
            separator yet (default None = unbounded). When exceeded, the
            buffered bytes are discarded and reported as one malformed frame.
            Useful on noisy serial links where a lost separator would
            otherwise grow the buffer forever.

    Examples:
        ```python
        from rzcobs import DecoderConfig, RawTable, RzcobsDecoder

        decoder = RzcobsDecoder(RawTable(), DecoderConfig(max_buffer_size=4096))
        ```
    """

    max_buffer_size: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_buffer_size is not None and self.max_buffer_size <= 0:
            raise ConfigError(f"max_buffer_size must be > 0, got {self.max_buffer_size}")
