"""Index table decoding payloads into Pydantic messages.

Payload layout:

    [index (u16, little-endian)] [fields packed with the message's struct format]

The index selects a registered TableMessage subclass; the remaining bytes
are unpacked with its ``rz_format`` and validated by Pydantic. Bytes past
the message layout (for example encoder zero padding) are not consumed.
"""

from __future__ import annotations

import struct
from typing import ClassVar, Iterable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import MalformedError, SchemaError, UnexpectedEofError

INDEX = struct.Struct("<H")
BYTE_ORDER_CHARS = "@=<>!"

M = TypeVar("M", bound=type["TableMessage"])


class TableMessage(BaseModel):
    """Base class for messages decoded by MessageTable.

    Fields are filled, in declaration order, from the values unpacked with
    ``rz_format``. The format is little-endian unless it starts with its own
    byte order character.

    Example:
        >>> from typing import ClassVar
        >>> from pydantic import Field
        >>> class Temperature(TableMessage):
        ...     sensor_id: int = Field(ge=0, le=255)
        ...     millidegrees: int
        ...
        ...     rz_index: ClassVar[int] = 3
        ...     rz_format: ClassVar[str] = "Bi"

    Attributes:
        rz_index: Table index identifying the message on the wire
        rz_format: struct format of the message body
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rz_index: ClassVar[Optional[int]] = None
    rz_format: ClassVar[str] = ""

    @classmethod
    def layout(cls) -> struct.Struct:
        """Compiled struct layout of the message body."""
        fmt = cls.rz_format
        if not fmt or fmt[0] not in BYTE_ORDER_CHARS:
            fmt = "<" + fmt
        try:
            return struct.Struct(fmt)
        except struct.error as e:
            raise SchemaError(f"{cls.__name__}: invalid rz_format {cls.rz_format!r}: {e}") from e


class MessageTable:
    """Table mapping u16 indices to TableMessage classes.

    The table is read-only once populated and may be shared between
    decoders.

    Example:
        ```python
        table = MessageTable([Temperature, Heartbeat])
        decoder = RzcobsDecoder(table)
        ```
    """

    def __init__(self, messages: Iterable[type[TableMessage]] = ()) -> None:
        self._entries: dict[int, tuple[type[TableMessage], struct.Struct]] = {}
        for message_class in messages:
            self.register(message_class)

    def register(self, message_class: M) -> M:
        """Register a message class; usable as a class decorator.

        Raises:
            SchemaError: If the index is missing, out of range or taken, or
                the format does not match the message fields
        """
        index = message_class.rz_index
        name = message_class.__name__
        if index is None:
            raise SchemaError(f"{name} has no rz_index")
        if not 0 <= index <= 0xFFFF:
            raise SchemaError(f"{name}: rz_index must be 0-65535, got {index}")
        if index in self._entries:
            taken = self._entries[index][0].__name__
            raise SchemaError(f"{name}: index {index} already used by {taken}")

        layout = message_class.layout()
        num_values = len(layout.unpack(bytes(layout.size)))
        num_fields = len(message_class.model_fields)
        if num_values != num_fields:
            raise SchemaError(
                f"{name}: rz_format {message_class.rz_format!r} yields {num_values} "
                f"values for {num_fields} fields"
            )

        self._entries[index] = (message_class, layout)
        return message_class

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def decode(self, data: bytes) -> tuple[TableMessage, int]:
        """Decode a payload into its registered message.

        Returns:
            Tuple of (message, bytes consumed)

        Raises:
            UnexpectedEofError: If the payload is shorter than index + body
            MalformedError: If the index is unknown or the values fail validation
        """
        if len(data) < INDEX.size:
            raise UnexpectedEofError(f"Payload too short for index: {len(data)} bytes")

        (index,) = INDEX.unpack_from(data)
        entry = self._entries.get(index)
        if entry is None:
            raise MalformedError(f"Unknown message index {index}")

        message_class, layout = entry
        end = INDEX.size + layout.size
        if len(data) < end:
            raise UnexpectedEofError(
                f"{message_class.__name__}: need {end} bytes, got {len(data)} bytes"
            )

        values = layout.unpack_from(data, INDEX.size)
        try:
            message = message_class(**dict(zip(message_class.model_fields, values)))
        except ValidationError as e:
            raise MalformedError(f"Invalid {message_class.__name__}: {e}") from e

        return message, end
