"""XLPP stream decoder.

This module provides the Reader that turns a byte stream back into
``(channel, value)`` pairs, and the ``decode()`` convenience function.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Iterator

from ..config import CodecConfig
from ..constants import CHAN_ACTUATORS, CHAN_ACTUATORS_WITH_CHANNEL, CHAN_DELAY
from ..models import Actuators, ActuatorsWithChannel, Delay, Marker, Value
from .registry import new_value
from .stream import ByteReader

logger = logging.getLogger(__name__)

# Reserved channel -> marker class decoded without a type tag
MARKERS: dict[int, type[Marker]] = {
    CHAN_DELAY: Delay,
    CHAN_ACTUATORS: Actuators,
    CHAN_ACTUATORS_WITH_CHANNEL: ActuatorsWithChannel,
}


def read_value(reader: ByteReader, depth: int = 1) -> Value:
    """Read a type tag and the payload of the value it identifies.

    Args:
        reader: ByteReader positioned at a type tag
        depth: Container nesting depth of the value (1 at top level)

    Returns:
        Decoded value

    Raises:
        UnexpectedEndOfData: If the stream ends before the value is complete
        UnregisteredTypeError: If the tag has no registry entry
        DecodeError: If the payload is malformed
    """
    tag = reader.read_byte()
    value = new_value(tag)
    value.read_from(reader, depth)
    return value


class Reader:
    """Decodes ``(channel, value)`` pairs from a binary stream.

    Each call to ``next()`` consumes exactly one frame or marker. The reader
    holds no state besides the stream position; after a decode error the rest
    of the stream cannot be resynchronized.

    Example:
        >>> reader = Reader(io.BytesIO(b"\\x00\\x67\\x01\\x3c"))
        >>> reader.next()
        (0, Temperature(value=31.6))
        >>> reader.next() is None
        True
    """

    def __init__(self, stream: BinaryIO, config: CodecConfig | None = None) -> None:
        """Initialize a reader on the given stream.

        Args:
            stream: Binary stream to read from
            config: Codec configuration. If None, uses default config.
        """
        self._reader = ByteReader(stream, config)

    @property
    def config(self) -> CodecConfig:
        return self._reader.config

    def next(self) -> tuple[int, Value] | None:
        """Read the next channel and value.

        Returns:
            ``(channel, value)``, or None once the stream is exhausted. For
            markers the channel is the reserved marker channel.

        Raises:
            UnexpectedEndOfData: If the stream ends inside a frame
            UnregisteredTypeError: If a frame carries an unknown type tag
            DecodeError: If a payload is malformed
        """
        header = self._reader.read_some(1)
        if not header:
            return None
        channel = header[0]

        marker_class = MARKERS.get(channel)
        if marker_class is not None:
            value: Value = marker_class()
            value.read_from(self._reader)
            logger.debug("Read marker on channel %d: %s", channel, value)
            return channel, value

        # Unassigned reserved channels (250, 254, 255) carry ordinary frames
        value = read_value(self._reader)
        logger.debug("Read channel %d type 0x%02x: %s", channel, value.xlpp_tag(), value)
        return channel, value

    def __iter__(self) -> Iterator[tuple[int, Value]]:
        while True:
            item = self.next()
            if item is None:
                return
            yield item


def decode(data: bytes, config: CodecConfig | None = None) -> list[tuple[int, Value]]:
    """Decode a complete XLPP message.

    Args:
        data: Encoded message bytes
        config: Codec configuration. If None, uses default config.

    Returns:
        List of ``(channel, value)`` pairs in wire order

    Raises:
        DecodeError: If the message is truncated or malformed

    Examples:
        ```python
        from xlpp import decode

        for channel, value in decode(bytes([0x00, 0x67, 0x01, 0x3C])):
            print(f"{channel}: {value}")  # 0: 31.60 °C
        ```
    """
    return list(Reader(io.BytesIO(data), config))
