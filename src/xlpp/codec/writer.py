"""XLPP stream encoder.

This module provides the Writer that frames ``(channel, value)`` pairs onto
a byte stream, and the ``encode()`` convenience function.

Frame layout: ``[channel][type tag][payload]``. Markers are written as
``[reserved channel][body]`` without a type tag.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Iterable

from ..constants import CHAN_MAX, CHAN_RESERVED_MIN
from ..exceptions import EncodeError
from ..models import Marker, Value
from .stream import ByteWriter

logger = logging.getLogger(__name__)


class Writer:
    """Encodes ``(channel, value)`` pairs onto a binary stream.

    Each frame is assembled in memory and handed to the stream in a single
    write. If that write fails the stream may hold a partial frame, so the
    writer refuses further frames.

    Example:
        >>> buf = io.BytesIO()
        >>> writer = Writer(buf)
        >>> writer.add(0, Temperature(value=31.6))
        4
        >>> buf.getvalue()
        b'\\x00g\\x01<'
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Initialize a writer on the given stream.

        Args:
            stream: Binary stream to write to
        """
        self._writer = ByteWriter(stream)
        self._failed = False

    def add(self, channel: int, value: Value) -> int:
        """Write one value on a channel.

        Args:
            channel: Channel number. Plain values use 0-249; a marker must
                be written on its own reserved channel.
            value: Value or marker to write

        Returns:
            Total number of bytes written

        Raises:
            EncodeError: If the channel is invalid for the value, the stream
                fails, or a previous write failed
        """
        if self._failed:
            raise EncodeError("writer stream failed on a previous write")
        if not 0 <= channel <= CHAN_MAX:
            raise EncodeError(f"channel must be 0-{CHAN_MAX}, got {channel}")

        if isinstance(value, Marker):
            if channel != value.xlpp_channel:
                raise EncodeError(
                    f"{type(value).__name__} must be written on channel "
                    f"{value.xlpp_channel}, got {channel}"
                )
        elif channel >= CHAN_RESERVED_MIN:
            raise EncodeError(
                f"channel {channel} is reserved; plain values use 0-{CHAN_RESERVED_MIN - 1}"
            )

        # Assemble the frame first so a value that cannot be encoded leaves
        # the stream untouched
        frame = io.BytesIO()
        frame_writer = ByteWriter(frame)
        frame_writer.write_byte(channel)
        if isinstance(value, Marker):
            value.write_to(frame_writer)
        else:
            value.write_tagged(frame_writer)

        try:
            n = self._writer.write_bytes(frame.getvalue())
        except EncodeError:
            self._failed = True
            raise

        logger.debug("Wrote %d bytes on channel %d: %s", n, channel, value)
        return n

    def add_marker(self, marker: Marker) -> int:
        """Write a marker on its reserved channel."""
        return self.add(marker.xlpp_channel, marker)


def encode(frames: Iterable[tuple[int, Value]]) -> bytes:
    """Encode ``(channel, value)`` pairs into a complete XLPP message.

    Args:
        frames: Pairs to encode, in order

    Returns:
        Encoded message bytes

    Raises:
        EncodeError: If a channel is invalid for its value

    Examples:
        ```python
        from xlpp import Delay, Temperature, encode

        data = encode([
            (0, Temperature(value=21.5)),
            (Delay.xlpp_channel, Delay.from_seconds(600)),
            (0, Temperature(value=20.9)),
        ])
        ```
    """
    buf = io.BytesIO()
    writer = Writer(buf)
    for channel, value in frames:
        writer.add(channel, value)
    return buf.getvalue()
