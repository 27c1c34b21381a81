"""Byte-level reading and writing over binary streams.

This module provides the low-level primitives every codec builds on: reading
and writing exact byte counts and big-endian integers of 1-4 bytes. Any object
with ``read(n)`` / ``write(b)`` methods (``io.BytesIO``, files, sockets wrapped
with ``makefile("rb")``) can be used as the underlying stream.
"""

from __future__ import annotations

from typing import BinaryIO

from ..config import CodecConfig
from ..exceptions import DecodeError, EncodeError, UnexpectedEndOfData

# Upper bound on a single read() request
READ_CHUNK_SIZE = 65536


class ByteWriter:
    """Writes bytes and big-endian integers to a binary stream.

    Example:
        >>> buf = io.BytesIO()
        >>> writer = ByteWriter(buf)
        >>> writer.write_int(-2, 2)
        2
        >>> buf.getvalue()
        b'\\xff\\xfe'
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Initialize a writer on the given stream.

        Args:
            stream: Binary stream to write to
        """
        self.stream = stream

    def write_bytes(self, data: bytes) -> int:
        """Write all of ``data`` to the stream.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes written (always ``len(data)``)

        Raises:
            EncodeError: If the stream fails or stops accepting bytes
        """
        view = memoryview(data)
        written = 0
        while written < len(view):
            try:
                n = self.stream.write(view[written:])
            except OSError as e:
                raise EncodeError(f"write failed after {written} bytes: {e}") from e
            if n is None:
                # Buffered streams return None only when nothing could be written
                n = 0
            if n == 0:
                raise EncodeError(f"short write: {written} of {len(view)} bytes written")
            written += n
        return written

    def write_byte(self, value: int) -> int:
        """Write a single byte (0-255)."""
        return self.write_bytes(bytes((value & 0xFF,)))

    def write_uint(self, value: int, num_bytes: int) -> int:
        """Write an unsigned integer big-endian in ``num_bytes`` bytes.

        Values that do not fit are truncated to the low ``num_bytes`` bytes.

        Args:
            value: Integer value to write
            num_bytes: Field width in bytes (1-8)

        Returns:
            Number of bytes written
        """
        if num_bytes < 1 or num_bytes > 8:
            raise ValueError(f"num_bytes must be 1-8, got {num_bytes}")
        mask = (1 << (8 * num_bytes)) - 1
        return self.write_bytes((value & mask).to_bytes(num_bytes, "big"))

    def write_int(self, value: int, num_bytes: int) -> int:
        """Write a signed integer big-endian using two's complement.

        Values that do not fit wrap around within ``num_bytes`` bytes.
        """
        # Masking a negative int yields its two's complement representation
        return self.write_uint(value, num_bytes)


class ByteReader:
    """Reads bytes and big-endian integers from a binary stream.

    Attributes:
        stream: The underlying binary stream
        config: Codec configuration (nesting limit for containers)

    Example:
        >>> reader = ByteReader(io.BytesIO(b"\\x01\\x3c\\xff"))
        >>> reader.read_int(2)
        316
        >>> reader.read_int(1)
        -1
    """

    def __init__(self, stream: BinaryIO, config: CodecConfig | None = None) -> None:
        """Initialize a reader on the given stream.

        Args:
            stream: Binary stream to read from
            config: Codec configuration. If None, uses default config.
        """
        self.stream = stream
        self.config = config if config is not None else CodecConfig()

    @property
    def max_depth(self) -> int:
        """Maximum container nesting depth."""
        return self.config.max_depth

    def read_some(self, num_bytes: int) -> bytes:
        """Read up to ``num_bytes`` bytes, stopping early only at end of stream.

        Reads happen in chunks of at most ``READ_CHUNK_SIZE`` bytes, so a
        corrupt length prefix runs into the end of the stream instead of
        allocating the full length up front. Only blocking streams are
        supported.

        Raises:
            DecodeError: If the stream raises an I/O error or has no data
                available yet (non-blocking stream)
        """
        chunks = bytearray()
        while len(chunks) < num_bytes:
            try:
                chunk = self.stream.read(min(num_bytes - len(chunks), READ_CHUNK_SIZE))
            except OSError as e:
                raise DecodeError(f"read failed: {e}") from e
            if chunk is None:
                raise DecodeError(
                    "stream has no data available; non-blocking streams are not supported"
                )
            if not chunk:
                break
            chunks.extend(chunk)
        return bytes(chunks)

    def read_exact(self, num_bytes: int) -> bytes:
        """Read exactly ``num_bytes`` bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the stream

        Raises:
            UnexpectedEndOfData: If the stream ends first
        """
        data = self.read_some(num_bytes)
        if len(data) < num_bytes:
            raise UnexpectedEndOfData(num_bytes, len(data))
        return data

    def read_byte(self) -> int:
        """Read a single byte.

        Raises:
            UnexpectedEndOfData: If the stream is exhausted
        """
        return self.read_exact(1)[0]

    def read_uint(self, num_bytes: int) -> int:
        """Read a big-endian unsigned integer spanning all ``num_bytes`` bytes."""
        if num_bytes < 1 or num_bytes > 8:
            raise ValueError(f"num_bytes must be 1-8, got {num_bytes}")
        return int.from_bytes(self.read_exact(num_bytes), "big")

    def read_int(self, num_bytes: int) -> int:
        """Read a big-endian two's complement signed integer."""
        unsigned_value = self.read_uint(num_bytes)

        # Check sign bit (MSB)
        sign_bit = 1 << (8 * num_bytes - 1)
        if unsigned_value & sign_bit:
            return unsigned_value - (1 << (8 * num_bytes))
        return unsigned_value
