"""Unit tests for byte-level stream primitives."""

from __future__ import annotations

import io

import pytest

from xlpp import CodecConfig, DecodeError, EncodeError, UnexpectedEndOfData
from xlpp.codec.stream import READ_CHUNK_SIZE, ByteReader, ByteWriter


class FailingStream(io.RawIOBase):
    """Binary stream whose writes fail after ``limit`` bytes."""

    def __init__(self, limit: int = 0, error: bool = True) -> None:
        self.limit = limit
        self.error = error
        self.written = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        room = self.limit - len(self.written)
        if room <= 0:
            if self.error:
                raise OSError("device unplugged")
            return 0
        chunk = bytes(data[:room])
        self.written.extend(chunk)
        return len(chunk)


class TrickleStream(io.RawIOBase):
    """Binary stream returning at most one byte per read() call."""

    def __init__(self, data: bytes) -> None:
        self._data = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:  # type: ignore[override]
        return self._data.read(1)


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_write_uint(self) -> None:
        """Test writing big-endian unsigned integers."""
        buf = io.BytesIO()
        writer = ByteWriter(buf)

        assert writer.write_uint(0x1234, 2) == 2
        assert writer.write_uint(0x010203, 3) == 3
        assert buf.getvalue() == b"\x12\x34\x01\x02\x03"

    def test_write_int_twos_complement(self) -> None:
        """Test writing negative integers."""
        buf = io.BytesIO()
        writer = ByteWriter(buf)
        writer.write_int(-2, 2)
        writer.write_int(-1, 3)

        assert buf.getvalue() == b"\xff\xfe\xff\xff\xff"

    def test_write_truncates_to_width(self) -> None:
        """Test that oversized values keep only the low bytes."""
        buf = io.BytesIO()
        writer = ByteWriter(buf)
        writer.write_uint(0x1FF, 1)
        writer.write_int(40000, 2)

        assert buf.getvalue() == b"\xff\x9c\x40"

    def test_write_width_bounds(self) -> None:
        """Test width checking."""
        writer = ByteWriter(io.BytesIO())

        with pytest.raises(ValueError, match="1-8"):
            writer.write_uint(1, 0)

    def test_io_error(self) -> None:
        """Test that stream errors become EncodeError."""
        writer = ByteWriter(FailingStream(limit=0))

        with pytest.raises(EncodeError, match="device unplugged"):
            writer.write_bytes(b"\x01")

    def test_short_write(self) -> None:
        """Test a stream that stops accepting bytes."""
        stream = FailingStream(limit=2, error=False)
        writer = ByteWriter(stream)

        with pytest.raises(EncodeError, match="short write"):
            writer.write_bytes(b"\x01\x02\x03")
        assert bytes(stream.written) == b"\x01\x02"


class TestByteReader:
    """Test ByteReader functionality."""

    def test_read_uint_uses_all_bytes(self) -> None:
        """Test multi-byte reconstruction from every byte read."""
        reader = ByteReader(io.BytesIO(b"\x01\x02\x03\x04\x0a\x0b\x0c"))

        assert reader.read_uint(4) == 0x01020304
        assert reader.read_uint(3) == 0x0A0B0C

    def test_read_int_sign_extension(self) -> None:
        """Test reading signed integers of every width."""
        reader = ByteReader(io.BytesIO(b"\xff\xff\xfe\x80\x00\x00\x7f\xff\xff\xff\xfe"))

        assert reader.read_int(1) == -1
        assert reader.read_int(2) == -2
        assert reader.read_int(3) == -(1 << 23)
        assert reader.read_int(4) == 0x7FFFFFFF
        assert reader.read_int(1) == -2

    def test_read_exact_short(self) -> None:
        """Test error on reading past end."""
        reader = ByteReader(io.BytesIO(b"\x01\x02"))

        with pytest.raises(UnexpectedEndOfData) as exc_info:
            reader.read_exact(3)
        assert exc_info.value.needed == 3
        assert exc_info.value.got == 2

    def test_read_some_at_end(self) -> None:
        """Test that read_some returns what is left."""
        reader = ByteReader(io.BytesIO(b""))

        assert reader.read_some(1) == b""

    def test_trickling_stream(self) -> None:
        """Test streams that return fewer bytes than requested."""
        reader = ByteReader(TrickleStream(b"\x00\x00\x01\x00"))

        assert reader.read_uint(4) == 256

    def test_io_error(self) -> None:
        """Test that stream errors become DecodeError."""

        class BrokenStream(io.RawIOBase):
            def readable(self) -> bool:
                return True

            def read(self, size: int = -1) -> bytes:  # type: ignore[override]
                raise OSError("link down")

        reader = ByteReader(BrokenStream())

        with pytest.raises(DecodeError, match="link down"):
            reader.read_byte()

    def test_non_blocking_stream_without_data(self) -> None:
        """Test a stream with nothing available yet is not taken as end of stream."""

        class PendingStream(io.RawIOBase):
            def readable(self) -> bool:
                return True

            def readinto(self, buffer) -> None:  # type: ignore[override]
                return None

        reader = ByteReader(PendingStream())

        with pytest.raises(DecodeError, match="non-blocking"):
            reader.read_some(1)

    def test_large_request_read_in_chunks(self) -> None:
        """Test huge read requests never reach the stream in one call."""
        requests: list[int] = []

        class RecordingStream(io.BytesIO):
            def read(self, size: int | None = -1) -> bytes:
                requests.append(size if size is not None else -1)
                return super().read(size)

        reader = ByteReader(RecordingStream(b"abc"))

        with pytest.raises(UnexpectedEndOfData):
            reader.read_exact(1 << 64)
        assert max(requests) <= READ_CHUNK_SIZE

    def test_config(self) -> None:
        """Test default and custom configuration."""
        assert ByteReader(io.BytesIO()).max_depth == CodecConfig().max_depth
        assert ByteReader(io.BytesIO(), CodecConfig(max_depth=3)).max_depth == 3


class TestCodecConfig:
    """Test CodecConfig validation."""

    def test_invalid_max_depth(self) -> None:
        """Test rejection of non-positive depth."""
        with pytest.raises(ValueError, match="max_depth"):
            CodecConfig(max_depth=0)
