"""Unit tests for the stream Reader and Writer."""

from __future__ import annotations

import io
import logging

import pytest

from xlpp import (
    Bool,
    CodecConfig,
    EncodeError,
    Integer,
    Null,
    Reader,
    Temperature,
    UnexpectedEndOfData,
    UnregisteredTypeError,
    Value,
    Writer,
    decode,
    encode,
)


class BrokenStream(io.RawIOBase):
    """Binary stream whose writes always fail."""

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        raise OSError("no carrier")


class TestWriter:
    """Test Writer functionality."""

    def test_temperature_frame(self, buffer: io.BytesIO) -> None:
        """Test channel, tag and payload layout."""
        n = Writer(buffer).add(0, Temperature(value=31.6))

        assert n == 4
        assert buffer.getvalue() == bytes([0x00, 0x67, 0x01, 0x3C])

    def test_frames_appended(self, buffer: io.BytesIO) -> None:
        """Test consecutive frames, including repeated channels."""
        writer = Writer(buffer)
        writer.add(5, Null())
        writer.add(5, Integer(value=1))

        assert buffer.getvalue() == b"\x05\x3a\x05\x33\x02"

    @pytest.mark.parametrize("channel", [250, 251, 252, 253, 254, 255])
    def test_reserved_channel(self, buffer: io.BytesIO, channel: int) -> None:
        """Test plain values on reserved channels are rejected."""
        with pytest.raises(EncodeError, match="reserved"):
            Writer(buffer).add(channel, Temperature(value=1.0))
        assert buffer.getvalue() == b""

    @pytest.mark.parametrize("channel", [-1, 256])
    def test_channel_range(self, buffer: io.BytesIO, channel: int) -> None:
        """Test channels outside one byte."""
        with pytest.raises(EncodeError, match="0-255"):
            Writer(buffer).add(channel, Null())

    def test_stream_failure(self) -> None:
        """Test stream errors surface as EncodeError."""
        with pytest.raises(EncodeError, match="no carrier"):
            Writer(BrokenStream()).add(0, Null())

    def test_failed_writer_refuses_writes(self) -> None:
        """Test a writer is unusable after a failed write."""
        writer = Writer(BrokenStream())
        with pytest.raises(EncodeError):
            writer.add(0, Null())

        with pytest.raises(EncodeError, match="previous write"):
            writer.add(1, Null())

    def test_validation_error_keeps_writer_usable(self, buffer: io.BytesIO) -> None:
        """Test rejected channels do not poison the writer."""
        writer = Writer(buffer)
        with pytest.raises(EncodeError):
            writer.add(250, Null())

        writer.add(1, Null())
        assert buffer.getvalue() == b"\x01\x3a"

    def test_debug_logging(self, buffer: io.BytesIO, caplog: pytest.LogCaptureFixture) -> None:
        """Test frames are logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="xlpp"):
            Writer(buffer).add(3, Temperature(value=31.6))

        assert "channel 3" in caplog.text


class TestReader:
    """Test Reader functionality."""

    def test_temperature_frame(self) -> None:
        """Test decoding a single frame."""
        reader = Reader(io.BytesIO(bytes([0x00, 0x67, 0x01, 0x3C])))

        assert reader.next() == (0, Temperature(value=31.6))
        assert reader.next() is None

    def test_empty_stream(self) -> None:
        """Test end of stream before any frame."""
        reader = Reader(io.BytesIO(b""))

        assert reader.next() is None
        assert list(reader) == []

    def test_write_then_read(self, buffer: io.BytesIO) -> None:
        """Test N writes are followed by exactly N reads."""
        writer = Writer(buffer)
        values: list[tuple[int, Value]] = [
            (0, Temperature(value=-5.5)),
            (1, Integer(value=-300)),
            (0, Null()),
        ]
        for channel, value in values:
            writer.add(channel, value)

        buffer.seek(0)
        reader = Reader(buffer)
        assert [reader.next() for _ in values] == values
        assert buffer.read() == b""
        assert reader.next() is None

    def test_iteration(self) -> None:
        """Test the reader is iterable."""
        data = b"\x01\x3a\x02\x36"

        assert [channel for channel, _ in Reader(io.BytesIO(data))] == [1, 2]

    def test_unregistered_tag(self) -> None:
        """Test an unknown type tag."""
        with pytest.raises(UnregisteredTypeError) as exc_info:
            Reader(io.BytesIO(b"\x00\xee")).next()
        assert exc_info.value.tag == 0xEE

    @pytest.mark.parametrize("data", [b"\x00", b"\x00\x67", b"\x00\x67\x01"])
    def test_truncated_frame(self, data: bytes) -> None:
        """Test end of stream inside a frame."""
        with pytest.raises(UnexpectedEndOfData):
            Reader(io.BytesIO(data)).next()

    def test_unassigned_reserved_channels(self) -> None:
        """Test channels 250, 254 and 255 carry ordinary frames."""
        assert decode(b"\xfa\x3a\xfe\x3a\xff\x36") == [
            (250, Null()),
            (254, Null()),
            (255, Bool(value=True)),
        ]

    def test_config(self) -> None:
        """Test the configuration is exposed."""
        config = CodecConfig(max_depth=4)

        assert Reader(io.BytesIO(), config).config is config
        assert Reader(io.BytesIO()).config == CodecConfig()


class TestConvenience:
    """Test encode() and decode()."""

    def test_encode(self) -> None:
        """Test encoding a list of frames."""
        assert encode([(0, Temperature(value=31.6))]) == b"\x00\x67\x01\x3c"
        assert encode([]) == b""

    def test_decode(self) -> None:
        """Test decoding a complete message."""
        assert decode(b"\x00\x67\x01\x3c\x01\x3a") == [
            (0, Temperature(value=31.6)),
            (1, Null()),
        ]
