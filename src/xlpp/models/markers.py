"""Marker records carried on reserved channels.

Markers are not values: they put the rest of a message in context. On the
wire they consist of the reserved channel byte followed directly by the body,
without a type tag.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, Field

from ..codec.stream import ByteReader, ByteWriter
from ..constants import CHAN_ACTUATORS, CHAN_ACTUATORS_WITH_CHANNEL, CHAN_DELAY
from .base import Marker, Value
from .fields import ByteId

TagByte = Annotated[int, Field(ge=0, le=255)]


class Delay(Marker):
    """Historical context marker.

    All subsequent values in the message were measured this long ago. When a
    message holds several Delays, consumers add them up; the codec itself
    only decodes each one.

    Wire body: hours (0-255), minutes (0-59), seconds (0-59), one byte each.
    Sub-second parts are dropped.

    Example:
        >>> Delay.from_seconds(5400)
        Delay(value=datetime.timedelta(seconds=5400))
    """

    value: timedelta = Field(default=timedelta(0))

    xlpp_channel: ClassVar[int] = CHAN_DELAY

    @classmethod
    def from_seconds(cls, seconds: int) -> Delay:
        return cls(value=timedelta(seconds=seconds))

    @property
    def total_seconds(self) -> int:
        return int(self.value.total_seconds())

    @property
    def hours(self) -> int:
        return self.total_seconds // 3600

    @property
    def minutes(self) -> int:
        return self.total_seconds // 60 % 60

    @property
    def seconds(self) -> int:
        return self.total_seconds % 60

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        hours, minutes, seconds = reader.read_exact(3)
        self.value = timedelta(hours=hours, minutes=minutes, seconds=seconds)

    def write_to(self, writer: ByteWriter) -> int:
        return writer.write_bytes(bytes((self.hours & 0xFF, self.minutes, self.seconds)))

    def to_json(self) -> Any:
        return self.total_seconds

    @classmethod
    def from_json(cls, data: Any) -> Value:
        return cls.from_seconds(int(data))

    def __str__(self) -> str:
        return f"{self.hours}h{self.minutes}m{self.seconds}s"


class Actuators(Marker):
    """Capability advertisement: the type tags the sender accepts.

    Wire body: count, then one type tag byte per entry.
    """

    value: list[TagByte] = Field(default_factory=list, max_length=255)

    xlpp_channel: ClassVar[int] = CHAN_ACTUATORS

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        count = reader.read_byte()
        self.value = list(reader.read_exact(count))

    def write_to(self, writer: ByteWriter) -> int:
        return writer.write_bytes(bytes([len(self.value)] + list(self.value)))

    def __str__(self) -> str:
        return "[" + ", ".join(f"0x{t:02X}" for t in self.value) + "]"


class Actuator(BaseModel):
    """An actuator slot: the channel it listens on and the type it accepts."""

    channel: int = ByteId()
    type: int = ByteId()


class ActuatorsWithChannel(Marker):
    """Capability advertisement with channel association.

    Wire body: count, then (channel, type tag) byte pairs.
    """

    value: list[Actuator] = Field(default_factory=list, max_length=255)

    xlpp_channel: ClassVar[int] = CHAN_ACTUATORS_WITH_CHANNEL

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        count = reader.read_byte()
        body = reader.read_exact(2 * count)
        self.value = [
            Actuator(channel=body[i], type=body[i + 1]) for i in range(0, len(body), 2)
        ]

    def write_to(self, writer: ByteWriter) -> int:
        body = bytearray([len(self.value)])
        for actuator in self.value:
            body.append(actuator.channel)
            body.append(actuator.type)
        return writer.write_bytes(bytes(body))

    def __str__(self) -> str:
        return "[" + ", ".join(f"Chan {a.channel}: 0x{a.type:02X}" for a in self.value) + "]"
