"""Fixed-size physical values.

The LPP (Cayenne Low Power Payload) types plus the extended sensor types.
Each is a linear fixed-point transform over a big-endian integer; see
``FixedPoint()`` for the encoding rule.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import Field, field_validator

from ..codec.stream import ByteReader, ByteWriter
from ..constants import TypeTag
from .base import ScalarValue, Value
from .fields import FixedPoint

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DigitalInput(ScalarValue):
    """One byte digital input (unsigned)."""

    value: int = FixedPoint(width=1)

    xlpp_type: ClassVar[int] = TypeTag.DIGITAL_INPUT


class DigitalOutput(ScalarValue):
    """One byte digital output (unsigned)."""

    value: int = FixedPoint(width=1)

    xlpp_type: ClassVar[int] = TypeTag.DIGITAL_OUTPUT


class AnalogInput(ScalarValue):
    """Analog input with 0.01 resolution (signed)."""

    value: float = FixedPoint(width=2, signed=True, scale=100, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.ANALOG_INPUT
    xlpp_format: ClassVar[str] = "{value:.2f}"


class AnalogOutput(ScalarValue):
    """Analog output with 0.01 resolution (signed)."""

    value: float = FixedPoint(width=2, signed=True, scale=100, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.ANALOG_OUTPUT
    xlpp_format: ClassVar[str] = "{value:.2f}"


class Luminosity(ScalarValue):
    """Illuminance [lux], 2 bytes unsigned."""

    value: int = FixedPoint(width=2)

    xlpp_type: ClassVar[int] = TypeTag.LUMINOSITY
    xlpp_format: ClassVar[str] = "{value} lux"


class Presence(ScalarValue):
    """Presence counter, 1 byte unsigned. Zero means nobody is present."""

    value: int = FixedPoint(width=1)

    xlpp_type: ClassVar[int] = TypeTag.PRESENCE

    def __str__(self) -> str:
        return "yes" if self.value else "no"


class Temperature(ScalarValue):
    """Temperature [°C] with 0.1 resolution (signed).

    E.g. a value of 27.3456 °C is written as 27.3.
    """

    value: float = FixedPoint(width=2, signed=True, scale=10, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.TEMPERATURE
    xlpp_format: ClassVar[str] = "{value:.2f} °C"


class RelativeHumidity(ScalarValue):
    """Relative humidity [%] with 0.5 resolution (unsigned).

    E.g. a value of 12.64 % is written as 12.5.
    """

    value: float = FixedPoint(width=1, scale=2, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.RELATIVE_HUMIDITY
    xlpp_format: ClassVar[str] = "{value:.1f} %"


class Accelerometer(ScalarValue):
    """Acceleration {x, y, z} [G] with 0.001 resolution (signed) per axis."""

    x: float = FixedPoint(width=2, signed=True, scale=1000, default=0.0)
    y: float = FixedPoint(width=2, signed=True, scale=1000, default=0.0)
    z: float = FixedPoint(width=2, signed=True, scale=1000, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.ACCELEROMETER
    xlpp_format: ClassVar[str] = "X: {x:.3f} G, Y: {y:.3f} G, Z: {z:.3f} G"


class BarometricPressure(ScalarValue):
    """Barometric pressure [hPa] with 0.1 resolution (unsigned)."""

    value: float = FixedPoint(width=2, scale=10, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.BAROMETRIC_PRESSURE
    xlpp_format: ClassVar[str] = "{value:.1f} hPa"


class Voltage(ScalarValue):
    """Electrical voltage [V] with 0.01 resolution (unsigned)."""

    value: float = FixedPoint(width=2, scale=100, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.VOLTAGE
    xlpp_format: ClassVar[str] = "{value:.2f} V"


class Current(ScalarValue):
    """Electrical current [A] with 0.001 resolution (unsigned)."""

    value: float = FixedPoint(width=2, scale=1000, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.CURRENT
    xlpp_format: ClassVar[str] = "{value:.3f} A"


class Frequency(ScalarValue):
    """Frequency [Hz], 4 bytes unsigned."""

    value: int = FixedPoint(width=4)

    xlpp_type: ClassVar[int] = TypeTag.FREQUENCY
    xlpp_format: ClassVar[str] = "{value} Hz"


class Percentage(ScalarValue):
    """Percentage, 1 byte unsigned."""

    value: int = FixedPoint(width=1)

    xlpp_type: ClassVar[int] = TypeTag.PERCENTAGE
    xlpp_format: ClassVar[str] = "{value} %"


class Altitude(ScalarValue):
    """Altitude [m] with 1 m resolution (signed).

    E.g. a value of 3145.82 m is written as 3146.
    """

    value: float = FixedPoint(width=2, signed=True, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.ALTITUDE
    xlpp_format: ClassVar[str] = "{value:.0f} m"


class Concentration(ScalarValue):
    """Chemical concentration [ppm], 2 bytes unsigned."""

    value: int = FixedPoint(width=2)

    xlpp_type: ClassVar[int] = TypeTag.CONCENTRATION
    xlpp_format: ClassVar[str] = "{value} ppm"


class Power(ScalarValue):
    """Power [W], 2 bytes unsigned."""

    value: int = FixedPoint(width=2)

    xlpp_type: ClassVar[int] = TypeTag.POWER
    xlpp_format: ClassVar[str] = "{value} W"


class Distance(ScalarValue):
    """Distance [m] with 0.001 resolution, 4 bytes unsigned."""

    value: float = FixedPoint(width=4, scale=1000, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.DISTANCE
    xlpp_format: ClassVar[str] = "{value:.3f} m"


class Energy(ScalarValue):
    """Energy [kWh] with 0.001 resolution, 4 bytes unsigned."""

    value: float = FixedPoint(width=4, scale=1000, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.ENERGY
    xlpp_format: ClassVar[str] = "{value:.3f} kWh"


class Direction(ScalarValue):
    """Direction [deg] with 1 degree resolution (unsigned)."""

    value: float = FixedPoint(width=2, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.DIRECTION
    xlpp_format: ClassVar[str] = "{value:.0f} deg"


class Gyrometer(ScalarValue):
    """Angular rate {x, y, z} [°/s] with 0.01 resolution (signed) per axis."""

    x: float = FixedPoint(width=2, signed=True, scale=100, default=0.0)
    y: float = FixedPoint(width=2, signed=True, scale=100, default=0.0)
    z: float = FixedPoint(width=2, signed=True, scale=100, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.GYROMETER
    xlpp_format: ClassVar[str] = "X: {x:.2f} °/s, Y: {y:.2f} °/s, Z: {z:.2f} °/s"


class Colour(ScalarValue):
    """RGB colour, one byte per channel."""

    r: int = FixedPoint(width=1)
    g: int = FixedPoint(width=1)
    b: int = FixedPoint(width=1)

    xlpp_type: ClassVar[int] = TypeTag.COLOUR
    xlpp_format: ClassVar[str] = "R:{r} G:{g} B:{b} (#{r:02x}{g:02x}{b:02x})"

    def to_json(self) -> Any:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_json(cls, data: Any) -> Value:
        if isinstance(data, str):
            text = data.lstrip("#")
            if len(text) != 6:
                raise ValueError(f"Colour must be '#rrggbb', got {data!r}")
            return cls(r=int(text[0:2], 16), g=int(text[2:4], 16), b=int(text[4:6], 16))
        return cls.model_validate(data)


class GPS(ScalarValue):
    """GPS location.

    Latitude and longitude [°] with 0.0001 resolution, altitude [m] with
    0.01 resolution; each 3 bytes signed.
    """

    latitude: float = FixedPoint(width=3, signed=True, scale=10000, default=0.0)
    longitude: float = FixedPoint(width=3, signed=True, scale=10000, default=0.0)
    altitude: float = FixedPoint(width=3, signed=True, scale=100, default=0.0)

    xlpp_type: ClassVar[int] = TypeTag.GPS

    def __str__(self) -> str:
        return (
            f"{_dms(self.latitude, 'N', 'S')}, {_dms(self.longitude, 'E', 'W')}, "
            f"{self.altitude:.2f}m"
        )


class Switch(ScalarValue):
    """ON / OFF switch, 1 byte."""

    value: bool = FixedPoint(width=1, default=False)

    xlpp_type: ClassVar[int] = TypeTag.SWITCH

    def __str__(self) -> str:
        return "ON" if self.value else "OFF"


class UnixTime(Value):
    """Point in time, 4 bytes unsigned seconds since the Unix epoch (UTC).

    Naive datetimes are taken as UTC.
    """

    value: datetime = Field(default=_EPOCH)

    xlpp_type: ClassVar[int] = TypeTag.UNIX_TIME

    @field_validator("value")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def read_from(self, reader: ByteReader, depth: int = 1) -> None:
        self.value = datetime.fromtimestamp(reader.read_uint(4), tz=timezone.utc)

    def write_to(self, writer: ByteWriter) -> int:
        return writer.write_uint(int(self.value.timestamp()), 4)

    def __str__(self) -> str:
        return self.value.isoformat()


def _dms(value: float, positive: str, negative: str) -> str:
    """Format decimal degrees as degrees, minutes and seconds."""
    magnitude = abs(value)
    degrees = math.floor(magnitude)
    minutes_float = (magnitude - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = (minutes_float - minutes) * 60
    direction = negative if value < 0 else positive
    return f"{degrees}°{minutes}'{seconds:.2f}\"{direction}"
