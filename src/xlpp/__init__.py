"""xlpp: Extended Low Power Payload codec

A Python library for the compact binary format exchanged between constrained
sensor devices and their gateways. XLPP extends Cayenne LPP with more physical
units, integers, strings, binary blobs, nested objects and arrays, and marker
records for historical delays and actuator capabilities.

Key Features:
- Pydantic-based value models for every XLPP type
- Stream Reader/Writer over any binary file-like object
- Byte-exact round trips with explicit errors on truncated or malformed input
- Immutable type registry for polymorphic decoding

Quick Start:
    >>> from xlpp import Delay, Temperature, decode, encode
    >>>
    >>> data = encode([(0, Temperature(value=31.6))])
    >>> data
    b'\\x00g\\x01<'
    >>> decode(data)
    [(0, Temperature(value=31.6))]
"""

from __future__ import annotations

from .codec import REGISTRY, Reader, Writer, decode, encode, new_value, registered_types
from .config import CodecConfig
from .constants import (
    CHAN_ACTUATORS,
    CHAN_ACTUATORS_WITH_CHANNEL,
    CHAN_DELAY,
    TypeTag,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    MaxDepthExceededError,
    SchemaError,
    UnexpectedEndOfData,
    UnregisteredTypeError,
    VarintOverflowError,
    XLPPError,
)
from .models import (
    GPS,
    Accelerometer,
    Actuator,
    Actuators,
    ActuatorsWithChannel,
    Altitude,
    AnalogInput,
    AnalogOutput,
    Array,
    BarometricPressure,
    Binary,
    Bool,
    Colour,
    Concentration,
    Current,
    Delay,
    DigitalInput,
    DigitalOutput,
    Direction,
    Distance,
    Energy,
    Frequency,
    Gyrometer,
    Integer,
    Luminosity,
    Marker,
    Null,
    Object,
    Percentage,
    Power,
    Presence,
    RelativeHumidity,
    ScalarValue,
    String,
    Switch,
    Temperature,
    UnixTime,
    Value,
    Voltage,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Reader",
    "Writer",
    "encode",
    "decode",
    "CodecConfig",
    # Registry
    "REGISTRY",
    "new_value",
    "registered_types",
    "TypeTag",
    "CHAN_DELAY",
    "CHAN_ACTUATORS",
    "CHAN_ACTUATORS_WITH_CHANNEL",
    # Exceptions
    "XLPPError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "UnexpectedEndOfData",
    "UnregisteredTypeError",
    "VarintOverflowError",
    "MaxDepthExceededError",
    # Bases
    "Value",
    "ScalarValue",
    "Marker",
    # Scalars
    "DigitalInput",
    "DigitalOutput",
    "AnalogInput",
    "AnalogOutput",
    "Luminosity",
    "Presence",
    "Temperature",
    "RelativeHumidity",
    "Accelerometer",
    "BarometricPressure",
    "Voltage",
    "Current",
    "Frequency",
    "Percentage",
    "Altitude",
    "Concentration",
    "Power",
    "Distance",
    "Energy",
    "Direction",
    "UnixTime",
    "Gyrometer",
    "Colour",
    "GPS",
    "Switch",
    # Primitives
    "Integer",
    "String",
    "Bool",
    "Null",
    "Binary",
    # Containers
    "Object",
    "Array",
    # Markers
    "Delay",
    "Actuators",
    "Actuator",
    "ActuatorsWithChannel",
    # Version
    "__version__",
]
