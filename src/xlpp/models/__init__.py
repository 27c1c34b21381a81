"""Value models for xlpp.

This package defines every XLPP variant as a pydantic model: fixed-point
scalars, primitives, containers and markers.
"""

from __future__ import annotations

from .base import Marker, ScalarValue, Value
from .containers import Array, EndOfArray, Object
from .fields import ByteId, FixedPoint
from .markers import Actuator, Actuators, ActuatorsWithChannel, Delay
from .primitives import Binary, Bool, Integer, Null, String
from .scalars import (
    GPS,
    Accelerometer,
    Altitude,
    AnalogInput,
    AnalogOutput,
    BarometricPressure,
    Colour,
    Concentration,
    Current,
    DigitalInput,
    DigitalOutput,
    Direction,
    Distance,
    Energy,
    Frequency,
    Gyrometer,
    Luminosity,
    Percentage,
    Power,
    Presence,
    RelativeHumidity,
    Switch,
    Temperature,
    UnixTime,
    Voltage,
)

__all__ = [
    # Bases
    "Value",
    "ScalarValue",
    "Marker",
    # Field helpers
    "FixedPoint",
    "ByteId",
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
    "EndOfArray",
    # Markers
    "Delay",
    "Actuators",
    "Actuator",
    "ActuatorsWithChannel",
]
