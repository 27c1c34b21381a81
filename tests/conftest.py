"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from datetime import datetime, timezone

import pytest

from xlpp import (
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
    Null,
    Object,
    Percentage,
    Power,
    Presence,
    RelativeHumidity,
    String,
    Switch,
    Temperature,
    TypeTag,
    UnixTime,
    Value,
    Voltage,
)


@pytest.fixture
def buffer() -> io.BytesIO:
    """Empty in-memory binary stream."""
    return io.BytesIO()


@pytest.fixture
def sample_time() -> datetime:
    """Sample timestamp for UnixTime values."""
    return datetime(2006, 1, 2, 22, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def sample_values(sample_time: datetime) -> list[Value]:
    """One value of every registered variant."""
    return [
        # LPP types
        DigitalInput(value=12),
        DigitalOutput(value=12),
        AnalogInput(value=3.75),
        AnalogOutput(value=4.25),
        Luminosity(value=45),
        Presence(value=5),
        Temperature(value=31.6),
        RelativeHumidity(value=22.5),
        Accelerometer(x=3.245, y=-0.171, z=0.909),
        BarometricPressure(value=4.1),
        Gyrometer(x=4.25, y=5.10, z=0.21),
        GPS(latitude=51.0493, longitude=13.7381, altitude=122),
        # Extended LPP types
        Voltage(value=1.45),
        Current(value=4.41),
        Frequency(value=8100),
        Percentage(value=17),
        Altitude(value=8849),
        Concentration(value=2512),
        Power(value=1142),
        Distance(value=2.411),
        Energy(value=2.876),
        Direction(value=90),
        UnixTime(value=sample_time),
        Colour(r=123, g=54, b=89),
        Switch(value=True),
        # XLPP types
        Null(),
        Binary(value=bytes([1, 2, 3, 7, 8, 9])),
        Integer(value=5182),
        String(value="test :)"),
        Bool(value=True),
        Bool(value=False),
        Object(
            value={
                "count": Integer(value=5182),
                "pos": GPS(latitude=51.0493, longitude=13.7381, altitude=122),
                "val": DigitalInput(value=12),
            }
        ),
        Array(value=[Presence(value=5), Luminosity(value=45), Temperature(value=31.6)]),
    ]


@pytest.fixture
def sample_markers() -> list[Value]:
    """One marker of every kind."""
    return [
        Delay.from_seconds(4235),
        Actuators(value=[TypeTag.COLOUR, TypeTag.ANALOG_OUTPUT, TypeTag.SWITCH]),
        ActuatorsWithChannel(
            value=[
                Actuator(channel=3, type=TypeTag.VOLTAGE),
                Actuator(channel=17, type=TypeTag.COLOUR),
            ]
        ),
    ]
