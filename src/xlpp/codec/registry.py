"""Type registry: type tag -> zero value constructor.

The registry is built once at import time and is read-only afterwards, so it
can be shared freely between readers. Markers are not registered: they are
identified by their reserved channel, never by a type tag.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from ..constants import TypeTag
from ..exceptions import UnregisteredTypeError
from ..models import (
    GPS,
    Accelerometer,
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
    DigitalInput,
    DigitalOutput,
    Direction,
    Distance,
    EndOfArray,
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
    UnixTime,
    Value,
    Voltage,
)

logger = logging.getLogger(__name__)

ValueFactory = Callable[[], Value]


def _bool_true() -> Value:
    return Bool(value=True)


def _bool_false() -> Value:
    return Bool(value=False)


def _build_registry() -> Mapping[int, ValueFactory]:
    classes: list[type[Value]] = [
        # LPP types
        DigitalInput,
        DigitalOutput,
        AnalogInput,
        AnalogOutput,
        Luminosity,
        Presence,
        Temperature,
        RelativeHumidity,
        Accelerometer,
        BarometricPressure,
        Gyrometer,
        GPS,
        # Extended LPP types
        Voltage,
        Current,
        Frequency,
        Percentage,
        Altitude,
        Concentration,
        Power,
        Distance,
        Energy,
        Direction,
        UnixTime,
        Colour,
        Switch,
        # XLPP types
        Integer,
        String,
        Binary,
        Null,
        Object,
        Array,
        EndOfArray,
    ]

    registry: dict[int, ValueFactory] = {}
    for cls in classes:
        tag = int(cls.xlpp_type)
        if tag in registry:
            raise ValueError(f"type tag 0x{tag:02x} registered twice")
        registry[tag] = cls

    # Booleans share one class; the tag carries the state
    registry[int(TypeTag.BOOL_TRUE)] = _bool_true
    registry[int(TypeTag.BOOL_FALSE)] = _bool_false

    return MappingProxyType(registry)


# Global registry: type tag -> zero value factory
REGISTRY: Mapping[int, ValueFactory] = _build_registry()


def new_value(tag: int) -> Value:
    """Create the zero value registered for a type tag.

    Args:
        tag: Type tag byte read from the wire

    Returns:
        Fresh Value instance to decode the payload into

    Raises:
        UnregisteredTypeError: If no variant is registered for the tag

    Example:
        >>> new_value(103)
        Temperature(value=0.0)
    """
    factory = REGISTRY.get(tag)
    if factory is None:
        logger.debug("No registry entry for type tag 0x%02x", tag)
        raise UnregisteredTypeError(tag)
    return factory()


def registered_types() -> list[type[Value]]:
    """Return every registered Value class once, in tag order.

    The end-of-array sentinel is excluded since it never appears as a value.
    """
    seen: list[type[Value]] = []
    for tag in sorted(REGISTRY):
        cls = type(REGISTRY[tag]())
        if cls is not EndOfArray and cls not in seen:
            seen.append(cls)
    return seen
