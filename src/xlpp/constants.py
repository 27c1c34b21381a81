"""Wire constants: type tags and reserved channels."""

from __future__ import annotations

import enum


class TypeTag(enum.IntEnum):
    """Type tag byte of every XLPP wire encoding."""

    # LPP types
    DIGITAL_INPUT = 0
    DIGITAL_OUTPUT = 1
    ANALOG_INPUT = 2
    ANALOG_OUTPUT = 3
    LUMINOSITY = 101
    PRESENCE = 102
    TEMPERATURE = 103
    RELATIVE_HUMIDITY = 104
    ACCELEROMETER = 113
    BAROMETRIC_PRESSURE = 115
    VOLTAGE = 116
    CURRENT = 117
    FREQUENCY = 118
    PERCENTAGE = 120
    ALTITUDE = 121
    CONCENTRATION = 125
    POWER = 128
    DISTANCE = 130
    ENERGY = 131
    DIRECTION = 132
    UNIX_TIME = 133
    GYROMETER = 134
    COLOUR = 135
    GPS = 136
    SWITCH = 142

    # XLPP types
    INTEGER = 51
    STRING = 52
    BOOL = 53  # reserved, not registered
    BOOL_TRUE = 54
    BOOL_FALSE = 55
    FLAGS = 56  # reserved, not registered
    BINARY = 57
    NULL = 58
    ARRAY = 91  # '['
    END_OF_ARRAY = 93  # ']'
    OBJECT = 123  # '{'


# Terminates an Object; only ever read where a key would start.
END_OF_OBJECT = 0

# Placeholder tag of markers. Markers are identified by channel, never by tag.
MARKER_TYPE = 255

# Channels 250-255 are reserved.
CHAN_RESERVED_MIN = 250
CHAN_ACTUATORS_WITH_CHANNEL = 251
CHAN_ACTUATORS = 252
CHAN_DELAY = 253
CHAN_MAX = 255
