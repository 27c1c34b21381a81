"""JSON <-> XLPP conversion used by the command line tool.

A message is represented as a JSON object whose keys are
``<type name><channel>``, e.g. ``{"temperature5": 23.5, "delay253": 600}``.
Nested Object and Array elements are single-key objects ``{type name: json}``.
"""

from __future__ import annotations

import base64
import binascii
import io
import json
import re
from typing import Any

from ..codec import Reader, Writer, registered_types
from ..exceptions import DecodeError, EncodeError
from ..models import Actuators, ActuatorsWithChannel, Array, Delay, Object, Value

JSON_KEY_PATTERN = re.compile(r"^([a-zA-Z]+)([0-9]+)$")


def type_name(value: Value | type[Value]) -> str:
    """Return the JSON type name of a value or value class."""
    cls = value if isinstance(value, type) else type(value)
    return cls.__name__.lower()


def _build_type_names() -> dict[str, type[Value]]:
    names = {type_name(cls): cls for cls in registered_types()}
    for marker in (Delay, Actuators, ActuatorsWithChannel):
        names[type_name(marker)] = marker
    return names


# JSON type name -> value class
TYPE_NAMES: dict[str, type[Value]] = _build_type_names()


def value_to_json(value: Value) -> Any:
    """Convert a value to JSON-compatible data, recursing into containers."""
    if isinstance(value, Object):
        return {key: _tagged_to_json(value.value[key]) for key in sorted(value.value)}
    if isinstance(value, Array):
        return [_tagged_to_json(item) for item in value.value]
    return value.to_json()


def value_from_json(name: str, data: Any) -> Value:
    """Build a value of the named type from JSON-compatible data.

    Raises:
        ValueError: If the type name is unknown or the data does not fit it
    """
    cls = TYPE_NAMES.get(name.lower())
    if cls is None:
        raise ValueError(f"unknown type: {name}")
    if cls is Object:
        if not isinstance(data, dict):
            raise ValueError(f"object expects a JSON object, got {data!r}")
        return Object(value={key: _tagged_from_json(item) for key, item in data.items()})
    if cls is Array:
        if not isinstance(data, list):
            raise ValueError(f"array expects a JSON array, got {data!r}")
        return Array(value=[_tagged_from_json(item) for item in data])
    return cls.from_json(data)


def _tagged_to_json(value: Value) -> dict[str, Any]:
    return {type_name(value): value_to_json(value)}


def _tagged_from_json(data: Any) -> Value:
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"nested values must be {{type name: value}} objects, got {data!r}")
    ((name, item),) = data.items()
    return value_from_json(name, item)


def json_to_xlpp(text: str | bytes) -> bytes:
    """Encode a JSON message to XLPP bytes.

    Raises:
        ValueError: If the JSON is malformed or names an unknown type
        EncodeError: If a value cannot be written on its channel
    """
    entries = json.loads(text)
    if not isinstance(entries, dict):
        raise ValueError("JSON message must be an object of {typeChannel: value}")

    buf = io.BytesIO()
    writer = Writer(buf)
    for key, data in entries.items():
        match = JSON_KEY_PATTERN.match(key)
        if match is None:
            raise ValueError(f"bad json entry: {key}")
        name, channel = match.group(1), int(match.group(2))
        try:
            value = value_from_json(name, data)
        except ValueError as e:
            raise ValueError(f"can not convert {key!r}: {e}") from e
        try:
            writer.add(channel, value)
        except EncodeError as e:
            raise EncodeError(f"can not write {key!r}: {e}") from e
    return buf.getvalue()


def xlpp_to_json(data: bytes) -> str:
    """Decode XLPP bytes to a JSON message.

    A later value on the same channel and type replaces an earlier one.

    Raises:
        DecodeError: If the data is truncated or malformed
    """
    values: dict[str, Any] = {}
    for channel, value in Reader(io.BytesIO(data)):
        values[f"{type_name(value)}{channel}"] = value_to_json(value)
    return json.dumps(values, ensure_ascii=False)


def base64_to_xlpp(text: str | bytes) -> bytes:
    """Decode standard base64 text to raw bytes."""
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"invalid base64: {e}") from e


def xlpp_to_base64(data: bytes) -> str:
    """Encode raw bytes as standard base64 text."""
    return base64.b64encode(data).decode("ascii")
