"""Field type helpers and utilities.

This module provides convenience functions for declaring the wire layout of
value fields.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def FixedPoint(
    *, width: int, signed: bool = False, scale: int = 1, default: Any = 0, **kwargs: Any
) -> FieldInfo:
    """Create a fixed-point field.

    The field is encoded as ``round(value * scale)`` in a big-endian integer
    of ``width`` bytes. Values that do not fit wrap around silently.

    Args:
        width: Size on the wire in bytes (1-4)
        signed: Whether the wire integer is two's complement (default False)
        scale: Resolution multiplier, e.g. 10 for 0.1 steps (default 1)
        default: Zero value of the field
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Examples:
        >>> class Temperature(ScalarValue):
        ...     # 0.1 °C resolution, 2 bytes signed
        ...     value: float = FixedPoint(width=2, signed=True, scale=10, default=0.0)
        ...
        ...     # -3276.8 to 3276.7 °C

    Note:
        ``width``, ``signed`` and ``scale`` are stored as extra metadata for
        xlpp. They do not constrain the value; the codec reads them through
        ``ValueSchema``.
    """
    return cast(
        FieldInfo,
        Field(
            default=default,
            json_schema_extra={"width": width, "signed": signed, "scale": scale},
            **kwargs,
        ),
    )


def ByteId(**kwargs: Any) -> FieldInfo:
    """Create a one-byte identifier field (channel or type tag, 0-255).

    Example:
        >>> class Actuator(BaseModel):
        ...     channel: int = ByteId()
    """
    kwargs.setdefault("default", 0)
    return cast(FieldInfo, Field(ge=0, le=255, **kwargs))
