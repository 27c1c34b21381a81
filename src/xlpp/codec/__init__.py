"""Binary codec for xlpp.

This module provides the stream Reader/Writer, the type registry and the
byte-level primitives they are built on.
"""

from __future__ import annotations

from .reader import Reader, decode, read_value
from .registry import REGISTRY, new_value, registered_types
from .schema import ValueSchema, WireField
from .writer import Writer, encode

__all__ = [
    "Reader",
    "Writer",
    "encode",
    "decode",
    "read_value",
    "REGISTRY",
    "new_value",
    "registered_types",
    "ValueSchema",
    "WireField",
]
