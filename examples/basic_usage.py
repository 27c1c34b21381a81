#!/usr/bin/env python3
"""Basic usage example for xlpp.

This example demonstrates:
1. Building a message from sensor values
2. Encoding it to the XLPP wire format
3. Decoding it back from a stream
4. Reading historical values behind Delay markers
"""

from __future__ import annotations

import io
from datetime import timedelta

from xlpp import (
    GPS,
    Array,
    Bool,
    Delay,
    Integer,
    Object,
    Reader,
    RelativeHumidity,
    String,
    Temperature,
    Writer,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("xlpp Basic Usage Example")
    print("=" * 60)
    print()

    # Write a message to an in-memory stream
    print("1. Encoding sensor values...")
    buf = io.BytesIO()
    writer = Writer(buf)
    writer.add(1, Temperature(value=21.5))
    writer.add(2, RelativeHumidity(value=40.5))
    writer.add(3, GPS(latitude=51.0493, longitude=13.7381, altitude=122))
    writer.add(
        4,
        Object(
            value={
                "firmware": String(value="1.4.2"),
                "uptime": Integer(value=86400),
                "flags": Array(value=[Bool(value=True), Bool(value=False)]),
            }
        ),
    )

    # Older readings follow a Delay marker
    writer.add_marker(Delay.from_seconds(600))
    writer.add(1, Temperature(value=20.9))

    data = buf.getvalue()
    print(f"   Encoded {len(data)} bytes: {data.hex()}")
    print()

    # Read it back
    print("2. Decoding...")
    elapsed = timedelta(0)
    for channel, value in Reader(io.BytesIO(data)):
        if isinstance(value, Delay):
            elapsed += value.value
            print(f"   --- values below are {value} old ---")
            continue
        print(f"   channel {channel:3d} {type(value).__name__:>16}: {value}")
    print()

    print(f"3. Oldest reading is {elapsed} old")
    print()
    print("=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
