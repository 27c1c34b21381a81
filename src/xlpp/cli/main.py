"""Main CLI entry point for xlpp."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .. import __version__
from ..exceptions import XLPPError
from .convert import (
    TYPE_NAMES,
    base64_to_xlpp,
    json_to_xlpp,
    value_to_json,
    xlpp_to_base64,
    xlpp_to_json,
)


def _read_input(arg: str | None) -> bytes:
    if arg:
        return arg.encode("utf-8")
    return sys.stdin.buffer.read()


def list_types() -> None:
    """Print every type name with its zero value in JSON."""
    print("JSON format: { <type><channel>: value, ... }")
    print("XLPP types and example zero value:")
    for name, cls in TYPE_NAMES.items():
        print(f"{name:>21}: {json.dumps(value_to_json(cls()), ensure_ascii=False)}")


def main() -> int:
    """Main entry point for the xlpp CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="xlpp",
        description="xlpp: Extended Low Power Payload codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  xlpp -e '{"temperature5": 23.5}'      Encode JSON to base64
  xlpp -d 'BWcA6w=='                    Decode base64 to JSON
  xlpp -d -f bin < payload.bin          Decode raw bytes from stdin
  xlpp --types                          List type names
        """,
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encode", action="store_true", help="encode JSON to XLPP")
    mode.add_argument("-d", "--decode", action="store_true", help="decode XLPP to JSON")
    mode.add_argument("--types", action="store_true", help="list type names and zero values")

    parser.add_argument(
        "-f",
        "--format",
        choices=["b64", "base64", "bin"],
        default="b64",
        help="binary side format (default: b64)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log decoded frames")
    parser.add_argument("--version", action="version", version=f"xlpp {__version__}")
    parser.add_argument("data", nargs="?", help="input data (default: read stdin)")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.types:
        list_types()
        return 0

    try:
        if args.encode:
            data = json_to_xlpp(_read_input(args.data))
            if args.format == "bin":
                sys.stdout.buffer.write(data)
            else:
                print(xlpp_to_base64(data))
            return 0

        if args.decode:
            data = _read_input(args.data)
            if args.format != "bin":
                data = base64_to_xlpp(data)
            print(xlpp_to_json(data))
            return 0
    except (XLPPError, ValidationError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
