"""conv: convert a value from the command line, or serve the HTTP API."""

from __future__ import annotations

import argparse
import socket
import sys

from unitconv.config import settings
from unitconv.core.converter import convert, list_families
from unitconv.core.errors import UnitError
from unitconv.core.registry import Registry, build_registry
from unitconv.core.value import display, parse


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((settings.host, 0))
        return s.getsockname()[1]


def print_units(registry: Registry) -> None:
    print("Available units")
    for family_id, units in list_families(registry).items():
        print(f"\n**{family_id}:**")
        for unit in units:
            print(f"{unit.symbol} - {unit.name}")


def serve() -> None:
    import uvicorn

    port = settings.port or find_free_port()
    print(f"Starting {settings.app_name} on http://{settings.host}:{port}")
    print("Press Ctrl+C to stop.\n")

    uvicorn.run(
        "unitconv.main:app",
        host=settings.host,
        port=port,
        log_level="debug" if settings.debug else "info",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conv",
        description="A simple little program to convert values between units.",
    )
    parser.add_argument("value", nargs="?", help='value to convert, e.g. "100c"')
    parser.add_argument("to_unit", nargs="?", help='unit to convert into, e.g. "f"')
    parser.add_argument("-u", "--units", action="store_true", help="list the available units")
    parser.add_argument("--serve", action="store_true", help="start the HTTP API")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    registry = build_registry()

    if args.units:
        print_units(registry)
        return 0

    if args.serve:
        serve()
        return 0

    if args.value is None or args.to_unit is None:
        parser.error("the following arguments are required: value, to_unit")

    try:
        result = convert(registry, parse(args.value), args.to_unit)
    except UnitError as e:
        print(e, file=sys.stderr)
        return 1

    print(display(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
