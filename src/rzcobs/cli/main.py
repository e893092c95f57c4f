"""Main CLI entry point for rzcobs."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec import decode
from ..exceptions import MalformedError
from .dump import DEFAULT_CHUNK_SIZE, dump_stream, open_source


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the rzcobs CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="rzcobs",
        description="rzcobs: rzCOBS stream decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rzcobs dump capture.bin               List frames in a captured stream
  cat /dev/ttyACM0 | rzcobs dump -      Decode frames from stdin
  rzcobs decode 01020304050607 80       Decode a single encoded frame
        """,
    )
    parser.add_argument("--version", action="version", version=f"rzcobs {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    dump_parser = subparsers.add_parser("dump", help="List the frames in a byte stream")
    dump_parser.add_argument("file", metavar="FILE", help="Stream capture, or - for stdin")
    dump_parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes fed to the decoder per read (default {DEFAULT_CHUNK_SIZE})",
    )
    dump_parser.add_argument(
        "--strip-padding",
        action="store_true",
        help="Drop trailing zero padding from payloads",
    )

    decode_parser = subparsers.add_parser("decode", help="Decode one encoded frame")
    decode_parser.add_argument("hex", nargs="+", metavar="HEX", help="Encoded frame as hex")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "dump":
        if args.chunk_size <= 0:
            print(f"Error: --chunk-size must be > 0, got {args.chunk_size}", file=sys.stderr)
            return 1
        try:
            stream = open_source(args.file)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        with stream:
            dump_stream(stream, chunk_size=args.chunk_size, strip_padding=args.strip_padding)
        return 0

    if args.command == "decode":
        try:
            data = bytes.fromhex("".join(args.hex))
            print(decode(data).hex(" "))
        except ValueError as e:
            print(f"Error: invalid hex: {e}", file=sys.stderr)
            return 1
        except MalformedError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
