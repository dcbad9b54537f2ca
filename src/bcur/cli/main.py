"""Main CLI entry point for bcur."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..bytewords import Variant
from ..bytewords import encode as encode_bytewords
from ..config import DEFAULT_MAX_INFLATED_SIZE, DecodeConfig
from ..exceptions import BcurError
from ..pipeline import decode_export


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bcur",
        description="bcur: Bytewords account export decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bcur decode lpaxhdcx...                Decode a minimal bytewords export to JSON
  bcur decode --standard "able acid ..." Decode space-separated words
  bcur encode 68656c6c6f                 Encode hex bytes as minimal bytewords
  bcur --version                         Show version
        """,
    )
    parser.add_argument("--version", action="version", version=f"bcur {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log output (-vv for debug)"
    )

    subparsers = parser.add_subparsers(dest="command")

    decode_parser = subparsers.add_parser("decode", help="Decode an export and print it as JSON")
    decode_parser.add_argument("text", help="Bytewords-encoded export")
    _add_variant_arguments(decode_parser)
    decode_parser.add_argument(
        "--max-inflated-size",
        metavar="BYTES",
        type=int,
        default=DEFAULT_MAX_INFLATED_SIZE,
        help=f"Reject exports inflating past this size (default {DEFAULT_MAX_INFLATED_SIZE})",
    )

    encode_parser = subparsers.add_parser("encode", help="Encode hex bytes as bytewords")
    encode_parser.add_argument("hex", help="Payload as a hex string")
    _add_variant_arguments(encode_parser)

    return parser


def _add_variant_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--standard",
        action="store_true",
        help="Use full four-letter words instead of the minimal two-letter form",
    )
    parser.add_argument(
        "--separator",
        default=" ",
        help="Word separator for --standard (default: space)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bcur CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    variant = Variant.STANDARD if args.standard else Variant.MINIMAL

    try:
        if args.command == "decode":
            config = DecodeConfig(max_inflated_size=args.max_inflated_size)
            root = decode_export(args.text, variant, separator=args.separator, config=config)
            print(root.model_dump_json(indent=2))
        else:
            payload = bytes.fromhex(args.hex)
            print(encode_bytewords(payload, variant, separator=args.separator))
    except (BcurError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
