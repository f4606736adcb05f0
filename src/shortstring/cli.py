"""
Command-line interface for shortstring.

    shortstring encode 1000000             -> A (32-bit alphanumeric)
    shortstring decode HELLO --width 64
    shortstring check .R9Q --width 16
    shortstring info --codec hex
"""
from __future__ import annotations

import argparse
import logging
import sys

from shortstring.alphanumeric.blocks import signed_range
from shortstring.codecs.base import WIDTHS
from shortstring.config import CODEC_NAMES, Settings, load_settings
from shortstring.logging_config import configure_logging
from shortstring.short_string import ShortString

logger = logging.getLogger(__name__)


def _codec(args: argparse.Namespace) -> ShortString:
    return ShortString.for_name(args.codec)


def cmd_encode(args: argparse.Namespace) -> int:
    """Print the string for an integer value."""
    try:
        value = int(args.value)
    except ValueError:
        raise ValueError(f"Not an integer: {args.value!r}") from None
    print(_codec(args).codec.to_string(value, args.width))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Print the integer value of a string."""
    print(_codec(args).codec.to_value(args.string, args.width))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Exit 0 if the string converts, 1 otherwise."""
    ok = _codec(args).codec.is_convertible(args.string, args.width)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


def cmd_info(args: argparse.Namespace) -> int:
    """Show lengths and boundary strings."""
    codec = _codec(args).codec
    low, high = signed_range(args.width)
    print(f"Codec: {args.codec} ({args.width}-bit)")
    print(f"  Max length:        {codec.max_length(args.width)}")
    print(f"  Max signed length: {codec.max_length(args.width, signed=True)}")
    print(f"  Max value:         {high} = {codec.to_string(high, args.width)}")
    print(f"  Min value:         {low} = {codec.to_string(low, args.width)}")
    return 0


def create_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Create the argument parser; defaults come from settings."""
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="shortstring",
        description="Convert short strings to integers and back",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--width",
        type=int,
        choices=WIDTHS,
        default=settings.width,
        help=f"Integer width in bits (default: {settings.width})",
    )
    common.add_argument(
        "--codec",
        choices=CODEC_NAMES,
        default=settings.codec,
        help=f"Codec (default: {settings.codec})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Encode command
    encode_parser = subparsers.add_parser("encode", parents=[common], help="Integer to string")
    encode_parser.add_argument("value", help="Integer value")
    encode_parser.set_defaults(func=cmd_encode)

    # Decode command
    decode_parser = subparsers.add_parser("decode", parents=[common], help="String to integer")
    decode_parser.add_argument("string", help="String to decode")
    decode_parser.set_defaults(func=cmd_decode)

    # Check command
    check_parser = subparsers.add_parser("check", parents=[common],
                                         help="Test whether a string converts")
    check_parser.add_argument("string", help="String to check")
    check_parser.set_defaults(func=cmd_check)

    # Info command
    info_parser = subparsers.add_parser("info", parents=[common],
                                        help="Show lengths and boundary strings")
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    parser = create_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 2

    try:
        return args.func(args)
    except ValueError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
