"""Hexadecimal codec: upper-case magnitude with a '-' sign for negative values.

    255   <-> "FF"
    -255  <-> "-FF"

Parsing accepts upper and lower case digits.
"""

from shortstring.alphanumeric.blocks import check_range
from shortstring.codecs.base import ShortStringCodec
from shortstring.codecs.numeric import SIGN, is_parsable, parse_signed

MAX_SHORT_STRING = "7FFF"
MIN_SHORT_STRING = "-8000"
MAX_INT_STRING = "7FFFFFFF"
MIN_INT_STRING = "-80000000"
MAX_LONG_STRING = "7FFFFFFFFFFFFFFF"
MIN_LONG_STRING = "-8000000000000000"


def to_hex(value: int) -> str:
    """Upper-case hex digits of value with a leading '-' when negative."""
    return f"{SIGN if value < 0 else ''}{abs(value):X}"


class HexCodec(ShortStringCodec):
    """Base-16 strings."""

    name = "hex"

    def max_short_length(self, signed: bool = False) -> int:
        return len(MIN_SHORT_STRING) if signed else len(MAX_SHORT_STRING)

    def max_int_length(self, signed: bool = False) -> int:
        return len(MIN_INT_STRING) if signed else len(MAX_INT_STRING)

    def max_long_length(self, signed: bool = False) -> int:
        return len(MIN_LONG_STRING) if signed else len(MAX_LONG_STRING)

    def to_short(self, chars: str) -> int:
        return parse_signed(chars, 16, radix=16)

    def to_int(self, chars: str) -> int:
        return parse_signed(chars, 32, radix=16)

    def to_long(self, chars: str) -> int:
        return parse_signed(chars, 64, radix=16)

    def short_to_string(self, value: int) -> str:
        check_range(value, 16)
        return to_hex(value)

    def int_to_string(self, value: int) -> str:
        check_range(value, 32)
        return to_hex(value)

    def long_to_string(self, value: int) -> str:
        check_range(value, 64)
        return to_hex(value)

    def is_convertible_to_short(self, chars: str) -> bool:
        return is_parsable(chars, 16, radix=16)

    def is_convertible_to_int(self, chars: str) -> bool:
        return is_parsable(chars, 32, radix=16)

    def is_convertible_to_long(self, chars: str) -> bool:
        return is_parsable(chars, 64, radix=16)

    def starts_with_sign_char(self, chars: str) -> bool:
        return isinstance(chars, str) and chars.startswith(SIGN)


HEX = HexCodec()
