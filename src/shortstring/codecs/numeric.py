"""Plain decimal codec: values are their usual base-10 strings."""

from shortstring.alphanumeric.blocks import check_range, fail, signed_range
from shortstring.codecs.base import ShortStringCodec
from shortstring.core.errors import DecodeError, ErrorKind

SIGN = "-"

MAX_SHORT_STRING = str(signed_range(16)[1])
MIN_SHORT_STRING = str(signed_range(16)[0])
MAX_INT_STRING = str(signed_range(32)[1])
MIN_INT_STRING = str(signed_range(32)[0])
MAX_LONG_STRING = str(signed_range(64)[1])
MIN_LONG_STRING = str(signed_range(64)[0])


def parse_signed(chars: str, width: int, radix: int = 10) -> int:
    """
    Parse an optionally signed ('+' or '-') number in the given radix.

    Letters are accepted in either case for radix 16.

    Raises:
        DecodeError: on empty input, a lone sign, an illegal character or a
            value outside the signed range of width bits
    """
    if not isinstance(chars, str):
        raise TypeError(f"Expected str, got {type(chars).__name__}")
    if not chars:
        raise fail(ErrorKind.EMPTY_INPUT, chars)
    negative = chars[0] == "-"
    off = 1 if chars[0] in "+-" else 0
    if len(chars) == off:
        raise fail(ErrorKind.SIGN_ONLY_INPUT, chars)

    low, high = signed_range(width)
    limit = -low if negative else high
    result = 0
    for ch in chars[off:]:
        digit = _digit(ch, radix)
        if digit < 0:
            raise fail(ErrorKind.ILLEGAL_CHARACTER, chars, f"{ch!r} is not a base-{radix} digit")
        result = result * radix + digit
        if result > limit:
            raise fail(ErrorKind.BOUNDARY_OVERFLOW, chars, f"outside [{low}, {high}]")
    return -result if negative else result


def _digit(ch: str, radix: int) -> int:
    if "0" <= ch <= "9":
        value = ord(ch) - ord("0")
    elif "A" <= ch <= "Z":
        value = ord(ch) - ord("A") + 10
    elif "a" <= ch <= "z":
        value = ord(ch) - ord("a") + 10
    else:
        return -1
    return value if value < radix else -1


def is_parsable(chars: str, width: int, radix: int = 10) -> bool:
    """True if parse_signed(chars, width, radix) would succeed."""
    if not isinstance(chars, str):
        return False
    try:
        parse_signed(chars, width, radix)
    except DecodeError:
        return False
    return True


class NumericCodec(ShortStringCodec):
    """Decimal strings, e.g. 12345 <-> "12345" and -7 <-> "-7"."""

    name = "numeric"

    def max_short_length(self, signed: bool = False) -> int:
        return len(MIN_SHORT_STRING) if signed else len(MAX_SHORT_STRING)

    def max_int_length(self, signed: bool = False) -> int:
        return len(MIN_INT_STRING) if signed else len(MAX_INT_STRING)

    def max_long_length(self, signed: bool = False) -> int:
        return len(MIN_LONG_STRING) if signed else len(MAX_LONG_STRING)

    def to_short(self, chars: str) -> int:
        return parse_signed(chars, 16)

    def to_int(self, chars: str) -> int:
        return parse_signed(chars, 32)

    def to_long(self, chars: str) -> int:
        return parse_signed(chars, 64)

    def short_to_string(self, value: int) -> str:
        check_range(value, 16)
        return str(value)

    def int_to_string(self, value: int) -> str:
        check_range(value, 32)
        return str(value)

    def long_to_string(self, value: int) -> str:
        check_range(value, 64)
        return str(value)

    def is_convertible_to_short(self, chars: str) -> bool:
        return is_parsable(chars, 16)

    def is_convertible_to_int(self, chars: str) -> bool:
        return is_parsable(chars, 32)

    def is_convertible_to_long(self, chars: str) -> bool:
        return is_parsable(chars, 64)

    def starts_with_sign_char(self, chars: str) -> bool:
        return isinstance(chars, str) and chars.startswith(SIGN)


NUMERIC = NumericCodec()
