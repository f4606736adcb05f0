"""32-bit alphanumeric codec: strings of up to 6 characters (7 with sign).

    "0" .. "999999"        0 .. 999,999
    "A" .. "ZZZZZZ"        letter-prefixed
    "00" .. "0ZZZZZ"       zero-prefixed
    "1A" .. "7XIZYJ"       digit-prefixed, cut at 2^31 - 1

Negative values carry a sign: "-123" for numeric codes, ".HELLO" otherwise.
The most negative value is ".7XIZYK".
"""

from typing import TextIO

from shortstring.alphanumeric.blocks import (
    BlockScheme,
    check_range,
    checked_type,
    classify,
    decode_digits,
    encode_digits,
    exceeds_boundary,
    fail,
)
from shortstring.core.chars import ALPHANUMERIC_SIGN, NUMERIC_SIGN
from shortstring.core.errors import ErrorKind
from shortstring.core.packing import PackedSeq
from shortstring.core.seq_type import SeqType

WIDTH = 32
MAX_LENGTH_UNSIGNED = 6
MAX_LENGTH_SIGNED = MAX_LENGTH_UNSIGNED + 1

MIN_VALUE = -(1 << 31)
MAX_VALUE = (1 << 31) - 1
MIN_NUMERIC = -999_999
MAX_NUMERIC = 999_999

MAX_STRING = "7XIZYJ"
MIN_STRING = ".7XIZYK"

SCHEME = BlockScheme.create(WIDTH, MAX_LENGTH_UNSIGNED, MAX_LENGTH_UNSIGNED)

_END = MAX_LENGTH_UNSIGNED - 1


def max_unsigned_length() -> int:
    """Longest unsigned string this codec produces."""
    return MAX_LENGTH_UNSIGNED


def max_signed_length() -> int:
    """Longest string including the sign character."""
    return MAX_LENGTH_SIGNED


def to_seq(value: int) -> int:
    """Packed (one word) representation of value."""
    check_range(value, WIDTH)
    magnitude = abs(value)
    out = PackedSeq()
    if magnitude < SCHEME.numeric:
        start = encode_digits(magnitude, out, _END)
        sign = NUMERIC_SIGN
    else:
        start = SCHEME.encode_alphanumeric(magnitude, out, _END)
        sign = ALPHANUMERIC_SIGN
    out.align(start, sign if value < 0 else None)
    return out.word


def encode(value: int) -> str:
    """String representation of value."""
    return str(PackedSeq(to_seq(value)))


def encode_into(value: int, out: TextIO) -> int:
    """Write the representation of value to out; returns the number of characters written."""
    chars = encode(value)
    out.write(chars)
    return len(chars)


def _overflows(chars: str, seq_type: SeqType) -> bool:
    off = 1 if seq_type.is_signed() else 0
    return (seq_type.is_digit_prefix_alphanumeric()
            and SCHEME.in_terminal_sub_block(chars, off)
            and exceeds_boundary(chars, MAX_STRING, MIN_STRING))


def decode(chars: str) -> int:
    """
    Decode a string of up to 6 characters (plus sign) into a 32-bit value.

    Raises:
        DecodeError: if chars is not the representation of any 32-bit value
    """
    seq_type = checked_type(chars, MAX_LENGTH_UNSIGNED)
    signed = seq_type.is_signed()
    off = 1 if signed else 0
    if seq_type.is_numeric():
        code = decode_digits(chars, off)
    else:
        if _overflows(chars, seq_type):
            raise fail(ErrorKind.BOUNDARY_OVERFLOW, chars,
                       f"beyond {MIN_STRING if signed else MAX_STRING}")
        code = SCHEME.decode_alphanumeric(chars, off, seq_type)
    return -code if signed else code


def is_convertible(chars: str) -> bool:
    """True if decode(chars) would succeed. Never raises."""
    seq_type = classify(chars, MAX_LENGTH_UNSIGNED)
    if seq_type is SeqType.INVALID:
        return False
    return not _overflows(chars, seq_type)
