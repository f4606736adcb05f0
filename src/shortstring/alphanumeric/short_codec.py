"""16-bit alphanumeric codec: strings of up to 3 characters (4 with sign).

The 32-bit layout does not fit into 2^15 codes, so 16-bit values use their
own blocks:

    "0" .. "999"                       0 .. 999
    "A" .. "ZZ", "AA0" .. "ZZZ"        letter, letter [, alphanumeric]   25,038 codes
    "A0" .. "Z9", "A00" .. "R9P"       letter, digit [, alphanumeric]    cut at 32,767

Digit-prefixed alphanumerics ("00", "1A") have no 16-bit code.
"""

from typing import TextIO

from shortstring.alphanumeric.blocks import (
    check_range,
    checked_type,
    classify,
    decode_digits,
    encode_digits,
    fail,
)
from shortstring.core.chars import (
    ALPHANUMERIC_SIGN,
    NUMERIC_SIGN,
    from_alphanumeric,
    from_digit,
    from_letter,
    is_digit,
    is_sign_char,
    leq,
    to_alphanumeric,
    to_digit,
    to_letter,
)
from shortstring.core.errors import ErrorKind
from shortstring.core.packing import PackedSeq
from shortstring.core.seq_type import SeqType

WIDTH = 16
MAX_LENGTH_UNSIGNED = 3
MAX_LENGTH_SIGNED = MAX_LENGTH_UNSIGNED + 1

MIN_VALUE = -(1 << 15)
MAX_VALUE = (1 << 15) - 1
MIN_NUMERIC = -999
MAX_NUMERIC = 999

MAX_STRING = "R9P"
MIN_STRING = ".R9Q"

NUMERIC_BLOCK = 1000
LETTER_LETTER_BLOCK = 26 + 26 * 26 + 26 * 26 * 36
LETTER_DIGIT_OFFSET = NUMERIC_BLOCK + LETTER_LETTER_BLOCK
LETTER_DIGIT_CAPACITY = MAX_VALUE + 1 - LETTER_DIGIT_OFFSET

_END = MAX_LENGTH_UNSIGNED - 1


def max_unsigned_length() -> int:
    """Longest unsigned string this codec produces."""
    return MAX_LENGTH_UNSIGNED


def max_signed_length() -> int:
    """Longest string including the sign character."""
    return MAX_LENGTH_SIGNED


def _encode_letter_letter(val: int, out: PackedSeq) -> int:
    if val < 26:
        out.put(2, to_letter(val))
        return 2
    val -= 26
    if val < 26 * 26:
        out.put(2, to_letter(val))
        out.put(1, to_letter(val // 26))
        return 1
    val -= 26 * 26
    out.put(2, to_alphanumeric(val))
    val //= 36
    out.put(1, to_letter(val))
    out.put(0, to_letter(val // 26))
    return 0


def _encode_letter_digit(val: int, out: PackedSeq) -> int:
    if val < 260:
        out.put(2, to_digit(val))
        out.put(1, to_letter(val // 10))
        return 1
    val -= 260
    out.put(2, to_alphanumeric(val))
    val //= 36
    out.put(1, to_digit(val))
    out.put(0, to_letter(val // 10))
    return 0


def to_seq(value: int) -> int:
    """Packed (one word) representation of value."""
    check_range(value, WIDTH)
    magnitude = abs(value)
    out = PackedSeq()
    if magnitude < NUMERIC_BLOCK:
        start = encode_digits(magnitude, out, _END)
        sign = NUMERIC_SIGN
    elif magnitude < LETTER_DIGIT_OFFSET:
        start = _encode_letter_letter(magnitude - NUMERIC_BLOCK, out)
        sign = ALPHANUMERIC_SIGN
    else:
        start = _encode_letter_digit(magnitude - LETTER_DIGIT_OFFSET, out)
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


def _check_shape(chars: str, seq_type: SeqType) -> ErrorKind | None:
    if seq_type.is_numeric():
        return None
    if seq_type.is_digit_prefix_alphanumeric():
        return ErrorKind.UNSUPPORTED_SHAPE
    off = 1 if seq_type.is_signed() else 0
    if len(chars) - off < MAX_LENGTH_UNSIGNED or not is_digit(chars[off + 1]):
        return None
    boundary = MIN_STRING if is_sign_char(chars[0]) else MAX_STRING
    return None if leq(chars, boundary) else ErrorKind.BOUNDARY_OVERFLOW


def decode(chars: str) -> int:
    """
    Decode a string of up to 3 characters (plus sign) into a 16-bit value.

    Raises:
        DecodeError: if chars is not the representation of any 16-bit value
    """
    seq_type = checked_type(chars, MAX_LENGTH_UNSIGNED)
    kind = _check_shape(chars, seq_type)
    if kind is not None:
        raise fail(kind, chars)
    signed = seq_type.is_signed()
    off = 1 if signed else 0
    size = len(chars) - off
    if seq_type.is_numeric():
        code = decode_digits(chars, off)
    elif size > 1 and is_digit(chars[off + 1]):
        code = from_letter(chars[off]) * 10 + from_digit(chars[off + 1])
        if size > 2:
            code = code * 36 + from_alphanumeric(chars[off + 2]) + 260
        code += LETTER_DIGIT_OFFSET
    else:
        code = from_letter(chars[off])
        if size > 1:
            code = code * 26 + from_letter(chars[off + 1])
            if size > 2:
                code = code * 36 + from_alphanumeric(chars[off + 2]) + 26 * 26
            code += 26
        code += NUMERIC_BLOCK
    return -code if signed else code


def is_convertible(chars: str) -> bool:
    """True if decode(chars) would succeed. Never raises."""
    seq_type = classify(chars, MAX_LENGTH_UNSIGNED)
    if seq_type is SeqType.INVALID:
        return False
    return _check_shape(chars, seq_type) is None
