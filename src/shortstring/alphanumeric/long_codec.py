"""64-bit alphanumeric codec: strings of up to 13 characters (14 with sign).

Numeric codes use all 13 digits, the alphanumeric blocks of the 32-bit layout
are extended to 12 characters and fit entirely.  The remaining headroom holds
13-character letter-prefixed strings:

    "AAAAAAAAAAAAA" .. "ZZZZZZZZZZZZZ"      letters only        26^13
    "AAAAAAAAAAAA0" .. "ZZZZZZZZZZZZ9"      digit last          26^12 * 10
    "AAAAAAAAAAA00" .. "RZRYMFXOEDX77"      digit, then one     26^11 * 10 * 36
                                            alphanumeric (cut at 2^63 - 1)
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
from shortstring.core.chars import (
    ALPHANUMERIC_SIGN,
    NUMERIC_SIGN,
    from_alphanumeric,
    from_digit,
    from_letter,
    index_of_first_digit,
    to_alphanumeric,
    to_digit,
    to_letter,
)
from shortstring.core.errors import ErrorKind
from shortstring.core.packing import BiPackedSeq
from shortstring.core.seq_type import SeqType

WIDTH = 64
MAX_LENGTH_UNSIGNED = 13
MAX_LENGTH_SIGNED = MAX_LENGTH_UNSIGNED + 1
ALPHANUMERIC_LENGTH = MAX_LENGTH_UNSIGNED - 1

MIN_VALUE = -(1 << 63)
MAX_VALUE = (1 << 63) - 1
MIN_NUMERIC = -9_999_999_999_999
MAX_NUMERIC = 9_999_999_999_999

MAX_STRING = "RZRYMFXOEDX77"
MIN_STRING = ".RZRYMFXOEDX78"

SCHEME = BlockScheme.create(WIDTH, MAX_LENGTH_UNSIGNED, ALPHANUMERIC_LENGTH)

# Sub-blocks of the 13-character block, in order
LONG_SUB_BLOCKS = (26 ** 13, 26 ** 12 * 10, 26 ** 11 * 10 * 36)
LONG_OFFSET = SCHEME.end_offset
LONG_CAPACITY = (1 << 63) - LONG_OFFSET

_END = MAX_LENGTH_UNSIGNED - 1


def max_unsigned_length() -> int:
    """Longest unsigned string this codec produces."""
    return MAX_LENGTH_UNSIGNED


def max_signed_length() -> int:
    """Longest string including the sign character."""
    return MAX_LENGTH_SIGNED


def _encode_long_block(val: int, out: BiPackedSeq) -> int:
    sub = 0
    for sub, size in enumerate(LONG_SUB_BLOCKS):
        if val < size:
            break
        val -= size
    if sub > 1:
        out.put(_END, to_alphanumeric(val))
        val //= 36
    if sub > 0:
        out.put(_END - (sub - 1), to_digit(val))
        val //= 10
    for i in range(sub, MAX_LENGTH_UNSIGNED):
        out.put(_END - i, to_letter(val))
        val //= 26
    return 0


def to_seq(value: int) -> tuple[int, int]:
    """Packed (two word) representation of value."""
    check_range(value, WIDTH)
    magnitude = abs(value)
    out = BiPackedSeq()
    sign = ALPHANUMERIC_SIGN
    if magnitude < SCHEME.numeric:
        start = encode_digits(magnitude, out, _END)
        sign = NUMERIC_SIGN
    elif magnitude < LONG_OFFSET:
        start = SCHEME.encode_alphanumeric(magnitude, out, _END - 1)
    else:
        start = _encode_long_block(magnitude - LONG_OFFSET, out)
    out.align(start, sign if value < 0 else None)
    return out.words


def encode(value: int) -> str:
    """String representation of value."""
    return str(BiPackedSeq(*to_seq(value)))


def encode_into(value: int, out: TextIO) -> int:
    """Write the representation of value to out; returns the number of characters written."""
    chars = encode(value)
    out.write(chars)
    return len(chars)


def _long_shape(chars: str, off: int, seq_type: SeqType) -> int:
    """
    Position of the first digit of a 13-character body, relative to off.

    Returns 13 for an all-letter body and -1 when no code has this shape.
    """
    if not seq_type.is_letter_prefix_alphanumeric():
        return -1
    first_digit = index_of_first_digit(chars, off, len(chars))
    if first_digit < 0:
        return MAX_LENGTH_UNSIGNED
    first_digit -= off
    return first_digit if first_digit >= MAX_LENGTH_UNSIGNED - 2 else -1


def _decode_long_block(chars: str, off: int, first_digit: int) -> int:
    stop = off + first_digit
    code = 0
    for i in range(off, stop):
        code = code * 26 + from_letter(chars[i])
    addon = 0
    if stop < len(chars):
        code = code * 10 + from_digit(chars[stop])
        addon += LONG_SUB_BLOCKS[0]
        if stop + 1 < len(chars):
            code = code * 36 + from_alphanumeric(chars[stop + 1])
            addon += LONG_SUB_BLOCKS[1]
    return LONG_OFFSET + addon + code


def _check_long(chars: str, seq_type: SeqType) -> tuple[ErrorKind | None, int]:
    """Failure kind (or None) and first digit position of a 13-character body."""
    off = 1 if seq_type.is_signed() else 0
    first_digit = _long_shape(chars, off, seq_type)
    if first_digit < 0:
        return ErrorKind.UNSUPPORTED_SHAPE, first_digit
    if first_digit == MAX_LENGTH_UNSIGNED - 2 and exceeds_boundary(chars, MAX_STRING, MIN_STRING):
        return ErrorKind.BOUNDARY_OVERFLOW, first_digit
    return None, first_digit


def decode(chars: str) -> int:
    """
    Decode a string of up to 13 characters (plus sign) into a 64-bit value.

    Raises:
        DecodeError: if chars is not the representation of any 64-bit value
    """
    seq_type = checked_type(chars, MAX_LENGTH_UNSIGNED)
    signed = seq_type.is_signed()
    off = 1 if signed else 0
    if seq_type.is_numeric():
        code = decode_digits(chars, off)
    elif len(chars) - off == MAX_LENGTH_UNSIGNED:
        kind, first_digit = _check_long(chars, seq_type)
        if kind is ErrorKind.UNSUPPORTED_SHAPE:
            raise fail(kind, chars, "13-character codes are letter-prefixed "
                                    "with at most the last two characters after a digit")
        if kind is not None:
            raise fail(kind, chars, f"beyond {MIN_STRING if signed else MAX_STRING}")
        code = _decode_long_block(chars, off, first_digit)
    else:
        code = SCHEME.decode_alphanumeric(chars, off, seq_type)
    return -code if signed else code


def is_convertible(chars: str) -> bool:
    """True if decode(chars) would succeed. Never raises."""
    seq_type = classify(chars, MAX_LENGTH_UNSIGNED)
    if seq_type is SeqType.INVALID:
        return False
    off = 1 if seq_type.is_signed() else 0
    if seq_type.is_numeric() or len(chars) - off < MAX_LENGTH_UNSIGNED:
        return True
    kind, _ = _check_long(chars, seq_type)
    return kind is None
