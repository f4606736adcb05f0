"""Block layout shared by the 32-bit and 64-bit alphanumeric codecs.

The unsigned range [0, 2^(W-1)) is cut into consecutive blocks, each an
ordered set of strings with a mixed-radix numbering:

    NUMERIC          "0" .. "9...9"                  10^N codes
    LETTER_PREFIXED  "A" .. "ZZ...Z"                 26 * sum(36^k, k < L)
    ZERO_PREFIXED    "00" .. "0Z...Z"                sum(36^k, 1 <= k < L)
    DIGIT_PREFIXED   "1A" .. "9...9Z...Z"            sub-block i per letter
                                                     position i from the end:
                                                     (10^(L-1-i) - 1) * 26 * 36^i

N is the numeric length, L the alphanumeric length.  Whatever part of the
last block does not fit below 2^(W-1) is cut off; the cut is expressed as a
maximum boundary string that decoders compare against.

Negative values use the same blocks behind a sign: '-' for numeric codes,
'.' for everything else.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from shortstring.core.chars import (
    LETTERS,
    from_alphanumeric,
    from_digit,
    from_letter,
    index_of_first_letter,
    is_digit,
    is_sign_char,
    leq,
    to_alphanumeric,
    to_digit,
    to_letter,
)
from shortstring.core.errors import DecodeError, ErrorKind, diagnose
from shortstring.core.seq_type import SeqType, sequence_for

logger = logging.getLogger(__name__)


def signed_range(width: int) -> tuple[int, int]:
    """(min, max) of a signed integer of the given bit width."""
    return -(1 << (width - 1)), (1 << (width - 1)) - 1


def check_range(value: int, width: int) -> None:
    """Raise ValueError if value does not fit a signed integer of width bits."""
    low, high = signed_range(width)
    if not low <= value <= high:
        raise ValueError(f"Value {value} out of range for {width}-bit codec [{low}, {high}]")


# ----------------------------------------------------------------------
# Input checks shared by every width
# ----------------------------------------------------------------------

def classify(chars: str, max_length: int) -> SeqType:
    """SeqType of chars; INVALID also for non-str, empty, sign-only or too long input."""
    if not isinstance(chars, str) or not chars:
        return SeqType.INVALID
    off = 1 if is_sign_char(chars[0]) else 0
    if not 0 < len(chars) - off <= max_length:
        return SeqType.INVALID
    return sequence_for(chars)


def fail(kind: ErrorKind, chars: str, detail: str = "") -> DecodeError:
    """Log a rejected decode and build the error to raise."""
    logger.debug("decode rejected %r: %s", chars, kind.name)
    return DecodeError(kind, chars, detail)


def checked_type(chars: str, max_length: int) -> SeqType:
    """Like classify() but raises DecodeError with the precise failure kind."""
    if not isinstance(chars, str):
        raise TypeError(f"Expected str, got {type(chars).__name__}")
    seq_type = classify(chars, max_length)
    if seq_type is not SeqType.INVALID:
        return seq_type
    if not chars:
        raise fail(ErrorKind.EMPTY_INPUT, chars)
    off = 1 if is_sign_char(chars[0]) else 0
    if len(chars) == off:
        raise fail(ErrorKind.SIGN_ONLY_INPUT, chars)
    if len(chars) - off > max_length:
        raise fail(ErrorKind.LENGTH_EXCEEDED, chars, f"at most {max_length} characters")
    raise fail(diagnose(chars), chars)


# ----------------------------------------------------------------------
# Numeric block, identical for every width
# ----------------------------------------------------------------------

def decode_digits(chars: str, off: int) -> int:
    """Decimal value of chars[off:]."""
    code = 0
    for i in range(off, len(chars)):
        code = code * 10 + from_digit(chars[i])
    return code


def encode_digits(magnitude: int, out, end: int) -> int:
    """Write magnitude right-aligned ending at index end; returns the start index."""
    i = end
    out.put(i, to_digit(magnitude))
    magnitude //= 10
    while magnitude:
        i -= 1
        out.put(i, to_digit(magnitude))
        magnitude //= 10
    return i


# ----------------------------------------------------------------------
# Block scheme
# ----------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BlockScheme:
    """
    Block sizes and offsets for one integer width.

    Build with BlockScheme.create(); every field is derived from the width
    and the two lengths.
    """
    width: int
    numeric_length: int
    alphanumeric_length: int

    numeric: int
    letter_prefixed: int
    zero_prefixed: int
    digit_sub_blocks: tuple[int, ...]

    letter_offset: int
    zero_offset: int
    digit_offset: int
    end_offset: int

    # Sub-block straddling 2^(W-1), or -1 when the digit block fits entirely
    terminal_sub_block: int

    @classmethod
    def create(cls, width: int, numeric_length: int, alphanumeric_length: int) -> BlockScheme:
        """Derive every block size and offset for width."""
        length = alphanumeric_length
        numeric = 10 ** numeric_length
        letter_prefixed = 26 * sum(36 ** k for k in range(length))
        zero_prefixed = sum(36 ** k for k in range(1, length))
        digit_sub_blocks = tuple(
            (10 ** (length - 1 - i) - 1) * 26 * 36 ** i for i in range(length - 1)
        )
        letter_offset = numeric
        zero_offset = letter_offset + letter_prefixed
        digit_offset = zero_offset + zero_prefixed

        limit = 1 << (width - 1)
        terminal = -1
        offset = digit_offset
        for i, size in enumerate(digit_sub_blocks):
            offset += size
            if offset > limit:
                terminal = i
                break

        return cls(
            width=width,
            numeric_length=numeric_length,
            alphanumeric_length=alphanumeric_length,
            numeric=numeric,
            letter_prefixed=letter_prefixed,
            zero_prefixed=zero_prefixed,
            digit_sub_blocks=digit_sub_blocks,
            letter_offset=letter_offset,
            zero_offset=zero_offset,
            digit_offset=digit_offset,
            end_offset=digit_offset + sum(digit_sub_blocks),
            terminal_sub_block=terminal,
        )

    @property
    def max_value(self) -> int:
        return (1 << (self.width - 1)) - 1

    @property
    def digit_prefixed_capacity(self) -> int:
        """Digit-prefixed codes that fit below 2^(W-1)."""
        return min(self.end_offset, self.max_value + 1) - self.digit_offset

    # -- decoding ------------------------------------------------------

    def in_terminal_sub_block(self, chars: str, off: int) -> bool:
        """True if chars (body starting at off) falls in the truncated sub-block."""
        if self.terminal_sub_block < 0 or not is_digit(chars[off]) or chars[off] == "0":
            return False
        letter = index_of_first_letter(chars, off, len(chars))
        return letter >= 0 and len(chars) - letter - 1 == self.terminal_sub_block

    def decode_alphanumeric(self, chars: str, off: int, seq_type: SeqType) -> int:
        """Unsigned code of an alphanumeric body; no range checks."""
        if seq_type.is_letter_prefix_alphanumeric():
            return self.letter_offset + self._letter_code(chars, off)
        if chars[off] == "0":
            return self.zero_offset + self._zero_code(chars, off)
        return self.digit_offset + self._digit_code(chars, off)

    @staticmethod
    def _letter_code(chars: str, off: int) -> int:
        code = from_letter(chars[off])
        for i in range(off + 1, len(chars)):
            code = code * 36 + 26 + from_alphanumeric(chars[i])
        return code

    @staticmethod
    def _zero_code(chars: str, off: int) -> int:
        code = from_alphanumeric(chars[off + 1])
        for i in range(off + 2, len(chars)):
            code = code * 36 + 36 + from_alphanumeric(chars[i])
        return code

    def _digit_code(self, chars: str, off: int) -> int:
        end = len(chars)
        letter = index_of_first_letter(chars, off, end)
        code = from_digit(chars[off]) - 1
        for i in range(off + 1, letter):
            code = code * 10 + 9 + from_digit(chars[i])
        code = code * 26 + from_letter(chars[letter])
        for i in range(letter + 1, end):
            code = code * 36 + from_alphanumeric(chars[i])
        return code + sum(self.digit_sub_blocks[:end - letter - 1])

    # -- encoding ------------------------------------------------------

    def encode_alphanumeric(self, magnitude: int, out, end: int) -> int:
        """Write the alphanumeric code for magnitude ending at index end; returns the start."""
        if magnitude < self.zero_offset:
            return self._encode_letter(magnitude - self.letter_offset, out, end)
        if magnitude < self.digit_offset:
            return self._encode_zero(magnitude - self.zero_offset, out, end)
        return self._encode_digit(magnitude - self.digit_offset, out, end)

    def _encode_letter(self, val: int, out, end: int) -> int:
        for i in range(end, end - self.alphanumeric_length, -1):
            if val < 26:
                out.put(i, LETTERS[val])
                return i
            val -= 26
            out.put(i, to_alphanumeric(val))
            val //= 36
        raise ValueError(f"Letter-prefixed ordinal out of range: {val}")

    def _encode_zero(self, val: int, out, end: int) -> int:
        for i in range(end, end - self.alphanumeric_length + 1, -1):
            if val < 36:
                out.put(i, to_alphanumeric(val))
                out.put(i - 1, "0")
                return i - 1
            val -= 36
            out.put(i, to_alphanumeric(val))
            val //= 36
        raise ValueError(f"Zero-prefixed ordinal out of range: {val}")

    def _encode_digit(self, val: int, out, end: int) -> int:
        sub = 0
        for sub, size in enumerate(self.digit_sub_blocks):
            if val < size:
                break
            val -= size
        for k in range(sub):
            out.put(end - k, to_alphanumeric(val))
            val //= 36
        out.put(end - sub, to_letter(val))
        val //= 26
        for k in range(sub + 1, self.alphanumeric_length):
            if val < 9:
                out.put(end - k, str(val + 1))
                return end - k
            val -= 9
            out.put(end - k, to_digit(val))
            val //= 10
        raise ValueError(f"Digit-prefixed ordinal out of range: {val}")


def exceeds_boundary(chars: str, max_unsigned: str, min_signed: str) -> bool:
    """Shortlex comparison of chars with the boundary string for its sign."""
    boundary = min_signed if is_sign_char(chars[0]) else max_unsigned
    return not leq(chars, boundary)
