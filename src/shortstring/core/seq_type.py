"""Sequence classification: a one-pass automaton labelling a character sequence.

The first one or two characters seed the state directly, every further
character drives a transition:

  state \\ next char        digit            letter                   other
  NUMERIC_*                 keep             -> DIGIT_PREFIXED_*      INVALID
  LETTER/DIGIT_PREFIXED_*   keep             keep                     INVALID

Leading zeros are never numeric: "0" alone is numeric, "00", "0A", "007" are
digit-prefixed (zero-prefixed) alphanumerics.
"""

from enum import Enum

from shortstring.core.chars import (
    NUMERIC_SIGN,
    CharType,
    index_of_first_letter,
    is_digit,
    is_letter,
)


class SeqType(Enum):
    NUMERIC_UNSIGNED = "numeric_unsigned"
    NUMERIC_SIGNED = "numeric_signed"
    LETTER_PREFIXED_ALPHANUMERIC_UNSIGNED = "letter_prefixed_alphanumeric_unsigned"
    LETTER_PREFIXED_ALPHANUMERIC_SIGNED = "letter_prefixed_alphanumeric_signed"
    DIGIT_PREFIXED_ALPHANUMERIC_UNSIGNED = "digit_prefixed_alphanumeric_unsigned"
    DIGIT_PREFIXED_ALPHANUMERIC_SIGNED = "digit_prefixed_alphanumeric_signed"
    INVALID = "invalid"

    def is_signed(self) -> bool:
        return self in _SIGNED

    def is_numeric(self) -> bool:
        return self in (SeqType.NUMERIC_UNSIGNED, SeqType.NUMERIC_SIGNED)

    def is_letter_prefix_alphanumeric(self) -> bool:
        return self in (SeqType.LETTER_PREFIXED_ALPHANUMERIC_UNSIGNED,
                        SeqType.LETTER_PREFIXED_ALPHANUMERIC_SIGNED)

    def is_digit_prefix_alphanumeric(self) -> bool:
        return self in (SeqType.DIGIT_PREFIXED_ALPHANUMERIC_UNSIGNED,
                        SeqType.DIGIT_PREFIXED_ALPHANUMERIC_SIGNED)

    def is_alphanumeric(self) -> bool:
        return self.is_letter_prefix_alphanumeric() or self.is_digit_prefix_alphanumeric()

    def then_char(self, ch: str) -> "SeqType":
        """Transition for the next character."""
        if self is SeqType.NUMERIC_UNSIGNED or self is SeqType.NUMERIC_SIGNED:
            if is_digit(ch):
                return self
            if is_letter(ch):
                return _DIGIT_PREFIXED_FOR[self]
            return SeqType.INVALID
        if self is SeqType.INVALID:
            return SeqType.INVALID
        if is_digit(ch) or is_letter(ch):
            return self
        return SeqType.INVALID


_SIGNED = frozenset({
    SeqType.NUMERIC_SIGNED,
    SeqType.LETTER_PREFIXED_ALPHANUMERIC_SIGNED,
    SeqType.DIGIT_PREFIXED_ALPHANUMERIC_SIGNED,
})

_DIGIT_PREFIXED_FOR = {
    SeqType.NUMERIC_UNSIGNED: SeqType.DIGIT_PREFIXED_ALPHANUMERIC_UNSIGNED,
    SeqType.NUMERIC_SIGNED: SeqType.DIGIT_PREFIXED_ALPHANUMERIC_SIGNED,
}


def _for_single_char(char_type: CharType) -> SeqType:
    if char_type is CharType.ALPHA:
        return SeqType.LETTER_PREFIXED_ALPHANUMERIC_UNSIGNED
    if char_type in (CharType.ZERO_DIGIT, CharType.NON_ZERO_DIGIT):
        return SeqType.NUMERIC_UNSIGNED
    return SeqType.INVALID


def _for_two_chars(first: CharType, then: str) -> SeqType:
    if first is CharType.ALPHA:
        if is_letter(then) or is_digit(then):
            return SeqType.LETTER_PREFIXED_ALPHANUMERIC_UNSIGNED
        return SeqType.INVALID
    if first is CharType.ZERO_DIGIT:
        # zero prefixed values are alphanumeric, never numeric
        if is_digit(then) or is_letter(then):
            return SeqType.DIGIT_PREFIXED_ALPHANUMERIC_UNSIGNED
        return SeqType.INVALID
    if first is CharType.NON_ZERO_DIGIT:
        if is_digit(then):
            return SeqType.NUMERIC_UNSIGNED
        if is_letter(then):
            return SeqType.DIGIT_PREFIXED_ALPHANUMERIC_UNSIGNED
        return SeqType.INVALID
    if first is CharType.ALPHANUMERIC_SIGN:
        if is_letter(then):
            return SeqType.LETTER_PREFIXED_ALPHANUMERIC_SIGNED
        if is_digit(then):
            return SeqType.DIGIT_PREFIXED_ALPHANUMERIC_SIGNED
        return SeqType.INVALID
    if first is CharType.NUMERIC_SIGN:
        if is_digit(then) and then != "0":
            return SeqType.NUMERIC_SIGNED
        return SeqType.INVALID
    return SeqType.INVALID


def sequence_for(chars: str, length: int | None = None) -> SeqType:
    """Classify the first length characters of chars (all of them by default)."""
    length = len(chars) if length is None else length
    if length == 0:
        return SeqType.INVALID
    char_type = CharType.for_char(chars[0])
    if length == 1:
        return _for_single_char(char_type)
    seq_type = _for_two_chars(char_type, chars[1])
    for i in range(2, length):
        seq_type = seq_type.then_char(chars[i])
    if seq_type is SeqType.DIGIT_PREFIXED_ALPHANUMERIC_SIGNED:
        if length == 2:
            # ".0" to ".9" are all invalid, there is no sign-prefixed single digit
            return SeqType.INVALID
        if chars[0] == NUMERIC_SIGN:
            # "-1A": alphanumeric values take the '.' sign
            return SeqType.INVALID
        if chars[1] != "0" and index_of_first_letter(chars, 2, length) < 0:
            # ".12": numeric values take the '-' sign
            return SeqType.INVALID
    return seq_type
