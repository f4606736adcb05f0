"""Character classes, digit conversions and comparisons.

Alphabet: 0-9 and A-Z (upper case only), plus two sign characters:
  '-'  sign of a fully numeric value
  '.'  sign of every other (alphanumeric) value

Alphanumeric digit order is ASCII order: '0'-'9' are 0-9, 'A'-'Z' are 10-35.
"""

from enum import Enum

DIGITS = "0123456789"
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHANUMERICS = DIGITS + LETTERS

NUMERIC_SIGN = "-"
ALPHANUMERIC_SIGN = "."
SIGN_CHARS = NUMERIC_SIGN + ALPHANUMERIC_SIGN

# Reverse lookup: character -> alphanumeric digit value
CHAR_TO_ALPHANUMERIC = {c: i for i, c in enumerate(ALPHANUMERICS)}


class CharType(Enum):
    ALPHA = "alpha"                          # 'A'-'Z'
    ZERO_DIGIT = "zero_digit"                # '0'
    NON_ZERO_DIGIT = "non_zero_digit"        # '1'-'9'
    ALPHANUMERIC_SIGN = "alphanumeric_sign"  # '.'
    NUMERIC_SIGN = "numeric_sign"            # '-'
    OTHER = "other"

    @classmethod
    def for_char(cls, ch: str) -> "CharType":
        """Classify a single character."""
        if "A" <= ch <= "Z":
            return cls.ALPHA
        if "0" <= ch <= "9":
            return cls.ZERO_DIGIT if ch == "0" else cls.NON_ZERO_DIGIT
        if ch == ALPHANUMERIC_SIGN:
            return cls.ALPHANUMERIC_SIGN
        if ch == NUMERIC_SIGN:
            return cls.NUMERIC_SIGN
        return cls.OTHER


def is_digit(ch: str) -> bool:
    """True for a single character 0-9."""
    return "0" <= ch <= "9" and len(ch) == 1


def is_letter(ch: str) -> bool:
    """True for a single character A-Z."""
    return "A" <= ch <= "Z" and len(ch) == 1


def is_alphanumeric(ch: str) -> bool:
    """True for a single character 0-9 or A-Z."""
    return is_digit(ch) or is_letter(ch)


def is_alphanumeric_range(chars: str, start: int = 0, end: int | None = None) -> bool:
    """True if every character of chars[start:end] is 0-9 or A-Z."""
    end = len(chars) if end is None else end
    return all(is_alphanumeric(chars[i]) for i in range(start, end))


def is_sign_char(ch: str) -> bool:
    """True for '-' or '.'."""
    return ch == NUMERIC_SIGN or ch == ALPHANUMERIC_SIGN


def starts_with_sign_char(chars: str) -> bool:
    """True if chars is non-empty and starts with '-' or '.'. Nothing else is validated."""
    return len(chars) > 0 and is_sign_char(chars[0])


def index_of_first_letter(chars: str, start: int, end: int) -> int:
    """Index of the first A-Z character in chars[start:end], or -1."""
    for i in range(start, end):
        if is_letter(chars[i]):
            return i
    return -1


def index_of_first_digit(chars: str, start: int, end: int) -> int:
    """Index of the first 0-9 character in chars[start:end], or -1."""
    for i in range(start, end):
        if is_digit(chars[i]):
            return i
    return -1


def from_digit(ch: str) -> int:
    """Value of a decimal digit character."""
    return ord(ch) - ord("0")


def from_letter(ch: str) -> int:
    """Value of a letter, 0 for 'A' up to 25 for 'Z'."""
    return ord(ch) - ord("A")


def from_alphanumeric(ch: str) -> int:
    """Value of 0-9 or A-Z as a base-36 digit."""
    return CHAR_TO_ALPHANUMERIC[ch]


def to_digit(value: int) -> str:
    """Least significant decimal digit of value as a character."""
    return DIGITS[value % 10]


def to_letter(value: int) -> str:
    """Least significant base-26 digit of value as a letter."""
    return LETTERS[value % 26]


def to_alphanumeric(value: int) -> str:
    """Least significant base-36 digit of value as 0-9 or A-Z."""
    return ALPHANUMERICS[value % 36]


def leq(a: str, b: str) -> bool:
    """Shortlex a <= b: a shorter string always sorts before a longer one."""
    if len(a) != len(b):
        return len(a) < len(b)
    return a <= b
