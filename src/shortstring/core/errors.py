"""Decode failures and their kinds.

Every decoder raises DecodeError, a ValueError subclass, so callers that only
care about "bad input" can keep catching ValueError.
"""

from enum import Enum

from shortstring.core.chars import (
    ALPHANUMERIC_SIGN,
    NUMERIC_SIGN,
    is_alphanumeric_range,
    is_sign_char,
)


class ErrorKind(Enum):
    EMPTY_INPUT = "empty input"
    SIGN_ONLY_INPUT = "sign without digits"
    LENGTH_EXCEEDED = "too long"
    ILLEGAL_CHARACTER = "illegal character"
    INVALID_LEADING_ZERO = "invalid leading zero"
    BOUNDARY_OVERFLOW = "out of range"
    UNSUPPORTED_SHAPE = "no code for this shape"


class DecodeError(ValueError):
    """A string that does not represent any value of the requested width."""

    def __init__(self, kind: ErrorKind, value: str, detail: str = ""):
        self.kind = kind
        self.value = value
        message = f"Cannot decode {value!r}: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


def diagnose(chars: str) -> ErrorKind:
    """Reason why a non-empty, not sign-only string was classified INVALID.

    Strings that pass every character check here are shapes the classifier
    rejects on canonical-form grounds ("-1A", ".12", ".0").
    """
    off = 1 if is_sign_char(chars[0]) else 0
    if not is_alphanumeric_range(chars, off):
        return ErrorKind.ILLEGAL_CHARACTER
    if off == 0:
        return ErrorKind.ILLEGAL_CHARACTER
    sign = chars[0]
    if sign == NUMERIC_SIGN:
        if chars[1] == "0":
            return ErrorKind.INVALID_LEADING_ZERO
        # '-' is reserved for purely numeric values
        return ErrorKind.ILLEGAL_CHARACTER
    if sign == ALPHANUMERIC_SIGN and chars[1:] == "0":
        return ErrorKind.INVALID_LEADING_ZERO
    # '.' in front of a numeric body
    return ErrorKind.ILLEGAL_CHARACTER
