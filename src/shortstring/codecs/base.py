"""Common interface of every short-string codec.

A codec maps 16, 32 and 64-bit signed integers to strings and back.  The
``*_to_string`` methods and ``to_*`` parsers are inverse to each other on
every value of the width; the ``*_into`` variants write to any object with a
``write(str)`` method and return the number of characters written.
"""

from typing import TextIO

from shortstring.core.chars import starts_with_sign_char as _starts_with_sign_char


class ShortStringCodec:
    """Base codec for 16, 32 and 64-bit values; subclasses implement every width."""

    name: str = ""

    # -- lengths -------------------------------------------------------

    def max_short_length(self, signed: bool = False) -> int:
        """Longest 16-bit string, counting the sign when signed is true."""
        raise NotImplementedError

    def max_int_length(self, signed: bool = False) -> int:
        raise NotImplementedError

    def max_long_length(self, signed: bool = False) -> int:
        raise NotImplementedError

    # -- parsing -------------------------------------------------------

    def to_short(self, chars: str) -> int:
        """Parse a 16-bit value; raises DecodeError for any other string."""
        raise NotImplementedError

    def to_int(self, chars: str) -> int:
        raise NotImplementedError

    def to_long(self, chars: str) -> int:
        raise NotImplementedError

    # -- formatting ----------------------------------------------------

    def short_to_string(self, value: int) -> str:
        """Format a 16-bit value; raises ValueError when it is out of range."""
        raise NotImplementedError

    def int_to_string(self, value: int) -> str:
        raise NotImplementedError

    def long_to_string(self, value: int) -> str:
        raise NotImplementedError

    def short_into(self, value: int, out: TextIO) -> int:
        return _write(self.short_to_string(value), out)

    def int_into(self, value: int, out: TextIO) -> int:
        return _write(self.int_to_string(value), out)

    def long_into(self, value: int, out: TextIO) -> int:
        return _write(self.long_to_string(value), out)

    # -- validation ----------------------------------------------------

    def is_convertible_to_short(self, chars: str) -> bool:
        """True if to_short(chars) would succeed. Never raises."""
        raise NotImplementedError

    def is_convertible_to_int(self, chars: str) -> bool:
        raise NotImplementedError

    def is_convertible_to_long(self, chars: str) -> bool:
        raise NotImplementedError

    def starts_with_sign_char(self, chars: str) -> bool:
        """True if chars starts with this codec's sign character(s)."""
        return _starts_with_sign_char(chars)

    # -- width dispatch ------------------------------------------------

    def max_length(self, width: int, signed: bool = False) -> int:
        """Longest string for the given bit width."""
        return _by_width(width, self.max_short_length, self.max_int_length,
                         self.max_long_length)(signed)

    def to_value(self, chars: str, width: int) -> int:
        """Parse chars as a value of the given bit width (16, 32 or 64)."""
        return _by_width(width, self.to_short, self.to_int, self.to_long)(chars)

    def to_string(self, value: int, width: int) -> str:
        return _by_width(width, self.short_to_string, self.int_to_string,
                         self.long_to_string)(value)

    def is_convertible(self, chars: str, width: int) -> bool:
        return _by_width(width, self.is_convertible_to_short, self.is_convertible_to_int,
                         self.is_convertible_to_long)(chars)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


WIDTHS = (16, 32, 64)


def _by_width(width: int, short, int_, long_):
    if width == 16:
        return short
    if width == 32:
        return int_
    if width == 64:
        return long_
    raise ValueError(f"Width must be one of {WIDTHS}, got {width}")


def _write(chars: str, out: TextIO) -> int:
    out.write(chars)
    return len(chars)
