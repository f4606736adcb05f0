"""Codec selection by name.

    ShortString.ALPHANUMERIC.to_int("HELLO")
    ShortString.for_name("hex").int_to_string(255)   # "FF"
"""

from enum import Enum
from typing import TextIO

from shortstring.alphanumeric.codec import CODEC as ALPHANUMERIC_CODEC
from shortstring.codecs.base import ShortStringCodec
from shortstring.codecs.hex import HEX as HEX_CODEC
from shortstring.codecs.numeric import NUMERIC as NUMERIC_CODEC


class ShortString(Enum):
    NUMERIC = NUMERIC_CODEC
    HEX = HEX_CODEC
    ALPHANUMERIC = ALPHANUMERIC_CODEC

    @classmethod
    def for_name(cls, name: str) -> "ShortString":
        """Member for a case-insensitive name such as "hex"."""
        try:
            return cls[name.upper()]
        except KeyError:
            names = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"Unknown codec {name!r}, expected one of: {names}") from None

    @property
    def codec(self) -> ShortStringCodec:
        return self.value

    def max_short_length(self, signed: bool = False) -> int:
        return self.value.max_short_length(signed)

    def max_int_length(self, signed: bool = False) -> int:
        return self.value.max_int_length(signed)

    def max_long_length(self, signed: bool = False) -> int:
        return self.value.max_long_length(signed)

    def to_short(self, chars: str) -> int:
        return self.value.to_short(chars)

    def to_int(self, chars: str) -> int:
        return self.value.to_int(chars)

    def to_long(self, chars: str) -> int:
        return self.value.to_long(chars)

    def short_to_string(self, value: int) -> str:
        return self.value.short_to_string(value)

    def int_to_string(self, value: int) -> str:
        return self.value.int_to_string(value)

    def long_to_string(self, value: int) -> str:
        return self.value.long_to_string(value)

    def short_into(self, value: int, out: TextIO) -> int:
        return self.value.short_into(value, out)

    def int_into(self, value: int, out: TextIO) -> int:
        return self.value.int_into(value, out)

    def long_into(self, value: int, out: TextIO) -> int:
        return self.value.long_into(value, out)

    def is_convertible_to_short(self, chars: str) -> bool:
        return self.value.is_convertible_to_short(chars)

    def is_convertible_to_int(self, chars: str) -> bool:
        return self.value.is_convertible_to_int(chars)

    def is_convertible_to_long(self, chars: str) -> bool:
        return self.value.is_convertible_to_long(chars)

    def starts_with_sign_char(self, chars: str) -> bool:
        return self.value.starts_with_sign_char(chars)
