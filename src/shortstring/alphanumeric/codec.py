"""Alphanumeric codec for all three widths, plus conversions between widths.

The conversions work on the packed representation of a code: a value of
one width is encoded, its characters are sliced or joined, and the result is
decoded as a value of another width.  Only strings that are valid codes of
the target width convert; everything else raises DecodeError.

    CODEC.concat_shorts_to_int(CODEC.to_short("AUD"), CODEC.to_short("USD"))
        == CODEC.to_int("AUDUSD")
"""

from shortstring.alphanumeric import int_codec, long_codec, short_codec
from shortstring.codecs.base import ShortStringCodec
from shortstring.core.packing import concat, concat2, slice_seq, slice_seq2, unpack, unpack2


class AlphanumericCodec(ShortStringCodec):
    """Codes made of 0-9 and A-Z; see the width modules for the block layouts."""

    name = "alphanumeric"

    def max_short_length(self, signed: bool = False) -> int:
        return short_codec.max_signed_length() if signed else short_codec.max_unsigned_length()

    def max_int_length(self, signed: bool = False) -> int:
        return int_codec.max_signed_length() if signed else int_codec.max_unsigned_length()

    def max_long_length(self, signed: bool = False) -> int:
        return long_codec.max_signed_length() if signed else long_codec.max_unsigned_length()

    def to_short(self, chars: str) -> int:
        return short_codec.decode(chars)

    def to_int(self, chars: str) -> int:
        return int_codec.decode(chars)

    def to_long(self, chars: str) -> int:
        return long_codec.decode(chars)

    def short_to_string(self, value: int) -> str:
        return short_codec.encode(value)

    def int_to_string(self, value: int) -> str:
        return int_codec.encode(value)

    def long_to_string(self, value: int) -> str:
        return long_codec.encode(value)

    def short_into(self, value, out) -> int:
        return short_codec.encode_into(value, out)

    def int_into(self, value, out) -> int:
        return int_codec.encode_into(value, out)

    def long_into(self, value, out) -> int:
        return long_codec.encode_into(value, out)

    def is_convertible_to_short(self, chars: str) -> bool:
        return short_codec.is_convertible(chars)

    def is_convertible_to_int(self, chars: str) -> bool:
        return int_codec.is_convertible(chars)

    def is_convertible_to_long(self, chars: str) -> bool:
        return long_codec.is_convertible(chars)

    # -- conversions between widths -------------------------------------

    def int_to_short(self, value: int) -> int:
        """The 16-bit code with the same representation as the 32-bit code value."""
        return short_codec.decode(unpack(int_codec.to_seq(value)))

    def long_to_short(self, value: int) -> int:
        """The 16-bit code with the same representation as the 64-bit code value."""
        return short_codec.decode(unpack2(*long_codec.to_seq(value)))

    def long_to_int(self, value: int) -> int:
        """The 32-bit code with the same representation as the 64-bit code value."""
        return int_codec.decode(unpack2(*long_codec.to_seq(value)))

    def substring_of_int_to_short(self, value: int, start: int, end: int | None = None) -> int:
        """
        16-bit code of representation[start:end] of a 32-bit code.

        Indices follow slice semantics and count the sign character, if any:
        for ".ABC", [-3:] is "ABC".
        """
        return short_codec.decode(unpack(slice_seq(int_codec.to_seq(value), start, end)))

    def substring_of_long_to_int(self, value: int, start: int, end: int | None = None) -> int:
        """32-bit code of representation[start:end] of a 64-bit code."""
        return int_codec.decode(unpack2(*slice_seq2(*long_codec.to_seq(value), start, end)))

    def concat_shorts_to_int(self, first: int, second: int) -> int:
        """32-bit code of the two 16-bit representations joined together."""
        joined = concat(short_codec.to_seq(first), short_codec.to_seq(second))
        return int_codec.decode(unpack(joined))

    def concat_ints_to_long(self, first: int, second: int) -> int:
        """64-bit code of the two 32-bit representations joined together."""
        joined = concat2((int_codec.to_seq(first), 0), (int_codec.to_seq(second), 0))
        return long_codec.decode(unpack2(*joined))


CODEC = AlphanumericCodec()
