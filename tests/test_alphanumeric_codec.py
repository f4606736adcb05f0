"""Tests for shortstring.alphanumeric.codec: the facade and width conversions."""
import io

import pytest

from shortstring.alphanumeric.codec import CODEC, AlphanumericCodec
from shortstring.core.errors import DecodeError, ErrorKind


def short(chars):
    return CODEC.to_short(chars)


def int_(chars):
    return CODEC.to_int(chars)


def long_(chars):
    return CODEC.to_long(chars)


class TestQuickIntro:
    """Typical use: store short identifiers as integers."""

    @pytest.mark.parametrize("word", ["HELLO", "WORLD", "007", "AUDUSD", "-123456"])
    def test_int_roundtrip(self, word):
        assert CODEC.int_to_string(CODEC.to_int(word)) == word

    def test_long_roundtrip(self):
        value = CODEC.to_long("COMPUTATIONAL")
        assert CODEC.long_to_string(value) == "COMPUTATIONAL"
        assert CODEC.long_to_string(-value) == ".COMPUTATIONAL"

    def test_short_roundtrip(self):
        assert CODEC.short_to_string(CODEC.to_short("AUD")) == "AUD"

    def test_numbers_stay_numbers(self):
        assert CODEC.to_int("123") == 123
        assert CODEC.to_long("-42") == -42
        assert CODEC.to_short("999") == 999

    def test_starts_with_sign_char(self):
        assert CODEC.starts_with_sign_char(".HELLO")
        assert CODEC.starts_with_sign_char("-1")
        assert not CODEC.starts_with_sign_char("HELLO")


class TestInterface:
    """Test the codec interface methods."""

    def test_max_lengths(self):
        assert (CODEC.max_short_length(), CODEC.max_int_length(), CODEC.max_long_length()) == (3, 6, 13)
        assert CODEC.max_short_length(signed=True) == 4
        assert CODEC.max_int_length(signed=True) == 7
        assert CODEC.max_long_length(signed=True) == 14

    def test_width_dispatch(self):
        assert CODEC.to_value("HELLO", 32) == CODEC.to_int("HELLO")
        assert CODEC.to_string(CODEC.to_long("HELLO"), 64) == "HELLO"
        assert CODEC.is_convertible("R9P", 16)
        assert not CODEC.is_convertible("R9Q", 16)
        assert CODEC.max_length(64, signed=True) == 14

    def test_bad_width_raises(self):
        with pytest.raises(ValueError, match="Width must be one of"):
            CODEC.to_value("A", 8)

    def test_into(self):
        out = io.StringIO()
        assert CODEC.short_into(CODEC.to_short("AUD"), out) == 3
        assert CODEC.int_into(CODEC.to_int("USD"), out) == 3
        assert CODEC.long_into(-1, out) == 2
        assert out.getvalue() == "AUDUSD-1"

    def test_repr(self):
        assert repr(AlphanumericCodec()) == "AlphanumericCodec()"


class TestWidthConversions:
    """Re-read a wider code as a narrower one."""

    def test_int_to_short(self):
        assert CODEC.int_to_short(int_("ABC")) == short("ABC")
        assert CODEC.int_to_short(int_(".R9Q")) == -32768
        assert CODEC.int_to_short(-999) == -999

    def test_long_to_short(self):
        assert CODEC.long_to_short(long_("ZZ")) == short("ZZ")

    def test_long_to_int(self):
        assert CODEC.long_to_int(long_("HELLO")) == int_("HELLO")
        assert CODEC.long_to_int(long_(".7XIZYK")) == -(2 ** 31)

    def test_too_long_raises(self):
        with pytest.raises(DecodeError) as excinfo:
            CODEC.int_to_short(int_("HELLO"))
        assert excinfo.value.kind is ErrorKind.LENGTH_EXCEEDED

    def test_no_narrow_code_raises(self):
        with pytest.raises(DecodeError) as excinfo:
            CODEC.long_to_int(long_("8AAAAA"))
        assert excinfo.value.kind is ErrorKind.BOUNDARY_OVERFLOW


class TestSubstring:
    """Slice the representation of a code."""

    def test_substring_of_int(self):
        value = int_("AUDUSD")
        assert CODEC.substring_of_int_to_short(value, 0, 3) == short("AUD")
        assert CODEC.substring_of_int_to_short(value, 3) == short("USD")
        assert CODEC.substring_of_int_to_short(value, 2, -1) == short("DUS")

    def test_substring_counts_sign(self):
        value = int_(".ABC")
        assert CODEC.substring_of_int_to_short(value, -3) == short("ABC")
        assert CODEC.substring_of_int_to_short(value, 0, 2) == short(".A")

    def test_substring_of_long(self):
        value = long_("HIGHLYVALUED")
        assert CODEC.substring_of_long_to_int(value, 0, 6) == int_("HIGHLY")
        assert CODEC.substring_of_long_to_int(value, 6) == int_("VALUED")
        assert CODEC.substring_of_long_to_int(value, -6, -3) == int_("VAL")

    def test_empty_substring_raises(self):
        with pytest.raises(DecodeError) as excinfo:
            CODEC.substring_of_int_to_short(int_("AUDUSD"), 4, 2)
        assert excinfo.value.kind is ErrorKind.EMPTY_INPUT


class TestConcat:
    """Join the representations of two codes."""

    def test_concat_shorts(self):
        assert CODEC.concat_shorts_to_int(short("AUD"), short("USD")) == int_("AUDUSD")

    def test_concat_ints(self):
        assert CODEC.concat_ints_to_long(int_("HELLO"), int_("WORLD")) == long_("HELLOWORLD")

    def test_concat_numbers(self):
        assert CODEC.concat_shorts_to_int(-5, 3) == -53
        assert CODEC.concat_ints_to_long(123, 456) == 123456

    def test_concat_signed_second_raises(self):
        with pytest.raises(DecodeError) as excinfo:
            CODEC.concat_shorts_to_int(short(".A"), short(".B"))
        assert excinfo.value.kind is ErrorKind.ILLEGAL_CHARACTER

    def test_concat_longest(self):
        assert CODEC.concat_ints_to_long(int_("ABCDEF"), int_("GHIJKL")) == long_("ABCDEFGHIJKL")
