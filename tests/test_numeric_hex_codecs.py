"""Tests for the decimal and hexadecimal codecs."""
import io

import pytest

from shortstring.codecs.hex import HEX, HexCodec
from shortstring.codecs.numeric import NUMERIC, NumericCodec, parse_signed
from shortstring.core.errors import DecodeError, ErrorKind


class TestParseSigned:
    """Test the shared radix parser."""

    @pytest.mark.parametrize("chars,width,radix,expected", [
        ("0", 32, 10, 0),
        ("+17", 32, 10, 17),
        ("-17", 32, 10, -17),
        ("007", 16, 10, 7),
        ("32767", 16, 10, 32767),
        ("-32768", 16, 10, -32768),
        ("ff", 32, 16, 255),
        ("-80000000", 32, 16, -(2 ** 31)),
        ("7FFFFFFFFFFFFFFF", 64, 16, 2 ** 63 - 1),
    ])
    def test_values(self, chars, width, radix, expected):
        assert parse_signed(chars, width, radix) == expected

    @pytest.mark.parametrize("chars,width,radix,kind", [
        ("", 32, 10, ErrorKind.EMPTY_INPUT),
        ("-", 32, 10, ErrorKind.SIGN_ONLY_INPUT),
        ("+", 32, 16, ErrorKind.SIGN_ONLY_INPUT),
        ("12a", 32, 10, ErrorKind.ILLEGAL_CHARACTER),
        ("1G", 32, 16, ErrorKind.ILLEGAL_CHARACTER),
        (" 1", 32, 10, ErrorKind.ILLEGAL_CHARACTER),
        ("32768", 16, 10, ErrorKind.BOUNDARY_OVERFLOW),
        ("-32769", 16, 10, ErrorKind.BOUNDARY_OVERFLOW),
        ("80000000", 32, 16, ErrorKind.BOUNDARY_OVERFLOW),
    ])
    def test_errors(self, chars, width, radix, kind):
        with pytest.raises(DecodeError) as excinfo:
            parse_signed(chars, width, radix)
        assert excinfo.value.kind is kind


class TestNumericCodec:
    """Test NumericCodec."""

    def test_max_lengths(self):
        assert (NUMERIC.max_short_length(), NUMERIC.max_int_length(), NUMERIC.max_long_length()) == (5, 10, 19)
        assert NUMERIC.max_long_length(signed=True) == 20

    @pytest.mark.parametrize("value", [0, 1, -1, 32767, -32768])
    def test_short_roundtrip(self, value):
        assert NUMERIC.to_short(NUMERIC.short_to_string(value)) == value

    def test_formats(self):
        assert NUMERIC.int_to_string(-2 ** 31) == "-2147483648"
        assert NUMERIC.long_to_string(2 ** 63 - 1) == "9223372036854775807"

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            NUMERIC.short_to_string(40000)

    def test_is_convertible(self):
        assert NUMERIC.is_convertible_to_int("-2147483648")
        assert not NUMERIC.is_convertible_to_int("2147483648")
        assert NUMERIC.is_convertible_to_long("2147483648")
        assert not NUMERIC.is_convertible_to_short("HELLO")
        assert not NUMERIC.is_convertible_to_short(None)

    def test_sign(self):
        assert NUMERIC.starts_with_sign_char("-1")
        assert not NUMERIC.starts_with_sign_char(".A")

    def test_into(self):
        out = io.StringIO()
        assert NUMERIC.int_into(-42, out) == 3
        assert out.getvalue() == "-42"

    def test_repr(self):
        assert repr(NumericCodec()) == "NumericCodec()"


class TestHexCodec:
    """Test HexCodec."""

    def test_max_lengths(self):
        assert (HEX.max_short_length(), HEX.max_int_length(), HEX.max_long_length()) == (4, 8, 16)
        assert HEX.max_int_length(signed=True) == 9

    @pytest.mark.parametrize("value,chars", [
        (0, "0"),
        (255, "FF"),
        (-255, "-FF"),
        (2 ** 31 - 1, "7FFFFFFF"),
        (-(2 ** 31), "-80000000"),
    ])
    def test_int(self, value, chars):
        assert HEX.int_to_string(value) == chars
        assert HEX.to_int(chars) == value

    def test_lower_case_accepted(self):
        assert HEX.to_long("-7fffffffffffffff") == -(2 ** 63 - 1)

    def test_short(self):
        assert HEX.short_to_string(-32768) == "-8000"
        assert HEX.to_short("7FFF") == 32767

    def test_is_convertible(self):
        assert HEX.is_convertible_to_short("7FFF")
        assert not HEX.is_convertible_to_short("8000")
        assert HEX.is_convertible_to_int("8000")
        assert not HEX.is_convertible_to_long("XYZ")

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            HEX.int_to_string(2 ** 31)

    def test_repr(self):
        assert repr(HexCodec()) == "HexCodec()"
