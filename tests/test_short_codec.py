"""Tests for the 16-bit alphanumeric codec."""
import io
import itertools

import pytest

from shortstring.alphanumeric import short_codec
from shortstring.alphanumeric.short_codec import (
    MAX_STRING,
    MAX_VALUE,
    MIN_STRING,
    MIN_VALUE,
    decode,
    encode,
    encode_into,
    is_convertible,
)
from shortstring.core.errors import DecodeError, ErrorKind


class TestLengths:
    """Test length constants."""

    def test_lengths(self):
        assert short_codec.max_unsigned_length() == 3
        assert short_codec.max_signed_length() == 4

    def test_block_sizes(self):
        assert short_codec.LETTER_LETTER_BLOCK == 25_038
        assert short_codec.LETTER_DIGIT_CAPACITY == 6_730


class TestKnownValues:
    """Test values at the block edges."""

    @pytest.mark.parametrize("chars,value", [
        ("0", 0),
        ("7", 7),
        ("999", 999),
        ("A", 1000),
        ("Z", 1025),
        ("AA", 1026),
        ("ZZ", 1701),
        ("AA0", 1702),
        ("AAA", 1712),
        ("ZZZ", 26037),
        ("A0", 26038),
        ("Z9", 26297),
        ("A00", 26298),
        ("R9O", 32766),
        ("R9P", 32767),
        ("-1", -1),
        ("-999", -999),
        (".A", -1000),
        (".ZZZ", -26037),
        (".R9P", -32767),
        (".R9Q", -32768),
    ])
    def test_decode_and_encode(self, chars, value):
        assert decode(chars) == value
        assert encode(value) == chars

    def test_boundaries(self):
        assert encode(MAX_VALUE) == MAX_STRING == "R9P"
        assert encode(MIN_VALUE) == MIN_STRING == ".R9Q"


class TestDecodeErrors:
    """Test rejected strings and their error kinds."""

    @pytest.mark.parametrize("chars,kind", [
        ("", ErrorKind.EMPTY_INPUT),
        ("-", ErrorKind.SIGN_ONLY_INPUT),
        (".", ErrorKind.SIGN_ONLY_INPUT),
        ("1000", ErrorKind.LENGTH_EXCEEDED),
        ("ABCD", ErrorKind.LENGTH_EXCEEDED),
        ("ab", ErrorKind.ILLEGAL_CHARACTER),
        ("-0", ErrorKind.INVALID_LEADING_ZERO),
        ("00", ErrorKind.UNSUPPORTED_SHAPE),
        ("1A", ErrorKind.UNSUPPORTED_SHAPE),
        (".01", ErrorKind.UNSUPPORTED_SHAPE),
        ("R9Q", ErrorKind.BOUNDARY_OVERFLOW),
        ("S00", ErrorKind.BOUNDARY_OVERFLOW),
        ("Z9Z", ErrorKind.BOUNDARY_OVERFLOW),
        (".R9R", ErrorKind.BOUNDARY_OVERFLOW),
    ])
    def test_kind(self, chars, kind):
        with pytest.raises(DecodeError) as excinfo:
            decode(chars)
        assert excinfo.value.kind is kind
        assert excinfo.value.value == chars
        assert not is_convertible(chars)

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            decode(42)


class TestEncode:
    """Test encoding details."""

    @pytest.mark.parametrize("value", [MIN_VALUE - 1, MAX_VALUE + 1])
    def test_out_of_range_raises(self, value):
        with pytest.raises(ValueError, match="out of range"):
            encode(value)

    def test_encode_into(self):
        out = io.StringIO()
        assert encode_into(-32768, out) == 4
        assert encode_into(5, out) == 1
        assert out.getvalue() == ".R9Q5"


class TestIsConvertible:
    """Test validation without decoding."""

    def test_non_string_is_false(self):
        assert not is_convertible(None)
        assert not is_convertible(1000)

    @pytest.mark.parametrize("chars", ["R9P", ".R9Q", "ZZZ", ".ZZZ", "Q9Z", "-999"])
    def test_accepts(self, chars):
        assert is_convertible(chars)


@pytest.mark.slow
class TestExhaustive:
    """Sweep every 16-bit value and every candidate string."""

    def test_bijection(self):
        seen = set()
        for value in range(MIN_VALUE, MAX_VALUE + 1):
            chars = encode(value)
            assert decode(chars) == value
            assert is_convertible(chars)
            seen.add(chars)
        assert len(seen) == 1 << 16

    def test_convertible_iff_decodable(self):
        alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        for prefix in ("", "-", "."):
            for size in range(1, 4):
                for body in itertools.product(alphabet, repeat=size):
                    chars = prefix + "".join(body)
                    try:
                        value = decode(chars)
                    except DecodeError:
                        assert not is_convertible(chars), chars
                    else:
                        assert is_convertible(chars), chars
                        assert encode(value) == chars
