"""Every public function of the codec modules carries a docstring."""
import inspect

import pytest

from shortstring.alphanumeric import blocks, int_codec, long_codec, short_codec
from shortstring.codecs import hex as hex_codec
from shortstring.codecs import numeric
from shortstring.core import chars, packing, seq_type


def _public_functions(module):
    for name, func in inspect.getmembers(module, inspect.isfunction):
        if not name.startswith("_") and func.__module__ == module.__name__:
            yield name, func


@pytest.mark.parametrize("module", [
    blocks, short_codec, int_codec, long_codec, hex_codec, numeric, chars, packing, seq_type,
], ids=lambda m: m.__name__)
def test_public_functions_documented(module):
    missing = [name for name, func in _public_functions(module) if not func.__doc__]
    assert missing == []


@pytest.mark.parametrize("name", ["string_length"])
def test_removed_helpers(name):
    assert not hasattr(chars, name)


def test_writers_have_no_capacity_attribute():
    assert not hasattr(packing.PackedSeq, "CAPACITY")
    assert not hasattr(packing.BiPackedSeq, "CAPACITY")
