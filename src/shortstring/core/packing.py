"""Packed character sequences: up to 8 ASCII characters in one 64-bit word.

Byte i of a word holds the ASCII code of character i; a zero byte marks the
end of the sequence and every byte after it is zero as well.  Sequences of up
to 16 characters use two words (characters 0-7 in the first, 8-15 in the
second).

Example:
    pack("AB")  == 0x4241
    unpack(0x4241) == "AB"
"""

from __future__ import annotations

WORD_CAPACITY = 8
BI_WORD_CAPACITY = 2 * WORD_CAPACITY

WORD_MASK = (1 << 64) - 1
_BYTE_MASK = 0xFF


def _check_char(ch: str) -> int:
    if len(ch) != 1:
        raise ValueError(f"Expected single character, got {len(ch)}")
    code = ord(ch)
    if code == 0 or code > 0x7F:
        raise ValueError(f"Character {ch!r} cannot be packed")
    return code


def _check_index(index: int, capacity: int) -> None:
    if not 0 <= index < capacity:
        raise ValueError(f"Index must be 0-{capacity - 1}, got {index}")


def _join(seq1: int, seq2: int) -> int:
    return seq1 | (seq2 << 64)


def _split(joined: int) -> tuple[int, int]:
    return joined & WORD_MASK, (joined >> 64) & WORD_MASK


# ----------------------------------------------------------------------
# Single word (8 characters)
# ----------------------------------------------------------------------

def pack(chars: str) -> int:
    """Pack up to 8 ASCII characters into one word."""
    if len(chars) > WORD_CAPACITY:
        raise ValueError(f"Sequence exceeds capacity of {WORD_CAPACITY}: {chars!r}")
    seq = 0
    for i, ch in enumerate(chars):
        seq |= _check_char(ch) << (i << 3)
    return seq


def char_at(seq: int, index: int) -> str:
    """Character at index, or '' past the end of the sequence."""
    if not 0 <= index < WORD_CAPACITY:
        return ""
    code = (seq >> (index << 3)) & _BYTE_MASK
    return chr(code) if code else ""


def length(seq: int) -> int:
    """Position of the first zero byte, or 8 if there is none."""
    for i in range(WORD_CAPACITY):
        if not (seq >> (i << 3)) & _BYTE_MASK:
            return i
    return WORD_CAPACITY


def unpack(seq: int) -> str:
    """Characters of a one-word sequence."""
    return "".join(char_at(seq, i) for i in range(length(seq)))


def with_char(seq: int, index: int, ch: str) -> int:
    """Return seq with character index replaced by ch."""
    _check_index(index, WORD_CAPACITY)
    shift = index << 3
    return (seq & ~(_BYTE_MASK << shift) & WORD_MASK) | (_check_char(ch) << shift)


def shift_left(seq: int, n: int) -> int:
    """Move every character n positions towards the end, zero-filling the front."""
    return (seq << (n << 3)) & WORD_MASK


def shift_right(seq: int, n: int) -> int:
    """Drop the first n characters."""
    return seq >> (n << 3)


def slice_seq(seq: int, start: int, end: int | None = None) -> int:
    """Sub-sequence with Python slice semantics (negative indices count from the end)."""
    begin, stop, _ = slice(start, end).indices(length(seq))
    if stop <= begin:
        return 0
    return (seq >> (begin << 3)) & ((1 << ((stop - begin) << 3)) - 1)


def concat(seq_a: int, seq_b: int) -> int:
    """Append sequence b to sequence a."""
    len_a = length(seq_a)
    if len_a + length(seq_b) > WORD_CAPACITY:
        raise ValueError(f"Concatenation exceeds capacity of {WORD_CAPACITY}: "
                         f"{unpack(seq_a)!r} + {unpack(seq_b)!r}")
    return seq_a | (seq_b << (len_a << 3))


# ----------------------------------------------------------------------
# Two words (16 characters)
# ----------------------------------------------------------------------

def pack2(chars: str) -> tuple[int, int]:
    """Pack up to 16 ASCII characters into two words."""
    if len(chars) > BI_WORD_CAPACITY:
        raise ValueError(f"Sequence exceeds capacity of {BI_WORD_CAPACITY}: {chars!r}")
    return pack(chars[:WORD_CAPACITY]), pack(chars[WORD_CAPACITY:])


def char_at2(seq1: int, seq2: int, index: int) -> str:
    """Character at index of a two-word sequence, or '' past the end."""
    if index < WORD_CAPACITY:
        return char_at(seq1, index)
    return char_at(seq2, index - WORD_CAPACITY)


def length2(seq1: int, seq2: int) -> int:
    """Number of characters in a two-word sequence."""
    len1 = length(seq1)
    if len1 < WORD_CAPACITY:
        return len1
    return WORD_CAPACITY + length(seq2)


def unpack2(seq1: int, seq2: int) -> str:
    """Characters of a two-word sequence."""
    first = unpack(seq1)
    if len(first) < WORD_CAPACITY:
        return first
    return first + unpack(seq2)


def with_char2(seq1: int, seq2: int, index: int, ch: str) -> tuple[int, int]:
    """Return both words with character index replaced by ch."""
    _check_index(index, BI_WORD_CAPACITY)
    if index < WORD_CAPACITY:
        return with_char(seq1, index, ch), seq2
    return seq1, with_char(seq2, index - WORD_CAPACITY, ch)


def shift_left2(seq1: int, seq2: int, n: int) -> tuple[int, int]:
    """Move every character n positions towards the end, carrying across words."""
    return _split(_join(seq1, seq2) << (n << 3))


def shift_right2(seq1: int, seq2: int, n: int) -> tuple[int, int]:
    """Drop the first n characters, carrying across words."""
    return _split(_join(seq1, seq2) >> (n << 3))


def slice_seq2(seq1: int, seq2: int, start: int, end: int | None = None) -> tuple[int, int]:
    """Two-word sub-sequence with Python slice semantics."""
    begin, stop, _ = slice(start, end).indices(length2(seq1, seq2))
    if stop <= begin:
        return 0, 0
    joined = _join(seq1, seq2) >> (begin << 3)
    return _split(joined & ((1 << ((stop - begin) << 3)) - 1))


def concat2(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    """Append two-word sequence b to a."""
    len_a = length2(*a)
    if len_a + length2(*b) > BI_WORD_CAPACITY:
        raise ValueError(f"Concatenation exceeds capacity of {BI_WORD_CAPACITY}: "
                         f"{unpack2(*a)!r} + {unpack2(*b)!r}")
    return _split(_join(*a) | (_join(*b) << (len_a << 3)))


# ----------------------------------------------------------------------
# Writers used by the encoders
# ----------------------------------------------------------------------

class PackedSeq:
    """Mutable one-word sequence.  Encoders write digits right-aligned, then align()."""

    __slots__ = ("word",)

    def __init__(self, word: int = 0) -> None:
        self.word = word

    def put(self, index: int, ch: str) -> None:
        self.word = with_char(self.word, index, ch)

    def prepend(self, start: int, ch: str) -> int:
        """Write ch just before position start, making room at index 0 if needed.

        Returns the new start position.
        """
        if start > 0:
            start -= 1
        else:
            self.word = shift_left(self.word, 1)
        self.put(start, ch)
        return start

    def align(self, start: int, sign: str | None = None) -> None:
        """Prepend sign (if any) in front of position start and move the result to index 0."""
        if sign is not None:
            start = self.prepend(start, sign)
        self.word = shift_right(self.word, start)

    def __len__(self) -> int:
        return length(self.word)

    def __str__(self) -> str:
        return unpack(self.word)

    def __repr__(self) -> str:
        return f"PackedSeq({unpack(self.word)!r})"


class BiPackedSeq:
    """Mutable two-word sequence with the same interface as PackedSeq."""

    __slots__ = ("word1", "word2")

    def __init__(self, word1: int = 0, word2: int = 0) -> None:
        self.word1 = word1
        self.word2 = word2

    def put(self, index: int, ch: str) -> None:
        self.word1, self.word2 = with_char2(self.word1, self.word2, index, ch)

    def prepend(self, start: int, ch: str) -> int:
        if start > 0:
            start -= 1
        else:
            self.word1, self.word2 = shift_left2(self.word1, self.word2, 1)
        self.put(start, ch)
        return start

    def align(self, start: int, sign: str | None = None) -> None:
        if sign is not None:
            start = self.prepend(start, sign)
        if start > 0:
            self.word1, self.word2 = shift_right2(self.word1, self.word2, start)

    @property
    def words(self) -> tuple[int, int]:
        return self.word1, self.word2

    def __len__(self) -> int:
        return length2(self.word1, self.word2)

    def __str__(self) -> str:
        return unpack2(self.word1, self.word2)

    def __repr__(self) -> str:
        return f"BiPackedSeq({unpack2(self.word1, self.word2)!r})"
