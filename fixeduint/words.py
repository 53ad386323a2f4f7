"""Operations on single 64-bit words and on little-endian word sequences."""

from __future__ import annotations

from collections.abc import Sequence

WORD_BITS = 64
MASK64 = (1 << WORD_BITS) - 1
_TWO32 = 1 << 32


def _check_word(value: int, name: str) -> None:
    if not 0 <= value <= MASK64:
        raise ValueError(f"{name} must fit in an unsigned 64-bit word")


def _to_int(words: Sequence[int]) -> int:
    """Combine little-endian 64-bit words into one integer."""
    total = 0
    for position, word in enumerate(words):
        _check_word(word, "every word")
        total |= word << (WORD_BITS * position)
    return total


def _from_int(value: int, n_words: int) -> list[int]:
    """Split ``value`` into ``n_words`` little-endian words, wrapping modulo the width."""
    return [(value >> (WORD_BITS * position)) & MASK64 for position in range(n_words)]


def split(a: int) -> tuple[int, int]:
    """Split a 64-bit word into its high and low 32-bit halves."""
    _check_word(a, "a")
    return a >> 32, a & 0xFFFF_FFFF


def split_u128(a: int) -> tuple[int, int]:
    """Split a 128-bit value into its high and low 64-bit words."""
    if not 0 <= a < 1 << 128:
        raise ValueError("a must fit in an unsigned 128-bit value")
    return a >> WORD_BITS, a & MASK64


def mul_u64(a: int, b: int, carry: int) -> tuple[int, int]:
    """Return ``(low, high)`` words of ``a * b + carry``."""
    for value, name in ((a, "a"), (b, "b"), (carry, "carry")):
        _check_word(value, name)
    hi, lo = split_u128(a * b + carry)
    return lo, hi


def div_mod_word(hi: int, lo: int, y: int) -> tuple[int, int]:
    """Divide the two-word value ``hi:lo`` by the word ``y``.

    ``hi`` must be smaller than ``y`` so the quotient fits in one word.
    Returns ``(quotient, remainder)``.
    """
    for value, name in ((hi, "hi"), (lo, "lo"), (y, "y")):
        _check_word(value, name)
    if y == 0:
        raise ZeroDivisionError("division by zero")
    if hi >= y:
        raise ValueError("the high word must be smaller than the divisor")

    s = WORD_BITS - y.bit_length()
    y = (y << s) & MASK64
    yn1, yn0 = split(y)
    un32 = ((hi << s) & MASK64) | (lo >> (WORD_BITS - s) if s else 0)
    un10 = (lo << s) & MASK64
    un1, un0 = split(un10)

    q1 = un32 // yn1
    rhat = un32 - q1 * yn1
    while q1 >= _TWO32 or q1 * yn0 > _TWO32 * rhat + un1:
        q1 -= 1
        rhat += yn1
        if rhat >= _TWO32:
            break

    un21 = (un32 * _TWO32 + un1 - q1 * y) & MASK64
    q0 = un21 // yn1
    rhat = (un21 - q0 * yn1) & MASK64
    while q0 >= _TWO32 or q0 * yn0 > _TWO32 * rhat + un0:
        q0 -= 1
        rhat += yn1
        if rhat >= _TWO32:
            break

    rem = (un21 * _TWO32 + un0 - y * q0) & MASK64
    return q1 * _TWO32 + q0, rem >> s


def full_mul_words(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Multiply two word sequences without loss, giving ``len(a) + len(b)`` words."""
    return _from_int(_to_int(a) * _to_int(b), len(a) + len(b))