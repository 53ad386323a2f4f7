"""Fixed-width arithmetic on little-endian sequences of 64-bit words."""

from __future__ import annotations

from collections.abc import Sequence

from .words import MASK64, WORD_BITS, _from_int, _to_int


def _width(a: Sequence[int], b: Sequence[int]) -> int:
    if len(a) != len(b):
        raise ValueError("operands must have the same number of words")
    if not a:
        raise ValueError("operands must have at least one word")
    return len(a)


def _single_width(a: Sequence[int]) -> int:
    if not a:
        raise ValueError("operand must have at least one word")
    return len(a)


def overflowing_add_words(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], bool]:
    """Add with wrap-around; the flag tells whether the sum overflowed."""
    n_words = _width(a, b)
    total = _to_int(a) + _to_int(b)
    return _from_int(total, n_words), total >> (WORD_BITS * n_words) != 0


def overflowing_sub_words(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], bool]:
    """Subtract with wrap-around; the flag tells whether it underflowed."""
    n_words = _width(a, b)
    difference = _to_int(a) - _to_int(b)
    return _from_int(difference, n_words), difference < 0


def overflowing_mul_words(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], bool]:
    """Multiply keeping the low words; the flag tells whether high words were lost."""
    n_words = _width(a, b)
    product = _to_int(a) * _to_int(b)
    return _from_int(product, n_words), product >> (WORD_BITS * n_words) != 0


def overflowing_mul_u64_words(a: Sequence[int], by: int) -> tuple[list[int], int]:
    """Multiply by a single word, returning the wrapped result and the carry word."""
    n_words = _single_width(a)
    if not 0 <= by <= MASK64:
        raise ValueError("by must fit in an unsigned 64-bit word")
    product = _to_int(a) * by
    return _from_int(product, n_words), product >> (WORD_BITS * n_words)


def div_mod_words(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Return ``(a // b, a % b)`` as word sequences of the operands' width."""
    n_words = _width(a, b)
    divisor = _to_int(b)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient, remainder = divmod(_to_int(a), divisor)
    return _from_int(quotient, n_words), _from_int(remainder, n_words)


def _check_shift(shift: int) -> None:
    if shift < 0:
        raise ValueError("shift must not be negative")


def shl_words(a: Sequence[int], shift: int) -> list[int]:
    """Shift left by ``shift`` bits, dropping bits beyond the width."""
    n_words = _single_width(a)
    _check_shift(shift)
    if shift >= WORD_BITS * n_words:
        return [0] * n_words
    return _from_int(_to_int(a) << shift, n_words)


def shr_words(a: Sequence[int], shift: int) -> list[int]:
    """Shift right by ``shift`` bits."""
    n_words = _single_width(a)
    _check_shift(shift)
    if shift >= WORD_BITS * n_words:
        return [0] * n_words
    return _from_int(_to_int(a) >> shift, n_words)