import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint.arith import (
    div_mod_words,
    overflowing_add_words,
    overflowing_mul_u64_words,
    overflowing_mul_words,
    overflowing_sub_words,
    shl_words,
    shr_words,
)
from fixeduint.words import MASK64

ONE = [12767554894655550452, 16333049135534778834, 140317443000293558, 598963]
TWO = [2096410819092764509, 8483673822214032535, 36306297304129857, 3453]
MAX4 = [MASK64] * 4
ZERO4 = [0, 0, 0, 0]
UNIT4 = [1, 0, 0, 0]

u64 = st.integers(min_value=0, max_value=MASK64)
words4 = st.lists(u64, min_size=4, max_size=4)
BITS = 256


def _join(words):
    return sum(word << (64 * position) for position, word in enumerate(words))


def test_add_overflow_wraps_to_zero():
    assert overflowing_add_words(MAX4, UNIT4) == (ZERO4, True)


def test_sub_underflow_wraps_to_max():
    assert overflowing_sub_words(ZERO4, UNIT4) == (MAX4, True)


@given(words4, words4)
def test_add_then_sub_round_trip(a, b):
    total, _ = overflowing_add_words(a, b)
    back, _ = overflowing_sub_words(total, b)
    assert back == a


@given(words4, words4)
def test_add_matches_integers(a, b):
    total, overflow = overflowing_add_words(a, b)
    exact = _join(a) + _join(b)
    assert _join(total) == exact % (1 << BITS)
    assert overflow == (exact >= 1 << BITS)


@given(words4, words4)
def test_mul_matches_integers(a, b):
    product, overflow = overflowing_mul_words(a, b)
    exact = _join(a) * _join(b)
    assert _join(product) == exact % (1 << BITS)
    assert overflow == (exact >= 1 << BITS)


def test_mul_by_one_keeps_value():
    assert overflowing_mul_words(ONE, UNIT4) == (ONE, False)


def test_mul_max_squared_overflows():
    assert overflowing_mul_words(MAX4, MAX4) == (UNIT4, True)


@given(words4, u64)
def test_mul_u64_carry(a, by):
    result, carry = overflowing_mul_u64_words(a, by)
    assert _join(result) + (carry << BITS) == _join(a) * by


def test_mul_u64_rejects_wide_multiplier():
    with pytest.raises(ValueError):
        overflowing_mul_u64_words(ONE, 1 << 64)


def test_div_mod_bench_pair():
    quotient, remainder = div_mod_words(ONE, TWO)
    assert _join(remainder) < _join(TWO)
    product, overflow = overflowing_mul_words(quotient, TWO)
    total, carried = overflowing_add_words(product, remainder)
    assert (total, overflow, carried) == (ONE, False, False)


def test_div_mod_by_larger_returns_dividend():
    assert div_mod_words(TWO, ONE) == (ZERO4, TWO)


@given(words4, words4)
def test_div_mod_matches_integers(a, b):
    if _join(b) == 0:
        with pytest.raises(ZeroDivisionError):
            div_mod_words(a, b)
    else:
        quotient, remainder = div_mod_words(a, b)
        assert (_join(quotient), _join(remainder)) == divmod(_join(a), _join(b))


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_mod_words(ONE, ZERO4)


def test_mismatched_widths():
    with pytest.raises(ValueError):
        overflowing_add_words(ONE, [1, 2])


def test_shift_by_128_round_trip():
    assert shr_words(shl_words(ONE, 128), 128) == [ONE[0], ONE[1], 0, 0]
    assert shl_words(shr_words(ONE, 128), 128) == [0, 0, ONE[2], ONE[3]]


@given(words4, st.integers(min_value=0, max_value=300))
def test_shifts_match_integers(a, shift):
    assert _join(shl_words(a, shift)) == (_join(a) << shift) % (1 << BITS)
    assert _join(shr_words(a, shift)) == _join(a) >> shift


def test_shift_past_width_is_zero():
    assert shl_words(ONE, 256) == ZERO4
    assert shr_words(ONE, 1000) == ZERO4


def test_negative_shift_rejected():
    with pytest.raises(ValueError):
        shl_words(ONE, -1)