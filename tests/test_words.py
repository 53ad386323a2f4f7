import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint.words import (
    MASK64,
    div_mod_word,
    full_mul_words,
    mul_u64,
    split,
    split_u128,
)

u64 = st.integers(min_value=0, max_value=MASK64)
U64_MAX = MASK64


def _join(words):
    return sum(word << (64 * position) for position, word in enumerate(words))


@given(u64)
def test_split_recombines(a):
    hi, lo = split(a)
    assert hi < 1 << 32 and lo < 1 << 32
    assert (hi << 32) | lo == a


@given(st.integers(min_value=0, max_value=(1 << 128) - 1))
def test_split_u128_recombines(a):
    hi, lo = split_u128(a)
    assert hi <= MASK64 and lo <= MASK64
    assert (hi << 64) | lo == a


def test_split_u128_rejects_too_wide():
    with pytest.raises(ValueError):
        split_u128(1 << 128)


@given(u64, u64, u64)
def test_mul_u64_matches_product(a, b, carry):
    lo, hi = mul_u64(a, b, carry)
    assert lo <= MASK64 and hi <= MASK64
    assert lo + (hi << 64) == a * b + carry


def test_mul_u64_rejects_wide_input():
    with pytest.raises(ValueError):
        mul_u64(1 << 64, 1, 0)


@pytest.mark.parametrize(
    "hi, lo, d",
    [(0, U64_MAX, 100), (42, 42, 100500), (0, U64_MAX, U64_MAX), (U64_MAX - 1, U64_MAX, U64_MAX)],
)
def test_div_mod_word_cases(hi, lo, d):
    assert div_mod_word(hi, lo, d) == divmod((hi << 64) + lo, d)


def test_div_mod_word_high_not_below_divisor():
    with pytest.raises(ValueError):
        div_mod_word(U64_MAX, U64_MAX, 99)


def test_div_mod_word_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_mod_word(0, 5, 0)


def test_full_mul_words_of_maximum():
    a = [U64_MAX] * 4
    product = full_mul_words(a, a)
    assert len(product) == 8
    assert _join(product) == _join(a) ** 2


@given(st.lists(u64, min_size=1, max_size=8), st.lists(u64, min_size=1, max_size=8))
def test_full_mul_words_is_lossless(a, b):
    product = full_mul_words(a, b)
    assert len(product) == len(a) + len(b)
    assert _join(product) == _join(a) * _join(b)


def test_full_mul_words_identity():
    one = [12767554894655550452, 16333049135534778834, 140317443000293558, 598963]
    assert full_mul_words(one, [1, 0, 0, 0]) == one + [0, 0, 0, 0]