import pytest
from hypothesis import given, strategies as st

from fixeduint.errors import (
    FromDecStrErr,
    FromDecStrError,
    FromHexError,
    FromStrRadixErrKind,
    FromStrRadixError,
)
from fixeduint.parsing import parse_dec_str, parse_hex_str, parse_str_radix

PRIME = "38873241744847760218045702002058062581688990428170398542849190507947196700873"
U256_MAX = (1 << 256) - 1


def test_dec_parses_example_prime():
    assert parse_dec_str(PRIME, 4) == int(PRIME)


def test_dec_empty_is_zero():
    assert parse_dec_str("", 4) == 0


def test_dec_many_leading_zeros():
    assert parse_dec_str("0" * 5000 + "7", 1) == 7


def test_dec_max_value_fits():
    assert parse_dec_str(str(U256_MAX), 4) == U256_MAX


def test_dec_overflow_is_invalid_length():
    with pytest.raises(FromDecStrError) as info:
        parse_dec_str(str(U256_MAX + 1), 4)
    assert info.value.kind is FromDecStrErr.INVALID_LENGTH


@pytest.mark.parametrize("text", ["12a", "-1", "+1", " 1", "1_0", "١"])
def test_dec_invalid_characters(text):
    with pytest.raises(FromDecStrError) as info:
        parse_dec_str(text, 4)
    assert info.value.kind is FromDecStrErr.INVALID_CHARACTER


def test_dec_invalid_character_wins_over_length():
    with pytest.raises(FromDecStrError) as info:
        parse_dec_str("9" * 200 + "x", 4)
    assert info.value.kind is FromDecStrErr.INVALID_CHARACTER


@given(st.integers(min_value=0, max_value=U256_MAX))
def test_dec_round_trip(value):
    assert parse_dec_str(str(value), 4) == value


def test_hex_full_width():
    assert parse_hex_str("F" * 64, 4) == U256_MAX
    assert parse_hex_str("0x" + "f" * 64, 4) == U256_MAX


def test_hex_odd_length_and_u512():
    assert parse_hex_str("F" * 127, 8) == (1 << 508) - 1
    assert parse_hex_str("0" + "F" * 127, 8) == (1 << 508) - 1
    assert parse_hex_str("F" * 128, 8) == (1 << 512) - 1


def test_hex_empty_and_prefix_only():
    assert parse_hex_str("", 4) == 0
    assert parse_hex_str("0x", 4) == 0


def test_hex_too_long():
    with pytest.raises(FromHexError) as info:
        parse_hex_str("F" * 65, 4)
    assert info.value.kind is FromStrRadixErrKind.INVALID_LENGTH
    assert str(info.value) == "Invalid string length"


def test_hex_invalid_character_position():
    with pytest.raises(FromHexError) as info:
        parse_hex_str("0x12g4", 4)
    assert info.value.kind is FromStrRadixErrKind.INVALID_CHARACTER
    assert str(info.value) == "Invalid character 'g' at position 2"


def test_hex_invalid_character_position_shifted_by_padding():
    with pytest.raises(FromHexError) as info:
        parse_hex_str("1g3", 4)
    assert str(info.value) == "Invalid character 'g' at position 2"


@pytest.mark.parametrize("text", ["0X10", " 10", "1_0", "-1"])
def test_hex_rejects_non_hex(text):
    with pytest.raises(FromHexError) as info:
        parse_hex_str(text, 4)
    assert info.value.kind is FromStrRadixErrKind.INVALID_CHARACTER


@given(st.integers(min_value=0, max_value=U256_MAX))
def test_hex_round_trip(value):
    assert parse_hex_str(format(value, "x"), 4) == value
    assert parse_hex_str(format(value, "#x"), 4) == value


def test_radix_dispatch():
    assert parse_str_radix(PRIME, 10, 4) == int(PRIME)
    assert parse_str_radix("F" * 64, 16, 4) == U256_MAX


@pytest.mark.parametrize("radix", [2, 8, 36])
def test_radix_unsupported(radix):
    with pytest.raises(FromStrRadixError) as info:
        parse_str_radix("10", radix, 4)
    assert info.value.kind is FromStrRadixErrKind.UNSUPPORTED_RADIX


def test_radix_wraps_dec_error():
    with pytest.raises(FromStrRadixError) as info:
        parse_str_radix(str(U256_MAX + 1), 10, 4)
    assert info.value.kind is FromStrRadixErrKind.INVALID_LENGTH
    assert str(info.value) == "the number is too large for the type"
    assert isinstance(info.value.source, FromDecStrError)


def test_radix_wraps_hex_error():
    with pytest.raises(FromStrRadixError) as info:
        parse_str_radix("zz", 16, 4)
    assert info.value.kind is FromStrRadixErrKind.INVALID_CHARACTER
    assert isinstance(info.value.__cause__, FromHexError)


def test_zero_words_rejected():
    with pytest.raises(ValueError):
        parse_dec_str("1", 0)