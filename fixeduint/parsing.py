"""Parsing of decimal and hexadecimal strings into bounded integers."""

from __future__ import annotations

from .errors import (
    FromDecStrErr,
    FromDecStrError,
    FromHexError,
    FromStrRadixErrKind,
    FromStrRadixError,
)

_WORD_BITS = 64
_DEC_DIGITS = frozenset(b"0123456789")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def _check_width(n_words: int) -> int:
    if n_words < 1:
        raise ValueError("n_words must be at least 1")
    return n_words * _WORD_BITS


def parse_dec_str(text: str, n_words: int) -> int:
    """Parse a string of ASCII decimal digits into a value of ``n_words`` words.

    An empty string parses as zero.
    """
    bit_width = _check_width(n_words)
    encoded = text.encode("utf-8")
    if not all(byte in _DEC_DIGITS for byte in encoded):
        raise FromDecStrError(FromDecStrErr.INVALID_CHARACTER)

    digits = encoded.lstrip(b"0")
    max_digits = len(str((1 << bit_width) - 1))
    if len(digits) > max_digits:
        raise FromDecStrError(FromDecStrErr.INVALID_LENGTH)
    value = int(digits) if digits else 0
    if value >> bit_width:
        raise FromDecStrError(FromDecStrErr.INVALID_LENGTH)
    return value


def parse_hex_str(text: str, n_words: int) -> int:
    """Parse a hexadecimal string, with an optional ``0x`` prefix.

    Odd-length input is read as if a leading ``0`` were present; an empty
    string parses as zero.
    """
    bit_width = _check_width(n_words)
    encoded = text.removeprefix("0x").encode("utf-8")
    if len(encoded) > bit_width // 4:
        raise FromHexError("Invalid string length", FromStrRadixErrKind.INVALID_LENGTH)
    if len(encoded) % 2:
        encoded = b"0" + encoded
    for index, byte in enumerate(encoded):
        if byte not in _HEX_DIGITS:
            raise FromHexError(
                f"Invalid character {chr(byte)!r} at position {index}",
                FromStrRadixErrKind.INVALID_CHARACTER,
            )
    return int(encoded, 16) if encoded else 0


def parse_str_radix(text: str, radix: int, n_words: int) -> int:
    """Parse ``text`` in radix 10 or 16; any other radix is rejected."""
    if radix == 10:
        try:
            return parse_dec_str(text, n_words)
        except FromDecStrError as error:
            raise FromStrRadixError.from_dec_error(error) from error
    if radix == 16:
        try:
            return parse_hex_str(text, n_words)
        except FromHexError as error:
            raise FromStrRadixError.from_hex_error(error) from error
    raise FromStrRadixError.unsupported()