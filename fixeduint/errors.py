"""Exceptions raised by fixed-width unsigned integer parsing and arithmetic."""

from __future__ import annotations

import enum


class FromStrRadixErrKind(enum.Enum):
    """Categories of errors met while parsing numbers from strings."""

    INVALID_CHARACTER = "input contains an invalid character"
    INVALID_LENGTH = "length not supported for radix or type"
    UNSUPPORTED_RADIX = "the given radix is not supported"

    @property
    def message(self) -> str:
        return self.value


class FromDecStrErr(enum.Enum):
    """Reasons a decimal string cannot be converted."""

    INVALID_CHARACTER = "a character is not in the range 0-9"
    INVALID_LENGTH = "the number is too large for the type"

    @property
    def message(self) -> str:
        return self.value


class UIntError(Exception):
    """Base class of every error raised by this package."""


class ArithmeticOverflowError(UIntError, ArithmeticError):
    """An arithmetic operation overflowed the fixed width of the type."""

    def __init__(self, message: str = "arithmetic operation overflow") -> None:
        super().__init__(message)


class FromDecStrError(UIntError, ValueError):
    """A decimal string could not be converted."""

    def __init__(self, kind: FromDecStrErr) -> None:
        super().__init__(kind.message)
        self.kind = kind


class FromHexError(UIntError, ValueError):
    """A hexadecimal string could not be converted."""

    def __init__(self, message: str, kind: FromStrRadixErrKind) -> None:
        super().__init__(message)
        self.kind = kind


_DEC_KINDS = {
    FromDecStrErr.INVALID_CHARACTER: FromStrRadixErrKind.INVALID_CHARACTER,
    FromDecStrErr.INVALID_LENGTH: FromStrRadixErrKind.INVALID_LENGTH,
}


class FromStrRadixError(UIntError, ValueError):
    """A string in a given radix could not be converted."""

    def __init__(self, kind: FromStrRadixErrKind, message: str | None = None) -> None:
        super().__init__(message if message is not None else kind.message)
        self.kind = kind
        self.source: FromDecStrError | FromHexError | None = None

    @classmethod
    def unsupported(cls) -> FromStrRadixError:
        """Error for a radix other than 10 or 16."""
        return cls(FromStrRadixErrKind.UNSUPPORTED_RADIX)

    @classmethod
    def from_dec_error(cls, error: FromDecStrError) -> FromStrRadixError:
        """Wrap a decimal parsing error."""
        wrapped = cls(_DEC_KINDS[error.kind], str(error))
        wrapped.source = error
        wrapped.__cause__ = error
        return wrapped

    @classmethod
    def from_hex_error(cls, error: FromHexError) -> FromStrRadixError:
        """Wrap a hexadecimal parsing error."""
        wrapped = cls(error.kind, str(error))
        wrapped.source = error
        wrapped.__cause__ = error
        return wrapped