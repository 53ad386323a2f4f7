"""Fixed-width unsigned integer types built from 64-bit little-endian words."""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from .arith import (
    div_mod_words,
    overflowing_add_words,
    overflowing_mul_words,
    overflowing_sub_words,
    shl_words,
    shr_words,
)
from .errors import ArithmeticOverflowError
from .parsing import parse_dec_str, parse_hex_str, parse_str_radix
from .words import MASK64, WORD_BITS, _from_int, _to_int, full_mul_words

_U32_MAX = (1 << 32) - 1
_U128_MAX = (1 << 128) - 1

_BY_WIDTH: dict[int, type[FixedUInt]] = {}


class FixedUInt:
    """Unsigned integer with a fixed number of 64-bit words.

    Concrete types are made with :func:`construct_uint`. Arithmetic that
    leaves the range of the type raises :class:`ArithmeticOverflowError`;
    the ``overflowing_*``, ``checked_*`` and ``saturating_*`` methods give
    the other behaviours.
    """

    __slots__ = ("_value",)

    N_WORDS: ClassVar[int] = 0
    MAX: ClassVar[FixedUInt]

    def __init__(self, value: int | str | bytes | bytearray | FixedUInt = 0) -> None:
        cls = type(self)
        if cls.N_WORDS < 1:
            raise TypeError("FixedUInt has no width; make a concrete type with construct_uint")
        if isinstance(value, FixedUInt):
            number = value._value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            number = cls._int_from_bytes(bytes(value), "big")
        elif isinstance(value, str):
            number = parse_hex_str(value, cls.N_WORDS)
        elif isinstance(value, int):
            number = value
        else:
            raise TypeError(f"cannot build {cls.__name__} from {type(value).__name__}")
        self._value = cls._check_range(number)

    # ----- internal helpers -------------------------------------------------

    @classmethod
    def _bit_width(cls) -> int:
        return cls.N_WORDS * WORD_BITS

    @classmethod
    def _mask(cls) -> int:
        return (1 << cls._bit_width()) - 1

    @classmethod
    def _check_range(cls, number: int) -> int:
        if number < 0:
            raise ValueError("Unsigned integer can't be created from negative value")
        if number > cls._mask():
            raise ArithmeticOverflowError(f"integer does not fit in {cls.__name__}")
        return number

    @classmethod
    def _make(cls, number: int) -> FixedUInt:
        obj = object.__new__(cls)
        obj._value = number
        return obj

    @classmethod
    def _from_word_list(cls, words: Sequence[int]) -> FixedUInt:
        return cls._make(_to_int(words))

    @classmethod
    def _int_from_bytes(cls, data: bytes, order: str) -> int:
        if len(data) > cls.N_WORDS * 8:
            raise ValueError(f"{len(data)} bytes do not fit in {cls.__name__}")
        return int.from_bytes(data, order)  # type: ignore[arg-type]

    def _coerce(self, other: object) -> int | None:
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, int):
            return type(self)._check_range(other)
        return None

    def _require(self, other: object) -> int:
        number = self._coerce(other)
        if number is None:
            raise TypeError(
                f"expected {type(self).__name__} or int, got {type(other).__name__}"
            )
        return number

    def _words_of(self, number: int) -> list[int]:
        return _from_int(number, self.N_WORDS)

    @staticmethod
    def _shift_amount(shift: object) -> int:
        if isinstance(shift, (int, FixedUInt)):
            return int(shift)
        raise TypeError(f"shift must be an integer, got {type(shift).__name__}")

    # ----- construction ----------------------------------------------------

    @classmethod
    def from_words(cls, words: Sequence[int]) -> FixedUInt:
        """Build from exactly ``N_WORDS`` little-endian 64-bit words."""
        if len(words) != cls.N_WORDS:
            raise ValueError(f"{cls.__name__} needs {cls.N_WORDS} words, got {len(words)}")
        return cls._make(_to_int(words))

    @classmethod
    def zero(cls) -> FixedUInt:
        """The additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> FixedUInt:
        """The multiplicative identity."""
        return cls(1)

    @classmethod
    def max_value(cls) -> FixedUInt:
        """The largest value of the type."""
        return cls(cls._mask())

    @classmethod
    def exp10(cls, n: int) -> FixedUInt:
        """Return ``10 ** n``; raises if it does not fit."""
        if n < 0:
            raise ValueError("exponent must not be negative")
        if n > cls._bit_width():
            raise ArithmeticOverflowError()
        number = 10**n
        if number > cls._mask():
            raise ArithmeticOverflowError()
        return cls._make(number)

    @classmethod
    def from_dec_str(cls, text: str) -> FixedUInt:
        """Parse a string of decimal digits."""
        return cls._make(parse_dec_str(text, cls.N_WORDS))

    @classmethod
    def from_hex_str(cls, text: str) -> FixedUInt:
        """Parse a hexadecimal string with an optional ``0x`` prefix."""
        return cls._make(parse_hex_str(text, cls.N_WORDS))

    @classmethod
    def from_str_radix(cls, text: str, radix: int) -> FixedUInt:
        """Parse ``text`` in radix 10 or 16."""
        return cls._make(parse_str_radix(text, radix, cls.N_WORDS))

    @classmethod
    def from_big_endian(cls, data: bytes) -> FixedUInt:
        """Read big-endian bytes, at most ``N_WORDS * 8`` of them."""
        return cls._make(cls._int_from_bytes(bytes(data), "big"))

    @classmethod
    def from_little_endian(cls, data: bytes) -> FixedUInt:
        """Read little-endian bytes, at most ``N_WORDS * 8`` of them."""
        return cls._make(cls._int_from_bytes(bytes(data), "little"))

    # ----- conversion ------------------------------------------------------

    def words(self) -> tuple[int, ...]:
        """The little-endian 64-bit words."""
        return tuple(self._words_of(self._value))

    def to_big_endian(self) -> bytes:
        """Bytes in big-endian order, ``N_WORDS * 8`` long."""
        return self._value.to_bytes(self.N_WORDS * 8, "big")

    def to_little_endian(self) -> bytes:
        """Bytes in little-endian order, ``N_WORDS * 8`` long."""
        return self._value.to_bytes(self.N_WORDS * 8, "little")

    def low_u32(self) -> int:
        """The low 32 bits."""
        return self._value & _U32_MAX

    def low_u64(self) -> int:
        """The low word."""
        return self._value & MASK64

    def low_u128(self) -> int:
        """The low two words."""
        return self._value & _U128_MAX

    def as_u32(self) -> int:
        """The value, which must fit in 32 bits."""
        if self._value > _U32_MAX:
            raise ArithmeticOverflowError("Integer overflow when casting to u32")
        return self._value

    def as_u64(self) -> int:
        """The value, which must fit in 64 bits."""
        if self._value > MASK64:
            raise ArithmeticOverflowError("Integer overflow when casting to u64")
        return self._value

    def as_u128(self) -> int:
        """The value, which must fit in 128 bits."""
        if self._value > _U128_MAX:
            raise ArithmeticOverflowError("Integer overflow when casting to u128")
        return self._value

    def as_usize(self) -> int:
        """The value, which must fit in a 64-bit machine size."""
        if self._value > MASK64:
            raise ArithmeticOverflowError("Integer overflow when casting to usize")
        return self._value

    # ----- inspection ------------------------------------------------------

    def is_zero(self) -> bool:
        """Whether the value is zero."""
        return self._value == 0

    def bits(self) -> int:
        """The least number of bits needed to represent the value."""
        return self._value.bit_length()

    def bit(self, index: int) -> bool:
        """Whether bit ``index`` is set."""
        if not 0 <= index < self._bit_width():
            raise IndexError(f"bit index {index} out of range for {type(self).__name__}")
        return bool(self._value >> index & 1)

    def byte(self, index: int) -> int:
        """Byte ``index``, counted from the least significant."""
        if not 0 <= index < self.N_WORDS * 8:
            raise IndexError(f"byte index {index} out of range for {type(self).__name__}")
        return self._value >> (8 * index) & 0xFF

    def leading_zeros(self) -> int:
        """Number of leading zero bits."""
        return self._bit_width() - self._value.bit_length()

    def trailing_zeros(self) -> int:
        """Number of trailing zero bits; the full width for zero."""
        if self._value == 0:
            return self._bit_width()
        return (self._value & -self._value).bit_length() - 1

    # ----- arithmetic ------------------------------------------------------

    def div_mod(self, other: FixedUInt | int) -> tuple[FixedUInt, FixedUInt]:
        """Return ``(self // other, self % other)``."""
        divisor = self._require(other)
        quotient, remainder = div_mod_words(self.words(), self._words_of(divisor))
        cls = type(self)
        return cls._from_word_list(quotient), cls._from_word_list(remainder)

    def pow(self, expon: FixedUInt | int) -> FixedUInt:
        """Raise to ``expon``; raises if the result overflows."""
        result, overflow = self.overflowing_pow(expon)
        if overflow:
            raise ArithmeticOverflowError()
        return result

    def overflowing_pow(self, expon: FixedUInt | int) -> tuple[FixedUInt, bool]:
        """Raise to ``expon`` with wrap-around, and whether it overflowed."""
        exponent = self._require(expon)
        cls = type(self)
        if exponent == 0:
            return cls.one(), False
        width = self._bit_width()
        base = self._value
        wrapped = pow(base, exponent, 1 << width)
        if base <= 1:
            overflow = False
        elif exponent >= width:
            overflow = True
        else:
            overflow = (base**exponent) >> width != 0
        return cls._make(wrapped), overflow

    def checked_pow(self, expon: FixedUInt | int) -> FixedUInt | None:
        """Raise to ``expon``, or ``None`` on overflow."""
        result, overflow = self.overflowing_pow(expon)
        return None if overflow else result

    def overflowing_add(self, other: FixedUInt | int) -> tuple[FixedUInt, bool]:
        """Add with wrap-around, and whether it overflowed."""
        words, overflow = overflowing_add_words(self.words(), self._words_of(self._require(other)))
        return type(self)._from_word_list(words), overflow

    def saturating_add(self, other: FixedUInt | int) -> FixedUInt:
        """Add, stopping at the maximum value."""
        result, overflow = self.overflowing_add(other)
        return type(self).max_value() if overflow else result

    def checked_add(self, other: FixedUInt | int) -> FixedUInt | None:
        """Add, or ``None`` on overflow."""
        result, overflow = self.overflowing_add(other)
        return None if overflow else result

    def overflowing_sub(self, other: FixedUInt | int) -> tuple[FixedUInt, bool]:
        """Subtract with wrap-around, and whether it underflowed."""
        words, overflow = overflowing_sub_words(self.words(), self._words_of(self._require(other)))
        return type(self)._from_word_list(words), overflow

    def saturating_sub(self, other: FixedUInt | int) -> FixedUInt:
        """Subtract, stopping at zero."""
        result, overflow = self.overflowing_sub(other)
        return type(self).zero() if overflow else result

    def checked_sub(self, other: FixedUInt | int) -> FixedUInt | None:
        """Subtract, or ``None`` on underflow."""
        result, overflow = self.overflowing_sub(other)
        return None if overflow else result

    def overflowing_mul(self, other: FixedUInt | int) -> tuple[FixedUInt, bool]:
        """Multiply with wrap-around, and whether it overflowed."""
        words, overflow = overflowing_mul_words(self.words(), self._words_of(self._require(other)))
        return type(self)._from_word_list(words), overflow

    def saturating_mul(self, other: FixedUInt | int) -> FixedUInt:
        """Multiply, stopping at the maximum value."""
        result, overflow = self.overflowing_mul(other)
        return type(self).max_value() if overflow else result

    def checked_mul(self, other: FixedUInt | int) -> FixedUInt | None:
        """Multiply, or ``None`` on overflow."""
        result, overflow = self.overflowing_mul(other)
        return None if overflow else result

    def checked_div(self, other: FixedUInt | int) -> FixedUInt | None:
        """Divide, or ``None`` when ``other`` is zero."""
        if self._require(other) == 0:
            return None
        return self.div_mod(other)[0]

    def checked_rem(self, other: FixedUInt | int) -> FixedUInt | None:
        """Remainder, or ``None`` when ``other`` is zero."""
        if self._require(other) == 0:
            return None
        return self.div_mod(other)[1]

    def overflowing_neg(self) -> tuple[FixedUInt, bool]:
        """Negation: zero stays zero; anything else gives its bitwise complement and True."""
        if self.is_zero():
            return self, False
        return ~self, True

    def checked_neg(self) -> FixedUInt | None:
        """Negation, defined only for zero."""
        result, overflow = self.overflowing_neg()
        return None if overflow else result

    def full_mul(self, other: FixedUInt) -> FixedUInt:
        """Exact product, as the type with twice as many words."""
        if not isinstance(other, type(self)):
            raise TypeError(f"full_mul needs another {type(self).__name__}")
        wide = _type_for(2 * self.N_WORDS)
        return wide.from_words(full_mul_words(self.words(), other.words()))

    # ----- operators -------------------------------------------------------

    def __add__(self, other: object) -> FixedUInt:
        if self._coerce(other) is None:
            return NotImplemented
        result, overflow = self.overflowing_add(other)  # type: ignore[arg-type]
        if overflow:
            raise ArithmeticOverflowError()
        return result

    def __radd__(self, other: object) -> FixedUInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> FixedUInt:
        if self._coerce(other) is None:
            return NotImplemented
        result, overflow = self.overflowing_sub(other)  # type: ignore[arg-type]
        if overflow:
            raise ArithmeticOverflowError()
        return result

    def __mul__(self, other: object) -> FixedUInt:
        if self._coerce(other) is None:
            return NotImplemented
        result, overflow = self.overflowing_mul(other)  # type: ignore[arg-type]
        if overflow:
            raise ArithmeticOverflowError()
        return result

    def __rmul__(self, other: object) -> FixedUInt:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> FixedUInt:
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_mod(other)[0]  # type: ignore[arg-type]

    def __mod__(self, other: object) -> FixedUInt:
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_mod(other)[1]  # type: ignore[arg-type]

    def __and__(self, other: object) -> FixedUInt:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return type(self)._make(self._value & number)

    def __or__(self, other: object) -> FixedUInt:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return type(self)._make(self._value | number)

    def __xor__(self, other: object) -> FixedUInt:
        number = self._coerce(other)
        if number is None:
            return NotImplemented
        return type(self)._make(self._value ^ number)

    def __invert__(self) -> FixedUInt:
        return type(self)._make(self._value ^ self._mask())

    def __lshift__(self, shift: object) -> FixedUInt:
        amount = self._shift_amount(shift)
        return type(self)._from_word_list(shl_words(self.words(), amount))

    def __rshift__(self, shift: object) -> FixedUInt:
        amount = self._shift_amount(shift)
        return type(self)._from_word_list(shr_words(self.words(), amount))

    def _compare_operand(self, other: object) -> int | None:
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, int) and not isinstance(other, FixedUInt):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        number = self._compare_operand(other)
        if number is None:
            return NotImplemented
        return self._value == number

    def __lt__(self, other: object) -> bool:
        number = self._compare_operand(other)
        if number is None:
            return NotImplemented
        return self._value < number

    def __le__(self, other: object) -> bool:
        number = self._compare_operand(other)
        if number is None:
            return NotImplemented
        return self._value <= number

    def __gt__(self, other: object) -> bool:
        number = self._compare_operand(other)
        if number is None:
            return NotImplemented
        return self._value > number

    def __ge__(self, other: object) -> bool:
        number = self._compare_operand(other)
        if number is None:
            return NotImplemented
        return self._value >= number

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bytes__(self) -> bytes:
        return self.to_big_endian()

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __format__(self, spec: str) -> str:
        return format(self._value, spec)


def construct_uint(name: str, n_words: int) -> type[FixedUInt]:
    """Make a concrete unsigned integer type of ``n_words`` 64-bit words."""
    if not isinstance(n_words, int) or n_words < 1:
        raise ValueError("n_words must be a positive integer")
    cls = type(
        name,
        (FixedUInt,),
        {
            "__slots__": (),
            "N_WORDS": n_words,
            "__module__": __name__,
            "__doc__": f"Unsigned integer of {n_words * WORD_BITS} bits.",
        },
    )
    cls.MAX = cls._make((1 << (n_words * WORD_BITS)) - 1)
    _BY_WIDTH.setdefault(n_words, cls)
    return cls


def _type_for(n_words: int) -> type[FixedUInt]:
    existing = _BY_WIDTH.get(n_words)
    if existing is not None:
        return existing
    return construct_uint(f"U{n_words * WORD_BITS}", n_words)


U128 = construct_uint("U128", 2)
U256 = construct_uint("U256", 4)
U512 = construct_uint("U512", 8)