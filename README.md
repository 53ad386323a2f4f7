# fixeduint

Fixed-width unsigned big integers for Python.

Python's `int` grows without bound. `fixeduint` gives you integers of a fixed
number of 64-bit words, such as 128, 256 or 512 bits, that behave the way
fixed-width unsigned machine integers do:

* the plain operators `+`, `-` and `*` raise `ArithmeticOverflowError` when the
  result does not fit, instead of quietly growing or wrapping;
* `overflowing_*`, `checked_*` and `saturating_*` methods give the overflow
  behaviour you ask for;
* decimal and hexadecimal parsing rejects input that does not fit the type;
* big-endian and little-endian byte conversion uses the full width of the type.

There are no runtime dependencies.

## Installation

```
pip install fixeduint
```

## Ready-made types

`U128`, `U256` and `U512` in `fixeduint.uint` hold 2, 4 and 8 little-endian
64-bit words.

```python
from fixeduint.uint import U256

a = U256(42)
b = U256.from_dec_str("1000000000000000000")
c = U256.from_hex_str("0xff")

print(a + b)                    # 1000000000000000042
print(format(c, "x"))           # ff
print(U256.max_value().bits())  # 256
```

The constructor takes a Python `int`, a hexadecimal `str` (optional `0x`
prefix), big-endian `bytes`, or another value of the same type. A negative
`int` raises `ValueError`; one too large for the type raises
`ArithmeticOverflowError`. Every type also has a `MAX` class attribute.

## Your own widths

`construct_uint` builds a new type with the number of 64-bit words you ask for:

```python
from fixeduint.uint import construct_uint

U1024 = construct_uint("U1024", 16)
x = U1024.exp10(300)
```

## Overflow handling

```python
from fixeduint.errors import ArithmeticOverflowError
from fixeduint.uint import U256

top = U256.max_value()

result, overflowed = top.overflowing_add(U256.one())   # (0, True)
top.checked_add(U256.one())                            # None
top.saturating_add(U256.one())                         # the maximum value

try:
    top + 1
except ArithmeticOverflowError:
    ...
```

The same families exist for subtraction (`overflowing_sub`, `checked_sub`,
`saturating_sub`), multiplication (`overflowing_mul`, `checked_mul`,
`saturating_mul`) and exponentiation (`pow`, `overflowing_pow`, `checked_pow`).
`checked_div` and `checked_rem` return `None` for a zero divisor.
`overflowing_neg` returns zero unchanged with `False`, and for anything else
the bitwise complement with `True`; `checked_neg` returns a value only for zero.

Operators accept another value of the same type or a plain non-negative `int`;
values of different widths do not mix. Comparisons with `int` work too.

## Division

`div_mod` returns the quotient and the remainder together; `//` and `%` give
them separately. Dividing by zero raises `ZeroDivisionError`.

```python
q, r = U256(100).div_mod(U256(7))   # (U256(14), U256(2))
```

`full_mul` gives the exact product of two values of the same type as the type
with twice as many words (for `U256`, a `U512`).

## Bits, bytes and conversions

* `bits()`, `bit(index)`, `byte(index)`, `leading_zeros()`, `trailing_zeros()`;
  `bit` and `byte` raise `IndexError` outside the width
* `&`, `|`, `^`, `~`, `<<`, `>>`; shifting by the width or more gives zero
* `to_big_endian()`, `to_little_endian()`, `from_big_endian(data)`,
  `from_little_endian(data)`, and `bytes(value)` for the big-endian form
* `words()` and `from_words(words)` for the raw little-endian words
* `low_u32()`, `low_u64()`, `low_u128()` take the low bits;
  `as_u32()`, `as_u64()`, `as_u128()`, `as_usize()` raise
  `ArithmeticOverflowError` when the value does not fit
* `int(value)` gives the exact Python integer; values also work as indices

## Parsing

```python
from fixeduint.uint import U256

U256.from_dec_str("12345")
U256.from_hex_str("0xdeadbeef")
U256.from_str_radix("ff", 16)
```

Bad input raises `FromDecStrError`, `FromHexError` or `FromStrRadixError`
from `fixeduint.errors`, all subclasses of `UIntError` and `ValueError`. Each
carries a `kind` that tells an invalid character apart from input too long
for the type. Only radixes 10 and 16 are supported; any other gives a
`FromStrRadixError` of kind `UNSUPPORTED_RADIX`. An empty string parses as zero.

The same parsers are available on plain integers in `fixeduint.parsing`
(`parse_dec_str`, `parse_hex_str`, `parse_str_radix`), taking the width in
words as an argument.

## Word-level helpers

`fixeduint.words` has single-word helpers (`split`, `split_u128`, `mul_u64`,
`div_mod_word`, `full_mul_words`), and `fixeduint.arith` has wrap-around
arithmetic, division and shifts on lists of little-endian 64-bit words
(`overflowing_add_words`, `overflowing_sub_words`, `overflowing_mul_words`,
`overflowing_mul_u64_words`, `div_mod_words`, `shl_words`, `shr_words`).

## Modular arithmetic demonstration

`fixeduint.modular` has `field_add` and `field_mul_small`, which compute
`(a + b) mod p` and `(a * k) mod p` (the latter by repeated addition) without
overflowing the type. The command

```
fixeduint-modular
```

checks three identities in a 256-bit prime field, prints each with `ok` or
`FAILED`, and exits with status 0 only if all hold. `--prime` takes another
decimal modulus (at least 3 and below the `U256` maximum).

## Running the tests

```
pip install "fixeduint[test]"
pytest
```