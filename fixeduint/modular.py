"""Modular arithmetic over a prime field using 256-bit integers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .errors import FromDecStrError
from .uint import U256, FixedUInt

FIELD_PRIME = "38873241744847760218045702002058062581688990428170398542849190507947196700873"


def field_add(a: FixedUInt, b: FixedUInt, p: FixedUInt) -> FixedUInt:
    """Return ``(a + b) mod p`` without overflowing the type."""
    x = a % p
    y = b % p
    total, carry = x.overflowing_add(y)
    if carry or total >= p:
        total = total.overflowing_sub(p)[0]
    return total


def field_mul_small(a: FixedUInt, k: int, p: FixedUInt) -> FixedUInt:
    """Return ``(a * k) mod p`` computed as repeated addition."""
    if k < 0:
        raise ValueError("multiplier must not be negative")
    reduced = a % p
    result = type(reduced).zero()
    for _ in range(k):
        result = field_add(result, reduced, p)
    return result


def _parse_prime(text: str) -> FixedUInt:
    try:
        prime = U256.from_dec_str(text)
    except FromDecStrError as error:
        raise argparse.ArgumentTypeError(str(error)) from error
    if prime < 3 or prime == U256.max_value():
        raise argparse.ArgumentTypeError("modulus must be at least 3 and below the maximum")
    return prime


def main(argv: Sequence[str] | None = None) -> int:
    """Check a few field identities and print the outcome of each."""
    parser = argparse.ArgumentParser(description="Check identities in the field 0..p.")
    parser.add_argument(
        "--prime", type=_parse_prime, default=_parse_prime(FIELD_PRIME), help="decimal modulus p"
    )
    args = parser.parse_args(argv)
    p = args.prime

    checks = [
        ("(p-1) + (p+1) = 0", field_add(p - 1, p + 1, p) == U256.zero()),
        ("(p-1) + (p-1) = p-2", field_add(p - 1, p - 1, p) == p - 2),
        ("(p-1) * 3 = p-3", field_mul_small(p - 1, 3, p) == (p - 3) % p),
    ]
    print(f"p = {p}")
    for label, holds in checks:
        print(f"{label} (mod p): {'ok' if holds else 'FAILED'}")
    return 0 if all(holds for _, holds in checks) else 1


if __name__ == "__main__":
    raise SystemExit(main())