"""Arithmetic in GF(2^8) with the AES polynomial x^8 + x^4 + x^3 + x + 1."""

from __future__ import annotations

import sys

POLY = 0x11B


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} is not a byte")
    return value


def gf_add(a: int, b: int) -> int:
    """Add two field elements."""
    return _check_byte(a) ^ _check_byte(b)


def gf_mul(a: int, b: int) -> int:
    """Multiply two field elements, reducing by the field polynomial."""
    x, y = _check_byte(a), _check_byte(b)
    result = 0
    while y:
        if y & 1:
            result ^= x
        y >>= 1
        x <<= 1
        if x & 0x100:
            x ^= POLY
    return result


def gf_inv(a: int) -> int:
    """Return the multiplicative inverse, computed as a**254; zero maps to zero."""
    base = _check_byte(a)
    if base == 0:
        return 0
    result, exponent = 1, 254
    while exponent:
        if exponent & 1:
            result = gf_mul(result, base)
        base = gf_mul(base, base)
        exponent >>= 1
    return result


def gf_div(a: int, b: int) -> int:
    """Return ``a / b``; division by zero gives zero."""
    _check_byte(a)
    if _check_byte(b) == 0:
        return 0
    return gf_mul(a, gf_inv(b))


INVERSE_TABLE: tuple[int, ...] = tuple(gf_inv(value) for value in range(256))


def table_inverse(a: int) -> int:
    """Look up the inverse of ``a`` in the precomputed table."""
    return INVERSE_TABLE[_check_byte(a)]


def main(argv: list[str] | None = None) -> int:
    """With one hex byte print its table inverse; with two print inverse, sum and quotient."""
    args = sys.argv[1:] if argv is None else list(argv)
    tokens = args or sys.stdin.read().split()
    if not tokens:
        print("usage: gf256 A [B]", file=sys.stderr)
        return 2
    values = [int(token, 16) & 0xFF for token in tokens[:2]]
    if len(values) == 1:
        print(f"0x{table_inverse(values[0]):02X}")
    else:
        a, b = values
        print(f"0x{gf_inv(a):x} 0x{gf_add(a, b):x} 0x{gf_div(a, b):x}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())