"""Extended Euclidean algorithm and modular inverses."""

from __future__ import annotations

import sys

NO_INVERSE_MESSAGE = "inverse does not exist"


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` such that ``a * x + b * y == g``.

    Division truncates toward zero, so the sign of ``g`` follows the
    arguments the same way it does for machine integers.
    """
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b != 0:
        q = _trunc_div(a, b)
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m``.

    Raises ValueError when ``a`` and ``m`` are not coprime.
    """
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return _trunc_mod(_trunc_mod(x, m) + m, m)


def main(argv: list[str] | None = None) -> int:
    """Read ``a`` and ``m`` and print the inverse of ``a`` modulo ``m``."""
    args = sys.argv[1:] if argv is None else list(argv)
    tokens = args or sys.stdin.read().split()
    if len(tokens) < 2:
        print("usage: numtheory A M", file=sys.stderr)
        return 2
    a, m = int(tokens[0]), int(tokens[1])
    try:
        print(mod_inverse(a, m))
    except ValueError:
        print(NO_INVERSE_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())