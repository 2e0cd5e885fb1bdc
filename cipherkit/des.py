"""DES S-box substitution and the initial permutation pair."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

S_BOXES = (
    (
        (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7),
        (0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8),
        (4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0),
        (15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13),
    ),
    (
        (15, 1, 8, 14, 6, 11, 3, 4, 9, 7, 2, 13, 12, 0, 5, 10),
        (3, 13, 4, 7, 15, 2, 8, 14, 12, 0, 1, 10, 6, 9, 11, 5),
        (0, 14, 7, 11, 10, 4, 13, 1, 5, 8, 12, 6, 9, 3, 2, 15),
        (13, 8, 10, 1, 3, 15, 4, 2, 11, 6, 7, 12, 0, 5, 14, 9),
    ),
    (
        (10, 0, 9, 14, 6, 3, 15, 5, 1, 13, 12, 7, 11, 4, 2, 8),
        (13, 7, 0, 9, 3, 4, 6, 10, 2, 8, 5, 14, 12, 11, 15, 1),
        (13, 6, 4, 9, 8, 15, 3, 0, 11, 1, 2, 12, 5, 10, 14, 7),
        (1, 10, 13, 0, 6, 9, 8, 7, 4, 15, 14, 3, 11, 5, 2, 12),
    ),
    (
        (7, 13, 14, 3, 0, 6, 9, 10, 1, 2, 8, 5, 11, 12, 4, 15),
        (13, 8, 11, 5, 6, 15, 0, 3, 4, 7, 2, 12, 1, 10, 14, 9),
        (10, 6, 9, 0, 12, 11, 7, 13, 15, 1, 3, 14, 5, 2, 8, 4),
        (3, 15, 0, 6, 10, 1, 13, 8, 9, 4, 5, 11, 12, 7, 2, 14),
    ),
    (
        (2, 12, 4, 1, 7, 10, 11, 6, 8, 5, 3, 15, 13, 0, 14, 9),
        (14, 11, 2, 12, 4, 7, 13, 1, 5, 0, 15, 10, 3, 9, 8, 6),
        (4, 2, 1, 11, 10, 13, 7, 8, 15, 9, 12, 5, 6, 3, 0, 14),
        (11, 8, 12, 7, 1, 14, 2, 13, 6, 15, 0, 9, 10, 4, 5, 3),
    ),
    (
        (12, 1, 10, 15, 9, 2, 6, 8, 0, 13, 3, 4, 14, 7, 5, 11),
        (10, 15, 4, 2, 7, 12, 9, 5, 6, 1, 13, 14, 0, 11, 3, 8),
        (9, 14, 15, 5, 2, 8, 12, 3, 7, 0, 4, 10, 1, 13, 11, 6),
        (4, 3, 2, 12, 9, 5, 15, 10, 11, 14, 1, 7, 6, 0, 8, 13),
    ),
    (
        (4, 11, 2, 14, 15, 0, 8, 13, 3, 12, 9, 7, 5, 10, 6, 1),
        (13, 0, 11, 7, 4, 9, 1, 10, 14, 3, 5, 12, 2, 15, 8, 6),
        (1, 4, 11, 13, 12, 3, 7, 14, 10, 15, 6, 8, 0, 5, 9, 2),
        (6, 11, 13, 8, 1, 4, 10, 7, 9, 5, 0, 15, 14, 2, 3, 12),
    ),
    (
        (13, 2, 8, 4, 6, 15, 11, 1, 10, 9, 3, 14, 5, 0, 12, 7),
        (1, 15, 13, 8, 10, 3, 7, 4, 12, 5, 6, 11, 0, 14, 9, 2),
        (7, 11, 4, 1, 9, 12, 14, 2, 0, 6, 10, 13, 15, 3, 5, 8),
        (2, 1, 14, 7, 4, 10, 8, 13, 15, 12, 9, 0, 3, 5, 6, 11),
    ),
)

IP = (
    58, 50, 42, 34, 26, 18, 10, 2,
    60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6,
    64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1,
    59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5,
    63, 55, 47, 39, 31, 23, 15, 7,
)

IP_INV = (
    40, 8, 48, 16, 56, 24, 64, 32,
    39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30,
    37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28,
    35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26,
    33, 1, 41, 9, 49, 17, 57, 25,
)

BLOCK_BITS = 64
SBOX_INPUT_BITS = 48
SBOX_OUTPUT_BITS = 32
_MASK64 = (1 << BLOCK_BITS) - 1


def to_bits(value: int, width: int) -> str:
    """Binary digits of ``value``, zero-padded on the left to at least ``width``."""
    if value < 0:
        raise ValueError("value must not be negative")
    return format(value, f"0{width}b")


def sbox_substitute(value: int) -> int:
    """Pass a 48-bit value through the eight S-boxes, giving 32 bits."""
    if not 0 <= value < 1 << SBOX_INPUT_BITS:
        raise ValueError("value must fit in 48 bits")
    result = 0
    for index, box in enumerate(S_BOXES):
        chunk = (value >> (SBOX_INPUT_BITS - 6 * (index + 1))) & 0x3F
        row = ((chunk >> 4) & 0b10) | (chunk & 1)
        column = (chunk >> 1) & 0xF
        result = (result << 4) | box[row][column]
    return result


def permute(value: int, table: Sequence[int]) -> int:
    """Rearrange the bits of a 64-bit value.

    Bit positions count from 1 at the most significant end; output bit
    ``i`` takes input bit ``table[i]``.
    """
    if not 0 <= value <= _MASK64:
        raise ValueError("value must fit in 64 bits")
    result = 0
    for position in table:
        if not 1 <= position <= BLOCK_BITS:
            raise ValueError(f"bit position {position} out of range")
        result = (result << 1) | ((value >> (BLOCK_BITS - position)) & 1)
    return result


def initial_permutation(value: int) -> int:
    """Apply the DES initial permutation."""
    return permute(value, IP)


def inverse_initial_permutation(value: int) -> int:
    """Apply the inverse of the DES initial permutation."""
    return permute(value, IP_INV)


def _read_value(raw: str | None) -> int:
    if raw is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            raise SystemExit("no input value")
        raw = tokens[0]
    return int(raw)


def main(argv: list[str] | None = None) -> int:
    """Command line: ``sbox VALUE`` or ``ip VALUE``."""
    parser = argparse.ArgumentParser(prog="des", description="DES building blocks")
    commands = parser.add_subparsers(dest="command", required=True)
    sbox = commands.add_parser("sbox", help="S-box substitution of a 48-bit number")
    sbox.add_argument("value", nargs="?")
    ip = commands.add_parser("ip", help="initial permutation and its inverse")
    ip.add_argument("value", nargs="?")
    args = parser.parse_args(argv)

    value = _read_value(args.value)
    if args.command == "sbox":
        print(to_bits(sbox_substitute(value), SBOX_OUTPUT_BITS))
    else:
        permuted = initial_permutation(value & _MASK64)
        print(to_bits(permuted, BLOCK_BITS))
        print(to_bits(inverse_initial_permutation(permuted), BLOCK_BITS))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())