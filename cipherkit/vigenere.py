"""Vigenere encryption of upper-case letters in a text or file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

MAX_KEY_LEN = 256
INPUT_FILE = "encrypt.txt"
OUTPUT_FILE = "output.txt"

_ALPHABET = 26
# One character per byte, so the key advances once for every byte in a file.
_FILE_ENCODING = "latin-1"


def _trunc_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def encrypt(text: str, key: str) -> str:
    """Shift each letter A-Z by the matching key letter.

    The key position advances on every character, letters or not; other
    characters are copied unchanged.
    """
    if not key:
        raise ValueError("key must not be empty")
    out = []
    for index, ch in enumerate(text):
        if "A" <= ch <= "Z":
            shift = ord(key[index % len(key)]) - ord("A")
            offset = _trunc_mod(ord(ch) - ord("A") + shift, _ALPHABET)
            out.append(chr(offset + ord("A")))
        else:
            out.append(ch)
    return "".join(out)


def encrypt_file(
    key: str,
    source: str | Path = INPUT_FILE,
    destination: str | Path = OUTPUT_FILE,
) -> None:
    """Encrypt the contents of ``source`` and write them to ``destination``."""
    with open(source, encoding=_FILE_ENCODING, newline="") as fin:
        text = fin.read()
    result = encrypt(text, key)
    with open(destination, "w", encoding=_FILE_ENCODING, newline="") as fout:
        fout.write(result)


def main(argv: list[str] | None = None) -> int:
    """Read a key and encrypt the input file into the output file."""
    parser = argparse.ArgumentParser(prog="vigenere", description="Vigenere file encryption")
    parser.add_argument("key", nargs="?")
    parser.add_argument("-i", "--input", default=INPUT_FILE)
    parser.add_argument("-o", "--output", default=OUTPUT_FILE)
    args = parser.parse_args(argv)

    key = args.key
    if key is None:
        tokens = sys.stdin.read().split()
        key = tokens[0] if tokens else None
    if not key:
        print("Invalid input.", file=sys.stderr)
        return 1
    encrypt_file(key[:MAX_KEY_LEN], args.input, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())