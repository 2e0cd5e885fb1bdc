"""Split text into fixed-size blocks, padding the last one."""

from __future__ import annotations

import sys

DEFAULT_FILL = "#"


def split_blocks(text: str, size: int, fill: str = DEFAULT_FILL) -> list[str]:
    """Cut ``text`` into blocks of ``size`` characters.

    The final block is left-justified and padded with ``fill``; an empty
    text still yields one block made entirely of padding.
    """
    if size <= 0:
        raise ValueError("block size must be positive")
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    starts = range(0, max(len(text) - 1, 0), size)
    blocks = [text[start:start + size] for start in starts if start + size < len(text)]
    rest = text[len(blocks) * size:]
    blocks.append(rest.ljust(size, fill))
    return blocks


def main(argv: list[str] | None = None) -> int:
    """Read a text and a block size and print one block per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    tokens = args or sys.stdin.read().split()
    if len(tokens) < 2:
        print("usage: blocks TEXT SIZE", file=sys.stderr)
        return 2
    for block in split_blocks(tokens[0], int(tokens[1])):
        print(block)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())