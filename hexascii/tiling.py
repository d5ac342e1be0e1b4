"""Pack hexagon outlines into a framed ASCII rectangle."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterator


def _draw(field: list[list[str]], row: int, col: int, width: int, height: int) -> None:
    for j in range(col + height, col + height + width):
        field[row][j] = "_"
        field[row + 2 * height][j] = "_"
    for h in range(height):
        field[row + h + 1][col + height - h - 1] = "/"
        field[row + height + h + 1][col + h] = "\\"
        field[row + h + 1][col + height + width + h] = "\\"
        field[row + height + h + 1][col + width + 2 * height - h - 1] = "/"


def tile_hexagons(m: int, n: int, width: int, height: int, k: int) -> list[str]:
    """Return the rows of an ``m`` by ``n`` frame holding up to ``k`` hexagons."""
    if m < 0 or n < 0:
        raise ValueError("frame dimensions must not be negative")
    if height < 1:
        raise ValueError("height must be at least 1")
    if width < 0:
        raise ValueError("width must not be negative")

    field = [[" "] * (m + 2) for _ in range(n + 2)]
    for border in (field[0], field[n + 1]):
        border[:] = ["+"] + ["-"] * m + ["+"]
    for row in field[1 : n + 1]:
        row[0] = row[m + 1] = "|"

    hex_width = width + 2 * height
    hex_height = 2 * height
    count = 0
    for i in range(1, n, height):
        if count >= k:
            break
        start = 1 if (i - 1) % hex_height == 0 else height + width + 1
        for j in itertools.count(start, hex_width + width):
            if count >= k:
                break
            if i + hex_height > n + 2 or j + hex_width >= m + 2:
                break
            _draw(field, i, j, width, height)
            count += 1

    return ["".join(row) for row in field]


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> None:
    """Read ``m n width height k`` from standard input and print the tiling."""
    argparse.ArgumentParser(
        description="Read frame size, hexagon size and count, then draw the tiling."
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    m, n, width, height, k = (_next_int(tokens) for _ in range(5))
    for line in tile_hexagons(m, n, width, height, k):
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()