"""Draw the outline of a single flat-topped ASCII hexagon."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

MAX_SPAN = 200


def draw_hexagon(width: int, height: int) -> list[str]:
    """Return the lines of a hexagon with a top edge of ``width`` and slanted sides of ``height``."""
    if height < 1:
        raise ValueError("height must be at least 1")
    if width < 0:
        raise ValueError("width must not be negative")
    if max(width, height, width + 2 * height - 2) > MAX_SPAN:
        raise ValueError(f"hexagon does not fit into {MAX_SPAN} columns")

    lines = [" " * height + "_" * width]
    for i in range(1, height + 1):
        lines.append(" " * (height - i) + "/" + " " * (width + 2 * i - 2) + "\\")
    for i in range(height + 1, 2 * height):
        inner = width + (2 * height - i) * 2
        lines.append(" " * (i - height - 1) + "\\" + " " * inner + "/")
    lines.append(" " * (height - 1) + "\\" + "_" * width + "/")
    return lines


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _render(tokens: Iterable[str]) -> Iterator[str]:
    stream = iter(tokens)
    for _ in range(_next_int(stream)):
        width = _next_int(stream)
        height = _next_int(stream)
        yield from draw_hexagon(width, height)


def main(argv: list[str] | None = None) -> None:
    """Read test cases from standard input and print one hexagon per case."""
    argparse.ArgumentParser(
        description="Read a count followed by width/height pairs and draw hexagons."
    ).parse_args(argv)
    for line in _render(sys.stdin.read().split()):
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()