"""Blank out the interiors of hexagon outlines in a character grid."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

from .shapes import _CaseStream, find_hexagons


def erase_hexagons(lines: Sequence[str]) -> list[str]:
    """Return ``lines`` with spaces shown as ``~`` and hexagon interiors blanked.

    Rows are padded to the width of the longest row.
    """
    width = max((len(line) for line in lines), default=0)
    field = [list(line.ljust(width).replace(" ", "~")) for line in lines]
    find_hexagons(field)
    return ["".join(row) for row in field]


def _process(text: str) -> Iterator[str]:
    stream = _CaseStream(text)
    (cases,) = stream.ints(1)
    for _ in range(cases):
        rows, cols = stream.ints(2)
        yield from erase_hexagons(stream.grid(rows, cols))
        yield ""


def _write(lines: Iterable[str]) -> None:
    for line in lines:
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> None:
    """Read grids from standard input and print them with hexagons blanked."""
    argparse.ArgumentParser(
        description="Read counted grids and blank the inside of every hexagon."
    ).parse_args(argv)
    _write(_process(sys.stdin.read()))


if __name__ == "__main__":
    main()