"""Decide whether two points lie in hexagons joined by a chain of neighbours."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence

from .shapes import Hexagon, _CaseStream, find_hexagons

_DIRECTIONS = ((-1, -1), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 1), (-2, 0), (2, 0))


def _containing(hexagons: list[Hexagon], point: tuple[int, int]) -> Hexagon | None:
    match = None
    for hexagon in hexagons:
        if hexagon.contains(*point):
            match = hexagon
    return match


def is_reachable(
    lines: Sequence[str], start: tuple[int, int], finish: tuple[int, int]
) -> bool:
    """Return whether the hexagons holding ``start`` and ``finish`` are connected.

    Points are zero-based ``(row, col)`` pairs. Raises ``ValueError`` when only
    one of the points lies inside a hexagon.
    """
    width = max((len(line) for line in lines), default=0)
    field = [list(line.ljust(width).replace(" ", "~")) for line in lines]
    hexagons = find_hexagons(field)

    start_hex = _containing(hexagons, start)
    finish_hex = _containing(hexagons, finish)
    if start_hex is finish_hex:
        return True
    if start_hex is None or finish_hex is None:
        raise ValueError("point does not lie inside any hexagon")

    col_offset = start_hex.height
    col_step = start_hex.width + start_hex.height
    row_step = start_hex.height
    rows = len(field) // row_step + 1
    cols = width // col_step + 2

    def cell(hexagon: Hexagon) -> tuple[int, int]:
        return hexagon.top_row // row_step, (hexagon.top_col - col_offset) // col_step

    occupied = {cell(h) for h in hexagons}
    origin, target = cell(start_hex), cell(finish_hex)

    visited = {origin}
    queue = deque([origin])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _DIRECTIONS:
            neighbour = (r + dr, c + dc)
            if not (0 <= neighbour[0] < rows and 0 <= neighbour[1] < cols):
                continue
            if neighbour not in occupied:
                continue
            if neighbour == target:
                return True
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return False


def _process(text: str) -> Iterator[str]:
    stream = _CaseStream(text)
    (cases,) = stream.ints(1)
    for _ in range(cases):
        rows, cols = stream.ints(2)
        grid = stream.grid(rows, cols)
        r1, c1, r2, c2 = stream.ints(4)
        yield "YES" if is_reachable(grid, (r1 - 1, c1 - 1), (r2 - 1, c2 - 1)) else "NO"


def main(argv: list[str] | None = None) -> None:
    """Read maps and point pairs from standard input and print YES or NO for each."""
    argparse.ArgumentParser(
        description="Check whether two points lie in connected hexagons."
    ).parse_args(argv)
    for answer in _process(sys.stdin.read()):
        sys.stdout.write(answer + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()