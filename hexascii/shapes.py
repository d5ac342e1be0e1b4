"""Detect flat-topped hexagon outlines drawn in a character grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import takewhile

# Characters that may stand left of a hexagon's top edge.
_EDGE_PRECEDERS = frozenset("~ \\")


@dataclass(frozen=True)
class Hexagon:
    """A hexagon located by the leftmost cell of its top edge."""

    top_row: int
    top_col: int
    height: int
    width: int

    def contains(self, row: int, col: int) -> bool:
        """Return whether the cell at ``row``, ``col`` lies inside the hexagon."""
        relative = row - self.top_row
        if not 0 < relative < 2 * self.height:
            return False
        if relative <= self.height:
            row_width = self.width + 2 * (relative - 1)
            row_start = self.top_col - (relative - 1)
        else:
            below = relative - self.height - 1
            row_width = self.width + 2 * (self.height - 1) - below
            row_start = self.top_col - (self.height - 1) + below
        return row_start <= col < row_start + row_width


def _cell(field: list[list[str]], row: int, col: int) -> str | None:
    if 0 <= row < len(field) and 0 <= col < len(field[row]):
        return field[row][col]
    return None


def check_hexagon(
    field: list[list[str]], row: int, col: int, width: int, height: int
) -> bool:
    """Return whether a complete outline sits in the box whose top-left is ``row``, ``col``."""
    for j in range(col + height, col + height + width):
        if _cell(field, row, j) != "_" or _cell(field, row + 2 * height, j) != "_":
            return False
    for h in range(height):
        if (
            _cell(field, row + h + 1, col + height - h - 1) != "/"
            or _cell(field, row + height + h + 1, col + h) != "\\"
            or _cell(field, row + h + 1, col + height + width + h) != "\\"
            or _cell(field, row + height + h + 1, col + width + 2 * height - h - 1) != "/"
        ):
            return False
    return True


def extract_hexagon(field: list[list[str]], row: int, col: int) -> Hexagon | None:
    """Measure the hexagon whose top edge starts at ``row``, ``col``.

    When a complete outline is found its interior is blanked with spaces in
    ``field`` and the hexagon is returned; otherwise ``None`` is returned.
    """
    width = sum(1 for _ in takewhile(lambda ch: ch == "_", field[row][col:]))
    height = 0
    step = 1
    while (
        step < len(field) - row
        and col - step >= 0
        and _cell(field, row + step, col - step) == "/"
    ):
        height += 1
        step += 1

    if height == 0 or row + 2 * height >= len(field):
        return None
    if not check_hexagon(field, row, col - height, width, height):
        return None

    for h in range(height):
        upper = field[row + h + 1]
        lower = field[row + 2 * height - h - 1]
        for c in range(col - h, col + width + h):
            upper[c] = " "
            lower[c] = " "
        if h < height - 1:
            lower[col - h - 1] = " "
            lower[col + width + h] = " "

    return Hexagon(top_row=row, top_col=col, height=height, width=width)


def find_hexagons(field: list[list[str]]) -> list[Hexagon]:
    """Return every hexagon in ``field`` in scan order, blanking their interiors."""
    found = []
    for i, row in enumerate(field):
        for j in range(1, len(row)):
            if row[j] == "_" and row[j - 1] in _EDGE_PRECEDERS:
                hexagon = extract_hexagon(field, i, j)
                if hexagon is not None:
                    found.append(hexagon)
    return found


class _CaseStream:
    """Reads integer headers and fixed-size grids from line-oriented text."""

    def __init__(self, text: str) -> None:
        self._lines: Iterator[str] = iter(text.splitlines())
        self._pending: list[str] = []

    def _next_line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def ints(self, count: int) -> list[int]:
        values = []
        while len(values) < count:
            if not self._pending:
                self._pending = self._next_line().split()
                continue
            values.append(int(self._pending.pop(0)))
        return values

    def grid(self, rows: int, cols: int) -> list[str]:
        self._pending.clear()
        return [self._next_line()[:cols].ljust(cols) for _ in range(rows)]