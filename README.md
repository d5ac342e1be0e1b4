# hexascii

Small tools for flat-topped hexagons drawn with `_`, `/` and `\`
characters. They draw a single outline, pack hexagons into a framed area,
blank out the insides of hexagons found in a picture, and check whether
two points can be joined by walking across neighbouring hexagons.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Each command reads whitespace-separated input from standard input and
writes its result to standard output. None of them takes options beyond
`--help`.

- `hexascii-outline`: reads a test count, then a width and a height for
  each test, and prints the outline of a hexagon of that size for each.
- `hexascii-tiling`: reads the frame width `m`, frame height `n`, the
  hexagon width and height, and a count `k`, and prints an `m` by `n`
  area framed with `+`, `-` and `|` holding up to `k` hexagons.
- `hexascii-erase`: reads a test count, then for each test a row count
  and a column count followed by that many picture lines. It prints each
  picture with spaces shown as `~` and the inside of every complete
  hexagon blanked with spaces, followed by an empty line.
- `hexascii-route`: reads a test count, then for each test a picture in
  the same way followed by two 1-based points (row and column each). It
  prints `YES` if the hexagons holding the two points are linked through
  neighbouring hexagons, `NO` otherwise.
- `hexascii-echo`: reads a count and that many integers, and prints each
  integer on its own line.

Missing input ends a command with `ValueError: unexpected end of input`.

Example:

```
printf '1\n3 2\n' | hexascii-outline
```

prints

```
  ___
 /   \
/     \
\     /
 \___/
```

## Library use

```python
from hexascii.outline import draw_hexagon
from hexascii.tiling import tile_hexagons
from hexascii.echo import echo_values
from hexascii.erase import erase_hexagons
from hexascii.route import is_reachable
from hexascii.shapes import Hexagon, check_hexagon, extract_hexagon, find_hexagons
```

- `draw_hexagon(width, height)` returns the lines of one outline. It
  raises `ValueError` when `height` is below 1, `width` is negative, or
  the hexagon would be wider than 200 columns.
- `tile_hexagons(m, n, width, height, k)` returns the rows of the framed
  tiling, raising `ValueError` for negative frame sizes, a negative width
  or a height below 1.
- `echo_values(tokens)` reads a count and that many integers from an
  iterable of strings and returns the integers.
- `erase_hexagons(lines)` returns the picture with spaces shown as `~`
  and hexagon insides blanked; rows are padded to the longest row.
- `is_reachable(lines, start, finish)` tells whether the hexagons holding
  two 0-based `(row, col)` points are linked. It returns `True` when both
  points fall in the same hexagon, or when neither falls in any, and
  raises `ValueError` when only one of them lies inside a hexagon.
- `find_hexagons(field)` locates every complete hexagon in a grid given
  as a list of lists of characters, in scan order, and blanks their
  insides in place. `extract_hexagon(field, row, col)` does the same for
  the hexagon whose top edge starts at one cell, returning `None` if the
  outline there is incomplete. `check_hexagon(field, row, col, width,
  height)` tells whether a complete outline of that size sits in the box
  whose top-left corner is `row`, `col`.
- A `Hexagon` records `top_row`, `top_col`, `height` and `width`, and
  `contains(row, col)` tells whether a cell lies inside it.