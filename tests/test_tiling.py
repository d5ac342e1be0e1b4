import io

import pytest

from hexascii.outline import draw_hexagon
from hexascii.tiling import main, tile_hexagons


@pytest.mark.parametrize("m,n", [(5, 3), (12, 8), (0, 0)])
def test_frame_dimensions(m, n):
    rows = tile_hexagons(m, n, 2, 1, 0)
    assert len(rows) == n + 2
    assert all(len(row) == m + 2 for row in rows)


def test_frame_border():
    rows = tile_hexagons(6, 4, 2, 1, 0)
    assert rows[0] == "+" + "-" * 6 + "+"
    assert rows[-1] == rows[0]
    for row in rows[1:-1]:
        assert row[0] == "|" and row[-1] == "|"
        assert row[1:-1] == " " * 6


def test_first_hexagon_matches_outline():
    width, height = 3, 2
    rows = tile_hexagons(30, 20, width, height, 1)
    outline = draw_hexagon(width, height)
    for offset, line in enumerate(outline):
        segment = rows[1 + offset][1 : 1 + len(line)]
        assert segment == line


def test_exact_count_when_room():
    height = 1
    rows = tile_hexagons(30, 10, 2, height, 3)
    assert sum(row.count("/") for row in rows) == 2 * height * 3


def test_count_never_exceeds_k():
    height = 2
    for k in range(0, 6):
        rows = tile_hexagons(40, 20, 2, height, k)
        drawn = sum(row.count("/") for row in rows) // (2 * height)
        assert drawn <= k


def test_too_small_frame_holds_nothing():
    rows = tile_hexagons(3, 2, 4, 2, 5)
    assert all("/" not in row and "_" not in row for row in rows)


@pytest.mark.parametrize(
    "args", [(5, 5, 2, 0, 1), (-1, 5, 2, 1, 1), (5, -1, 2, 1, 1), (5, 5, -2, 1, 1)]
)
def test_invalid_arguments(args):
    with pytest.raises(ValueError):
        tile_hexagons(*args)


def test_main_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("20 10 2 1 4\n"))
    main([])
    expected = tile_hexagons(20, 10, 2, 1, 4)
    assert capsys.readouterr().out == "".join(line + "\n" for line in expected)


def test_main_missing_values(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("20 10 2\n"))
    with pytest.raises(ValueError):
        main([])