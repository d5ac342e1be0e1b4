import pytest

from hexascii.outline import draw_hexagon
from hexascii.shapes import Hexagon, check_hexagon, extract_hexagon, find_hexagons
from hexascii.tiling import tile_hexagons


def _field(lines, filler="~"):
    width = max(len(line) for line in lines)
    return [list(line.ljust(width).replace(" ", filler)) for line in lines]


def test_single_hexagon_is_found_with_its_dimensions():
    width, height = 3, 2
    field = _field(draw_hexagon(width, height))
    found = find_hexagons(field)
    assert len(found) == 1
    hexagon = found[0]
    assert hexagon.width == width
    assert hexagon.height == height
    assert hexagon.top_row == 0
    assert hexagon.top_col == height


def test_blanked_interior_matches_contains():
    field = _field(draw_hexagon(3, 2))
    (hexagon,) = find_hexagons(field)
    blanked = {
        (r, c) for r, row in enumerate(field) for c, ch in enumerate(row) if ch == " "
    }
    inside = {
        (r, c)
        for r in range(len(field))
        for c in range(len(field[0]))
        if hexagon.contains(r, c)
    }
    assert blanked == inside
    assert blanked


def test_contains_excludes_top_and_bottom_edges():
    hexagon = Hexagon(top_row=0, top_col=2, height=2, width=3)
    assert not hexagon.contains(0, 2)
    assert not hexagon.contains(4, 2)
    assert hexagon.contains(1, 2)


def test_check_hexagon_accepts_drawn_outline():
    field = _field(draw_hexagon(3, 2))
    assert check_hexagon(field, 0, 0, 3, 2)


def test_check_hexagon_rejects_damaged_outline():
    field = _field(draw_hexagon(3, 2))
    field[1][1] = "x"
    assert not check_hexagon(field, 0, 0, 3, 2)
    assert find_hexagons(field) == []


def test_check_hexagon_out_of_bounds_is_rejected():
    field = _field(draw_hexagon(3, 2))
    assert not check_hexagon(field, 0, 5, 3, 2)


def test_extract_on_bottom_edge_leaves_field_unchanged():
    field = _field(draw_hexagon(3, 2))
    before = [row[:] for row in field]
    bottom = len(field) - 1
    col = "".join(field[bottom]).index("_")
    assert extract_hexagon(field, bottom, col) is None
    assert field == before


def test_tiling_hexagons_are_all_found():
    width, height, k = 2, 2, 3
    field = _field(tile_hexagons(12, 9, width, height, k), filler=" ")
    found = find_hexagons(field)
    assert len(found) == k
    assert all(h.width == width and h.height == height for h in found)
    tops = [(h.top_row, h.top_col) for h in found]
    assert tops == sorted(tops)


def test_found_hexagons_do_not_overlap():
    field = _field(tile_hexagons(12, 9, 2, 2, 3), filler=" ")
    found = find_hexagons(field)
    cells = [
        {(r, c) for r in range(len(field)) for c in range(len(field[0])) if h.contains(r, c)}
        for h in found
    ]
    total = sum(len(s) for s in cells)
    assert len(set().union(*cells)) == total


@pytest.mark.parametrize("height", [1, 2, 3])
def test_hexagon_of_any_height_is_found(height):
    field = _field(draw_hexagon(4, height))
    found = find_hexagons(field)
    assert [(h.width, h.height) for h in found] == [(4, height)]