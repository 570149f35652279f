import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from kmapcore.kmap_engine import get_kmap_config, get_term_rects
from kmapcore.logic import cells_from_minterms, empty_cells, get_simplified_expression
from kmapcore.render import PALETTE, axis_labels, draw_kmap, term_color


def test_axis_labels_three_vars():
    rows, cols = axis_labels(get_kmap_config(3))
    assert rows == ["A=0", "A=1"]
    assert cols == ["BC=00", "BC=01", "BC=11", "BC=10"]


def test_term_color_cycles():
    assert term_color(0) == PALETTE[0]
    assert term_color(len(PALETTE) + 1) == PALETTE[1]


@pytest.mark.parametrize("nvars", [2, 3, 4])
def test_empty_map_has_no_outlines(nvars):
    fig = draw_kmap(empty_cells(nvars), nvars)
    try:
        assert len(fig.axes[0].patches) == 0
    finally:
        plt.close(fig)


def test_corner_group_draws_four_pieces():
    cells = cells_from_minterms(4, [0, 2, 8, 10])
    fig = draw_kmap(cells, 4)
    try:
        patches = fig.axes[0].patches
        assert len(patches) == 4
        assert {p.get_linestyle() for p in patches} == {"--"}
    finally:
        plt.close(fig)


def test_draw_on_given_axes():
    cells = cells_from_minterms(3, [0, 2, 5, 6, 7])
    result = get_simplified_expression(cells, 3)
    fig, ax = plt.subplots()
    try:
        assert draw_kmap(cells, 3, result, ax=ax) is fig
        expected = sum(len(get_term_rects(t.mask, 1, 2).rects) for t in result.terms)
        assert len(ax.patches) == expected == 4
    finally:
        plt.close(fig)
