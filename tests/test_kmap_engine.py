import pytest

from kmapcore.kmap_engine import (
    GridRect,
    calculate_cell_index,
    get_gray_code_sequence,
    get_kmap_config,
    get_term_rects,
    get_var_names,
    grid_positions,
    index_to_cell,
    term_cells,
)


def test_gray_code_sequences():
    assert get_gray_code_sequence(1) == ["0", "1"]
    assert get_gray_code_sequence(2) == ["00", "01", "11", "10"]


@pytest.mark.parametrize("width", [0, 3, -1])
def test_gray_code_unsupported_width_is_empty(width):
    assert get_gray_code_sequence(width) == []


def test_gray_code_neighbours_differ_in_one_bit():
    seq = get_gray_code_sequence(2)
    for a, b in zip(seq, seq[1:] + seq[:1]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_config_layouts():
    assert get_kmap_config(2).row_vars == ("A",)
    assert get_kmap_config(2).col_vars == ("B",)
    assert get_kmap_config(3).row_vars == ("A",)
    assert get_kmap_config(3).col_vars == ("B", "C")
    assert get_kmap_config(4).row_vars == ("A", "B")
    assert get_kmap_config(4).col_vars == ("C", "D")


@pytest.mark.parametrize("nvars", [2, 3, 4])
def test_config_invariants(nvars):
    config = get_kmap_config(nvars)
    assert config.vars == nvars
    assert len(config.row_vars) + len(config.col_vars) == nvars
    assert config.row_count == 2 ** len(config.row_vars)
    assert config.col_count == 2 ** len(config.col_vars)


@pytest.mark.parametrize("nvars", [0, 1, 5])
def test_config_rejects_unsupported_counts(nvars):
    with pytest.raises(ValueError):
        get_kmap_config(nvars)
    with pytest.raises(ValueError):
        get_var_names(nvars)


def test_calculate_cell_index_row_bits_first():
    pos = calculate_cell_index(1, 2, ["0", "1"], ["00", "01", "11", "10"])
    assert pos.index == 0b111
    assert (pos.gray_row, pos.gray_col) == ("1", "11")

    pos = calculate_cell_index(3, 1, ["00", "01", "11", "10"], ["00", "01", "11", "10"])
    assert pos.index == 0b1001


@pytest.mark.parametrize("nvars", [2, 3, 4])
def test_grid_is_a_bijection(nvars):
    config = get_kmap_config(nvars)
    indices = [pos.index for pos in grid_positions(config)]
    assert sorted(indices) == list(range(2 ** nvars))


@pytest.mark.parametrize("nvars", [2, 3, 4])
def test_index_to_cell_inverts_grid(nvars):
    config = get_kmap_config(nvars)
    for pos in grid_positions(config):
        assert index_to_cell(pos.index, config) == (pos.row, pos.col)


def test_index_to_cell_out_of_range():
    with pytest.raises(ValueError):
        index_to_cell(8, get_kmap_config(3))


def test_single_cell_rect():
    geometry = get_term_rects("101", 1, 2)
    assert geometry.rects == (GridRect(1, 1, 1, 1),)
    assert not geometry.row_wraps
    assert not geometry.col_wraps


def test_full_map_rect():
    geometry = get_term_rects("--", 1, 1)
    assert geometry.rects == (GridRect(0, 1, 0, 1),)
    assert not geometry.row_wraps
    assert not geometry.col_wraps


def test_column_wrap():
    # C' on a 3-variable map: first and last columns
    geometry = get_term_rects("--0", 1, 2)
    assert geometry.rects == (GridRect(0, 1, 0, 0), GridRect(0, 1, 3, 3))
    assert geometry.col_wraps
    assert not geometry.row_wraps


def test_corners_wrap_both_axes():
    geometry = get_term_rects("-0-0", 2, 2)
    assert geometry.row_wraps and geometry.col_wraps
    assert set(geometry.rects) == {
        GridRect(0, 0, 0, 0),
        GridRect(0, 0, 3, 3),
        GridRect(3, 3, 0, 0),
        GridRect(3, 3, 3, 3),
    }


def test_middle_pair_does_not_wrap():
    geometry = get_term_rects("-1-1", 2, 2)
    assert geometry.rects == (GridRect(1, 2, 1, 2),)
    assert not geometry.row_wraps
    assert not geometry.col_wraps


def test_rect_cells():
    assert GridRect(0, 1, 2, 3).cells() == {(0, 2), (0, 3), (1, 2), (1, 3)}


def test_term_cells_matches_mask():
    config = get_kmap_config(4)
    expected = {index_to_cell(i, config) for i in (0, 2, 8, 10)}
    assert term_cells("-0-0", config) == expected
