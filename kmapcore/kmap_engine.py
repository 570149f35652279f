"""Karnaugh map indexing and grouping helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Set, Tuple

# Reflected gray-code orderings for one and two axis variables
GRAY1: Tuple[str, ...] = ("0", "1")
GRAY2: Tuple[str, ...] = ("00", "01", "11", "10")

VAR_NAMES: Tuple[str, ...] = ("A", "B", "C", "D")


@dataclass(frozen=True)
class KMapConfig:
    """Split of the variables over the rows and columns of the map."""

    vars: int
    row_vars: Tuple[str, ...]
    col_vars: Tuple[str, ...]
    row_count: int
    col_count: int


@dataclass(frozen=True)
class CellPosition:
    """A grid cell and the truth-table index it shows."""

    row: int
    col: int
    index: int
    gray_row: str
    gray_col: str


@dataclass(frozen=True)
class GridRect:
    """Inclusive rectangle in grid coordinates."""

    row_start: int
    row_end: int
    col_start: int
    col_end: int

    def cells(self) -> FrozenSet[Tuple[int, int]]:
        return frozenset(
            (r, c)
            for r in range(self.row_start, self.row_end + 1)
            for c in range(self.col_start, self.col_end + 1)
        )


@dataclass(frozen=True)
class TermRects:
    """Rectangles drawn for one term, with the axes it wraps around."""

    rects: Tuple[GridRect, ...]
    row_wraps: bool
    col_wraps: bool


_ROW_VAR_COUNT = {2: 1, 3: 1, 4: 2}


def get_var_names(nvars: int) -> List[str]:
    """Return the variable names (A, B, ...) for the requested count."""
    if nvars not in _ROW_VAR_COUNT:
        raise ValueError("K-map available for 2-4 variables.")
    return list(VAR_NAMES[:nvars])


def get_kmap_config(nvars: int) -> KMapConfig:
    """Return the row/column variable split for a 2, 3 or 4 variable map."""
    names = get_var_names(nvars)
    split = _ROW_VAR_COUNT[nvars]
    row_vars = tuple(names[:split])
    col_vars = tuple(names[split:])
    return KMapConfig(
        vars=nvars,
        row_vars=row_vars,
        col_vars=col_vars,
        row_count=1 << len(row_vars),
        col_count=1 << len(col_vars),
    )


def get_gray_code_sequence(bit_width: int) -> List[str]:
    """Return the gray-code sequence for one axis; empty for other widths."""
    if bit_width == 1:
        return list(GRAY1)
    if bit_width == 2:
        return list(GRAY2)
    return []


def calculate_cell_index(
    row: int, col: int, row_gray: Sequence[str], col_gray: Sequence[str]
) -> CellPosition:
    """Translate a grid cell into its truth-table index (row bits first)."""
    gray_row = row_gray[row]
    gray_col = col_gray[col]
    return CellPosition(
        row=row,
        col=col,
        index=int(gray_row + gray_col, 2),
        gray_row=gray_row,
        gray_col=gray_col,
    )


def grid_positions(config: KMapConfig) -> List[CellPosition]:
    """Return every cell of the map in row-major order."""
    row_gray = get_gray_code_sequence(len(config.row_vars))
    col_gray = get_gray_code_sequence(len(config.col_vars))
    return [
        calculate_cell_index(r, c, row_gray, col_gray)
        for r in range(config.row_count)
        for c in range(config.col_count)
    ]


def index_to_cell(index: int, config: KMapConfig) -> Tuple[int, int]:
    """Translate a truth-table index to (row, col) coordinates."""
    n_row = len(config.row_vars)
    n_col = len(config.col_vars)
    if not 0 <= index < (1 << config.vars):
        raise ValueError(f"Index {index} out of range for {config.vars} variables.")
    bits = format(index, f"0{config.vars}b")
    row = get_gray_code_sequence(n_row).index(bits[:n_row])
    col = get_gray_code_sequence(n_col).index(bits[n_row:n_row + n_col])
    return row, col


def _matches(sub_mask: str, code: str) -> bool:
    return all(m == "-" or m == ch for m, ch in zip(sub_mask, code))


def _axis_ranges(sub_mask: str, gray: Sequence[str]) -> List[Tuple[int, int]]:
    """Merge the axis positions matching sub_mask into contiguous ranges."""
    hits = sorted(i for i, code in enumerate(gray) if _matches(sub_mask, code))
    if not hits:
        return []

    ranges: List[Tuple[int, int]] = []
    start = prev = hits[0]
    for pos in hits[1:]:
        if pos == prev + 1:
            prev = pos
            continue
        ranges.append((start, prev))
        start = prev = pos
    ranges.append((start, prev))
    return ranges


def _wraps(ranges: Sequence[Tuple[int, int]], length: int) -> bool:
    return len(ranges) > 1 and ranges[0][0] == 0 and ranges[-1][1] == length - 1


def get_term_rects(mask: str, row_var_count: int, col_var_count: int) -> TermRects:
    """Return the rectangles covering a term's cells and its wrap flags.

    A group split by the map boundary yields one rectangle per piece; when it
    wraps on both axes every corner piece is its own rectangle.
    """
    row_mask = mask[:row_var_count]
    col_mask = mask[row_var_count:row_var_count + col_var_count]

    row_ranges = _axis_ranges(row_mask, get_gray_code_sequence(row_var_count))
    col_ranges = _axis_ranges(col_mask, get_gray_code_sequence(col_var_count))

    rects = tuple(
        GridRect(row_start=r0, row_end=r1, col_start=c0, col_end=c1)
        for r0, r1 in row_ranges
        for c0, c1 in col_ranges
    )
    return TermRects(
        rects=rects,
        row_wraps=_wraps(row_ranges, 1 << row_var_count),
        col_wraps=_wraps(col_ranges, 1 << col_var_count),
    )


def term_cells(mask: str, config: KMapConfig) -> Set[Tuple[int, int]]:
    """Return the set of grid cells covered by a mask."""
    geometry = get_term_rects(mask, len(config.row_vars), len(config.col_vars))
    cells: Set[Tuple[int, int]] = set()
    for rect in geometry.rects:
        cells |= rect.cells()
    return cells


__all__ = [
    "CellPosition",
    "GRAY1",
    "GRAY2",
    "GridRect",
    "KMapConfig",
    "TermRects",
    "VAR_NAMES",
    "calculate_cell_index",
    "get_gray_code_sequence",
    "get_kmap_config",
    "get_term_rects",
    "get_var_names",
    "grid_positions",
    "index_to_cell",
    "term_cells",
]
