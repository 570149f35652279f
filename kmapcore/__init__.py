"""Convenience exports for core K-Map logic helpers."""

from .kmap_engine import (
    CellPosition,
    GridRect,
    KMapConfig,
    TermRects,
    calculate_cell_index,
    get_gray_code_sequence,
    get_kmap_config,
    get_term_rects,
    get_var_names,
    grid_positions,
    index_to_cell,
    term_cells,
)
from .logic import (
    CellState,
    KMapTerm,
    SimplificationResult,
    cells_from_minterms,
    empty_cells,
    format_cell_state,
    format_term,
    get_dont_care_string,
    get_minterm_string,
    get_simplified_expression,
    next_cell_state,
    truth_table_rows,
    validate_cells,
    validate_minterm_range,
)

__all__ = [
    "CellPosition",
    "CellState",
    "GridRect",
    "KMapConfig",
    "KMapTerm",
    "SimplificationResult",
    "TermRects",
    "calculate_cell_index",
    "cells_from_minterms",
    "empty_cells",
    "format_cell_state",
    "format_term",
    "get_dont_care_string",
    "get_gray_code_sequence",
    "get_kmap_config",
    "get_minterm_string",
    "get_simplified_expression",
    "get_term_rects",
    "get_var_names",
    "grid_positions",
    "index_to_cell",
    "next_cell_state",
    "term_cells",
    "truth_table_rows",
    "validate_cells",
    "validate_minterm_range",
]
