"""Matplotlib drawing of a K-map and its grouped terms."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .kmap_engine import (
    KMapConfig,
    get_gray_code_sequence,
    get_kmap_config,
    get_term_rects,
    grid_positions,
)
from .logic import (
    CellState,
    SimplificationResult,
    format_cell_state,
    get_simplified_expression,
    validate_cells,
)

PALETTE = [
    "#e53935", "#1e88e5", "#43a047", "#f39c12",
    "#8e24aa", "#009688", "#6d4c41", "#2e86c1",
]

_VALUE_COLORS = {
    CellState.ZERO: "#9aa7b7",
    CellState.ONE: "#1f3c88",
    CellState.DONT_CARE: "#ff8c32",
}

_FIG_SIZES = {2: (3.2, 3.2), 3: (5.2, 3.4), 4: (5.2, 5.2)}


def term_color(color_index: int) -> str:
    return PALETTE[color_index % len(PALETTE)]


def axis_labels(config: KMapConfig) -> Tuple[List[str], List[str]]:
    """Return (row_labels, col_labels) such as "AB=01" in gray-code order."""
    row_name = "".join(config.row_vars)
    col_name = "".join(config.col_vars)
    rows = [f"{row_name}={code}" for code in get_gray_code_sequence(len(config.row_vars))]
    cols = [f"{col_name}={code}" for code in get_gray_code_sequence(len(config.col_vars))]
    return rows, cols


def draw_kmap(
    cells: Sequence,
    nvars: int,
    result: Optional[SimplificationResult] = None,
    ax=None,
):
    """Draw the map, its cell values and one outline per term rectangle.

    Pieces of a group that wraps around an edge are drawn dashed.
    """
    states = validate_cells(cells, nvars)
    if result is None:
        result = get_simplified_expression(states, nvars)
    config = get_kmap_config(nvars)
    nrows, ncols = config.row_count, config.col_count

    if ax is None:
        fig, ax = plt.subplots(figsize=_FIG_SIZES[nvars])
    else:
        fig = ax.figure

    ax.set_xlim(-0.6, ncols)
    ax.set_ylim(-0.6, nrows)
    ax.set_xticks(np.arange(0, ncols + 1))
    ax.set_yticks(np.arange(0, nrows + 1))
    ax.set_xticklabels([])
    ax.set_yticklabels([])
    ax.grid(True, color="#888", linewidth=1)
    ax.invert_yaxis()
    ax.set_facecolor("#fafafa")

    row_labels, col_labels = axis_labels(config)
    for j, lab in enumerate(col_labels):
        ax.text(j + 0.5, -0.25, lab, ha="center", va="center", fontsize=10, color="#333")
    for i, lab in enumerate(row_labels):
        ax.text(-0.05, i + 0.5, lab, ha="right", va="center", fontsize=10, color="#333")

    for pos in grid_positions(config):
        state = states[pos.index]
        ax.text(pos.col + 0.5, pos.row + 0.5, format_cell_state(state),
                color=_VALUE_COLORS[state], fontsize=13, ha="center", va="center",
                weight="bold")
        ax.text(pos.col + 0.05, pos.row + 0.9, str(pos.index),
                color="#777", fontsize=8, alpha=0.7)

    for term in result.terms:
        color = term_color(term.color_index)
        geometry = get_term_rects(term.mask, len(config.row_vars), len(config.col_vars))
        style = "--" if geometry.row_wraps or geometry.col_wraps else "-"
        # nested outlines stay visible when groups overlap
        pad = 0.06 + 0.04 * (term.color_index % 4)
        for rect in geometry.rects:
            patch = plt.Rectangle(
                (rect.col_start + pad, rect.row_start + pad),
                rect.col_end - rect.col_start + 1 - 2 * pad,
                rect.row_end - rect.row_start + 1 - 2 * pad,
                fill=False, color=color, lw=2.5, ls=style,
            )
            ax.add_patch(patch)

    return fig


__all__ = ["PALETTE", "axis_labels", "draw_kmap", "term_color"]
