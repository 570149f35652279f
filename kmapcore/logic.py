"""Cell states, term formatting and the sum-of-products minimizer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .kmap_engine import get_var_names

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    ZERO = 0
    ONE = 1
    DONT_CARE = 2


_STATE_TEXT = {CellState.ZERO: "0", CellState.ONE: "1", CellState.DONT_CARE: "X"}

_NEXT_STATE = {
    CellState.ZERO: CellState.ONE,
    CellState.ONE: CellState.DONT_CARE,
    CellState.DONT_CARE: CellState.ZERO,
}


@dataclass(frozen=True)
class Term:
    """Implicant under construction: a '0'/'1'/'-' mask and what it covers."""

    mask: str
    minterms: Tuple[int, ...]


@dataclass(frozen=True)
class KMapTerm:
    """A term of the final cover, ready for display."""

    mask: str
    minterms: Tuple[int, ...]
    expression: str
    color_index: int


@dataclass(frozen=True)
class SimplificationResult:
    expression: str
    terms: Tuple[KMapTerm, ...]


def _as_state(value) -> CellState:
    try:
        return CellState(value)
    except ValueError:
        raise ValueError(f"Unknown cell state: {value!r}") from None


def validate_cells(cells: Sequence, nvars: int) -> List[CellState]:
    """Check the cell array against the variable count and normalise it."""
    get_var_names(nvars)
    expected = 1 << nvars
    if len(cells) != expected:
        raise ValueError(
            f"Expected {expected} cells for {nvars} variables, got {len(cells)}."
        )
    return [_as_state(value) for value in cells]


def validate_minterm_range(minterms: Iterable[int], n: int) -> None:
    """Ensure all minterms are within the range for the current variable count."""
    max_valid = (1 << n) - 1
    invalid = [m for m in minterms if m < 0 or m > max_valid]
    if invalid:
        raise ValueError(
            f"Minterms out of range for {n} variables (0-{max_valid}): {sorted(set(invalid))}"
        )


def format_cell_state(state) -> str:
    """Return the display character for a cell state."""
    return _STATE_TEXT[_as_state(state)]


def next_cell_state(state) -> CellState:
    """Cycle 0 -> 1 -> X -> 0."""
    return _NEXT_STATE[_as_state(state)]


def empty_cells(nvars: int) -> List[CellState]:
    get_var_names(nvars)
    return [CellState.ZERO] * (1 << nvars)


def cells_from_minterms(
    nvars: int, minterms: Iterable[int], dont_cares: Iterable[int] = ()
) -> List[CellState]:
    """Build a cell array from minterm and don't-care index lists.

    An index listed in both is treated as a minterm.
    """
    mins = list(minterms)
    dcs = list(dont_cares)
    validate_minterm_range(mins, nvars)
    validate_minterm_range(dcs, nvars)
    cells = empty_cells(nvars)
    for idx in dcs:
        cells[idx] = CellState.DONT_CARE
    for idx in mins:
        cells[idx] = CellState.ONE
    return cells


def truth_table_rows(cells: Sequence, nvars: int) -> List[Tuple[int, str, CellState]]:
    """Return (index, input bits, output) rows in binary order."""
    states = validate_cells(cells, nvars)
    return [(idx, format(idx, f"0{nvars}b"), state) for idx, state in enumerate(states)]


def _indices(cells: Sequence, state: CellState) -> List[int]:
    return [idx for idx, value in enumerate(cells) if _as_state(value) == state]


def get_minterm_string(cells: Sequence) -> str:
    """Return the sum-of-minterms notation, e.g. "Σm(1, 3, 5)"."""
    ones = _indices(cells, CellState.ONE)
    return f"Σm({', '.join(str(i) for i in ones)})"


def get_dont_care_string(cells: Sequence) -> str:
    """Return the don't-care suffix " + d(...)", or "" when there are none."""
    dcs = _indices(cells, CellState.DONT_CARE)
    if not dcs:
        return ""
    return f" + d({', '.join(str(i) for i in dcs)})"


def format_term(mask: str, var_names: Sequence[str]) -> str:
    """Format a mask such as "10-" into a product term such as "AB'"."""
    pieces: List[str] = []
    for bit, name in zip(mask, var_names):
        if bit == "-":
            continue
        pieces.append(name if bit == "1" else f"{name}'")
    return "".join(pieces) or "1"


def _combine(a: Term, b: Term) -> Optional[Term]:
    """Merge two terms differing in exactly one fixed bit, else None."""
    if len(a.mask) != len(b.mask):
        return None
    diff = [i for i, (x, y) in enumerate(zip(a.mask, b.mask)) if x != y]
    if len(diff) != 1:
        return None
    pos = diff[0]
    if "-" in (a.mask[pos], b.mask[pos]):
        return None
    mask = a.mask[:pos] + "-" + a.mask[pos + 1:]
    return Term(mask=mask, minterms=tuple(sorted(set(a.minterms) | set(b.minterms))))


def prime_implicants(seeds: Sequence[Term]) -> List[Term]:
    """Combine terms round by round and return the primes in generation order.

    Each round pairs up the current terms; a term is prime when it takes part
    in no successful pair. Masks are the identity of a term, so both the next
    round and the prime collection are keyed by mask.
    """
    primes: Dict[str, Term] = {}
    current = list(seeds)
    while current:
        merged: Dict[str, Term] = {}
        combined_masks: Set[str] = set()
        for a, b in combinations(current, 2):
            term = _combine(a, b)
            if term is None:
                continue
            combined_masks.update((a.mask, b.mask))
            merged.setdefault(term.mask, term)
        for term in current:
            if term.mask not in combined_masks:
                primes.setdefault(term.mask, term)
        current = list(merged.values())
    return list(primes.values())


def _select_cover(primes: Sequence[Term], ones: Sequence[int]) -> List[Term]:
    """Pick essential primes first, then greedily cover what is left.

    Greedy ties go to the prime generated first.
    """
    chosen: Dict[str, Term] = {}
    uncovered = set(ones)

    for m in ones:
        covering = [pi for pi in primes if m in pi.minterms]
        if len(covering) == 1 and covering[0].mask not in chosen:
            essential = covering[0]
            chosen[essential.mask] = essential
            uncovered -= set(essential.minterms)
    n_essential = len(chosen)

    while uncovered:
        best: Optional[Term] = None
        best_count = 0
        for pi in primes:
            if pi.mask in chosen:
                continue
            count = len(uncovered.intersection(pi.minterms))
            if count > best_count:
                best, best_count = pi, count
        if best is None:
            break
        chosen[best.mask] = best
        uncovered -= set(best.minterms)

    logger.debug(
        "cover: %d primes, %d essential, %d greedy",
        len(primes),
        n_essential,
        len(chosen) - n_essential,
    )
    return list(chosen.values())


def get_simplified_expression(cells: Sequence, nvars: int) -> SimplificationResult:
    """Return the minimal sum-of-products cover of a K-map's cells."""
    states = validate_cells(cells, nvars)
    names = get_var_names(nvars)
    ones = _indices(states, CellState.ONE)
    dcs = _indices(states, CellState.DONT_CARE)

    if not ones:
        return SimplificationResult(expression="0", terms=())

    if len(ones) + len(dcs) == len(states):
        full = KMapTerm(
            mask="-" * nvars,
            minterms=tuple(range(len(states))),
            expression="1",
            color_index=0,
        )
        return SimplificationResult(expression="1", terms=(full,))

    seeds = [Term(mask=format(m, f"0{nvars}b"), minterms=(m,)) for m in ones + dcs]
    primes = prime_implicants(seeds)
    cover = _select_cover(primes, ones)

    labelled = [(format_term(t.mask, names), t) for t in cover]
    labelled.sort(key=lambda item: (len(item[0]), item[0]))
    terms = tuple(
        KMapTerm(mask=t.mask, minterms=t.minterms, expression=text, color_index=i)
        for i, (text, t) in enumerate(labelled)
    )
    return SimplificationResult(
        expression=" + ".join(t.expression for t in terms), terms=terms
    )


__all__ = [
    "CellState",
    "KMapTerm",
    "SimplificationResult",
    "Term",
    "cells_from_minterms",
    "empty_cells",
    "format_cell_state",
    "format_term",
    "get_dont_care_string",
    "get_minterm_string",
    "get_simplified_expression",
    "next_cell_state",
    "prime_implicants",
    "truth_table_rows",
    "validate_cells",
    "validate_minterm_range",
]
