"""SymPy views of minimizer results."""

from __future__ import annotations

import itertools
from typing import Sequence, Tuple

from sympy import And, Not, Or, Symbol, false, symbols, true
from sympy.logic.boolalg import SOPform

from .kmap_engine import get_var_names
from .logic import CellState, SimplificationResult, validate_cells


def get_variables(n: int):
    """Return SymPy symbols (A, B, C, ...) for the requested variable count."""
    return symbols(" ".join(get_var_names(n)))


def term_to_sympy(mask: str, vars_tuple: Sequence[Symbol]):
    """Build the product term for a mask such as "1-0"."""
    literals = []
    for bit, var in zip(mask, vars_tuple):
        if bit == "1":
            literals.append(var)
        elif bit == "0":
            literals.append(Not(var))
    if not literals:
        return true
    return And(*literals)


def result_to_sympy(result: SimplificationResult, vars_tuple: Sequence[Symbol]):
    """Return the cover as a SymPy sum of products."""
    if not result.terms:
        return false
    return Or(*(term_to_sympy(t.mask, vars_tuple) for t in result.terms))


def truth_minterms(expr, vars_tuple: Sequence[Symbol]) -> Sequence[int]:
    """Return indices whose assignments make the expression evaluate to True."""
    mins = []
    for idx, bits in enumerate(itertools.product([0, 1], repeat=len(vars_tuple))):
        subs = {var: bool(bit) for var, bit in zip(vars_tuple, bits)}
        if bool(expr.xreplace(subs)):
            mins.append(idx)
    return mins


def verify_result(cells: Sequence, nvars: int, result: SimplificationResult) -> bool:
    """Check a cover against the cells; don't-care indices may go either way."""
    states = validate_cells(cells, nvars)
    vars_tuple = get_variables(nvars)
    covered = set(truth_minterms(result_to_sympy(result, vars_tuple), vars_tuple))
    for idx, state in enumerate(states):
        if state == CellState.ONE and idx not in covered:
            return False
        if state == CellState.ZERO and idx in covered:
            return False
    return True


def _literal_text(lit) -> str:
    if isinstance(lit, Not):
        return f"{lit.args[0]}'"
    return str(lit)


def prime_format(expr, var_order: Tuple[Symbol, ...]) -> str:
    """Format a SymPy SOP expression as text following var_order."""
    if expr is false:
        return "0"
    if expr is true:
        return "1"

    terms = list(expr.args) if isinstance(expr, Or) else [expr]
    result = []
    for term in terms:
        literals = list(term.args) if isinstance(term, And) else [term]
        ordered = []
        for var in var_order:
            for lit in literals:
                if lit == var or (isinstance(lit, Not) and lit.args[0] == var):
                    ordered.append(lit)
                    break
        result.append("".join(_literal_text(item) for item in ordered) or "1")
    return " + ".join(result)


def reference_sop(cells: Sequence, nvars: int) -> str:
    """Return the SOP text SymPy's own minimizer gives for the same cells."""
    states = validate_cells(cells, nvars)
    vars_tuple = get_variables(nvars)
    ones = [i for i, s in enumerate(states) if s == CellState.ONE]
    dcs = [i for i, s in enumerate(states) if s == CellState.DONT_CARE]
    return prime_format(SOPform(vars_tuple, ones, dcs), vars_tuple)


__all__ = [
    "get_variables",
    "prime_format",
    "reference_sop",
    "result_to_sympy",
    "term_to_sympy",
    "truth_minterms",
    "verify_result",
]
