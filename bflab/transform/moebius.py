"""Fast Moebius Transform (FMT) and algebraic degree.

The FMT turns an LSBF truth table into the coefficients of its algebraic
normal form (ANF): after the transform, position ``u`` is true iff the
monomial ``prod(x_i for bit i set in u)`` appears in the ANF.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, MutableSequence, Optional, Sequence, Tuple

from bflab.bits.bintools import log2_length
from bflab.errors import InvalidLength
from .butterfly import ButterflyPolicy, run_butterfly


def _moebius_base_case(vector: MutableSequence[bool], start: int) -> int:
    # Weight of the highest nonzero input of the pair; the upper one wins.
    if vector[start + 1]:
        return (start + 1).bit_count()
    if vector[start]:
        return start.bit_count()
    return 0


MOEBIUS = ButterflyPolicy(
    name="moebius",
    combine=lambda lower, upper: (lower, bool(lower) != bool(upper)),
    base_case=_moebius_base_case,
)


def fast_moebius_transform(
    vector: MutableSequence[bool],
    start: int = 0,
    length: Optional[int] = None,
) -> int:
    """Compute the ANF coefficients of a truth table in place.

    Returns the largest sub-degree seen at the base cases, where the upper
    position wins over the lower one. It happens to match the algebraic
    degree, but callers should read the degree from the transformed
    vector with algebraic_degree_from_anf.
    """
    return run_butterfly(vector, MOEBIUS, start, length)


def anf_coefficients(truth_table: Sequence) -> List[bool]:
    """ANF of ``truth_table`` (the input is left untouched)."""
    anf = [bool(b) for b in truth_table]
    fast_moebius_transform(anf)
    return anf


@lru_cache(maxsize=32)
def indices_by_weight(variable_count: int) -> Tuple[Tuple[int, ...], ...]:
    """Inputs of ``{0, ..., 2^n - 1}`` grouped by Hamming weight.

    Entry ``w`` holds, in ascending order, every input of weight ``w``
    (``w = 0..n``).
    """
    groups: List[List[int]] = [[] for _ in range(variable_count + 1)]
    for u in range(1 << variable_count):
        groups[u.bit_count()].append(u)
    return tuple(tuple(g) for g in groups)


def algebraic_degree_from_anf(
    anf: Sequence,
    weight_classes: Optional[Sequence[Sequence[int]]] = None,
) -> int:
    """Size of the largest monomial with a nonzero ANF coefficient.

    Scans the weight classes from the highest weight down and stops at
    the first one holding a true coefficient. The constant term does not
    count, so constant functions have degree 0.

    Args:
        anf: ANF coefficients, length 2^n.
        weight_classes: Output of indices_by_weight(n); computed when
            omitted.
    """
    n = log2_length(len(anf), minimum=1, what="ANF")
    if weight_classes is None:
        weight_classes = indices_by_weight(n)
    elif len(weight_classes) != n + 1:
        raise InvalidLength(
            f"weight table covers {len(weight_classes) - 1} variables, ANF has {n}"
        )
    for weight in range(n, 0, -1):
        for u in weight_classes[weight]:
            if anf[u]:
                return weight
    return 0


def anf_expression(anf: Sequence) -> str:
    """Readable ANF, e.g. ``"1 + x0 + x1*x2"``.

    Monomials appear in index order; variable ``x_i`` is bit ``i`` of the
    input (LSBF).
    """
    n = log2_length(len(anf), minimum=1, what="ANF")
    terms: List[str] = []
    for u, coeff in enumerate(anf):
        if not coeff:
            continue
        if u == 0:
            terms.append("1")
        else:
            terms.append("*".join(f"x{i}" for i in range(n) if (u >> i) & 1))
    return " + ".join(terms) if terms else "0"
