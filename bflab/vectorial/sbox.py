"""Vectorial boolean functions (S-boxes) and their component functions.

An S-box with n inputs and m outputs is a sequence of 2^n rows, row ``x``
being the LSBF m-bit output vector for input ``x``. The component function
selected by a nonzero ``v`` in GF(2)^m is ``x -> <v, S(x)>``; the S-box
is only as strong as its weakest component.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from bflab.bits.bintools import (
    bits_to_decimal,
    bits_to_string,
    decimal_to_bits,
    is_balanced,
    log2_length,
    scalar_product,
)
from bflab.errors import InvalidArgument, InvalidLength, LengthMismatch
from bflab.function.model import BooleanFunction
from bflab.function.properties import compute_anf, compute_walsh

logger = logging.getLogger(__name__)


def validate_sbox(sbox: Sequence[Sequence]) -> Tuple[int, int]:
    """Check the S-box shape and return ``(input_bits, output_bits)``."""
    n = log2_length(len(sbox), minimum=2, what="S-box")
    m = len(sbox[0])
    if m < 1:
        raise InvalidLength("S-box rows must have at least one output bit")
    for x, row in enumerate(sbox):
        if len(row) != m:
            raise LengthMismatch(f"S-box row {x} has width {len(row)}, expected {m}")
    return n, m


def sbox_from_lut(table: Sequence[int], output_bits: int) -> List[List[bool]]:
    """Row form of a lookup table (accepts lists or numpy arrays)."""
    log2_length(len(table), minimum=2, what="S-box")
    return [decimal_to_bits(int(y), output_bits) for y in table]


def sbox_to_lut(sbox: Sequence[Sequence]) -> List[int]:
    validate_sbox(sbox)
    return [bits_to_decimal(row) for row in sbox]


def selection_vectors(output_bits: int) -> Iterator[Tuple[int, List[bool]]]:
    """Every nonzero selection vector as ``(index, LSBF bits)``."""
    for index in range(1, 1 << output_bits):
        yield index, decimal_to_bits(index, output_bits)


def _component(sbox: Sequence[Sequence], selection: Sequence) -> List[bool]:
    return [scalar_product(selection, row) for row in sbox]


def component_function(sbox: Sequence[Sequence], selection: Sequence) -> List[bool]:
    """Truth table of the component selected by ``selection``.

    Raises:
        LengthMismatch: ``selection`` is not as wide as the S-box output.
        InvalidArgument: ``selection`` is the zero vector.
    """
    _, m = validate_sbox(sbox)
    if len(selection) != m:
        raise LengthMismatch(
            f"selection vector has width {len(selection)}, S-box outputs have {m}"
        )
    if not any(selection):
        raise InvalidArgument("selection vector must be nonzero")
    return _component(sbox, selection)


@dataclass
class NonlinearityProfile:
    """Per-component nonlinearity of an S-box."""
    input_bits: int
    output_bits: int
    min_nonlinearity: int
    # selection index -> nonlinearity of that component
    per_component: Dict[int, int] = field(default_factory=dict)
    linear_components: List[Tuple[bool, ...]] = field(default_factory=list)

    @property
    def linear_count(self) -> int:
        return len(self.linear_components)


def sbox_nonlinearity_profile(
    sbox: Sequence[Sequence],
    *,
    log_linear: bool = True,
) -> NonlinearityProfile:
    """Nonlinearity of every nonzero component of ``sbox``.

    Components with nonlinearity 0 are affine and are collected in
    ``linear_components``; each one is logged at DEBUG when ``log_linear``
    is set, and their count at INFO.
    """
    n, m = validate_sbox(sbox)
    per_component: Dict[int, int] = {}
    linear: List[Tuple[bool, ...]] = []

    for index, selection in selection_vectors(m):
        comp = BooleanFunction.from_truth_table(_component(sbox, selection), n)
        nl = compute_walsh(comp).nonlinearity
        per_component[index] = nl
        if nl == 0:
            linear.append(tuple(selection))
            if log_linear:
                logger.debug("Component %s -- NL: %d", bits_to_string(selection), nl)

    logger.info("Number of linear components: %d", len(linear))

    return NonlinearityProfile(
        input_bits=n,
        output_bits=m,
        min_nonlinearity=min(per_component.values()),
        per_component=per_component,
        linear_components=linear,
    )


def sbox_nonlinearity(sbox: Sequence[Sequence]) -> int:
    """Minimum nonlinearity over all nonzero component functions."""
    return sbox_nonlinearity_profile(sbox).min_nonlinearity


def sbox_balancedness(sbox: Sequence[Sequence]) -> bool:
    """True iff every nonzero component function is balanced."""
    _, m = validate_sbox(sbox)
    for _, selection in selection_vectors(m):
        if not is_balanced(_component(sbox, selection)):
            return False
    return True


def sbox_algebraic_degree(sbox: Sequence[Sequence]) -> int:
    """Maximum algebraic degree over the nonzero component functions."""
    n, m = validate_sbox(sbox)
    degree = 0
    for _, selection in selection_vectors(m):
        comp = compute_anf(BooleanFunction.from_truth_table(_component(sbox, selection), n))
        degree = max(degree, comp.algebraic_degree)
    return degree
