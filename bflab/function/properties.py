"""Cryptographic properties of a single boolean function.

Each routine takes a BooleanFunction and returns a copy with the
corresponding property slots filled in. Working buffers are private
copies, so the input function is never modified.
"""
from __future__ import annotations

from bflab.bits.bintools import is_balanced
from bflab.transform.moebius import (
    algebraic_degree_from_anf,
    anf_expression,
    fast_moebius_transform,
    indices_by_weight,
)
from bflab.transform.walsh import (
    autocorrelation,
    fast_walsh_transform,
    nonlinearity_from_radius,
)
from .model import BooleanFunction


def compute_walsh(bf: BooleanFunction) -> BooleanFunction:
    """Walsh spectrum, spectral radius and nonlinearity."""
    spectrum = bf.polar_table
    radius = fast_walsh_transform(spectrum)
    return bf.with_properties(
        walsh_spectrum=tuple(spectrum),
        spectral_radius=radius,
        nonlinearity=nonlinearity_from_radius(radius, bf.variable_count),
    )


def compute_anf(bf: BooleanFunction) -> BooleanFunction:
    """ANF coefficients, ANF expression and algebraic degree."""
    anf = list(bf.truth_table)
    fast_moebius_transform(anf)
    degree = algebraic_degree_from_anf(anf, indices_by_weight(bf.variable_count))
    return bf.with_properties(
        anf=tuple(anf),
        anf_expression=anf_expression(anf),
        algebraic_degree=degree,
    )


def compute_balancedness(bf: BooleanFunction) -> BooleanFunction:
    return bf.with_properties(is_balanced=is_balanced(bf.truth_table))


def compute_autocorrelation(bf: BooleanFunction) -> BooleanFunction:
    """Autocorrelation function; computes the Walsh spectrum first if needed."""
    if bf.walsh_spectrum is None:
        bf = compute_walsh(bf)
    values, max_abs = autocorrelation(bf.walsh_spectrum)
    return bf.with_properties(autocorrelation=tuple(values), max_autocorrelation=max_abs)


def compute_all(bf: BooleanFunction) -> BooleanFunction:
    bf = compute_walsh(bf)
    bf = compute_anf(bf)
    bf = compute_balancedness(bf)
    return compute_autocorrelation(bf)
