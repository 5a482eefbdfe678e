"""Fast Walsh / Moebius transforms and the properties derived from them."""

from .butterfly import ButterflyPolicy, run_butterfly
from .moebius import (
    MOEBIUS,
    algebraic_degree_from_anf,
    anf_coefficients,
    anf_expression,
    fast_moebius_transform,
    indices_by_weight,
)
from .walsh import (
    INVERSE_WALSH,
    WALSH,
    autocorrelation,
    fast_walsh_transform,
    find_max_coefficient,
    inverse_fast_walsh_transform,
    nonlinearity_from_radius,
    walsh_spectrum,
)

__all__ = [
    "ButterflyPolicy",
    "run_butterfly",
    "MOEBIUS",
    "WALSH",
    "INVERSE_WALSH",
    "algebraic_degree_from_anf",
    "anf_coefficients",
    "anf_expression",
    "fast_moebius_transform",
    "indices_by_weight",
    "autocorrelation",
    "fast_walsh_transform",
    "find_max_coefficient",
    "inverse_fast_walsh_transform",
    "nonlinearity_from_radius",
    "walsh_spectrum",
]
