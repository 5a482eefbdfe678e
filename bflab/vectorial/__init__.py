"""Vectorial boolean functions (S-boxes)."""

from .registry import SBoxRegistry, builtin_sboxes
from .sbox import (
    NonlinearityProfile,
    component_function,
    sbox_algebraic_degree,
    sbox_balancedness,
    sbox_from_lut,
    sbox_nonlinearity,
    sbox_nonlinearity_profile,
    sbox_to_lut,
    selection_vectors,
    validate_sbox,
)

__all__ = [
    "SBoxRegistry",
    "builtin_sboxes",
    "NonlinearityProfile",
    "component_function",
    "sbox_algebraic_degree",
    "sbox_balancedness",
    "sbox_from_lut",
    "sbox_nonlinearity",
    "sbox_nonlinearity_profile",
    "sbox_to_lut",
    "selection_vectors",
    "validate_sbox",
]
