"""Bit-sequence utilities (LSBF order)."""

from .bintools import (
    bits_to_decimal,
    bits_to_polar,
    bits_to_string,
    complement,
    cyclic_shift,
    decimal_to_bits,
    decimal_to_nary,
    difference_positions,
    hamming_weight,
    is_balanced,
    is_power_of_two,
    log2_length,
    matrix_vector_product,
    mirror_inputs,
    nary_to_decimal,
    polar_to_bits,
    reverse,
    scalar_product,
    string_to_bits,
    xor_bits,
)

__all__ = [
    "bits_to_decimal",
    "bits_to_polar",
    "bits_to_string",
    "complement",
    "cyclic_shift",
    "decimal_to_bits",
    "decimal_to_nary",
    "difference_positions",
    "hamming_weight",
    "is_balanced",
    "is_power_of_two",
    "log2_length",
    "matrix_vector_product",
    "mirror_inputs",
    "nary_to_decimal",
    "polar_to_bits",
    "reverse",
    "scalar_product",
    "string_to_bits",
    "xor_bits",
]
