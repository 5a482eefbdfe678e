"""Fast Walsh Transform (FWT), its inverse, and the scalar properties
derived from a Walsh spectrum (spectral radius, nonlinearity,
autocorrelation).

Functions are given in polar form (0 -> +1, 1 -> -1) with LSBF order.
The transforms run in place in O(N log N) for N = 2^n; reference:
Carlet, "Cryptography and Error-Correcting Codes", ch. 8 of Crama &
Hammer, "Boolean Models and Methods", pp. 263-272.
"""
from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence, Tuple

from bflab.errors import InvalidArgument
from .butterfly import ButterflyPolicy, run_butterfly


def _half(x: int) -> int:
    # integer halving truncated toward zero
    return -((-x) // 2) if x < 0 else x // 2


def _max_abs_pair(vector: MutableSequence[int], start: int) -> int:
    a = abs(vector[start])
    b = abs(vector[start + 1])
    return a if a > b else b


def _inverse_base_case(vector: MutableSequence[int], start: int) -> int:
    # Position 0 of an autocorrelation function is 2^n for every function,
    # so the pair holding it only reports its second coefficient.
    if start == 0:
        return abs(vector[1])
    return _max_abs_pair(vector, start)


WALSH = ButterflyPolicy(
    name="walsh",
    combine=lambda a, b: (a + b, a - b),
    base_case=_max_abs_pair,
)

INVERSE_WALSH = ButterflyPolicy(
    name="inverse_walsh",
    combine=lambda a, b: (_half(a + b), _half(a - b)),
    base_case=_inverse_base_case,
)


def fast_walsh_transform(
    vector: MutableSequence[int],
    start: int = 0,
    length: Optional[int] = None,
) -> int:
    """Compute the Walsh spectrum of a polar truth table in place.

    Args:
        vector: Polar truth table; overwritten by the spectrum.
        start: First index of the range to transform.
        length: Size of the range, a power of two >= 2 (defaults to the
            whole vector from ``start``).

    Returns:
        The largest absolute coefficient of the range, i.e. the spectral
        radius when the whole vector is transformed.
    """
    return run_butterfly(vector, WALSH, start, length)


def inverse_fast_walsh_transform(
    vector: MutableSequence[int],
    start: int = 0,
    length: Optional[int] = None,
) -> int:
    """Undo fast_walsh_transform in place.

    Applied to a Walsh spectrum it rebuilds the polar truth table; applied
    to a squared spectrum it yields the autocorrelation function. The
    return value is the largest absolute coefficient, ignoring position 0.
    """
    return run_butterfly(vector, INVERSE_WALSH, start, length)


def walsh_spectrum(polar: Sequence[int]) -> Tuple[List[int], int]:
    """Return ``(spectrum, spectral_radius)`` without touching ``polar``."""
    spectrum = [int(v) for v in polar]
    radius = fast_walsh_transform(spectrum)
    return spectrum, radius


def find_max_coefficient(vector: Sequence[int], skip_null: bool = False) -> int:
    """Largest absolute value in ``vector``.

    With ``skip_null`` position 0 is ignored, which gives the maximum
    autocorrelation of a function from its autocorrelation vector.
    """
    first = 1 if skip_null else 0
    best = 0
    for v in vector[first:]:
        if abs(v) > best:
            best = abs(v)
    return best


def nonlinearity_from_radius(spectral_radius: int, variable_count: int) -> int:
    """Nonlinearity ``(2^n - radius) / 2`` of an n-variable function."""
    size = 1 << variable_count
    if spectral_radius < 0 or spectral_radius > size:
        raise InvalidArgument(
            f"spectral radius {spectral_radius} out of range [0, {size}]"
        )
    if (size - spectral_radius) % 2 != 0:
        raise InvalidArgument(
            f"spectral radius {spectral_radius} is not a Walsh radius for n={variable_count}"
        )
    return (size - spectral_radius) // 2


def autocorrelation(spectrum: Sequence[int]) -> Tuple[List[int], int]:
    """Autocorrelation function from a Walsh spectrum.

    Squares every coefficient and runs the inverse transform
    (Wiener-Khinchin).

    Returns:
        ``(values, max_abs)`` where ``values[a]`` is the autocorrelation at
        shift ``a`` and ``max_abs`` is the largest ``|values[a]|`` for
        ``a != 0``.
    """
    values = [int(w) * int(w) for w in spectrum]
    max_abs = inverse_fast_walsh_transform(values)
    return values, max_abs
