"""Recursive butterfly driver shared by the Walsh and Moebius transforms.

All three fast transforms split ``[start, start + length)`` into a lower
half ``v0`` and an upper half ``v1``, combine each pair ``(v0[i], v1[i])``
in place, then recurse on both halves. They differ only in the combine
step and in the value returned at the base case (``length == 2``), so a
transform is a ``ButterflyPolicy`` handed to ``run_butterfly``.

The recursion returns the maximum of the values reported by the two
halves; the base case reports a scalar for its two-element range.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, MutableSequence, Optional, Tuple

from bflab.bits.bintools import is_power_of_two
from bflab.errors import InvalidArgument, InvalidLength

# (lower, upper) -> (new_lower, new_upper)
CombineFn = Callable[[Any, Any], Tuple[Any, Any]]
# (vector, start) -> scalar reported by the two-element range at start
BaseCaseFn = Callable[[MutableSequence, int], int]


@dataclass(frozen=True)
class ButterflyPolicy:
    name: str
    combine: CombineFn
    base_case: BaseCaseFn


def check_range(vector: MutableSequence, start: int, length: Optional[int]) -> int:
    """Validate a transform range and return its (resolved) length."""
    if length is None:
        length = len(vector) - start
    if start < 0:
        raise InvalidArgument(f"start must be non-negative, got {start}")
    if length < 2 or not is_power_of_two(length):
        raise InvalidLength(f"transform length must be a power of two >= 2, got {length}")
    if start + length > len(vector):
        raise InvalidLength(
            f"range [{start}, {start + length}) exceeds vector of length {len(vector)}"
        )
    return length


def _recurse(vector: MutableSequence, start: int, length: int, policy: ButterflyPolicy) -> int:
    half = length // 2
    combine = policy.combine
    for i in range(start, start + half):
        vector[i], vector[i + half] = combine(vector[i], vector[i + half])

    if half > 1:
        lower = _recurse(vector, start, half, policy)
        upper = _recurse(vector, start + half, half, policy)
        return lower if lower > upper else upper

    return policy.base_case(vector, start)


def run_butterfly(
    vector: MutableSequence,
    policy: ButterflyPolicy,
    start: int = 0,
    length: Optional[int] = None,
) -> int:
    """Apply ``policy`` in place over ``vector[start:start + length]``.

    Args:
        vector: Mutable buffer, modified in place.
        policy: Combine step and base case of the transform.
        start: First index of the range.
        length: Size of the range (defaults to the rest of the vector).
            Must be a power of two and at least 2.

    Returns:
        The maximum base-case value over the range.
    """
    length = check_range(vector, start, length)
    return _recurse(vector, start, length, policy)
