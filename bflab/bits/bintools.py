"""Conversions and manipulations of bit sequences.

Bit sequences are LSBF (Least Significant Bit First): position ``i`` of a
truth table holds the output for the input whose binary expansion, read
from the least significant bit, equals ``i``. Every function accepts any
sequence of bools or 0/1 integers (lists, tuples, numpy arrays) and
returns plain Python lists.

Decimal values are Python ints, so codes of truth tables with tens of
variables are handled without a separate big-integer path.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from bflab.errors import InvalidArgument, InvalidLength, LengthMismatch


def _as_bools(bits: Iterable) -> List[bool]:
    return [bool(b) for b in bits]


def _check_same_length(a: Sequence, b: Sequence, what: str) -> None:
    if len(a) != len(b):
        raise LengthMismatch(f"{what}: length mismatch ({len(a)} != {len(b)})")


def is_power_of_two(length: int) -> bool:
    return length > 0 and (length & (length - 1)) == 0


def log2_length(length: int, *, minimum: int = 2, what: str = "sequence") -> int:
    """Return ``n`` such that ``length == 2**n``.

    Raises InvalidLength when ``length`` is not a power of two or is below
    ``minimum``.
    """
    if length < minimum or not is_power_of_two(length):
        raise InvalidLength(
            f"{what} length must be a power of two >= {minimum}, got {length}"
        )
    return length.bit_length() - 1


# ---------------------------------------------------------------------------
# Polar form
# ---------------------------------------------------------------------------

def bits_to_polar(bits: Iterable) -> List[int]:
    """Polar form of a bit sequence: false -> +1, true -> -1."""
    return [-1 if b else 1 for b in bits]


def polar_to_bits(polar: Iterable[int]) -> List[bool]:
    out: List[bool] = []
    for v in polar:
        if v == 1:
            out.append(False)
        elif v == -1:
            out.append(True)
        else:
            raise InvalidArgument(f"polar values must be +1 or -1, got {v}")
    return out


# ---------------------------------------------------------------------------
# Decimal / n-ary encodings
# ---------------------------------------------------------------------------

def decimal_to_bits(value: int, length: int) -> List[bool]:
    """LSBF binary expansion of ``value`` on exactly ``length`` bits.

    Args:
        value: Non-negative integer to expand.
        length: Number of bits of the result.

    Returns:
        List of ``length`` bools, least significant bit first.

    Raises:
        InvalidArgument: ``value`` is negative, ``length`` is negative, or
            ``value`` needs more than ``length`` bits.
    """
    value = int(value)
    if value < 0:
        raise InvalidArgument(f"value must be non-negative, got {value}")
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, got {length}")
    if value.bit_length() > length:
        raise InvalidArgument(
            f"value {value} does not fit in {length} bits"
        )
    return [bool((value >> i) & 1) for i in range(length)]


def bits_to_decimal(bits: Sequence) -> int:
    """Inverse of decimal_to_bits."""
    value = 0
    for b in reversed(bits):
        value = (value << 1) | (1 if b else 0)
    return value


def decimal_to_nary(value: int, length: int, radix: int) -> List[int]:
    """LSBF expansion of ``value`` in base ``radix`` on ``length`` digits."""
    value = int(value)
    if radix < 2:
        raise InvalidArgument(f"radix must be >= 2, got {radix}")
    if value < 0:
        raise InvalidArgument(f"value must be non-negative, got {value}")
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, got {length}")
    digits: List[int] = []
    rest = value
    for _ in range(length):
        rest, digit = divmod(rest, radix)
        digits.append(digit)
    if rest != 0:
        raise InvalidArgument(
            f"value {value} does not fit in {length} base-{radix} digits"
        )
    return digits


def nary_to_decimal(digits: Sequence[int], radix: int) -> int:
    if radix < 2:
        raise InvalidArgument(f"radix must be >= 2, got {radix}")
    value = 0
    for d in reversed(digits):
        d = int(d)
        if d < 0 or d >= radix:
            raise InvalidArgument(f"digit {d} out of range for radix {radix}")
        value = value * radix + d
    return value


def bits_to_string(bits: Iterable) -> str:
    """Render a bit sequence as a string of 0s and 1s (same order)."""
    return "".join("1" if b else "0" for b in bits)


def string_to_bits(text: str) -> List[bool]:
    out: List[bool] = []
    for ch in text:
        if ch == "1":
            out.append(True)
        elif ch == "0":
            out.append(False)
        else:
            raise InvalidArgument(f"binary strings may only contain 0/1, got {ch!r}")
    return out


# ---------------------------------------------------------------------------
# Bitwise operations
# ---------------------------------------------------------------------------

def xor_bits(a: Sequence, b: Sequence) -> List[bool]:
    """Element-wise XOR of two sequences of equal length."""
    _check_same_length(a, b, "xor_bits")
    return [bool(x) != bool(y) for x, y in zip(a, b)]


def difference_positions(a: Sequence, b: Sequence) -> List[int]:
    """Indices at which two equal-length sequences disagree."""
    _check_same_length(a, b, "difference_positions")
    return [i for i, (x, y) in enumerate(zip(a, b)) if bool(x) != bool(y)]


def hamming_weight(bits: Iterable) -> int:
    return sum(1 for b in bits if b)


def is_balanced(bits: Sequence) -> bool:
    """True iff the sequence has even length and exactly half of it is set."""
    if len(bits) % 2 != 0:
        return False
    return hamming_weight(bits) == len(bits) // 2


def complement(bits: Iterable) -> List[bool]:
    return [not b for b in bits]


def reverse(bits: Sequence) -> List[bool]:
    return _as_bools(reversed(bits))


def cyclic_shift(bits: Sequence, n: int = 1) -> List[bool]:
    """Rotate left by ``n`` positions: element ``i`` moves to ``i - n``."""
    values = _as_bools(bits)
    if not values:
        return values
    n %= len(values)
    return values[n:] + values[:n]


def mirror_inputs(bits: Sequence, input_length: int) -> List[bool]:
    """Re-index a truth table by reversing the bits of every input index.

    The result is the truth table of ``g(x_0, ..., x_{k-1}) =
    f(x_{k-1}, ..., x_0)`` where ``k = input_length``.
    """
    if input_length < 0 or len(bits) != (1 << input_length):
        raise InvalidLength(
            f"mirror_inputs: table length {len(bits)} != 2^{input_length}"
        )
    mirrored = [False] * len(bits)
    for i, b in enumerate(bits):
        rindex = 0
        for j in range(input_length):
            if (i >> j) & 1:
                rindex |= 1 << (input_length - 1 - j)
        mirrored[rindex] = bool(b)
    return mirrored


# ---------------------------------------------------------------------------
# Linear algebra over GF(2)
# ---------------------------------------------------------------------------

def scalar_product(a: Sequence, b: Sequence) -> bool:
    """Inner product over GF(2): XOR of the pairwise ANDs."""
    _check_same_length(a, b, "scalar_product")
    prod = False
    for x, y in zip(a, b):
        if x and y:
            prod = not prod
    return prod


def matrix_vector_product(matrix: Sequence[Sequence], vector: Sequence) -> List[bool]:
    """Row ``i`` of the result is ``scalar_product(matrix[i], vector)``."""
    result: List[bool] = []
    for i, row in enumerate(matrix):
        if len(row) != len(vector):
            raise LengthMismatch(
                f"matrix_vector_product: row {i} has length {len(row)}, "
                f"vector has length {len(vector)}"
            )
        result.append(scalar_product(row, vector))
    return result
