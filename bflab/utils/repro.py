from __future__ import annotations

import random
import time
from typing import List, Optional

import numpy as np

from bflab.bits.bintools import decimal_to_bits
from bflab.config import load_settings
from bflab.errors import InvalidArgument


def set_global_seed(seed: Optional[int] = None) -> int:
    """Seed ``random`` and numpy's global state; returns the seed used.

    Unseeded draws in this module come from that global state, so two runs
    after the same ``set_global_seed`` produce the same tables.
    """
    seed = load_settings().global_seed if seed is None else seed
    random.seed(seed)
    np.random.seed(seed)
    return seed


def utc_timestamp() -> str:
    # e.g. 2026-01-08T12-34-56Z (safe for filenames)
    return time.strftime("%Y-%m-%dT%H-%M-%SZ", time.gmtime())


def _rng(seed: Optional[int]) -> np.random.Generator:
    if seed is None:
        seed = int(np.random.randint(0, 2**32 - 1, dtype=np.int64))
    return np.random.default_rng(seed)


def random_truth_table(variable_count: int, seed: Optional[int] = None) -> List[bool]:
    """Uniformly random truth table of an n-variable function."""
    if variable_count < 1:
        raise InvalidArgument(f"variable_count must be >= 1, got {variable_count}")
    bits = _rng(seed).integers(0, 2, size=1 << variable_count)
    return [bool(b) for b in bits]


def random_permutation_sbox(input_bits: int, seed: Optional[int] = None) -> List[List[bool]]:
    """Random bijective S-box in row form (``input_bits`` in and out)."""
    if input_bits < 1:
        raise InvalidArgument(f"input_bits must be >= 1, got {input_bits}")
    table = _rng(seed).permutation(1 << input_bits)
    return [decimal_to_bits(int(y), input_bits) for y in table]
