"""bflab - cryptographic analysis of boolean functions and S-boxes.

Balancedness, algebraic degree, nonlinearity and spectral properties of
boolean functions given by truth table (LSBF) or decimal code, and of
vectorial boolean functions through their component functions.
"""

from .errors import BFLabError, InvalidArgument, InvalidLength, LengthMismatch
from .function import BooleanFunction, FunctionSpec, SBoxSpec, compute_all

__version__ = "0.1.0"

__all__ = [
    "BFLabError",
    "InvalidArgument",
    "InvalidLength",
    "LengthMismatch",
    "BooleanFunction",
    "FunctionSpec",
    "SBoxSpec",
    "compute_all",
]
