"""Boolean function model, input specs and property routines."""

from .model import PROPERTY_NAMES, BooleanFunction
from .properties import (
    compute_all,
    compute_anf,
    compute_autocorrelation,
    compute_balancedness,
    compute_walsh,
)
from .spec import FunctionSpec, SBoxSpec

__all__ = [
    "PROPERTY_NAMES",
    "BooleanFunction",
    "compute_all",
    "compute_anf",
    "compute_autocorrelation",
    "compute_balancedness",
    "compute_walsh",
    "FunctionSpec",
    "SBoxSpec",
]
