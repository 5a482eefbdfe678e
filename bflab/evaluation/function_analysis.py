"""Full property analysis of a single boolean function.

Runs every property routine on a function and packs the scalar results
into a serializable record.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from bflab.bits.bintools import hamming_weight
from bflab.config import Settings, load_settings
from bflab.errors import InvalidArgument
from bflab.function.model import BooleanFunction
from bflab.function.properties import compute_all
from bflab.function.spec import FunctionSpec


def covering_bound(variable_count: int) -> float:
    """Upper bound 2^(n-1) - 2^(n/2 - 1) on the nonlinearity of n-variable functions."""
    return 2 ** (variable_count - 1) - 2 ** (variable_count / 2 - 1)


@dataclass
class FunctionAnalysisResult:
    """Scalar cryptographic properties of one boolean function."""
    name: str
    variable_count: int
    decimal_code: int
    hamming_weight: int
    is_balanced: bool
    algebraic_degree: int
    spectral_radius: int
    nonlinearity: int
    nonlinearity_bound: float
    max_autocorrelation: int
    anf_expression: str

    @property
    def is_affine(self) -> bool:
        return self.algebraic_degree <= 1

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["is_affine"] = self.is_affine
        return d

    def summary(self) -> str:
        bal = "balanced" if self.is_balanced else "unbalanced"
        return (
            f"{self.name} (n={self.variable_count}, code={self.decimal_code}): "
            f"NL={self.nonlinearity} (bound {self.nonlinearity_bound:g}), "
            f"deg={self.algebraic_degree}, AC_max={self.max_autocorrelation}, {bal}"
        )


def analyze_function(
    target: Union[BooleanFunction, FunctionSpec],
    *,
    name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> FunctionAnalysisResult:
    """Compute every property of a function.

    Args:
        target: A BooleanFunction or a FunctionSpec to build one from.
        name: Label for the result (defaults to the spec name or "f").
        settings: Uses load_settings() when omitted.

    Returns:
        FunctionAnalysisResult with balancedness, degree, Walsh and
        autocorrelation figures.

    Raises:
        InvalidArgument: the function has more variables than
            ``settings.max_variables``.
    """
    settings = settings or load_settings()
    if isinstance(target, FunctionSpec):
        name = name or target.name
        if target.variable_count > settings.max_variables:
            raise InvalidArgument(
                f"{target.variable_count} variables exceeds max_variables={settings.max_variables}"
            )
        bf = target.build()
    else:
        bf = target
    if bf.variable_count > settings.max_variables:
        raise InvalidArgument(
            f"{bf.variable_count} variables exceeds max_variables={settings.max_variables}"
        )

    bf = compute_all(bf)

    return FunctionAnalysisResult(
        name=name or "f",
        variable_count=bf.variable_count,
        decimal_code=bf.decimal_code,
        hamming_weight=hamming_weight(bf.truth_table),
        is_balanced=bf.require("is_balanced"),
        algebraic_degree=bf.require("algebraic_degree"),
        spectral_radius=bf.require("spectral_radius"),
        nonlinearity=bf.require("nonlinearity"),
        nonlinearity_bound=covering_bound(bf.variable_count),
        max_autocorrelation=bf.require("max_autocorrelation"),
        anf_expression=bf.require("anf_expression"),
    )
