"""Boolean function model.

A BooleanFunction holds a truth table (LSBF) and its decimal code, which
always agree, plus optional slots for properties that are filled in by
bflab.function.properties. A slot stays ``None`` until the routine that
produces it has run.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bflab.bits.bintools import bits_to_decimal, bits_to_polar, decimal_to_bits, log2_length
from bflab.errors import InvalidArgument, InvalidLength

PROPERTY_NAMES = (
    "walsh_spectrum",
    "spectral_radius",
    "nonlinearity",
    "anf",
    "anf_expression",
    "algebraic_degree",
    "is_balanced",
    "autocorrelation",
    "max_autocorrelation",
)


@dataclass(frozen=True)
class BooleanFunction:
    """An n-variable boolean function and its computed properties."""
    variable_count: int
    truth_table: Tuple[bool, ...]
    decimal_code: int

    # Walsh-derived
    walsh_spectrum: Optional[Tuple[int, ...]] = None
    spectral_radius: Optional[int] = None
    nonlinearity: Optional[int] = None

    # Moebius-derived
    anf: Optional[Tuple[bool, ...]] = None
    anf_expression: Optional[str] = None
    algebraic_degree: Optional[int] = None

    is_balanced: Optional[bool] = None

    autocorrelation: Optional[Tuple[int, ...]] = None
    max_autocorrelation: Optional[int] = None  # over nonzero shifts

    def __post_init__(self):
        if self.variable_count < 1:
            raise InvalidArgument(
                f"variable_count must be >= 1, got {self.variable_count}"
            )
        table = tuple(bool(b) for b in self.truth_table)
        if len(table) != 1 << self.variable_count:
            raise InvalidLength(
                f"truth table of a {self.variable_count}-variable function must have "
                f"length {1 << self.variable_count}, got {len(table)}"
            )
        object.__setattr__(self, "truth_table", table)
        if bits_to_decimal(table) != self.decimal_code:
            raise InvalidArgument(
                f"decimal code {self.decimal_code} does not match the truth table"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_code(cls, code: int, variable_count: int) -> "BooleanFunction":
        """Build from the decimal code of the truth table."""
        if variable_count < 1:
            raise InvalidArgument(f"variable_count must be >= 1, got {variable_count}")
        table = decimal_to_bits(int(code), 1 << variable_count)
        return cls(variable_count=variable_count, truth_table=tuple(table), decimal_code=int(code))

    @classmethod
    def from_truth_table(
        cls,
        truth_table: Sequence,
        variable_count: Optional[int] = None,
    ) -> "BooleanFunction":
        """Build from an LSBF truth table; ``variable_count`` is inferred if omitted."""
        table = tuple(bool(b) for b in truth_table)
        n = log2_length(len(table), minimum=2, what="truth table")
        if variable_count is not None and variable_count != n:
            raise InvalidLength(
                f"truth table of length {len(table)} has {n} variables, not {variable_count}"
            )
        return cls(variable_count=n, truth_table=table, decimal_code=bits_to_decimal(table))

    # ------------------------------------------------------------------
    # Derived representations
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of inputs, 2^n."""
        return len(self.truth_table)

    @property
    def polar_table(self) -> List[int]:
        return bits_to_polar(self.truth_table)

    def require(self, name: str) -> Any:
        """Return a computed property, failing if it has not been computed yet."""
        if name not in PROPERTY_NAMES:
            raise InvalidArgument(f"unknown property: {name}")
        value = getattr(self, name)
        if value is None:
            raise InvalidArgument(f"property {name!r} has not been computed")
        return value

    def with_properties(self, **props: Any) -> "BooleanFunction":
        """Copy with some property slots filled in.

        Only used by the property routines; representation fields cannot
        be changed this way.
        """
        unknown = set(props) - set(PROPERTY_NAMES)
        if unknown:
            raise InvalidArgument(f"not property slots: {sorted(unknown)}")
        return replace(self, **props)

    def computed(self) -> List[str]:
        return [name for name in PROPERTY_NAMES if getattr(self, name) is not None]

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["truth_table"] = [int(b) for b in self.truth_table]
        if self.anf is not None:
            d["anf"] = [int(b) for b in self.anf]
        for key in ("walsh_spectrum", "autocorrelation"):
            if d[key] is not None:
                d[key] = list(d[key])
        return d
