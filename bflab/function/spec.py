from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from bflab.bits.bintools import decimal_to_bits, string_to_bits
from .model import BooleanFunction


class FunctionSpec(BaseModel):
    """Validated description of a boolean function to analyze.

    Exactly one of ``code`` (decimal code of the truth table) or
    ``truth_table`` (string of 0s and 1s, LSBF) must be given.
    """

    name: str = Field(default="f", min_length=1, max_length=80)
    variable_count: int = Field(..., ge=1, le=40)
    code: Optional[int] = Field(default=None, ge=0)
    truth_table: Optional[str] = Field(default=None, description="LSBF string of 0/1")

    @field_validator("truth_table")
    @classmethod
    def _binary_string(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v or set(v) - {"0", "1"}:
            raise ValueError("truth_table must be a non-empty string of 0s and 1s")
        return v

    @model_validator(mode="after")
    def _one_representation(self) -> "FunctionSpec":
        if (self.code is None) == (self.truth_table is None):
            raise ValueError("give exactly one of code or truth_table")
        size = 1 << self.variable_count
        if self.truth_table is not None and len(self.truth_table) != size:
            raise ValueError(
                f"truth_table must have {size} entries for {self.variable_count} variables"
            )
        if self.code is not None and self.code.bit_length() > size:
            raise ValueError(f"code does not fit in {size} bits")
        return self

    def build(self) -> BooleanFunction:
        if self.code is not None:
            return BooleanFunction.from_code(self.code, self.variable_count)
        return BooleanFunction.from_truth_table(string_to_bits(self.truth_table), self.variable_count)


class SBoxSpec(BaseModel):
    """An S-box in lookup-table form: ``table[x]`` is the output for input ``x``."""

    name: str = Field(..., min_length=1, max_length=80)
    input_bits: int = Field(..., ge=1, le=16)
    output_bits: int = Field(..., ge=1, le=16)
    table: List[int] = Field(default_factory=list)
    notes: str = Field(default="")

    @model_validator(mode="after")
    def _table_shape(self) -> "SBoxSpec":
        if len(self.table) != 1 << self.input_bits:
            raise ValueError(
                f"table must have {1 << self.input_bits} entries, got {len(self.table)}"
            )
        limit = 1 << self.output_bits
        for x, y in enumerate(self.table):
            if y < 0 or y >= limit:
                raise ValueError(f"table[{x}] = {y} is not an {self.output_bits}-bit value")
        return self

    def rows(self) -> List[List[bool]]:
        """Row form used by the vectorial engine (LSBF output vectors)."""
        return [decimal_to_bits(y, self.output_bits) for y in self.table]

    def is_bijective(self) -> bool:
        return self.input_bits == self.output_bits and len(set(self.table)) == len(self.table)
