"""Structured evaluation report builder.

Aggregates function and S-box analysis results into a single
serializable report for external display or export.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from bflab.utils.repro import utc_timestamp
from .function_analysis import FunctionAnalysisResult
from .sbox_analysis import SBoxAnalysisResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    function_results: List[FunctionAnalysisResult] = field(default_factory=list)
    sbox_results: List[SBoxAnalysisResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = utc_timestamp()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "functions": [r.to_dict() for r in self.function_results],
            "sboxes": [s.to_dict() for s in self.sbox_results],
            "summary": {
                "total_functions": len(self.function_results),
                "total_sboxes": len(self.sbox_results),
                "all_functions_balanced": all(r.is_balanced for r in self.function_results),
                "affine_functions": self.affine_functions(),
                "sboxes_with_linear_components": self.weak_sboxes(),
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.function_results:
            bal = sum(1 for r in self.function_results if r.is_balanced)
            lines.append(
                f"\nBoolean functions: {bal}/{len(self.function_results)} balanced"
            )
            for r in self.function_results:
                lines.append(f"  {r.summary()}")

        if self.sbox_results:
            lines.append(f"\nS-box Analysis: {len(self.sbox_results)} S-boxes")
            for s in self.sbox_results:
                lines.append(f"  {s.summary()}")

        return "\n".join(lines)

    def affine_functions(self) -> List[str]:
        """Names of analyzed functions of degree <= 1."""
        return [r.name for r in self.function_results if r.is_affine]

    def weak_sboxes(self) -> List[str]:
        """Ids of S-boxes having at least one linear component."""
        return [s.sbox_id for s in self.sbox_results if s.linear_components > 0]
